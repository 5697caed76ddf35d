"""
Modifier application and common-suffix trimming.
"""

from typing import Optional

from . import text_ops
from .constants import POSTFIX_LIST
from .modifiers import ModifierLike, ModifierSet


def trim_postfix(name: str, use_multibyte: bool, allow_empty: bool = False) -> str:
    """
    Repeatedly strip well-known class name suffixes from ``name``.

    Each pass lowercases the current name and scans POSTFIX_LIST in declared
    order; the first suffix matching the tail is cut from the original-cased
    name and the scan restarts. Stops when no suffix matches.

    Args:
        name: Base name in whatever casing
        use_multibyte: Count characters as codepoints instead of bytes
        allow_empty: Also strip a suffix that makes up the whole remaining name

    Returns:
        Name without trailing suffixes, the surviving prefix keeps its casing

    Examples:
        >>> trim_postfix("UserDto", False)
        "User"

        >>> trim_postfix("UserHandlerDtoEvent", False)
        "User"

        >>> trim_postfix("EventHandler", False)
        "Event"

    Edge Cases:
        - No suffix: "User" -> "User"
        - Whole name is a suffix: "Service" -> "Service" ("" with allow_empty)
    """
    working_lower = text_ops.lower(name, use_multibyte)

    trimmed = True
    while trimmed:
        trimmed = False
        remaining = text_ops.length(name, use_multibyte)

        for postfix in POSTFIX_LIST:
            size = len(postfix)
            if not allow_empty and size >= remaining:
                continue

            if text_ops.tail(working_lower, size, use_multibyte) == postfix:
                name = text_ops.drop_tail(name, size, use_multibyte)
                working_lower = text_ops.lower(name, use_multibyte)
                trimmed = True
                break  # Restart the scan from the top of the list

    return name


def apply_modifiers(
    base_name: str,
    modifier: ModifierLike,
    allow_empty_trim: bool = False,
    flags: Optional[ModifierSet] = None,
) -> str:
    """
    Apply string transformations selected by ``modifier`` to a base name.

    Order: UPPER (terminal), otherwise LOWER, then UC, then TRIM_POSTFIX.
    The modifier must already be validated.

    Args:
        base_name: The already stripped base name
        modifier: Validated modifier bitmask
        allow_empty_trim: Passed to trim_postfix as allow_empty
        flags: Pre-decoded modifier, decoded from ``modifier`` when omitted

    Returns:
        The transformed base name
    """
    if flags is None:
        flags = ModifierSet.from_mask(modifier)

    if flags.is_empty:
        return base_name

    use_multibyte = flags.multibyte

    if flags.upper:
        return text_ops.upper(base_name, use_multibyte)

    if flags.lower:
        base_name = text_ops.lower(base_name, use_multibyte)

    if flags.uc:
        base_name = text_ops.upper_first(base_name, use_multibyte)

    if flags.trim_postfix:
        base_name = trim_postfix(base_name, use_multibyte, allow_empty=allow_empty_trim)

    return base_name
