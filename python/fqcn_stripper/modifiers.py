"""
Modifier flags: validation, normalization and introspection.

Modifiers arrive as an integer bitmask at the public boundary (plain ``int`` or
``Modifier``). They are checked once, then decoded into a ``ModifierSet`` of
named booleans so the transform code never has to work with bits.
"""

import codecs
import functools
import os
from dataclasses import dataclass
from enum import IntFlag
from typing import Union

from .constants import BYTE_ENCODING, ENV_DISABLE_MULTIBYTE, TRUTHY_VALUES
from .errors import (
    ConflictingModifiersError,
    InvalidModifierError,
    MultibyteUnavailableError,
)
from .logging_config import get_logger

logger = get_logger("modifiers")


class Modifier(IntFlag):
    """Transformation modifiers applied to a stripped base name."""

    NONE = 0  # No modification, default behavior
    LOWER = 1 << 0  # Output converted to lowercase
    UC = 1 << 1  # First character uppercased
    UPPER = 1 << 2  # Output converted to uppercase
    MULTIBYTE = 1 << 3  # Codepoint-aware string operations
    TRIM_POSTFIX = 1 << 4  # Remove common class name suffixes (see POSTFIX_LIST)
    LOW_UC = LOWER | UC  # Lowercase, then capitalize the first character


ModifierLike = Union[int, Modifier]

# Plain int: inverting an IntFlag yields only the defined complement bits
VALID_MODIFIERS = int(
    Modifier.NONE
    | Modifier.LOWER
    | Modifier.UC
    | Modifier.UPPER
    | Modifier.MULTIBYTE
    | Modifier.TRIM_POSTFIX
)

# Introspection order, composite included
_OPTION_NAMES = ("NONE", "LOWER", "UC", "UPPER", "LOW_UC", "MULTIBYTE", "TRIM_POSTFIX")


@dataclass(frozen=True)
class ModifierSet:
    """Decoded modifier bitmask."""

    lower: bool = False
    uc: bool = False
    upper: bool = False
    multibyte: bool = False
    trim_postfix: bool = False

    @classmethod
    def from_mask(cls, modifier: ModifierLike) -> "ModifierSet":
        modifier = as_mask(modifier)
        return cls(
            lower=bool(modifier & Modifier.LOWER),
            uc=bool(modifier & Modifier.UC),
            upper=bool(modifier & Modifier.UPPER),
            multibyte=bool(modifier & Modifier.MULTIBYTE),
            trim_postfix=bool(modifier & Modifier.TRIM_POSTFIX),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.lower or self.uc or self.upper or self.multibyte or self.trim_postfix)


@functools.lru_cache(maxsize=None)
def is_multibyte_available() -> bool:
    """
    Check whether multibyte (codepoint-aware) text operations can be used.

    Computed once per process. The check fails when the UTF-8 codec is not
    registered, or when FQCN_STRIPPER_DISABLE_MULTIBYTE is set to a truthy value.
    Tests reset it with ``is_multibyte_available.cache_clear()``.
    """
    if os.getenv(ENV_DISABLE_MULTIBYTE, "").strip().lower() in TRUTHY_VALUES:
        logger.debug(f"Multibyte support disabled via {ENV_DISABLE_MULTIBYTE}")
        return False

    try:
        codecs.lookup(BYTE_ENCODING)
    except LookupError:
        logger.warning(f"Codec {BYTE_ENCODING} unavailable, multibyte support disabled")
        return False

    return True


def as_mask(modifier: ModifierLike) -> int:
    """
    Return a modifier as a plain int.

    Raises:
        TypeError: modifier is not an int (bools and floats are rejected)
    """
    if isinstance(modifier, bool) or not isinstance(modifier, int):
        raise TypeError(f"modifier must be an int, got {type(modifier).__name__}")
    return int(modifier)


def _invalid_bits(modifier: int) -> int:
    return modifier & ~VALID_MODIFIERS


def _has_conflict(modifier: int) -> bool:
    return bool(modifier & Modifier.UPPER) and bool(modifier & Modifier.LOW_UC)


def is_valid(modifier: ModifierLike) -> bool:
    """
    Check a modifier without raising on invalid flag combinations.

    Non-int values are still rejected with TypeError.

    Valid means: no bits outside the recognised set, UPPER not combined with
    LOWER or UC, and MULTIBYTE only when multibyte support is available.
    """
    modifier = as_mask(modifier)
    multibyte_ok = not (modifier & Modifier.MULTIBYTE) or is_multibyte_available()

    return _invalid_bits(modifier) == 0 and not _has_conflict(modifier) and multibyte_ok


def validate(modifier: ModifierLike) -> None:
    """
    Validate a modifier before stripping.

    Raises:
        MultibyteUnavailableError: MULTIBYTE requested without multibyte support
        InvalidModifierError: Bits outside the recognised set are present
        ConflictingModifiersError: UPPER combined with LOWER or UC
    """
    modifier = as_mask(modifier)

    if modifier & Modifier.MULTIBYTE and not is_multibyte_available():
        logger.debug(f"Rejected modifier {modifier}: multibyte support unavailable")
        raise MultibyteUnavailableError(modifier)

    invalid_bits = _invalid_bits(modifier)
    if invalid_bits:
        logger.debug(f"Rejected modifier {modifier}: invalid bits {invalid_bits}")
        raise InvalidModifierError(modifier, invalid_bits)

    if _has_conflict(modifier):
        logger.debug(f"Rejected modifier {modifier}: UPPER combined with LOWER/UC")
        raise ConflictingModifiersError(modifier)


def normalize(modifier: ModifierLike) -> ModifierLike:
    """
    Normalize a raw modifier bitmask to its canonical equivalent.

    If both LOWER and UC are set they are replaced by the LOW_UC composite.
    Useful for comparing modifiers or naming them in logs:

        normalize(a) == normalize(b)  # logically equivalent modifiers

    Masks with unrecognised bits are returned as plain ints, unchanged.
    """
    modifier = as_mask(modifier)
    normalized = modifier

    if modifier & Modifier.LOWER and modifier & Modifier.UC:
        normalized &= ~int(Modifier.LOW_UC)
        normalized |= int(Modifier.LOW_UC)

    if _invalid_bits(normalized):
        return normalized

    return Modifier(normalized)


def list_options() -> dict[str, int]:
    """
    Return every available modifier as a name => value mapping.

    Useful for introspection, debugging or UI display.
    """
    return {name: int(Modifier[name]) for name in _OPTION_NAMES}


def describe(modifier: ModifierLike) -> str:
    """
    Human-readable name of a modifier, e.g. "LOW_UC|TRIM_POSTFIX".

    Unrecognised bits are rendered in hex.
    """
    modifier = int(normalize(as_mask(modifier)))
    if modifier == 0:
        return "NONE"

    names = []
    if (modifier & Modifier.LOW_UC) == Modifier.LOW_UC:
        names.append("LOW_UC")
    else:
        names.extend(name for name in ("LOWER", "UC") if modifier & Modifier[name])

    names.extend(
        name for name in ("UPPER", "MULTIBYTE", "TRIM_POSTFIX") if modifier & Modifier[name]
    )

    invalid_bits = _invalid_bits(modifier)
    if invalid_bits:
        names.append(hex(invalid_bits))

    return "|".join(names)
