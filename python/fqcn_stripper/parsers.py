"""
Qualified name resolution and base name extraction.
"""

from dataclasses import dataclass
from typing import Any, Callable

from .constants import NAMESPACE_SEPARATOR, SEGMENT_SEPARATORS
from .errors import EmptyNameError


@dataclass(frozen=True)
class TypedValue:
    """
    Input whose qualified name is supplied by a callable.

    The resolver is called exactly once, when the input enters strip().

    Example:
        >>> strip(TypedValue(lambda: "App\\Entity\\User"))
        "User"
    """

    resolver: Callable[[], str]

    def resolve(self) -> str:
        return self.resolver()


def qualified_type_name(obj: Any) -> str:
    r"""
    Qualified name of an object's runtime type in namespace form.

    Classes resolve to themselves, instances to their type. The dotted Python
    path is rewritten with the namespace separator:

        >>> qualified_type_name(OrderedDict())
        "collections\OrderedDict"
    """
    cls = obj if isinstance(obj, type) else type(obj)
    dotted = f"{cls.__module__}.{cls.__qualname__}"
    return dotted.replace(".", NAMESPACE_SEPARATOR)


def resolve_qualified_name(item: Any) -> str:
    """
    Resolve a strip() input to its qualified name string.

    Args:
        item: Literal qualified name, TypedValue, class or instance

    Returns:
        The qualified name; literal strings are returned unchanged
    """
    if isinstance(item, str):
        return item

    if isinstance(item, TypedValue):
        return item.resolve()

    return qualified_type_name(item)


def extract_base_name(qualified_name: str) -> str:
    """
    Extract the final segment of a qualified name.

    Both "\\" and "/" separate segments. Trailing separators are ignored, so
    the result matches the last path segment.

    A slash-only name such as "App/Entity/User" is split as well, even though
    PHP-style FQCN stripping only splits names containing a backslash and would
    return it unchanged. Callers relying on that must keep such names away from
    strip().

    Args:
        qualified_name: Fully-qualified name, e.g. "App\\Entity\\User"

    Returns:
        Base name ("User"); names without a separator are returned unchanged

    Raises:
        EmptyNameError: If qualified_name is empty

    Edge Cases:
        - No separator: "User" -> "User"
        - Trailing separator: "App\\Entity\\" -> "Entity"
        - Only separators: "\\\\" -> ""
    """
    if qualified_name == "":
        raise EmptyNameError()

    if not any(sep in qualified_name for sep in SEGMENT_SEPARATORS):
        return qualified_name

    separators = "".join(SEGMENT_SEPARATORS)
    trimmed = qualified_name.rstrip(separators)
    cut = max(trimmed.rfind(sep) for sep in SEGMENT_SEPARATORS)
    return trimmed[cut + 1 :]
