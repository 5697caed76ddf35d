"""
fqcn_stripper - strip fully-qualified class names down to their base name.

Extracts the short name from a namespaced identifier ("App\\Entity\\User" ->
"User") and optionally applies modifiers: lowercase, uppercase, capitalize
first letter, multibyte-safe operations and common-suffix trimming.

Usage:
    from fqcn_stripper import Modifier, strip, strip_all

    strip("App\\Entity\\UserDto", Modifier.LOWER | Modifier.TRIM_POSTFIX)  # "user"
    strip_all(["App\\Model\\Customer", "App\\Entity\\Order"], Modifier.LOWER)
"""

__version__ = "0.1.0"

from .cache import StripCache
from .config import StripperConfig
from .constants import POSTFIX_LIST
from .core import NameStripper, clear_cache, get_default_stripper, strip, strip_all
from .errors import (
    ConflictingModifiersError,
    EmptyNameError,
    InvalidModifierError,
    MalformedInputError,
    ModifierConflictError,
    MultibyteUnavailableError,
    StripperError,
)
from .modifiers import (
    VALID_MODIFIERS,
    Modifier,
    ModifierSet,
    describe,
    is_multibyte_available,
    is_valid,
    list_options,
    normalize,
    validate,
)
from .parsers import TypedValue, extract_base_name

__all__ = [
    "__version__",
    # core
    "NameStripper",
    "strip",
    "strip_all",
    "clear_cache",
    "get_default_stripper",
    # modifiers
    "Modifier",
    "ModifierSet",
    "VALID_MODIFIERS",
    "describe",
    "is_multibyte_available",
    "is_valid",
    "list_options",
    "normalize",
    "validate",
    # inputs
    "TypedValue",
    "extract_base_name",
    "POSTFIX_LIST",
    # cache / config
    "StripCache",
    "StripperConfig",
    # errors
    "StripperError",
    "MalformedInputError",
    "EmptyNameError",
    "InvalidModifierError",
    "ModifierConflictError",
    "ConflictingModifiersError",
    "MultibyteUnavailableError",
]
