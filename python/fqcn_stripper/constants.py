"""
Constants for fully-qualified name stripping.
"""

# Separators recognised between namespace segments.
# "\" is the namespace separator, "/" is accepted as a path-style alias.
NAMESPACE_SEPARATOR = "\\"
SEGMENT_SEPARATORS = ("\\", "/")

# Common class name suffixes trimmed by TRIM_POSTFIX.
# Order matters: the first entry matching the tail of the name wins each pass.
POSTFIX_LIST = (
    "interface",
    "trait",
    "abstract",
    "class",
    "impl",  # implementation
    "entity",
    "dto",
    "vo",  # value object
    "model",
    "service",
    "controller",
    "factory",
    "repository",
    "event",
    "listener",
    "subscriber",
    "command",
    "query",
    "enum",
    "handler",
)

# Encoding used by the byte-oriented string operations
BYTE_ENCODING = "utf-8"
BYTE_ERRORS = "surrogateescape"

CACHE_KEY_SEPARATOR = "|"

# Environment variables (see config.StripperConfig)
ENV_PREFIX = "FQCN_STRIPPER_"
ENV_CACHE = ENV_PREFIX + "CACHE"
ENV_ALLOW_EMPTY_TRIM = ENV_PREFIX + "ALLOW_EMPTY_TRIM"
ENV_DISABLE_MULTIBYTE = ENV_PREFIX + "DISABLE_MULTIBYTE"

FALSY_VALUES = ("0", "false", "no", "off")
TRUTHY_VALUES = ("1", "true", "yes", "on")
