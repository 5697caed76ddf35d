"""
Environment-based configuration.

Variables:
    FQCN_STRIPPER_CACHE: set to 0/false/no/off to disable result memoization
    FQCN_STRIPPER_ALLOW_EMPTY_TRIM: set to 1/true/yes/on to let TRIM_POSTFIX
        strip a name that consists only of a known suffix down to ""
    FQCN_STRIPPER_DISABLE_MULTIBYTE: read by modifiers.is_multibyte_available()

A NameStripper built without an explicit config, including the process-wide
default behind the module-level strip(), re-reads FQCN_STRIPPER_CACHE and
FQCN_STRIPPER_ALLOW_EMPTY_TRIM on every call. The multibyte check reads its
variable on first use and then stays fixed until
is_multibyte_available.cache_clear() is called.
"""

import os
from dataclasses import dataclass

from .constants import ENV_ALLOW_EMPTY_TRIM, ENV_CACHE, FALSY_VALUES, TRUTHY_VALUES


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if default:
        return value not in FALSY_VALUES
    return value in TRUTHY_VALUES


@dataclass(frozen=True)
class StripperConfig:
    """Behavior switches for NameStripper."""

    cache_enabled: bool = True
    allow_empty_trim: bool = False

    @classmethod
    def from_env(cls) -> "StripperConfig":
        return cls(
            cache_enabled=_env_flag(ENV_CACHE, True),
            allow_empty_trim=_env_flag(ENV_ALLOW_EMPTY_TRIM, False),
        )

    @property
    def cache_namespace(self) -> str:
        """Cache key suffix for switches that change strip() results."""
        return "allow_empty_trim" if self.allow_empty_trim else ""
