"""
Name stripping pipeline.

strip() runs: empty-name check -> input resolution -> modifier validation ->
cache lookup -> base name extraction -> modifier application -> cache store.
"""

import logging
from typing import Any, Iterable, Optional

from .cache import StripCache, make_key
from .config import StripperConfig
from .errors import EmptyNameError
from .logging_config import get_logger
from .modifiers import Modifier, ModifierLike, ModifierSet, as_mask, describe, validate
from .parsers import extract_base_name, resolve_qualified_name
from .transforms import apply_modifiers

logger = get_logger("core")


class NameStripper:
    """
    Strips namespaces from fully-qualified names and applies modifiers.

    Holds no state besides its cache and config, so one instance can be shared.
    Pass a StripCache to control the cache lifetime; each instance otherwise
    gets its own. Without an explicit config the environment is read on each
    call (see config.py).

    Example:
        stripper = NameStripper()
        stripper.strip("App\\Entity\\User", Modifier.LOWER)  # "user"
    """

    def __init__(
        self,
        cache: Optional[StripCache] = None,
        config: Optional[StripperConfig] = None,
    ):
        self._config = config
        self.cache = cache if cache is not None else StripCache()

    @property
    def config(self) -> StripperConfig:
        if self._config is not None:
            return self._config
        return StripperConfig.from_env()

    def strip(self, item: Any, modifier: ModifierLike = Modifier.NONE) -> str:
        """
        Strip the namespace from a qualified name and apply modifiers.

        Args:
            item: Qualified name ("App\\Entity\\User"), TypedValue, class or instance
            modifier: Bitmask of Modifier flags (e.g. LOWER | TRIM_POSTFIX)

        Returns:
            The transformed base name ("user", "User", "USER", ...)

        Raises:
            EmptyNameError: item is an empty string
            InvalidModifierError: modifier has unsupported bits
            ConflictingModifiersError: UPPER combined with LOWER or UC
            MultibyteUnavailableError: MULTIBYTE without multibyte support
            TypeError: modifier is not an int
        """
        if isinstance(item, str) and item == "":
            raise EmptyNameError()

        as_mask(modifier)

        qualified_name = resolve_qualified_name(item)
        if qualified_name == "":
            raise EmptyNameError("Resolved qualified name is empty")

        validate(modifier)

        config = self.config
        key = make_key(qualified_name, modifier, config.cache_namespace)
        if config.cache_enabled:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug(f"Cache hit: {key}")
                return cached

        base_name = extract_base_name(qualified_name)
        result = apply_modifiers(
            base_name,
            modifier,
            allow_empty_trim=config.allow_empty_trim,
            flags=ModifierSet.from_mask(modifier),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Stripped {qualified_name!r} with {describe(modifier)} -> {result!r}")

        if config.cache_enabled:
            self.cache.put(key, result)

        return result

    def strip_all(self, items: Iterable[Any], modifier: ModifierLike = Modifier.NONE) -> list[str]:
        """
        Strip every item with the same modifier, preserving order.

        The first failing item aborts the whole batch.
        """
        return [self.strip(item, modifier) for item in items]

    def clear_cache(self) -> None:
        self.cache.clear()


# Process-wide default used by the module-level functions
_default_cache = StripCache()
_default_stripper = NameStripper(cache=_default_cache)


def get_default_stripper() -> NameStripper:
    return _default_stripper


def strip(item: Any, modifier: ModifierLike = Modifier.NONE) -> str:
    """Strip a single item with the process-wide default stripper."""
    return _default_stripper.strip(item, modifier)


def strip_all(items: Iterable[Any], modifier: ModifierLike = Modifier.NONE) -> list[str]:
    """Strip a collection of items with the process-wide default stripper."""
    return _default_stripper.strip_all(items, modifier)


def clear_cache() -> None:
    """
    Clear the process-wide result cache.

    Intended for long-running processes and test isolation.
    """
    _default_stripper.clear_cache()
