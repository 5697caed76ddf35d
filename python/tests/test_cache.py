"""
Tests for the result cache and its interaction with strip().
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from fqcn_stripper import Modifier, MultibyteUnavailableError, StripCache, clear_cache, strip
from fqcn_stripper.cache import make_key


class TestStripCache:
    """StripCache storage behavior."""

    def test_get_missing(self, cache):
        assert cache.get("App\\User|0") is None
        assert cache.misses == 1

    def test_put_and_get(self, cache):
        cache.put("App\\User|0", "User")

        assert cache.get("App\\User|0") == "User"
        assert cache.hits == 1
        assert "App\\User|0" in cache
        assert len(cache) == 1

    def test_clear(self, cache):
        cache.put("a|0", "a")
        cache.put("b|0", "b")
        cache.get("a|0")

        cache.clear()

        assert len(cache) == 0
        assert cache.hits == 0
        assert cache.misses == 0

    def test_make_key_uses_raw_modifier(self):
        assert make_key("App\\User", Modifier.LOW_UC) == "App\\User|3"
        assert make_key("App\\User", 0) == "App\\User|0"

    def test_make_key_namespace(self):
        assert make_key("App\\User", 16, "allow_empty_trim") == "App\\User|16|allow_empty_trim"
        assert make_key("App\\User", 16, "") == "App\\User|16"


class TestStripperCaching:
    """Lookup after validation, store after transformation."""

    def test_result_is_stored(self, stripper, cache):
        stripper.strip("App\\Entity\\User", Modifier.LOWER)

        assert cache.get("App\\Entity\\User|1") == "user"

    def test_hit_short_circuits(self, stripper, cache, monkeypatch):
        from fqcn_stripper import core

        stripper.strip("App\\Entity\\User", Modifier.LOWER)

        def fail(*args, **kwargs):
            raise AssertionError("transform should not run on a cache hit")

        monkeypatch.setattr(core, "apply_modifiers", fail)
        monkeypatch.setattr(core, "extract_base_name", fail)

        assert stripper.strip("App\\Entity\\User", Modifier.LOWER) == "user"
        assert cache.hits == 1

    def test_served_value_is_cached_value(self, stripper, cache):
        cache.put("App\\Entity\\User|0", "Sentinel")
        assert stripper.strip("App\\Entity\\User") == "Sentinel"

    def test_distinct_raw_masks_distinct_keys(self, stripper, cache):
        first = stripper.strip("App\\Entity\\User", Modifier.LOW_UC)
        second = stripper.strip("App\\Entity\\User", Modifier.LOW_UC | Modifier.MULTIBYTE)

        assert first == second == "User"
        assert len(cache) == 2

    def test_validation_runs_before_lookup(self, stripper, multibyte_switch):
        assert stripper.strip("App\\Üser", Modifier.MULTIBYTE) == "Üser"

        multibyte_switch.available = False
        with pytest.raises(MultibyteUnavailableError):
            stripper.strip("App\\Üser", Modifier.MULTIBYTE)

    def test_clear_forces_recompute(self, stripper, multibyte_switch, monkeypatch):
        from fqcn_stripper import core

        calls = []
        original = core.apply_modifiers

        def counting(*args, **kwargs):
            calls.append(args[0])
            return original(*args, **kwargs)

        monkeypatch.setattr(core, "apply_modifiers", counting)

        stripper.strip("App\\Üser", Modifier.MULTIBYTE | Modifier.LOWER)
        stripper.strip("App\\Üser", Modifier.MULTIBYTE | Modifier.LOWER)
        assert len(calls) == 1

        multibyte_switch.available = False
        with pytest.raises(MultibyteUnavailableError):
            stripper.strip("App\\Üser", Modifier.MULTIBYTE | Modifier.LOWER)

        multibyte_switch.available = True
        stripper.clear_cache()
        assert stripper.strip("App\\Üser", Modifier.MULTIBYTE | Modifier.LOWER) == "üser"
        assert len(calls) == 2

    def test_cache_disabled(self, cache):
        from fqcn_stripper import NameStripper, StripperConfig

        stripper = NameStripper(cache=cache, config=StripperConfig(cache_enabled=False))
        stripper.strip("App\\Entity\\User")

        assert len(cache) == 0


class TestDefaultCache:
    """Module-level strip() shares one process-wide cache."""

    def test_clear_cache_empties_default(self):
        from fqcn_stripper import get_default_stripper

        strip("App\\Entity\\User", Modifier.UPPER)
        assert len(get_default_stripper().cache) == 1

        clear_cache()
        assert len(get_default_stripper().cache) == 0


class TestConcurrentAccess:
    """The cache is safe to share between threads."""

    def test_parallel_strips(self, stripper, cache):
        names = [f"App\\Entity\\User{i}Dto" for i in range(50)] * 8

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(lambda name: stripper.strip(name, Modifier.TRIM_POSTFIX), names)
            )

        assert results == [f"User{i}" for i in range(50)] * 8
        assert len(cache) == 50


class TestSharedCache:
    """Strippers with different switches can share one cache."""

    def test_allow_empty_trim_results_kept_apart(self, cache):
        from fqcn_stripper import NameStripper, StripperConfig

        permissive = NameStripper(cache=cache, config=StripperConfig(allow_empty_trim=True))
        strict = NameStripper(cache=cache, config=StripperConfig(allow_empty_trim=False))

        assert permissive.strip("App\\Service", Modifier.TRIM_POSTFIX) == ""
        assert strict.strip("App\\Service", Modifier.TRIM_POSTFIX) == "Service"
        assert permissive.strip("App\\Service", Modifier.TRIM_POSTFIX) == ""
        assert len(cache) == 2

    def test_same_switches_share_entries(self, cache):
        from fqcn_stripper import NameStripper, StripperConfig

        first = NameStripper(cache=cache, config=StripperConfig())
        second = NameStripper(cache=cache, config=StripperConfig())

        first.strip("App\\Entity\\UserDto", Modifier.TRIM_POSTFIX)
        second.strip("App\\Entity\\UserDto", Modifier.TRIM_POSTFIX)

        assert len(cache) == 1
        assert cache.hits == 1
