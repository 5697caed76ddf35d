"""
Pytest configuration and fixtures for fqcn_stripper tests.

Specialized fixtures are organized in the fixtures/ directory:
- fixtures.stripper: stripper instances, sample names, multibyte test double
"""

import pytest

# Load fixture modules
pytest_plugins = [
    "tests.fixtures.stripper",
]


@pytest.fixture(autouse=True)
def isolated_stripper_state(monkeypatch):
    """Reset process-wide cache, capability check and env config around each test."""
    from fqcn_stripper import clear_cache, is_multibyte_available

    for name in (
        "FQCN_STRIPPER_CACHE",
        "FQCN_STRIPPER_ALLOW_EMPTY_TRIM",
        "FQCN_STRIPPER_DISABLE_MULTIBYTE",
    ):
        monkeypatch.delenv(name, raising=False)

    clear_cache()
    is_multibyte_available.cache_clear()
    yield
    clear_cache()
    is_multibyte_available.cache_clear()
