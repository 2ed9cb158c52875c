"""Shared pytest fixtures for autowire tests."""

import pytest

from autowire import Injector, Locator, Registry


@pytest.fixture()
def registry() -> Registry:
    """Empty class and function registry."""
    return Registry()


@pytest.fixture()
def locator() -> Locator:
    """Locator with an empty alias table."""
    return Locator({"config": {"aliases": {}}})


@pytest.fixture()
def injector(locator: Locator, registry: Registry) -> Injector:
    """Default injector with concrete type autoregistration enabled."""
    return Injector(locator, registry)


@pytest.fixture()
def strict_injector(locator: Locator, registry: Registry) -> Injector:
    """Injector that only builds registered or aliased classes."""
    return Injector(locator, registry, autoregister_concrete_types=False)
