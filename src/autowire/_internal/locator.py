from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

_KEY_SEPARATOR = "."
_MISSING: Any = object()

ServiceFactory = Callable[["Locator"], Any]


@dataclass(frozen=True, slots=True)
class _Shared:
    factory: ServiceFactory


@dataclass(frozen=True, slots=True)
class _Factory:
    factory: ServiceFactory


@dataclass(frozen=True, slots=True)
class _Protected:
    value: Any


class Locator(MutableMapping[str, Any]):
    """Store values and lazily built services under string keys.

    Plain values are returned as stored. Callables registered with ``share``
    are called once with the locator and their result is reused; callables
    registered with ``factory`` are called on every lookup; ``protect`` stores
    a callable as a plain value.

    Dotted keys address nested mappings: ``locator.get("config.aliases")``
    returns ``locator["config"]["aliases"]`` when no top-level key named
    ``"config.aliases"`` exists.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        self._resolved: dict[str, Any] = {}
        if values:
            for key, value in values.items():
                self.set(key, value)

    def set(self, key: str, value: Any) -> None:
        """Store a plain value, replacing any previous entry.

        Args:
            key: Entry name.
            value: Value returned by subsequent lookups.

        """
        self._resolved.pop(key, None)
        self._values[key] = value

    def share(self, key: str, factory: ServiceFactory) -> None:
        """Store a service built once on first lookup.

        Args:
            key: Entry name.
            factory: Callable receiving the locator and returning the service.

        """
        self.set(key, _Shared(factory))

    def factory(self, key: str, factory: ServiceFactory) -> None:
        """Store a service built anew on every lookup.

        Args:
            key: Entry name.
            factory: Callable receiving the locator and returning the service.

        """
        self.set(key, _Factory(factory))

    def protect(self, key: str, value: Callable[..., Any]) -> None:
        """Store a callable that lookups return without calling it.

        Args:
            key: Entry name.
            value: Callable stored verbatim.

        """
        self.set(key, _Protected(value))

    def has(self, key: str) -> bool:
        """Return whether ``key`` (or a dotted path to a nested entry) exists.

        Args:
            key: Entry name or dotted path.

        """
        return self._lookup(key) is not _MISSING

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default``.

        Args:
            key: Entry name or dotted path.
            default: Value returned when nothing is stored under ``key``.

        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def raw(self, key: str) -> Any:
        """Return the stored entry without building shared or factory services.

        Args:
            key: Top-level entry name.

        """
        entry = self._values[key]
        if isinstance(entry, (_Shared, _Factory)):
            return entry.factory
        if isinstance(entry, _Protected):
            return entry.value
        return entry

    def _lookup(self, key: str) -> Any:
        if key in self._values:
            return self._materialize(key)

        head, separator, rest = key.partition(_KEY_SEPARATOR)
        if not separator or head not in self._values:
            return _MISSING

        current = self._materialize(head)
        for part in rest.split(_KEY_SEPARATOR):
            if not isinstance(current, Mapping) or part not in current:
                return _MISSING
            current = current[part]
        return current

    def _materialize(self, key: str) -> Any:
        entry = self._values[key]
        if isinstance(entry, _Shared):
            if key not in self._resolved:
                logger.debug("Building shared service '%s'", key)
                self._resolved[key] = entry.factory(self)
            return self._resolved[key]
        if isinstance(entry, _Factory):
            return entry.factory(self)
        if isinstance(entry, _Protected):
            return entry.value
        return entry

    def __getitem__(self, key: str) -> Any:
        value = self._lookup(key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self._values[key]
        self._resolved.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


__all__ = ["Locator", "ServiceFactory"]
