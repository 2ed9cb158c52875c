"""Alias tables redirect abstract identifiers to concrete classes.

The injector reads ``config.aliases`` from its locator on every class
lookup. Aliases apply a single substitution and work for names and for
annotated parameters alike.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from autowire import Injector, Locator, Registry


class Storage(ABC):
    @abstractmethod
    def save(self, payload: str) -> str: ...


class MemoryStorage(Storage):
    def save(self, payload: str) -> str:
        return f"memory:{payload}"


class DiskStorage(Storage):
    def save(self, payload: str) -> str:
        return f"disk:{payload}"


class Uploader:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage


def main() -> None:
    registry = Registry()
    registry.add_class(MemoryStorage)
    registry.add_class(DiskStorage, name="disk")

    locator = Locator({"config": {"aliases": {"Storage": "MemoryStorage"}}})
    injector = Injector(locator, registry)

    uploader = injector.build(Uploader)
    print(uploader.storage.save("report"))  # => memory:report

    locator["config"] = {"aliases": {"Storage": "disk"}}
    print(injector.build("Storage").save("report"))  # => disk:report

    locator["config"] = {"aliases": {}}
    print(f"optional={injector.build('Storage', optional=True)}")  # => optional=None


if __name__ == "__main__":
    main()
