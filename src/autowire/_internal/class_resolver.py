from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from autowire._internal.registry import Registry
from autowire._internal.type_checks import is_concrete_class, is_runtime_class
from autowire.exceptions import AutowireClassNotFoundError

logger = logging.getLogger(__name__)

ALIASES_KEY = "config.aliases"
"""Locator key holding the alias table."""

ClassIdentifier = str | type[Any]
AliasSource = Callable[[], Mapping[str, ClassIdentifier] | None]


@dataclass(frozen=True, slots=True)
class ResolvedClass:
    """A loadable class and the identifier it was found under."""

    name: str
    cls: type[Any]

    @property
    def has_constructor(self) -> bool:
        """Return whether the class declares its own or an inherited constructor."""
        return self.cls.__init__ is not object.__init__ or self.cls.__new__ is not object.__new__


@dataclass(slots=True)
class ClassResolver:
    """Map requested class identifiers to concrete classes.

    The alias table is read once per request and applied as a single-level
    substitution. The aliased value is never looked up in the table again.
    """

    registry: Registry
    aliases: AliasSource
    autoregister_concrete_types: bool = True
    import_paths: bool = False

    def resolve(self, identifier: ClassIdentifier) -> ResolvedClass:
        """Return the concrete class for ``identifier``.

        Args:
            identifier: Class name, dotted import path, or class object.

        Raises:
            AutowireClassNotFoundError: If no concrete class is loadable under
                the (possibly aliased) identifier.

        """
        requested = self.name_of(identifier)
        target = identifier
        aliased = False

        aliases = self.aliases() or {}
        if requested in aliases:
            target = aliases[requested]
            aliased = True
            logger.debug("Alias '%s' substituted with '%s'", requested, self.name_of(target))

        cls = self._load(target, aliased=aliased)
        if not is_concrete_class(cls):
            raise AutowireClassNotFoundError(self.name_of(target), requested=requested)

        resolved = ResolvedClass(name=self.name_of(cls), cls=cls)
        logger.debug("Resolved class '%s' to '%s'", requested, resolved.cls.__qualname__)
        return resolved

    def name_of(self, identifier: ClassIdentifier) -> str:
        """Return the string form of a class identifier.

        Args:
            identifier: Class name or class object.

        """
        if isinstance(identifier, str):
            return identifier
        if is_runtime_class(identifier):
            return self.registry.name_of(identifier)
        return repr(identifier)

    def _load(self, target: ClassIdentifier, *, aliased: bool) -> Any:
        if isinstance(target, str):
            return self.registry.find_class(target, import_paths=self.import_paths)
        if not is_runtime_class(target):
            return None
        if aliased or self.autoregister_concrete_types:
            return target
        registered = self.registry.find_class(self.registry.name_of(target))
        return registered if registered is target else None
