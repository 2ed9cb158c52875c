from __future__ import annotations

import importlib
import inspect
import logging
from collections.abc import Callable
from typing import Any, TypeVar, overload

from autowire._internal.type_checks import is_concrete_class, is_runtime_class
from autowire.exceptions import AutowireInvalidRegistrationError

F = TypeVar("F", bound=Callable[..., Any])
C = TypeVar("C", bound=type[Any])

logger = logging.getLogger(__name__)

_PATH_SEPARATOR = "."


class Registry:
    """Map string identifiers to loadable classes and functions.

    The registry is populated explicitly by the application. A class is
    registered under its ``__qualname__`` unless a name is given, and the
    reverse mapping lets type-hinted classes be found by that same name, so
    alias tables can redirect them.

    Both ``add_class`` and ``add_function`` return their argument and can be
    used as decorators.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[Any]] = {}
        self._class_names: dict[type[Any], str] = {}
        self._functions: dict[str, Callable[..., Any]] = {}

    @overload
    def add_class(self, cls: C, *, name: str | None = None) -> C: ...

    @overload
    def add_class(self, cls: None = None, *, name: str | None = None) -> Callable[[C], C]: ...

    def add_class(
        self,
        cls: C | None = None,
        *,
        name: str | None = None,
    ) -> C | Callable[[C], C]:
        """Register a concrete class under ``name`` (defaults to its qualname).

        Args:
            cls: Class to register. Omit to use the method as a decorator factory.
            name: Identifier to register the class under.

        Raises:
            AutowireInvalidRegistrationError: If ``cls`` is not a concrete class
                or ``name`` is already bound to a different class.

        """
        if cls is None:
            return lambda decorated: self.add_class(decorated, name=name)

        if not is_runtime_class(cls):
            msg = f"Registered class must be a class, got {cls!r}."
            raise AutowireInvalidRegistrationError(msg)
        if not is_concrete_class(cls):
            msg = f"Registered class '{cls.__qualname__}' cannot be abstract."
            raise AutowireInvalidRegistrationError(msg)

        class_name = name or cls.__qualname__
        self._ensure_unbound(self._classes, class_name, cls)
        self._classes[class_name] = cls
        self._class_names.setdefault(cls, class_name)
        logger.debug("Registered class '%s' as '%s'", cls.__qualname__, class_name)
        return cls

    @overload
    def add_function(self, function: F, *, name: str | None = None) -> F: ...

    @overload
    def add_function(
        self,
        function: None = None,
        *,
        name: str | None = None,
    ) -> Callable[[F], F]: ...

    def add_function(
        self,
        function: F | None = None,
        *,
        name: str | None = None,
    ) -> F | Callable[[F], F]:
        """Register a function under ``name`` (defaults to its qualname).

        Args:
            function: Callable to register. Omit to use the method as a decorator factory.
            name: Identifier to register the function under.

        Raises:
            AutowireInvalidRegistrationError: If ``function`` is not callable or
                ``name`` is already bound to a different function.

        """
        if function is None:
            return lambda decorated: self.add_function(decorated, name=name)

        if not callable(function) or inspect.isclass(function):
            msg = f"Registered function must be a callable, got {function!r}."
            raise AutowireInvalidRegistrationError(msg)

        function_name = name or getattr(function, "__qualname__", None)
        if not function_name:
            msg = f"Registered function {function!r} needs an explicit name."
            raise AutowireInvalidRegistrationError(msg)
        self._ensure_unbound(self._functions, function_name, function)
        self._functions[function_name] = function
        return function

    def find_class(self, name: str, *, import_paths: bool = False) -> type[Any] | None:
        """Return the class registered under ``name``, if any.

        Args:
            name: Class identifier.
            import_paths: Fall back to importing ``name`` as a dotted path.

        """
        cls = self._classes.get(name)
        if cls is None and import_paths:
            imported = self._import_path(name)
            if is_runtime_class(imported):
                cls = imported
        return cls

    def find_function(
        self,
        name: str,
        *,
        import_paths: bool = False,
    ) -> Callable[..., Any] | None:
        """Return the function registered under ``name``, if any.

        Args:
            name: Function identifier.
            import_paths: Fall back to importing ``name`` as a dotted path.

        """
        function = self._functions.get(name)
        if function is None and import_paths:
            imported = self._import_path(name)
            if callable(imported):
                function = imported
        return function

    def name_of(self, cls: type[Any]) -> str:
        """Return the identifier ``cls`` is registered under, or its qualname.

        Args:
            cls: Class to name.

        """
        return self._class_names.get(cls, cls.__qualname__)

    def _import_path(self, path: str) -> Any:
        module_path, separator, attribute = path.rpartition(_PATH_SEPARATOR)
        if not separator:
            return None
        try:
            module = importlib.import_module(module_path)
        except ImportError:
            logger.debug("Module '%s' could not be imported for '%s'", module_path, path)
            return None
        return getattr(module, attribute, None)

    def _ensure_unbound(self, table: dict[str, Any], name: str, value: object) -> None:
        existing = table.get(name)
        if existing is not None and existing is not value:
            msg = f"Name '{name}' is already registered for {existing!r}."
            raise AutowireInvalidRegistrationError(msg)

    def __contains__(self, name: object) -> bool:
        return name in self._classes or name in self._functions

    def __len__(self) -> int:
        return len(self._classes) + len(self._functions)


__all__ = ["Registry"]
