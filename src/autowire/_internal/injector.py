from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar, cast

from autowire._internal.arguments import ResolutionData
from autowire._internal.builder import InstanceBuilder
from autowire._internal.class_resolver import (
    ALIASES_KEY,
    ClassIdentifier,
    ClassResolver,
    ResolvedClass,
)
from autowire._internal.invoker import Invoker
from autowire._internal.locator import Locator
from autowire._internal.parameters import ParameterDescriptorExtractor
from autowire._internal.registry import Registry

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class Injector:
    """Build objects and call functions with arguments wired from type hints.

    The injector composes a ``Locator`` (read for the ``config.aliases`` alias
    table) and a ``Registry`` of loadable classes and functions. Every
    call performs one synchronous resolution pass and keeps no instances
    between calls.

    Argument values come, in order of precedence, from ``data`` by position,
    from ``data`` by name, from recursively building the annotated class, and
    from the parameter default.
    """

    def __init__(
        self,
        locator: Locator | None = None,
        registry: Registry | None = None,
        *,
        autoregister_concrete_types: bool = True,
        import_paths: bool = False,
    ) -> None:
        """Initialize an injector over a locator and a registry.

        Args:
            locator: Key-value store holding the ``config.aliases`` table.
                A new empty locator is created when omitted.
            registry: Store of classes and functions addressable by name.
                A new empty registry is created when omitted.
            autoregister_concrete_types: Build annotated concrete classes even
                when they are not registered. Disable for strict mode where
                every built class must be registered or aliased.
            import_paths: Resolve unknown dotted identifiers such as
                ``"package.module.Class"`` by importing them.

        """
        self.locator = Locator() if locator is None else locator
        self.registry = Registry() if registry is None else registry

        self._extractor = ParameterDescriptorExtractor()
        self._class_resolver = ClassResolver(
            registry=self.registry,
            aliases=self._aliases,
            autoregister_concrete_types=autoregister_concrete_types,
            import_paths=import_paths,
        )
        self._builder = InstanceBuilder(
            class_resolver=self._class_resolver,
            extractor=self._extractor,
        )
        self._invoker = Invoker(
            arguments=self._builder.arguments,
            registry=self.registry,
            extractor=self._extractor,
            import_paths=import_paths,
        )

    def build(
        self,
        identifier: ClassIdentifier,
        data: ResolutionData | None = None,
        optional: bool = False,  # noqa: FBT001, FBT002
    ) -> Any:
        """Build a new instance of the class named by ``identifier``.

        Args:
            identifier: Registered class name, dotted import path, or class object.
                Aliases from ``config.aliases`` are applied first.
            data: Explicit constructor arguments keyed by position or name.
            optional: Return ``None`` when the class cannot be found. Only
                this call is affected; missing arguments still raise.

        Returns:
            The new instance, or ``None`` for an optional class that was not found.

        Raises:
            AutowireClassNotFoundError: If the class is not loadable and
                ``optional`` is false.
            AutowireMissingArgumentError: If a constructor parameter has no
                value source.
            AutowireCyclicDependencyError: If constructor annotations form a cycle.

        Examples:
            .. code-block:: python

                injector = Injector()
                service = injector.build(Service, {"timeout": 5})

        """
        return self._builder.build(identifier, data, optional)

    def invoke_method(
        self,
        target: object,
        method_name: str,
        data: ResolutionData | None = None,
    ) -> Any:
        """Call a method of ``target`` with autowired arguments and return its result.

        Args:
            target: Object owning the method.
            method_name: Name of the method to call.
            data: Explicit arguments keyed by position or name.

        Raises:
            AutowireInvalidTargetError: If the object has no such method.
            AutowireMissingArgumentError: If a parameter has no value source.

        """
        return self._invoker.invoke_method(target, method_name, data)

    def invoke_function(
        self,
        function: str | Callable[..., T],
        data: ResolutionData | None = None,
    ) -> T | Any:
        """Call a function with autowired arguments and return its result.

        Args:
            function: Callable, registered function name, or dotted import path.
            data: Explicit arguments keyed by position or name.

        Raises:
            AutowireInvalidTargetError: If the function cannot be found.
            AutowireMissingArgumentError: If a parameter has no value source.

        """
        return self._invoker.invoke_function(function, data)

    def inject(self, func: F) -> F:
        """Wrap ``func`` so that its autowired parameters are filled on each call.

        Parameters annotated with a buildable class are removed from the
        wrapper's signature. Call arguments bind to the remaining parameters,
        positionals in declaration order, and the autowired ones are resolved
        as in ``invoke_function``. An autowired parameter can still be passed
        explicitly by keyword.

        Args:
            func: Function to wrap.

        Raises:
            TypeError: At call time, if the arguments do not fit the wrapper's
                signature.

        """
        signature = inspect.signature(func)
        autowired = {
            parameter.name
            for parameter in self._extractor.extract(func)
            if parameter.declared_type is not None
        }
        public_signature = signature.replace(
            parameters=[
                parameter
                for parameter in signature.parameters.values()
                if parameter.name not in autowired
            ],
        )

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            explicit = {name: kwargs.pop(name) for name in autowired & kwargs.keys()}
            bound = public_signature.bind_partial(*args, **kwargs)
            data: dict[int | str, Any] = {**bound.arguments, **explicit}
            return self._invoker.invoke_function(func, data)

        wrapper.__signature__ = public_signature  # type: ignore[attr-defined]
        return cast("F", wrapper)

    def resolve_class(self, identifier: ClassIdentifier) -> ResolvedClass:
        """Return the concrete class ``identifier`` resolves to, after aliases.

        Args:
            identifier: Registered class name, dotted import path, or class object.

        Raises:
            AutowireClassNotFoundError: If no concrete class is loadable.

        """
        return self._class_resolver.resolve(identifier)

    def _aliases(self) -> Mapping[str, ClassIdentifier] | None:
        aliases = self.locator.get(ALIASES_KEY)
        if aliases is not None and not isinstance(aliases, Mapping):
            logger.warning("Ignoring '%s': expected a mapping, got %r", ALIASES_KEY, aliases)
            return None
        return aliases
