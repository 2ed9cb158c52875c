from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from autowire._internal.arguments import ArgumentResolver, ResolutionData
from autowire._internal.parameters import ParameterDescriptorExtractor, split_arguments
from autowire._internal.registry import Registry
from autowire.exceptions import AutowireInvalidTargetError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Invoker:
    """Resolve arguments for existing methods and functions and call them.

    Resolution is always strict: a parameter annotated with a class that
    cannot be found fails unless it declares a default. Exceptions raised by
    the target itself propagate unchanged.
    """

    arguments: ArgumentResolver
    registry: Registry
    extractor: ParameterDescriptorExtractor
    import_paths: bool = False

    def invoke_method(
        self,
        target: object,
        method_name: str,
        data: ResolutionData | None = None,
    ) -> Any:
        """Call ``target.<method_name>`` with autowired arguments.

        Args:
            target: Object owning the method.
            method_name: Name of the method to call.
            data: Explicit arguments keyed by position or name.

        Raises:
            AutowireInvalidTargetError: If the object has no such callable attribute.

        """
        method = getattr(target, method_name, None)
        if method is None or not callable(method):
            msg = f"'{type(target).__qualname__}' has no callable method '{method_name}'."
            raise AutowireInvalidTargetError(msg)
        return self._call(method, data)

    def invoke_function(
        self,
        function: str | Callable[..., Any],
        data: ResolutionData | None = None,
    ) -> Any:
        """Call a function, given directly or by identifier, with autowired arguments.

        Args:
            function: Callable, registered function name, or dotted import path.
            data: Explicit arguments keyed by position or name.

        Raises:
            AutowireInvalidTargetError: If the identifier is unknown or the
                target is not callable.

        """
        if isinstance(function, str):
            found = self.registry.find_function(function, import_paths=self.import_paths)
            if found is None:
                msg = f'Function "{function}" was not found.'
                raise AutowireInvalidTargetError(msg)
            function = found
        if not callable(function):
            msg = f"Invocation target must be callable, got {function!r}."
            raise AutowireInvalidTargetError(msg)
        return self._call(function, data)

    def _call(self, function: Callable[..., Any], data: ResolutionData | None) -> Any:
        name = getattr(function, "__qualname__", repr(function))
        parameters = self.extractor.extract(function)
        values = self.arguments.resolve(parameters, data, target=name)
        args, kwargs = split_arguments(parameters, values)
        logger.debug("Invoking '%s' with %d argument(s)", name, len(values))
        return function(*args, **kwargs)
