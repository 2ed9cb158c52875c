from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from autowire._internal.parameters import ParameterDescriptor
from autowire.exceptions import AutowireMissingArgumentError

ResolutionData = Mapping[int | str, Any]
"""Caller-supplied argument values keyed by parameter position or name."""

_EMPTY_DATA: ResolutionData = {}


class BuildFunction(Protocol):
    def __call__(
        self,
        identifier: Any,
        data: ResolutionData | None = None,
        optional: bool = False,  # noqa: FBT001, FBT002
    ) -> Any: ...


@dataclass(slots=True)
class ArgumentResolver:
    """Produce the ordered argument list for a callable's parameters.

    For each parameter the first matching source wins:

    1. an entry in ``data`` keyed by the parameter position;
    2. an entry in ``data`` keyed by the parameter name;
    3. a recursively built instance of the annotated class, where a
       parameter with a default tolerates a missing class;
    4. the parameter default;

    otherwise resolution fails with ``AutowireMissingArgumentError``.
    """

    build: BuildFunction

    def resolve(
        self,
        parameters: Sequence[ParameterDescriptor],
        data: ResolutionData | None = None,
        *,
        target: str = "<callable>",
    ) -> list[Any]:
        """Return one value per parameter, in declaration order.

        Args:
            parameters: Descriptors of the callable's parameters.
            data: Explicit values keyed by position or name. Extra keys are ignored.
            target: Name of the callable, used in error messages.

        Raises:
            AutowireMissingArgumentError: If a parameter has no value source.

        """
        data = _EMPTY_DATA if data is None else data
        return [self._resolve_one(parameter, data, target) for parameter in parameters]

    def _resolve_one(
        self,
        parameter: ParameterDescriptor,
        data: ResolutionData,
        target: str,
    ) -> Any:
        if self._has_position(data, parameter.position):
            return data[parameter.position]
        if parameter.name in data:
            return data[parameter.name]
        if parameter.declared_type is not None:
            return self.build(parameter.declared_type, _EMPTY_DATA, parameter.is_optional)
        if parameter.is_optional:
            return parameter.default
        raise AutowireMissingArgumentError(
            parameter.name,
            target=target,
            annotation_error=parameter.annotation_error,
        ) from parameter.annotation_error

    def _has_position(self, data: ResolutionData, position: int) -> bool:
        # True == 1 as a dict key; a bool key is never a position.
        return any(key == position and type(key) is int for key in data)
