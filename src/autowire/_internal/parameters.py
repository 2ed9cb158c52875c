from __future__ import annotations

import inspect
import sys
import types
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from inspect import Parameter
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from autowire._internal.type_checks import is_injectable_annotation


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()
"""Sentinel stored as ``default`` for parameters without a default value."""

_MISSING_ANNOTATION: Any = object()
_VARIADIC_KINDS = {Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD}
_NONE_TYPE = type(None)


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Describe one formal parameter of a callable.

    Descriptors are derived fresh from introspection on every resolution
    call and are never cached.
    """

    position: int
    """Zero-based ordinal of the parameter in the full declaration, variadics included."""
    name: str
    """Declared parameter name."""
    declared_type: type[Any] | None = None
    """Class the parameter is annotated with, if it names a buildable class."""
    is_optional: bool = False
    """True when the parameter declares a default value."""
    default: Any = MISSING
    """Default value, ``MISSING`` unless ``is_optional``."""
    kind: Any = Parameter.POSITIONAL_OR_KEYWORD
    """The ``inspect.Parameter`` kind of the parameter."""
    annotation_error: Exception | None = field(default=None, compare=False)
    """Error raised while evaluating the parameter's annotation, if any."""


@dataclass(slots=True)
class ParameterDescriptorExtractor:
    """Extract parameter descriptors from classes, functions and bound methods."""

    def extract(self, target: Callable[..., Any]) -> list[ParameterDescriptor]:
        """Describe the parameters of a callable or of a class constructor.

        Variadic ``*args``/``**kwargs`` parameters are skipped but still count
        towards the positions of the parameters after them. Bound methods do
        not report their ``self`` parameter.

        Annotations are resolved together first. When that fails, for example
        because one annotation names a ``TYPE_CHECKING``-only import, each
        string annotation is evaluated on its own so the others still resolve.

        Args:
            target: Function, bound method, or class to inspect.

        """
        annotations = self._resolved_type_hints(target)
        namespace = self._namespace(target)

        descriptors: list[ParameterDescriptor] = []
        for position, parameter in enumerate(inspect.signature(target).parameters.values()):
            if parameter.kind in _VARIADIC_KINDS:
                continue
            annotation, parameter_error = self._parameter_annotation(
                parameter=parameter,
                annotations=annotations,
                namespace=namespace,
            )
            has_default = parameter.default is not Parameter.empty
            descriptors.append(
                ParameterDescriptor(
                    position=position,
                    name=parameter.name,
                    declared_type=self._declared_type(annotation),
                    is_optional=has_default,
                    default=parameter.default if has_default else MISSING,
                    kind=parameter.kind,
                    annotation_error=parameter_error,
                ),
            )
        return descriptors

    def _parameter_annotation(
        self,
        *,
        parameter: Parameter,
        annotations: dict[str, Any],
        namespace: dict[str, Any],
    ) -> tuple[Any, Exception | None]:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is not _MISSING_ANNOTATION:
            return annotation, None

        raw_annotation = parameter.annotation
        if raw_annotation is Parameter.empty:
            return _MISSING_ANNOTATION, None
        if not isinstance(raw_annotation, str):
            return raw_annotation, None

        try:
            return eval(raw_annotation, namespace), None  # noqa: S307
        except (AttributeError, NameError, SyntaxError, TypeError) as error:
            return _MISSING_ANNOTATION, error

    def _declared_type(self, annotation: Any) -> type[Any] | None:
        if annotation is _MISSING_ANNOTATION:
            return None
        annotation = self.normalize_annotation(annotation)
        if is_injectable_annotation(annotation):
            return annotation
        return None

    def normalize_annotation(self, annotation: Any) -> Any:
        """Strip ``Annotated`` metadata and a ``None`` member of a two-member union.

        Args:
            annotation: Annotation value to inspect or normalize.

        """
        while get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]

        if get_origin(annotation) in (Union, types.UnionType):
            members = [arg for arg in get_args(annotation) if arg is not _NONE_TYPE]
            if len(members) == 1:
                return self.normalize_annotation(members[0])
        return annotation

    def _resolved_type_hints(self, target: Callable[..., Any]) -> dict[str, Any]:
        if not inspect.isclass(target):
            return self._type_hints(target)

        # Class signatures come from __init__ or __new__; merge their hints.
        merged: dict[str, Any] = {}
        for member in self._constructor_members(target):
            for name, annotation in self._type_hints(member).items():
                merged.setdefault(name, annotation)
        return merged

    def _type_hints(self, target: Any) -> dict[str, Any]:
        try:
            return get_type_hints(target, include_extras=True)
        except (AttributeError, NameError, TypeError):
            # Fall back to evaluating each string annotation separately.
            return {}

    def _namespace(self, target: Callable[..., Any]) -> dict[str, Any]:
        if not inspect.isclass(target):
            return getattr(inspect.unwrap(target), "__globals__", {})

        module = sys.modules.get(target.__module__)
        namespace = dict(vars(module)) if module is not None else {}
        for member in self._constructor_members(target):
            namespace.update(getattr(member, "__globals__", {}))
        return namespace

    def _constructor_members(self, cls: type[Any]) -> list[Any]:
        members = [getattr(cls, member_name, None) for member_name in ("__init__", "__new__")]
        return [
            member
            for member in members
            if member is not None and member not in (object.__init__, object.__new__)
        ]


def split_arguments(
    parameters: Sequence[ParameterDescriptor],
    values: Sequence[Any],
) -> tuple[list[Any], dict[str, Any]]:
    """Split resolved values into positional and keyword-only call arguments.

    Args:
        parameters: Descriptors the values were resolved for.
        values: One resolved value per descriptor.

    """
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for parameter, value in zip(parameters, values, strict=True):
        if parameter.kind is Parameter.KEYWORD_ONLY:
            kwargs[parameter.name] = value
        else:
            args.append(value)
    return args, kwargs


__all__ = ["MISSING", "ParameterDescriptor", "ParameterDescriptorExtractor", "split_arguments"]
