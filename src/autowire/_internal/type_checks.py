from __future__ import annotations

import datetime
import decimal
import inspect
import pathlib
import types
import uuid
from typing import Any, TypeGuard

_IGNORED_BASE_TYPES: tuple[type[Any], ...] = (
    pathlib.PurePath,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    decimal.Decimal,
)


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_injectable_annotation(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when a parameter annotation names a class worth building.

    Builtin scalars and containers, metaclasses and value types such as
    ``datetime`` or ``Path`` are treated as plain data and never built.

    Args:
        candidate: Normalized parameter annotation.

    """
    if not is_runtime_class(candidate):
        return False
    if candidate.__module__ == "builtins":
        return False
    if issubclass(candidate, type):
        return False
    return not issubclass(candidate, _IGNORED_BASE_TYPES)


def is_concrete_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate can be instantiated.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    if not is_runtime_class(candidate):
        return False
    if inspect.isabstract(candidate):
        return False
    return not getattr(candidate, "_is_protocol", False)


__all__ = ["is_concrete_class", "is_injectable_annotation", "is_runtime_class"]
