from __future__ import annotations

from typing import Any


class AutowireError(Exception):
    """Represent a base class for all autowire-specific failures.

    Catch this type when you want to handle any autowire error path without
    matching each concrete exception class individually. Exceptions raised by
    user constructors, methods and functions are never wrapped into it.
    """


class AutowireClassNotFoundError(AutowireError):
    """Signal that a requested class identifier has no loadable class.

    Raised by ``Injector.resolve_class`` and ``Injector.build`` when the
    identifier (after alias substitution) is not registered, cannot be
    imported, or names an abstract class or protocol.

    ``Injector.build(..., optional=True)`` returns ``None`` instead of raising
    this error. Suppression is local to that call.

    Typical fixes include registering the class with ``Registry.add_class``
    or adding an entry to the ``config.aliases`` table of the locator.
    """

    def __init__(self, identifier: Any, *, requested: Any = None) -> None:
        self.identifier = identifier
        self.requested = identifier if requested is None else requested
        if self.requested != identifier:
            msg = f'Class "{identifier}" was not found (requested as "{self.requested}").'
        else:
            msg = f'Class "{identifier}" was not found.'
        super().__init__(msg)


class AutowireMissingArgumentError(AutowireError):
    """Signal that a required parameter received no value.

    Raised while resolving arguments when a parameter has no positional or
    named entry in the data set, no class annotation to build from, and no
    default value. The ``optional`` flag of ``build`` never suppresses it.

    Typical fixes include passing the value in ``data`` (by position or by
    name) or giving the parameter a default. When the parameter's annotation
    could not be evaluated, the message names that error and it is chained
    as ``__cause__``.
    """

    def __init__(
        self,
        parameter: str,
        *,
        target: str,
        annotation_error: Exception | None = None,
    ) -> None:
        self.parameter = parameter
        self.target = target
        self.annotation_error = annotation_error
        message = f'Missing argument value for "{parameter}" in "{target}".'
        if annotation_error is not None:
            message += f" Original annotation error: {annotation_error}"
        super().__init__(message)


class AutowireCyclicDependencyError(AutowireError):
    """Signal that building a class requires building itself.

    Raised by ``Injector.build`` when a constructor annotation chain leads back
    to a class that is already being built in the current context, for
    example ``A(b: B)`` with ``B(a: A)``.

    Typical fixes include breaking the cycle with an explicit value in
    ``data`` or making one side depend on a factory instead of the class.
    """

    def __init__(self, chain: list[str]) -> None:
        self.chain = chain
        super().__init__(f"Cyclic dependency detected: {' -> '.join(chain)}.")


class AutowireInvalidTargetError(AutowireError):
    """Signal an invocation target that cannot be called.

    Raised by ``Injector.invoke_method`` when the instance has no such method,
    and by ``Injector.invoke_function`` when a string identifier is unknown or
    the target is not callable.
    """


class AutowireInvalidRegistrationError(AutowireError):
    """Signal invalid registry input.

    Raised by ``Registry.add_class`` and ``Registry.add_function`` for
    non-classes, abstract classes, non-callables, or a name that is already
    bound to a different object.
    """


__all__ = [
    "AutowireClassNotFoundError",
    "AutowireCyclicDependencyError",
    "AutowireError",
    "AutowireInvalidRegistrationError",
    "AutowireInvalidTargetError",
    "AutowireMissingArgumentError",
]
