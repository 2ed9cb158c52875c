from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from autowire.exceptions import AutowireCyclicDependencyError

# Classes currently being built in this context, outermost first.
_resolution_stack: ContextVar[tuple[type[Any], ...]] = ContextVar(
    "autowire_resolution_stack",
    default=(),
)


@contextmanager
def building(cls: type[Any], name: str) -> Iterator[None]:
    """Mark ``cls`` as being built for the duration of the block.

    Each thread and asyncio task sees its own stack, since the stack lives in
    a ``ContextVar`` and is replaced rather than mutated.

    Args:
        cls: Class about to be constructed.
        name: Identifier used for ``cls`` in error messages.

    Raises:
        AutowireCyclicDependencyError: If ``cls`` is already being built.

    """
    stack = _resolution_stack.get()
    if cls in stack:
        chain = [*(entry.__qualname__ for entry in stack[stack.index(cls) :]), name]
        raise AutowireCyclicDependencyError(chain)

    token = _resolution_stack.set((*stack, cls))
    try:
        yield
    finally:
        _resolution_stack.reset(token)


def current_stack() -> tuple[type[Any], ...]:
    """Return the classes being built in the current context."""
    return _resolution_stack.get()


__all__ = ["building", "current_stack"]
