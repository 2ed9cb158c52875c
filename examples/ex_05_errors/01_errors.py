"""Error handling: missing classes, missing arguments and cycles.

``optional=True`` only hides a missing class for that single ``build`` call.
Missing arguments and cyclic annotations always raise. Exceptions raised by
user code propagate unchanged.
"""

from __future__ import annotations

from autowire import (
    AutowireClassNotFoundError,
    AutowireCyclicDependencyError,
    AutowireMissingArgumentError,
    Injector,
)


class Greeter:
    def __init__(self, name: str) -> None:
        self.name = name


class Chicken:
    def __init__(self, egg: Egg) -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


def explode() -> None:
    msg = "boom"
    raise RuntimeError(msg)


def main() -> None:
    injector = Injector()

    try:
        injector.build("NoSuchClass")
    except AutowireClassNotFoundError as error:
        print(f"class_not_found={error.identifier}")  # => class_not_found=NoSuchClass

    try:
        injector.build(Greeter, optional=True)
    except AutowireMissingArgumentError as error:
        print(f"missing={error.parameter}")  # => missing=name

    try:
        injector.build(Chicken)
    except AutowireCyclicDependencyError as error:
        print(f"cycle={'>'.join(error.chain)}")  # => cycle=Chicken>Egg>Chicken

    try:
        injector.invoke_function(explode)
    except RuntimeError as error:
        print(f"user_error={error}")  # => user_error=boom


if __name__ == "__main__":
    main()
