"""Explicit data always wins over autowiring.

Values in ``data`` are matched to parameters by position first, then by
name. Annotated classes are built only when no explicit value exists, and
defaults are the last resort.
"""

from __future__ import annotations

from autowire import Injector


class Clock:
    def now(self) -> str:
        return "12:00"


class FixedClock(Clock):
    def now(self) -> str:
        return "00:00"


class Reporter:
    def __init__(self, title: str, clock: Clock, width: int = 80) -> None:
        self.title = title
        self.clock = clock
        self.width = width


def main() -> None:
    injector = Injector()

    by_name = injector.build(Reporter, {"title": "daily"})
    print(f"{by_name.title}|{by_name.clock.now()}|{by_name.width}")  # => daily|12:00|80

    by_position = injector.build(Reporter, {0: "weekly", "title": "ignored", 2: 120})
    print(f"{by_position.title}|{by_position.width}")  # => weekly|120

    overridden = injector.build(Reporter, {"title": "test", "clock": FixedClock()})
    print(f"clock={overridden.clock.now()}")  # => clock=00:00


if __name__ == "__main__":
    main()
