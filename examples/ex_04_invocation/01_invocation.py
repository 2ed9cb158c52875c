"""Calling existing methods and functions with autowired arguments.

``invoke_method`` and ``invoke_function`` resolve arguments the same way
``build`` resolves constructor arguments, then return the call result.
``inject`` turns a function into one that autowires its class-annotated
parameters on every call; callers pass only the remaining ones.
"""

from __future__ import annotations

from autowire import Injector, Registry


class Mailer:
    def send(self, to: str) -> str:
        return f"sent to {to}"


class Newsletter:
    def __init__(self, subject: str) -> None:
        self.subject = subject

    def publish(self, mailer: Mailer, audience: str = "everyone") -> str:
        return f"{self.subject}: {mailer.send(audience)}"


def notify(mailer: Mailer, user: str) -> str:
    return mailer.send(user)


def main() -> None:
    registry = Registry()
    registry.add_function(notify, name="notify")
    injector = Injector(registry=registry)

    newsletter = Newsletter("Weekly")
    print(injector.invoke_method(newsletter, "publish"))  # => Weekly: sent to everyone

    print(injector.invoke_function("notify", {"user": "ada"}))  # => sent to ada

    @injector.inject
    def greet(mailer: Mailer, user: str) -> str:
        return mailer.send(user).upper()

    print(greet("grace"))  # => SENT TO GRACE


if __name__ == "__main__":
    main()
