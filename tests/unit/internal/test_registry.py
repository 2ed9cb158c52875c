from abc import ABC, abstractmethod

import pytest

from autowire import Registry
from autowire.exceptions import AutowireInvalidRegistrationError


class Service:
    pass


class OtherService:
    pass


class AbstractService(ABC):
    @abstractmethod
    def run(self) -> None: ...


def handler() -> str:
    return "handled"


class TestClasses:
    def test_add_class_uses_qualname(self, registry: Registry) -> None:
        registry.add_class(Service)

        assert registry.find_class("Service") is Service
        assert registry.name_of(Service) == "Service"
        assert "Service" in registry

    def test_add_class_with_name(self, registry: Registry) -> None:
        registry.add_class(Service, name="svc")

        assert registry.find_class("svc") is Service
        assert registry.name_of(Service) == "svc"

    def test_first_name_is_canonical(self, registry: Registry) -> None:
        registry.add_class(Service, name="first")
        registry.add_class(Service, name="second")

        assert registry.name_of(Service) == "first"
        assert registry.find_class("second") is Service

    def test_add_class_as_decorator(self, registry: Registry) -> None:
        @registry.add_class
        class Decorated:
            pass

        @registry.add_class(name="named")
        class Named:
            pass

        assert registry.find_class(Decorated.__qualname__) is Decorated
        assert registry.find_class("named") is Named
        assert isinstance(Decorated, type)

    def test_re_adding_same_class_is_allowed(self, registry: Registry) -> None:
        registry.add_class(Service)
        registry.add_class(Service)

        assert len(registry) == 1

    def test_name_collision_raises(self, registry: Registry) -> None:
        registry.add_class(Service, name="svc")

        with pytest.raises(AutowireInvalidRegistrationError, match="already registered"):
            registry.add_class(OtherService, name="svc")

    def test_rejects_non_class(self, registry: Registry) -> None:
        with pytest.raises(AutowireInvalidRegistrationError, match="must be a class"):
            registry.add_class(handler)  # type: ignore[call-overload]

    def test_rejects_abstract_class(self, registry: Registry) -> None:
        with pytest.raises(AutowireInvalidRegistrationError, match="cannot be abstract"):
            registry.add_class(AbstractService)

    def test_unregistered_name_of_is_qualname(self, registry: Registry) -> None:
        assert registry.name_of(OtherService) == "OtherService"

    def test_find_class_imports_dotted_path(self, registry: Registry) -> None:
        found = registry.find_class("fractions.Fraction", import_paths=True)

        assert found is not None
        assert found.__name__ == "Fraction"

    def test_find_class_ignores_non_class_import(self, registry: Registry) -> None:
        assert registry.find_class("os.getcwd", import_paths=True) is None


class TestFunctions:
    def test_add_function(self, registry: Registry) -> None:
        registry.add_function(handler)

        assert registry.find_function("handler") is handler

    def test_add_function_as_decorator_with_name(self, registry: Registry) -> None:
        @registry.add_function(name="cb")
        def callback() -> None: ...

        assert registry.find_function("cb") is callback

    def test_rejects_class_as_function(self, registry: Registry) -> None:
        with pytest.raises(AutowireInvalidRegistrationError):
            registry.add_function(Service)

    def test_rejects_non_callable(self, registry: Registry) -> None:
        with pytest.raises(AutowireInvalidRegistrationError):
            registry.add_function(42, name="answer")  # type: ignore[call-overload]

    def test_find_function_imports_dotted_path(self, registry: Registry) -> None:
        import os.path

        assert registry.find_function("os.path.join", import_paths=True) is os.path.join

    def test_unknown_function(self, registry: Registry) -> None:
        assert registry.find_function("missing") is None
        assert registry.find_function("missing", import_paths=True) is None
