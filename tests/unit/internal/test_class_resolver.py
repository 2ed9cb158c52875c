from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol

import pytest

from autowire._internal.class_resolver import ClassResolver, ResolvedClass
from autowire._internal.registry import Registry
from autowire.exceptions import AutowireClassNotFoundError


class FooInterface(ABC):
    @abstractmethod
    def run(self) -> str: ...


class ConcreteFoo(FooInterface):
    def run(self) -> str:
        return "concrete"


class OtherFoo(FooInterface):
    def run(self) -> str:
        return "other"


class SupportsRun(Protocol):
    def run(self) -> str: ...


class WithInit:
    def __init__(self, value: int = 0) -> None:
        self.value = value


class WithNew:
    def __new__(cls) -> "WithNew":
        return super().__new__(cls)


class InheritsInit(WithInit):
    pass


class Bare:
    pass


def _resolver(
    registry: Registry,
    aliases: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> ClassResolver:
    return ClassResolver(registry=registry, aliases=lambda: aliases, **kwargs)


class TestRegistryLookup:
    def test_registered_name_resolves(self, registry: Registry) -> None:
        registry.add_class(ConcreteFoo)

        resolved = _resolver(registry).resolve("ConcreteFoo")

        assert resolved == ResolvedClass(name="ConcreteFoo", cls=ConcreteFoo)

    def test_unknown_name_raises(self, registry: Registry) -> None:
        with pytest.raises(AutowireClassNotFoundError) as exc_info:
            _resolver(registry).resolve("NoSuchClass")

        assert exc_info.value.identifier == "NoSuchClass"
        assert 'Class "NoSuchClass" was not found' in str(exc_info.value)

    def test_class_object_resolves_when_autoregistering(self, registry: Registry) -> None:
        resolved = _resolver(registry).resolve(ConcreteFoo)

        assert resolved.cls is ConcreteFoo

    def test_unregistered_class_object_raises_in_strict_mode(self, registry: Registry) -> None:
        resolver = _resolver(registry, autoregister_concrete_types=False)

        with pytest.raises(AutowireClassNotFoundError):
            resolver.resolve(ConcreteFoo)

    def test_registered_class_object_resolves_in_strict_mode(self, registry: Registry) -> None:
        registry.add_class(ConcreteFoo, name="foo")
        resolver = _resolver(registry, autoregister_concrete_types=False)

        assert resolver.resolve(ConcreteFoo) == ResolvedClass(name="foo", cls=ConcreteFoo)

    def test_abstract_class_object_raises(self, registry: Registry) -> None:
        with pytest.raises(AutowireClassNotFoundError) as exc_info:
            _resolver(registry).resolve(FooInterface)

        assert exc_info.value.identifier == "FooInterface"

    def test_protocol_raises(self, registry: Registry) -> None:
        with pytest.raises(AutowireClassNotFoundError):
            _resolver(registry).resolve(SupportsRun)

    def test_dotted_path_imports_when_enabled(self, registry: Registry) -> None:
        resolver = _resolver(registry, import_paths=True)

        resolved = resolver.resolve("collections.OrderedDict")

        assert resolved.cls.__name__ == "OrderedDict"

    def test_dotted_path_is_not_imported_by_default(self, registry: Registry) -> None:
        with pytest.raises(AutowireClassNotFoundError):
            _resolver(registry).resolve("collections.OrderedDict")

    def test_dotted_path_to_missing_module_raises(self, registry: Registry) -> None:
        resolver = _resolver(registry, import_paths=True)

        with pytest.raises(AutowireClassNotFoundError):
            resolver.resolve("no_such_package_for_tests.Thing")


class TestAliases:
    def test_alias_redirects_name(self, registry: Registry) -> None:
        registry.add_class(ConcreteFoo)
        resolver = _resolver(registry, {"IFoo": "ConcreteFoo"})

        assert resolver.resolve("IFoo").cls is ConcreteFoo

    def test_alias_redirects_annotated_class(self, registry: Registry) -> None:
        registry.add_class(OtherFoo)
        resolver = _resolver(registry, {"FooInterface": "OtherFoo"})

        assert resolver.resolve(FooInterface).cls is OtherFoo

    def test_alias_value_may_be_class(self, registry: Registry) -> None:
        resolver = _resolver(registry, {"FooInterface": ConcreteFoo}, autoregister_concrete_types=False)

        assert resolver.resolve(FooInterface).cls is ConcreteFoo

    def test_alias_is_applied_once(self, registry: Registry) -> None:
        registry.add_class(ConcreteFoo, name="B")
        resolver = _resolver(registry, {"A": "B", "B": "C"})

        assert resolver.resolve("A").cls is ConcreteFoo

    def test_alias_to_unknown_class_reports_both_names(self, registry: Registry) -> None:
        resolver = _resolver(registry, {"IFoo": "Missing"})

        with pytest.raises(AutowireClassNotFoundError) as exc_info:
            resolver.resolve("IFoo")

        assert exc_info.value.identifier == "Missing"
        assert exc_info.value.requested == "IFoo"

    def test_missing_alias_table_is_not_an_error(self, registry: Registry) -> None:
        registry.add_class(ConcreteFoo)

        assert _resolver(registry, None).resolve("ConcreteFoo").cls is ConcreteFoo

    def test_aliases_are_read_on_every_request(self, registry: Registry) -> None:
        registry.add_class(ConcreteFoo)
        registry.add_class(OtherFoo)
        aliases = {"IFoo": "ConcreteFoo"}
        resolver = _resolver(registry, aliases)

        first = resolver.resolve("IFoo").cls
        aliases["IFoo"] = "OtherFoo"
        second = resolver.resolve("IFoo").cls

        assert (first, second) == (ConcreteFoo, OtherFoo)


class TestResolvedClass:
    @pytest.mark.parametrize(
        ("cls", "expected"),
        [
            (Bare, False),
            (ConcreteFoo, False),
            (WithInit, True),
            (WithNew, True),
            (InheritsInit, True),
        ],
    )
    def test_has_constructor(self, cls: type[Any], expected: bool) -> None:  # noqa: FBT001
        assert ResolvedClass(name=cls.__qualname__, cls=cls).has_constructor is expected
