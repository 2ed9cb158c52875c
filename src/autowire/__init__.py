from autowire._internal.class_resolver import ALIASES_KEY, ResolvedClass
from autowire._internal.injector import Injector
from autowire._internal.locator import Locator
from autowire._internal.parameters import MISSING, ParameterDescriptor
from autowire._internal.registry import Registry
from autowire.exceptions import (
    AutowireClassNotFoundError,
    AutowireCyclicDependencyError,
    AutowireError,
    AutowireInvalidRegistrationError,
    AutowireInvalidTargetError,
    AutowireMissingArgumentError,
)

__all__ = [
    "ALIASES_KEY",
    "MISSING",
    "AutowireClassNotFoundError",
    "AutowireCyclicDependencyError",
    "AutowireError",
    "AutowireInvalidRegistrationError",
    "AutowireInvalidTargetError",
    "AutowireMissingArgumentError",
    "Injector",
    "Locator",
    "ParameterDescriptor",
    "Registry",
]
