from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from autowire._internal.arguments import ArgumentResolver, ResolutionData
from autowire._internal.class_resolver import ClassIdentifier, ClassResolver
from autowire._internal.parameters import ParameterDescriptorExtractor, split_arguments
from autowire._internal.resolution_stack import building
from autowire.exceptions import AutowireClassNotFoundError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InstanceBuilder:
    """Resolve a class, resolve its constructor arguments, and instantiate it.

    Building recurses through ``ArgumentResolver`` for annotated constructor
    parameters. Nothing is cached: each call constructs a fresh object graph.
    """

    class_resolver: ClassResolver
    extractor: ParameterDescriptorExtractor = field(default_factory=ParameterDescriptorExtractor)
    arguments: ArgumentResolver = field(init=False)

    def __post_init__(self) -> None:
        self.arguments = ArgumentResolver(build=self.build)

    def build(
        self,
        identifier: ClassIdentifier,
        data: ResolutionData | None = None,
        optional: bool = False,  # noqa: FBT001, FBT002
    ) -> Any:
        """Build a new instance of the class named by ``identifier``.

        Args:
            identifier: Class name, dotted import path, or class object.
            data: Explicit constructor arguments keyed by position or name.
            optional: Return ``None`` instead of raising when the class cannot
                be found. Missing constructor arguments still raise.

        Raises:
            AutowireClassNotFoundError: If the class is not loadable and
                ``optional`` is false.
            AutowireMissingArgumentError: If a constructor parameter has no
                value source.
            AutowireCyclicDependencyError: If the class is already being built
                further up the current call chain.

        """
        try:
            resolved = self.class_resolver.resolve(identifier)
        except AutowireClassNotFoundError as error:
            if optional:
                logger.debug("Optional class '%s' not found; using None", error.identifier)
                return None
            raise

        if not resolved.has_constructor:
            logger.debug("Constructing '%s' without arguments", resolved.name)
            return resolved.cls()

        try:
            parameters = self.extractor.extract(resolved.cls)
        except (TypeError, ValueError):
            # Constructors inherited from builtins may expose no signature.
            logger.debug("No signature for '%s'; constructing without arguments", resolved.name)
            return resolved.cls()

        # Only argument resolution is guarded; the constructor may build its own class.
        with building(resolved.cls, resolved.name):
            values = self.arguments.resolve(parameters, data, target=resolved.name)

        logger.debug("Constructing '%s' with %d argument(s)", resolved.name, len(values))
        args, kwargs = split_arguments(parameters, values)
        return resolved.cls(*args, **kwargs)
