"""
Generator dispatch for the scaffolding engine.

The engine registers one handler per GeneratorKind and ManifestKind, then
asks the table which handler to run for a given builder. Dispatch goes
through the closed enum sets; no handler is looked up by name at runtime.
"""

import logging
from typing import Callable, Dict, Optional

from starterkit.builders.descriptor import GeneratorKind, ManifestKind
from starterkit.builders.registry import BuilderRegistry
from starterkit.core.exceptions import GeneratorNotRegisteredError

logger = logging.getLogger(__name__)

Handler = Callable[..., object]


class GeneratorTable:
    """
    Handlers for output-file and manifest generation.

    Example:
        table = GeneratorTable()
        table.register_generator(GeneratorKind.BUILD_PL, engine.create_build_pl)
        handler = table.generator_for(registry, "Module::Build")
        handler(module_spec)
    """

    def __init__(
        self,
        generators: Optional[Dict[GeneratorKind, Handler]] = None,
        manifests: Optional[Dict[ManifestKind, Handler]] = None,
    ):
        self._generators: Dict[GeneratorKind, Handler] = dict(generators or {})
        self._manifests: Dict[ManifestKind, Handler] = dict(manifests or {})

    def register_generator(self, kind: GeneratorKind, handler: Handler) -> None:
        """
        Register the handler for a generator kind.

        Raises:
            ValueError: If a handler is already registered for kind
        """
        if kind in self._generators:
            raise ValueError(f"Generator '{kind.value}' is already registered")
        self._generators[kind] = handler

    def register_manifest(self, kind: ManifestKind, handler: Handler) -> None:
        """
        Register the handler for a manifest kind.

        Raises:
            ValueError: If a handler is already registered for kind
        """
        if kind in self._manifests:
            raise ValueError(f"Manifest '{kind.value}' is already registered")
        self._manifests[kind] = handler

    def has_generator(self, kind: GeneratorKind) -> bool:
        return kind in self._generators

    def has_manifest(self, kind: ManifestKind) -> bool:
        return kind in self._manifests

    def generator_for(
        self, registry: BuilderRegistry, builder: Optional[str] = None
    ) -> Optional[Handler]:
        """
        Resolve the output-file handler for a builder.

        Returns:
            Handler, or None if the builder is unknown

        Raises:
            GeneratorNotRegisteredError: If the builder is known but its
                generator kind has no handler
        """
        result = registry.lookup(builder)
        if result.descriptor is None:
            return None
        kind = result.descriptor.generator
        if kind not in self._generators:
            raise GeneratorNotRegisteredError(result.builder, kind.value)
        logger.debug(f"Dispatching {result.builder} to generator {kind.value}")
        return self._generators[kind]

    def manifest_for(
        self, registry: BuilderRegistry, builder: Optional[str] = None
    ) -> Optional[Handler]:
        """
        Resolve the manifest handler for a builder.

        Returns:
            Handler, or None if the builder is unknown

        Raises:
            GeneratorNotRegisteredError: If the builder is known but its
                manifest kind has no handler
        """
        result = registry.lookup(builder)
        if result.descriptor is None:
            return None
        kind = result.descriptor.manifest
        if kind not in self._manifests:
            raise GeneratorNotRegisteredError(result.builder, kind.value)
        logger.debug(f"Dispatching {result.builder} to manifest {kind.value}")
        return self._manifests[kind]


__all__ = ["Handler", "GeneratorTable"]
