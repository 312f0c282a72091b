"""Registry build toolchain — public API surface."""

from devcn.registry.layout import RegistryLayout
from devcn.registry.generator import generate_registry, build_index
from devcn.registry.validator import RegistryValidator, validate_registry
from devcn.registry.register import register_all_components, build_manifest
from devcn.registry.discover import discover_components, write_component_map
from devcn.registry.scaffolder import scaffold_component
from devcn.registry.examples import analyze_disabled_examples, restore_examples

__all__ = [
    "RegistryLayout",
    "generate_registry",
    "build_index",
    "RegistryValidator",
    "validate_registry",
    "register_all_components",
    "build_manifest",
    "discover_components",
    "write_component_map",
    "scaffold_component",
    "analyze_disabled_examples",
    "restore_examples",
]
