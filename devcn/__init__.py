"""devcn-ui — component design registry toolchain.

Usage:
    from devcn import RegistryLayout, generate_registry, validate_registry, config

    layout = RegistryLayout.from_root(".")
    result = generate_registry(layout, config)
    report = validate_registry(layout)
"""

from devcn.config import DevcnConfig, config
from devcn.exceptions import (
    DevcnError, RegistryError, RegistryNotFoundError,
    ComponentNotFoundError, ComponentFetchError, InstallError,
)
from devcn.registry import (
    RegistryLayout, RegistryValidator,
    generate_registry, validate_registry, register_all_components,
    discover_components, scaffold_component,
)
from devcn.types import (
    ComponentType, RegistryFile, RegistryItem, IndexEntry, RegistryIndex,
    ValidationReport, GenerationResult, RegistrationResult, InstallResult,
)
from devcn.version import __version__

__all__ = [
    "DevcnConfig", "config",
    "DevcnError", "RegistryError", "RegistryNotFoundError",
    "ComponentNotFoundError", "ComponentFetchError", "InstallError",
    "RegistryLayout", "RegistryValidator",
    "generate_registry", "validate_registry", "register_all_components",
    "discover_components", "scaffold_component",
    "ComponentType", "RegistryFile", "RegistryItem", "IndexEntry", "RegistryIndex",
    "ValidationReport", "GenerationResult", "RegistrationResult", "InstallResult",
    "__version__",
]
