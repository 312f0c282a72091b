"""Consumer-side install of registry components."""

from devcn.installer.client import RegistryClient, RegistryListing
from devcn.installer.installer import ComponentInstaller, collect_dependencies
from devcn.installer.package_manager import detect_package_manager, install_command

__all__ = [
    "RegistryClient",
    "RegistryListing",
    "ComponentInstaller",
    "collect_dependencies",
    "detect_package_manager",
    "install_command",
]
