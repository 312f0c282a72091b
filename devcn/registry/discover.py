"""discover-components — find every component in ``packages/`` and report registration status."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from devcn.registry.layout import RegistryLayout
from devcn.registry.scanner import find_components_in_directory
from devcn.types import DiscoveredComponent

logger = logging.getLogger(__name__)

# Checked in this order; the package root catches flat layouts
_COMPONENT_SUBDIRS: tuple[tuple[str, ...], ...] = (
    ("components",),
    ("src", "components"),
    ("lib", "components"),
    (),
)


def discover_components(layout: RegistryLayout) -> list[DiscoveredComponent]:
    """Scan every package for React components.

    Each source file is reported once even when several search locations
    overlap. ``registered`` is set when ``registry/<name>.json`` exists.
    """
    discovered: list[DiscoveredComponent] = []
    seen: set[Path] = set()

    if not layout.packages_dir.is_dir():
        logger.warning("Packages directory not found: %s", layout.packages_dir)
        return discovered

    packages = sorted(p for p in layout.packages_dir.iterdir() if p.is_dir())
    logger.info("Scanning %d packages", len(packages))

    for package_dir in packages:
        for parts in _COMPONENT_SUBDIRS:
            search_dir = package_dir.joinpath(*parts)
            for component in find_components_in_directory(search_dir, package_dir.name):
                if component.file_path in seen:
                    continue
                seen.add(component.file_path)
                component.registered = layout.manifest_path(component.name).exists()
                discovered.append(component)

    return discovered


def build_component_map(components: list[DiscoveredComponent]) -> dict:
    """JSON-ready summary grouped by package."""
    by_package: dict[str, list[dict]] = {}
    for component in components:
        by_package.setdefault(component.package, []).append(
            component.model_dump(mode="json", by_alias=True)
        )
    return {
        "packages": list(by_package),
        "totalComponents": len(components),
        "componentsByPackage": by_package,
        "unregistered": [
            {"name": c.name, "package": c.package} for c in components if not c.registered
        ],
        "lastScanned": datetime.now(timezone.utc).isoformat(),
    }


def write_component_map(layout: RegistryLayout, components: list[DiscoveredComponent]) -> Path:
    layout.component_map.write_text(
        json.dumps(build_component_map(components), indent=2), encoding="utf-8"
    )
    return layout.component_map
