"""register-all-components — write manifests for every unregistered component source."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from devcn.exceptions import DevcnError
from devcn.registry.generator import generate_registry, render_front_matter
from devcn.registry.layout import RegistryLayout
from devcn.registry.scanner import (
    extract_component_info,
    scan_for_components,
    to_kebab_case,
)
from devcn.types import (
    ComponentInfo,
    ComponentType,
    RegistrationResult,
    RegistryFile,
    RegistryItem,
)

logger = logging.getLogger(__name__)


def build_manifest(name: str, info: ComponentInfo, source: str) -> RegistryItem:
    """Registry manifest for a single-file component."""
    return RegistryItem(
        name=name,
        type=ComponentType.UI.value,
        description=info.description,
        dependencies=list(dict.fromkeys(info.dependencies)),
        files=[
            RegistryFile(
                path=f"components/{name}.tsx",
                content=source,
                type=ComponentType.UI.value,
            )
        ],
    )


def register_all_components(layout: RegistryLayout, config: Any) -> RegistrationResult:
    """Register every component under ``packages/*/components`` that has no manifest.

    Existing manifests are never overwritten. A failure on one component is
    recorded and the batch continues. When at least one component was
    registered the index is regenerated.
    """
    for directory in (layout.registry_dir, layout.examples_dir, layout.content_dir):
        directory.mkdir(parents=True, exist_ok=True)

    result = RegistrationResult()
    packages = _list_packages(layout.packages_dir)
    logger.info("Found %d packages: %s", len(packages), ", ".join(packages))

    for package in packages:
        components_dir = layout.packages_dir / package / "components"
        if not components_dir.is_dir():
            logger.warning("No components directory found in %s", package)
            continue

        for source_path in scan_for_components(components_dir):
            name = to_kebab_case(source_path.stem)
            if not name:
                logger.warning("Could not determine component name from %s", source_path)
                continue
            if layout.manifest_path(name).exists():
                logger.info("Registry already exists for %s", name)
                result.skipped.append(name)
                continue

            try:
                _register_one(layout, config, name, package, source_path, result)
            except (OSError, UnicodeDecodeError, DevcnError) as exc:
                logger.error("Failed to register %s: %s", name, exc)
                result.failures[name] = str(exc)
                continue

            logger.info("Registered %s", name)
            result.registered.append(name)

    if result.registered:
        logger.info("Regenerating registry index")
        try:
            generate_registry(layout, config)
            result.index_regenerated = True
        except (OSError, DevcnError) as exc:
            logger.error("Failed to update registry index: %s", exc)
            result.failures["index"] = str(exc)

    return result


def _register_one(
    layout: RegistryLayout,
    config: Any,
    name: str,
    package: str,
    source_path: Path,
    result: RegistrationResult,
) -> None:
    source = source_path.read_text(encoding="utf-8")
    info = extract_component_info(source, name)
    manifest = build_manifest(name, info, source)
    layout.manifest_path(name).write_text(
        json.dumps(manifest.to_json_dict(), indent=2), encoding="utf-8"
    )

    example_path = layout.example_path(name)
    if not example_path.exists():
        example_path.write_text(
            _EXAMPLE_STUB_TEMPLATE.format(
                pascal=info.display_name, package=package, name=name
            ),
            encoding="utf-8",
        )
        result.generated_examples.append(name)
        logger.info("Generated example: %s.tsx", name)

    doc_path = layout.doc_path(name)
    if not doc_path.exists():
        doc_path.write_text(
            _DOC_STUB_TEMPLATE.format(
                front_matter=render_front_matter({
                    "title": info.display_name,
                    "description": info.description,
                    "component": True,
                }),
                pascal=info.display_name,
                package=package,
                name=name,
                cli_name=config.cli_name,
            ),
            encoding="utf-8",
        )
        result.generated_docs.append(name)
        logger.info("Generated documentation: %s.mdx", name)


def _list_packages(packages_dir: Path) -> list[str]:
    if not packages_dir.is_dir():
        return []
    return sorted(p.name for p in packages_dir.iterdir() if p.is_dir())


# ─── Templates ────────────────────────────────────────────────────────────────

_EXAMPLE_STUB_TEMPLATE = """\
import {{ {pascal} }} from '@repo/{package}/components/{name}';

export default function {pascal}Example() {{
  return (
    <div className="flex flex-wrap gap-4">
      <{pascal}>
        Example {pascal}
      </{pascal}>
    </div>
  );
}}
"""

_DOC_STUB_TEMPLATE = """\
{front_matter}

<ComponentPreview name="{name}" />

## Installation

```bash
npx {cli_name} add {name}
```

## Usage

```tsx
import {{ {pascal} }} from '@repo/{package}/components/{name}';

export default function Example() {{
  return (
    <{pascal}>
      Your content here
    </{pascal}>
  );
}}
```

## API Reference

### {pascal}

| Prop | Type | Default | Description |
| --- | --- | --- | --- |
| `className` | `string` | - | Additional CSS classes |
| `children` | `ReactNode` | - | The content of the component |

<PoweredBy packages={{[
  {{ name: "React", icon: "logos:react" }},
  {{ name: "Tailwind CSS", icon: "logos:tailwindcss-icon" }}
]}} />
"""
