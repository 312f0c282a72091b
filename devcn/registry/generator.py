"""generate-registry — build ``index.json``, TypeScript types and the catalogue page."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from devcn.exceptions import RegistryError, RegistryNotFoundError
from devcn.registry.layout import RegistryLayout
from devcn.types import ComponentType, GenerationResult, IndexEntry, RegistryIndex

logger = logging.getLogger(__name__)


def build_index(
    layout: RegistryLayout,
    name: str,
    description: str,
    url: str,
) -> tuple[RegistryIndex, dict[str, str]]:
    """Summarise every manifest in the registry directory.

    Manifests are read in sorted filename order and the resulting entries are
    sorted by component name, so the same directory always yields the same
    index.

    Returns:
        ``(index, failures)`` where *failures* maps manifest stem → reason
        for every manifest that was skipped.
    """
    index = RegistryIndex(name=name, description=description, url=url)
    failures: dict[str, str] = {}

    for stem in layout.manifest_stems():
        try:
            entry = _index_entry(stem, _read_manifest(layout.manifest_path(stem)))
        except RegistryError as exc:
            logger.warning("Skipping %s: %s", stem, exc)
            failures[stem] = str(exc)
            continue
        index.components.append(entry)
        logger.info("Added %s to registry", stem)

    index.components.sort(key=lambda c: (c.name.casefold(), c.name))
    return index, failures


def render_index(index: RegistryIndex) -> str:
    return json.dumps(index.to_json_dict(), indent=2, ensure_ascii=False)


def render_types_module(index: RegistryIndex) -> str:
    names = json.dumps([c.name for c in index.components], indent=2)
    return _TYPES_TEMPLATE.format(names=names)


def render_registry_page(index: RegistryIndex, cli_name: str) -> str:
    """MDX catalogue listing every component with its install command."""
    sections = []
    for component in index.components:
        deps = ", ".join(component.dependencies) or "None"
        registry_deps = ", ".join(component.registry_dependencies) or "None"
        sections.append(
            _COMPONENT_SECTION_TEMPLATE.format(
                name=component.name,
                description=component.description,
                cli_name=cli_name,
                dependencies=deps,
                registry_dependencies=registry_deps,
            )
        )
    return _PAGE_TEMPLATE.format(
        front_matter=render_front_matter({
            "title": "Component Registry",
            "description": f"All available components in the {index.name} registry",
        }),
        registry_name=index.name,
        count=len(index.components),
        sections="\n\n".join(sections),
        cli_name=cli_name,
    )


def render_front_matter(fields: dict[str, Any]) -> str:
    """YAML front matter block (``---`` fenced) for an MDX page."""
    body = yaml.safe_dump(fields, sort_keys=False, allow_unicode=True, width=1000)
    return f"---\n{body}---"


def generate_registry(layout: RegistryLayout, config: Any) -> GenerationResult:
    """Regenerate the registry index and its derived artefacts.

    Writes ``registry/index.json``, ``lib/registry-types.ts`` and
    ``content/docs/registry.mdx``.

    Raises:
        RegistryNotFoundError: The registry directory does not exist.
    """
    if not layout.registry_dir.is_dir():
        raise RegistryNotFoundError(layout.registry_dir)

    index, failures = build_index(
        layout,
        name=config.registry_name,
        description=config.registry_description,
        url=config.registry_url,
    )
    logger.info("Found %d components in registry", len(index.components) + len(failures))

    outputs = {
        layout.index_file: render_index(index),
        layout.types_file: render_types_module(index),
        layout.registry_page: render_registry_page(index, config.cli_name),
    }
    for path, text in outputs.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    return GenerationResult(index=index, written=list(outputs), failures=failures)


# ─── Helpers ──────────────────────────────────────────────────────────────────


def _read_manifest(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RegistryError(f"cannot read manifest: {exc}", component=path.stem) from exc
    if not isinstance(data, dict):
        raise RegistryError("manifest is not a JSON object", component=path.stem)
    return data


def _index_entry(stem: str, data: dict) -> IndexEntry:
    if not data.get("name") or not data.get("files"):
        raise RegistryError("invalid component (missing name or files)", component=stem)
    files = data["files"]
    try:
        return IndexEntry(
            name=data["name"],
            type=data.get("type") or ComponentType.UI.value,
            description=data.get("description") or f"{data['name']} component",
            dependencies=data.get("dependencies") or [],
            dev_dependencies=data.get("devDependencies") or [],
            registry_dependencies=data.get("registryDependencies") or [],
            files=len(files) if isinstance(files, list) else 0,
            path=f"registry/{stem}.json",
        )
    except ValidationError as exc:
        raise RegistryError(f"malformed manifest: {exc}", component=stem) from exc


# ─── Templates ────────────────────────────────────────────────────────────────

_TYPES_TEMPLATE = """\
// Auto-generated registry types
export interface RegistryComponent {{
  name: string;
  type: string;
  description: string;
  dependencies: string[];
  devDependencies: string[];
  registryDependencies: string[];
  files: number;
  path: string;
}}

export interface Registry {{
  name: string;
  description: string;
  url: string;
  components: RegistryComponent[];
}}

export const REGISTRY_COMPONENTS = {names} as const;

export type ComponentName = typeof REGISTRY_COMPONENTS[number];
"""

_COMPONENT_SECTION_TEMPLATE = """\
### [{name}](/components/{name})

{description}

```bash
npx {cli_name} add {name}
```

**Dependencies:** {dependencies}
**Registry Dependencies:** {registry_dependencies}

---"""

_PAGE_TEMPLATE = """\
{front_matter}

# Component Registry

The {registry_name} registry contains {count} components that you can add to your project.

## Available Components

{sections}

## Installation

To install any component, use the {registry_name} CLI:

```bash
npx {cli_name} add [component-name]
```

You can also install multiple components at once:

```bash
npx {cli_name} add button card dialog
```
"""
