"""Component scaffold generator for ``devcn-ui registry new``."""

from __future__ import annotations

import json
import re
from pathlib import Path

from devcn.registry.generator import render_front_matter
from devcn.registry.layout import RegistryLayout
from devcn.registry.scanner import to_pascal_case
from devcn.types import ComponentType, RegistryFile, RegistryItem

_VALID_NAME_RE = re.compile(r"^[a-z][a-z0-9-]*$")


def scaffold_component(
    layout: RegistryLayout,
    name: str,
    package: str = "ui",
    cli_name: str = "devcn-ui",
    force: bool = False,
) -> list[Path]:
    """Generate a component source, example, docs page and registry manifest.

    Args:
        layout: Monorepo layout to write into.
        name: Component name in kebab-case (e.g. ``'my-button'``).
        package: Package under ``packages/`` that owns the component.
        cli_name: CLI name used in the generated install snippet.
        force: Overwrite an existing component source and manifest.

    Returns:
        Paths of the created files, in write order.

    Raises:
        ValueError: If *name* is not lowercase kebab-case.
        FileExistsError: If the component source or its registry manifest exists
                         and *force* is False.
    """
    if not _VALID_NAME_RE.match(name):
        raise ValueError(
            f"Component name '{name}' is invalid. "
            f"Use lowercase kebab-case starting with a letter. Example: 'my-button'"
        )

    pascal = to_pascal_case(name)
    component_dir = layout.packages_dir / package / "components" / name
    source_path = component_dir / f"{name}.tsx"
    if not force:
        for existing in (source_path, layout.manifest_path(name)):
            if existing.exists():
                raise FileExistsError(
                    f"Component already exists: {existing}. Use force=True to overwrite."
                )

    source = _COMPONENT_TEMPLATE.format(pascal=pascal)
    manifest = RegistryItem(
        name=name,
        type=ComponentType.UI.value,
        files=[
            RegistryFile(
                path=f"components/{name}.tsx",
                content=source,
                type=ComponentType.UI.value,
            )
        ],
    )
    # Scaffolded manifests carry no description; the index falls back to "<name> component"
    manifest_data = manifest.to_json_dict()
    manifest_data.pop("description", None)

    outputs = {
        source_path: source,
        layout.example_path(name): _EXAMPLE_TEMPLATE.format(
            pascal=pascal, package=package, name=name
        ),
        layout.doc_path(name): _DOC_TEMPLATE.format(
            front_matter=render_front_matter({
                "title": pascal,
                "description": (
                    f"A customizable {name} component with multiple variants and sizes."
                ),
                "component": True,
            }),
            pascal=pascal,
            package=package,
            name=name,
            cli_name=cli_name,
        ),
        layout.manifest_path(name): json.dumps(manifest_data, indent=2),
    }
    for path, text in outputs.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    return list(outputs)


# ─── Templates ────────────────────────────────────────────────────────────────

_COMPONENT_TEMPLATE = """\
'use client';

import * as React from 'react';
import {{ cn }} from '@/lib/utils';

export interface {pascal}Props extends React.HTMLAttributes<HTMLDivElement> {{
  variant?: 'default' | 'secondary';
  size?: 'sm' | 'md' | 'lg';
}}

const {pascal} = React.forwardRef<HTMLDivElement, {pascal}Props>(
  ({{ className, variant = 'default', size = 'md', ...props }}, ref) => {{
    return (
      <div
        ref={{ref}}
        className={{cn(
          // Base styles
          'inline-flex items-center justify-center rounded-md font-medium transition-colors',
          'focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-ring',
          'disabled:pointer-events-none disabled:opacity-50',
          // Variants
          {{
            'bg-primary text-primary-foreground hover:bg-primary/90': variant === 'default',
            'bg-secondary text-secondary-foreground hover:bg-secondary/80': variant === 'secondary',
          }},
          // Sizes
          {{
            'h-8 px-3 text-sm': size === 'sm',
            'h-10 px-4': size === 'md',
            'h-12 px-6 text-lg': size === 'lg',
          }},
          className
        )}}
        {{...props}}
      />
    );
  }}
);

{pascal}.displayName = '{pascal}';

export {{ {pascal} }};
"""

_EXAMPLE_TEMPLATE = """\
import {{ {pascal} }} from '@repo/{package}/components/{name}';

export default function {pascal}Example() {{
  return (
    <div className="flex flex-wrap gap-4">
      <{pascal}>Default</{pascal}>
      <{pascal} variant="secondary">Secondary</{pascal}>
      <{pascal} size="sm">Small</{pascal}>
      <{pascal} size="lg">Large</{pascal}>
    </div>
  );
}}
"""

_DOC_TEMPLATE = """\
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
  return <{pascal}>Click me</{pascal}>;
}}
```

## Examples

### Variants

<ComponentPreview name="{name}-variants" />

### Sizes

<ComponentPreview name="{name}-sizes" />

## API Reference

### {pascal}

| Prop | Type | Default | Description |
| --- | --- | --- | --- |
| `variant` | `'default' \\| 'secondary'` | `'default'` | The visual style variant |
| `size` | `'sm' \\| 'md' \\| 'lg'` | `'md'` | The size of the component |
| `className` | `string` | - | Additional CSS classes |

<PoweredBy packages={{[
  {{ name: "React", icon: "logos:react" }},
  {{ name: "Tailwind CSS", icon: "logos:tailwindcss-icon" }}
]}} />
"""
