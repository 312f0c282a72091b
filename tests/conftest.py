"""Shared fixtures: a throwaway monorepo layout and sample manifests."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from devcn.registry.layout import RegistryLayout


BUTTON_SOURCE = """\
'use client';

import * as React from 'react';
import { Slot } from '@radix-ui/react-slot';
import { cva } from 'class-variance-authority';
import { cn } from '@/lib/utils';

/**
 * A clickable button with variants.
 * @param variant visual style
 */
export const Button = React.forwardRef<HTMLButtonElement, ButtonProps>((props, ref) => (
  <button ref={ref} {...props} />
));

export interface ButtonProps extends React.ButtonHTMLAttributes<HTMLButtonElement> {}
"""


def make_manifest(name: str, **overrides) -> dict:
    data = {
        "name": name,
        "type": "registry:ui",
        "description": f"The {name} component",
        "dependencies": [],
        "devDependencies": [],
        "registryDependencies": [],
        "files": [
            {"path": f"components/{name}.tsx", "content": "export {}", "type": "registry:ui"}
        ],
    }
    data.update(overrides)
    return data


def write_manifest(layout: RegistryLayout, name: str, data=None) -> Path:
    path = layout.manifest_path(name)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = make_manifest(name) if data is None else data
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def layout(tmp_path) -> RegistryLayout:
    """Monorepo layout rooted in tmp_path with an empty registry directory."""
    result = RegistryLayout.from_root(tmp_path)
    result.registry_dir.mkdir(parents=True)
    return result


@pytest.fixture
def registry_config():
    cfg = MagicMock()
    cfg.registry_name = "devcn-ui"
    cfg.registry_description = "Test registry"
    cfg.registry_url = "https://registry.test"
    cfg.cli_name = "devcn-ui"
    cfg.shadcn_package = "shadcn@latest"
    cfg.fetch_timeout = 5.0
    cfg.install_timeout = 30.0
    return cfg


@pytest.fixture(name="make_manifest")
def make_manifest_fixture():
    return make_manifest


@pytest.fixture(name="write_manifest")
def write_manifest_fixture(layout):
    def _write(name: str, data=None) -> Path:
        return write_manifest(layout, name, data)
    return _write


@pytest.fixture
def button_source() -> str:
    return BUTTON_SOURCE
