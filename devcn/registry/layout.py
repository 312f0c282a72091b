"""Monorepo paths the registry toolchain reads and writes."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class RegistryLayout(BaseModel):
    """Resolved locations inside a devcn-ui monorepo checkout.

    All paths derive from ``root``; build one with :meth:`from_root`.
    """

    model_config = {"frozen": True}

    root: Path
    registry_dir: Path
    examples_dir: Path
    content_dir: Path
    packages_dir: Path
    types_file: Path
    registry_page: Path
    component_map: Path

    @classmethod
    def from_root(cls, root: Path | str) -> "RegistryLayout":
        root = Path(root)
        docs = root / "apps" / "docs"
        return cls(
            root=root,
            registry_dir=docs / "public" / "registry",
            examples_dir=docs / "examples",
            content_dir=docs / "content" / "components",
            packages_dir=root / "packages",
            types_file=docs / "lib" / "registry-types.ts",
            registry_page=docs / "content" / "docs" / "registry.mdx",
            component_map=root / "component-map.json",
        )

    @property
    def index_file(self) -> Path:
        return self.registry_dir / "index.json"

    def manifest_path(self, name: str) -> Path:
        return self.registry_dir / f"{name}.json"

    def example_path(self, name: str) -> Path:
        return self.examples_dir / f"{name}.tsx"

    def doc_path(self, name: str) -> Path:
        return self.content_dir / f"{name}.mdx"

    def manifest_stems(self) -> list[str]:
        """Sorted stems of every component manifest (``index.json`` excluded)."""
        return sorted(
            p.stem
            for p in self.registry_dir.glob("*.json")
            if p.is_file() and p.name != "index.json"
        )
