"""Regex-based inspection of component source files.

Nothing here parses TypeScript properly. Import and export statements are
matched with regular expressions, which is enough for the conventions used
in ``packages/*/components``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from devcn.types import ComponentInfo, DiscoveredComponent

logger = logging.getLogger(__name__)

# Provided by the consumer's project, never installed by the CLI
BUILTIN_PACKAGES: frozenset[str] = frozenset({"react", "react-dom", "next"})

# Specifier prefixes that resolve inside the monorepo or the consumer's app
_INTERNAL_PREFIXES: tuple[str, ...] = (".", "@/", "@repo/")

# import X from 'pkg' / export { X } from 'pkg' / import 'pkg'
_MODULE_SPECIFIER_RE = re.compile(
    r"""(?<![\w.$])(?:import|export)\s+(?:[^;'"]*?\bfrom\s+)?['"]([^'"]+)['"]"""
)
_EXPORT_RE = re.compile(r"export\s+(?:const|function|class|interface|type)\s+(\w+)")
_EXPORT_WITH_DEFAULT_RE = re.compile(
    r"export\s+(?:default\s+)?(?:const|function|class|interface|type)\s+(\w+)"
)
_JSDOC_RE = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
_KEBAB_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")

# React component heuristics
_REACT_IMPORT_RE = re.compile(r"""import.*React|from\s+['"]react['"]""")
_JSX_RE = re.compile(r"<[A-Z]|jsx")
_COMPONENT_EXPORT_RE = re.compile(r"export\s+(?:default\s+)?(?:function|const|class)")

_SOURCE_SUFFIXES = {".tsx", ".ts"}
_DISCOVERY_SUFFIXES = {".tsx", ".ts", ".jsx", ".js"}
_REGISTER_SKIP = ("index", ".test.", ".spec.")
_DISCOVERY_SKIP = (
    "index", ".test.", ".spec.", ".stories.", ".d.ts",
    "types", "utils", "helpers", "constants", "config",
)
_SKIP_DIRS = frozenset({"node_modules", ".git", "dist", "build", "__tests__", "test"})
_MAX_DEPTH = 3


# ─── Naming ───────────────────────────────────────────────────────────────────


def to_kebab_case(file_stem: str) -> str:
    """``MyButton`` → ``my-button``. Already-kebab names pass through."""
    return _KEBAB_BOUNDARY_RE.sub(r"\1-\2", file_stem).lower()


def to_pascal_case(name: str) -> str:
    """``my-button`` → ``MyButton``."""
    return "".join(word[:1].upper() + word[1:] for word in name.split("-"))


def to_camel_case(name: str) -> str:
    """``my-button`` → ``myButton``."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


# ─── Imports / exports ────────────────────────────────────────────────────────


def extract_imports(source: str) -> list[str]:
    """Return every module specifier imported or re-exported, in source order."""
    return _MODULE_SPECIFIER_RE.findall(source)


def package_name(specifier: str) -> str:
    """Reduce a module specifier to its npm package name.

    Examples::

        package_name("lodash/merge")            → "lodash"
        package_name("@radix-ui/react-slot")    → "@radix-ui/react-slot"
        package_name("@scope/pkg/dist/x.js")    → "@scope/pkg"
    """
    parts = specifier.split("/")
    if specifier.startswith("@") and len(parts) >= 2:
        return "/".join(parts[:2])
    return parts[0]


def is_internal_specifier(specifier: str) -> bool:
    return specifier.startswith(_INTERNAL_PREFIXES)


def extract_dependencies(source: str, exclude_builtins: bool = True) -> list[str]:
    """External npm packages a source file needs, de-duplicated in first-seen order.

    Relative imports, ``@/`` and ``@repo/`` aliases are dropped. With
    *exclude_builtins* the packages every consumer already has
    (``react``, ``react-dom``, ``next``) are dropped too.
    """
    deps: list[str] = []
    for specifier in extract_imports(source):
        if is_internal_specifier(specifier):
            continue
        name = package_name(specifier)
        if exclude_builtins and name in BUILTIN_PACKAGES:
            continue
        if name not in deps:
            deps.append(name)
    return deps


def extract_exports(source: str, include_default: bool = False) -> list[str]:
    pattern = _EXPORT_WITH_DEFAULT_RE if include_default else _EXPORT_RE
    return pattern.findall(source)


def extract_description(source: str, name: str) -> str:
    """First prose line of the first JSDoc block, or a generic description."""
    match = _JSDOC_RE.search(source)
    if match:
        for line in match.group(1).splitlines():
            text = line.strip().lstrip("*").strip()
            if text and not text.startswith("@"):
                return text
    return f"A customizable {name} component."


def extract_component_info(source: str, name: str) -> ComponentInfo:
    return ComponentInfo(
        display_name=to_pascal_case(name),
        description=extract_description(source, name),
        dependencies=extract_dependencies(source),
        exports=extract_exports(source),
    )


# ─── Directory walking ────────────────────────────────────────────────────────


def scan_for_components(directory: Path) -> list[Path]:
    """Recursively collect registrable ``.ts``/``.tsx`` sources under *directory*.

    Index, test and spec files are skipped. Result is sorted for stable output.
    """
    found: list[Path] = []
    for path in sorted(directory.rglob("*")):
        if not path.is_file() or path.suffix not in _SOURCE_SUFFIXES:
            continue
        if any(pattern in path.name for pattern in _REGISTER_SKIP):
            continue
        found.append(path)
    return found


def analyze_component_file(path: Path, package: str) -> Optional[DiscoveredComponent]:
    """Inspect one file and return it as a component, or ``None`` if it is not one.

    A file counts as a React component when it has a component-shaped export
    and at least one of: a React import, JSX, or ``forwardRef``.
    """
    if path.suffix not in _DISCOVERY_SUFFIXES:
        return None
    if any(pattern in path.name for pattern in _DISCOVERY_SKIP):
        return None

    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping unreadable file %s: %s", path, exc)
        return None

    has_export = bool(_COMPONENT_EXPORT_RE.search(source))
    looks_like_react = (
        bool(_REACT_IMPORT_RE.search(source))
        or bool(_JSX_RE.search(source))
        or "forwardRef" in source
    )
    if not has_export or not looks_like_react:
        return None

    name = to_kebab_case(path.stem)
    return DiscoveredComponent(
        name=name,
        display_name=to_pascal_case(name),
        package=package,
        file_path=path,
        file_name=path.stem,
        has_typescript=path.suffix in _SOURCE_SUFFIXES,
        exports=extract_exports(source, include_default=True),
        dependencies=extract_dependencies(source, exclude_builtins=False),
    )


def find_components_in_directory(directory: Path, package: str) -> list[DiscoveredComponent]:
    """Walk *directory* (max depth 3) collecting React components.

    Build output, VCS and test directories are not descended into.
    Entries that cannot be read are skipped silently.
    """
    components: list[DiscoveredComponent] = []
    if not directory.is_dir():
        return components

    def _walk(current: Path, depth: int) -> None:
        if depth > _MAX_DEPTH:
            return
        try:
            entries = sorted(current.iterdir())
        except OSError as exc:
            logger.debug("Cannot read directory %s: %s", current, exc)
            return
        for entry in entries:
            try:
                if entry.is_dir():
                    if entry.name not in _SKIP_DIRS:
                        _walk(entry, depth + 1)
                elif entry.is_file():
                    component = analyze_component_file(entry, package)
                    if component is not None:
                        components.append(component)
            except OSError as exc:
                logger.debug("Cannot stat %s: %s", entry, exc)

    _walk(directory, 0)
    return components
