"""Source inspection tests.

Tests cover:
    - Name conversion helpers
    - Import / dependency extraction
    - Export and JSDoc description extraction
    - scan_for_components() file selection
    - analyze_component_file() / find_components_in_directory()
"""

from pathlib import Path

import pytest

from devcn.registry.scanner import (
    analyze_component_file,
    extract_component_info,
    extract_dependencies,
    extract_description,
    extract_exports,
    extract_imports,
    find_components_in_directory,
    is_internal_specifier,
    package_name,
    scan_for_components,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


_REACT_COMPONENT = """\
import * as React from 'react';

export function Card() {
  return <div />;
}
"""


# ─── Naming ───────────────────────────────────────────────────────────────────


class TestNaming:
    @pytest.mark.parametrize("stem,expected", [
        ("MyButton", "my-button"),
        ("AlertDialog", "alert-dialog"),
        ("button", "button"),
        ("alert-dialog", "alert-dialog"),
    ])
    def test_kebab_case(self, stem, expected):
        assert to_kebab_case(stem) == expected

    def test_pascal_case(self):
        assert to_pascal_case("alert-dialog") == "AlertDialog"
        assert to_pascal_case("button") == "Button"

    def test_camel_case(self):
        assert to_camel_case("alert-dialog") == "alertDialog"


# ─── Imports ──────────────────────────────────────────────────────────────────


class TestImports:
    def test_extract_imports_in_source_order(self, button_source):
        assert extract_imports(button_source) == [
            "react",
            "@radix-ui/react-slot",
            "class-variance-authority",
            "@/lib/utils",
        ]

    def test_side_effect_and_reexport_imports(self):
        source = "import 'server-only';\nexport { x } from \"./x\";\n"
        assert extract_imports(source) == ["server-only", "./x"]

    @pytest.mark.parametrize("specifier,expected", [
        ("lodash/merge", "lodash"),
        ("@radix-ui/react-slot", "@radix-ui/react-slot"),
        ("@scope/pkg/dist/x.js", "@scope/pkg"),
        ("zod", "zod"),
    ])
    def test_package_name(self, specifier, expected):
        assert package_name(specifier) == expected

    @pytest.mark.parametrize("specifier", ["./utils", "../lib", "@/lib/utils", "@repo/ui/button"])
    def test_internal_specifiers(self, specifier):
        assert is_internal_specifier(specifier)

    def test_external_specifier_is_not_internal(self):
        assert not is_internal_specifier("@radix-ui/react-slot")

    def test_dependencies_exclude_builtins_by_default(self, button_source):
        assert extract_dependencies(button_source) == [
            "@radix-ui/react-slot",
            "class-variance-authority",
        ]

    def test_dependencies_can_keep_builtins(self, button_source):
        deps = extract_dependencies(button_source, exclude_builtins=False)
        assert deps[0] == "react"

    def test_dependencies_deduplicated(self):
        source = (
            "import { a } from 'lodash/a';\n"
            "import { b } from 'lodash/b';\n"
            "import { Slot } from '@radix-ui/react-slot';\n"
        )
        assert extract_dependencies(source) == ["lodash", "@radix-ui/react-slot"]

    def test_next_subpaths_are_builtin(self):
        assert extract_dependencies("import Link from 'next/link';\n") == []


# ─── Exports / description ────────────────────────────────────────────────────


class TestExportsAndDescription:
    def test_named_exports(self, button_source):
        assert extract_exports(button_source) == ["Button", "ButtonProps"]

    def test_default_export_only_when_requested(self):
        source = "export default function Page() {}\nexport const x = 1;\n"
        assert extract_exports(source) == ["x"]
        assert extract_exports(source, include_default=True) == ["Page", "x"]

    def test_description_from_jsdoc(self, button_source):
        assert extract_description(button_source, "button") == "A clickable button with variants."

    def test_description_skips_tag_lines(self):
        source = "/**\n * @deprecated\n * Real text.\n */\nexport const X = 1;"
        assert extract_description(source, "x") == "Real text."

    def test_description_fallback(self):
        assert extract_description("export const X = 1;", "badge") == "A customizable badge component."

    def test_component_info(self, button_source):
        info = extract_component_info(button_source, "button")
        assert info.display_name == "Button"
        assert info.description == "A clickable button with variants."
        assert "class-variance-authority" in info.dependencies
        assert "react" not in info.dependencies


# ─── scan_for_components() ────────────────────────────────────────────────────


class TestScanForComponents:
    def test_selects_sources_and_skips_index_and_tests(self, tmp_path):
        _write(tmp_path / "button.tsx", "")
        _write(tmp_path / "button.test.tsx", "")
        _write(tmp_path / "button.spec.ts", "")
        _write(tmp_path / "index.ts", "")
        _write(tmp_path / "readme.md", "")
        _write(tmp_path / "nested" / "card.tsx", "")

        found = scan_for_components(tmp_path)
        assert [p.name for p in found] == ["button.tsx", "card.tsx"]

    def test_empty_directory(self, tmp_path):
        assert scan_for_components(tmp_path) == []


# ─── Discovery heuristics ─────────────────────────────────────────────────────


class TestAnalyzeComponentFile:
    def test_react_component_detected(self, tmp_path):
        path = _write(tmp_path / "FancyCard.tsx", _REACT_COMPONENT)
        component = analyze_component_file(path, "ui")
        assert component is not None
        assert component.name == "fancy-card"
        assert component.display_name == "FancyCard"
        assert component.package == "ui"
        assert component.has_typescript is True
        assert component.exports == ["Card"]
        assert component.dependencies == ["react"]
        assert component.registered is False

    def test_jsx_file_is_not_typescript(self, tmp_path):
        path = _write(tmp_path / "card.jsx", _REACT_COMPONENT)
        assert analyze_component_file(path, "ui").has_typescript is False

    def test_plain_module_is_not_a_component(self, tmp_path):
        path = _write(tmp_path / "math.ts", "export const add = (a, b) => a + b;\n")
        assert analyze_component_file(path, "ui") is None

    def test_component_without_export_ignored(self, tmp_path):
        path = _write(tmp_path / "card.tsx", "import React from 'react';\nconst C = () => <div />;\n")
        assert analyze_component_file(path, "ui") is None

    @pytest.mark.parametrize("file_name", [
        "utils.tsx", "card.stories.tsx", "types.ts", "index.tsx", "card.d.ts",
    ])
    def test_skip_patterns(self, tmp_path, file_name):
        path = _write(tmp_path / file_name, _REACT_COMPONENT)
        assert analyze_component_file(path, "ui") is None

    def test_other_suffix_ignored(self, tmp_path):
        path = _write(tmp_path / "card.css", _REACT_COMPONENT)
        assert analyze_component_file(path, "ui") is None


class TestFindComponentsInDirectory:
    def test_missing_directory_returns_empty(self, tmp_path):
        assert find_components_in_directory(tmp_path / "nope", "ui") == []

    def test_skips_build_and_dependency_directories(self, tmp_path):
        _write(tmp_path / "card.tsx", _REACT_COMPONENT)
        _write(tmp_path / "node_modules" / "lib" / "thing.tsx", _REACT_COMPONENT)
        _write(tmp_path / "dist" / "card.tsx", _REACT_COMPONENT)
        _write(tmp_path / "__tests__" / "card.tsx", _REACT_COMPONENT)

        found = find_components_in_directory(tmp_path, "ui")
        assert [c.file_path for c in found] == [tmp_path / "card.tsx"]

    def test_depth_limited_to_three_levels(self, tmp_path):
        _write(tmp_path / "a" / "b" / "c" / "shallow.tsx", _REACT_COMPONENT)
        _write(tmp_path / "a" / "b" / "c" / "d" / "deep.tsx", _REACT_COMPONENT)

        names = [c.name for c in find_components_in_directory(tmp_path, "ui")]
        assert names == ["shallow"]
