"""scaffold_component() tests."""

import json

import pytest
import yaml

from devcn.registry.generator import build_index
from devcn.registry.scaffolder import scaffold_component
from devcn.registry.validator import RegistryValidator


class TestScaffoldComponent:
    def test_creates_all_files(self, layout):
        created = scaffold_component(layout, "my-button")
        assert created == [
            layout.packages_dir / "ui" / "components" / "my-button" / "my-button.tsx",
            layout.example_path("my-button"),
            layout.doc_path("my-button"),
            layout.manifest_path("my-button"),
        ]
        for path in created:
            assert path.exists()

    def test_component_source_uses_pascal_case(self, layout):
        source_path = scaffold_component(layout, "my-button")[0]
        source = source_path.read_text()
        assert "const MyButton = React.forwardRef<HTMLDivElement, MyButtonProps>(" in source
        assert "MyButton.displayName = 'MyButton';" in source

    def test_custom_package(self, layout):
        created = scaffold_component(layout, "chat-box", package="ai")
        assert created[0] == layout.packages_dir / "ai" / "components" / "chat-box" / "chat-box.tsx"
        assert "@repo/ai/components/chat-box" in layout.example_path("chat-box").read_text()

    def test_manifest_is_valid_and_has_no_description(self, layout):
        scaffold_component(layout, "my-button")
        data = json.loads(layout.manifest_path("my-button").read_text())
        assert "description" not in data
        assert RegistryValidator().validate_manifest(data, "my-button") == []

        index, failures = build_index(layout, "devcn-ui", "desc", "https://x")
        assert failures == {}
        assert index.components[0].description == "my-button component"

    def test_doc_front_matter(self, layout):
        scaffold_component(layout, "my-button", cli_name="acme-ui")
        doc = layout.doc_path("my-button").read_text()
        front_matter = yaml.safe_load(doc.split("---")[1])
        assert front_matter["title"] == "MyButton"
        assert front_matter["component"] is True
        assert "npx acme-ui add my-button" in doc

    @pytest.mark.parametrize("name", ["MyButton", "my_button", "1button", "-button", ""])
    def test_rejects_invalid_name(self, layout, name):
        with pytest.raises(ValueError, match="invalid"):
            scaffold_component(layout, name)

    def test_existing_component_requires_force(self, layout):
        scaffold_component(layout, "my-button")
        with pytest.raises(FileExistsError):
            scaffold_component(layout, "my-button")

    def test_force_overwrites(self, layout):
        source_path = scaffold_component(layout, "my-button")[0]
        source_path.write_text("edited")
        scaffold_component(layout, "my-button", force=True)
        assert source_path.read_text() != "edited"

    def test_existing_manifest_requires_force(self, layout, write_manifest):
        original = write_manifest("my-button").read_text()
        with pytest.raises(FileExistsError, match="my-button.json"):
            scaffold_component(layout, "my-button")
        assert layout.manifest_path("my-button").read_text() == original
        assert not (layout.packages_dir / "ui" / "components" / "my-button").exists()

    def test_force_replaces_existing_manifest(self, layout, write_manifest):
        write_manifest("my-button")
        scaffold_component(layout, "my-button", force=True)
        data = json.loads(layout.manifest_path("my-button").read_text())
        assert "description" not in data
