"""Package manager detection and command construction tests."""

import pytest

from devcn.installer.package_manager import (
    detect_package_manager,
    install_command,
    shadcn_add_command,
)
from devcn.types import PackageManager


class TestDetectPackageManager:
    @pytest.mark.parametrize("lockfile,expected", [
        ("pnpm-lock.yaml", PackageManager.PNPM),
        ("yarn.lock", PackageManager.YARN),
        ("package-lock.json", PackageManager.NPM),
    ])
    def test_lockfile_selects_manager(self, tmp_path, lockfile, expected):
        (tmp_path / lockfile).write_text("")
        assert detect_package_manager(tmp_path) == expected

    def test_defaults_to_npm(self, tmp_path):
        assert detect_package_manager(tmp_path) == PackageManager.NPM

    def test_pnpm_preferred_over_yarn(self, tmp_path):
        (tmp_path / "yarn.lock").write_text("")
        (tmp_path / "pnpm-lock.yaml").write_text("")
        assert detect_package_manager(tmp_path) == PackageManager.PNPM


class TestInstallCommand:
    def test_pnpm(self):
        assert install_command(PackageManager.PNPM, ["zod", "clsx"]) == ["pnpm", "add", "zod", "clsx"]

    def test_yarn_dev(self):
        assert install_command(PackageManager.YARN, ["vitest"], dev=True) == ["yarn", "add", "-D", "vitest"]

    def test_npm_dev(self):
        assert install_command(PackageManager.NPM, ["vitest"], dev=True) == [
            "npm", "install", "--save-dev", "vitest",
        ]


class TestShadcnAddCommand:
    def test_interactive(self):
        assert shadcn_add_command("shadcn@latest", "button", False) == [
            "npx", "shadcn@latest", "add", "button",
        ]

    def test_non_interactive(self):
        assert shadcn_add_command("shadcn@2", "https://x/registry/card.json", True)[-1] == "--yes"
