"""Package manager detection and install command construction."""

from __future__ import annotations

from pathlib import Path

from devcn.types import PackageManager

# First lockfile found wins
_LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
)

_ADD_VERBS: dict[PackageManager, list[str]] = {
    PackageManager.PNPM: ["add"],
    PackageManager.YARN: ["add"],
    PackageManager.NPM: ["install"],
}

_DEV_FLAGS: dict[PackageManager, str] = {
    PackageManager.PNPM: "-D",
    PackageManager.YARN: "-D",
    PackageManager.NPM: "--save-dev",
}


def detect_package_manager(cwd: Path) -> PackageManager:
    """Pick the package manager whose lockfile is present in *cwd*; npm by default."""
    for lockfile, manager in _LOCKFILES:
        if (Path(cwd) / lockfile).exists():
            return manager
    return PackageManager.NPM


def install_command(manager: PackageManager, packages: list[str], dev: bool = False) -> list[str]:
    """Build the argv that installs *packages*.

    Examples::

        install_command(PackageManager.PNPM, ["zod"])            → ["pnpm", "add", "zod"]
        install_command(PackageManager.NPM, ["vitest"], dev=True) → ["npm", "install", "--save-dev", "vitest"]
    """
    cmd = [manager.value, *_ADD_VERBS[manager]]
    if dev:
        cmd.append(_DEV_FLAGS[manager])
    return cmd + list(packages)


def shadcn_add_command(shadcn_package: str, target: str, assume_yes: bool) -> list[str]:
    """``npx shadcn@latest add <target>``, non-interactive when *assume_yes*."""
    cmd = ["npx", shadcn_package, "add", target]
    if assume_yes:
        cmd.append("--yes")
    return cmd
