"""ComponentInstaller — resolve registry dependencies and install components into a project."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from devcn.exceptions import ComponentFetchError, ComponentNotFoundError, InstallError
from devcn.installer.client import RegistryClient
from devcn.installer.package_manager import (
    detect_package_manager,
    install_command,
    shadcn_add_command,
)
from devcn.registry.scanner import BUILTIN_PACKAGES, extract_dependencies, package_name
from devcn.types import InstallResult, PackageManager, RegistryItem

logger = logging.getLogger(__name__)


class ResolvedComponents:
    """Install plan produced by :meth:`ComponentInstaller.resolve`.

    ``items`` is ordered so every component follows its registry dependencies.
    ``external`` holds dependencies this registry does not publish (URLs or
    upstream shadcn names); they are handed to the shadcn CLI unchanged.
    """

    def __init__(self) -> None:
        self.items: list[RegistryItem] = []
        self.external: list[str] = []
        self.failures: dict[str, str] = {}


class ComponentInstaller:
    """Installs registry components into a consumer project.

    Args:
        config: DevcnConfig (registry URL, timeouts, shadcn package).
        cwd: Consumer project root; lockfiles here select the package manager.
        assume_yes: Run non-interactively. Install output is captured and
                    the shadcn CLI gets ``--yes``.
    """

    def __init__(self, config: Any, cwd: Path = Path("."), assume_yes: bool = False) -> None:
        self._config = config
        self._cwd = Path(cwd)
        self._assume_yes = assume_yes
        self.package_manager: PackageManager = detect_package_manager(self._cwd)

    # ─── Public API ───────────────────────────────────────────────────────────

    async def resolve(self, client: RegistryClient, names: list[str]) -> ResolvedComponents:
        """Fetch *names* and their registry dependencies, depth-first.

        Each component is fetched once. A dependency cycle is cut at the
        component that closes it. A requested component that cannot be
        fetched is a failure; a missing *dependency* is treated as external.
        """
        plan = ResolvedComponents()
        done: set[str] = set()
        visiting: set[str] = set()

        async def visit(name: str, requested: bool) -> None:
            if name in done or name in visiting:
                return
            if _is_url(name):
                done.add(name)
                plan.external.append(name)
                return

            visiting.add(name)
            try:
                item = await client.fetch_component(name)
            except ComponentNotFoundError as exc:
                if requested:
                    plan.failures[name] = str(exc)
                else:
                    logger.info("'%s' is not in this registry; deferring to shadcn", name)
                    plan.external.append(name)
                visiting.discard(name)
                done.add(name)
                return
            except ComponentFetchError as exc:
                logger.error("%s", exc)
                plan.failures[name] = str(exc)
                visiting.discard(name)
                done.add(name)
                return

            for dependency in item.registry_dependencies:
                await visit(dependency, requested=False)

            visiting.discard(name)
            done.add(name)
            plan.items.append(item)

        for name in names:
            await visit(name, requested=True)
        return plan

    async def add(self, names: list[str]) -> InstallResult:
        """Install *names* with their npm and registry dependencies.

        Sequence:
            1. Resolve manifests and registry dependencies
            2. Install npm dependencies with the detected package manager
            3. Install npm dev dependencies
            4. ``shadcn add`` every external registry dependency
            5. ``shadcn add`` every resolved component, dependencies first

        A failing step is recorded in the result and the remaining steps
        still run.
        """
        result = InstallResult()
        async with RegistryClient(
            self._config.registry_url, timeout=self._config.fetch_timeout
        ) as client:
            plan = await self.resolve(client, names)
            component_urls = {item.name: client.component_url(item.name) for item in plan.items}

        result.failures.update(plan.failures)
        result.external = list(plan.external)
        dependencies, dev_dependencies = collect_dependencies(plan.items)

        if dependencies:
            try:
                await self._run(install_command(self.package_manager, dependencies))
                result.dependencies = dependencies
            except InstallError as exc:
                logger.error("Dependency install failed: %s", exc)
                result.failures["dependencies"] = str(exc)

        if dev_dependencies:
            try:
                await self._run(install_command(self.package_manager, dev_dependencies, dev=True))
                result.dev_dependencies = dev_dependencies
            except InstallError as exc:
                logger.error("Dev dependency install failed: %s", exc)
                result.failures["devDependencies"] = str(exc)

        targets = [(name, name) for name in plan.external]
        targets += [(item.name, component_urls[item.name]) for item in plan.items]
        for name, target in targets:
            logger.info("Adding %s component", name)
            try:
                await self._run(
                    shadcn_add_command(self._config.shadcn_package, target, self._assume_yes)
                )
            except InstallError as exc:
                logger.error("Failed to add '%s': %s", name, exc)
                result.failures[name] = str(exc)
                continue
            if name not in plan.external:
                result.installed.append(name)

        return result

    # ─── Subprocess ───────────────────────────────────────────────────────────

    async def _run(self, cmd: list[str]) -> None:
        """Run *cmd* in the project directory.

        Output is captured when non-interactive, inherited otherwise so the
        user can answer prompts.

        Raises:
            InstallError: Executable missing, non-zero exit, or timeout.
        """
        logger.info("Running: %s", " ".join(cmd))
        stream = asyncio.subprocess.PIPE if self._assume_yes else None
        timeout = getattr(self._config, "install_timeout", 300.0)
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=str(self._cwd),
                stdout=stream,
                stderr=stream,
            )
        except FileNotFoundError as exc:
            raise InstallError(cmd, f"executable not found: {exc}") from exc

        try:
            _, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            proc.kill()
            raise InstallError(cmd, f"timed out after {timeout}s")

        if proc.returncode != 0:
            detail = (
                stderr.decode("utf-8", errors="replace")
                if stderr
                else f"exit code {proc.returncode}"
            )
            raise InstallError(cmd, detail)


# ─── Module-level helpers ─────────────────────────────────────────────────────


def collect_dependencies(items: list[RegistryItem]) -> tuple[list[str], list[str]]:
    """Union of declared and imported npm packages across *items*.

    Declared entries keep their version suffix (``zod@^3``); a package is
    listed once, by its first occurrence. Builtins are never included.

    Returns:
        ``(dependencies, dev_dependencies)``
    """
    dependencies: dict[str, str] = {}
    dev_dependencies: dict[str, str] = {}

    for item in items:
        declared = list(item.dependencies)
        for file in item.files:
            declared.extend(extract_dependencies(file.content))
        for spec in declared:
            name = package_name(_strip_version(spec))
            if name not in BUILTIN_PACKAGES:
                dependencies.setdefault(name, spec)
        for spec in item.dev_dependencies:
            dev_dependencies.setdefault(package_name(_strip_version(spec)), spec)

    dev_only = [spec for name, spec in dev_dependencies.items() if name not in dependencies]
    return list(dependencies.values()), dev_only


def _strip_version(spec: str) -> str:
    """``@scope/pkg@^1.2`` → ``@scope/pkg``; ``zod@3`` → ``zod``."""
    at = spec.find("@", 1)
    return spec[:at] if at > 0 else spec


def _is_url(name: str) -> bool:
    return name.startswith(("http://", "https://"))
