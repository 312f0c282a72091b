"""RegistryValidator — schema checks for component manifests and the index."""

from __future__ import annotations

import json
import logging
from typing import Any

from devcn.exceptions import RegistryNotFoundError
from devcn.registry.layout import RegistryLayout
from devcn.types import (
    VALID_COMPONENT_TYPES,
    IssueLevel,
    ValidationIssue,
    ValidationReport,
)

logger = logging.getLogger(__name__)


class RegistryValidator:
    """Validates registry manifests without touching anything on disk.

    Each ``validate_*`` method returns a list of :class:`ValidationIssue`;
    an empty list means the input is valid. Checks never raise.
    """

    _REQUIRED_FIELDS: tuple[str, ...] = ("name", "type", "files")
    _ARRAY_FIELDS: tuple[tuple[str, str], ...] = (
        ("dependencies", "Dependencies"),
        ("devDependencies", "DevDependencies"),
        ("registryDependencies", "RegistryDependencies"),
    )

    def validate_manifest(self, data: Any, component: str) -> list[ValidationIssue]:
        """Run all manifest checks.

        Args:
            data: Parsed JSON of ``registry/<component>.json``.
            component: Manifest file stem.

        Checks (in order):
            1. Manifest is a JSON object
            2. Required fields present and non-empty
            3. ``type`` is an allowed registry type
            4. ``files`` is an array of entries with ``path`` and ``content``/``target``
            5. Dependency fields are arrays of strings
            6. No self-referencing registry dependency
        """
        issues: list[ValidationIssue] = []

        def error(message: str) -> None:
            issues.append(ValidationIssue(component=component, level=IssueLevel.ERROR, message=message))

        # 1. Shape
        if not isinstance(data, dict):
            error("Manifest must be a JSON object")
            return issues

        # 2. Required fields
        for field in self._REQUIRED_FIELDS:
            if _is_empty(data.get(field)):
                error(f"Missing required field: {field}")

        # 3. Type
        component_type = data.get("type")
        if not _is_empty(component_type) and component_type not in VALID_COMPONENT_TYPES:
            error(
                f"Invalid type: {component_type}. "
                f"Must be one of: {', '.join(VALID_COMPONENT_TYPES)}"
            )

        # 4. Files
        files = data.get("files")
        if not _is_empty(files):
            if not isinstance(files, list):
                error("Files must be an array")
            else:
                for position, entry in enumerate(files):
                    if not isinstance(entry, dict):
                        error(f"File #{position} must be an object")
                        continue
                    if not entry.get("path"):
                        error(f"File #{position} missing path property")
                    if not entry.get("content") and not entry.get("target"):
                        error(f"File #{position} missing content or target property")

        # 5. Dependency arrays
        for key, label in self._ARRAY_FIELDS:
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if not isinstance(value, list):
                error(f"{label} must be an array")
            elif not all(isinstance(item, str) for item in value):
                error(f"{label} must contain only strings")

        # 6. Self-reference
        registry_deps = data.get("registryDependencies")
        if isinstance(registry_deps, list):
            own_names = [component, data.get("name")]
            if any(dep in own_names for dep in registry_deps):
                error("Circular dependency detected: component depends on itself")

        declared = data.get("name")
        if isinstance(declared, str) and declared and declared != component:
            issues.append(ValidationIssue(
                component=component,
                level=IssueLevel.WARNING,
                message=f"Manifest name '{declared}' does not match file name '{component}.json'",
            ))

        return issues

    def validate_index(self, data: Any, registry_names: list[str]) -> list[ValidationIssue]:
        """Cross-check ``index.json`` against the manifests on disk.

        Components missing from the index are warnings (the index is stale);
        index entries without a manifest are errors (the index is wrong).
        """
        issues: list[ValidationIssue] = []

        def add(level: IssueLevel, message: str) -> None:
            issues.append(ValidationIssue(component="index", level=level, message=message))

        if not isinstance(data, dict):
            add(IssueLevel.ERROR, "Registry index must be a JSON object")
            return issues

        if not data.get("name"):
            add(IssueLevel.ERROR, "Registry index missing name")

        components = data.get("components")
        if not isinstance(components, list):
            add(IssueLevel.ERROR, "Registry index missing components array")
            return issues

        indexed = [c.get("name") for c in components if isinstance(c, dict)]
        for name in registry_names:
            if name not in indexed:
                add(IssueLevel.WARNING, f"Component {name} not found in index")
        for name in indexed:
            if name not in registry_names:
                add(IssueLevel.ERROR, f"Index references non-existent component: {name}")

        return issues


def validate_registry(layout: RegistryLayout) -> ValidationReport:
    """Validate every manifest, its companion example/doc files, and the index.

    Raises:
        RegistryNotFoundError: The registry directory does not exist.
    """
    if not layout.registry_dir.is_dir():
        raise RegistryNotFoundError(layout.registry_dir)

    validator = RegistryValidator()
    stems = layout.manifest_stems()
    report = ValidationReport(files_validated=len(stems))
    logger.info("Validating %d registry files", len(stems))

    for stem in stems:
        try:
            data = json.loads(layout.manifest_path(stem).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            report.issues.append(ValidationIssue(
                component=stem, level=IssueLevel.ERROR, message=f"JSON parsing error: {exc}",
            ))
            continue

        report.issues.extend(validator.validate_manifest(data, stem))

        if not layout.example_path(stem).exists():
            report.issues.append(ValidationIssue(
                component=stem,
                level=IssueLevel.WARNING,
                message=f"Example file not found: examples/{stem}.tsx",
            ))
        if not layout.doc_path(stem).exists():
            report.issues.append(ValidationIssue(
                component=stem,
                level=IssueLevel.WARNING,
                message=f"Documentation not found: content/components/{stem}.mdx",
            ))

    if layout.index_file.exists():
        try:
            index_data = json.loads(layout.index_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            report.issues.append(ValidationIssue(
                component="index",
                level=IssueLevel.ERROR,
                message=f"Registry index JSON parsing error: {exc}",
            ))
        else:
            report.issues.extend(validator.validate_index(index_data, stems))
    else:
        report.issues.append(ValidationIssue(
            component="index",
            level=IssueLevel.WARNING,
            message="Registry index not found. Run 'devcn-ui registry generate' to create it.",
        ))

    for issue in report.issues:
        log = logger.error if issue.level == IssueLevel.ERROR else logger.warning
        log("[%s] %s", issue.component, issue.message)

    return report


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}
