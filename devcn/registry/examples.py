"""Disabled documentation examples: triage and restore.

An example is disabled by renaming ``<name>.tsx`` to ``<name>.tsx.disabled``
so the docs build ignores it until someone repairs it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from devcn.types import ExampleCategory

logger = logging.getLogger(__name__)

DISABLED_SUFFIX = ".disabled"

# Placeholder stubs are short and contain the generated "Example <Name>" text
_SIMPLE_MAX_LINES = 15


class RestoreResult(BaseModel):
    restored: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failures: dict[str, str] = Field(default_factory=dict)


def categorize_example(name: str, content: str) -> ExampleCategory:
    """Classify a disabled example by name and content."""
    if name.startswith("ai-"):
        return ExampleCategory.AI
    if _is_simple_example(content):
        return ExampleCategory.SIMPLE
    if "import" in content and "export default" in content:
        return ExampleCategory.COMPLEX
    return ExampleCategory.BROKEN


def list_disabled_examples(examples_dir: Path) -> list[Path]:
    if not examples_dir.is_dir():
        return []
    return sorted(p for p in examples_dir.iterdir() if p.name.endswith(DISABLED_SUFFIX))


def analyze_disabled_examples(examples_dir: Path) -> dict[ExampleCategory, list[str]]:
    """Group every disabled example (by original file name) into categories."""
    categories: dict[ExampleCategory, list[str]] = {c: [] for c in ExampleCategory}
    for path in list_disabled_examples(examples_dir):
        original = path.name.removesuffix(DISABLED_SUFFIX)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", path.name, exc)
            categories[ExampleCategory.BROKEN].append(original)
            continue
        categories[categorize_example(original, content)].append(original)
    return categories


def restore_examples(examples_dir: Path) -> RestoreResult:
    """Rename disabled examples back to their original names.

    Simple placeholder examples are left disabled because they need a
    hand-written replacement. An existing file with the original name is
    never overwritten.
    """
    result = RestoreResult()
    for path in list_disabled_examples(examples_dir):
        original = path.name.removesuffix(DISABLED_SUFFIX)
        target = path.with_name(original)
        try:
            content = path.read_text(encoding="utf-8")
            if _is_simple_example(content):
                logger.warning("Skipping %s - needs manual fix (simple example)", original)
                result.skipped.append(original)
                continue
            if target.exists():
                raise FileExistsError(f"{original} already exists")
            path.rename(target)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to restore %s: %s", original, exc)
            result.failures[original] = str(exc)
            continue
        logger.info("Restored %s", original)
        result.restored.append(original)
    return result


def _is_simple_example(content: str) -> bool:
    return "Example " in content and len(content.split("\n")) < _SIMPLE_MAX_LINES
