"""All shared types, enums, and registry data shapes. Everything imports from here."""

from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


# ── Enums ──────────────────────────────────────────────────────────────

class ComponentType(str, Enum):
    UI = "registry:ui"
    BLOCK = "registry:block"
    EXAMPLE = "registry:example"

class IssueLevel(str, Enum):
    ERROR = "error"
    WARNING = "warning"

class ExampleCategory(str, Enum):
    SIMPLE = "simple"      # placeholder "Example Component" stub, needs manual fix
    COMPLEX = "complex"    # real imports + default export, likely restorable
    AI = "ai"              # ai-* chat widgets
    BROKEN = "broken"      # unreadable or unrecognisable

class PackageManager(str, Enum):
    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"


VALID_COMPONENT_TYPES: tuple[str, ...] = tuple(t.value for t in ComponentType)


# ── Registry manifests (JSON on disk, camelCase keys) ──────────────────

class RegistryFile(BaseModel):
    """One source file shipped with a component."""
    path: str
    content: str = ""
    type: str = ComponentType.UI.value
    target: Optional[str] = None

class RegistryItem(BaseModel):
    """A per-component manifest: ``registry/<name>.json``."""
    model_config = {"populate_by_name": True}

    name: str
    type: str = ComponentType.UI.value
    description: str = ""
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list, alias="devDependencies")
    registry_dependencies: list[str] = Field(default_factory=list, alias="registryDependencies")
    files: list[RegistryFile] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

class IndexEntry(BaseModel):
    """Summary row for one component in ``registry/index.json``."""
    model_config = {"populate_by_name": True}

    name: str
    type: str = ComponentType.UI.value
    description: str = ""
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list, alias="devDependencies")
    registry_dependencies: list[str] = Field(default_factory=list, alias="registryDependencies")
    files: int = 0                      # number of files, not their content
    path: str = ""                      # "registry/<stem>.json"

class RegistryIndex(BaseModel):
    """The aggregate catalogue written to ``registry/index.json``."""
    name: str
    description: str
    url: str
    components: list[IndexEntry] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


# ── Source inspection ──────────────────────────────────────────────────

class ComponentInfo(BaseModel):
    """What could be learned about a component from its source text."""
    display_name: str
    description: str
    dependencies: list[str] = Field(default_factory=list)
    exports: list[str] = Field(default_factory=list)

class DiscoveredComponent(BaseModel):
    """A component source file found while scanning ``packages/``."""
    model_config = {"populate_by_name": True}

    name: str
    display_name: str = Field(alias="displayName")
    package: str
    file_path: Path = Field(alias="filePath")
    file_name: str = Field(alias="fileName")
    has_typescript: bool = Field(alias="hasTypeScript")
    exports: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    registered: bool = False


# ── Batch results ──────────────────────────────────────────────────────

class ValidationIssue(BaseModel):
    component: str                      # manifest stem, or "index"
    level: IssueLevel
    message: str

class ValidationReport(BaseModel):
    """Outcome of a validate-registry run."""
    files_validated: int = 0
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == IssueLevel.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == IssueLevel.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

class GenerationResult(BaseModel):
    """Outcome of a generate-registry run."""
    index: RegistryIndex
    written: list[Path] = Field(default_factory=list)
    failures: dict[str, str] = Field(default_factory=dict)   # stem → reason

    @property
    def total_files(self) -> int:
        return sum(c.files for c in self.index.components)

class RegistrationResult(BaseModel):
    """Outcome of a register-all-components run."""
    registered: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failures: dict[str, str] = Field(default_factory=dict)   # name → reason
    generated_examples: list[str] = Field(default_factory=list)
    generated_docs: list[str] = Field(default_factory=list)
    index_regenerated: bool = False

class InstallResult(BaseModel):
    """Outcome of ``devcn-ui add``."""
    installed: list[str] = Field(default_factory=list)
    external: list[str] = Field(default_factory=list)        # handed to shadcn untouched
    failures: dict[str, str] = Field(default_factory=dict)
    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
