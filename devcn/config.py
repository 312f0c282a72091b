"""Application configuration. All env vars defined here with defaults."""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class DevcnConfig(BaseSettings):
    # ── App ──
    log_level: str = "WARNING"                 # CLI output goes through rich; logs are opt-in
    root_dir: Path = Path(".")

    # ── Registry ──
    registry_name: str = "devcn-ui"
    registry_description: str = (
        "Devcn UI Design Registry - Beautiful, accessible components "
        "built with React and Tailwind CSS"
    )
    registry_url: str = "https://devcn-ui.dedevs.com"
    cli_name: str = "devcn-ui"                 # shown in generated install snippets

    # ── Installer ──
    shadcn_package: str = "shadcn@latest"
    fetch_timeout: float = 10.0                # seconds per HTTP request
    install_timeout: float = 300.0             # seconds per install subprocess
    ci: bool = Field(
        default=False,
        validation_alias=AliasChoices("DEVCN_CI", "CI"),
    )                                          # non-interactive: skip prompts

    @field_validator("ci", mode="before")
    @classmethod
    def ci_is_truthy(cls, v) -> bool:
        # CI providers set arbitrary values (CI=woodpecker); only empty, "0" and "false" are off
        if v is None or isinstance(v, bool):
            return bool(v)
        text = str(v).strip()
        return bool(text) and text.lower() not in ("0", "false")

    model_config = {
        "env_prefix": "DEVCN_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }


config = DevcnConfig()
