"""Typed exception hierarchy. Every error the registry toolchain can raise."""


class DevcnError(Exception):
    """Base exception for all devcn-ui errors."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


# ── Registry build / validation ─────────────────────────────────────────────


class RegistryError(DevcnError):
    """A registry manifest or index could not be processed."""
    def __init__(self, message: str, component: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.component = component


class RegistryNotFoundError(RegistryError):
    """The registry directory does not exist."""
    def __init__(self, registry_dir, **kwargs):
        super().__init__(
            f"Registry directory not found: {registry_dir}. "
            f"Run 'devcn-ui registry new <name>' or 'devcn-ui registry register' first.",
            **kwargs,
        )
        self.registry_dir = registry_dir


# ── Remote registry / installation ──────────────────────────────────────────


class ComponentNotFoundError(DevcnError):
    """Named component is not published in the registry."""
    def __init__(self, component: str, url: str = "", **kwargs):
        super().__init__(f"Component '{component}' not found in registry ({url})", **kwargs)
        self.component = component
        self.url = url


class ComponentFetchError(DevcnError):
    """Component manifest could not be downloaded or parsed."""
    def __init__(self, component: str, url: str, reason: str, **kwargs):
        super().__init__(f"Failed to fetch '{component}' from {url}: {reason}", **kwargs)
        self.component = component
        self.url = url
        self.reason = reason


class InstallError(DevcnError):
    """An install subprocess returned a non-zero exit code or timed out."""
    def __init__(self, command: list[str], stderr: str, **kwargs):
        super().__init__(f"Command '{' '.join(command)}' failed: {stderr[:500]}", **kwargs)
        self.command = command
        self.stderr = stderr
