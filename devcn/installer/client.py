"""RegistryClient — fetch component manifests and the catalogue over HTTPS."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, Field

from devcn.exceptions import ComponentFetchError, ComponentNotFoundError
from devcn.types import IndexEntry, RegistryItem
from devcn.version import __version__

logger = logging.getLogger(__name__)

# Catalogue locations, tried in order
_INDEX_PATHS: tuple[str, ...] = ("registry.json", "registry/index.json")

# Shown by `list` when the registry host is unreachable
_FALLBACK_COMPONENTS: tuple[str, ...] = (
    "accordion", "alert", "alert-dialog", "aspect-ratio", "avatar", "badge",
    "breadcrumb", "button", "calendar", "card", "carousel", "chart", "checkbox",
    "code-block", "collapsible", "command", "context-menu", "dialog", "drawer",
    "dropdown-menu", "form", "hover-card", "input", "input-otp", "label",
    "menubar", "navigation-menu", "pagination", "popover", "progress",
    "radio-group", "resizable", "scroll-area", "select", "separator", "sheet",
    "sidebar", "skeleton", "slider", "sonner", "switch", "table", "tabs",
    "textarea", "toast", "toaster", "toggle", "toggle-group", "tooltip",
)


class RegistryListing(BaseModel):
    """Components available for ``add``, and where the list came from."""
    components: list[IndexEntry] = Field(default_factory=list)
    source: str = ""                    # URL fetched, or "fallback"

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


class RegistryClient:
    """Async client for a published devcn-ui registry.

    Use as an async context manager so one connection pool serves a whole
    ``add`` run::

        async with RegistryClient("https://devcn-ui.dedevs.com") as client:
            item = await client.fetch_component("button")

    Args:
        base_url: Documentation site hosting ``/registry/*.json``.
        timeout: HTTP timeout in seconds.
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RegistryClient":
        self._http = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": f"devcn-ui/{__version__} registry-client"},
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    def component_url(self, name: str) -> str:
        return f"{self._base_url}/registry/{name}.json"

    async def fetch_component(self, name: str) -> RegistryItem:
        """Download and parse ``registry/<name>.json``.

        Raises:
            ComponentNotFoundError: The registry answered 404.
            ComponentFetchError: Network failure, other HTTP error, or an
                                 unparseable manifest.
        """
        url = self.component_url(name)
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as exc:
            raise ComponentFetchError(name, url, f"timed out after {self._timeout:.1f}s") from exc
        except httpx.HTTPError as exc:
            raise ComponentFetchError(name, url, str(exc)) from exc

        if response.status_code == 404:
            raise ComponentNotFoundError(name, url)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ComponentFetchError(name, url, f"HTTP {response.status_code}") from exc

        try:
            return RegistryItem.model_validate(response.json())
        except ValueError as exc:
            raise ComponentFetchError(name, url, f"invalid manifest: {exc}") from exc

    async def fetch_index(self) -> RegistryListing:
        """Fetch the component catalogue.

        Falls back to a built-in component list on any failure. Never raises.
        """
        for path in _INDEX_PATHS:
            url = f"{self._base_url}/{path}"
            try:
                response = await self._client.get(url)
                response.raise_for_status()
                data = response.json()
                raw = data.get("components") or data.get("items") or []
                components = [_index_entry(c) for c in raw]
            except httpx.TimeoutException:
                logger.warning("Registry index fetch timed out after %.1fs: %s", self._timeout, url)
                continue
            except httpx.HTTPStatusError as exc:
                logger.debug("Registry index HTTP %s: %s", exc.response.status_code, url)
                continue
            except (httpx.HTTPError, ValueError, AttributeError) as exc:
                logger.warning("Registry index fetch failed for %s: %s", url, exc)
                continue
            if components:
                return RegistryListing(components=components, source=url)

        logger.warning("Using built-in component list; registry %s unreachable", self._base_url)
        return RegistryListing(
            components=[IndexEntry(name=n) for n in _FALLBACK_COMPONENTS],
            source="fallback",
        )

    @property
    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            raise RuntimeError("RegistryClient must be used as 'async with RegistryClient(...)'")
        return self._http


def _index_entry(raw: dict) -> IndexEntry:
    """Accept both index.json rows (file count) and registry.json items (file list)."""
    if isinstance(raw.get("files"), list):
        raw = {**raw, "files": len(raw["files"])}
    return IndexEntry.model_validate(raw)
