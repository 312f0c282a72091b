"""RegistryClient tests (mocked httpx)."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from devcn.exceptions import ComponentFetchError, ComponentNotFoundError
from devcn.installer.client import RegistryClient


def _response(status: int = 200, data=None):
    resp = MagicMock()
    resp.status_code = status
    resp.json = MagicMock(return_value=data if data is not None else {})
    if status >= 400:
        resp.raise_for_status = MagicMock(side_effect=httpx.HTTPStatusError(
            f"HTTP {status}", request=MagicMock(), response=resp,
        ))
    else:
        resp.raise_for_status = MagicMock()
    return resp


def _mock_http(*responses):
    client = AsyncMock()
    client.get = AsyncMock(side_effect=list(responses))
    return client


_BUTTON = {
    "name": "button",
    "type": "registry:ui",
    "dependencies": ["@radix-ui/react-slot"],
    "registryDependencies": ["utils"],
    "files": [{"path": "components/button.tsx", "content": "export {}"}],
}


class TestComponentUrl:
    def test_trailing_slash_stripped(self):
        client = RegistryClient("https://registry.test/")
        assert client.component_url("button") == "https://registry.test/registry/button.json"


@pytest.mark.asyncio
class TestFetchComponent:
    async def test_parses_manifest(self):
        http = _mock_http(_response(200, _BUTTON))
        with patch("httpx.AsyncClient", return_value=http):
            async with RegistryClient("https://registry.test") as client:
                item = await client.fetch_component("button")

        assert item.name == "button"
        assert item.registry_dependencies == ["utils"]
        http.get.assert_awaited_once_with("https://registry.test/registry/button.json")
        http.aclose.assert_awaited_once()

    async def test_404_raises_not_found(self):
        with patch("httpx.AsyncClient", return_value=_mock_http(_response(404))):
            async with RegistryClient("https://registry.test") as client:
                with pytest.raises(ComponentNotFoundError, match="ghost"):
                    await client.fetch_component("ghost")

    async def test_server_error_raises_fetch_error(self):
        with patch("httpx.AsyncClient", return_value=_mock_http(_response(500))):
            async with RegistryClient("https://registry.test") as client:
                with pytest.raises(ComponentFetchError, match="HTTP 500"):
                    await client.fetch_component("button")

    async def test_timeout_raises_fetch_error(self):
        with patch("httpx.AsyncClient", return_value=_mock_http(httpx.TimeoutException("slow"))):
            async with RegistryClient("https://registry.test", timeout=2.0) as client:
                with pytest.raises(ComponentFetchError, match="timed out"):
                    await client.fetch_component("button")

    async def test_invalid_manifest_raises_fetch_error(self):
        with patch("httpx.AsyncClient", return_value=_mock_http(_response(200, {"files": []}))):
            async with RegistryClient("https://registry.test") as client:
                with pytest.raises(ComponentFetchError, match="invalid manifest"):
                    await client.fetch_component("button")

    async def test_requires_context_manager(self):
        client = RegistryClient("https://registry.test")
        with pytest.raises(RuntimeError):
            await client.fetch_component("button")


@pytest.mark.asyncio
class TestFetchIndex:
    async def test_registry_json_items(self):
        data = {"items": [_BUTTON]}
        with patch("httpx.AsyncClient", return_value=_mock_http(_response(200, data))):
            async with RegistryClient("https://registry.test") as client:
                listing = await client.fetch_index()

        assert listing.source == "https://registry.test/registry.json"
        assert not listing.is_fallback
        assert listing.components[0].name == "button"
        assert listing.components[0].files == 1

    async def test_falls_through_to_index_json(self):
        index = {"name": "devcn-ui", "components": [{"name": "card", "files": 2}]}
        http = _mock_http(_response(404), _response(200, index))
        with patch("httpx.AsyncClient", return_value=http):
            async with RegistryClient("https://registry.test") as client:
                listing = await client.fetch_index()

        assert listing.source == "https://registry.test/registry/index.json"
        assert [c.name for c in listing.components] == ["card"]

    async def test_unreachable_registry_uses_fallback(self):
        http = _mock_http(httpx.ConnectError("down"), httpx.ConnectError("down"))
        with patch("httpx.AsyncClient", return_value=http):
            async with RegistryClient("https://registry.test") as client:
                listing = await client.fetch_index()

        assert listing.is_fallback
        names = [c.name for c in listing.components]
        assert "button" in names and "tooltip" in names
        assert len(names) == 49

    async def test_empty_index_uses_fallback(self):
        http = _mock_http(_response(200, {"items": []}), _response(200, {"components": []}))
        with patch("httpx.AsyncClient", return_value=http):
            async with RegistryClient("https://registry.test") as client:
                listing = await client.fetch_index()
        assert listing.is_fallback
