"""End-to-end tests: drive the FastMCP server in memory with fastmcp.Client."""

import pytest
from fastmcp import Client

from tools import mcp_server

from tests.factories import make_post, search_envelope, user_node


@pytest.fixture
def server(monkeypatch, service):
    monkeypatch.setattr(mcp_server, "_service", service)
    return mcp_server.mcp


def _text(result) -> str:
    return result.content[0].text


class TestToolsOverMCP:

    async def test_lists_both_tools(self, server):
        async with Client(server) as client:
            tools = await client.list_tools()
        assert sorted(t.name for t in tools) == ["slab_get_post", "slab_search"]

    async def test_search(self, server, slab_api):
        slab_api.respond(search_envelope(user_node()))
        async with Client(server) as client:
            result = await client.call_tool(
                "slab_search", {"query": "grace", "limit": 3}, raise_on_error=False
            )
        assert not result.is_error
        assert _text(result).startswith('Found 1 results matching "grace":')
        assert slab_api.last_payload["variables"] == {"query": "grace", "first": 3}

    async def test_get_post(self, server, slab_api):
        slab_api.respond({"data": {"post": make_post()}})
        async with Client(server) as client:
            result = await client.call_tool(
                "slab_get_post", {"postId": "post-1"}, raise_on_error=False
            )
        assert not result.is_error
        assert "**Post ID:** post-1" in _text(result)

    async def test_no_results_is_not_an_error(self, server, slab_api):
        slab_api.respond(search_envelope())
        async with Client(server) as client:
            result = await client.call_tool("slab_search", {"query": "zzz"}, raise_on_error=False)
        assert not result.is_error
        assert _text(result) == 'No results found for "zzz"'

    async def test_http_500_reports_tool_name_once(self, server, slab_api):
        slab_api.respond({}, status_code=500)
        async with Client(server) as client:
            result = await client.call_tool("slab_search", {"query": "x"}, raise_on_error=False)
        assert result.is_error
        assert _text(result) == "Error executing slab_search: HTTP error! status: 500"

    async def test_unconfigured_service_is_an_error_result(self, monkeypatch, slab_api):
        monkeypatch.setattr(mcp_server, "_service", None)
        async with Client(mcp_server.mcp) as client:
            result = await client.call_tool("slab_get_post", {"postId": "p"}, raise_on_error=False)
        assert result.is_error
        assert _text(result).startswith("Error executing slab_get_post: ")

    async def test_unknown_tool(self, server, slab_api):
        async with Client(server) as client:
            result = await client.call_tool("nope", {}, raise_on_error=False)
        assert result.is_error
        assert "Unknown tool" in _text(result)
        assert "nope" in _text(result)
        assert slab_api.requests == []
