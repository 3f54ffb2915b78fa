# =============================================================================
# tools/dispatch.py  —  Tool routing and MCP error classification
# =============================================================================
#
# Every tool call funnels through call_tool():
#
#   unknown tool name        → McpError(METHOD_NOT_FOUND, "Unknown tool: <name>")
#   anything raised inside   → McpError(INTERNAL_ERROR, "Error executing <name>: <msg>")
#   McpError raised inside   → passed through untouched
#
# Soft failures ("No results found", GraphQL errors rendered as text) are
# ordinary return values from core/slab.py and are not touched here.
#
# In the running server, names that are not registered tools never reach
# call_tool: FastMCP's router answers them with its own "Unknown tool: <name>"
# error result.  The METHOD_NOT_FOUND branch below covers direct callers.
# tools/mcp_server.py turns the McpError from here into a ToolError so the
# client sees the message exactly once.
# =============================================================================

from typing import Any, Awaitable, Callable, Optional

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, METHOD_NOT_FOUND, ErrorData

from core.slab import DEFAULT_LIMIT, SlabService

SEARCH_TOOL = "slab_search"
GET_POST_TOOL = "slab_get_post"


def _require(arguments: dict[str, Any], key: str) -> Any:
    value = arguments.get(key)
    if value is None or value == "":
        raise ValueError(f"Missing required argument: {key}")
    return value


async def _search(service: SlabService, arguments: dict[str, Any]) -> str:
    query = _require(arguments, "query")
    limit = arguments.get("limit") or DEFAULT_LIMIT
    return await service.search(str(query), int(limit))


async def _get_post(service: SlabService, arguments: dict[str, Any]) -> str:
    post_id = _require(arguments, "postId")
    return await service.get_post(str(post_id))


HANDLERS: dict[str, Callable[[SlabService, dict[str, Any]], Awaitable[str]]] = {
    SEARCH_TOOL: _search,
    GET_POST_TOOL: _get_post,
}


async def call_tool(service: SlabService, name: str, arguments: Optional[dict[str, Any]]) -> str:
    """Run the tool called ``name`` and return its text block."""
    handler = HANDLERS.get(name)
    if handler is None:
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

    try:
        return await handler(service, arguments or {})
    except McpError:
        raise
    except Exception as e:
        raise McpError(
            ErrorData(code=INTERNAL_ERROR, message=f"Error executing {name}: {e}")
        ) from e
