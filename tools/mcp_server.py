# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the two MCP tools exposed to agents and starts the server on
#   the stdio transport.  Each tool is a thin wrapper: it logs the call,
#   hands the arguments to tools/dispatch.py, and returns the text block.
#
# TOOLS:
#   - slab_search    → search posts, users and comments (one page)
#   - slab_get_post  → fetch a single post with its full content
#
# RUNNING THIS SERVER:
#     a) python -m tools.mcp_server
#     b) slab-mcp-server            (console script from pyproject.toml)
#     c) python main.py
#
#   SLAB_API_TOKEN must be set (environment or .env).  Without it the
#   process exits with status 1 before the server starts.
# =============================================================================

import logging
import sys
from typing import Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.shared.exceptions import McpError

from core.config import load_config
from core.errors import ConfigError
from core.graphql_client import SlabClient
from core.slab import DEFAULT_LIMIT, SlabService
from tools.dispatch import GET_POST_TOOL, SEARCH_TOOL, call_tool

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP JSON-RPC stream, so every log line goes to STDERR.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the first line and size of the returned text in GREEN, then return it."""
    first_line = text.split("\n", 1)[0]
    logging.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): {first_line}{_RESET}")
    return text


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP(
    "slab-mcp-server",
    instructions=(
        "Search and read Slab documentation. Use slab_search to find posts, "
        "people and comments, then slab_get_post to read a post in full."
    ),
)

# Built by main() from the environment; tests may install their own.
_service: Optional[SlabService] = None


def configure(service: SlabService) -> None:
    """Install the SlabService the tools delegate to."""
    global _service
    _service = service


def _get_service() -> SlabService:
    if _service is None:
        raise RuntimeError("Slab service is not configured; start the server via main()")
    return _service


async def _run_tool(name: str, arguments: dict) -> str:
    """Run ``name`` through the dispatcher and hand its text back to FastMCP.

    A classified McpError is re-raised as ToolError so FastMCP sends its
    message to the client as-is, without adding a second tool-name prefix.
    """
    try:
        text = await call_tool(_get_service(), name, arguments)
    except McpError as e:
        _log_status(f"{name} failed: {e.error.message}")
        raise ToolError(e.error.message) from e
    except RuntimeError as e:
        _log_status(f"{name} failed: {e}")
        raise ToolError(f"Error executing {name}: {e}") from e
    return _log_response(name, text)


# =============================================================================
# TOOL 1: slab_search
# =============================================================================
@mcp.tool()
async def slab_search(query: str, limit: int = DEFAULT_LIMIT) -> str:
    """Search through Slab documentation and posts.

    Returns a readable summary of matching posts, users and comments:
    title, owner, topics, dates and a short content preview for each hit.
    Use the post ID from a result with slab_get_post to read it in full.

    Args:
        query: Search query string.
        limit: Maximum number of results to return (default: 10).
    """
    _log_request(SEARCH_TOOL, query=query, limit=limit)
    return await _run_tool(SEARCH_TOOL, {"query": query, "limit": limit})


# =============================================================================
# TOOL 2: slab_get_post
# =============================================================================
@mcp.tool()
async def slab_get_post(postId: str) -> str:
    """Get the full content of a Slab post by its ID.

    Returns the post title, owner, topics, publish/update dates and the
    complete plain-text body.

    Args:
        postId: The ID of the post to retrieve.
    """
    _log_request(GET_POST_TOOL, postId=postId)
    return await _run_tool(GET_POST_TOOL, {"postId": postId})


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Load configuration, wire the service, and serve over stdio."""
    try:
        config = load_config()
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    configure(SlabService(SlabClient(config)))
    _log_status(f"Slab MCP server running on stdio (endpoint: {config.api_url})")

    try:
        mcp.run()
    except KeyboardInterrupt:
        _log_status("Interrupted, shutting down")


if __name__ == "__main__":
    main()
