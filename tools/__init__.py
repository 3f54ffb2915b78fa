# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP protocol and core/.
#     - mcp_server.py registers the tools and runs the stdio server
#     - dispatch.py routes a tool name to its core operation and turns
#       failures into MCP errors (method-not-found / internal-error)
#
#   No Slab-specific logic lives here; it is all in core/.
# =============================================================================
