# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the Slab-facing logic of the server: configuration,
# the GraphQL client, the data models, and the text formatting.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or MCP protocol types.  The
#   tools/ layer wraps these functions; the core can be exercised on its own
#   with a fake HTTP transport.
# =============================================================================
