# =============================================================================
# main.py  —  Entry Point for the Slab MCP server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads SLAB_API_TOKEN / SLAB_API_URL from the environment (or .env)
#   2. Builds the Slab GraphQL client and service
#   3. Serves the slab_search and slab_get_post tools over stdio
#
#   An MCP host (Claude Desktop, an ADK agent, ...) normally starts this as
#   a subprocess and talks to it over stdin/stdout.
# =============================================================================

from tools.mcp_server import main

if __name__ == "__main__":
    main()
