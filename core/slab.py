# =============================================================================
# core/slab.py  —  Search and post retrieval operations
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Composes the GraphQL client, the model parsers and the formatter into
#   the two operations exposed as tools:
#
#     search(term, limit)  → text block describing up to ``limit`` hits
#     get_post(post_id)    → text block with one full post
#
# TWO RESULT CHANNELS:
#   - Return value: ALWAYS a text block.  "Nothing found" and GraphQL errors
#     that are still visible on the unwrapped data are valid outcomes and
#     are described in the text.
#   - Exceptions: transport failures and envelope errors raised by
#     SlabClient propagate unchanged; the tools/ layer classifies them.
# =============================================================================

import logging

from core.errors import dump_compact
from core.formatting import format_post, format_search_page, no_results_text
from core.graphql_client import SlabClient
from core.models import parse_post, parse_search_page
from core.queries import GET_POST_QUERY, SEARCH_QUERY

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class SlabService:
    """The operations behind the ``slab_search`` and ``slab_get_post`` tools."""

    def __init__(self, client: SlabClient):
        self.client = client

    async def search(self, term: str, limit: int = DEFAULT_LIMIT) -> str:
        """Search Slab for ``term`` and render a single page of results."""
        data = await self.client.execute(
            SEARCH_QUERY, {"query": term, "first": limit or DEFAULT_LIMIT}
        )

        if data.get("errors"):
            logger.warning("Search for %r returned errors", term)
            return "Search failed with errors: " + dump_compact(data["errors"])

        search = data.get("search")
        if not search or not search.get("edges"):
            logger.info("No search results found for %r", term)
            return no_results_text(term)

        page = parse_search_page(search)
        return format_search_page(term, page)

    async def get_post(self, post_id: str) -> str:
        """Fetch one post by ID and render it in full."""
        data = await self.client.execute(GET_POST_QUERY, {"id": post_id})

        if data.get("errors"):
            logger.warning("Fetching post %s returned errors", post_id)
            return "Error getting post: " + dump_compact(data["errors"])

        post = parse_post(data.get("post"))
        if post is None:
            logger.info("No post found with ID %s", post_id)
            return f"No post found with ID: {post_id}"

        return format_post(post)
