# =============================================================================
# core/graphql_client.py  —  Slab GraphQL client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends one POST per call to the Slab GraphQL endpoint and unwraps the
#   response envelope.  The caller gets the ``data`` payload and nothing else.
#
# FAILURE MODES:
#   - non-2xx HTTP status            → TransportError(status_code)
#   - envelope with an "errors" list → GraphQLError(errors)
#   No retries, no custom timeout: failures propagate to the caller at once.
#
# All HTTP goes through httpx.AsyncClient so a tool call only suspends its
# own task while waiting on the network.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.config import SlabConfig
from core.errors import GraphQLError, TransportError

logger = logging.getLogger(__name__)


class SlabClient:
    """Executes GraphQL documents against the configured Slab endpoint."""

    def __init__(
        self,
        config: SlabConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config
        # Tests pass an httpx.MockTransport here.
        self._transport = transport

    @property
    def api_url(self) -> str:
        return self._config.api_url

    def _headers(self) -> dict[str, str]:
        # Slab expects the bare token, without a "Bearer" prefix.
        return {
            "Content-Type": "application/json",
            "Authorization": self._config.api_token,
        }

    async def execute(self, query: str, variables: Optional[dict[str, Any]] = None) -> dict:
        """Run ``query`` with ``variables`` and return the envelope's ``data``.

        Raises:
            TransportError: the endpoint returned a non-2xx status.
            GraphQLError: the envelope contained a non-empty ``errors`` list.
        """
        body = {"query": query, "variables": variables or {}}
        logger.debug("POST %s variables=%s", self._config.api_url, body["variables"])

        async with httpx.AsyncClient(transport=self._transport) as http:
            resp = await http.post(self._config.api_url, json=body, headers=self._headers())

        if not resp.is_success:
            logger.warning("Slab request failed with HTTP %s", resp.status_code)
            raise TransportError(resp.status_code)

        envelope = resp.json()
        errors = envelope.get("errors") if isinstance(envelope, dict) else None
        if errors:
            logger.warning("Slab returned %d GraphQL error(s)", len(errors))
            raise GraphQLError(errors)

        data = envelope.get("data") if isinstance(envelope, dict) else None
        return data or {}
