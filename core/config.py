# =============================================================================
# core/config.py  —  Server configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the Slab endpoint and API token once at startup and packs them
#   into an immutable SlabConfig that is handed to the GraphQL client.
#
# ENVIRONMENT:
#   SLAB_API_TOKEN   (required)  Static token sent as the Authorization header
#   SLAB_API_URL     (optional)  Defaults to the public Slab GraphQL endpoint
#
#   A .env file in the working directory is loaded first (python-dotenv), so
#   local development works without exporting variables by hand.  Values
#   already present in the environment win over the .env file.
# =============================================================================

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from core.errors import ConfigError

DEFAULT_API_URL = "https://api.slab.com/v1/graphql"


@dataclass(frozen=True)
class SlabConfig:
    """Connection settings for the Slab GraphQL API."""

    api_token: str
    api_url: str = DEFAULT_API_URL


def load_config(environ: Optional[Mapping[str, str]] = None) -> SlabConfig:
    """Build a SlabConfig from the environment.

    Args:
        environ: Mapping to read from.  When omitted, ``.env`` is loaded into
                 the process environment and ``os.environ`` is used.

    Raises:
        ConfigError: if SLAB_API_TOKEN is missing or blank.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    token = (environ.get("SLAB_API_TOKEN") or "").strip()
    if not token:
        raise ConfigError("SLAB_API_TOKEN environment variable is required")

    api_url = (environ.get("SLAB_API_URL") or "").strip() or DEFAULT_API_URL
    return SlabConfig(api_token=token, api_url=api_url)
