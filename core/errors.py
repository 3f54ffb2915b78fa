# =============================================================================
# core/errors.py  —  Exception taxonomy
# =============================================================================
#
#   SlabError
#     ├── ConfigError      → missing / invalid environment configuration
#     ├── TransportError   → the HTTP call came back with a non-2xx status
#     └── GraphQLError     → 2xx response whose envelope carries "errors"
#
# Rich-text decoding problems are NOT in this list: rich_text.py always
# degrades to a plain rendering instead of raising.
# =============================================================================

import json


class SlabError(Exception):
    """Base class for every error raised by the core package."""


class ConfigError(SlabError):
    """Raised when required configuration is missing."""


class TransportError(SlabError):
    """The Slab endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class GraphQLError(SlabError):
    """The response envelope contained a non-empty ``errors`` list."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__(f"GraphQL errors: {dump_compact(errors)}")


def dump_compact(value) -> str:
    """Serialize ``value`` as compact JSON, falling back to ``str`` for odd types."""
    return json.dumps(value, separators=(",", ":"), default=str)
