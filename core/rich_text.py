# =============================================================================
# core/rich_text.py  —  Quill delta → plain text
# =============================================================================
#
# Slab stores post and comment bodies as Quill deltas: an ordered list of
# operations such as
#
#     [{"insert": "Hello "}, {"insert": {"image": "x.png"}}, {"insert": "World\n"}]
#
# Only string inserts carry text.  Embeds (images, mentions, ...) are dropped.
#
# The content may arrive as a JSON string or already decoded.  Nothing in
# here raises: if the input cannot be read as a delta (malformed, or nested
# too deeply to decode), the raw value is rendered with str() instead.
# =============================================================================

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def _delta_ops(content: Any) -> list:
    """Return the list of operations held by ``content``.

    Raises ValueError / TypeError for anything that is not a delta.
    """
    if isinstance(content, (str, bytes)):
        content = json.loads(content)
    if isinstance(content, dict) and "ops" in content:
        content = content["ops"]
    if not isinstance(content, list):
        raise TypeError(f"expected a list of delta operations, got {type(content).__name__}")
    return content


def extract_plain_text(content: Any) -> str:
    """Concatenate the string inserts of a Quill delta and trim the result."""
    if not content:
        return ""

    try:
        ops = _delta_ops(content)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug("Could not decode rich-text content: %s", e)
        return str(content)

    return "".join(
        op["insert"]
        for op in ops
        if isinstance(op, dict) and isinstance(op.get("insert"), str)
    ).strip()
