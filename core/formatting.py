# =============================================================================
# core/formatting.py  —  Render Slab results as readable text
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns parsed search pages and posts (core/models.py) into the text block
#   that the MCP tool returns.  The output is Markdown-flavoured so the
#   calling agent can show it to a user as-is.
#
# PLACEHOLDERS:
#   Every optional field has a fixed stand-in ("Unknown", "None",
#   "Not published", ...).  A missing field never raises.
# =============================================================================

import json
from datetime import datetime
from functools import singledispatch
from typing import Optional

from core.models import (
    Comment,
    CommentResult,
    Person,
    Post,
    PostResult,
    SearchPage,
    Topic,
    UnknownResult,
    UserResult,
)
from core.rich_text import extract_plain_text

PREVIEW_LENGTH = 200
RESULT_SEPARATOR = "\n---\n"
NO_CONTENT = "No content available"


# -----------------------------------------------------------------------------
# Small field renderers
# -----------------------------------------------------------------------------
def format_date(value: Optional[str]) -> Optional[str]:
    """Render an ISO-8601 timestamp as a US-style date, e.g. ``3/5/2024``.

    The date is taken in the timestamp's own offset.  A value that does not
    parse is returned unchanged; None stays None.
    """
    if not value:
        return None
    if not isinstance(value, str):
        return str(value)
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return value
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_topics(topics: list[Topic]) -> str:
    names = [t.name for t in topics if t.name]
    return ", ".join(names) if names else "None"


def format_person(person: Optional[Person]) -> str:
    """``name (email)`` or ``Unknown``."""
    if person is None:
        return "Unknown"
    return f"{person.name} ({person.email})"


def person_name(person: Optional[Person]) -> str:
    return person.name if person is not None else "Unknown"


def content_preview(content) -> str:
    """First 200 characters of the plain text, followed by ``...``."""
    text = extract_plain_text(content)
    if not text:
        return NO_CONTENT
    return text[:PREVIEW_LENGTH] + "..."


# -----------------------------------------------------------------------------
# Search result blocks, one renderer per variant
# -----------------------------------------------------------------------------
@singledispatch
def format_search_result(result) -> str:
    return format_unknown(UnknownResult(raw=result))


@format_search_result.register
def format_post_result(result: PostResult) -> str:
    post = result.post
    return (
        f"**{post.title}**\n"
        f"Type: Post\n"
        f"ID: {post.id}\n"
        f"Owner: {person_name(post.owner)}\n"
        f"Topics: {format_topics(post.topics)}\n"
        f"Published: {format_date(post.published_at) or 'Not published'}\n"
        f"Updated: {format_date(post.updated_at) or 'Unknown'}\n"
        f"Preview: {content_preview(post.content)}\n"
    )


@format_search_result.register
def format_comment_result(result: CommentResult) -> str:
    comment: Comment = result.comment
    return (
        f"**Comment** by {person_name(comment.author)}\n"
        f"Type: Comment\n"
        f"ID: {comment.id}\n"
        f"Author: {format_person(comment.author)}\n"
        f"Created: {format_date(comment.inserted_at) or 'Unknown'}\n"
        f"Content: {content_preview(comment.content)}\n"
    )


@format_search_result.register
def format_user_result(result: UserResult) -> str:
    user = result.user
    return (
        f"**{user.name}**\n"
        f"Type: User\n"
        f"ID: {user.id}\n"
        f"Email: {user.email or 'Not available'}\n"
        f"Title: {result.title or 'No title'}\n"
        f"Description: {result.description or 'No description'}\n"
    )


@format_search_result.register
def format_unknown(result: UnknownResult) -> str:
    try:
        dumped = json.dumps(result.raw, indent=2, default=str)
    except (TypeError, ValueError):
        dumped = repr(result.raw)
    return f"**Unknown Result Type**\nContent: {dumped}\n"


# -----------------------------------------------------------------------------
# Whole responses
# -----------------------------------------------------------------------------
def no_results_text(term: str) -> str:
    return f'No results found for "{term}"'


def format_search_page(term: str, page: SearchPage) -> str:
    """Header line plus one block per result, separated by ``---``."""
    blocks = [format_search_result(result) for result in page.results]
    header = f'Found {len(blocks)} results matching "{term}":\n\n'
    return header + RESULT_SEPARATOR.join(blocks)


def format_post(post: Post) -> str:
    """Full rendering of a single post; the body is not truncated."""
    body = extract_plain_text(post.content) or NO_CONTENT
    return (
        f"**{post.title}**\n\n"
        f"**Post ID:** {post.id}\n"
        f"**Owner:** {format_person(post.owner)}\n"
        f"**Topics:** {format_topics(post.topics)}\n"
        f"**Published:** {format_date(post.published_at) or 'Not published'}\n"
        f"**Updated:** {format_date(post.updated_at) or 'Unknown'}\n\n"
        f"**Content:**\n{body}"
    )
