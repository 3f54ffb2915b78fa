# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses describe the pieces of a Slab GraphQL response that the
# formatter cares about.  Everything is built per request and thrown away
# afterwards; nothing here is persisted.
#
# SEARCH RESULTS ARE A TAGGED UNION:
#   Slab's search edges hold a node that is one of PostSearchResult,
#   UserSearchResult or CommentSearchResult, but the response carries no
#   discriminator field.  parse_search_result() looks at the node ONCE and
#   returns one of PostResult / CommentResult / UserResult / UnknownResult,
#   so the formatter can dispatch on the type instead of repeating null
#   checks.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# Leaf records
# -----------------------------------------------------------------------------
@dataclass
class Person:
    """A Slab user as it appears in owner / author / user fields."""

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class Topic:
    id: Optional[str] = None
    name: Optional[str] = None


@dataclass
class Post:
    """A Slab post.

    ``content`` is left untouched: Slab returns it either as a JSON string
    holding a Quill delta or as the already-decoded list of operations.
    rich_text.extract_plain_text() handles both.
    """

    id: Optional[str] = None
    title: Optional[str] = None
    content: Any = None
    inserted_at: Optional[str] = None       # ISO-8601 timestamps, all optional
    updated_at: Optional[str] = None
    published_at: Optional[str] = None      # None → never published
    owner: Optional[Person] = None
    topics: list[Topic] = field(default_factory=list)


@dataclass
class Comment:
    id: Optional[str] = None
    content: Any = None
    inserted_at: Optional[str] = None
    author: Optional[Person] = None


@dataclass
class PageInfo:
    """Cursor metadata for the returned page.  Fetched, never rendered."""

    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None


# -----------------------------------------------------------------------------
# Search result variants
# -----------------------------------------------------------------------------
@dataclass
class PostResult:
    post: Post
    title: Optional[str] = None         # search-specific title / highlight
    highlight: Any = None
    content: Any = None


@dataclass
class UserResult:
    user: Person
    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass
class CommentResult:
    comment: Comment
    content: Any = None


@dataclass
class UnknownResult:
    """A node that matched none of the known shapes; kept verbatim."""

    raw: Any = None


SearchResult = Union[PostResult, UserResult, CommentResult, UnknownResult]


@dataclass
class SearchPage:
    results: list[SearchResult] = field(default_factory=list)
    page_info: Optional[PageInfo] = None


# =============================================================================
# Parsing helpers: raw GraphQL dicts → dataclasses
# =============================================================================
# Every helper tolerates missing keys and nulls.  A malformed sub-record
# becomes None rather than an exception, because one odd edge must not sink
# the whole result page.
# =============================================================================
def parse_person(raw: Any) -> Optional[Person]:
    if not isinstance(raw, dict):
        return None
    return Person(id=raw.get("id"), name=raw.get("name"), email=raw.get("email"))


def parse_topics(raw: Any) -> list[Topic]:
    if not isinstance(raw, list):
        return []
    return [
        Topic(id=item.get("id"), name=item.get("name"))
        for item in raw
        if isinstance(item, dict)
    ]


def parse_post(raw: Any) -> Optional[Post]:
    """Build a Post from the GraphQL ``post`` selection (None if absent)."""
    if not isinstance(raw, dict):
        return None
    return Post(
        id=raw.get("id"),
        title=raw.get("title"),
        content=raw.get("content"),
        inserted_at=raw.get("insertedAt"),
        updated_at=raw.get("updatedAt"),
        published_at=raw.get("publishedAt"),
        owner=parse_person(raw.get("owner")),
        topics=parse_topics(raw.get("topics")),
    )


def parse_comment(raw: Any) -> Optional[Comment]:
    if not isinstance(raw, dict):
        return None
    return Comment(
        id=raw.get("id"),
        content=raw.get("content"),
        inserted_at=raw.get("insertedAt"),
        author=parse_person(raw.get("author")),
    )


def parse_page_info(raw: Any) -> Optional[PageInfo]:
    if not isinstance(raw, dict):
        return None
    return PageInfo(
        has_next_page=bool(raw.get("hasNextPage")),
        has_previous_page=bool(raw.get("hasPreviousPage")),
        start_cursor=raw.get("startCursor"),
        end_cursor=raw.get("endCursor"),
    )


def parse_search_result(node: Any) -> SearchResult:
    """Decide the variant of a search node by which nested record is present.

    Probe order is post → comment → user.  Anything else (including a null
    node) becomes UnknownResult carrying the raw value.
    """
    if not isinstance(node, dict):
        return UnknownResult(raw=node)

    post = parse_post(node.get("post"))
    if post is not None:
        return PostResult(
            post=post,
            title=node.get("title"),
            highlight=node.get("highlight"),
            content=node.get("content"),
        )

    comment = parse_comment(node.get("comment"))
    if comment is not None:
        return CommentResult(comment=comment, content=node.get("content"))

    user = parse_person(node.get("user"))
    if user is not None:
        return UserResult(
            user=user,
            name=node.get("name"),
            title=node.get("title"),
            description=node.get("description"),
        )

    return UnknownResult(raw=node)


def parse_search_page(search: dict) -> SearchPage:
    """Turn the ``search`` connection into a SearchPage."""
    edges = search.get("edges") or []
    results = [
        parse_search_result(edge.get("node") if isinstance(edge, dict) else None)
        for edge in edges
    ]
    return SearchPage(results=results, page_info=parse_page_info(search.get("pageInfo")))
