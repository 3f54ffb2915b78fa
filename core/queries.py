# =============================================================================
# core/queries.py  —  GraphQL documents sent to Slab
# =============================================================================
# Both queries request the full Post field set (see models.Post).  The search
# query also selects pageInfo; only one page is ever fetched.
# =============================================================================

_POST_FIELDS = """
        id
        title
        content
        insertedAt
        updatedAt
        publishedAt
        owner {
          id
          name
          email
        }
        topics {
          id
          name
        }
"""

SEARCH_QUERY = """
query SearchPosts($query: String!, $first: Int) {
  search(query: $query, first: $first) {
    edges {
      node {
        ... on PostSearchResult {
          title
          content
          highlight
          post {%s}
        }
        ... on UserSearchResult {
          name
          title
          description
          user {
            id
            name
            email
          }
        }
        ... on CommentSearchResult {
          content
          comment {
            id
            content
            insertedAt
            author {
              id
              name
              email
            }
          }
        }
      }
    }
    pageInfo {
      hasNextPage
      hasPreviousPage
      startCursor
      endCursor
    }
  }
}
""" % _POST_FIELDS

GET_POST_QUERY = """
query GetPost($id: ID!) {
  post(id: $id) {%s}
}
""" % _POST_FIELDS
