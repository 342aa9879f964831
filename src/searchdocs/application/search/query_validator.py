"""
Query validation - runs before any network call.

Example:
    >>> validate_query("  rust ")
    '  rust '
    >>> validate_query("   ")
    Traceback (most recent call last):
    ...
    searchdocs.shared.exceptions.EmptyQueryError: Please enter a search query
"""

from __future__ import annotations

from searchdocs.shared.exceptions import EmptyQueryError


def is_blank(query: str | None) -> bool:
    return query is None or not query.strip()


def validate_query(query: str | None) -> str:
    """
    Reject blank or whitespace-only queries.

    The query is returned unmodified; sources receive exactly what the user
    typed.

    Raises:
        EmptyQueryError: Query is None, empty or whitespace-only
    """
    if is_blank(query):
        raise EmptyQueryError(query)
    return query  # type: ignore[return-value]
