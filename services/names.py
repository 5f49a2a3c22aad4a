"""
Name Normalization

Case- and diacritic-insensitive comparison of free-text queries against
player and team names.
"""

import unicodedata

from core.exceptions import MalformedQuery


def normalize_name(name: str) -> str:
    """
    Normalize a name by removing diacritics and converting to lowercase.

    Examples:
        >>> normalize_name("Nikola Jokić")
        'nikola jokic'
        >>> normalize_name("  LeBron James ")
        'lebron james'
    """
    # Decompose unicode characters (e.g., é → e + combining accent)
    normalized = unicodedata.normalize("NFD", name)

    # Remove combining diacritical marks
    ascii_name = "".join(c for c in normalized if unicodedata.category(c) != "Mn")

    return ascii_name.casefold().strip()


def normalize_query(query: str | None, kind: str = "query") -> str:
    """
    Validate a free-text query and return its normalized form.

    Raises:
        MalformedQuery: if the query is missing or normalizes to nothing
            (whitespace, lone combining marks)
    """
    normalized = normalize_name(query) if query is not None else ""
    if not normalized:
        raise MalformedQuery(f"{kind} must not be empty", query=query)
    return normalized


def contains(normalized_query: str, candidate: str) -> bool:
    """True if ``candidate`` contains the (already normalized) query."""
    return normalized_query in normalize_name(candidate)
