"""Query policy — minimum input before any provider is consulted."""

MIN_QUERY_LENGTH = 3


def is_searchable(query: str | None) -> bool:
    """Return True when the raw query is long enough to search for.

    The length is measured on the raw text, without trimming.
    """
    return query is not None and len(query) >= MIN_QUERY_LENGTH
