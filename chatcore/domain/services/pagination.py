"""
Page size resolution for cursor-paginated message lists.
"""

from typing import Any


def resolve_page_limit(raw: Any, default: int, maximum: int) -> int:
    """
    Turn a caller-supplied limit into a usable page size.

    Missing, non-numeric and non-positive values fall back to `default`;
    values above `maximum` are capped. Never raises.
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        limit = int(raw)
    except (TypeError, ValueError, OverflowError):
        return default
    if isinstance(raw, float) and raw != limit:
        return default
    if limit < 1:
        return default
    return min(limit, maximum)
