from typing import Any


def check_limit(limit: Any) -> int:
    """Returns `limit` unchanged if it is a positive integer, else raises ValueError."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit
