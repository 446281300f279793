from __future__ import annotations

from typing import Optional


# PUBLIC_INTERFACE
def parse_todo_id(raw: str) -> Optional[int]:
    """
    Parse a todo identifier taken from the URL path.

    Args:
        raw: The path segment as received, e.g. "12" or " 12 ".

    Returns:
        The integer id, or None when the segment is not made of ASCII digits
        only (signs, underscores and other digit scripts are rejected).
        A None result can never match a stored todo.
    """
    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)
