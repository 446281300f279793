from __future__ import annotations

from typing import Any, TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict, total=False):
    """
    A stored todo record.

    Fields:
    - id: Integer identifier assigned by the store, never changed afterwards
    - title: Caller-supplied title
    - description: Caller-supplied description
    - completed: Completion flag; absent when the caller never set it

    Fields the caller omitted are absent from the record. Values are stored
    as sent; usually strings and a boolean, but nothing enforces that.
    """

    id: int
    title: Any
    description: Any
    completed: Any
