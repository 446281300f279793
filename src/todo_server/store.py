from __future__ import annotations

import logging
from threading import RLock
from typing import Any, List, Mapping, Optional

from .models import TodoEntity

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TodoNotFoundError(LookupError):
    """Raised when no stored todo has the requested id."""

    def __init__(self, todo_id: Optional[int] = None) -> None:
        self.todo_id = todo_id
        if todo_id is None:
            super().__init__("No todos stored")
        else:
            super().__init__(f"Todo {todo_id} not found")


# PUBLIC_INTERFACE
class TodoStore:
    """
    Thread-safe, ordered in-memory collection of todo records.

    Records are kept in insertion order. Identifiers come from a counter that
    starts at 1. With the default ``rewind`` policy the counter is reset after
    every delete to the id of the last remaining record (0 when empty), so the
    highest id can be handed out again once its holder is gone. The
    ``monotonic`` policy never moves the counter backwards.
    """

    def __init__(self, id_policy: str = "rewind") -> None:
        if id_policy not in {"rewind", "monotonic"}:
            raise ValueError(f"Unknown id policy: {id_policy!r}")
        self._lock = RLock()
        self._items: List[TodoEntity] = []
        self._last_id = 0
        self.id_policy = id_policy

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _index_of(self, todo_id: int) -> int:
        for index, item in enumerate(self._items):
            if item["id"] == todo_id:
                return index
        logger.debug("Todo %s not found", todo_id)
        raise TodoNotFoundError(todo_id)

    def _allocate_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def list(self, allow_empty: bool = False) -> List[TodoEntity]:
        """
        Return copies of all stored todos in insertion order.

        An empty store raises TodoNotFoundError unless ``allow_empty`` is set.
        """
        with self._lock:
            if not self._items and not allow_empty:
                raise TodoNotFoundError()
            return [item.copy() for item in self._items]

    def get(self, todo_id: int) -> TodoEntity:
        """Return a copy of the todo with ``todo_id`` or raise TodoNotFoundError."""
        with self._lock:
            return self._items[self._index_of(todo_id)].copy()

    def create(self, fields: Mapping[str, Any]) -> int:
        """Store a new todo built from ``fields`` and return its assigned id."""
        with self._lock:
            entity: TodoEntity = {k: v for k, v in fields.items() if k != "id"}  # type: ignore[misc]
            entity["id"] = self._allocate_id()
            self._items.append(entity)
            logger.debug("Created todo %s", entity["id"])
            return entity["id"]

    def update(self, todo_id: int, fields: Mapping[str, Any]) -> TodoEntity:
        """
        Merge ``fields`` over the stored todo and return the updated copy.

        Omitted fields keep their values; ``id`` is never overwritten.
        """
        with self._lock:
            index = self._index_of(todo_id)
            updated = self._items[index].copy()
            updated.update({k: v for k, v in fields.items() if k != "id"})  # type: ignore[typeddict-item]
            self._items[index] = updated
            logger.debug("Updated todo %s fields=%s", todo_id, sorted(k for k in fields if k != "id"))
            return updated.copy()

    def delete(self, todo_id: int) -> None:
        """Remove the todo with ``todo_id`` or raise TodoNotFoundError."""
        with self._lock:
            removed = self._items.pop(self._index_of(todo_id))
            if self.id_policy == "rewind":
                self._last_id = self._items[-1]["id"] if self._items else 0
            logger.info("Deleted todo %s", removed)

    def clear(self) -> None:
        """Drop every todo and restart identifiers at 1."""
        with self._lock:
            self._items.clear()
            self._last_id = 0
