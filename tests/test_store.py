import logging
import threading

import pytest

from todo_server.store import TodoNotFoundError, TodoStore


@pytest.fixture()
def store():
    return TodoStore()


class TestTodoStore:
    def test_create_then_get(self, store):
        tid = store.create({"title": "A", "description": "B"})
        assert store.get(tid) == {"title": "A", "description": "B", "id": tid}

    def test_ids_unique_without_deletes(self, store):
        ids = [store.create({"title": str(i)}) for i in range(50)]
        assert ids == list(range(1, 51))

    def test_create_ignores_supplied_id(self, store):
        tid = store.create({"id": 7, "title": "x"})
        assert tid == 1
        assert store.get(1)["id"] == 1

    def test_list_empty_raises(self, store):
        with pytest.raises(TodoNotFoundError):
            store.list()
        assert store.list(allow_empty=True) == []

    def test_list_after_one_create(self, store):
        tid = store.create({"title": "Only"})
        assert store.list() == [store.get(tid)]

    def test_list_returns_copies(self, store):
        store.create({"title": "Original"})
        store.list()[0]["title"] = "Mutated"
        store.get(1)["title"] = "Mutated"
        assert store.get(1)["title"] == "Original"

    def test_update_merges_fields(self, store):
        tid = store.create({"title": "A", "description": "B", "completed": False})
        updated = store.update(tid, {"completed": True})
        assert updated == {"title": "A", "description": "B", "completed": True, "id": tid}
        assert store.get(tid) == updated

    def test_update_keeps_id(self, store):
        tid = store.create({"title": "A"})
        store.update(tid, {"id": 100, "title": "B"})
        assert store.get(tid) == {"title": "B", "id": tid}

    def test_update_missing_leaves_store_unchanged(self, store):
        store.create({"title": "A"})
        before = store.list()
        with pytest.raises(TodoNotFoundError) as excinfo:
            store.update(5, {"title": "B"})
        assert excinfo.value.todo_id == 5
        assert store.list() == before

    def test_delete_twice(self, store):
        tid = store.create({"title": "A"})
        store.create({"title": "B"})
        store.delete(tid)
        assert len(store) == 1
        with pytest.raises(TodoNotFoundError):
            store.delete(tid)

    def test_delete_logs_removed_record(self, store, caplog):
        tid = store.create({"title": "Logged"})
        with caplog.at_level(logging.INFO, logger="todo_server.store"):
            store.delete(tid)
        assert "Deleted todo" in caplog.text
        assert "Logged" in caplog.text

    def test_clear(self, store):
        store.create({"title": "A"})
        store.create({"title": "B"})
        store.clear()
        assert len(store) == 0
        assert store.create({"title": "C"}) == 1

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            TodoStore(id_policy="random")


class TestIdPolicies:
    def test_rewind_reuses_highest_deleted_id(self, store):
        for i in range(3):
            store.create({"title": str(i)})
        store.delete(3)
        assert store.create({"title": "again"}) == 3

    def test_rewind_counter_follows_last_element(self, store):
        for i in range(3):
            store.create({"title": str(i)})
        store.delete(1)
        assert store.create({"title": "next"}) == 4
        assert [t["id"] for t in store.list()] == [2, 3, 4]

    def test_rewind_to_zero_when_empty(self, store):
        store.create({"title": "a"})
        store.create({"title": "b"})
        store.delete(2)
        store.delete(1)
        assert store.create({"title": "fresh"}) == 1

    def test_rewind_keeps_ids_distinct(self, store):
        for i in range(5):
            store.create({"title": str(i)})
        for tid in (5, 2, 4):
            store.delete(tid)
            store.create({"title": "refill"})
        ids = [t["id"] for t in store.list()]
        assert len(ids) == len(set(ids))

    def test_monotonic_never_reuses(self):
        store = TodoStore(id_policy="monotonic")
        for i in range(3):
            store.create({"title": str(i)})
        store.delete(3)
        store.delete(2)
        store.delete(1)
        assert store.create({"title": "next"}) == 4


class TestConcurrency:
    def test_parallel_creates_get_distinct_ids(self, store):
        results = []
        results_lock = threading.Lock()

        def worker():
            ids = [store.create({"title": "t"}) for _ in range(100)]
            with results_lock:
                results.extend(ids)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == list(range(1, 801))
        assert len(store) == 800
