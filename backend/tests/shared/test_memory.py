"""Tests for shared/memory.py."""

from shared.memory import MemoryStore


class TestMemoryStore:

    def test_sequences_start_at_one_per_table(self):
        store = MemoryStore()
        assert store.next_id("user_trips") == 1
        assert store.next_id("user_trips") == 2
        assert store.next_id("verification_history") == 1

    def test_clear_resets_rows_and_sequences(self):
        store = MemoryStore()
        store.users["rider-1"] = {"uid": "rider-1"}
        store.next_id("user_trips")

        store.clear()

        assert store.users == {}
        assert store.next_id("user_trips") == 1
