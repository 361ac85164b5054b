"""
RecencyList tests: arena slots, link structure and O(1) operations
"""
import pytest

from hotcache.engine.entry import NIL
from hotcache.engine.recency_list import RecencyList


def keys(order: RecencyList):
    return [entry.key for entry in order]


def assert_well_formed(order: RecencyList):
    """Walk both directions and check the chain matches size with no cycles"""
    forward = []
    index = order.head
    prev = NIL
    while index != NIL:
        entry = order.entry(index)
        assert entry.prev == prev
        forward.append(index)
        assert len(forward) <= len(order)
        prev, index = index, entry.next
    assert prev == order.tail
    assert len(forward) == len(order)


class TestAddFirst:

    def test_first_entry_is_head_and_tail(self, recency_list):
        index = recency_list.add_first("a", 1)
        assert recency_list.head == index
        assert recency_list.tail == index
        assert len(recency_list) == 1

    def test_new_entries_go_to_head(self, recency_list):
        recency_list.add_first("a", 1)
        recency_list.add_first("b", 2)
        recency_list.add_first("c", 3)
        assert keys(recency_list) == ["c", "b", "a"]
        assert recency_list.entry(recency_list.tail).key == "a"
        assert_well_formed(recency_list)


class TestMoveToHead:

    def test_move_tail_to_head(self, recency_list):
        a = recency_list.add_first("a", 1)
        recency_list.add_first("b", 2)
        recency_list.add_first("c", 3)
        recency_list.move_to_head(a)
        assert keys(recency_list) == ["a", "c", "b"]
        assert recency_list.entry(recency_list.tail).key == "b"
        assert_well_formed(recency_list)

    def test_move_middle_to_head(self, recency_list):
        recency_list.add_first("a", 1)
        b = recency_list.add_first("b", 2)
        recency_list.add_first("c", 3)
        recency_list.move_to_head(b)
        assert keys(recency_list) == ["b", "c", "a"]
        assert_well_formed(recency_list)

    def test_move_head_is_noop(self, recency_list):
        recency_list.add_first("a", 1)
        c = recency_list.add_first("c", 3)
        recency_list.move_to_head(c)
        assert keys(recency_list) == ["c", "a"]
        assert len(recency_list) == 2

    def test_move_dead_slot_raises(self, recency_list):
        a = recency_list.add_first("a", 1)
        recency_list.add_first("b", 2)
        recency_list.remove(a)
        with pytest.raises(IndexError):
            recency_list.move_to_head(a)


class TestRemove:

    def test_remove_tail_returns_lru(self, recency_list):
        recency_list.add_first("a", 1)
        recency_list.add_first("b", 2)
        removed = recency_list.remove_tail()
        assert removed.key == "a"
        assert removed.value == 1
        assert removed.prev == NIL and removed.next == NIL
        assert keys(recency_list) == ["b"]
        assert recency_list.head == recency_list.tail

    def test_remove_tail_on_empty_list(self, recency_list):
        assert recency_list.remove_tail() is None
        assert len(recency_list) == 0

    def test_remove_last_entry_empties_list(self, recency_list):
        a = recency_list.add_first("a", 1)
        recency_list.remove(a)
        assert recency_list.head == NIL
        assert recency_list.tail == NIL
        assert len(recency_list) == 0
        assert list(recency_list) == []

    def test_remove_head_and_middle(self, recency_list):
        recency_list.add_first("a", 1)
        b = recency_list.add_first("b", 2)
        c = recency_list.add_first("c", 3)
        recency_list.add_first("d", 4)
        recency_list.remove(b)
        assert keys(recency_list) == ["d", "c", "a"]
        recency_list.remove(recency_list.head)
        assert keys(recency_list) == ["c", "a"]
        assert recency_list.head == c
        assert_well_formed(recency_list)

    def test_remove_unlinked_slot_is_noop(self, recency_list):
        a = recency_list.add_first("a", 1)
        recency_list.add_first("b", 2)
        assert recency_list.remove(a) is not None
        assert recency_list.remove(a) is None
        assert recency_list.remove(42) is None
        assert len(recency_list) == 1


class TestArena:

    def test_freed_slot_is_reused(self, recency_list):
        recency_list.add_first("a", 1)
        b = recency_list.add_first("b", 2)
        recency_list.remove(b)
        reused = recency_list.add_first("c", 3)
        assert reused == b
        assert recency_list.entry(reused).key == "c"
        assert keys(recency_list) == ["c", "a"]

    def test_clear_resets_everything(self, recency_list):
        for i in range(5):
            recency_list.add_first(i, i)
        recency_list.clear()
        assert len(recency_list) == 0
        assert recency_list.head == NIL
        assert recency_list.tail == NIL
        assert recency_list.add_first("x", 1) == 0
        assert_well_formed(recency_list)

    def test_mixed_operations_keep_chain_consistent(self, recency_list):
        slots = {}
        for i in range(10):
            slots[i] = recency_list.add_first(i, i)
        for i in (0, 5, 9):
            recency_list.remove(slots.pop(i))
        recency_list.move_to_head(slots[3])
        recency_list.remove_tail()
        slots[10] = recency_list.add_first(10, 10)
        assert keys(recency_list) == [10, 3, 8, 7, 6, 4, 2]
        assert_well_formed(recency_list)
