from typing import Any, Hashable, Iterator, List, Optional

from hotcache.engine.entry import NIL, Entry


class RecencyList:
    """
    Doubly linked recency order over Entries, most recently used at the head.

    Entries live in an arena of slots and link to each other by slot index.
    Reclaimed slots go on a free list and are reused by the next insert, so
    every structural operation is O(1) given a slot index.
    """
    def __init__(self):
        self._slots: List[Optional[Entry]] = []
        self._free: List[int] = []
        self._head = NIL
        self._tail = NIL
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Entry]:
        """Walks from head (MRU) to tail (LRU)."""
        index = self._head
        while index != NIL:
            entry = self._slots[index]
            yield entry
            index = entry.next

    @property
    def head(self) -> int:
        return self._head

    @property
    def tail(self) -> int:
        return self._tail

    def entry(self, index: int) -> Entry:
        """Returns the live Entry stored at `index`."""
        entry = self._slots[index] if 0 <= index < len(self._slots) else None
        if entry is None:
            raise IndexError(f"Slot {index} is not live.")
        return entry

    def add_first(self, key: Hashable, value: Any) -> int:
        """Stores a new Entry in a free slot and links it as head. Returns its slot."""
        entry = Entry(key, value)
        if self._free:
            index = self._free.pop()
            self._slots[index] = entry
        else:
            index = len(self._slots)
            self._slots.append(entry)

        self._link_first(index, entry)
        self._size += 1
        return index

    def move_to_head(self, index: int) -> None:
        """Marks the Entry at `index` as most recently used."""
        if index == self._head:
            return
        entry = self.entry(index)
        self._unlink(entry)
        self._link_first(index, entry)

    def remove_tail(self) -> Optional[Entry]:
        """Unlinks and returns the least recently used Entry, None if empty."""
        if self._tail == NIL:
            return None
        return self.remove(self._tail)

    def remove(self, index: int) -> Optional[Entry]:
        """
        Unlinks the Entry at `index` wherever it sits in the order and frees
        its slot. Returns the detached Entry, or None if the slot is not live.
        """
        entry = self._slots[index] if 0 <= index < len(self._slots) else None
        if entry is None:
            return None

        self._unlink(entry)
        self._slots[index] = None
        self._free.append(index)
        self._size -= 1
        return entry.detach()

    def clear(self) -> None:
        """Drops every Entry without walking the chain."""
        self._slots = []
        self._free = []
        self._head = NIL
        self._tail = NIL
        self._size = 0

    def _link_first(self, index: int, entry: Entry) -> None:
        entry.prev = NIL
        entry.next = self._head
        if self._head != NIL:
            self._slots[self._head].prev = index
        self._head = index
        if self._tail == NIL:
            self._tail = index

    def _unlink(self, entry: Entry) -> None:
        prev_index, next_index = entry.prev, entry.next

        if prev_index != NIL:
            self._slots[prev_index].next = next_index
        else:
            self._head = next_index

        if next_index != NIL:
            self._slots[next_index].prev = prev_index
        else:
            self._tail = prev_index

        entry.prev = NIL
        entry.next = NIL
