from typing import Any, Hashable

# Slot index meaning "no neighbour" in the recency arena.
NIL = -1


class Entry:
    """
    A single cache slot: key, value and its position in the recency order.
    Neighbours are referenced by slot index, not by object.
    """
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Hashable, value: Any):
        self.key = key
        self.value = value
        self.prev = NIL
        self.next = NIL

    def detach(self) -> "Entry":
        self.prev = NIL
        self.next = NIL
        return self

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, prev={self.prev}, next={self.next})"
