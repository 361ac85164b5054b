from typing import Dict, Hashable, Optional


class KeyIndex:
    """Maps each cached key to the recency-list slot holding its Entry."""
    def __init__(self):
        self._slots: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._slots

    def lookup(self, key: Hashable) -> Optional[int]:
        return self._slots.get(key)

    def register(self, key: Hashable, index: int) -> None:
        self._slots[key] = index

    def discard(self, key: Hashable) -> Optional[int]:
        """Forgets `key`, returning the slot it pointed at (None if unknown)."""
        return self._slots.pop(key, None)

    def clear(self) -> None:
        self._slots.clear()
