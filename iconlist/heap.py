"""Binary heaps of keyed entries with a pluggable entry comparator."""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any


def _left(i):
    return 2 * i + 1


def _right(i):
    return 2 * i + 2


def _parent(i):
    return (i - 1) // 2


def compare_keys(a, b):
    """Order two entries by their keys."""
    if a.key < b.key:
        return -1
    if a.key > b.key:
        return 1
    return 0


@dataclass(eq=False)
class HeapEntry:
    """A key with its value; ``index`` is the entry's slot in its heap."""

    key: Any
    value: Any = None
    index: int = 0


class Heap:
    """A min- or max-heap of :class:`HeapEntry` objects.

    ``cmp`` compares two entries and returns a negative, zero or positive
    number. ``capacity`` bounds the number of entries; ``None`` means no bound.
    """

    def __init__(self, capacity=None, cmp=compare_keys, is_min_heap=True):
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.cmp = cmp
        self.is_min_heap = is_min_heap
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        kind = "min" if self.is_min_heap else "max"
        return f"Heap({kind}, {len(self)} entries)"

    def _swap(self, i, j):
        entries = self._entries
        entries[i], entries[j] = entries[j], entries[i]
        entries[i].index = i
        entries[j].index = j

    def _child(self, i):
        return self._entries[i] if i < len(self._entries) else None

    def heapify(self, index):
        """Sink the entry at ``index`` until neither child should be above it."""
        entries = self._entries
        while index < len(entries):
            candidates = [entries[index]]
            candidates += [
                child
                for child in (self._child(_left(index)), self._child(_right(index)))
                if child is not None
            ]
            ordered = sorted(candidates, key=cmp_to_key(self.cmp))
            chosen = ordered[0] if self.is_min_heap else ordered[-1]
            if chosen.index == index:
                return
            target = chosen.index
            self._swap(index, target)
            index = target

    def increase(self, index):
        """Lift the entry at ``index`` while its parent compares lower."""
        while index and self.cmp(self._entries[_parent(index)], self._entries[index]) < 0:
            self._swap(index, _parent(index))
            index = _parent(index)

    def decrease(self, index):
        """Lift the entry at ``index`` while its parent compares higher."""
        while index and self.cmp(self._entries[_parent(index)], self._entries[index]) > 0:
            self._swap(index, _parent(index))
            index = _parent(index)

    def insert(self, entry):
        """Add an entry; raises ValueError for a missing key, IndexError when full."""
        if entry is None or entry.key is None:
            raise ValueError("entry must have a key")
        if self.capacity is not None and len(self._entries) >= self.capacity:
            raise IndexError("heap is full")
        entry.index = len(self._entries)
        self._entries.append(entry)
        if self.is_min_heap:
            self.decrease(entry.index)
        else:
            self.increase(entry.index)

    def _poll(self):
        if not self._entries:
            raise IndexError("poll from an empty heap")
        top = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            last.index = 0
            self.heapify(0)
        return top

    def poll_min(self):
        """Remove and return the lowest entry of a min-heap."""
        if not self.is_min_heap:
            raise TypeError("poll_min on a max-heap")
        return self._poll()

    def poll_max(self):
        """Remove and return the highest entry of a max-heap."""
        if self.is_min_heap:
            raise TypeError("poll_max on a min-heap")
        return self._poll()

    def _top_value(self):
        if not self._entries:
            raise IndexError("heap is empty")
        return self._entries[0].value

    def get_min(self):
        """Value of the lowest entry of a min-heap, left in place."""
        if not self.is_min_heap:
            raise TypeError("get_min on a max-heap")
        return self._top_value()

    def get_max(self):
        """Value of the highest entry of a max-heap, left in place."""
        if self.is_min_heap:
            raise TypeError("get_max on a min-heap")
        return self._top_value()

    def replace_key(self, entry, key):
        """Give ``entry`` a new key that moves it towards the top, and lift it."""
        if key is None:
            raise ValueError("key must not be None")
        if not (0 <= entry.index < len(self._entries)) or self._entries[entry.index] is not entry:
            raise ValueError("entry is not in this heap")
        entry.key = key
        if self.is_min_heap:
            self.decrease(entry.index)
        else:
            self.increase(entry.index)