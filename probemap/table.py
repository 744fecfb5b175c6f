from dataclasses import dataclass
from typing import Any, Iterator

from .errors import TableFullError
from .hashing import Hasher
from .slots import EMPTY, TOMBSTONE, Empty, Occupied, Slot, Tombstone


@dataclass(eq=False)
class SlotTable:
    capacity: int
    hasher: Hasher
    live_count: int
    used_count: int
    slots: list[Slot]

    def __init__(self, capacity: int, hasher: Hasher) -> None:
        self.capacity = capacity
        self.hasher = hasher
        self.live_count = 0
        self.used_count = 0
        self.slots = [EMPTY] * capacity

    def find_slot(self, key: Any) -> tuple[int | None, bool]:
        """Walk the probe chain of ``key``.

        Returns ``(index, True)`` for the slot holding ``key``, otherwise
        ``(index, False)`` for the slot an insert should take: the first
        tombstone on the chain, else the empty slot that ended it. The index
        is None only if the chain covers the whole table with no free slot.
        """
        tombstone: int | None = None
        index = self.hasher(key) % self.capacity

        for _ in range(self.capacity):
            match self.slots[index]:
                case Empty():
                    if tombstone is not None:
                        return tombstone, False
                    return index, False
                case Tombstone():
                    if tombstone is None:
                        tombstone = index
                case Occupied(key=k) if k == key:
                    return index, True

            index = (index + 1) % self.capacity

        return tombstone, False

    def find(self, key: Any) -> int | None:
        index, found = self.find_slot(key)
        return index if found else None

    def insert(self, key: Any, value: Any) -> bool:
        index, found = self.find_slot(key)
        if found:
            return False

        if index is None:
            raise TableFullError(key)
        self.place(index, key, value)
        return True

    def place(self, index: int, key: Any, value: Any):
        match self.slots[index]:
            case Empty():
                self.used_count += 1
            case Occupied():
                raise ValueError(f"slot {index} is occupied")

        self.slots[index] = Occupied(key, value)
        self.live_count += 1

    def erase(self, key: Any) -> bool:
        index = self.find(key)
        if index is None:
            return False

        self.slots[index] = TOMBSTONE
        self.live_count -= 1
        return True

    def occupant(self, index: int) -> Occupied:
        slot = self.slots[index]
        assert isinstance(slot, Occupied)
        return slot

    def next_occupied(self, position: int) -> int:
        while position < self.capacity and not isinstance(
            self.slots[position], Occupied
        ):
            position += 1
        return position

    def occupied(self) -> Iterator[Occupied]:
        for slot in self.slots:
            if isinstance(slot, Occupied):
                yield slot

    def tombstone_count(self) -> int:
        return self.used_count - self.live_count

    def rebuilt(self, capacity: int) -> "SlotTable":
        table = SlotTable(capacity, self.hasher)
        for slot in self.occupied():
            table.insert(slot.key, slot.value)
        return table
