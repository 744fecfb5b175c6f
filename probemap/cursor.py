from typing import TYPE_CHECKING, Any

from .errors import CursorError, StaleCursorError
from .slots import Occupied
from .table import SlotTable

if TYPE_CHECKING:
    from .hashmap import HashMap


class Cursor:
    """Position in the slot table of a HashMap, resting only on live entries.

    The cursor is bound to the table instance it was created on. A resize
    swaps the map's table for a new one, after which the cursor raises
    StaleCursorError instead of reading the new layout.
    """

    def __init__(self, owner: "HashMap", table: SlotTable, position: int) -> None:
        self._owner = owner
        self._table = table
        self._position = table.next_occupied(position)

    @property
    def position(self) -> int:
        return self._position

    def at_end(self) -> bool:
        return self._position >= self._table.capacity

    def is_valid(self) -> bool:
        return self._owner._table is self._table

    def advance(self) -> "Cursor":
        self._check_table()
        if self.at_end():
            raise CursorError("cannot advance past the end")
        self._position = self._table.next_occupied(self._position + 1)
        return self

    @property
    def key(self) -> Any:
        return self._slot().key

    @property
    def value(self) -> Any:
        return self._slot().value

    def item(self) -> tuple[Any, Any]:
        slot = self._slot()
        return slot.key, slot.value

    def _check_table(self):
        if not self.is_valid():
            raise StaleCursorError("cursor was invalidated by a resize")

    def _slot(self) -> Occupied:
        self._check_table()
        if self.at_end():
            raise CursorError("cannot dereference the end cursor")

        slot = self._table.slots[self._position]
        if not isinstance(slot, Occupied):
            raise StaleCursorError(f"slot {self._position} was erased")
        return slot

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._position == other._position and self._table is other._table

    def __repr__(self) -> str:
        if self.at_end():
            return f"{type(self).__name__}(end)"
        return f"{type(self).__name__}(position={self._position})"


class MutableCursor(Cursor):
    @property
    def value(self) -> Any:
        return self._slot().value

    @value.setter
    def value(self, value: Any):
        self._slot().value = value
