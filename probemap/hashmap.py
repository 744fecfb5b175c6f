import copy
from dataclasses import dataclass
import logging
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from . import debug
from .cursor import Cursor, MutableCursor
from .errors import KeyNotFound
from .hashing import Hasher, default_hash
from .policy import DEFAULT_POLICY, ResizePolicy
from .table import SlotTable


logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class TableStats:
    capacity: int
    live_count: int
    used_count: int

    @property
    def tombstones(self) -> int:
        return self.used_count - self.live_count

    @property
    def load_factor(self) -> float:
        return self.live_count / self.capacity


class HashMap(Generic[K, V]):
    """Open-addressing map with linear probing and tombstone deletion.

    Every insert runs the capacity check before probing and every successful
    erase runs the tombstone check after it; either may replace the slot
    table, which invalidates all outstanding cursors.

    ``insert`` never overwrites: inserting a key that is already present is a
    no-op. ``m[key] = value`` assigns, inserting the key first if needed.

    ``index(key)`` is the inserting subscript: an absent key is stored with a
    value from ``default_factory`` (None without one). ``m[key]`` is the
    checked lookup ``at`` and raises KeyNotFound instead.
    """

    def __init__(
        self,
        pairs: Iterable[tuple[K, V]] = (),
        hasher: Hasher = default_hash,
        default_factory: Callable[[], V] | None = None,
        policy: ResizePolicy = DEFAULT_POLICY,
    ) -> None:
        self._hasher = hasher
        self._default_factory = default_factory
        self._policy = policy
        self._table = SlotTable(policy.min_capacity, hasher)

        for key, value in pairs:
            self.insert(key, value)

    def insert(self, key: K, value: V) -> bool:
        self._check_capacity()
        return self._table.insert(key, value)

    def erase(self, key: K) -> bool:
        if not self._table.erase(key):
            return False

        self._check_tombstones()
        return True

    def find(self, key: K) -> Cursor:
        return Cursor(self, self._table, self._position_of(key))

    def find_mut(self, key: K) -> MutableCursor:
        return MutableCursor(self, self._table, self._position_of(key))

    def contains(self, key: K) -> bool:
        return self._table.find(key) is not None

    def at(self, key: K) -> V:
        index = self._table.find(key)
        if index is None:
            raise KeyNotFound(key)
        return self._table.occupant(index).value

    def get(self, key: K, default: V | None = None) -> V | None:
        index = self._table.find(key)
        if index is None:
            return default
        return self._table.occupant(index).value

    def index(self, key: K) -> V:
        index = self._table.find(key)
        if index is not None:
            return self._table.occupant(index).value

        value = self._default_value()
        self.insert(key, value)
        return value

    def size(self) -> int:
        return self._table.live_count

    def empty(self) -> bool:
        return self._table.live_count == 0

    def capacity(self) -> int:
        return self._table.capacity

    def stats(self) -> TableStats:
        return TableStats(
            capacity=self._table.capacity,
            live_count=self._table.live_count,
            used_count=self._table.used_count,
        )

    def hash_function(self) -> Hasher:
        return self._hasher

    def clear(self):
        logger.debug(
            "clear: dropping %d entries, capacity %d -> %d",
            self._table.live_count,
            self._table.capacity,
            self._policy.min_capacity,
        )
        self._table = SlotTable(self._policy.min_capacity, self._hasher)

    def begin(self) -> Cursor:
        return Cursor(self, self._table, 0)

    def begin_mut(self) -> MutableCursor:
        return MutableCursor(self, self._table, 0)

    def end(self) -> Cursor:
        return Cursor(self, self._table, self._table.capacity)

    def items(self) -> Iterator[tuple[K, V]]:
        cursor = self.begin()
        while not cursor.at_end():
            yield cursor.item()
            cursor.advance()

    def keys(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[V]:
        for _, value in self.items():
            yield value

    def copy(self) -> "HashMap[K, V]":
        return type(self)(
            self.items(),
            hasher=self._hasher,
            default_factory=self._default_factory,
            policy=self._policy,
        )

    def assign(self, other: "HashMap[K, V]") -> "HashMap[K, V]":
        if other is self:
            return self

        self._hasher = other._hasher
        self._default_factory = other._default_factory
        self._policy = other._policy
        self.clear()
        for key, value in other.items():
            self.insert(key, value)
        return self

    def _position_of(self, key: K) -> int:
        index = self._table.find(key)
        return self._table.capacity if index is None else index

    def _default_value(self) -> Any:
        if self._default_factory is None:
            return None
        return self._default_factory()

    def _check_capacity(self):
        table = self._table
        if self._policy.should_grow(table.live_count, table.capacity):
            self._rebuild(self._policy.grown(table.capacity, table.live_count), "grow")
        self._check_tombstones()

    def _check_tombstones(self):
        table = self._table
        if self._policy.should_shrink(table.live_count, table.used_count):
            self._rebuild(self._policy.shrunk(table.capacity, table.live_count), "shrink")

    def _rebuild(self, capacity: int, reason: str):
        old = self._table
        self._table = old.rebuilt(capacity)

        logger.debug(
            "%s: capacity %d -> %d, %d live, %d tombstones dropped",
            reason,
            old.capacity,
            capacity,
            old.live_count,
            old.tombstone_count(),
        )
        debug.trace_resize(reason, old, self._table)

    def __len__(self) -> int:
        return self._table.live_count

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V):
        index = self._table.find(key)
        if index is None:
            self.insert(key, value)
        else:
            self._table.occupant(index).value = value

    def __delitem__(self, key: K):
        if not self.erase(key):
            raise KeyNotFound(key)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __copy__(self) -> "HashMap[K, V]":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "HashMap[K, V]":
        clone = type(self)(
            hasher=self._hasher,
            default_factory=self._default_factory,
            policy=self._policy,
        )
        memo[id(self)] = clone
        for key, value in self.items():
            clone.insert(copy.deepcopy(key, memo), copy.deepcopy(value, memo))
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in self.items():
            index = other._table.find(key)
            if index is None or other._table.occupant(index).value != value:
                return False
        return True

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{body}}})"
