from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Tombstone:
    pass


@dataclass
class Occupied:
    key: Any
    value: Any


Slot = Empty | Tombstone | Occupied


EMPTY = Empty()
TOMBSTONE = Tombstone()
