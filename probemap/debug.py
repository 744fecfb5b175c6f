from typing import TYPE_CHECKING

from .shared import printf, printf_err
from .slots import Empty, Occupied, Slot, Tombstone
from .table import SlotTable

if TYPE_CHECKING:
    from .hashmap import HashMap


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


def trace_resize(reason: str, old: SlotTable, new: SlotTable):
    if not _debug_trace_resize:
        return
    printf_err(
        "[{0:s}] {1:d} -> {2:d} ({3:d} live)\n",
        reason,
        old.capacity,
        new.capacity,
        new.live_count,
    )


def dump_map(m: "HashMap", name: str):
    dump_table(m._table, name)


def dump_table(table: SlotTable, name: str):
    printf(
        "== {0:s} (capacity {1:d}, live {2:d}, used {3:d}) ==\n",
        name,
        table.capacity,
        table.live_count,
        table.used_count,
    )

    for index, slot in enumerate(table.slots):
        dump_slot(table, index, slot)


def dump_slot(table: SlotTable, index: int, slot: Slot):
    printf("{0:04d} ", index)
    match slot:
        case Empty():
            printf("EMPTY\n")
        case Tombstone():
            printf("TOMBSTONE\n")
        case Occupied(key=key, value=value):
            home = table.hasher(key) % table.capacity
            printf("{0:<9s} {1:s} = {2:s}", "OCCUPIED", repr(key), repr(value))
            if home != index:
                printf(" (home {0:04d}, +{1:d})", home, probe_distance(table, home, index))
            printf("\n")


def probe_distance(table: SlotTable, home: int, index: int) -> int:
    return (index - home) % table.capacity
