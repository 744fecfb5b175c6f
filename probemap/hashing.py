from typing import Any, Callable


Hasher = Callable[[Any], int]

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def default_hash(key: Any) -> int:
    return hash(key)


def fnv1a_32(key: str | bytes) -> int:
    """FNV-1a over the UTF-8 bytes of a string (or raw bytes), 32 bits.

    Unlike the builtin ``hash`` it does not depend on PYTHONHASHSEED, so the
    slot layout of a table keyed by strings is the same on every run.
    """
    if isinstance(key, str):
        key = key.encode("utf-8")

    hash = FNV_OFFSET_BASIS
    for byte in key:
        hash ^= byte
        hash = (hash * FNV_PRIME) & 0xFFFFFFFF
    return hash
