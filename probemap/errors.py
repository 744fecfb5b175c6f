class KeyNotFound(KeyError):
    """Raised by the checked lookups when a key is absent."""


class CursorError(Exception):
    pass


class StaleCursorError(CursorError):
    """The cursor's table was replaced by a resize, or its slot was erased."""


class PolicyError(ValueError):
    pass


class TableFullError(RuntimeError):
    """The probe chain covered every slot without finding a free one."""
