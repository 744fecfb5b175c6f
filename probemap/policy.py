from dataclasses import dataclass

from .errors import PolicyError


DEFAULT_MIN_CAPACITY = 8
MAX_LOAD = 0.75
GROWTH_FACTOR = 2
SHRINK_FACTOR = 2
MAX_USED_PER_LIVE = 2


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


@dataclass(frozen=True)
class ResizePolicy:
    """Thresholds of the capacity-check hook.

    A table grows when one more live entry would push it past ``max_load``,
    and shrinks when occupied-plus-tombstoned slots exceed
    ``max_used_per_live`` times the live entries.
    """

    min_capacity: int = DEFAULT_MIN_CAPACITY
    max_load: float = MAX_LOAD
    growth_factor: int = GROWTH_FACTOR
    shrink_factor: int = SHRINK_FACTOR
    max_used_per_live: int = MAX_USED_PER_LIVE

    def __post_init__(self) -> None:
        if (
            not is_power_of_two(self.min_capacity)
            or self.min_capacity < DEFAULT_MIN_CAPACITY
        ):
            raise PolicyError(
                f"min_capacity must be a power of two >= {DEFAULT_MIN_CAPACITY}, "
                f"got {self.min_capacity}"
            )
        # a full table has no empty slot to end a probe chain
        if not 0 < self.max_load < 1:
            raise PolicyError(f"max_load must be in (0, 1), got {self.max_load}")
        for name in ("growth_factor", "shrink_factor"):
            factor = getattr(self, name)
            if factor < 2 or not is_power_of_two(factor):
                raise PolicyError(f"{name} must be a power of two >= 2, got {factor}")
        if self.max_used_per_live < 1:
            raise PolicyError(
                f"max_used_per_live must be >= 1, got {self.max_used_per_live}"
            )

    def fits(self, live_count: int, capacity: int) -> bool:
        return live_count + 1 <= self.max_load * capacity

    def should_grow(self, live_count: int, capacity: int) -> bool:
        return not self.fits(live_count, capacity)

    def should_shrink(self, live_count: int, used_count: int) -> bool:
        return used_count > self.max_used_per_live * live_count

    def grown(self, capacity: int, live_count: int) -> int:
        capacity *= self.growth_factor
        while not self.fits(live_count, capacity):
            capacity *= self.growth_factor
        return capacity

    def shrunk(self, capacity: int, live_count: int) -> int:
        target = max(self.min_capacity, capacity // self.shrink_factor)
        if target < capacity and not self.fits(live_count, target):
            # halving would leave the rebuilt table overloaded
            return capacity
        return target


DEFAULT_POLICY = ResizePolicy()
