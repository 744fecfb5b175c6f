import pytest

from probemap.errors import PolicyError
from probemap.policy import DEFAULT_POLICY, ResizePolicy, is_power_of_two


def test_defaults():
    assert DEFAULT_POLICY.min_capacity == 8
    assert DEFAULT_POLICY.max_load == 0.75
    assert DEFAULT_POLICY.growth_factor == 2
    assert DEFAULT_POLICY.shrink_factor == 2
    assert DEFAULT_POLICY.max_used_per_live == 2


def test_is_power_of_two():
    assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


def test_grow():
    p = DEFAULT_POLICY
    assert not p.should_grow(5, 8)
    assert p.should_grow(6, 8)
    assert p.grown(8, 6) == 16


def test_grow_until_fits():
    p = ResizePolicy(max_load=0.1)
    assert p.grown(8, 5) == 64


def test_shrink():
    p = DEFAULT_POLICY
    assert not p.should_shrink(0, 0)
    assert p.should_shrink(0, 1)
    assert not p.should_shrink(2, 4)
    assert p.should_shrink(2, 5)

    assert p.shrunk(64, 10) == 32
    # never below the minimum
    assert p.shrunk(8, 0) == 8
    # halving would overload the table
    assert p.shrunk(64, 31) == 64


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_capacity": 6},
        {"min_capacity": 0},
        {"max_load": 0},
        {"min_capacity": 1},
        {"min_capacity": 4},
        {"max_load": 1.0},
        {"max_load": 1.5},
        {"growth_factor": 3},
        {"growth_factor": 1},
        {"shrink_factor": 1},
        {"max_used_per_live": 0},
    ],
)
def test_invalid_policy(kwargs):
    with pytest.raises(PolicyError):
        ResizePolicy(**kwargs)


def test_policy_error_is_value_error():
    with pytest.raises(ValueError):
        ResizePolicy(min_capacity=12)


def test_smallest_accepted_policy():
    p = ResizePolicy(min_capacity=8, max_load=0.99)
    assert p.min_capacity == 8
    # the last slot always stays free
    assert not p.fits(7, 8)
