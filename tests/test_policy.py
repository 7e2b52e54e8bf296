from __future__ import annotations

import pytest

from core.policy import BoundPolicy
from exceptions.custom_errors import InvalidBoundPolicyError
from schemas.schedule import ShiftBoundPolicy


def test_policy_accepts_ordered_bounds() -> None:
    policy = BoundPolicy(1, 2, 20, 3, 4, 5)

    assert policy.penalises_short
    assert policy.penalises_long
    assert policy.penalty_for(4) == 5


@pytest.mark.parametrize(
    "values",
    [
        (3, 2, 1, 4, 5, 1),  # hard_min > soft_min
        (1, 4, 1, 3, 5, 1),  # soft_min > soft_max
        (1, 2, 1, 6, 5, 1),  # soft_max > hard_max
        (-1, 0, 1, 2, 3, 1),
        (1, 2, -1, 3, 4, 1),
        (1, 2, 1, 3, 4, -5),
    ],
)
def test_policy_rejects_broken_invariants(values) -> None:
    with pytest.raises(InvalidBoundPolicyError):
        BoundPolicy.from_tuple(values)


def test_zero_penalty_switches_band_off() -> None:
    policy = BoundPolicy(0, 1, 0, 3, 5, 0)

    assert not policy.penalises_short
    assert not policy.penalises_long


def test_penalty_for_is_linear_in_distance_to_soft_range() -> None:
    policy = BoundPolicy(1, 2, 7, 2, 3, 4)

    assert policy.penalty_for(1) == 7
    assert policy.penalty_for(2) == 0
    assert policy.penalty_for(3) == 4


def test_schema_accepts_compact_list_form() -> None:
    shift_policy = ShiftBoundPolicy.model_validate([3, 1, 2, 20, 3, 4, 5])

    assert shift_policy.shift == 3
    assert shift_policy.to_policy() == BoundPolicy(1, 2, 20, 3, 4, 5)


def test_schema_rejects_short_list() -> None:
    with pytest.raises(ValueError):
        ShiftBoundPolicy.model_validate([3, 1, 2])
