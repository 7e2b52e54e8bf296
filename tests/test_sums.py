from __future__ import annotations

import pytest
from ortools.sat.python import cp_model

from conftest import fixed_sequence, solve
from core.policy import BoundPolicy
from core.sums import add_soft_sum_constraint

WEEKLY_POLICY = BoundPolicy(hard_min=1, soft_min=2, min_penalty=7, soft_max=2, hard_max=3, max_penalty=4)


def _pattern(k: int, size: int = 7) -> list[int]:
    return [1] * k + [0] * (size - k)


@pytest.mark.parametrize("k, expected", [(1, 7), (2, 0), (3, 4)])
def test_sum_penalty_matches_distance_to_soft_range(k: int, expected: int) -> None:
    model = cp_model.CpModel()
    works = fixed_sequence(model, _pattern(k))

    sum_var, objective = add_soft_sum_constraint(model, works, WEEKLY_POLICY, "week")
    solver, status = solve(model, objective)

    assert status == cp_model.OPTIMAL
    assert solver.Value(sum_var) == k
    assert solver.ObjectiveValue() == expected
    assert objective.evaluate(solver.Value) == WEEKLY_POLICY.penalty_for(k)


@pytest.mark.parametrize("k", [0, 4, 7])
def test_sum_outside_hard_range_is_infeasible(k: int) -> None:
    model = cp_model.CpModel()
    works = fixed_sequence(model, _pattern(k))

    add_soft_sum_constraint(model, works, WEEKLY_POLICY, "week")
    _, status = solve(model)

    assert status == cp_model.INFEASIBLE


def test_zero_hard_min_with_soft_min_above() -> None:
    policy = BoundPolicy(0, 1, 3, 4, 4, 0)
    model = cp_model.CpModel()
    works = fixed_sequence(model, _pattern(0))

    _, objective = add_soft_sum_constraint(model, works, policy, "week")
    solver, status = solve(model, objective)

    assert status == cp_model.OPTIMAL
    assert solver.ObjectiveValue() == 3
    assert [term.label for term in objective] == ["week: under_sum"]


def test_no_terms_without_soft_bands() -> None:
    model = cp_model.CpModel()
    works = [model.NewBoolVar(f"x{i}") for i in range(7)]

    _, objective = add_soft_sum_constraint(model, works, BoundPolicy(1, 1, 5, 3, 3, 5), "week")

    assert len(objective) == 0


def test_solver_prefers_sums_inside_soft_range() -> None:
    model = cp_model.CpModel()
    works = [model.NewBoolVar(f"x{i}") for i in range(7)]

    sum_var, objective = add_soft_sum_constraint(model, works, WEEKLY_POLICY, "week")
    solver, status = solve(model, objective)

    assert status == cp_model.OPTIMAL
    assert solver.Value(sum_var) == 2
    assert solver.ObjectiveValue() == 0
