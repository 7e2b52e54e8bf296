from __future__ import annotations

import pytest
from ortools.sat.python import cp_model

from conftest import fixed_sequence, solve
from core.policy import BoundPolicy
from core.sequence import add_soft_sequence_constraint, count_sequence_clauses

NIGHT_POLICY = BoundPolicy(hard_min=1, soft_min=2, min_penalty=20, soft_max=3, hard_max=4, max_penalty=5)


def _solve_pattern(pattern: list[int], policy: BoundPolicy = NIGHT_POLICY):
    model = cp_model.CpModel()
    works = fixed_sequence(model, pattern)
    objective = add_soft_sequence_constraint(model, works, policy, "night")
    solver, status = solve(model, objective)
    return solver, status, objective


def test_run_inside_soft_range_costs_nothing() -> None:
    solver, status, objective = _solve_pattern([0, 0, 1, 1, 1, 0, 0])

    assert status == cp_model.OPTIMAL
    assert solver.ObjectiveValue() == 0
    assert objective.evaluate(solver.Value) == 0


def test_run_above_hard_max_is_infeasible() -> None:
    _, status, _ = _solve_pattern([1, 1, 1, 1, 1, 0, 0])

    assert status == cp_model.INFEASIBLE


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ([0, 0, 1, 0, 0, 0, 0], 20),  # one night, 1 below softMin
        ([0, 1, 1, 1, 1, 0, 0], 5),  # four nights, 1 above softMax
        ([1, 0, 1, 1, 0, 1, 1], 20),  # a single night at the start
        ([1, 1, 1, 1, 0, 1, 0], 25),
    ],
)
def test_soft_band_penalties(pattern: list[int], expected: int) -> None:
    solver, status, objective = _solve_pattern(pattern)

    assert status == cp_model.OPTIMAL
    assert solver.ObjectiveValue() == expected
    assert objective.breakdown(solver.Value) == {"shift_sequence": expected}


def test_run_below_hard_min_is_infeasible() -> None:
    policy = BoundPolicy(2, 2, 0, 3, 3, 0)

    _, status, _ = _solve_pattern([0, 1, 0, 1, 1, 0, 0], policy)

    assert status == cp_model.INFEASIBLE


def test_runs_inside_hard_range_are_always_accepted() -> None:
    policy = BoundPolicy(2, 3, 1000, 3, 4, 1000)

    for pattern in ([1, 1, 0, 1, 1, 1, 1], [0, 1, 1, 1, 0, 1, 1], [0] * 7):
        _, status, _ = _solve_pattern(pattern, policy)
        assert status == cp_model.OPTIMAL


def test_all_false_sequence_is_never_penalised() -> None:
    solver, status, _ = _solve_pattern([0] * 7)

    assert status == cp_model.OPTIMAL
    assert solver.ObjectiveValue() == 0


def test_no_double_penalty_when_max_penalty_is_zero() -> None:
    policy = BoundPolicy(1, 1, 0, 3, 3, 0)

    model = cp_model.CpModel()
    works = [model.NewBoolVar(f"x{i}") for i in range(7)]
    objective = add_soft_sequence_constraint(model, works, policy, "rest")

    assert len(objective) == 0
    counts = count_sequence_clauses(7, policy)
    assert counts["over_soft"] == 0
    assert counts["too_long"] == 7 - 3

    _, status, _ = _solve_pattern([1, 1, 1, 0, 1, 1, 1], policy)
    assert status == cp_model.OPTIMAL
    _, status, _ = _solve_pattern([1, 1, 1, 1, 0, 0, 0], policy)
    assert status == cp_model.INFEASIBLE


def test_clause_counts_are_identical_across_builds() -> None:
    counts = []
    for _ in range(2):
        model = cp_model.CpModel()
        works = [model.NewBoolVar(f"x{i}") for i in range(7)]
        before = len(model.Proto().constraints)
        add_soft_sequence_constraint(model, works, NIGHT_POLICY, "night")
        counts.append(len(model.Proto().constraints) - before)

    expected = count_sequence_clauses(7, NIGHT_POLICY)
    assert counts[0] == counts[1] == sum(expected.values())


def test_penalty_terms_are_labelled_by_window() -> None:
    model = cp_model.CpModel()
    works = [model.NewBoolVar(f"x{i}") for i in range(7)]

    objective = add_soft_sequence_constraint(model, works, NIGHT_POLICY, "night")

    labels = [term.label for term in objective]
    assert "night: under_span(start=0, length=1)" in labels
    assert "night: over_span(start=3, length=4)" in labels
    coefficients = {term.label: term.coefficient for term in objective}
    assert coefficients["night: under_span(start=6, length=1)"] == 20
    assert coefficients["night: over_span(start=0, length=4)"] == 5
