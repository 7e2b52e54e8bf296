from __future__ import annotations

import pytest
from ortools.sat.python import cp_model

from conftest import solve
from core.constraint_manager import ConstraintManager
from core.objective import Objective, PenaltyTerm


def test_objective_merge_keeps_order_and_is_immutable() -> None:
    model = cp_model.CpModel()
    a, b = model.NewBoolVar("a"), model.NewBoolVar("b")
    first = Objective().with_term(a, 3, "requests")
    second = Objective.of([PenaltyTerm(b, 2, "transitions")])

    merged = first + second

    assert len(first) == 1
    assert len(merged) == 2
    assert merged.terms[0].var is a
    assert merged.terms[1].var is b
    assert merged.components() == ("requests", "transitions")


def test_empty_objective_leaves_feasibility_problem() -> None:
    model = cp_model.CpModel()
    model.NewBoolVar("a")

    Objective().minimize(model)

    assert not model.HasObjective()
    assert not Objective()


def test_breakdown_sums_per_component() -> None:
    model = cp_model.CpModel()
    a, b, c = (model.NewBoolVar(n) for n in "abc")
    model.Add(a == 1)
    model.Add(b == 1)
    model.Add(c == 1)
    objective = Objective.of(
        [
            PenaltyTerm(a, 3, "requests"),
            PenaltyTerm(b, -1, "requests"),
            PenaltyTerm(c, 5, "transitions"),
        ]
    )

    solver, status = solve(model, objective)

    assert status == cp_model.OPTIMAL
    assert solver.ObjectiveValue() == 7
    assert objective.breakdown(solver.Value) == {"requests": 2, "transitions": 5}
    assert objective.evaluate(solver.Value) == 7


def test_expression_rejects_foreign_terms() -> None:
    with pytest.raises(TypeError):
        Objective(("not a term",)).expression()


def test_constraint_manager_applies_rules_in_order() -> None:
    model = cp_model.CpModel()
    calls = []

    def first_rule(model, state):
        calls.append("first")
        return Objective().with_term(model.NewBoolVar("x"), 1, "first")

    def hard_rule(model, state):
        calls.append("hard")

    def skipped_rule(model, state):
        calls.append("skipped")
        return Objective()

    cm = ConstraintManager(model, state=None)
    cm.add_rule(first_rule)
    cm.add_rule(hard_rule)
    cm.add_rule(skipped_rule, condition=False)

    objective = cm.apply_all()

    assert calls == ["first", "hard"]
    assert objective.components() == ("first",)
