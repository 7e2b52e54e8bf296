from typing import Sequence
from ortools.sat.python import cp_model
from .objective import Objective, PenaltyTerm
from .policy import BoundPolicy
from .spans import count_windows, iter_windows, negated_bounded_span

"""
Sequence constraint on runs of True variables with soft and hard bounds.
"""


def add_soft_sequence_constraint(
    model: cp_model.CpModel,
    works: Sequence[cp_model.IntVar],
    policy: BoundPolicy,
    prefix: str,
    component: str = "shift_sequence",
) -> Objective:
    """
    Look at every maximal run of variables assigned to True in `works`.

    Runs shorter than `hard_min` or longer than `hard_max` are forbidden. Runs
    shorter than `soft_min` or longer than `soft_max` get a penalty literal
    whose cost grows linearly with the distance to the soft bound.

    Args:
        model: The CP-SAT model the clauses are posted on.
        works: The boolean variables, in order.
        policy: The run-length bounds and penalties.
        prefix: Base name for the penalty literals.
        component: Component name recorded on the penalty terms.

    Returns:
        Objective: the penalty terms created by the constraint.
    """
    terms = []
    size = len(works)

    # Forbid runs that are too short.
    for start, length in iter_windows(size, range(1, policy.hard_min)):
        model.AddBoolOr(negated_bounded_span(works, start, length))

    # Penalise runs below the soft limit.
    if policy.min_penalty > 0:
        lengths = range(max(1, policy.hard_min), policy.soft_min)
        for start, length in iter_windows(size, lengths):
            span = negated_bounded_span(works, start, length)
            name = f": under_span(start={start}, length={length})"
            lit = model.NewBoolVar(prefix + name)
            span.append(lit)
            model.AddBoolOr(span)
            coeff = policy.min_penalty * (policy.soft_min - length)
            terms.append(PenaltyTerm(lit, coeff, component, prefix + name))

    # Penalise runs above the soft limit.
    if policy.max_penalty > 0:
        lengths = range(policy.soft_max + 1, policy.hard_max + 1)
        for start, length in iter_windows(size, lengths):
            span = negated_bounded_span(works, start, length)
            name = f": over_span(start={start}, length={length})"
            lit = model.NewBoolVar(prefix + name)
            span.append(lit)
            model.AddBoolOr(span)
            coeff = policy.max_penalty * (length - policy.soft_max)
            terms.append(PenaltyTerm(lit, coeff, component, prefix + name))

    # Any window of hard_max + 1 True variables is forbidden outright.
    for start in range(size - policy.hard_max):
        model.AddBoolOr(
            [works[i].Not() for i in range(start, start + policy.hard_max + 1)]
        )

    return Objective.of(terms)


def count_sequence_clauses(size: int, policy: BoundPolicy) -> dict:
    """Number of clauses `add_soft_sequence_constraint` posts, grouped by kind."""
    under = (
        count_windows(size, range(max(1, policy.hard_min), policy.soft_min))
        if policy.min_penalty > 0
        else 0
    )
    over = (
        count_windows(size, range(policy.soft_max + 1, policy.hard_max + 1))
        if policy.max_penalty > 0
        else 0
    )
    return {
        "too_short": count_windows(size, range(1, policy.hard_min)),
        "under_soft": under,
        "over_soft": over,
        "too_long": max(0, size - policy.hard_max),
    }
