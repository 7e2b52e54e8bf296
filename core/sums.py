from typing import Sequence, Tuple
from ortools.sat.python import cp_model
from .objective import Objective, PenaltyTerm
from .policy import BoundPolicy


def add_soft_sum_constraint(
    model: cp_model.CpModel,
    works: Sequence[cp_model.IntVar],
    policy: BoundPolicy,
    prefix: str,
    component: str = "weekly_sum",
) -> Tuple[cp_model.IntVar, Objective]:
    """
    Sum constraint with soft and hard bounds.

    Counts the variables of `works` assigned to True. Sums below `hard_min` or
    above `hard_max` are forbidden; sums below `soft_min` or above `soft_max`
    add `penalty * distance` to the objective through an excess variable.

    The excess is `max(delta, 0)` posted as an `AddMaxEquality`, so the
    encoding stays linear.

    Returns:
        tuple: the sum variable and the penalty terms created.
    """
    terms = []
    # Excess never exceeds the group size unless the policy reaches beyond it.
    bound = max(len(works), policy.hard_max)
    sum_var = model.NewIntVar(policy.hard_min, policy.hard_max, f"{prefix}: sum")
    # Hard bounds live in the domain of sum_var.
    model.Add(sum_var == sum(works))

    zero = model.NewConstant(0)

    # Penalise sums below the soft_min target.
    if policy.penalises_short:
        delta = model.NewIntVar(-bound, bound, "")
        model.Add(delta == policy.soft_min - sum_var)
        excess = model.NewIntVar(0, bound, prefix + ": under_sum")
        model.AddMaxEquality(excess, [delta, zero])
        terms.append(PenaltyTerm(excess, policy.min_penalty, component, prefix + ": under_sum"))

    # Penalise sums above the soft_max target.
    if policy.penalises_long:
        delta = model.NewIntVar(-bound, bound, "")
        model.Add(delta == sum_var - policy.soft_max)
        excess = model.NewIntVar(0, bound, prefix + ": over_sum")
        model.AddMaxEquality(excess, [delta, zero])
        terms.append(PenaltyTerm(excess, policy.max_penalty, component, prefix + ": over_sum"))

    return sum_var, Objective.of(terms)
