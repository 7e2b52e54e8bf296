from core.objective import Objective
from core.sequence import add_soft_sequence_constraint
from core.state import ScheduleState
from core.sums import add_soft_sum_constraint
from utils.constants import *
import logging

"""
This module contains the bound policy rules and the cover rule for the shift
scheduling problem. Their hard bounds must hold for a feasible solution to
exist; their soft bounds feed the objective.
"""

logger = logging.getLogger(__name__)


def consecutive_shift_rule(model, state: ScheduleState) -> Objective:
    """
    Apply each consecutive shift policy to every employee over the whole horizon.

    A policy on shift 0 bounds runs of consecutive days off; a policy on a
    working shift bounds runs of that shift (e.g. consecutive nights).
    """
    objective = Objective()
    for constraint in state.data.consecutiveShiftConstraints:
        policy = constraint.to_policy()
        for e in range(state.num_employees):
            works = state.works_for(e, constraint.shift, range(state.num_days))
            objective = objective + add_soft_sequence_constraint(
                model,
                works,
                policy,
                f"shift_constraint(employee {e}, shift {constraint.shift})",
            )
    logger.debug(f"consecutive shift rule: {len(objective)} penalty literals")
    return objective


def weekly_sum_rule(model, state: ScheduleState) -> Objective:
    """Apply each weekly sum policy to every employee and every week."""
    objective = Objective()
    for constraint in state.data.weeklySumConstraints:
        policy = constraint.to_policy()
        for e in range(state.num_employees):
            for w in range(state.num_weeks):
                days = range(w * DAYS_PER_WEEK, (w + 1) * DAYS_PER_WEEK)
                _, contribution = add_soft_sum_constraint(
                    model,
                    state.works_for(e, constraint.shift, days),
                    policy,
                    f"weekly_sum_constraint(employee {e}, shift {constraint.shift}, week {w})",
                )
                objective = objective + contribution
    return objective


def cover_rule(model, state: ScheduleState) -> Objective:
    """
    Meet the minimum cover of every working shift on every day.

    The number of employees on a shift lies between the weekday's demand and the
    head count. Employees above the demand cost the shift's excess cover penalty.
    """
    data = state.data
    if not data.dailyShiftDemands:
        return Objective()

    terms = Objective()
    # Shift 0 is the day off and has no cover.
    for s in range(1, state.num_shifts):
        over_penalty = data.excessCoverPenalties[s - 1]
        for w in range(state.num_weeks):
            for day in range(DAYS_PER_WEEK):
                d = w * DAYS_PER_WEEK + day
                works = [state.work[e, s, d] for e in range(state.num_employees)]
                min_demand = data.dailyShiftDemands[day][s - 1]
                worked = model.NewIntVar(min_demand, state.num_employees, "")
                model.Add(worked == sum(works))
                if over_penalty > 0:
                    name = f"excess_demand(shift={s}, week={w}, day={day})"
                    excess = model.NewIntVar(0, state.num_employees - min_demand, name)
                    model.Add(excess == worked - min_demand)
                    terms = terms.with_term(excess, over_penalty, "excess_cover", name)
    return terms
