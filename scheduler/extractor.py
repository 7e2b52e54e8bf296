import pandas as pd
from core.state import ScheduleState
from .solver import SolverResult
from utils.constants import DAYS_PER_WEEK, WEEKDAY_LABELS
import logging

logger = logging.getLogger(__name__)


def day_headers(num_days: int) -> list:
    """Column headers such as 'W1 Mon' for every day of the horizon."""
    return [
        f"W{d // DAYS_PER_WEEK + 1} {WEEKDAY_LABELS[d % DAYS_PER_WEEK]}"
        for d in range(num_days)
    ]


def assigned_shift(state: ScheduleState, result: SolverResult, employee: int, day: int) -> int:
    """The shift index the solution assigns to `employee` on `day`."""
    for s in range(state.num_shifts):
        if result.boolean_value(state.work[employee, s, day]):
            return s
    raise ValueError(f"No shift assigned to employee {employee} on day {day}")


def weekly_sum_penalty(state: ScheduleState, shifts: list) -> int:
    """Penalty the weekly sum policies charge for one employee's shift sequence."""
    total = 0
    for constraint in state.data.weeklySumConstraints:
        policy = constraint.to_policy()
        for w in range(state.num_weeks):
            week = shifts[w * DAYS_PER_WEEK:(w + 1) * DAYS_PER_WEEK]
            total += policy.penalty_for(sum(1 for s in week if s == constraint.shift))
    return total


def extract_schedule_and_summary(state: ScheduleState, result: SolverResult):
    """
    Extract a schedule and summary from a solver result.

    Returns:
        tuple: (schedule_df, summary_df, penalties, metrics)
            schedule_df: employees × days, cell = shift label.
            summary_df: per employee, the number of days on each shift, the
                requests granted and violated, and the weekly sum penalty.
            penalties: objective contribution per rule family.
            metrics: solver status, objective value, the penalty total
                re-evaluated from the terms, bound and wall time.
    """
    headers = day_headers(state.num_days)
    assignments = {
        e: [assigned_shift(state, result, e, d) for d in range(state.num_days)]
        for e in range(state.num_employees)
    }

    schedule_df = pd.DataFrame(
        [[state.shift_labels[s] for s in assignments[e]] for e in range(state.num_employees)],
        index=state.employees,
        columns=headers,
    )

    summary = []
    for e, name in enumerate(state.employees):
        row = {"Employee": name}
        for s, label in enumerate(state.shift_labels):
            row[f"Days {label}"] = sum(1 for a in assignments[e] if a == s)
        row["Requests Granted"] = sum(
            1
            for req in state.data.requests
            if req.employee == e and req.weight < 0 and assignments[e][req.day] == req.shift
        )
        row["Requests Violated"] = sum(
            1
            for req in state.data.requests
            if req.employee == e and req.weight > 0 and assignments[e][req.day] == req.shift
        )
        row["Weekly Sum Penalty"] = weekly_sum_penalty(state, assignments[e])
        summary.append(row)
    summary_df = pd.DataFrame(summary).set_index("Employee")

    penalties = result.penalty_breakdown()
    metrics = {
        "status": result.status_name,
        "objective": result.objective_value,
        "penalty_total": result.objective.evaluate(result.value),
        "best_bound": result.best_bound,
        "wall_time": result.solver.WallTime(),
    }
    logger.info(f"Penalty breakdown: {penalties}")
    return schedule_df, summary_df, penalties, metrics
