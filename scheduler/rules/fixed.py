from core.state import ScheduleState

"""
This module contains the structural rules of the shift scheduling problem:
one shift per day and fixed pre-assignments.
"""


def daily_shift_rule(model, state: ScheduleState):
    """Exactly one shift per employee per day. Shift 0 is the day off."""
    for e in range(state.num_employees):
        for d in range(state.num_days):
            model.AddExactlyOne(state.work[e, s, d] for s in range(state.num_shifts))


def fixed_assignments_rule(model, state: ScheduleState):
    """
    Add constraints to the model based on the fixed assignments.

    Each `(employee, shift, day)` pre-assignment forces that work variable on;
    the daily shift rule then turns the other shifts of that day off.
    """
    for fa in state.data.fixedAssignments:
        model.Add(state.work[fa.employee, fa.shift, fa.day] == 1)
