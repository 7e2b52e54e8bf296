from core.objective import Objective, PenaltyTerm
from core.state import ScheduleState

"""
This module contains the preference rules for the shift scheduling problem:
weighted employee requests and penalised shift transitions.
"""


def employee_requests_rule(model, state: ScheduleState) -> Objective:
    """
    Add each request's work variable to the objective with the request's weight.

    A negative weight rewards the assignment, a positive one penalises it.
    """
    return Objective.of(
        PenaltyTerm(
            state.work[req.employee, req.shift, req.day],
            req.weight,
            "requests",
            f"request(employee {req.employee}, shift {req.shift}, day {req.day})",
        )
        for req in state.data.requests
    )


def shift_transition_rule(model, state: ScheduleState) -> Objective:
    """
    Forbid or penalise working `previousShift` on one day and `nextShift` on the next.

    A penalty of 0 makes the transition a hard constraint. Otherwise a literal
    is added to the clause and its penalty goes to the objective.
    """
    terms = []
    for tr in state.data.shiftTransitionPenalties:
        for e in range(state.num_employees):
            for d in range(state.num_days - 1):
                transition = [
                    state.work[e, tr.previousShift, d].Not(),
                    state.work[e, tr.nextShift, d + 1].Not(),
                ]
                if tr.penalty == 0:
                    model.AddBoolOr(transition)
                else:
                    name = f"transition(employee {e}, day {d}, {tr.previousShift}->{tr.nextShift})"
                    trans_var = model.NewBoolVar(name)
                    transition.append(trans_var)
                    model.AddBoolOr(transition)
                    terms.append(PenaltyTerm(trans_var, tr.penalty, "transitions", name))
    return Objective.of(terms)
