from collections import defaultdict
from typing import List
from exceptions.custom_errors import InputMismatchError, InvalidBoundPolicyError
from schemas.schedule import SchedulingData
from utils.constants import DAYS_PER_WEEK


def validate_scheduling_data(data: SchedulingData) -> None:
    """
    Cross-check the scheduling tables against each other.

    Every bound policy must be well ordered, every employee, shift and day
    index must exist, the demand and excess cover
    tables must have one entry per working shift, no demand may exceed the head
    count, and no employee may be pinned to two different shifts on one day.

    Raises:
        InputMismatchError: listing every problem found.
    """
    problems: List[str] = []
    num_employees, num_shifts, num_days = data.numEmployees, data.numShifts, data.numDays
    working_shifts = num_shifts - 1

    def check_index(kind: str, value: int, limit: int, where: str):
        if not 0 <= value < limit:
            problems.append(f"{where}: {kind} {value} outside 0..{limit - 1}")

    def check_policy(policy, where: str):
        try:
            policy.to_policy()
        except InvalidBoundPolicyError as e:
            problems.append(f"{where} on shift {policy.shift}: {e}")

    for policy in data.consecutiveShiftConstraints:
        check_index("shift", policy.shift, num_shifts, "consecutive shift constraint")
        check_policy(policy, "consecutive shift constraint")
    for policy in data.weeklySumConstraints:
        check_index("shift", policy.shift, num_shifts, "weekly sum constraint")
        check_policy(policy, "weekly sum constraint")
        if policy.hardMin > DAYS_PER_WEEK:
            problems.append(
                f"weekly sum constraint on shift {policy.shift}: hardMin {policy.hardMin} exceeds {DAYS_PER_WEEK} days"
            )

    fixed_by_slot = defaultdict(set)
    for fa in data.fixedAssignments:
        where = f"fixed assignment {fa.employee}/{fa.shift}/{fa.day}"
        check_index("employee", fa.employee, num_employees, where)
        check_index("shift", fa.shift, num_shifts, where)
        check_index("day", fa.day, num_days, where)
        fixed_by_slot[fa.employee, fa.day].add(fa.shift)
    for (employee, day), shifts in sorted(fixed_by_slot.items()):
        if len(shifts) > 1:
            problems.append(
                f"employee {employee} is fixed to shifts {sorted(shifts)} on day {day}"
            )

    for req in data.requests:
        where = f"request {req.employee}/{req.shift}/{req.day}"
        check_index("employee", req.employee, num_employees, where)
        check_index("shift", req.shift, num_shifts, where)
        check_index("day", req.day, num_days, where)

    for tr in data.shiftTransitionPenalties:
        check_index("shift", tr.previousShift, num_shifts, "shift transition")
        check_index("shift", tr.nextShift, num_shifts, "shift transition")

    if data.dailyShiftDemands:
        if len(data.dailyShiftDemands) != DAYS_PER_WEEK:
            problems.append(
                f"dailyShiftDemands must have {DAYS_PER_WEEK} rows, got {len(data.dailyShiftDemands)}"
            )
        for day, row in enumerate(data.dailyShiftDemands):
            if len(row) != working_shifts:
                problems.append(
                    f"dailyShiftDemands row {day} must have {working_shifts} entries, got {len(row)}"
                )
            for demand in row:
                if not 0 <= demand <= num_employees:
                    problems.append(
                        f"dailyShiftDemands row {day}: demand {demand} outside 0..{num_employees}"
                    )
        if len(data.excessCoverPenalties) != working_shifts:
            problems.append(
                f"excessCoverPenalties must have {working_shifts} entries, got {len(data.excessCoverPenalties)}"
            )

    if problems:
        msg = ["⚠️ Inconsistent scheduling data:\n"]
        msg.append("\n".join(f"     • {p}" for p in problems))
        raise InputMismatchError("\n".join(msg))
