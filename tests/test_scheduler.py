from __future__ import annotations

import pytest

from conftest import small_scheduling_payload
from exceptions.custom_errors import InfeasibleModelError, InputMismatchError
from scheduler.builder import build_schedule_model, compile_schedule_model
from scheduler.extractor import day_headers
from schemas.schedule import SchedulingData
from utils.loader import load_scheduling_data


def _runs(cells: list[str], label: str) -> list[int]:
    runs, length = [], 0
    for cell in cells + [None]:
        if cell == label:
            length += 1
        elif length:
            runs.append(length)
            length = 0
    return runs


def test_small_instance_meets_hard_rules(small_scheduling_data: SchedulingData) -> None:
    schedule, summary, penalties, metrics = build_schedule_model(
        small_scheduling_data, timeout=10, num_workers=1, seed=0
    )

    assert metrics["status"] in ("OPTIMAL", "FEASIBLE")
    assert list(schedule.index) == small_scheduling_data.employees
    assert list(schedule.columns) == day_headers(7)

    # Exactly one label per employee and day.
    assert schedule.isin(["-", "M", "A"]).all().all()

    # Fixed assignments.
    assert schedule.iloc[0, 0] == "M"
    assert schedule.iloc[1, 0] == "-"

    # Cover of one morning and one afternoon every day.
    for day in schedule.columns:
        assert (schedule[day] == "M").sum() >= 1
        assert (schedule[day] == "A").sum() >= 1

    for employee, row in schedule.iterrows():
        cells = list(row)
        # Rest runs within [1, 2], weekly rest days within [1, 3].
        assert all(1 <= run <= 2 for run in _runs(cells, "-"))
        assert 1 <= cells.count("-") <= 3
        # Afternoon followed by morning is forbidden.
        assert not any(a == "A" and b == "M" for a, b in zip(cells, cells[1:]))

    assert summary.loc["Ana", "Days M"] >= 1
    assert summary[["Days -", "Days M", "Days A"]].sum(axis=1).eq(7).all()
    assert sum(penalties.values()) == metrics["objective"]


def test_penalty_components_follow_the_rules(small_scheduling_data: SchedulingData) -> None:
    _, _, objective = compile_schedule_model(small_scheduling_data)

    # The rest run policy has no soft band and the only transition is forbidden outright.
    assert objective.components() == ("requests", "weekly_sum", "excess_cover")


def test_granted_request_is_counted(small_scheduling_data: SchedulingData) -> None:
    schedule, summary, _, _ = build_schedule_model(
        small_scheduling_data, timeout=10, num_workers=1, seed=0
    )

    granted = schedule.loc["Caro", "W1 Sun"] == "-"
    assert summary.loc["Caro", "Requests Granted"] == int(granted)


def test_summary_penalties_agree_with_the_objective(small_scheduling_data: SchedulingData) -> None:
    _, summary, penalties, metrics = build_schedule_model(
        small_scheduling_data, timeout=10, num_workers=1, seed=0
    )

    assert summary["Weekly Sum Penalty"].sum() == penalties.get("weekly_sum", 0)
    assert metrics["penalty_total"] == metrics["objective"]


def test_contradictory_rest_policy_is_infeasible() -> None:
    # Three fixed days off in a row break a rest run limit of two.
    data = SchedulingData.model_validate(
        small_scheduling_payload(
            fixedAssignments=[
                {"employee": 0, "shift": 0, "day": 1},
                {"employee": 0, "shift": 0, "day": 2},
                {"employee": 0, "shift": 0, "day": 3},
            ]
        )
    )

    with pytest.raises(InfeasibleModelError):
        build_schedule_model(data, timeout=10, num_workers=1, seed=0)


def test_inconsistent_tables_are_rejected_before_solving() -> None:
    data = SchedulingData.model_validate(
        small_scheduling_payload(
            fixedAssignments=[
                {"employee": 0, "shift": 1, "day": 0},
                {"employee": 0, "shift": 2, "day": 0},
                {"employee": 9, "shift": 1, "day": 3},
            ],
            dailyShiftDemands=[[1, 5]] * 7,
        )
    )

    with pytest.raises(InputMismatchError) as info:
        compile_schedule_model(data)

    message = str(info.value)
    assert "fixed to shifts [1, 2] on day 0" in message
    assert "employee 9 outside" in message
    assert "demand 5 outside" in message


def test_bad_bound_policy_is_reported_with_other_problems() -> None:
    # hardMin above softMin, alongside a fixed assignment for an unknown employee.
    data = SchedulingData.model_validate(
        small_scheduling_payload(
            consecutiveShiftConstraints=[[0, 3, 1, 0, 2, 2, 0]],
            fixedAssignments=[{"employee": 9, "shift": 1, "day": 3}],
        )
    )

    with pytest.raises(InputMismatchError) as info:
        compile_schedule_model(data)

    message = str(info.value)
    assert "consecutive shift constraint on shift 0: Bound policy must satisfy" in message
    assert "employee 9 outside" in message


def test_demo_data_compiles() -> None:
    data = load_scheduling_data()
    model, state, objective = compile_schedule_model(data)

    assert state.num_days == data.numWeeks * 7
    assert len(state.work) == data.numEmployees * data.numShifts * data.numDays
    assert "transitions" in objective.components()
