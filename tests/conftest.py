from __future__ import annotations

import pytest
from ortools.sat.python import cp_model

from core.objective import Objective
from schemas.schedule import SchedulingData
from utils.loader import load_routing_data


def fixed_sequence(model: cp_model.CpModel, pattern: list[int], name: str = "x") -> list:
    """Boolean variables pinned to `pattern`."""
    works = [model.NewBoolVar(f"{name}{i}") for i in range(len(pattern))]
    for var, value in zip(works, pattern):
        model.Add(var == value)
    return works


def solve(model: cp_model.CpModel, objective: Objective | None = None):
    if objective is not None:
        objective.minimize(model)
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = 10
    solver.parameters.num_workers = 1
    status = solver.Solve(model)
    return solver, status


def small_scheduling_payload(**overrides) -> dict:
    """Four employees over one week, one morning and one afternoon shift."""
    payload = {
        "employees": ["Ana", "Ben", "Caro", "Dev"],
        "numWeeks": 1,
        "shifts": ["-", "M", "A"],
        "consecutiveShiftConstraints": [
            [0, 1, 1, 0, 2, 2, 0],
        ],
        "weeklySumConstraints": [
            [0, 1, 2, 4, 2, 3, 2],
        ],
        "fixedAssignments": [
            {"employee": 0, "shift": 1, "day": 0},
            {"employee": 1, "shift": 0, "day": 0},
        ],
        "requests": [
            {"employee": 2, "shift": 0, "day": 6, "weight": -2},
        ],
        "dailyShiftDemands": [[1, 1]] * 7,
        "excessCoverPenalties": [1, 1],
        "shiftTransitionPenalties": [
            {"previousShift": 2, "nextShift": 1, "penalty": 0},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def small_scheduling_data() -> SchedulingData:
    return SchedulingData.model_validate(small_scheduling_payload())


@pytest.fixture
def routing_demo():
    return load_routing_data()
