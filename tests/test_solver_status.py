from __future__ import annotations

import pytest
from ortools.constraint_solver import routing_enums_pb2
from ortools.sat.python import cp_model

from core.objective import Objective
from exceptions.custom_errors import (
    CUSTOM_ERRORS,
    InfeasibleModelError,
    ModelInvalidError,
    SolutionNotAvailableError,
    SolverStatusError,
    SolverTimeLimitError,
    UnknownSolverStatusError,
)
from routing.solver import RoutingResult, ensure_routed
from scheduler.solver import SolverResult, ensure_solved, solve_model

Status = routing_enums_pb2.RoutingSearchStatus


@pytest.mark.parametrize(
    "status, error",
    [
        (cp_model.INFEASIBLE, InfeasibleModelError),
        (cp_model.MODEL_INVALID, ModelInvalidError),
        (cp_model.UNKNOWN, UnknownSolverStatusError),
    ],
)
def test_cp_sat_status_mapping(status, error) -> None:
    with pytest.raises(error) as info:
        ensure_solved(cp_model.CpSolver(), status)

    assert isinstance(info.value, SolverStatusError)
    assert info.value.status_name == cp_model.CpSolver().StatusName(status)


@pytest.mark.parametrize("status", [cp_model.OPTIMAL, cp_model.FEASIBLE])
def test_cp_sat_solved_statuses_pass(status) -> None:
    ensure_solved(cp_model.CpSolver(), status)


@pytest.mark.parametrize(
    "status, error",
    [
        (Status.ROUTING_INVALID, ModelInvalidError),
        (Status.ROUTING_INFEASIBLE, InfeasibleModelError),
        (Status.ROUTING_FAIL, InfeasibleModelError),
        (Status.ROUTING_FAIL_TIMEOUT, SolverTimeLimitError),
        (Status.ROUTING_NOT_SOLVED, UnknownSolverStatusError),
    ],
)
def test_routing_status_mapping(status, error) -> None:
    with pytest.raises(error) as info:
        ensure_routed(status)

    assert info.value.status_name == Status.Value.Name(status)


def test_routing_success_statuses_pass() -> None:
    for status in (
        Status.ROUTING_SUCCESS,
        Status.ROUTING_PARTIAL_SUCCESS_LOCAL_OPTIMUM_NOT_REACHED,
        Status.ROUTING_OPTIMAL,
    ):
        ensure_routed(status)


def test_infeasible_model_raises_before_any_read() -> None:
    model = cp_model.CpModel()
    x = model.NewBoolVar("x")
    model.Add(x == 1)
    model.Add(x == 0)

    with pytest.raises(InfeasibleModelError):
        solve_model(model, Objective(), timeout=5, num_workers=1, seed=0)


def test_reading_unsolved_result_is_rejected() -> None:
    model = cp_model.CpModel()
    x = model.NewBoolVar("x")
    model.Add(x == 1)
    model.Add(x == 0)
    solver = cp_model.CpSolver()
    status = solver.Solve(model)

    result = SolverResult(solver, status, Objective())

    assert not result.is_solved
    with pytest.raises(SolutionNotAvailableError):
        result.value(x)
    with pytest.raises(SolutionNotAvailableError):
        result.boolean_value(x)
    with pytest.raises(SolutionNotAvailableError):
        _ = result.objective_value


def test_reading_routing_result_without_assignment_is_rejected() -> None:
    result = RoutingResult(state=None, status=Status.ROUTING_FAIL, solution=None, objective=Objective())

    assert not result.is_solved
    with pytest.raises(SolutionNotAvailableError):
        result.min(None)
    with pytest.raises(SolutionNotAvailableError):
        _ = result.objective_value


def test_every_raised_error_has_an_http_status() -> None:
    for error in (
        ModelInvalidError,
        InfeasibleModelError,
        SolverTimeLimitError,
        UnknownSolverStatusError,
        SolutionNotAvailableError,
    ):
        assert error in CUSTOM_ERRORS
    assert CUSTOM_ERRORS[InfeasibleModelError] == 422
