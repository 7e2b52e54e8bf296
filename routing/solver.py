from ortools.constraint_solver import pywrapcp, routing_enums_pb2
import logging
from typing import Optional
from core.objective import Objective
from core.state import RoutingState
from exceptions.custom_errors import (
    InfeasibleModelError,
    ModelInvalidError,
    SolutionNotAvailableError,
    SolverTimeLimitError,
    UnknownSolverStatusError,
)
from utils.constants import (
    LOG_SEARCH_PROGRESS,
    ROUTING_FIRST_SOLUTION_STRATEGY,
    ROUTING_LOCAL_SEARCH_METAHEURISTIC,
    ROUTING_TIME_LIMIT,
)

logger = logging.getLogger(__name__)

Status = routing_enums_pb2.RoutingSearchStatus

SOLVED_STATUSES = (
    Status.ROUTING_SUCCESS,
    Status.ROUTING_PARTIAL_SUCCESS_LOCAL_OPTIMUM_NOT_REACHED,
    Status.ROUTING_OPTIMAL,
)


def status_name(status) -> str:
    return Status.Value.Name(status)


class RoutingResult:
    """The assignment found by the routing search, readable only when a route plan exists."""

    def __init__(
        self,
        state: RoutingState,
        status,
        solution: Optional[pywrapcp.Assignment],
        objective: Objective,
    ):
        self.state = state
        self.status = status
        self.solution = solution
        self.objective = objective

    @property
    def status_name(self) -> str:
        return status_name(self.status)

    @property
    def is_solved(self) -> bool:
        return self.solution is not None and self.status in SOLVED_STATUSES

    def _require_solution(self):
        if not self.is_solved:
            raise SolutionNotAvailableError(
                f"No route plan to read: routing search finished with status {self.status_name}."
            )

    def value(self, var) -> int:
        self._require_solution()
        return self.solution.Value(var)

    def min(self, var) -> int:
        self._require_solution()
        return self.solution.Min(var)

    def max(self, var) -> int:
        self._require_solution()
        return self.solution.Max(var)

    @property
    def objective_value(self) -> int:
        self._require_solution()
        return self.solution.ObjectiveValue()

    def penalty_breakdown(self) -> dict:
        """Cost of each reported objective component, e.g. the distance span cost."""
        return self.objective.breakdown(self.min)


def configure_search(time_limit: int = ROUTING_TIME_LIMIT):
    """
    Build routing search parameters.

    Strategy names in the configuration are looked up on the OR-tools enums, so
    e.g. "PATH_CHEAPEST_ARC" or "GUIDED_LOCAL_SEARCH" can be set without code changes.
    """
    params = pywrapcp.DefaultRoutingSearchParameters()
    params.first_solution_strategy = getattr(
        routing_enums_pb2.FirstSolutionStrategy, ROUTING_FIRST_SOLUTION_STRATEGY
    )
    params.local_search_metaheuristic = getattr(
        routing_enums_pb2.LocalSearchMetaheuristic, ROUTING_LOCAL_SEARCH_METAHEURISTIC
    )
    params.time_limit.FromSeconds(int(time_limit))
    params.log_search = LOG_SEARCH_PROGRESS
    return params


def ensure_routed(status) -> None:
    """
    Raise the error matching a routing status that carries no route plan.

    Raises:
        ModelInvalidError: The model or the search parameters are invalid.
        InfeasibleModelError: No solution exists, or none was found.
        SolverTimeLimitError: The time limit was reached before the first solution.
        UnknownSolverStatusError: The search was not run or ended in an unexpected state.
    """
    name = status_name(status)
    if status in SOLVED_STATUSES:
        return
    if status == Status.ROUTING_INVALID:
        raise ModelInvalidError("The routing model or its search parameters are invalid.", name)
    if status in (Status.ROUTING_INFEASIBLE, Status.ROUTING_FAIL):
        raise InfeasibleModelError(
            "No route plan satisfies the capacities, time windows and pickup/delivery pairs.",
            name,
        )
    if status == Status.ROUTING_FAIL_TIMEOUT:
        raise SolverTimeLimitError(
            "The time limit was reached before the first route plan was found.", name
        )
    if status == Status.ROUTING_NOT_SOLVED:
        raise UnknownSolverStatusError("The routing problem has not been solved.", name)
    raise UnknownSolverStatusError(f"Unexpected routing status {name}.", name)


def solve_routing(state: RoutingState, time_limit: int = ROUTING_TIME_LIMIT) -> RoutingResult:
    """
    Search for a route plan and validate the terminal status.

    Returns:
        RoutingResult: a result whose values can be read.

    Raises:
        SolverStatusError: a subclass naming why no route plan is available.
    """
    routing = state.routing
    params = configure_search(time_limit)
    logger.info(
        f"→ #nodes = {state.data.numNodes},  #vehicles = {state.data.numVehicles},  "
        f"#pairs = {len(state.data.pickupsDeliveries)}"
    )

    solution = routing.SolveWithParameters(params)
    status = routing.status()
    logger.info(f"Routing status: {status_name(status)}")
    ensure_routed(status)
    if solution is None:
        raise UnknownSolverStatusError(
            f"Routing search reported {status_name(status)} without an assignment.",
            status_name(status),
        )

    result = RoutingResult(state, status, solution, state.objective)
    logger.info(f"Objective value: {result.objective_value}")
    return result
