from ortools.sat.python import cp_model
import logging
from typing import Any, Optional, Tuple
from core.objective import Objective
from exceptions.custom_errors import (
    InfeasibleModelError,
    ModelInvalidError,
    SolutionNotAvailableError,
    UnknownSolverStatusError,
)
from utils.constants import (
    LOG_SEARCH_PROGRESS,
    NUM_SEARCH_WORKERS,
    RANDOM_SEED,
    RELATIVE_GAP_LIMIT,
    SOLVER_TIME_LIMIT,
)

logger = logging.getLogger(__name__)

SOLVED_STATUSES = (cp_model.OPTIMAL, cp_model.FEASIBLE)


class SolverResult:
    def __init__(
        self,
        solver: cp_model.CpSolver,
        status: Any,
        objective: Objective,
    ):
        """
        Initialize a SolverResult instance.

        Args:
            solver (cp_model.CpSolver): The CP solver used for solving the model.
            status (Any): The status of the solver after the solving attempt.
            objective (Objective): The penalty terms the model minimised.
        """
        self.solver = solver
        self.status = status
        self.objective = objective

    @property
    def status_name(self) -> str:
        return self.solver.StatusName(self.status)

    @property
    def is_solved(self) -> bool:
        return self.status in SOLVED_STATUSES

    @property
    def is_optimal(self) -> bool:
        return self.status == cp_model.OPTIMAL

    def _require_solution(self):
        if not self.is_solved:
            raise SolutionNotAvailableError(
                f"No solution to read: solver finished with status {self.status_name}."
            )

    def value(self, var) -> int:
        """Value of a variable or linear expression in the solution."""
        self._require_solution()
        return self.solver.Value(var)

    def boolean_value(self, literal) -> bool:
        self._require_solution()
        return self.solver.BooleanValue(literal)

    @property
    def objective_value(self) -> float:
        self._require_solution()
        return self.solver.ObjectiveValue()

    @property
    def best_bound(self) -> float:
        self._require_solution()
        return self.solver.BestObjectiveBound()

    def penalty_breakdown(self) -> dict:
        """Objective contribution of each rule family."""
        return self.objective.breakdown(self.value)


class ObjectiveLoggingCallback(cp_model.CpSolverSolutionCallback):
    """Logs the objective, bound and gap each time an improving solution is found."""

    def __init__(self) -> None:
        super().__init__()
        self._last_objective: Optional[float] = None
        self.solution_count = 0

    def OnSolutionCallback(self) -> None:  # pragma: no cover - runtime callback
        objective = self.ObjectiveValue()
        bound = self.BestObjectiveBound()
        self.solution_count += 1

        if self._last_objective is not None and objective == self._last_objective:
            return

        self._last_objective = objective
        if objective == bound:
            gap = 0.0
        elif objective != 0:
            gap = abs(objective - bound) / abs(objective)
        else:
            gap = float("inf")

        logger.info(
            f"New solution #{self.solution_count}: objective={objective:.6g}  bound={bound:.6g}  gap={gap:.4%}"
        )


def configure_solver(
    timeout: float = SOLVER_TIME_LIMIT,
    num_workers: int = NUM_SEARCH_WORKERS,
    seed: int = RANDOM_SEED,
) -> cp_model.CpSolver:
    """Configure the CP solver."""
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.random_seed = seed
    solver.parameters.relative_gap_limit = RELATIVE_GAP_LIMIT
    solver.parameters.num_workers = num_workers
    solver.parameters.log_search_progress = LOG_SEARCH_PROGRESS
    return solver


def get_model_size(model: cp_model.CpModel) -> Tuple[int, int]:
    """Get the number of constraints and variables in the model."""
    proto = model.Proto()
    num_constraints = len(proto.constraints)
    num_vars = len(proto.variables)
    return num_constraints, num_vars


def ensure_solved(solver: cp_model.CpSolver, status) -> None:
    """
    Raise the error matching a terminal status that carries no solution.

    Raises:
        ModelInvalidError: The model did not pass validation.
        InfeasibleModelError: The model was proven infeasible.
        UnknownSolverStatusError: A search limit was reached before any status was determined.
    """
    name = solver.StatusName(status)
    if status in SOLVED_STATUSES:
        return
    if status == cp_model.INFEASIBLE:
        raise InfeasibleModelError("The problem has been proven infeasible.", name)
    if status == cp_model.MODEL_INVALID:
        raise ModelInvalidError(
            "The model didn't pass the validation step. "
            "Call model.Validate() for a detailed error.",
            name,
        )
    if status == cp_model.UNKNOWN:
        raise UnknownSolverStatusError(
            "The status of the model is still unknown. A search limit has been "
            "reached before any solution could be found or infeasibility proven.",
            name,
        )
    raise UnknownSolverStatusError(f"Unexpected solver status {name}.", name)


def solve_model(
    model: cp_model.CpModel,
    objective: Objective,
    timeout: float = SOLVER_TIME_LIMIT,
    num_workers: int = NUM_SEARCH_WORKERS,
    seed: int = RANDOM_SEED,
) -> SolverResult:
    """
    Minimise `objective` on `model` and validate the terminal status.

    Returns:
        SolverResult: a result whose values can be read.

    Raises:
        SolverStatusError: a subclass naming why no solution is available.
    """
    objective.minimize(model)

    num_constraints, num_vars = get_model_size(model)
    logger.info(f"→ #constraints = {num_constraints},  #vars = {num_vars},  #penalty terms = {len(objective)}")

    solver = configure_solver(timeout, num_workers, seed)
    callback = ObjectiveLoggingCallback()
    status = solver.Solve(model, callback)

    logger.info(f"Solver status: {solver.StatusName(status)}")
    logger.info(f"⏱ Solve time: {solver.WallTime():.2f} seconds")
    ensure_solved(solver, status)

    result = SolverResult(solver, status, objective)
    logger.info(f"Objective value: {result.objective_value}")
    return result
