import pandas as pd
from typing import Tuple
from ortools.sat.python import cp_model
from core.objective import Objective
from core.state import ScheduleState
from utils.constants import NUM_SEARCH_WORKERS, RANDOM_SEED, SOLVER_TIME_LIMIT
from .solver import solve_model
from .extractor import extract_schedule_and_summary
import logging

logger = logging.getLogger(__name__)


def solve_schedule(
    model: cp_model.CpModel,
    state: ScheduleState,
    objective: Objective,
    timeout: float = SOLVER_TIME_LIMIT,
    num_workers: int = NUM_SEARCH_WORKERS,
    seed: int = RANDOM_SEED,
) -> Tuple[pd.DataFrame, pd.DataFrame, dict, dict]:
    """
    Solve the scheduling model and extract the schedule.

    Args:
        model (cp_model.CpModel): The CP model.
        state (ScheduleState): The state of the scheduling problem.
        objective (Objective): The merged penalty terms of every rule.

    Returns:
        tuple: A tuple of (schedule_df, summary_df, penalties, metrics)

    Raises:
        SolverStatusError: If the solver returns no solution. Nothing is read back in that case.
    """
    result = solve_model(model, objective, timeout, num_workers, seed)

    if result.is_optimal:
        logger.info("✅ Optimal schedule found.")
    else:
        logger.info("✅ Feasible schedule found (time limit reached before proving optimality).")

    schedule_df, summary_df, penalties, metrics = extract_schedule_and_summary(state, result)
    logger.info("📁 Schedule and summary generated.")
    return schedule_df, summary_df, penalties, metrics
