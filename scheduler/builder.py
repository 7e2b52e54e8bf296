import pandas as pd
from typing import Optional, Tuple
import logging
from ortools.sat.python import cp_model
from core.constraint_manager import ConstraintManager
from core.objective import Objective
from core.state import ScheduleState
from schemas.schedule import SchedulingData
from scheduler.setup import setup_model
from scheduler.rules import *
from scheduler.runner import solve_schedule
from utils.constants import NUM_SEARCH_WORKERS, RANDOM_SEED, SOLVER_TIME_LIMIT

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    encoding="utf-8",
)
logger = logging.getLogger(__name__)


# == Compile Schedule Model ==
def compile_schedule_model(
    data: SchedulingData,
) -> Tuple[cp_model.CpModel, ScheduleState, Objective]:
    """
    Compile the scheduling tables into a CP-SAT model.

    Rules are applied in a fixed order; each returns its penalty terms and the
    merged objective is returned alongside the model, not yet minimised.
    """
    logger.info("📋 Building model...")
    model, state = setup_model(data)

    cm = ConstraintManager(model, state)
    cm.add_rule(daily_shift_rule)  # Exactly one shift per day
    cm.add_rule(fixed_assignments_rule)  # Pre-assigned shifts
    cm.add_rule(employee_requests_rule)  # Weighted wishes
    cm.add_rule(consecutive_shift_rule)  # Run-length policies
    cm.add_rule(weekly_sum_rule)  # Weekly count policies
    cm.add_rule(shift_transition_rule)  # Forbidden / penalised transitions
    cm.add_rule(cover_rule)  # Minimum cover and excess penalty

    objective = cm.apply_all()
    logger.info(f"Objective components: {', '.join(objective.components()) or 'none'}")
    return model, state, objective


# == Build Schedule Model ==
def build_schedule_model(
    data: SchedulingData,
    timeout: float = SOLVER_TIME_LIMIT,
    num_workers: int = NUM_SEARCH_WORKERS,
    seed: Optional[int] = None,
) -> tuple[pd.DataFrame, pd.DataFrame, dict, dict]:
    """
    Builds a shift schedule satisfying hard constraints and minimising penalties.
    Returns a schedule DataFrame, a summary DataFrame, a penalty breakdown and solver metrics.
    """
    model, state, objective = compile_schedule_model(data)
    return solve_schedule(
        model,
        state,
        objective,
        timeout=timeout,
        num_workers=num_workers,
        seed=RANDOM_SEED if seed is None else seed,
    )
