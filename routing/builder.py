import pandas as pd
import logging
from typing import Tuple
from ortools.constraint_solver import pywrapcp
from core.constraint_manager import ConstraintManager
from core.state import RoutingState
from schemas.routing import RoutingData
from utils.constants import ROUTING_TIME_LIMIT
from .rules import (
    capacity_dimension_rule,
    distance_dimension_rule,
    finalizer_rule,
    pickup_delivery_rule,
    time_dimension_rule,
    time_window_rule,
)
from .solver import solve_routing
from .extractor import extract_routes

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    encoding="utf-8",
)
logger = logging.getLogger(__name__)


# == Compile Routing Model ==
def compile_routing_model(data: RoutingData) -> RoutingState:
    """
    Compile the routing tables into an OR-tools routing model.

    Dimensions come first since the precedence, window and finaliser rules
    constrain their cumul variables.
    """
    logger.info("🚚 Building routing model...")
    manager = pywrapcp.RoutingIndexManager(
        data.numNodes,
        data.numVehicles,
        [v.start for v in data.vehicles],
        [v.end for v in data.vehicles],
    )
    routing = pywrapcp.RoutingModel(manager)
    state = RoutingState(manager=manager, routing=routing, data=data)

    cm = ConstraintManager(routing, state)
    cm.add_rule(distance_dimension_rule)  # Arc cost and route length
    cm.add_rule(time_dimension_rule)  # Travel plus service time
    cm.add_rule(capacity_dimension_rule)  # Load on board
    cm.add_rule(pickup_delivery_rule, condition=bool(data.pickupsDeliveries))
    cm.add_rule(time_window_rule)
    cm.add_rule(finalizer_rule)  # Tighten start/end times

    state.objective = cm.apply_all()
    logger.info(f"Dimensions: {', '.join(state.dimensions)}")
    return state


# == Build Routing Model ==
def build_routing_model(
    data: RoutingData,
    time_limit: int = ROUTING_TIME_LIMIT,
) -> Tuple[pd.DataFrame, dict]:
    """
    Builds and solves the routing model.
    Returns a stops DataFrame and a totals dict.
    """
    state = compile_routing_model(data)
    result = solve_routing(state, time_limit=time_limit)
    logger.info("✅ Route plan found.")
    return extract_routes(state, result)
