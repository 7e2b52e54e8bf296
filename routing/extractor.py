import pandas as pd
import logging
from core.state import RoutingState
from utils.time_utils import minutes_to_clock
from .rules import CAPACITY, DISTANCE, TIME
from .solver import RoutingResult

logger = logging.getLogger(__name__)

STOP_COLUMNS = [
    "vehicle",
    "position",
    "node",
    "kind",
    "load",
    "distance_m",
    "time_min",
    "time_max",
    "clock",
]


def stop_kind(state: RoutingState, node: int) -> str:
    """'P' for a pickup, 'D' for a delivery, 'depot' for a vehicle start/end, '' otherwise."""
    pairs = state.data.pickupsDeliveries
    if any(node == pickup for pickup, _ in pairs):
        return "P"
    if any(node == delivery for _, delivery in pairs):
        return "D"
    if node in state.data.depots:
        return "depot"
    return ""


def load_after_service(state: RoutingState, result: RoutingResult, index: int) -> int:
    """The Capacity cumul is the load on arrival; add the node's own demand."""
    node = state.manager.IndexToNode(index)
    arrival = result.min(state.dimension(CAPACITY).CumulVar(index))
    return arrival + int(state.data.demands[node])


def _stop(state: RoutingState, result: RoutingResult, vehicle: int, position: int, index: int) -> dict:
    node = state.manager.IndexToNode(index)
    time_var = state.dimension(TIME).CumulVar(index)
    time_min = result.min(time_var)
    return {
        "vehicle": vehicle,
        "position": position,
        "node": node,
        "kind": stop_kind(state, node),
        "load": load_after_service(state, result, index),
        "distance_m": result.min(state.dimension(DISTANCE).CumulVar(index)),
        "time_min": time_min,
        "time_max": result.max(time_var),
        "clock": minutes_to_clock(time_min),
    }


def extract_routes(state: RoutingState, result: RoutingResult):
    """
    Read every vehicle's route back from a solved routing model.

    Returns:
        tuple: (stops_df, totals)
            stops_df: one row per visited index, start and end included, with
                the load on board after serving the stop, cumulative distance and the time window the
                vehicle can be at the stop.
            totals: objective, total distance, vehicles used, the cost of each
                reported component and the routing status.
    """
    routing = state.routing
    rows = []
    route_distances = {}
    for v in range(state.data.numVehicles):
        index = routing.Start(v)
        position = 0
        while not routing.IsEnd(index):
            rows.append(_stop(state, result, v, position, index))
            index = result.value(routing.NextVar(index))
            position += 1
        rows.append(_stop(state, result, v, position, index))
        route_distances[v] = rows[-1]["distance_m"]
        logger.info(
            f"Vehicle {v}: {position - 1} stops, {route_distances[v]} m, back at {rows[-1]['clock']}"
        )

    stops_df = pd.DataFrame(rows, columns=STOP_COLUMNS)
    used = [v for v in range(state.data.numVehicles) if routing.IsVehicleUsed(result.solution, v)]
    totals = {
        "status": result.status_name,
        "objective": result.objective_value,
        "total_distance_m": sum(route_distances.values()),
        "route_distance_m": route_distances,
        "vehicles_used": len(used),
        "penalties": result.penalty_breakdown(),
    }
    logger.info(f"Total distance: {totals['total_distance_m']} m")
    return stops_df, totals
