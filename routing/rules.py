from core.objective import Objective
from core.state import RoutingState
from .dimension import (
    DimensionSpec,
    add_dimension,
    demand_transit,
    matrix_transit,
    register_transit,
    travel_time_transit,
)
import logging

"""
This module contains the rules of the routing problem. Each rule is called as
`rule(routing, state)`; dimension rules return the cost terms they add.
"""

logger = logging.getLogger(__name__)

DISTANCE = "Distance"
TIME = "Time"
CAPACITY = "Capacity"


def distance_dimension_rule(routing, state: RoutingState) -> Objective:
    """
    Arc costs and the Distance dimension (metres).

    The same transit callback prices every arc for all vehicles and feeds a
    dimension that starts at zero, whose global span cost evens out route lengths.
    """
    data = state.data
    spec = DimensionSpec(
        name=DISTANCE,
        transit=matrix_transit(data.distanceMatrix),
        capacity=data.maxRouteDistance,
        slack_max=0,
        fix_start_cumul_to_zero=True,
        global_span_cost=data.distanceSpanCost,
    )
    callback_index = register_transit(routing, state.manager, spec.transit, keep_alive=state.callbacks)
    routing.SetArcCostEvaluatorOfAllVehicles(callback_index)
    dimension, objective = add_dimension(
        routing, state.manager, data.numVehicles, spec, callback_index=callback_index
    )
    state.dimensions[DISTANCE] = dimension
    return objective


def time_dimension_rule(routing, state: RoutingState) -> Objective:
    """
    The Time dimension (minutes since midnight).

    Transit is the travel time plus the service time at the origin. Waiting is
    allowed up to the slack maximum, the cumul is bounded by each vehicle's end
    time and is not forced to zero at the start of the day.
    """
    data = state.data
    service_times = [data.service_time(n) for n in range(data.numNodes)]
    spec = DimensionSpec(
        name=TIME,
        transit=travel_time_transit(data.timeMatrix, service_times),
        capacity=[v.endTime for v in data.vehicles],
        slack_max=data.timeSlack,
        fix_start_cumul_to_zero=False,
    )
    dimension, objective = add_dimension(
        routing, state.manager, data.numVehicles, spec, keep_alive=state.callbacks
    )
    state.dimensions[TIME] = dimension
    return objective


def capacity_dimension_rule(routing, state: RoutingState) -> Objective:
    """The Capacity dimension: the load on board, bounded by each vehicle's capacity."""
    data = state.data
    spec = DimensionSpec(
        name=CAPACITY,
        transit=demand_transit(data.demands),
        capacity=[v.capacity for v in data.vehicles],
        slack_max=0,
        fix_start_cumul_to_zero=True,
        unary=True,
    )
    dimension, objective = add_dimension(
        routing, state.manager, data.numVehicles, spec, keep_alive=state.callbacks
    )
    state.dimensions[CAPACITY] = dimension
    return objective


def pickup_delivery_rule(routing, state: RoutingState):
    """
    Serve each pickup and its delivery on the same vehicle, pickup first.

    Ordering is posted on the Distance cumul: the pickup's cumulative distance
    may not exceed the delivery's.
    """
    distance_dimension = state.dimension(DISTANCE)
    solver = routing.solver()
    for pickup, delivery in state.data.pickupsDeliveries:
        pickup_index = state.manager.NodeToIndex(pickup)
        delivery_index = state.manager.NodeToIndex(delivery)
        routing.AddPickupAndDelivery(pickup_index, delivery_index)
        solver.Add(routing.VehicleVar(pickup_index) == routing.VehicleVar(delivery_index))
        solver.Add(
            distance_dimension.CumulVar(pickup_index)
            <= distance_dimension.CumulVar(delivery_index)
        )
    logger.debug(f"pickup/delivery rule: {len(state.data.pickupsDeliveries)} pairs")


def time_window_rule(routing, state: RoutingState):
    """
    Restrict the Time cumul of every non-depot node to its window, and of every
    vehicle start to the window of its start node.
    """
    data = state.data
    time_dimension = state.dimension(TIME)
    depots = data.depots

    for node, (earliest, latest) in enumerate(data.timeWindows):
        if node in depots:
            continue
        index = state.manager.NodeToIndex(node)
        time_dimension.CumulVar(index).SetRange(earliest, latest)
        routing.AddToAssignment(time_dimension.SlackVar(index))

    for v, vehicle in enumerate(data.vehicles):
        index = routing.Start(v)
        earliest, latest = data.timeWindows[vehicle.start]
        time_dimension.CumulVar(index).SetRange(earliest, latest)
        routing.AddToAssignment(time_dimension.SlackVar(index))


def finalizer_rule(routing, state: RoutingState):
    """Leave the depot as late and come back as early as the routes allow."""
    time_dimension = state.dimension(TIME)
    for v in range(state.data.numVehicles):
        routing.AddVariableMaximizedByFinalizer(time_dimension.CumulVar(routing.Start(v)))
        routing.AddVariableMinimizedByFinalizer(time_dimension.CumulVar(routing.End(v)))
