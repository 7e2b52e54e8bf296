from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union
from ortools.constraint_solver import pywrapcp
from core.objective import Objective

"""
Cumulative dimensions of the routing model (distance, time, load).

A dimension is described by a pure transit function over nodes; the routing
library works on indices, so the function is wrapped in an index → node adapter
before it is registered.
"""

TransitFn = Callable[[int, int], int]
UnaryTransitFn = Callable[[int], int]


@dataclass(frozen=True)
class DimensionSpec:
    """Description of one cumulative quantity tracked along every route."""

    name: str
    transit: Union[TransitFn, UnaryTransitFn]
    capacity: Union[int, Sequence[int]]
    """Upper bound on the cumul variables, either global or one per vehicle."""
    slack_max: int = 0
    fix_start_cumul_to_zero: bool = True
    unary: bool = False
    """True when `transit` takes the origin node only (e.g. demand)."""
    global_span_cost: int = 0
    """Coefficient on (max end cumul − min start cumul) across vehicles."""


@dataclass(frozen=True)
class SpanCostTerm:
    """Global span cost of a dimension, as added to the routing objective."""

    dimension: str
    coefficient: int
    start_cumuls: tuple
    end_cumuls: tuple
    component: str = "global_span"

    def contribution(self, value_of) -> int:
        span = max(value_of(v) for v in self.end_cumuls) - min(value_of(v) for v in self.start_cumuls)
        return self.coefficient * span


def register_transit(
    routing: pywrapcp.RoutingModel,
    manager: pywrapcp.RoutingIndexManager,
    transit,
    unary: bool = False,
    keep_alive: Optional[list] = None,
) -> int:
    """
    Register a node-level transit function and return its callback index.

    The routing model calls back into Python during search, so the wrapper is
    appended to `keep_alive` to outlive this call.
    """
    if unary:

        def callback(from_index):
            return transit(manager.IndexToNode(from_index))

        index = routing.RegisterUnaryTransitCallback(callback)
    else:

        def callback(from_index, to_index):
            return transit(manager.IndexToNode(from_index), manager.IndexToNode(to_index))

        index = routing.RegisterTransitCallback(callback)

    if keep_alive is not None:
        keep_alive.append(callback)
    return index


def add_dimension(
    routing: pywrapcp.RoutingModel,
    manager: pywrapcp.RoutingIndexManager,
    num_vehicles: int,
    spec: DimensionSpec,
    callback_index: Optional[int] = None,
    keep_alive: Optional[list] = None,
):
    """
    Create the dimension described by `spec` on `routing`.

    Args:
        routing: The routing model.
        manager: The index manager of `routing`.
        num_vehicles: Number of vehicles, used to spread a scalar capacity.
        spec: The dimension description.
        callback_index: An already registered transit callback to reuse.
        keep_alive: List that keeps the registered Python callback referenced.

    Returns:
        tuple: the `RoutingDimension` and an `Objective` holding its span cost term.
    """
    if callback_index is None:
        callback_index = register_transit(routing, manager, spec.transit, spec.unary, keep_alive)

    if isinstance(spec.capacity, int):
        created = routing.AddDimension(
            callback_index,
            spec.slack_max,
            spec.capacity,
            spec.fix_start_cumul_to_zero,
            spec.name,
        )
    else:
        capacities: List[int] = [int(c) for c in spec.capacity]
        if len(capacities) != num_vehicles:
            raise ValueError(
                f"Dimension {spec.name} has {len(capacities)} capacities for {num_vehicles} vehicles"
            )
        created = routing.AddDimensionWithVehicleCapacity(
            callback_index,
            spec.slack_max,
            capacities,
            spec.fix_start_cumul_to_zero,
            spec.name,
        )
    if not created:
        raise ValueError(f"Dimension {spec.name} already exists")

    dimension = routing.GetDimensionOrDie(spec.name)
    objective = Objective()
    if spec.global_span_cost > 0:
        dimension.SetGlobalSpanCostCoefficient(spec.global_span_cost)
        objective = Objective.of(
            [
                SpanCostTerm(
                    spec.name,
                    spec.global_span_cost,
                    tuple(dimension.CumulVar(routing.Start(v)) for v in range(num_vehicles)),
                    tuple(dimension.CumulVar(routing.End(v)) for v in range(num_vehicles)),
                )
            ]
        )
    return dimension, objective


def matrix_transit(matrix: Sequence[Sequence[int]]) -> TransitFn:
    """Transit function reading an arc cost from a node × node matrix."""

    def transit(from_node: int, to_node: int) -> int:
        return int(matrix[from_node][to_node])

    return transit


def travel_time_transit(time_matrix: Sequence[Sequence[int]], service_times: Sequence[int]) -> TransitFn:
    """Travel time of an arc plus the service time spent at its origin."""

    def transit(from_node: int, to_node: int) -> int:
        return int(service_times[from_node]) + int(time_matrix[from_node][to_node])

    return transit


def demand_transit(demands: Sequence[int]) -> UnaryTransitFn:
    """Load change when leaving a node."""

    def transit(node: int) -> int:
        return int(demands[node])

    return transit
