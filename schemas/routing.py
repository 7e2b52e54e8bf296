from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional, Tuple, Union
from utils.constants import *
from utils.time_utils import clock_to_minutes


def _as_minutes(value: Union[int, str]) -> int:
    if isinstance(value, str):
        return clock_to_minutes(value)
    return int(value)


# Define data models
class Vehicle(BaseModel):
    """A vehicle with its own start/end node, load capacity and latest return time (minutes)."""

    model_config = ConfigDict(extra="forbid")

    start: int = Field(default=0, ge=0)
    end: int = Field(default=0, ge=0)
    capacity: int = Field(..., ge=0)
    endTime: int = Field(..., ge=0)

    @field_validator("endTime", mode="before")
    @classmethod
    def parse_end_time(cls, value):
        return _as_minutes(value)


class RoutingData(BaseModel):
    """
    Static routing tables. Distances are metres, times are minutes since midnight.

    Time windows accept either integer minutes or "HH:MM" strings.
    """

    model_config = ConfigDict(extra="forbid")

    distanceMatrix: List[List[int]] = Field(..., min_length=1)
    timeMatrix: List[List[int]] = Field(..., min_length=1)
    vehicles: List[Vehicle] = Field(..., min_length=1)
    demands: List[int]
    timeWindows: List[Tuple[int, int]]
    pickupsDeliveries: List[Tuple[int, int]] = Field(default_factory=list)
    serviceTimes: Optional[List[int]] = None
    """Minutes spent at each node before leaving it. Defaults to zero everywhere."""
    maxRouteDistance: int = Field(default=MAX_ROUTE_DISTANCE, ge=0)
    distanceSpanCost: int = Field(default=DISTANCE_SPAN_COST, ge=0)
    timeSlack: int = Field(default=TIME_SLACK_MAX, ge=0)

    @field_validator("timeWindows", mode="before")
    @classmethod
    def parse_time_windows(cls, windows):
        return [(_as_minutes(a), _as_minutes(b)) for a, b in windows]

    @model_validator(mode="after")
    def check_shapes(self):
        n = len(self.distanceMatrix)
        for name, matrix in (("distanceMatrix", self.distanceMatrix), ("timeMatrix", self.timeMatrix)):
            if len(matrix) != n or any(len(row) != n for row in matrix):
                raise ValueError(f"{name} must be a square {n}x{n} matrix")
            if any(value < 0 for row in matrix for value in row):
                raise ValueError(f"{name} must not contain negative values")
        for name, values in (("demands", self.demands), ("timeWindows", self.timeWindows)):
            if len(values) != n:
                raise ValueError(f"{name} must have one entry per node ({n}), got {len(values)}")
        if self.serviceTimes is not None and len(self.serviceTimes) != n:
            raise ValueError(f"serviceTimes must have one entry per node ({n})")
        for node, (earliest, latest) in enumerate(self.timeWindows):
            if earliest > latest:
                raise ValueError(f"Time window of node {node} is empty: {earliest} > {latest}")
        for v, vehicle in enumerate(self.vehicles):
            if vehicle.start >= n or vehicle.end >= n:
                raise ValueError(f"Vehicle {v} refers to a node outside 0..{n - 1}")
        depots = self.depots
        for pickup, delivery in self.pickupsDeliveries:
            for node in (pickup, delivery):
                if not 0 <= node < n or node in depots:
                    raise ValueError(f"Pickup/delivery node {node} must be a non-depot node")
        return self

    @property
    def numNodes(self) -> int:
        return len(self.distanceMatrix)

    @property
    def numVehicles(self) -> int:
        return len(self.vehicles)

    @property
    def depots(self) -> set:
        """Nodes used as a vehicle start or end."""
        return {v.start for v in self.vehicles} | {v.end for v in self.vehicles}

    def service_time(self, node: int) -> int:
        return self.serviceTimes[node] if self.serviceTimes else 0


class RoutingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data: RoutingData
    timeLimit: int = Field(default=ROUTING_TIME_LIMIT, ge=1)
