from dataclasses import dataclass, field
from ortools.sat.python import cp_model
from ortools.constraint_solver import pywrapcp
from typing import Any, Dict, List, Tuple
from core.objective import Objective


@dataclass
class ScheduleState:
    """
    A dataclass to hold the state relevant to building a shift scheduling
    model: the decision variables and the static input tables.
    """

    work: Dict[Tuple[int, int, int], cp_model.IntVar]
    """A dictionary with keys `(employee, shift, day)` and values a boolean
    variable indicating if the employee works that shift on that day.
    """
    employees: List[str]
    """Employee names, indexed by employee number."""
    shift_labels: List[str]
    """Shift labels, indexed by shift number. Shift 0 is the day off."""
    num_weeks: int
    """The number of weeks in the scheduling horizon."""
    data: Any
    """The validated `SchedulingData` the model is built from."""

    @property
    def num_employees(self) -> int:
        return len(self.employees)

    @property
    def num_shifts(self) -> int:
        return len(self.shift_labels)

    @property
    def num_days(self) -> int:
        return self.data.numDays

    def works_for(self, employee: int, shift: int, days) -> List[cp_model.IntVar]:
        """The work variables of one employee and shift over `days`, in order."""
        return [self.work[employee, shift, d] for d in days]


@dataclass
class RoutingState:
    """
    A dataclass to hold the routing model under construction: the index
    manager, the routing model, the dimensions created so far and the cost
    terms they contributed.
    """

    manager: pywrapcp.RoutingIndexManager
    routing: pywrapcp.RoutingModel
    data: Any
    """The validated `RoutingData` the model is built from."""
    dimensions: Dict[str, Any] = field(default_factory=dict)
    """Dimension name to `pywrapcp.RoutingDimension`."""
    objective: Objective = field(default_factory=Objective)
    """Cost terms the dimensions added to the routing objective."""
    callbacks: List[Any] = field(default_factory=list)
    """Python transit callbacks registered on `routing`, referenced until the search ends."""

    def dimension(self, name: str):
        return self.dimensions[name]
