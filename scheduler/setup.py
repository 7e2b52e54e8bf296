from ortools.sat.python import cp_model
from core.state import ScheduleState
from schemas.schedule import SchedulingData
from utils.validate import validate_scheduling_data


def build_variables(model, num_employees, num_shifts, num_days):
    """Builds the work[e,s,d] BoolVars for every employee/shift/day."""
    work = {
        (e, s, d): model.NewBoolVar(f"work{e}_{s}_{d}")
        for e in range(num_employees)
        for s in range(num_shifts)
        for d in range(num_days)
    }
    return work


def make_model():
    """Creates a new CP-SAT model instance."""
    model = cp_model.CpModel()
    return model


def setup_model(data: SchedulingData):
    """
    Sets up the scheduling model: validates the input tables, creates the CP-SAT
    model and one boolean decision variable per employee, shift and day.

    Args:
        data (SchedulingData): The static scheduling tables.

    Returns:
        tuple: The CP-SAT model and the ScheduleState holding its variables.

    Raises:
        InputMismatchError: If the tables are inconsistent with each other.
    """
    validate_scheduling_data(data)

    model = make_model()
    work = build_variables(model, data.numEmployees, data.numShifts, data.numDays)
    state = ScheduleState(
        work=work,
        employees=list(data.employees),
        shift_labels=list(data.shifts),
        num_weeks=data.numWeeks,
        data=data,
    )
    return model, state
