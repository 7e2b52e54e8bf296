from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from core.policy import BoundPolicy
from utils.constants import *


# Define data models
class ShiftBoundPolicy(BaseModel):
    """Bound policy attached to one shift: (shift, hardMin, softMin, minPenalty, softMax, hardMax, maxPenalty)."""

    model_config = ConfigDict(extra="forbid")

    shift: int = Field(..., ge=0)
    hardMin: int = Field(..., ge=0)
    softMin: int = Field(..., ge=0)
    minPenalty: int = Field(..., ge=0)
    softMax: int = Field(..., ge=0)
    hardMax: int = Field(..., ge=0)
    maxPenalty: int = Field(..., ge=0)

    @model_validator(mode="before")
    @classmethod
    def from_sequence(cls, values):
        """Accept the compact list form `[shift, hardMin, softMin, minPenalty, softMax, hardMax, maxPenalty]`."""
        if isinstance(values, (list, tuple)):
            keys = ["shift", "hardMin", "softMin", "minPenalty", "softMax", "hardMax", "maxPenalty"]
            if len(values) != len(keys):
                raise ValueError(f"Expected {len(keys)} values, got {len(values)}")
            return dict(zip(keys, values))
        return values

    def to_policy(self) -> BoundPolicy:
        return BoundPolicy(
            self.hardMin,
            self.softMin,
            self.minPenalty,
            self.softMax,
            self.hardMax,
            self.maxPenalty,
        )


class FixedAssignment(BaseModel):
    model_config = ConfigDict(extra="forbid")

    employee: int = Field(..., ge=0)
    shift: int = Field(..., ge=0)
    day: int = Field(..., ge=0)


class ShiftRequest(BaseModel):
    """A weighted wish. A negative weight means the employee desires this assignment."""

    model_config = ConfigDict(extra="forbid")

    employee: int = Field(..., ge=0)
    shift: int = Field(..., ge=0)
    day: int = Field(..., ge=0)
    weight: int


class ShiftTransition(BaseModel):
    """Penalised transition from one day's shift to the next day's. A penalty of 0 forbids it."""

    model_config = ConfigDict(extra="forbid")

    previousShift: int = Field(..., ge=0)
    nextShift: int = Field(..., ge=0)
    penalty: int = Field(..., ge=0)


class SchedulingData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    employees: List[str] = Field(..., min_length=1)
    numWeeks: int = Field(..., ge=1)
    shifts: List[str] = Field(default_factory=lambda: list(SHIFT_LABELS), min_length=2)
    """Shift labels. Index 0 is the day off."""
    consecutiveShiftConstraints: List[ShiftBoundPolicy] = Field(default_factory=list)
    weeklySumConstraints: List[ShiftBoundPolicy] = Field(default_factory=list)
    fixedAssignments: List[FixedAssignment] = Field(default_factory=list)
    requests: List[ShiftRequest] = Field(default_factory=list)
    dailyShiftDemands: List[List[int]] = Field(default_factory=list)
    """Minimum cover per weekday (Monday first) for each working shift 1..n."""
    shiftTransitionPenalties: List[ShiftTransition] = Field(default_factory=list)
    excessCoverPenalties: List[int] = Field(default_factory=list)
    """Penalty per employee above the demand, for each working shift 1..n."""

    @property
    def numEmployees(self) -> int:
        return len(self.employees)

    @property
    def numShifts(self) -> int:
        return len(self.shifts)

    @property
    def numDays(self) -> int:
        return self.numWeeks * DAYS_PER_WEEK


class ScheduleRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data: SchedulingData
    timeLimit: float = Field(default=SOLVER_TIME_LIMIT, gt=0)
    numWorkers: int = Field(default=NUM_SEARCH_WORKERS, ge=1)
    randomSeed: Optional[int] = None
