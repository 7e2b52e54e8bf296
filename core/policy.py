from dataclasses import dataclass
from exceptions.custom_errors import InvalidBoundPolicyError


@dataclass(frozen=True)
class BoundPolicy:
    """
    Hard/soft range on a quantity (the length of a run, or the size of a sum).

    Values outside `[hard_min, hard_max]` are forbidden. Values outside
    `[soft_min, soft_max]` are penalised linearly by `min_penalty` below the
    soft range and `max_penalty` above it. A penalty of zero switches the
    corresponding soft band off.
    """

    hard_min: int
    soft_min: int
    min_penalty: int
    soft_max: int
    hard_max: int
    max_penalty: int

    def __post_init__(self):
        if not 0 <= self.hard_min <= self.soft_min <= self.soft_max <= self.hard_max:
            raise InvalidBoundPolicyError(
                "Bound policy must satisfy 0 <= hard_min <= soft_min <= soft_max <= hard_max, "
                f"got ({self.hard_min}, {self.soft_min}, {self.soft_max}, {self.hard_max})."
            )
        if self.min_penalty < 0 or self.max_penalty < 0:
            raise InvalidBoundPolicyError(
                f"Penalties must be non-negative, got min={self.min_penalty}, max={self.max_penalty}."
            )

    @classmethod
    def from_tuple(cls, values) -> "BoundPolicy":
        """Build a policy from `(hard_min, soft_min, min_penalty, soft_max, hard_max, max_penalty)`."""
        return cls(*values)

    @property
    def penalises_short(self) -> bool:
        return self.min_penalty > 0 and self.soft_min > self.hard_min

    @property
    def penalises_long(self) -> bool:
        return self.max_penalty > 0 and self.soft_max < self.hard_max

    def penalty_for(self, value: int) -> int:
        """Penalty owed by `value` when it lies inside the hard range."""
        if value < self.soft_min:
            return self.min_penalty * (self.soft_min - value)
        if value > self.soft_max:
            return self.max_penalty * (value - self.soft_max)
        return 0
