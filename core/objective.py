from dataclasses import dataclass
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple
from ortools.sat.python import cp_model

ValueOf = Callable[[Any], int]


@dataclass(frozen=True)
class PenaltyTerm:
    """A weighted variable of the minimisation objective."""

    var: Any
    """A boolean indicator or an integer excess variable."""
    coefficient: int
    component: str
    """The rule family the term comes from, used for penalty breakdowns."""
    label: Optional[str] = None

    def contribution(self, value_of: ValueOf) -> int:
        return self.coefficient * value_of(self.var)


@dataclass(frozen=True)
class Objective:
    """
    Immutable collection of penalty terms.

    Encoders return the terms they create as an `Objective`; callers merge the
    contributions with `+` and minimise the merged result once at the end.
    """

    terms: Tuple[Any, ...] = ()

    @classmethod
    def of(cls, terms: Iterable[Any]) -> "Objective":
        return cls(tuple(terms))

    def __add__(self, other: "Objective") -> "Objective":
        if not isinstance(other, Objective):
            return NotImplemented
        return Objective(self.terms + other.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.terms)

    def __bool__(self) -> bool:
        return bool(self.terms)

    def with_term(self, var, coefficient: int, component: str, label: Optional[str] = None) -> "Objective":
        return Objective(self.terms + (PenaltyTerm(var, coefficient, component, label),))

    def components(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(t.component for t in self.terms))

    def expression(self) -> cp_model.LinearExpr:
        """Weighted linear sum of all CP-SAT penalty terms."""
        for term in self.terms:
            if not isinstance(term, PenaltyTerm):
                raise TypeError(f"{type(term).__name__} cannot be part of a CP-SAT objective")
        return cp_model.LinearExpr.WeightedSum(
            [t.var for t in self.terms], [t.coefficient for t in self.terms]
        )

    def minimize(self, model: cp_model.CpModel) -> None:
        """Set the objective of `model`. An empty objective leaves a pure feasibility problem."""
        if self.terms:
            model.Minimize(self.expression())

    def evaluate(self, value_of: ValueOf) -> int:
        return sum(t.contribution(value_of) for t in self.terms)

    def breakdown(self, value_of: ValueOf) -> Dict[str, int]:
        """Total contribution of each component, in order of first appearance."""
        totals: Dict[str, int] = defaultdict(int)
        for term in self.terms:
            totals[term.component] += term.contribution(value_of)
        return dict(totals)
