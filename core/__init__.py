"""
core
----

Model compiler components shared by the scheduling and routing pipelines:

- BoundPolicy:
  Hard/soft range with penalties, applied to run lengths or sums.

- negated_bounded_span / iter_windows:
  Clause extraction for maximal runs of True variables.

- add_soft_sequence_constraint / add_soft_sum_constraint:
  Encoders that turn a BoundPolicy into CP-SAT clauses, linear constraints and
  penalty terms.

- Objective & PenaltyTerm:
  The accumulator value every encoder returns and every orchestrator minimises.

- ConstraintManager:
  Register and apply rule functions in a controlled sequence.

- ScheduleState / RoutingState:
  Encapsulate the decision variables and inputs of one model build.
"""
from .objective import Objective, PenaltyTerm
from .policy import BoundPolicy
from .sequence import add_soft_sequence_constraint
from .spans import iter_windows, negated_bounded_span
from .sums import add_soft_sum_constraint
