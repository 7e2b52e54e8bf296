"""
scheduler.rules
---------------

Exposes all scheduling rules by importing from:

- `fixed`: One shift per day and fixed pre-assignments.
- `high`: Bound policy rules (consecutive shifts, weekly sums) and shift cover.
- `low`: Weighted employee requests and shift transition penalties.

Every rule is called as `rule(model, state)` and returns its objective terms.
"""
from .fixed import *
from .high import *
from .low import *
