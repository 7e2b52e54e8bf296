"""
scheduler
---------

Shift scheduling module. Initializes key components:

- `builder`: Model compilation in a fixed rule order.
- `runner`: Solving and result handling logic.

Provides high-level access to the scheduling pipeline.
"""
from . import builder, runner
