"""
routing
-------

Vehicle routing with time windows and pickup/delivery pairs:

- `dimension`: Cumulative distance, time and load dimensions.
- `rules`: Dimension, precedence, time window and finaliser rules.
- `builder`: Model compilation in a fixed rule order, solving and read-back.
"""
from . import builder
