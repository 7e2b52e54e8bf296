"""
utils package
-------------

Contains utility modules shared by the scheduling and routing pipelines.

Includes configuration constants, data loading and validation, clock formatting and logging setup.
"""
