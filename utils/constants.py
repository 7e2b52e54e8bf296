import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Calendar
DAYS_PER_WEEK = _constants["DAYS_PER_WEEK"]
SHIFT_LABELS = _constants["SHIFT_LABELS"]
WEEKDAY_LABELS = _constants["WEEKDAY_LABELS"]

# CP-SAT search
SOLVER_TIME_LIMIT = _constants["SOLVER_TIME_LIMIT"]
NUM_SEARCH_WORKERS = _constants["NUM_SEARCH_WORKERS"]
RANDOM_SEED = _constants["RANDOM_SEED"]
RELATIVE_GAP_LIMIT = _constants["RELATIVE_GAP_LIMIT"]
LOG_SEARCH_PROGRESS = _constants["LOG_SEARCH_PROGRESS"]

# Routing search
ROUTING_TIME_LIMIT = _constants["ROUTING_TIME_LIMIT"]
ROUTING_FIRST_SOLUTION_STRATEGY = _constants["ROUTING_FIRST_SOLUTION_STRATEGY"]
ROUTING_LOCAL_SEARCH_METAHEURISTIC = _constants["ROUTING_LOCAL_SEARCH_METAHEURISTIC"]

# Routing dimensions (distance in metres, time in minutes)
MAX_ROUTE_DISTANCE = _constants["MAX_ROUTE_DISTANCE"]
DISTANCE_SPAN_COST = _constants["DISTANCE_SPAN_COST"]
TIME_SLACK_MAX = _constants["TIME_SLACK_MAX"]
