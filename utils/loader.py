import json
from pathlib import Path
from typing import IO, Union
from pydantic import ValidationError
from config.paths import ROUTING_DATA_PATH, SCHEDULING_DATA_PATH
from exceptions.custom_errors import FileContentError, FileReadingError
from schemas.routing import RoutingData
from schemas.schedule import SchedulingData


def _read_json(path_or_buffer: Union[str, Path, IO], label: str) -> dict:
    try:
        if hasattr(path_or_buffer, "read"):
            return json.load(path_or_buffer)
        with open(path_or_buffer, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise FileContentError(f"Invalid JSON in {label}: {e}")
    except OSError as e:
        raise FileReadingError(f"Error loading {label}: {e}")


def load_scheduling_data(
    path_or_buffer: Union[str, Path, IO, None] = None,
) -> SchedulingData:
    """
    Load the scheduling tables (roster, policies, requests, demands) from a JSON file.

    Parameters:
        path_or_buffer: Path to the JSON file or a file-like object.
                        Defaults to 'config/scheduling_demo.json'.

    Returns:
        SchedulingData: the validated tables.
    """
    if path_or_buffer is None:
        path_or_buffer = SCHEDULING_DATA_PATH

    raw = _read_json(path_or_buffer, "scheduling data")
    try:
        return SchedulingData.model_validate(raw)
    except ValidationError as e:
        raise FileContentError(f"Scheduling data does not match the expected layout:\n{e}")


def load_routing_data(
    path_or_buffer: Union[str, Path, IO, None] = None,
) -> RoutingData:
    """
    Load the routing tables (matrices, vehicles, demands, windows, pairs) from a JSON file.

    Parameters:
        path_or_buffer: Path to the JSON file or a file-like object.
                        Defaults to 'config/routing_demo.json'.

    Returns:
        RoutingData: the validated tables.
    """
    if path_or_buffer is None:
        path_or_buffer = ROUTING_DATA_PATH

    raw = _read_json(path_or_buffer, "routing data")
    try:
        return RoutingData.model_validate(raw)
    except ValidationError as e:
        raise FileContentError(f"Routing data does not match the expected layout:\n{e}")
