import re

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def clock_to_minutes(value: str) -> int:
    """Convert an "HH:MM" clock string to minutes since midnight."""
    match = _CLOCK_RE.match(value)
    if not match:
        raise ValueError(f"Invalid clock time '{value}', expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes >= 60:
        raise ValueError(f"Invalid clock time '{value}', minutes must be below 60")
    return hours * 60 + minutes


def minutes_to_clock(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM"."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"
