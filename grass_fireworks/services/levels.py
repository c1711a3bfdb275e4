"""Commit count -> fireworks level (0-5)."""

from datetime import date
from typing import Dict

from grass_fireworks.utils.dates import is_lucky_day

LEVEL_NAMES: Dict[int, str] = {
    0: "Silent Night",
    1: "Getting Started",
    2: "Good Progress",
    3: "Productive Day",
    4: "On Fire",
    5: "Legendary",
}

# Inclusive upper commit bound per level; above the last bound is level 5.
LEVEL_BOUNDS = (0, 3, 7, 15, 29)


def calculate_level(commits: int) -> int:
    """0 | 1-3 | 4-7 | 8-15 | 16-29 | 30+ commits map to levels 0..5."""
    for level, bound in enumerate(LEVEL_BOUNDS):
        if commits <= bound:
            return level
    return len(LEVEL_BOUNDS)


def get_level_name(level: int) -> str:
    try:
        return LEVEL_NAMES[level]
    except KeyError:
        raise ValueError(f"level must be 0-5, got {level!r}") from None


def should_trigger_cascade(
    commits: int, today: date, threshold: int = 50, lucky_day: bool = True
) -> bool:
    """Cascade on heavy days, or on any active lucky day (every 10th day of the year)."""
    if commits >= threshold:
        return True
    return lucky_day and commits > 0 and is_lucky_day(today)
