"""Formatting helpers used by console output and recommendations."""

from __future__ import annotations

from typing import Union

from aft_cli.core.constants import WEIGHT_UNIT
from aft_cli.core.models import WorkoutRecord

Number = Union[int, float]


def format_number(value: Number) -> str:
    """Render a number the way a browser would: no trailing '.0' on integral values."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_workout_line(workout: WorkoutRecord) -> str:
    """Format one history line, e.g. 'Squat — 3x8 @ 135 lb (Vol: 3240)'."""
    return (
        f"{workout.exercise} — {workout.sets}x{workout.reps} "
        f"@ {format_number(workout.weight)} {WEIGHT_UNIT} "
        f"(Vol: {format_number(workout.volume)})"
    )
