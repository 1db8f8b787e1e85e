"""Validation of raw workout input before it becomes a record."""

from __future__ import annotations

import math
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from aft_cli.core.constants import INVALID_NUMERIC_MESSAGE, MISSING_EXERCISE_MESSAGE
from aft_cli.core.models import WorkoutRecord
from aft_cli.utils.parsing import is_positive_int, parse_number

MISSING_EXERCISE = "missing_exercise"
INVALID_NUMERIC = "invalid_numeric"


class InputRejected(ValueError):
    """Raised when raw workout fields cannot form a valid record."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


def generate_id() -> str:
    """Return a unique entry id, falling back to a millisecond timestamp."""
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        # uuid4 needs os.urandom, which some sandboxed platforms lack.
        return str(time.time_ns() // 1_000_000)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def validate_input(
    raw: Mapping[str, Any],
    id_factory: Optional[Callable[[], str]] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> WorkoutRecord:
    """Validate raw fields and build a new record.

    Raises InputRejected for an empty exercise name, non-positive or
    non-integral sets/reps, or a negative or non-numeric weight. Zero
    weight is allowed for bodyweight work.
    """
    exercise = str(raw.get("exercise") or "").strip()
    if not exercise:
        raise InputRejected(MISSING_EXERCISE, MISSING_EXERCISE_MESSAGE)

    sets = parse_number(raw.get("sets"))
    reps = parse_number(raw.get("reps"))
    weight = parse_number(raw.get("weight"))

    if not is_positive_int(sets) or not is_positive_int(reps):
        raise InputRejected(INVALID_NUMERIC, INVALID_NUMERIC_MESSAGE)
    if not math.isfinite(weight) or weight < 0:
        raise InputRejected(INVALID_NUMERIC, INVALID_NUMERIC_MESSAGE)

    make_id = id_factory or generate_id
    now = clock or utc_now
    return WorkoutRecord.create(
        record_id=make_id(),
        exercise=exercise,
        sets=int(sets),
        reps=int(reps),
        weight=weight,
        created_at=iso_timestamp(now()),
    )
