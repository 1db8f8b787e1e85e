"""Lightweight data models used across commands."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Union

from aft_cli.utils.parsing import normalize_number

Number = Union[int, float]


def _require(payload: Dict[str, Any], key: str, kind: Any) -> Any:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"Field {key!r} has invalid value {value!r}")
    return value


@dataclass(frozen=True)
class WorkoutRecord:
    """One logged exercise entry. Records are append-only and never mutated."""

    id: str
    exercise: str
    sets: int
    reps: int
    weight: Number
    volume: Number
    created_at: str

    @classmethod
    def create(
        cls,
        record_id: str,
        exercise: str,
        sets: int,
        reps: int,
        weight: Number,
        created_at: str,
    ) -> "WorkoutRecord":
        """Build a new record, deriving volume once from sets, reps and weight."""
        return cls(
            id=record_id,
            exercise=exercise,
            sets=sets,
            reps=reps,
            weight=weight,
            volume=normalize_number(sets * reps * weight),
            created_at=created_at,
        )

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "WorkoutRecord":
        """Restore a persisted record as-is; volume is not recomputed."""
        if not isinstance(payload, dict):
            raise ValueError(f"Workout entry must be an object, got {type(payload).__name__}")
        record = cls(
            id=_require(payload, "id", str),
            exercise=_require(payload, "exercise", str),
            sets=_require(payload, "sets", int),
            reps=_require(payload, "reps", int),
            weight=_require(payload, "weight", (int, float)),
            volume=_require(payload, "volume", (int, float)),
            created_at=_require(payload, "createdAt", str),
        )
        if not record.exercise.strip():
            raise ValueError("Field 'exercise' must not be empty")
        if record.sets <= 0 or record.reps <= 0:
            raise ValueError(f"Sets and reps must be positive, got {record.sets}x{record.reps}")
        if not math.isfinite(record.weight) or record.weight < 0:
            raise ValueError(f"Field 'weight' has invalid value {record.weight!r}")
        if not math.isfinite(record.volume):
            raise ValueError(f"Field 'volume' has invalid value {record.volume!r}")
        return record

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "exercise": self.exercise,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "volume": self.volume,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class AuthSession:
    """Demo login flag persisted locally."""

    email: str
    logged_in_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {"email": self.email, "loggedInAt": self.logged_in_at}
