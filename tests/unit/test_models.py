from __future__ import annotations

import dataclasses

import pytest

from aft_cli.core.models import AuthSession, WorkoutRecord


def test_create_derives_volume(make_record) -> None:
    record = make_record(sets=3, reps=8, weight=135)
    assert record.volume == 3 * 8 * 135 == 3240


def test_create_with_fractional_weight(make_record) -> None:
    record = make_record(sets=3, reps=5, weight=87.5)
    assert record.volume == 1312.5


def test_record_is_immutable(make_record) -> None:
    record = make_record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.reps = 20  # type: ignore[misc]
    assert record.volume == 3240


def test_to_dict_uses_persisted_field_names(make_record) -> None:
    payload = make_record(record_id="abc").to_dict()
    assert list(payload) == ["id", "exercise", "sets", "reps", "weight", "volume", "createdAt"]
    assert payload["id"] == "abc"


def test_from_dict_keeps_stored_volume() -> None:
    payload = {
        "id": "x",
        "exercise": "Bench",
        "sets": 3,
        "reps": 8,
        "weight": 100,
        "volume": 9999,
        "createdAt": "2026-02-14T00:00:00.000Z",
    }
    record = WorkoutRecord.from_dict(payload)
    assert record.volume == 9999
    assert record.created_at == "2026-02-14T00:00:00.000Z"


@pytest.mark.parametrize(
    "field, value",
    [("sets", "3"), ("reps", True), ("weight", None), ("exercise", 5), ("createdAt", None)],
)
def test_from_dict_rejects_bad_fields(field: str, value) -> None:
    payload = {
        "id": "x",
        "exercise": "Bench",
        "sets": 3,
        "reps": 8,
        "weight": 100,
        "volume": 2400,
        "createdAt": "2026-02-14T00:00:00.000Z",
    }
    payload[field] = value
    with pytest.raises(ValueError):
        WorkoutRecord.from_dict(payload)


def test_from_dict_rejects_non_object() -> None:
    with pytest.raises(ValueError):
        WorkoutRecord.from_dict(["not", "a", "dict"])  # type: ignore[arg-type]


def test_auth_session_to_dict() -> None:
    session = AuthSession(email="a@example.com", logged_in_at="2026-02-14T00:00:00.000Z")
    assert session.to_dict() == {"email": "a@example.com", "loggedInAt": "2026-02-14T00:00:00.000Z"}


@pytest.mark.parametrize(
    "field, value",
    [("sets", 0), ("reps", -1), ("exercise", ""), ("exercise", "  "), ("weight", -0.5)],
)
def test_from_dict_rejects_values_validation_would_refuse(field: str, value) -> None:
    payload = {
        "id": "x",
        "exercise": "Bench",
        "sets": 3,
        "reps": 8,
        "weight": 100,
        "volume": 2400,
        "createdAt": "2026-02-14T00:00:00.000Z",
    }
    payload[field] = value
    with pytest.raises(ValueError):
        WorkoutRecord.from_dict(payload)


def test_from_dict_accepts_bodyweight_entry() -> None:
    record = WorkoutRecord.from_dict(
        {
            "id": "x",
            "exercise": "Pull-up",
            "sets": 3,
            "reps": 10,
            "weight": 0,
            "volume": 0,
            "createdAt": "2026-02-14T00:00:00.000Z",
        }
    )
    assert record.volume == 0
