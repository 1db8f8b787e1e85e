from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from typer.testing import CliRunner

from aft_cli.core.models import WorkoutRecord
from aft_cli.core.storage import KeyValueStore, WorkoutStore


@pytest.fixture(autouse=True)
def isolated_storage(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    storage_file = tmp_path / "data" / "storage.json"
    monkeypatch.setenv("AFT_STORAGE_FILE", str(storage_file))
    monkeypatch.setenv("AFT_CONFIG_FILE", str(tmp_path / "config" / "config.toml"))
    monkeypatch.setenv("AFT_DATA_DIR", str(tmp_path / "data"))
    return storage_file


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def kv(isolated_storage: Path) -> KeyValueStore:
    return KeyValueStore(isolated_storage)


@pytest.fixture()
def store(kv: KeyValueStore) -> WorkoutStore:
    return WorkoutStore(kv)


@pytest.fixture()
def make_record() -> Callable[..., WorkoutRecord]:
    counter = {"n": 0}

    def _make(
        exercise: str = "Squat",
        sets: int = 3,
        reps: int = 8,
        weight: Any = 135,
        record_id: Optional[str] = None,
    ) -> WorkoutRecord:
        counter["n"] += 1
        return WorkoutRecord.create(
            record_id=record_id or f"w-{counter['n']}",
            exercise=exercise,
            sets=sets,
            reps=reps,
            weight=weight,
            created_at=f"2026-02-{10 + counter['n']:02d}T18:00:00.000Z",
        )

    return _make


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write
