"""Local key-value persistence and the workout history store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from aft_cli.core.constants import WORKOUTS_KEY
from aft_cli.core.models import WorkoutRecord

LOGGER = logging.getLogger(__name__)

WorkoutHistory = Tuple[WorkoutRecord, ...]


class StorageUnavailable(RuntimeError):
    """Raised when the storage file cannot be read or written."""


class StorageCorrupt(ValueError):
    """Raised when persisted workout data cannot be decoded."""


class KeyValueStore:
    """String-keyed store persisted as a single JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageUnavailable(f"Cannot read storage file {self.path}: {exc}") from exc
        except UnicodeDecodeError:
            LOGGER.warning("Storage file %s is not valid UTF-8; ignoring its contents", self.path)
            return {}
        try:
            data = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError:
            LOGGER.warning("Storage file %s is not valid JSON; ignoring its contents", self.path)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Storage file %s does not hold an object; ignoring its contents", self.path)
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        payload = json.dumps(data, indent=2, sort_keys=True) + "\n"
        temp_path: Optional[Path] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile("w", dir=self.path.parent, delete=False, encoding="utf-8") as tmp:
                temp_path = Path(tmp.name)
                tmp.write(payload)
            temp_path.replace(self.path)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StorageUnavailable(f"Cannot write storage file {self.path}: {exc}") from exc

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> bool:
        """Delete a key and report whether it was present."""
        data = self._read_all()
        if key not in data:
            return False
        del data[key]
        self._write_all(data)
        return True


def decode_history(raw: str) -> WorkoutHistory:
    """Decode a JSON array of workout objects, raising StorageCorrupt on bad data."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageCorrupt(f"Invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise StorageCorrupt("Workout history must be a JSON array")
    try:
        return tuple(WorkoutRecord.from_dict(item) for item in payload)
    except ValueError as exc:
        raise StorageCorrupt(str(exc)) from exc


def encode_history(history: Iterable[WorkoutRecord]) -> str:
    return json.dumps([record.to_dict() for record in history], ensure_ascii=False)


class WorkoutStore:
    """Owns the persisted, insertion-ordered workout history."""

    def __init__(self, kv: KeyValueStore, key: str = WORKOUTS_KEY) -> None:
        self.kv = kv
        self.key = key

    def load(self) -> WorkoutHistory:
        """Read the full history; absent or corrupt data yields an empty history."""
        try:
            raw = self.kv.get(self.key)
        except StorageUnavailable as exc:
            LOGGER.warning("Workout history is unreadable, starting empty: %s", exc)
            return ()
        if not raw:
            return ()
        try:
            return decode_history(raw)
        except StorageCorrupt as exc:
            LOGGER.warning("Discarding unreadable workout history under %r: %s", self.key, exc)
            return ()

    @staticmethod
    def append(history: Sequence[WorkoutRecord], record: WorkoutRecord) -> WorkoutHistory:
        return tuple(history) + (record,)

    def save(self, history: Sequence[WorkoutRecord]) -> None:
        """Overwrite persisted history with the full sequence."""
        self.kv.set(self.key, encode_history(history))
        LOGGER.debug("Saved %d workout(s) to %s", len(history), self.kv.path)
