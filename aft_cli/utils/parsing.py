"""Parsing helpers for raw workout entry input."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

Number = Union[int, float]


def normalize_number(value: float) -> Number:
    """Collapse integral floats to int so 135.0 is stored and shown as 135."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def parse_number(value: Any) -> Number:
    """Convert form-style input to a number, returning NaN when it is not one.

    Strings are stripped and an empty string counts as zero, matching how
    HTML number inputs are read.
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return normalize_number(float(value)) if isinstance(value, float) else value

    raw = str(value).strip()
    if not raw:
        return 0
    try:
        return normalize_number(float(raw))
    except ValueError:
        return math.nan


def is_positive_int(value: Number) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def load_entry_input(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[Dict[str, Any]]:
    """Load raw workout entries from a JSON/YAML file or stdin text."""
    raw_data: Any
    if file_path:
        text = file_path.read_text()
        if file_path.suffix.lower() in {".yaml", ".yml"}:
            raw_data = yaml.safe_load(text)
        else:
            raw_data = json.loads(text)
    elif read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        try:
            raw_data = json.loads(text)
        except json.JSONDecodeError:
            raw_data = yaml.safe_load(text)
    else:
        return []

    if isinstance(raw_data, dict):
        return [raw_data]
    if isinstance(raw_data, list):
        return [item for item in raw_data if isinstance(item, dict)]
    return []
