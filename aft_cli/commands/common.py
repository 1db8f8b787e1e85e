"""Shared command helpers."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer

from aft_cli.core.auth import DemoAuth
from aft_cli.core.config import storage_keys
from aft_cli.core.state import CLIState
from aft_cli.core.storage import KeyValueStore, StorageUnavailable, WorkoutStore


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload)


def open_workout_store(state: CLIState) -> WorkoutStore:
    keys = storage_keys(state.config)
    return WorkoutStore(KeyValueStore(state.storage_path), key=keys["workouts"])


def open_auth(state: CLIState) -> DemoAuth:
    keys = storage_keys(state.config)
    return DemoAuth(KeyValueStore(state.storage_path), key=keys["auth"])


def fail(state: CLIState, label: str, message: str, code: int = 1) -> NoReturn:
    """Report an error in the active output mode and exit."""
    if state.json_output:
        print_json_payload(state, {"status": "error", "message": message})
    elif state.plain_output:
        typer.echo("status\terror")
        typer.echo(f"message\t{message}")
    else:
        state.console.print(f"{label}: {message}", markup=False)
    raise typer.Exit(code=code)


def require_login(state: CLIState) -> None:
    """Exit when login is required by config and no demo session exists."""
    if not state.config.get("auth", {}).get("require_login", False):
        return
    try:
        logged_in = open_auth(state).is_logged_in()
    except StorageUnavailable as exc:
        fail(state, "Storage error", str(exc))
    if not logged_in:
        fail(state, "Not logged in", "Run `aft login EMAIL` first.")
