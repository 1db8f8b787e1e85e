"""Workout logging, history and recommendation commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import typer
import yaml
from rich.table import Table

from aft_cli.commands.common import fail, get_state, open_workout_store, print_json_payload, require_login
from aft_cli.core.constants import EMPTY_LOG_MESSAGE, WEIGHT_UNIT
from aft_cli.core.models import WorkoutRecord
from aft_cli.core.recommend import recommend, recommend_for_history
from aft_cli.core.state import CLIState
from aft_cli.core.storage import StorageUnavailable, WorkoutStore
from aft_cli.core.validation import InputRejected, validate_input
from aft_cli.utils.formatting import format_number, format_workout_line
from aft_cli.utils.parsing import load_entry_input


def _save_or_fail(state: CLIState, store: WorkoutStore, history: Sequence[WorkoutRecord]) -> None:
    try:
        store.save(history)
    except StorageUnavailable as exc:
        fail(state, "Storage error", str(exc))


def log_command(
    ctx: typer.Context,
    exercise: str = typer.Argument(..., help="Exercise name, e.g. Squat"),
    sets: Optional[str] = typer.Option(None, help="Number of sets (default from config: 3)"),
    reps: Optional[str] = typer.Option(None, help="Reps per set (default from config: 8)"),
    weight: Optional[str] = typer.Option(None, help=f"Weight in {WEIGHT_UNIT} (default from config: 135)"),
) -> None:
    """Log a workout entry and print a training suggestion."""
    state = get_state(ctx)
    require_login(state)

    defaults = state.config.get("defaults", {})
    raw = {
        "exercise": exercise,
        "sets": sets if sets is not None else defaults.get("sets"),
        "reps": reps if reps is not None else defaults.get("reps"),
        "weight": weight if weight is not None else defaults.get("weight"),
    }

    try:
        record = validate_input(raw)
    except InputRejected as exc:
        fail(state, "Rejected", exc.message)

    store = open_workout_store(state)
    history = store.append(store.load(), record)
    _save_or_fail(state, store, history)
    suggestion = recommend(record, history)

    if state.json_output:
        print_json_payload(
            state,
            {"status": "logged", "workout": record.to_dict(), "recommendation": suggestion},
        )
        return

    if state.plain_output:
        typer.echo("status\tlogged")
        typer.echo(f"workout\t{format_workout_line(record)}")
        typer.echo(f"recommendation\t{suggestion}")
        return

    state.console.print(f"Logged {format_workout_line(record)}", markup=False, soft_wrap=True)
    state.console.print(f"Suggestion: {suggestion}", markup=False, soft_wrap=True)


def history_command(
    ctx: typer.Context,
    exercise: Optional[str] = typer.Option(None, help="Only show this exercise (case-insensitive)"),
    limit: Optional[int] = typer.Option(None, min=1, help="Show at most N entries"),
) -> None:
    """List logged workouts, newest first."""
    state = get_state(ctx)
    require_login(state)

    workouts = list(reversed(open_workout_store(state).load()))
    if exercise:
        wanted = exercise.strip().lower()
        workouts = [workout for workout in workouts if workout.exercise.lower() == wanted]
    if limit is not None:
        workouts = workouts[:limit]

    if state.json_output:
        print_json_payload(state, {"total": len(workouts), "workouts": [w.to_dict() for w in workouts]})
        return

    if not workouts:
        if state.plain_output:
            typer.echo(EMPTY_LOG_MESSAGE)
        else:
            state.console.print(EMPTY_LOG_MESSAGE)
        return

    if state.plain_output:
        for workout in workouts:
            typer.echo(format_workout_line(workout))
        return

    table = Table(title=f"Workouts ({len(workouts)} shown)")
    table.add_column("Logged")
    table.add_column("Exercise")
    table.add_column("Sets x Reps")
    table.add_column(f"Weight ({WEIGHT_UNIT})")
    table.add_column("Volume")
    for workout in workouts:
        table.add_row(
            workout.created_at[:10],
            workout.exercise,
            f"{workout.sets}x{workout.reps}",
            format_number(workout.weight),
            format_number(workout.volume),
        )
    state.console.print(table)


def recommend_command(ctx: typer.Context) -> None:
    """Show the training suggestion for the most recent entry."""
    state = get_state(ctx)
    require_login(state)

    history = open_workout_store(state).load()
    suggestion = recommend_for_history(history)

    if state.json_output:
        print_json_payload(
            state,
            {
                "workout": history[-1].to_dict() if history else None,
                "recommendation": suggestion,
            },
        )
        return

    if state.plain_output:
        typer.echo(suggestion)
        return

    state.console.print(suggestion, markup=False, soft_wrap=True)


def import_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, help="JSON/YAML file with workout entries"),
    stdin: bool = typer.Option(False, "--stdin", help="Read workout entries from stdin"),
) -> None:
    """Validate and append workout entries in bulk."""
    state = get_state(ctx)
    require_login(state)

    stdin_text = sys.stdin.read() if stdin else ""
    try:
        entries = load_entry_input(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Cannot read workout entries: {exc}") from exc
    if not entries:
        raise typer.BadParameter("Provide --file or --stdin with at least one entry")

    store = open_workout_store(state)
    history = store.load()
    results: List[Dict[str, Any]] = []

    for index, entry in enumerate(entries):
        try:
            record = validate_input(entry)
        except InputRejected as exc:
            results.append({"index": index, "status": "rejected", "reason": exc.reason, "message": exc.message})
            continue
        history = store.append(history, record)
        results.append({"index": index, "status": "logged", "id": record.id, "exercise": record.exercise})

    imported = sum(1 for item in results if item["status"] == "logged")
    if imported:
        _save_or_fail(state, store, history)
    suggestion = recommend_for_history(history)

    if state.json_output:
        print_json_payload(
            state,
            {"imported": imported, "results": results, "recommendation": suggestion},
        )
        return

    if state.plain_output:
        typer.echo(f"imported\t{imported}")
        for item in results:
            if item["status"] == "rejected":
                typer.echo(f"rejected\t{item['index']}\t{item['message']}")
        typer.echo(f"recommendation\t{suggestion}")
        return

    state.console.print(f"Imported {imported} of {len(entries)} workout(s)")
    for item in results:
        if item["status"] == "rejected":
            state.console.print(f"Entry {item['index']} rejected: {item['message']}", markup=False)
    state.console.print(f"Suggestion: {suggestion}", markup=False, soft_wrap=True)
