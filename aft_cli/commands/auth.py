"""Demo authentication commands."""

from __future__ import annotations

import typer

from aft_cli.commands.common import fail, get_state, open_auth, print_json_payload
from aft_cli.core.auth import AuthError
from aft_cli.core.storage import StorageUnavailable


def login_command(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email to record for the demo session"),
) -> None:
    """Record a local demo session. No password is checked or stored."""
    state = get_state(ctx)

    try:
        session = open_auth(state).login(email)
    except (AuthError, StorageUnavailable) as exc:
        fail(state, "Login failed", str(exc))

    payload = {"status": "success", "authenticated": True, "session": session.to_dict()}

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("status\tsuccess")
        typer.echo(f"email\t{session.email}")
        typer.echo(f"logged_in_at\t{session.logged_in_at}")
        return

    state.console.print("Login successful", markup=False)
    state.console.print(f"User: {session.email}", markup=False)


def logout_command(ctx: typer.Context) -> None:
    """Remove the local demo session."""
    state = get_state(ctx)
    try:
        removed = open_auth(state).logout()
    except StorageUnavailable as exc:
        fail(state, "Storage error", str(exc))

    if state.json_output:
        print_json_payload(
            state,
            {
                "status": "success",
                "logged_out": bool(removed),
                "message": "Local session removed" if removed else "No local session",
            },
        )
        return

    if state.plain_output:
        typer.echo("status\tsuccess")
        typer.echo(f"logged_out\t{str(bool(removed)).lower()}")
        typer.echo("message\tLocal session removed" if removed else "message\tNo local session")
        return

    if removed:
        state.console.print("Local session removed")
    else:
        state.console.print("No local session found")


def whoami_command(ctx: typer.Context) -> None:
    """Show the current demo session, if any."""
    state = get_state(ctx)
    auth = open_auth(state)
    try:
        session = auth.get_auth() if auth.is_logged_in() else None
    except StorageUnavailable as exc:
        fail(state, "Storage error", str(exc))

    if state.json_output:
        print_json_payload(
            state,
            {"authenticated": session is not None, "session": session.to_dict() if session else None},
        )
        return

    if state.plain_output:
        typer.echo(f"authenticated\t{str(session is not None).lower()}")
        if session:
            typer.echo(f"email\t{session.email}")
        return

    if session:
        state.console.print(f"Logged in as {session.email} since {session.logged_in_at}", markup=False)
    else:
        state.console.print("Not logged in")
