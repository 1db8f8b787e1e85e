"""Demo authentication backed by a local flag.

There is no password check and no server: a successful login only records
the email and a timestamp in the local store. It gates commands when
``auth.require_login`` is enabled and is not a security boundary.
"""

from __future__ import annotations

import json
from typing import Callable, Optional

from aft_cli.core.constants import AUTH_KEY
from aft_cli.core.models import AuthSession
from aft_cli.core.storage import KeyValueStore
from aft_cli.core.validation import iso_timestamp, utc_now


class AuthError(RuntimeError):
    """Raised when a demo login cannot be recorded."""


def _now_iso() -> str:
    return iso_timestamp(utc_now())


class DemoAuth:
    """Stores and reads the local logged-in flag."""

    def __init__(
        self,
        kv: KeyValueStore,
        key: str = AUTH_KEY,
        clock: Optional[Callable[[], str]] = None,
    ) -> None:
        self.kv = kv
        self.key = key
        self.clock = clock or _now_iso

    def get_auth(self) -> Optional[AuthSession]:
        raw = self.kv.get(self.key)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return None
        if not isinstance(data, dict):
            return None
        return AuthSession(
            email=str(data.get("email") or ""),
            logged_in_at=str(data.get("loggedInAt") or ""),
        )

    def is_logged_in(self) -> bool:
        session = self.get_auth()
        return bool(session and session.email)

    def login(self, email: str) -> AuthSession:
        """Record a demo session for the given email."""
        email = (email or "").strip()
        if not email:
            raise AuthError("Email is required.")
        session = AuthSession(email=email, logged_in_at=self.clock())
        self.kv.set(self.key, json.dumps(session.to_dict()))
        return session

    def logout(self) -> bool:
        """Remove the local session flag."""
        return self.kv.remove(self.key)
