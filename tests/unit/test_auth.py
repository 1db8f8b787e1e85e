from __future__ import annotations

import json

import pytest

from aft_cli.core.auth import AuthError, DemoAuth
from aft_cli.core.constants import AUTH_KEY
from aft_cli.core.storage import KeyValueStore


def _auth(kv: KeyValueStore) -> DemoAuth:
    return DemoAuth(kv, clock=lambda: "2026-02-14T07:00:00.000Z")


def test_not_logged_in_by_default(kv: KeyValueStore) -> None:
    auth = _auth(kv)
    assert auth.get_auth() is None
    assert not auth.is_logged_in()


def test_login_stores_email_and_timestamp(kv: KeyValueStore) -> None:
    session = _auth(kv).login("  athlete@example.com ")
    assert session.email == "athlete@example.com"
    stored = json.loads(kv.get(AUTH_KEY) or "")
    assert stored == {"email": "athlete@example.com", "loggedInAt": "2026-02-14T07:00:00.000Z"}
    assert "password" not in stored


def test_login_requires_email(kv: KeyValueStore) -> None:
    with pytest.raises(AuthError):
        _auth(kv).login("   ")
    assert kv.get(AUTH_KEY) is None


def test_is_logged_in_after_login(kv: KeyValueStore) -> None:
    auth = _auth(kv)
    auth.login("a@example.com")
    assert auth.is_logged_in()


def test_logout_removes_flag(kv: KeyValueStore) -> None:
    auth = _auth(kv)
    auth.login("a@example.com")
    assert auth.logout() is True
    assert not auth.is_logged_in()
    assert auth.logout() is False


def test_malformed_flag_treated_as_logged_out(kv: KeyValueStore) -> None:
    kv.set(AUTH_KEY, "{broken")
    assert _auth(kv).get_auth() is None


def test_flag_without_email_is_not_logged_in(kv: KeyValueStore) -> None:
    kv.set(AUTH_KEY, json.dumps({"loggedInAt": "2026-02-14T07:00:00.000Z"}))
    assert not _auth(kv).is_logged_in()


def test_auth_flag_does_not_touch_workouts(kv: KeyValueStore) -> None:
    kv.set("aft_workouts_v1", "[]")
    auth = _auth(kv)
    auth.login("a@example.com")
    auth.logout()
    assert kv.get("aft_workouts_v1") == "[]"
