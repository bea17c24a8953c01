# src/sprintdesk/session/store.py

"""
Session state container.

Holds the authenticated identity, a loading flag and a single current error
message. Operations that talk to the (simulated) backend are coroutines that
await the injected delay before resolving.

Key invariants:
- the persisted slot is read exactly once, at construction,
- every failure path leaves the previous identity untouched and reports
  through the return value and/or the error slot,
- reset_password never reveals whether an account exists in its message.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import fields, replace
from typing import Any

from ..core.observable import Observable
from ..core.ports import Delay, SessionStorage
from .directory import UserDirectory
from .models import ResetPasswordResult, Role, User
from .validation import validate_new_password

logger = logging.getLogger(__name__)

RESET_PASSWORD_MESSAGE = (
    "If an account exists for that email, we have sent password reset instructions. "
    "Check your email."
)

ERR_MISSING_CREDENTIALS = "Please enter both email and password."
ERR_BAD_CREDENTIALS = "Incorrect email or password"
ERR_MISSING_EMAIL = "Please enter your email address."
ERR_UPDATE_PASSWORD = "Failed to update password. Please try again."

_PROFILE_FIELDS = frozenset(f.name for f in fields(User)) - {"id"}


class SessionStore(Observable):
    def __init__(
        self,
        storage: SessionStorage,
        *,
        directory: UserDirectory | None = None,
        delay: Delay | None = None,
        demo_password: str = "password",
        delay_seconds: float = 1.0,
        storage_key: str = "user",
    ) -> None:
        super().__init__()
        self._storage = storage
        self._directory = directory if directory is not None else UserDirectory()
        self._delay: Delay = delay if delay is not None else asyncio.sleep
        self._demo_password = demo_password
        self._delay_seconds = max(0.0, float(delay_seconds))
        self._key = storage_key

        self._user: User | None = None
        self._is_loading = True
        self._error: str | None = None

        self._restore()
        self._is_loading = False

    # ---- state ----

    @property
    def user(self) -> User | None:
        if self._user is None:
            return None
        return replace(self._user, workspaces=list(self._user.workspaces))

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    # ---- persistence helpers ----

    def _restore(self) -> None:
        raw = self._storage.get(self._key)
        if raw is None:
            return
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("persisted user is not a JSON object")
            self._user = User.from_dict(data)
            logger.info("Session restored for %s", self._user.email)
        except (ValueError, KeyError, TypeError):
            logger.exception("Discarding unreadable persisted session (key=%s)", self._key)
            self._storage.remove(self._key)

    def _persist(self) -> None:
        if self._user is None:
            self._storage.remove(self._key)
            return
        self._storage.set(self._key, json.dumps(self._user.to_dict(), ensure_ascii=False))

    def _set_error(self, message: str | None) -> None:
        self._error = message
        self._notify("session.error")

    async def _simulate_backend(self) -> None:
        await self._delay(self._delay_seconds)

    # ---- operations ----

    async def login(self, email: str, password: str) -> bool:
        self._error = None
        if not (email or "").strip() or not password:
            self._set_error(ERR_MISSING_CREDENTIALS)
            return False

        self._is_loading = True
        self._notify("session.loading")
        try:
            await self._simulate_backend()

            found = self._directory.find_by_email(email)
            if found is not None and password == self._demo_password:
                self._user = found
                self._persist()
                logger.info("Login ok for %s (first_login=%s)", found.email, found.is_first_login)
                self._notify("session.login", found.id)
                return True

            logger.info("Login failed for %s", (email or "").strip())
            self._set_error(ERR_BAD_CREDENTIALS)
            return False
        finally:
            self._is_loading = False
            self._notify("session.loading")

    def logout(self) -> None:
        previous = self._user.id if self._user is not None else None
        self._user = None
        self._error = None
        self._storage.remove(self._key)
        logger.info("Logout (user_id=%s)", previous)
        self._notify("session.logout", previous)

    async def reset_password(self, email: str) -> ResetPasswordResult:
        self._error = None
        if not (email or "").strip():
            self._set_error(ERR_MISSING_EMAIL)
            return ResetPasswordResult(ok=False, message=ERR_MISSING_EMAIL)

        await self._simulate_backend()

        ok = email in self._directory
        logger.debug("Password reset requested found=%s", ok)
        self._notify("session.reset_password")
        return ResetPasswordResult(ok=ok, message=RESET_PASSWORD_MESSAGE)

    async def update_password(self, new_password: str, confirm: str | None = None) -> bool:
        self._error = None
        problem = validate_new_password(new_password, confirm)
        if problem is not None:
            self._set_error(problem)
            return False

        await self._simulate_backend()

        if self._user is None:
            self._set_error(ERR_UPDATE_PASSWORD)
            return False

        self._user = replace(self._user, is_first_login=False)
        self._persist()
        logger.info("Password updated for %s", self._user.email)
        self._notify("session.password", self._user.id)
        return True

    def update_profile(self, **updates: Any) -> bool:
        """Merge fields into the current identity. Returns False when logged out."""
        unknown = set(updates) - _PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update profile fields: {', '.join(sorted(unknown))}")

        if self._user is None:
            return False

        if "role" in updates:
            updates["role"] = Role.parse(updates["role"])
        if "workspaces" in updates:
            updates["workspaces"] = [str(w) for w in updates["workspaces"]]

        self._user = replace(self._user, **updates)
        self._persist()
        self._notify("session.profile", self._user.id)
        return True

    def clear_error(self) -> None:
        if self._error is None:
            return
        self._set_error(None)

    def input_changed(self) -> None:
        """Called by front ends when the user edits a form field."""
        self.clear_error()
