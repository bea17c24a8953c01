# src/sprintdesk/session/validation.py

from __future__ import annotations

import re

_SPECIAL_CHARS = r"""!@#$%^&*(),.?":{}|<>"""

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"\d"), "Password must contain at least one number"),
    (re.compile("[" + re.escape(_SPECIAL_CHARS) + "]"), "Password must contain at least one special character"),
)

MIN_PASSWORD_LENGTH = 8

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def password_problems(password: str) -> list[str]:
    """All strength rules the password violates, in display order."""
    problems: list[str] = []
    if len(password or "") < MIN_PASSWORD_LENGTH:
        problems.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    for pattern, message in _RULES:
        if not pattern.search(password or ""):
            problems.append(message)
    return problems


def validate_new_password(password: str, confirm: str | None = None) -> str | None:
    """Return the first problem message, or None when the password can be set."""
    problems = password_problems(password)
    if problems:
        return problems[0]
    if confirm is not None and confirm != password:
        return "Passwords do not match"
    return None


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match((email or "").strip()))
