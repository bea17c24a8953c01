# tests/test_main.py

from __future__ import annotations

import signal

import pytest

from sprintdesk.cli import main as main_module


@pytest.fixture()
def wired(settings, monkeypatch):
    """Run main() against test settings without touching real logging or stdin."""
    calls: list[str] = []
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "setup_logging", lambda **_kwargs: calls.append("logging"))
    monkeypatch.setattr(main_module, "run_console_loop", lambda state: calls.append("console"))
    return calls


def test_main_runs_console_and_keeps_default_sigterm(settings, wired) -> None:
    settings.console_enabled = True
    settings.log_level = "INFO"
    before = signal.getsignal(signal.SIGTERM)

    main_module.main()

    assert wired == ["logging", "console"]
    assert signal.getsignal(signal.SIGTERM) is before


def test_main_returns_when_console_disabled(settings, wired) -> None:
    settings.console_enabled = False
    settings.log_level = "INFO"

    main_module.main()

    assert wired == ["logging"]
