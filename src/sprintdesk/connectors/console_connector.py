# src/sprintdesk/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.observable import StoreEvent
from ..core.state import AppState

logger = logging.getLogger(__name__)

# Store events worth echoing to the terminal as they happen.
_ECHO_KINDS = {
    "notification.added": "New notification",
    "member.removed": "Team member removed",
    "workspace.current": "Current workspace changed",
}


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        else:
            print(line)
    except OSError:
        print(line)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _print_ts_block(text: str) -> None:
    ts = _ts_local()
    lines = text.splitlines() or [""]
    for i, line in enumerate(lines):
        # keep nice alignment for multi-line command output
        prefix = f"[{ts}] " if i == 0 else " " * (len(ts) + 3)
        print(prefix + line)


def _prompt_label(state: AppState) -> str:
    user = state.session.user
    if user is None:
        return ">>> (guest): "
    return f">>> {user.name} @ {state.workspace.current_workspace}: "


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "sprintdesk"))
    _print_ts(f"[CONSOLE] {app_name}. Use /login to sign in, /help for commands, /exit to quit.\n")

    def emit(text: str) -> None:
        # Immediate user-visible feedback for long operations (login, assistant)
        print(f"[{_ts_local()}] {text}", flush=True)

    def on_workspace_event(event: StoreEvent) -> None:
        label = _ECHO_KINDS.get(event.kind)
        if label:
            emit(f"[{label}] {event.entity_id or ''}".rstrip())

    unsubscribe = state.workspace.subscribe(on_workspace_event)

    try:
        while True:
            try:
                user_input = input(_prompt_label(state)).strip()
                _rewrite_prev_line(f"[{_ts_local()}] > {user_input}")
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            # Plain text goes to the assistant as a task-generation prompt.
            line = user_input if user_input.startswith("/") else f"/ai generate {user_input}"

            try:
                response = command_registry.handle(state, line, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                response = "Internal error while handling a command."

            if response is not None:
                _print_ts_block(response)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
