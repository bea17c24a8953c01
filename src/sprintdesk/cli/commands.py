# src/sprintdesk/cli/commands.py

from __future__ import annotations

import asyncio
import inspect
import logging
import shlex
from collections.abc import Callable
from datetime import date, datetime
from typing import cast

from ..assistant.models import AssistantMode
from ..core.state import AppState
from ..session.models import Role
from ..session.validation import is_valid_email
from ..workspace.board import DragEndEvent, board_columns, handle_drag_end, subtask_progress
from ..workspace.calendar import bucket_by_date, month_grid, tasks_for_date, week_days
from ..workspace.commitments import days_remaining, toggle_commitment
from ..workspace.models import Task, TaskStatus
from ..workspace.search import resolve_assignee_name, search_members, search_tasks

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by front ends (/help, /board, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError:
            parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _run(coro):
    """Drive a store coroutine from the synchronous console."""
    return asyncio.run(coro)


def _today() -> date:
    return datetime.now().astimezone().date()


def _auth_problem(state: AppState) -> str | None:
    user = state.session.user
    if user is None:
        return "Please log in first: /login <email> <password>"
    if user.is_first_login:
        return "Set a new password first: /passwd <new> <confirm>"
    return None


def _manager_problem(state: AppState) -> str | None:
    problem = _auth_problem(state)
    if problem:
        return problem
    user = state.session.user
    if user is None or not user.is_manager:
        return "Access denied: you need Admin or Scrum Master privileges."
    return None


def _actor_name(state: AppState) -> str | None:
    user = state.session.user
    return user.name if user is not None else None


def _parse_assignments(args: list[str]) -> dict[str, str]:
    """['name=John', 'Smith', 'role=Admin'] -> {'name': 'John Smith', 'role': 'Admin'}"""
    out: dict[str, str] = {}
    key: str | None = None
    for a in args:
        if "=" in a:
            key, _, value = a.partition("=")
            key = key.strip().lower()
            out[key] = value
        elif key is not None:
            out[key] = f"{out[key]} {a}".strip()
    return out


def _format_task_line(state: AppState, t: Task) -> str:
    done, total = subtask_progress(t)
    sub = f" [{done}/{total}]" if total else ""
    who = resolve_assignee_name(state.workspace.team_members, t.assignee_id)
    due = f" due {t.due_date}" if t.due_date else ""
    return f"#{t.id} {t.title} ({t.priority.value}, {who}{due}){sub}"


# ---- general ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    user = state.session.user
    who = f"{user.name} <{user.email}> ({user.role.value})" if user else "not logged in"
    ws = state.workspace.current_workspace_record()
    ws_label = f"{ws.name} [{ws.id}]" if ws else f"none ({state.workspace.current_workspace or '-'})"
    assistant = type(state.assistant.client).__name__
    upcoming = state.workspace.upcoming_meetings(limit=1)
    meeting = f"{upcoming[0].title} ({upcoming[0].date} {upcoming[0].time})" if upcoming else "-"
    return (
        "Status:\n"
        f"  User: {who}\n"
        f"  Workspace: {ws_label}\n"
        f"  Unread notifications: {state.workspace.unread_count()}\n"
        f"  Next meeting: {meeting}\n"
        f"  Assistant: {assistant}"
    )


# ---- session ----


def cmd_login(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if len(args) < 2:
        return "Usage: /login <email> <password>"
    if emit:
        emit("Signing in...")
    ok = _run(state.session.login(args[0], args[1]))
    if not ok:
        return state.session.error or "Login failed."
    user = state.session.user
    if user is None:
        return "Login failed."
    if user.is_first_login:
        return f"Welcome, {user.name}. This is your first login: set a password with /passwd <new> <confirm>."
    return f"Welcome back, {user.name} ({user.role.value})."


def cmd_logout(state: AppState, args: list[str]) -> str:
    if not state.session.is_authenticated:
        return "You are not logged in."
    state.session.logout()
    return "Logged out."


def cmd_forgot(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /forgot <email>"
    if emit:
        emit("Sending reset instructions...")
    result = _run(state.session.reset_password(args[0]))
    return result.message


def cmd_passwd(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /passwd <new> <confirm>"
    confirm = args[1] if len(args) > 1 else None
    ok = _run(state.session.update_password(args[0], confirm))
    if not ok:
        return state.session.error or "Failed to update password."
    return "Password updated."


def cmd_profile(state: AppState, args: list[str]) -> str:
    user = state.session.user
    if user is None:
        return "Please log in first: /login <email> <password>"
    if not args:
        return (
            "Profile:\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role.value}\n"
            f"  Workspaces: {', '.join(user.workspaces) or '-'}"
        )
    updates = _parse_assignments(args)
    allowed = {"name", "email"}
    bad = set(updates) - allowed
    if bad or not updates:
        return "Usage: /profile name=<name> email=<email>  (roles are changed by an Admin)"
    if "email" in updates and not is_valid_email(updates["email"]):
        return f"Invalid email address: {updates['email']}"
    try:
        state.session.update_profile(**updates)
    except ValueError as e:
        return str(e)
    return "Profile updated."


# ---- workspaces ----


def cmd_workspaces(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    current = state.workspace.current_workspace
    lines = ["Workspaces:"]
    for w in state.workspace.workspaces:
        mark = "*" if w.id == current else " "
        active = "" if w.is_active else " (inactive)"
        lines.append(f" {mark} {w.id}: {w.name}{active} - {w.description}")
    return "\n".join(lines)


def cmd_use(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if not args:
        return "Usage: /use <workspace_id>"
    ws = state.workspace.get_workspace(args[0])
    if ws is None:
        return f"No workspace with id {args[0]}."
    state.workspace.set_current_workspace(ws.id)
    return f"Switched to {ws.name}."


def cmd_newws(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    text = " ".join(args)
    name, _, description = text.partition("|")
    if not name.strip():
        return "Usage: /newws <name> [| description]"
    user = state.session.user
    members = [user.id] if user is not None else []
    ws = state.workspace.add_workspace(name=name, description=description, member_ids=members)
    return f"Created workspace {ws.name} [{ws.id}] and switched to it."


# ---- board / tasks ----


def cmd_board(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    ws = state.workspace.current_workspace_record()
    if ws is None:
        return "No workspace selected. Use /workspaces and /use <id>."

    term = " ".join(args)
    tasks = search_tasks(state.workspace, term)
    header = f"{ws.name}" + (f" (search: {term})" if term else "")
    lines = [header]
    for status, items in board_columns(tasks).items():
        lines.append(f"== {status.value} ({len(items)})")
        for t in items:
            lines.append(f"   {_format_task_line(state, t)}")
    return "\n".join(lines)


def cmd_task(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if not args:
        return "Usage: /task <task_id>"
    t = state.workspace.get_task(args[0])
    if t is None:
        return f"Task {args[0]} not found."

    lines = [
        f"#{t.id} {t.title}",
        f"  Status: {t.status.value}   Priority: {t.priority.value}",
        f"  Assignee: {resolve_assignee_name(state.workspace.team_members, t.assignee_id)}",
        f"  Due: {t.due_date or '-'}",
        f"  {t.description}" if t.description else "  (no description)",
    ]
    if t.subtasks:
        done, total = subtask_progress(t)
        lines.append(f"  Subtasks {done}/{total}:")
        for st in t.subtasks:
            lines.append(f"    [{'x' if st.completed else ' '}] {st.id} {st.title}")
    if t.last_activity is not None:
        la = t.last_activity
        lines.append(f"  Last moved by {la.user}: {la.action} ({la.timestamp})")
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    title = " ".join(args).strip()
    if not title:
        return "Usage: /add <title>"
    if state.workspace.current_workspace_record() is None:
        return "No workspace selected. Use /workspaces and /use <id>."
    t = state.workspace.add_task(title=title)
    state.workspace.add_activity(f'Created task "{t.title}"')
    return f"Added task #{t.id} to {TaskStatus.TODO.value}."


def cmd_move(state: AppState, args: list[str]) -> str:
    """
    /move <task_id> <status>   (status: "To Do", "In Progress", QA, Done)
    """
    if problem := _auth_problem(state):
        return problem
    if len(args) < 2:
        return 'Usage: /move <task_id> <status>  (e.g. /move 2 "In Progress")'
    task_id, target = args[0], " ".join(args[1:])
    if TaskStatus.try_parse(target) is None:
        return f"Unknown status: {target}. Use one of: {', '.join(s.value for s in TaskStatus)}."
    moved = handle_drag_end(state.workspace, DragEndEvent(active_id=task_id, over_id=target), _actor_name(state))
    if not moved:
        return f"Task {task_id} was not moved (unknown, in another workspace, or already there)."
    t = state.workspace.get_task(task_id)
    return f"Moved #{task_id} to {t.status.value if t else target}."


def cmd_assign(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if not args:
        return "Usage: /assign <task_id> [member_id]"
    member_id = args[1] if len(args) > 1 else ""
    if member_id and state.workspace.get_member(member_id) is None:
        return f"No team member with id {member_id}."
    if not state.workspace.update_task(args[0], assignee_id=member_id):
        return f"Task {args[0]} not found."
    return f"#{args[0]} assigned to {resolve_assignee_name(state.workspace.team_members, member_id)}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if not args:
        return "Usage: /delete <task_id>"
    if not state.workspace.delete_task(args[0]):
        return f"Task {args[0]} not found."
    return f"Deleted task #{args[0]}."


def cmd_subtask(state: AppState, args: list[str]) -> str:
    """
    /subtask add <task_id> <title>
    /subtask done <task_id> <subtask_id>
    /subtask rm <task_id> <subtask_id>
    """
    if problem := _auth_problem(state):
        return problem
    if len(args) < 3:
        return "Usage: /subtask add <task_id> <title> | done <task_id> <subtask_id> | rm <task_id> <subtask_id>"
    sub, task_id, rest = args[0].lower(), args[1], args[2:]
    if sub == "add":
        st = state.workspace.add_subtask(task_id, " ".join(rest))
        return f"Added subtask {st.id}." if st else f"Task {task_id} not found."
    if sub in ("done", "toggle"):
        ok = state.workspace.toggle_subtask(task_id, rest[0])
        return "Subtask toggled." if ok else "Subtask not found."
    if sub in ("rm", "remove"):
        ok = state.workspace.remove_subtask(task_id, rest[0])
        return "Subtask removed." if ok else "Subtask not found."
    return "Unknown /subtask action. Use add, done or rm."


def cmd_comment(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if len(args) < 2 or not " ".join(args[1:]).strip():
        return "Usage: /comment <task_id> <text>"
    t = state.workspace.get_task(args[0])
    if t is None:
        return f"Task {args[0]} not found."
    text = " ".join(args[1:]).strip()
    state.workspace.add_activity(f'Added comment to "{t.title}": {text}')
    return f"Comment added to #{t.id}."


def cmd_commit(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if not args:
        lines = ["Commitments:"]
        today = _today()
        for t in state.workspace.workspace_tasks():
            left = days_remaining(t.due_date, today)
            when = f"{left} days left" if left is not None else "no due date"
            lines.append(f"  #{t.id} [{t.status.value}] {t.title} ({when})")
        return "\n".join(lines)
    try:
        ok = toggle_commitment(state.workspace, state.session.user, args[0])
    except PermissionError as e:
        return str(e)
    if not ok:
        return f"Task {args[0]} not found."
    t = state.workspace.get_task(args[0])
    return f"#{args[0]} is now {t.status.value if t else '?'}."


# ---- team ----


def cmd_members(state: AppState, args: list[str]) -> str:
    if problem := _manager_problem(state):
        return problem
    term = " ".join(args)
    members = search_members(state.workspace.team_members, term)
    if not members:
        return "No members match your search" if term else "No team members found"
    lines = ["Team members:"]
    for m in members:
        lines.append(f"  {m.id}: {m.name} <{m.email}> {m.role.value} [{m.status.value}]")
    return "\n".join(lines)


def cmd_invite(state: AppState, args: list[str]) -> str:
    """
    /invite <email> <role> <name...>
    """
    if problem := _manager_problem(state):
        return problem
    if len(args) < 3:
        return 'Usage: /invite <email> <role> <name>  (e.g. /invite ann@example.com Tester "Ann Lee")'
    if not is_valid_email(args[0]):
        return f"Invalid email address: {args[0]}"
    try:
        role = Role.parse(args[1])
    except ValueError:
        return f"Unknown role: {args[1]}. Use one of: {', '.join(r.value for r in Role)}."
    m = state.workspace.add_team_member(name=" ".join(args[2:]), email=args[0], role=role, status="Pending")
    return f"Invited {m.name} as {m.role.value} (id {m.id})."


def cmd_member(state: AppState, args: list[str]) -> str:
    """
    /member <member_id> role=<role> status=<status>
    """
    if problem := _manager_problem(state):
        return problem
    if len(args) < 2:
        return "Usage: /member <member_id> role=<role> status=<status>"
    updates = _parse_assignments(args[1:])
    if not updates or set(updates) - {"role", "status", "name", "email"}:
        return "Usage: /member <member_id> role=<role> status=<status>"
    try:
        ok = state.workspace.update_team_member(args[0], **updates)
    except ValueError as e:
        return str(e)
    return "Member updated." if ok else f"No team member with id {args[0]}."


def cmd_remove(state: AppState, args: list[str]) -> str:
    if problem := _manager_problem(state):
        return problem
    if not args:
        return "Usage: /remove <member_id>"
    if not state.workspace.remove_team_member(args[0]):
        return f"No team member with id {args[0]}."
    return f"Removed member {args[0]}. Their tasks now show as Unassigned."


# ---- notifications / activity / meetings ----


def cmd_notifications(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    notes = state.workspace.notifications
    if not notes:
        return "No notifications."
    lines = [f"Notifications ({state.workspace.unread_count()} unread):"]
    for n in notes:
        mark = " " if n.read else "*"
        lines.append(f" {mark} {n.id} [{n.type.value}] {n.title}: {n.message}")
    return "\n".join(lines)


def cmd_read(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if not args:
        return "Usage: /read <notification_id|all>"
    if args[0].lower() == "all":
        n = state.workspace.mark_all_notifications_read()
        return f"Marked {n} notifications as read."
    if not state.workspace.mark_notification_read(args[0]):
        return f"Notification {args[0]} not found."
    return "Marked as read."


def cmd_dismiss(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if not args:
        return "Usage: /dismiss <notification_id>"
    if not state.workspace.delete_notification(args[0]):
        return f"Notification {args[0]} not found."
    return "Notification deleted."


def cmd_activity(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    if args:
        entry = state.workspace.add_activity(" ".join(args))
        return f"Logged: {entry.message}"
    lines = ["Recent activity:"]
    for a in state.workspace.activities[:10]:
        lines.append(f"  {a.timestamp} {a.author}: {a.message}")
    return "\n".join(lines)


def cmd_meetings(state: AppState, args: list[str]) -> str:
    """
    /meetings                              -> list all meetings
    /meetings add <date> <time> <title>    -> schedule a meeting
    """
    if problem := _auth_problem(state):
        return problem
    if args and args[0].lower() == "add":
        if len(args) < 4:
            return "Usage: /meetings add <YYYY-MM-DD> <HH:MM> <title>"
        m = state.workspace.add_meeting(title=" ".join(args[3:]), date=args[1], time=args[2])
        return f"Scheduled {m.title} on {m.date} at {m.time}."
    meetings = sorted(state.workspace.meetings, key=lambda m: (m.date, m.time))
    if not meetings:
        return "No meetings scheduled."
    lines = ["Meetings:"]
    for m in meetings:
        link = f" {m.link}" if m.link else ""
        lines.append(f"  {m.date} {m.time} {m.title}{link}")
    return "\n".join(lines)


def cmd_calendar(state: AppState, args: list[str]) -> str:
    """
    /calendar [YYYY-MM-DD]         -> tasks due in that week
    /calendar month [YYYY-MM]      -> days of the month grid that have tasks due
    """
    if problem := _auth_problem(state):
        return problem
    tasks = state.workspace.workspace_tasks()

    if args and args[0].lower() == "month":
        try:
            first = date.fromisoformat(f"{args[1]}-01") if len(args) > 1 else _today().replace(day=1)
        except ValueError:
            return "Usage: /calendar month [YYYY-MM]"
        buckets = bucket_by_date(tasks, month_grid(first.year, first.month))
        lines = [f"{first.strftime('%B %Y')}:"]
        for d, items in buckets.items():
            if items:
                names = ", ".join(f"#{t.id} {t.title}" for t in items)
                lines.append(f"  {d.isoformat()}: {names}")
        if len(lines) == 1:
            lines.append("  No tasks due.")
        return "\n".join(lines)

    try:
        day = date.fromisoformat(args[0]) if args else _today()
    except ValueError:
        return "Usage: /calendar [YYYY-MM-DD] | month [YYYY-MM]"
    lines = [f"Week of {day.isoformat()}:"]
    for d in week_days(day):
        items = tasks_for_date(tasks, d)
        names = ", ".join(f"#{t.id} {t.title}" for t in items) or "-"
        lines.append(f"  {d.strftime('%a')} {d.isoformat()}: {names}")
    return "\n".join(lines)


def cmd_metrics(state: AppState, args: list[str]) -> str:
    if problem := _auth_problem(state):
        return problem
    m = state.workspace.get_metrics()
    return (
        "Metrics:\n"
        f"  Active workspaces: {m.active_workspaces}/{m.total_workspaces}\n"
        f"  Completed tasks: {m.completed_tasks}\n"
        f"  In progress: {m.in_progress_tasks}\n"
        f"  Team members: {m.team_members}"
    )


# ---- assistant ----


def cmd_ai(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /ai generate <prompt>   -> suggest a task
    /ai add <prompt>        -> add the suggested task
    /ai summarize <notes>   -> stand-up summary
    /ai suggest <notes>     -> next steps
    """
    if problem := _auth_problem(state):
        return problem
    if len(args) < 2:
        return "Usage: /ai generate|add|summarize|suggest <prompt>"

    sub, prompt = args[0].lower(), " ".join(args[1:])
    if sub == "add":
        task = state.assistant.add_suggested_task(prompt)
        if task is None:
            return "Could not build a task from that prompt."
        return f"Task has been added to your Kanban board! (#{task.id} {task.title})"

    try:
        mode = AssistantMode(sub)
    except ValueError:
        return "Unknown assistant mode. Use generate, add, summarize or suggest."

    if emit:
        emit(f"[{mode.label}] thinking...")
    reply = _run(state.assistant.respond(mode, prompt))
    if reply is None:
        return "Please enter a prompt."
    if mode is AssistantMode.GENERATE:
        return f"{reply.text}\n\n(Use /ai add {shlex.quote(prompt)} to add it.)"
    return reply.text


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show session, workspace and assistant status.")
registry.register("login", cmd_login, help_text="Sign in: /login <email> <password>.")
registry.register("logout", cmd_logout, help_text="Sign out and forget the saved session.")
registry.register("forgot", cmd_forgot, help_text="Request password reset: /forgot <email>.")
registry.register("passwd", cmd_passwd, help_text="Set a new password: /passwd <new> <confirm>.")
registry.register("profile", cmd_profile, help_text="Show or edit profile: /profile name=... email=...")
registry.register("workspaces", cmd_workspaces, help_text="List workspaces.", aliases=["ws"])
registry.register("use", cmd_use, help_text="Switch workspace: /use <workspace_id>.")
registry.register("newws", cmd_newws, help_text="Create workspace: /newws <name> [| description].")
registry.register("board", cmd_board, help_text="Show Kanban board, optionally filtered: /board [term].")
registry.register("task", cmd_task, help_text="Show task details: /task <id>.")
registry.register("add", cmd_add, help_text="Add a task to To Do: /add <title>.")
registry.register("move", cmd_move, help_text="Move a task: /move <id> <status>.")
registry.register("assign", cmd_assign, help_text="Assign a task: /assign <id> [member_id].")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.")
registry.register("subtask", cmd_subtask, help_text="Edit subtasks: /subtask add|done|rm ...")
registry.register("comment", cmd_comment, help_text="Comment on a task: /comment <task_id> <text>.")
registry.register("commit", cmd_commit, help_text="List commitments or toggle one: /commit [id].")
registry.register("members", cmd_members, help_text="List/search team members: /members [term].")
registry.register("invite", cmd_invite, help_text="Invite a member: /invite <email> <role> <name>.")
registry.register("member", cmd_member, help_text="Edit a member: /member <id> role=... status=...")
registry.register("remove", cmd_remove, help_text="Remove a member: /remove <member_id>.")
registry.register("notifications", cmd_notifications, help_text="List notifications.", aliases=["n"])
registry.register("read", cmd_read, help_text="Mark read: /read <id|all>.")
registry.register("dismiss", cmd_dismiss, help_text="Delete a notification: /dismiss <id>.")
registry.register("activity", cmd_activity, help_text="Show recent activity or log a note: /activity [text].")
registry.register("meetings", cmd_meetings, help_text="List or add meetings: /meetings [add <date> <time> <title>].")
registry.register("calendar", cmd_calendar, help_text="Tasks due: /calendar [YYYY-MM-DD] or /calendar month [YYYY-MM].")
registry.register("metrics", cmd_metrics, help_text="Dashboard metrics for the current workspace.")
registry.register("ai", cmd_ai, help_text="AI assistant: /ai generate|add|summarize|suggest <prompt>.")
