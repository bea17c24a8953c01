# tests/test_commands.py

from __future__ import annotations

from sprintdesk.cli.commands import CommandRegistry, registry
from sprintdesk.workspace.models import TaskStatus


def _login(state, email: str = "admin@example.com") -> None:
    reply = registry.handle(state, f"/login {email} password")
    assert reply is not None and reply.startswith("Welcome")


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2:" + ",".join(args)

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a", aliases=["aa"])
    reg.register("b", h3, "b")

    assert reg.handle(state, '/a x "y z"') == "h2:x,y z"
    assert reg.handle(state, "/AA") == "h2:"
    assert reg.handle(state, "/b", emit=notes.append) == "h3"
    assert called == {"h2": 2, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/login", "/board", "/move", "/ai", "/commit", "/calendar"):
        assert name in text


def test_workspace_commands_require_login(state) -> None:
    assert "log in" in (registry.handle(state, "/board") or "")
    assert "log in" in (registry.handle(state, "/add Something") or "")
    assert len(state.workspace.tasks) == 3


def test_login_failure_reports_error(state) -> None:
    assert registry.handle(state, "/login admin@example.com wrong") == "Incorrect email or password"
    assert registry.handle(state, "/login") == "Usage: /login <email> <password>"


def test_first_login_must_set_password(state) -> None:
    reply = registry.handle(state, "/login dev@example.com password") or ""
    assert "first login" in reply

    assert "/passwd" in (registry.handle(state, "/board") or "")
    assert registry.handle(state, "/passwd weak weak") == "Password must be at least 8 characters long"
    assert registry.handle(state, "/passwd Str0ng!pass Str0ng!pass") == "Password updated."
    assert "Mobile App Development" in (registry.handle(state, "/board") or "")


def test_board_add_move_and_task(state) -> None:
    _login(state)

    assert registry.handle(state, "/add Write release notes") == "Added task #n1 to To Do."
    assert state.workspace.activities[0].message == 'Created task "Write release notes"'

    assert registry.handle(state, '/move n1 "In Progress"') == "Moved #n1 to In Progress."
    t = state.workspace.get_task("n1")
    assert t.status is TaskStatus.IN_PROGRESS
    assert t.last_activity.user == "John Admin"

    assert "not moved" in (registry.handle(state, "/move n1 in_progress") or "")
    assert "Unknown status" in (registry.handle(state, "/move n1 Blocked") or "")

    board = registry.handle(state, "/board") or ""
    assert "== In Progress (2)" in board
    assert "#n1 Write release notes" in board

    detail = registry.handle(state, "/task n1") or ""
    assert "Last moved by John Admin: moved from To Do to In Progress" in detail


def test_board_search_by_assignee(state) -> None:
    _login(state)
    board = registry.handle(state, "/board mike") or ""
    assert "#2 " in board and "#3 " in board
    assert "#1 " not in board


def test_assign_and_remove_member(state) -> None:
    _login(state)

    assert registry.handle(state, "/assign 1 4") == "#1 assigned to Lisa Tester."
    assert "No team member" in (registry.handle(state, "/assign 1 99") or "")

    assert "Removed member 4" in (registry.handle(state, "/remove 4") or "")
    assert "Unassigned" in (registry.handle(state, "/task 1") or "")


def test_team_commands_need_manager(state) -> None:
    registry.handle(state, "/login dev@example.com password")
    registry.handle(state, "/passwd Str0ng!pass Str0ng!pass")

    assert "Access denied" in (registry.handle(state, "/members") or "")
    assert "Access denied" in (registry.handle(state, '/invite a@b.io Tester "A B"') or "")
    assert "Only Admins and Scrum Masters" in (registry.handle(state, "/commit 3") or "")


def test_invite_member(state) -> None:
    _login(state, "scrum@example.com")

    reply = registry.handle(state, '/invite ann@example.com Tester "Ann Lee"') or ""
    assert reply.startswith("Invited Ann Lee as Tester")
    assert "Invalid email" in (registry.handle(state, "/invite nope Tester Ann") or "")
    assert "Unknown role" in (registry.handle(state, "/invite x@y.io Boss Ann") or "")
    assert "Ann Lee" in (registry.handle(state, "/members ann") or "")


def test_commit_toggle(state) -> None:
    _login(state)
    assert registry.handle(state, "/commit 3") == "#3 is now In Progress."
    assert registry.handle(state, "/commit 3") == "#3 is now Done."


def test_notifications_read_all_twice(state) -> None:
    _login(state)
    assert "(2 unread)" in (registry.handle(state, "/notifications") or "")
    assert registry.handle(state, "/read all") == "Marked 2 notifications as read."
    assert registry.handle(state, "/read all") == "Marked 0 notifications as read."


def test_newws_switches_and_metrics(state) -> None:
    _login(state)
    reply = registry.handle(state, "/newws Data Team | analytics work") or ""
    assert "Created workspace Data Team" in reply

    metrics = registry.handle(state, "/metrics") or ""
    assert "Active workspaces: 3/3" in metrics
    assert "Completed tasks: 0" in metrics


def test_calendar_week(state) -> None:
    _login(state)
    text = registry.handle(state, "/calendar 2024-01-17") or ""
    assert "2024-01-15: #1 Design user authentication flow" in text
    assert "2024-01-20: #2 Implement API authentication" in text
    assert (registry.handle(state, "/calendar someday") or "").startswith("Usage: /calendar")


def test_calendar_month(state) -> None:
    _login(state)
    text = registry.handle(state, "/calendar month 2024-01") or ""
    assert text.splitlines() == [
        "January 2024:",
        "  2024-01-12: #3 Unit tests for user service",
        "  2024-01-15: #1 Design user authentication flow",
        "  2024-01-20: #2 Implement API authentication",
    ]
    assert "No tasks due." in (registry.handle(state, "/calendar month 2024-03") or "")
    assert registry.handle(state, "/calendar month 2024-13") == "Usage: /calendar month [YYYY-MM]"


def test_ai_generate_and_add(state, fake_client) -> None:
    _login(state)
    emitted: list[str] = []

    reply = registry.handle(state, "/ai generate Create login page task", emit=emitted.append) or ""
    assert reply.startswith("ok")
    assert emitted == ["[Generate Task] thinking..."]
    assert fake_client.calls[0][2].draft.title == "login page"

    added = registry.handle(state, "/ai add Create login page task") or ""
    assert added.startswith("Task has been added to your Kanban board!")
    assert any(t.title == "login page" for t in state.workspace.workspace_tasks())


def test_logout(state) -> None:
    _login(state)
    assert registry.handle(state, "/logout") == "Logged out."
    assert registry.handle(state, "/logout") == "You are not logged in."


def test_status_shows_user_workspace_and_next_meeting(state) -> None:
    assert "User: not logged in" in (registry.handle(state, "/status") or "")

    _login(state)
    text = registry.handle(state, "/status") or ""
    assert "John Admin <admin@example.com> (Admin)" in text
    assert "Mobile App Development [workspace-1]" in text
    assert "Next meeting: Daily Standup (2024-01-15 09:00)" in text
    assert "Assistant: FakeAssistantClient" in text


def test_profile_cannot_change_own_role(state) -> None:
    registry.handle(state, "/login dev@example.com password")
    registry.handle(state, "/passwd Str0ng!pass Str0ng!pass")

    assert (registry.handle(state, "/profile role=Admin") or "").startswith("Usage: /profile")
    assert state.session.user.role.value == "Developer"
    assert "Access denied" in (registry.handle(state, "/members") or "")
    assert "Only Admins and Scrum Masters" in (registry.handle(state, "/commit 2") or "")
    assert state.workspace.get_task("2").status is TaskStatus.TODO

    assert registry.handle(state, "/profile name=Mike D") == "Profile updated."
    assert state.session.user.name == "Mike D"


def test_comment_logs_activity(state) -> None:
    _login(state)

    assert registry.handle(state, "/comment 2 Blocked on API keys") == "Comment added to #2."
    entry = state.workspace.activities[0]
    assert entry.message == 'Added comment to "Implement API authentication": Blocked on API keys'
    assert entry.author == "Current User"

    before = len(state.workspace.activities)
    assert registry.handle(state, "/comment missing hello") == "Task missing not found."
    assert registry.handle(state, '/comment 2 "   "') == "Usage: /comment <task_id> <text>"
    assert registry.handle(state, "/comment 2") == "Usage: /comment <task_id> <text>"
    assert len(state.workspace.activities) == before


def test_ai_add_hint_survives_quotes_in_prompt(state) -> None:
    _login(state)

    reply = registry.handle(state, """/ai generate 'Fix the "login" bug'""") or ""
    hint = next(line for line in reply.splitlines() if line.startswith("(Use /ai add"))
    command = hint.removeprefix("(Use ").removesuffix(" to add it.)")

    added = registry.handle(state, command) or ""

    assert added.startswith("Task has been added")
    assert any(t.title == 'Fix the "login" bug' for t in state.workspace.workspace_tasks())


def test_login_without_user_reports_failure(state, monkeypatch) -> None:
    async def login(email: str, password: str) -> bool:
        return True

    monkeypatch.setattr(state.session, "login", login)

    assert state.session.user is None
    assert registry.handle(state, "/login admin@example.com password") == "Login failed."
    assert registry.handle(state, "/login admin@example.com password", emit=lambda _m: None) == "Login failed."


def test_login_greets_returning_user(state) -> None:
    assert registry.handle(state, "/login admin@example.com password") == "Welcome back, John Admin (Admin)."
