"""sprintdesk: project-management core (workspaces, Kanban tasks, session) with a console front end."""

__version__ = "0.1.0"
