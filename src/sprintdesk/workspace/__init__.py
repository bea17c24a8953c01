"""
Workspace subsystem.

Components:
- models.py: data structures (Task, TaskStatus, TeamMember, ...)
- seed.py: demo data the store starts with
- store.py: WorkspaceStore, the observable state container
- search.py, board.py, calendar.py, commitments.py: read-side helpers used by front ends
"""
