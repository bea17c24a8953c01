"""
Session subsystem.

Components:
- models.py: User, Role and the reset-password result
- directory.py: the static demo user directory
- storage.py: persisted session slot (in-memory or JSON file)
- validation.py: password/email checks
- store.py: SessionStore (login, logout, reset and update password, profile)
"""
