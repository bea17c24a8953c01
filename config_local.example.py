# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for secrets. This file should contain only safe overrides.
"""

# Example: run without the console (e.g. in a smoke-test container)
# CONSOLE_ENABLED = False

# Example: make the simulated backend instant while demoing
# LOGIN_DELAY_SECONDS = 0.0
# ASSISTANT_DELAY_SECONDS = 0.0
