# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "SPRINTDESK_APP_NAME": "App display name (default: sprintdesk).",
    "SPRINTDESK_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "SPRINTDESK_CONSOLE_ENABLED": "Enable the console REPL (true/false).",
    # Session
    "SPRINTDESK_DEMO_PASSWORD": "Password accepted for every directory user (default: password).",
    "SPRINTDESK_LOGIN_DELAY_SECONDS": "Simulated backend latency for login/reset/update (default: 1.0).",
    "SPRINTDESK_SESSION_STORAGE_KEY": "Key of the persisted identity in the session file (default: user).",
    "SPRINTDESK_PERSIST_SESSION": "Keep the signed-in user across restarts (true/false).",
    # Workspace
    "SPRINTDESK_ACTIVITY_AUTHOR": "Author recorded on activity entries (default: Current User).",
    # Assistant / OpenRouter
    "SPRINTDESK_ASSISTANT_DELAY_SECONDS": "Simulated processing time before a reply (default: 2.0).",
    "SPRINTDESK_OPENROUTER_API_KEY": "OpenRouter API key (without it the canned offline replies are used).",
    "SPRINTDESK_OPENROUTER_BASE_URL": "OpenRouter base URL (default: https://openrouter.ai/api/v1).",
    "SPRINTDESK_LLM_MODELS": "Comma/space separated list of models to try in order.",
    "SPRINTDESK_HTTP_REFERER": "Optional OpenRouter metadata header.",
    "SPRINTDESK_APP_TITLE": "Optional OpenRouter metadata header title.",
    "SPRINTDESK_LLM_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
    "SPRINTDESK_LLM_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 25).",
    "SPRINTDESK_LLM_FIRST_TOKEN_TIMEOUT_SECONDS": "Give up on a model after this long without output (default: 20).",
    # Paths (gitignored)
    "SPRINTDESK_DATA_DIR": "Local data directory (default: .local/sprintdesk).",
    "SPRINTDESK_SESSION_PATH": "Persisted session JSON path (default: <data_dir>/session.json).",
}
