# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_HOME_APP_NAME": "App display name (default: todo-home).",
    "TODO_HOME_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Home page copy
    "TODO_HOME_PAGE_TITLE": "Document title shown above the list (default: Хатняя старонка).",
    "TODO_HOME_PAGE_HEADING": "Page heading (default: Хата).",
    "TODO_HOME_PAGE_TEXT": "Static intro line (default: Гэта спiс.).",
    # Paths (gitignored)
    "TODO_HOME_DATA_DIR": "Local data directory (default: .local/todo_home).",
    "TODO_HOME_TASKS_PATH": "Task list JSON path (default: <data_dir>/tasks.json).",
    # Persistence
    "TODO_HOME_PERSISTENCE": "Load/save the task list from disk (true/false, default: true).",
    "TODO_HOME_AUTOSAVE": "Save after every change (true/false, default: true).",
}
