# src/todo_home/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from .bootstrap import save_tasks

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console host (/help, /add, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text (no leading /) adds a task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_ref(state: AppState, raw: str) -> int | None:
    """
    Resolve "#7" (task id) or "3" (row position in the current list) to a task id.
    """
    raw = raw.strip()
    if raw.startswith("#"):
        try:
            return int(raw[1:])
        except ValueError:
            return None
    try:
        position = int(raw)
    except ValueError:
        return None
    row = state.renderer.row_for_position(position)
    return row.task_id if row is not None else None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return state.renderer.render_text()


def cmd_add(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    task_id = state.renderer.add_gesture(text)
    if task_id is None:
        return "Usage: /add <title> (title must not be empty)."
    return f"Added #{task_id}."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    """
    /toggle 2   -> toggle the task in row 2
    /toggle #7  -> toggle the task with id 7
    """
    if not args:
        return "Usage: /toggle <row> or /toggle #<id>."
    task_id = _parse_task_ref(state, args[0])
    if task_id is None or not state.renderer.toggle_gesture(task_id):
        return f"No such task: {args[0]}."
    task = state.task_store.get(task_id)
    done = "done" if task is not None and task.completed else "not done"
    return f"#{task_id} marked {done}."


def cmd_remove(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /remove <row> or /remove #<id>."
    task_id = _parse_task_ref(state, args[0])
    if task_id is None or not state.renderer.remove_gesture(task_id):
        return f"No such task: {args[0]}."
    return f"Removed #{task_id}."


def cmd_save(state: AppState, args: list[str]) -> str:
    if not state.task_store.persistent:
        return "Persistence is disabled; nothing to save."
    if save_tasks(state):
        return f"Saved {state.task_store.count()} tasks."
    return "Save failed (see log). Your tasks are still here."


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list()
    done = sum(1 for t in tasks if t.completed)
    storage = getattr(state.settings, "tasks_path", None) if state.task_store.persistent else None
    autosave = "ON" if getattr(state.settings, "autosave", False) else "OFF"
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({done} done, {len(tasks) - done} open)\n"
        f"  Storage: {storage or 'memory only'}\n"
        f"  Autosave: {autosave}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register(
    "toggle", cmd_toggle, help_text="Flip done/not done: /toggle <row> | #<id>.", aliases=["t", "done"]
)
registry.register(
    "remove", cmd_remove, help_text="Delete a task: /remove <row> | #<id>.", aliases=["rm", "del"]
)
registry.register("save", cmd_save, help_text="Write tasks to disk now.")
registry.register("status", cmd_status, help_text="Show task counts and storage settings.")
