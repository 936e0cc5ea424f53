# src/todo_home/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]


def render_page_header(settings: object) -> str:
    """Home page shell: document title, heading and the static intro line."""
    title = str(getattr(settings, "page_title", "") or "")
    heading = str(getattr(settings, "page_heading", "") or "")
    text = str(getattr(settings, "page_text", "") or "")

    lines = []
    if title:
        lines.append(f"[{title}]")
    if heading:
        lines.append(heading)
        lines.append("=" * len(heading))
    if text:
        lines.append(text)
    return "\n".join(lines)


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> None:
    """
    Interactive host for the task list.

    Plain text becomes an "add" gesture, lines starting with "/" go to the
    command registry. The renderer prints the list itself after every change.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count())

    print_fn(render_page_header(state.settings))
    print_fn("")
    state.renderer.mount()
    print_fn("\nType a task and press Enter to add it. Use /help for commands, /exit to quit.")

    while True:
        try:
            user_input = input_fn("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print_fn("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            if user_input.startswith("/"):
                response = command_registry.handle(state, user_input)
            else:
                state.renderer.set_draft(user_input)
                state.renderer.submit_draft()
                response = None
        except Exception:
            logger.exception("Console handler crashed.")
            response = "Internal error while handling that input."

        if response is not None:
            print_fn(response)

    logger.info("Console connector finished.")
