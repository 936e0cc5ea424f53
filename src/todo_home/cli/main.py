# src/todo_home/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (including the one-time task load),
then runs the console host until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    # The renderer prints through this emitter on every re-render.
    state = create_initial_state(settings=settings, emit=print)

    try:
        run_console_loop(state)
    finally:
        shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
