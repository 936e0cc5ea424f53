# src/todo_home/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE_NAME = "todo_home.log"


class _ListOutputFilter(logging.Filter):
    """
    stderr shares the terminal with the rendered task list.

    Only todo_home records pass, and ignored gestures / re-render chatter
    (INFO from the renderer and store) stay in the log file.
    """

    _QUIET = ("todo_home.render.", "todo_home.tasks.")

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith("todo_home."):
            return record.levelno >= logging.ERROR
        if record.name.startswith(self._QUIET):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(*, log_dir: str | Path, console_level: int = logging.WARNING) -> Path:
    """
    Send everything to <log_dir>/todo_home.log and a filtered subset to stderr.

    Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ListOutputFilter())

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)

    logging.basicConfig(level=logging.DEBUG, handlers=[console, file_handler], force=True)
    return log_file
