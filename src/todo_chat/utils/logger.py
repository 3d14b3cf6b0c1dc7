"""Logging helpers: everything goes to the error log, verbose mode echoes to stderr."""

import sys
import traceback
from datetime import datetime
from typing import Optional

from todo_chat.config import get_settings

_RULE = "-" * 72


def log_to_file(message: str, level: str = "ERROR") -> None:
    """Append one timestamped entry to ``<data_dir>/error.log``."""
    stamp = datetime.now().isoformat(sep=" ", timespec="seconds")
    entry = f"{_RULE}\n{stamp} [{level}]\n{message.rstrip()}\n"
    try:
        with open(get_settings().error_log_path, "a", encoding="utf-8") as log_file:
            log_file.write(entry)
    except OSError as e:
        print(f"Could not write error log: {e}", file=sys.stderr)


def _echo(text: str) -> None:
    if get_settings().verbose_logging:
        print(text, file=sys.stderr)


def log_error(error: Exception, context: str = "", show_traceback: bool = True) -> str:
    """
    Record a failure and build the line shown to the user.

    Args:
        error: The exception being handled
        context: What was being attempted
        show_traceback: Include the active traceback in the log entry

    Returns:
        ``"<context>: <message>"``, with the exception type added in verbose mode
    """
    error_type = type(error).__name__
    details = [
        f"{context or 'Unhandled error'}",
        f"{error_type}: {error}",
    ]
    if show_traceback:
        details.append(traceback.format_exc())
    log_to_file("\n".join(details), level="ERROR")

    summary = f"{error_type}: {error}" if get_settings().verbose_logging else str(error)
    _echo("\n".join(details))

    return f"{context}: {summary}" if context else summary


def log_debug(message: str, details: Optional[dict] = None) -> None:
    """Record a debug message with optional key/value details."""
    lines = [message]
    if details:
        lines.extend(f"  {key} = {value}" for key, value in details.items())
    text = "\n".join(lines)

    log_to_file(text, level="DEBUG")
    _echo(f"debug: {text}")


def log_info(message: str) -> None:
    log_to_file(message, level="INFO")
    _echo(f"info: {message}")
