"""Logging utilities."""

import traceback
from pathlib import Path

ERROR_LOG = Path.home() / "thumbgrab_error.log"


def log_error(msg: str, exc: Exception | None = None):
    """Append an error and its traceback to the error log file."""
    try:
        with open(ERROR_LOG, "a", encoding="utf-8") as f:
            f.write(f"{msg}\n")
            if exc:
                f.write("".join(traceback.format_exception(exc)))
            f.write("-" * 50 + "\n")
    except OSError:
        pass  # Can't log if logging fails
