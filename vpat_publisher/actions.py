"""Progress and failure reporting in the GitHub Actions workflow-command format."""
from __future__ import annotations

import sys
from typing import Optional, TextIO


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def info(message: str, *, stream: Optional[TextIO] = None) -> None:
    """Print an informational line to the job log."""

    print(message, file=stream or sys.stdout)


def set_failed(message: str, *, stream: Optional[TextIO] = None) -> int:
    """Report *message* as the step's failure and return the exit status to use."""

    print(f"::error::{_escape_data(message)}", file=stream or sys.stdout)
    return 1


__all__ = ["info", "set_failed"]
