"""Reporting an unrecoverable error and stopping the program."""

from __future__ import annotations

import sys
from typing import NoReturn, Optional, TextIO

__all__ = ["fatal", "EXIT_FAILURE"]

EXIT_FAILURE = 1


def fatal(message: str, stream: Optional[TextIO] = None) -> NoReturn:
    """Write ``Error: <message>`` and exit with a failure status."""
    out = sys.stdout if stream is None else stream
    out.write(f"Error: {message}\n")
    out.flush()
    raise SystemExit(EXIT_FAILURE)