"""Error type and coloured status messages."""

from __future__ import annotations

import sys
from typing import TextIO

RED = "\033[1;31m"
GREEN = "\033[1;32m"
RESET = "\033[0m"


class CubError(Exception):
    """Raised when a scene file or its resources cannot be used."""


def error_msg(message: str, stream: TextIO | None = None) -> None:
    """Write ``message`` in red under an ``Error`` heading."""
    out = stream if stream is not None else sys.stdout
    out.write(f"{RED}Error\n{message}\n\n{RESET}")


def success_msg(message: str, stream: TextIO | None = None) -> None:
    """Write ``message`` in green."""
    out = stream if stream is not None else sys.stdout
    out.write(f"{GREEN}\n{message}\n\n{RESET}")