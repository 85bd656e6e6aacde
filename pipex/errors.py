"""Error type and reporting for the pipeline runner."""

from __future__ import annotations

import sys
from typing import TextIO

ERR_INPUT = "Error. Expected: ./pipex file1 cmd1 cmd2 file2"
ERR_126 = ": command not executable"
ERR_127 = ": command not found"

_COMMAND_CODES = (126, 127)


class PipexError(Exception):
    """A failure that ends the program with an exit status.

    A ``message`` of ``None`` means the failure comes from the system; the
    report then describes the underlying cause instead.
    """

    def __init__(self, message: str | None, code: int = 1) -> None:
        super().__init__(message if message is not None else "Error")
        self.message = message
        self.code = code


def _system_description(error: BaseException) -> str:
    cause = error.__cause__ or error.__context__
    if isinstance(cause, OSError) and cause.strerror:
        return f"Error: {cause.strerror}"
    if cause is not None and str(cause):
        return f"Error: {cause}"
    return "Error"


def report_error(error: PipexError, stream: TextIO | None = None) -> int:
    """Write the error to ``stream`` (stderr by default) and return the exit status."""
    out = sys.stderr if stream is None else stream
    if error.code in _COMMAND_CODES:
        out.write(f"{error.message or ''}\n")
        return error.code
    if error.message is None:
        out.write(f"{_system_description(error)}\n")
        return 1
    out.write(f"{error.message}\n")
    return error.code