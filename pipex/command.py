"""Locating the executable for a command name."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from pipex.errors import ERR_126, ERR_127, PipexError
from pipex.strutil import split_words


def path_dirs(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in the ``PATH`` of ``env``."""
    value = env.get("PATH")
    if value is None:
        return []
    return split_words(value, ":")


def _is_executable(path: str) -> bool:
    return os.access(path, os.X_OK)


def find_command(name: str, paths: Sequence[str]) -> str:
    """Resolve ``name`` to something that can be executed.

    The name itself is tried first; then each directory in ``paths`` in order.
    Raises :class:`PipexError` with status 126 when a candidate exists but is
    not executable, and 127 when nothing is found.
    """
    if _is_executable(name):
        return name
    found_unexecutable = False
    for directory in paths:
        candidate = f"{directory}/{name}"
        if not os.access(candidate, os.F_OK):
            continue
        if _is_executable(candidate):
            return candidate
        found_unexecutable = True
    if found_unexecutable:
        raise PipexError(f"{name}{ERR_126}", 126)
    raise PipexError(f"{name}{ERR_127}", 127)