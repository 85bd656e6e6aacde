"""Run ``cmd1 < file1 | cmd2 > file2`` from the command line."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from pipex.command import find_command, path_dirs
from pipex.errors import ERR_127, ERR_INPUT, PipexError, report_error
from pipex.strutil import split_words


@dataclass(frozen=True)
class Job:
    """The two commands, their files and the directories searched for them."""

    infile: str
    first: tuple[str, ...]
    second: tuple[str, ...]
    outfile: str
    paths: tuple[str, ...] = ()


def parse_input(argv: Sequence[str], env: Mapping[str, str]) -> Job:
    """Build a :class:`Job` from ``file1 cmd1 cmd2 file2``."""
    args = list(argv)
    if len(args) != 4:
        raise PipexError(ERR_INPUT, 1)
    infile, cmd1, cmd2, outfile = args
    return Job(
        infile=infile,
        first=tuple(split_words(cmd1, " ")),
        second=tuple(split_words(cmd2, " ")),
        outfile=outfile,
        paths=tuple(path_dirs(env)),
    )


def _spawn(
    argv: tuple[str, ...],
    paths: tuple[str, ...],
    stdin: object,
    stdout: object,
    env: dict[str, str] | None,
) -> subprocess.Popen:
    path = find_command(argv[0], paths)
    try:
        return subprocess.Popen(
            list(argv), executable=path, stdin=stdin, stdout=stdout, env=env
        )
    except OSError as exc:
        raise PipexError(None) from exc


def _start_first(
    job: Job, read_fd: int, write_fd: int, env: dict[str, str] | None
) -> subprocess.Popen:
    if not job.first:
        raise PipexError(ERR_127, 127)
    try:
        source = open(job.infile, "rb")
    except OSError as exc:
        raise PipexError(None) from exc
    with source:
        return _spawn(job.first, job.paths, source, write_fd, env)


def _start_second(
    job: Job, read_fd: int, write_fd: int, env: dict[str, str] | None
) -> subprocess.Popen:
    if not job.second:
        raise PipexError(ERR_127, 127)
    try:
        target = os.open(job.outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(None) from exc
    try:
        return _spawn(job.second, job.paths, read_fd, target, env)
    finally:
        os.close(target)


_Starter = Callable[[Job, int, int, "dict[str, str] | None"], subprocess.Popen]


def _launch(
    start: _Starter, job: Job, read_fd: int, write_fd: int, env: dict[str, str] | None
) -> subprocess.Popen | int:
    try:
        return start(job, read_fd, write_fd, env)
    except PipexError as err:
        return report_error(err)


def run_pipeline(job: Job, env: Mapping[str, str] | None = None) -> int:
    """Run both commands joined by a pipe; return the status of the second."""
    child_env = dict(env) if env is not None else None
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError(None) from exc
    try:
        first = _launch(_start_first, job, read_fd, write_fd, child_env)
        second = _launch(_start_second, job, read_fd, write_fd, child_env)
    finally:
        os.close(read_fd)
        os.close(write_fd)
    statuses = [
        child.wait() if isinstance(child, subprocess.Popen) else child
        for child in (first, second)
    ]
    last = statuses[-1]
    return last if last >= 0 else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        job = parse_input(args, os.environ)
        return run_pipeline(job, os.environ)
    except PipexError as err:
        return report_error(err)


if __name__ == "__main__":
    sys.exit(main())