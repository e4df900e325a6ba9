"""Locating commands and running them as a chain of connected processes."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping
from typing import IO, Any

from pipechain.config import PipelineConfig
from pipechain.errors import PipexError
from pipechain.strutil import split

__all__ = ["find_executable", "split_command", "run_pipeline"]


def find_executable(command: str | None, env: Mapping[str, str]) -> str | None:
    """Return the first executable ``<dir>/<command>`` along the search path.

    The search path is taken from the first ``NAME=value`` entry of *env*
    that contains ``PATH``, with its first five characters dropped.
    """
    if not command:
        return None
    entry = next((e for e in (f"{k}={v}" for k, v in env.items()) if "PATH" in e), None)
    if entry is None:
        return None
    for directory in split(entry[5:], ":"):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def split_command(word: str) -> list[str]:
    """Split a command word into its arguments on single spaces."""
    return split(word, " ")


def _report(error: PipexError) -> None:
    print(error, file=sys.stderr)


def _close(stream: Any) -> None:
    if hasattr(stream, "close"):
        stream.close()


def _open_source(config: PipelineConfig, heredoc_data: str | bytes | None) -> IO[bytes]:
    if config.here_doc:
        data = heredoc_data or b""
        if isinstance(data, str):
            data = data.encode("utf-8", "surrogateescape")
        buffer = tempfile.TemporaryFile()
        buffer.write(data)
        buffer.seek(0)
        return buffer
    try:
        return open(config.infile, "rb")
    except OSError as exc:
        raise PipexError("Error opening infile", 1) from exc


def _open_outfile(config: PipelineConfig) -> int:
    mode = os.O_APPEND if config.here_doc else os.O_TRUNC
    try:
        return os.open(config.outfile, os.O_WRONLY | os.O_CREAT | mode, 0o644)
    except OSError as exc:
        raise PipexError("Error opening outfile", 1) from exc


def _spawn(command: str, env: dict[str, str], stdin: Any, stdout: Any) -> subprocess.Popen:
    words = split_command(command)
    path = find_executable(words[0] if words else None, env)
    if path is None:
        error = PipexError("command not found", 1)
        error.__cause__ = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT))
        raise error
    try:
        return subprocess.Popen([path, *words[1:]], stdin=stdin, stdout=stdout, env=env)
    except OSError as exc:
        raise PipexError("Executing program failed", 1) from exc


def _exit_status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def run_pipeline(config: PipelineConfig, heredoc_data: str | bytes | None = None) -> int:
    """Run the configured commands connected by pipes.

    Input comes from the infile, or from *heredoc_data* in here-document
    mode; the last command writes to the outfile. A failing earlier stage
    is reported on standard error and its successor reads empty input.
    Returns the exit status of the last command, or raises
    :class:`PipexError` when the last stage cannot run.
    """
    env = dict(config.env)
    commands = config.commands()
    source_error: PipexError | None = None
    upstream: Any
    try:
        upstream = _open_source(config, heredoc_data)
    except PipexError as error:
        upstream = subprocess.DEVNULL
        source_error = error

    processes: list[subprocess.Popen] = []
    last_process: subprocess.Popen | None = None
    failure: PipexError | None = None
    for index, command in enumerate(commands):
        is_last = index == len(commands) - 1
        sink_fd: int | None = None
        process: subprocess.Popen | None = None
        try:
            if index == 0 and source_error is not None:
                raise source_error
            if is_last:
                sink_fd = _open_outfile(config)
            process = _spawn(command, env, upstream, sink_fd if is_last else subprocess.PIPE)
        except PipexError as error:
            if is_last:
                failure = error
            else:
                _report(error)
        finally:
            _close(upstream)
            if sink_fd is not None:
                os.close(sink_fd)
        if process is not None:
            processes.append(process)
            if is_last:
                last_process = process
        upstream = process.stdout if process is not None and not is_last else subprocess.DEVNULL

    for process in processes:
        process.wait()
    if failure is not None:
        raise failure
    assert last_process is not None
    return _exit_status(last_process.returncode)