"""Command-line entry points: ``infile cmd1 cmd2 outfile`` and the
multi-command variant that also accepts ``here_doc LIMITER``."""

from __future__ import annotations

import io
import os
import sys
from collections.abc import Sequence

from pipechain.config import PipelineConfig, read_heredoc
from pipechain.errors import PipexError
from pipechain.executor import run_pipeline

__all__ = ["main", "main_bonus"]


def _full_argv(argv: Sequence[str] | None) -> list[str]:
    program = sys.argv[0] if sys.argv and sys.argv[0] else "pipex"
    return [program, *(sys.argv[1:] if argv is None else argv)]


def _stdin_source():
    try:
        return sys.stdin.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation):
        return sys.stdin


def _fail(error: PipexError) -> int:
    print(error, file=sys.stderr)
    return error.code


def main(argv: Sequence[str] | None = None) -> int:
    """Run exactly two commands: ``infile cmd1 cmd2 outfile``."""
    args = _full_argv(argv)
    try:
        if len(args) != 5:
            raise PipexError("Wrong number of arguments", 1)
        config = PipelineConfig.from_argv(args, os.environ)
        return run_pipeline(config, None)
    except PipexError as error:
        return _fail(error)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Run any number of commands, with optional here-document input."""
    args = _full_argv(argv)
    try:
        config = PipelineConfig.from_argv(args, os.environ)
        data = None
        if config.here_doc:
            if len(args) < 6:
                raise PipexError("here_doc: wrong number of arguments", 1)
            data = read_heredoc(config.limiter, _stdin_source())
        return run_pipeline(config, data)
    except PipexError as error:
        return _fail(error)


if __name__ == "__main__":
    sys.exit(main())