"""Command-line layout of a pipeline and here-document input."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import IO, AnyStr

from pipechain.errors import PipexError
from pipechain.linereader import LineReader
from pipechain.strutil import strcmp, strncmp

__all__ = ["PipelineConfig", "is_heredoc", "matches_limiter", "read_heredoc"]

HEREDOC_WORD = "here_doc"


def is_heredoc(word: str) -> bool:
    """Tell whether *word* selects here-document input."""
    return strcmp(HEREDOC_WORD, word) == 0


@dataclass(frozen=True)
class PipelineConfig:
    """Arguments of one run: ``prog infile cmd1 ... cmdN outfile``.

    With here-document input the layout is
    ``prog here_doc LIMITER cmd1 ... cmdN outfile``.
    """

    argv: tuple[str, ...]
    env: Mapping[str, str]
    here_doc: bool = False

    @classmethod
    def from_argv(cls, argv: Sequence[str], env: Mapping[str, str]) -> PipelineConfig:
        """Build a configuration from a full argument vector, program name first."""
        args = tuple(argv)
        if len(args) < 5:
            raise PipexError("Wrong number of arguments", 1)
        here_doc = len(args) > 5 and is_heredoc(args[1])
        return cls(args, env, here_doc)

    @property
    def infile(self) -> str:
        return self.argv[1]

    @property
    def limiter(self) -> str:
        return self.argv[2]

    @property
    def outfile(self) -> str:
        return self.argv[-1]

    def commands(self) -> list[str]:
        """The command words, first to last."""
        return list(self.argv[2 + int(self.here_doc):-1])


def matches_limiter(limiter: str, line: str) -> bool:
    """Tell whether *line* (newline included) ends the here-document."""
    return (
        strncmp(limiter, line, len(line) - 1) == 0
        and strncmp(limiter, line, len(limiter)) == 0
    )


def read_heredoc(limiter: str, stream: IO[AnyStr] | int) -> AnyStr:
    """Collect lines from *stream* up to the limiter line, which is dropped.

    Raises :class:`PipexError` when the input ends before the limiter.
    """
    reader = LineReader(stream)
    parts = []
    while True:
        line = reader.read_line()
        if line is None:
            raise PipexError("Get_next_line error", 1)
        text = line if isinstance(line, str) else line.decode("utf-8", "surrogateescape")
        if matches_limiter(limiter, text):
            return line[:0].join(parts)
        parts.append(line)