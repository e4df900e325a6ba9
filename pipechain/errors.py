"""The error type raised when a pipeline cannot be set up or run."""

from __future__ import annotations

__all__ = ["PipexError"]


class PipexError(Exception):
    """A failure carrying the message to report and the exit status to use.

    When the error was caused by an :class:`OSError`, its description is
    appended to the message, in the style of ``perror``.
    """

    def __init__(self, message: str, code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        cause = self.__cause__
        if isinstance(cause, OSError) and cause.strerror:
            return f"{self.message}: {cause.strerror}"
        return self.message