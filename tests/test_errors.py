import errno
import os

from pipechain.errors import PipexError


def test_message_and_code_are_kept():
    error = PipexError("Error opening pipe", 2)
    assert error.message == "Error opening pipe"
    assert error.code == 2
    assert str(error) == "Error opening pipe"


def test_default_code_is_failure():
    assert PipexError("Error forking").code == 1


def test_os_error_cause_is_appended():
    error = PipexError("Error opening infile", 1)
    error.__cause__ = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT))
    assert str(error) == f"Error opening infile: {os.strerror(errno.ENOENT)}"


def test_non_os_cause_is_not_appended():
    error = PipexError("ft_split failed", 1)
    error.__cause__ = ValueError("other")
    assert str(error) == "ft_split failed"


def test_command_not_found_keeps_code_and_message():
    error = PipexError("command not found", 1)
    assert error.code == 1
    assert error.message == "command not found"
    assert str(error) == "command not found"