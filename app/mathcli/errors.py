"""
Errors Module

Exceptions for the conditions that end a run without a result.
Everything recoverable (ignored lines, silent parse failures, blank-line
termination) is handled inside the reducer and never raised.
"""


class MathCLIError(Exception):
    """Base exception for fatal mathcli errors."""

    exit_code: int = 1


class InputReadError(MathCLIError):
    """Raised when the input stream cannot be read."""

    # EX_IOERR from sysexits.h
    exit_code = 74


class EmptyInputError(MathCLIError):
    """Raised when a fold without an identity seed receives no values."""

    exit_code = 1
