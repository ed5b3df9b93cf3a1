"""
Line Types

The outcome of interpreting a single input line.

Every line the reducer reads turns into exactly one Interpretation:
- SKIP: the line contributes the identity value
- STOP: the stream ends here
- VALUE: the line parsed to a number
- FAILURE: the line could not be parsed and the stream ends here
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    """What a line means to the fold."""

    SKIP = "skip"
    STOP = "stop"
    VALUE = "value"
    FAILURE = "failure"


@dataclass(frozen=True)
class Interpretation:
    """
    Result of interpreting one line.

    SKIP and VALUE carry the number to feed to the fold,
    FAILURE carries the message to report.
    """
    kind: LineKind
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def terminates(self) -> bool:
        """True if no further lines should be read."""
        return self.kind in (LineKind.STOP, LineKind.FAILURE)

    @classmethod
    def skip(cls, identity: float) -> "Interpretation":
        """Line replaced by the identity value."""
        return cls(kind=LineKind.SKIP, value=identity)

    @classmethod
    def stop(cls) -> "Interpretation":
        """End of stream marker."""
        return cls(kind=LineKind.STOP)

    @classmethod
    def number(cls, value: float) -> "Interpretation":
        """Line parsed successfully."""
        return cls(kind=LineKind.VALUE, value=value)

    @classmethod
    def fail(cls, error: str) -> "Interpretation":
        """Line could not be parsed."""
        return cls(kind=LineKind.FAILURE, error=error)
