"""
Operations Module

The four arithmetic operations mathcli can fold over its input.
Each operation knows its identity and how to combine two floats.
"""

import math
import operator
from enum import Enum
from typing import Callable, Dict


def true_divide(a: float, b: float) -> float:
    """
    Divide with IEEE-754 semantics.

    Python raises ZeroDivisionError for float division by zero; here
    it yields inf, -inf or nan the way the hardware would.
    """
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        # The sign of a zero divisor still counts: 1 / -0.0 == -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


class Operation(str, Enum):
    """
    The set of available sub commands. Standard mathematical operations.

    Values are the subcommand names used on the command line.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @property
    def identity(self) -> float:
        """Operand that leaves the result unchanged (0 or 1)."""
        return _IDENTITIES[self]

    @property
    def operator(self) -> Callable[[float, float], float]:
        """Two-argument function implementing this operation."""
        return _OPERATORS[self]

    def apply(self, a: float, b: float) -> float:
        """Combine an accumulator with the next value."""
        return self.operator(a, b)


_IDENTITIES: Dict[Operation, float] = {
    Operation.ADD: 0.0,
    Operation.SUB: 0.0,
    Operation.MUL: 1.0,
    Operation.DIV: 1.0,
}

_OPERATORS: Dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: operator.add,
    Operation.SUB: operator.sub,
    Operation.MUL: operator.mul,
    Operation.DIV: true_divide,
}
