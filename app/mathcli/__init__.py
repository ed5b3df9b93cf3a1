"""
mathcli - Fold an arithmetic operation over numbers read from stdin

This package contains:
- reducer: line cleaning, interpretation and the fold
- operations: add, sub, mul, div and their identities
- numeric: float parsing and result formatting
- config: configuration loading
- cli: the command-line interface
"""

__version__ = "0.1.0"

from .config import Config, load_config
from .errors import EmptyInputError, InputReadError, MathCLIError
from .operations import Operation
from .reducer import LineReducer, reduce_lines

__all__ = [
    "Config",
    "load_config",
    "Operation",
    "LineReducer",
    "reduce_lines",
    "MathCLIError",
    "InputReadError",
    "EmptyInputError",
]
