"""
Reducer Module

Turns a stream of text lines into a single number.

The pipeline is lazy from end to end:

    lines -> clean_and_enumerate -> (index, text) pairs
          -> project             -> floats (stops at blank line / parse failure)
          -> fold                -> result

Nothing after a terminating line is ever read from the input.
"""

from typing import Iterable, Iterator, Tuple

from .config import Config
from .errors import EmptyInputError, InputReadError
from .line_types import Interpretation, LineKind
from .logging_config import get_logger
from .numeric import parse_number

logger = get_logger("reducer")


class LineReducer:
    """
    Applies the configured operation as a left fold over input lines.

    Responsible for cleaning user input:
    - the first `ignore` lines become the identity, whatever they contain
    - a blank line ends the input
    - a line that doesn't parse ends the input, or becomes the identity
      in silent mode
    """

    def __init__(self, config: Config):
        self.config = config

    @property
    def identity(self) -> float:
        return self.config.identity

    def clean_and_enumerate(self, lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
        """
        Trim each line and pair it with its zero-based index.

        Args:
            lines: Raw input lines (a text stream works)

        Yields:
            (index, trimmed_text)

        Raises:
            InputReadError: If reading from the input fails
        """
        iterator = iter(lines)
        index = 0
        while True:
            try:
                line = next(iterator)
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as e:
                # Not useful to continue after a broken read
                raise InputReadError(f"Failed to read line {index + 1}: {e}") from e
            yield index, line.strip()
            index += 1

    def interpret(self, index: int, text: str) -> Interpretation:
        """
        Handle a value and its index according to the configuration.

        Args:
            index: Zero-based line position
            text: Trimmed line content

        Returns:
            Exactly one Interpretation for the line
        """
        if index < self.config.ignore:
            logger.debug(f"Ignored value {text}")
            return Interpretation.skip(self.identity)

        if not text:
            logger.debug(f"Found empty at line number {index + 1}, exiting.")
            return Interpretation.stop()

        try:
            return Interpretation.number(parse_number(text))
        except ValueError as e:
            if self.config.silent:
                logger.warning(f"Ignoring parse error {e} for {text} at line {index + 1}")
                return Interpretation.skip(self.identity)
            logger.debug(str(e))
            return Interpretation.fail(f"Failed to parse {text} at line {index + 1}")

    def project(self, pairs: Iterable[Tuple[int, str]]) -> Iterator[float]:
        """
        Read each value into a float and continue until the stream terminates.

        Args:
            pairs: (index, text) pairs from clean_and_enumerate

        Yields:
            The number each line contributes to the fold
        """
        for index, text in pairs:
            result = self.interpret(index, text)
            if result.kind == LineKind.FAILURE:
                logger.error(result.error)
                return
            if result.terminates:
                return
            yield result.value

    def fold(self, values: Iterable[float]) -> float:
        """
        Fold values left to right with the configured operation.

        Args:
            values: Numbers in input order

        Returns:
            The folded result

        Raises:
            EmptyInputError: If there is no identity seed and no values
        """
        operation = self.config.operation
        iterator = iter(values)

        if self.config.identity_starting_point:
            result = self.identity
        else:
            try:
                result = next(iterator)
            except StopIteration:
                raise EmptyInputError(
                    f"No input values to {operation.value} "
                    f"(use --identity-starting-point to start from {self.identity:g})"
                ) from None

        for value in iterator:
            result = operation.apply(result, value)
        return result

    def run(self, lines: Iterable[str]) -> float:
        """
        Clean, interpret and fold an input stream.

        Args:
            lines: Raw input lines

        Returns:
            The folded result
        """
        cleaned = self.clean_and_enumerate(lines)
        values = self.project(cleaned)
        logger.info("Folding...")
        return self.fold(values)


def reduce_lines(config: Config, lines: Iterable[str]) -> float:
    """Run a fresh LineReducer over lines."""
    return LineReducer(config).run(lines)
