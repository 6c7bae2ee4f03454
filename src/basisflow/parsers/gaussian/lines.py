from collections.abc import Iterator

from basisflow.exceptions import LineSourceError
from basisflow.parsers.gaussian.typing import DEFAULT_OPTIONS, LineSource, ParserOptions
from basisflow.utils import logger


class SignificantLineReader:
    """Pulls significant lines from a line source, one at a time.

    Blank lines and comment lines are skipped. A line starting with the end
    marker ends the current block: ``next_line()`` returns None for it, exactly
    as it does when the source runs out. ``exhausted`` tells the two apart.

    Leading whitespace is ignored for these checks, so an indented ``! note``
    is still a comment and an indented ``****`` still ends the block.

    Attributes:
        line_number: 1-based number of the last raw line read.
        exhausted: True once the underlying source has no more lines.
    """

    def __init__(self, source: LineSource, options: ParserOptions = DEFAULT_OPTIONS):
        self._iterator: Iterator[str] = iter(source)
        self._options = options
        self.line_number = 0
        self.exhausted = False

    def _next_raw(self) -> str | None:
        if self.exhausted:
            return None
        try:
            line = next(self._iterator)
        except StopIteration:
            self.exhausted = True
            return None
        except (OSError, ValueError) as e:
            raise LineSourceError(f"Failed to read from line source: {e}", self.line_number + 1) from e
        self.line_number += 1
        return line

    def next_line(self) -> str | None:
        """Return the next significant line, or None at an end marker or end of input."""
        while True:
            line = self._next_raw()
            if line is None:
                return None
            content = line.strip()
            if not content or content.startswith(self._options.comment_prefix):
                continue
            if content.startswith(self._options.end_marker):
                logger.debug(f"End marker found at line {self.line_number}.")
                return None
            return line
