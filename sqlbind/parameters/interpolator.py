"""Positional ``?`` interpolation for drivers without native bind parameters.

The scanner makes one left-to-right pass over the statement. It tracks whether
it is inside a single-quoted string, a double-quoted identifier, a line comment
or a (possibly nested) block comment, and only substitutes markers found
outside all of them. ``\\?`` outside those contexts produces a literal ``?``.
"""

import logging
from collections.abc import Sequence
from typing import Any, Final, Optional

from mypy_extensions import mypyc_attr

from sqlbind.exceptions import InvalidArgumentTypeError, ParamCountMismatchError, SQLBindError
from sqlbind.parameters.config import InterpolationConfig, QuoteFunction
from sqlbind.parameters.quoter import ParameterQuoter
from sqlbind.parameters.types import QuotedFragment, ScanState
from sqlbind.utils.logging import get_logger, log_with_context
from sqlbind.utils.type_guards import is_parameter_sequence

__all__ = ("OutputBuffer", "StatementInterpolator", "interpolate")

logger = get_logger("sqlbind.parameters.interpolator")

PLACEHOLDER: Final[str] = "?"
ESCAPE: Final[str] = "\\"
LINE_TERMINATORS: Final = frozenset(("\r", "\n"))


class OutputBuffer:
    """Append-only text buffer with a fixed capacity, in characters."""

    __slots__ = ("_chunks", "capacity", "size")

    def __init__(self, capacity: int) -> None:
        self._chunks: list[str] = []
        self.capacity = capacity
        self.size = 0

    def write(self, text: str) -> None:
        size = self.size + len(text)
        if size > self.capacity:
            msg = f"Output buffer overflow: {size} characters exceed capacity {self.capacity}"
            raise SQLBindError(msg)
        self._chunks.append(text)
        self.size = size

    def getvalue(self) -> str:
        return "".join(self._chunks)


@mypyc_attr(allow_interpreted_subclasses=False)
class StatementInterpolator:
    """Replace ``?`` markers in a statement with quoted parameter literals."""

    __slots__ = ("_quoter", "config")

    def __init__(self, config: Optional[InterpolationConfig] = None) -> None:
        self.config = config or InterpolationConfig()
        self._quoter = ParameterQuoter(self.config.resolve_quote())

    def interpolate(self, sql: str, params: Sequence[Any]) -> str:
        """Interpolate ``params`` into ``sql``.

        Args:
            sql: SQL containing ``?`` markers
            params: Values for the markers, in order

        Raises:
            InvalidArgumentTypeError: If ``sql`` is not text or ``params`` is not an ordered sequence.
            InvalidQuoteResultError: If the quoting capability returns non-text.
            ParamCountMismatchError: If the marker count differs from the parameter count.

        Returns:
            The statement with every eligible marker replaced.
        """
        if not isinstance(sql, str):
            msg = f"SQL statement must be str, got {type(sql).__name__}"
            raise InvalidArgumentTypeError(msg, sql)
        if not is_parameter_sequence(params):
            msg = f"Parameters must be an ordered sequence, got {type(params).__name__}"
            raise InvalidArgumentTypeError(msg, params)

        fragments, fragments_length = self._quoter.quote_all(params)
        buffer = OutputBuffer(len(sql) + fragments_length)
        marker_count = self._scan(sql, fragments, buffer)

        if marker_count != len(fragments):
            logger.debug("Bind parameter mismatch: %d parameters, %d markers", len(fragments), marker_count)
            raise ParamCountMismatchError(len(fragments), marker_count, sql)

        log_with_context(
            logger, logging.DEBUG, "Interpolated statement", param_count=marker_count, output_length=buffer.size
        )
        return buffer.getvalue()

    @staticmethod
    def _scan(sql: str, fragments: "list[QuotedFragment]", buffer: OutputBuffer) -> int:
        """Copy ``sql`` into ``buffer``, substituting fragments at eligible markers.

        Returns:
            Number of markers seen outside quotes and comments.
        """
        state = ScanState.NORMAL
        block_depth = 0
        markers = 0
        param_count = len(fragments)
        length = len(sql)
        pos = 0

        while pos < length:
            char = sql[pos]
            next_char = sql[pos + 1] if pos + 1 < length else ""
            bare = state is ScanState.NORMAL and block_depth == 0

            if char == ESCAPE:
                if bare and next_char == PLACEHOLDER:
                    pos += 1
                    buffer.write(PLACEHOLDER)
                else:
                    buffer.write(char)

            elif char == PLACEHOLDER:
                if bare and markers < param_count:
                    buffer.write(fragments[markers].text)
                else:
                    buffer.write(char)
                if bare:
                    markers += 1

            elif char == "-" and next_char == "-" and bare:
                state = ScanState.IN_LINE_COMMENT
                pos += 1
                buffer.write("--")

            elif char in LINE_TERMINATORS:
                if state is ScanState.IN_LINE_COMMENT:
                    state = ScanState.NORMAL
                buffer.write(char)

            elif char == "/" and next_char == "*" and state is ScanState.NORMAL:
                block_depth += 1
                pos += 1
                buffer.write("/*")

            elif char == "*" and next_char == "/" and block_depth > 0:
                block_depth -= 1
                pos += 1
                buffer.write("*/")

            elif char == "'":
                if block_depth == 0 and state in {ScanState.NORMAL, ScanState.IN_SINGLE_QUOTED}:
                    state = ScanState.NORMAL if state is ScanState.IN_SINGLE_QUOTED else ScanState.IN_SINGLE_QUOTED
                buffer.write(char)

            elif char == '"':
                if block_depth == 0 and state in {ScanState.NORMAL, ScanState.IN_DOUBLE_QUOTED}:
                    state = ScanState.NORMAL if state is ScanState.IN_DOUBLE_QUOTED else ScanState.IN_DOUBLE_QUOTED
                buffer.write(char)

            else:
                buffer.write(char)

            pos += 1

        return markers


def interpolate(
    sql: str,
    params: Sequence[Any],
    quote: Optional[QuoteFunction] = None,
    dialect: Optional[str] = None,
) -> str:
    """Interpolate ``params`` into ``sql`` with a one-off interpolator.

    Args:
        sql: SQL containing ``?`` markers
        params: Values for the markers, in order
        quote: Quoting capability for non-numeric, non-null values
        dialect: SQLGlot dialect used when ``quote`` is not given

    Returns:
        The interpolated statement.
    """
    return StatementInterpolator(InterpolationConfig(external_quote=quote, dialect=dialect)).interpolate(sql, params)
