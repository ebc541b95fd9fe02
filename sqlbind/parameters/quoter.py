"""Render bind values as SQL literal fragments."""

from collections.abc import Sequence
from typing import Any

from mypy_extensions import mypyc_attr

from sqlbind.exceptions import InvalidQuoteResultError
from sqlbind.parameters.config import QuoteFunction
from sqlbind.parameters.types import NULL_LITERAL, Parameter, ParameterKind, QuotedFragment

__all__ = ("ParameterQuoter",)

_NULL_FRAGMENT = QuotedFragment(NULL_LITERAL)


@mypyc_attr(allow_interpreted_subclasses=False)
class ParameterQuoter:
    """Quote one parameter at a time by kind.

    NULL and NUMBER are rendered directly. OTHER values go through the external
    quoting capability, whose result must already be escaped for embedding
    between single quotes.
    """

    __slots__ = ("_external_quote",)

    def __init__(self, external_quote: QuoteFunction) -> None:
        self._external_quote = external_quote

    def quote(self, value: Any, position: int = 0) -> QuotedFragment:
        """Render a single value.

        Args:
            value: A raw value or a tagged :class:`Parameter`
            position: Zero-based position of the value, reported on failure

        Raises:
            InvalidQuoteResultError: If the external quoting capability returns non-text.

        Returns:
            The quoted fragment.
        """
        param = Parameter.from_value(value)
        kind = param.kind
        if kind is ParameterKind.NULL:
            return _NULL_FRAGMENT
        if kind is ParameterKind.NUMBER:
            return QuotedFragment(self._format_number(param.value))
        quoted = self._external_quote(param.value)
        if not isinstance(quoted, str):
            raise InvalidQuoteResultError(position, quoted)
        return QuotedFragment(f"'{quoted}'")

    def quote_all(self, params: Sequence[Any]) -> tuple[list[QuotedFragment], int]:
        """Render every parameter in order.

        Returns:
            Tuple of (fragments, total fragment length)
        """
        fragments: list[QuotedFragment] = []
        total = 0
        for position, value in enumerate(params):
            fragment = self.quote(value, position)
            fragments.append(fragment)
            total += fragment.length
        return fragments, total

    @staticmethod
    def _format_number(value: Any) -> str:
        # builtin renderings; numpy scalars and IntEnum override __repr__
        if isinstance(value, float):
            return float.__repr__(value)
        return int.__repr__(value)
