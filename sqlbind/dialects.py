"""Default quoting capability backed by SQLGlot dialect generators.

The interpolator never escapes characters itself. When a driver does not supply
its own ``quote`` callable, :class:`SQLGlotQuoter` renders each value as a SQLGlot
string literal for the target dialect and hands back the escaped body.
"""

from typing import Any, Optional

from mypy_extensions import mypyc_attr
from sqlglot import exp
from sqlglot.dialects.dialect import Dialect

from sqlbind.exceptions import ImproperConfigurationError

__all__ = ("SQLGlotQuoter",)


@mypyc_attr(allow_interpreted_subclasses=True)
class SQLGlotQuoter:
    """Escape values for embedding inside single quotes in a given dialect."""

    __slots__ = ("_dialect", "dialect_name")

    def __init__(self, dialect: Optional[str] = None) -> None:
        try:
            self._dialect = Dialect.get_or_raise(dialect)
        except ValueError as e:
            msg = f"Unknown SQL dialect {dialect!r}"
            raise ImproperConfigurationError(msg) from e
        self.dialect_name = dialect

    def __call__(self, value: Any) -> str:
        return self.quote(value)

    def quote(self, value: Any) -> str:
        """Escape ``value`` for the configured dialect.

        Args:
            value: Any bind value. Text is used as-is, bytes are decoded as UTF-8,
                booleans become ``TRUE``/``FALSE`` and everything else goes through ``str()``.

        Raises:
            ImproperConfigurationError: If the dialect does not render plain single-quoted strings.

        Returns:
            The escaped text, without surrounding quotes.
        """
        rendered = exp.Literal.string(self._to_text(value)).sql(dialect=self._dialect)
        if len(rendered) < 2 or rendered[0] != "'" or rendered[-1] != "'":  # noqa: PLR2004
            msg = f"Dialect {self.dialect_name!r} renders string literals as {rendered!r}"
            raise ImproperConfigurationError(msg)
        return rendered[1:-1]

    @staticmethod
    def _to_text(value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8")
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        return str(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dialect={self.dialect_name!r})"
