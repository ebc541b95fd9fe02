from typing import Any, Optional

__all__ = (
    "ImproperConfigurationError",
    "InvalidArgumentTypeError",
    "InvalidQuoteResultError",
    "ParamCountMismatchError",
    "ParameterError",
    "SQLBindError",
)


class SQLBindError(Exception):
    """Base exception class from which all SQLBind exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLBindError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLBindError):
    """Improper Configuration error.

    Raised when an interpolation config or quoting capability cannot be built.
    """


class InvalidArgumentTypeError(SQLBindError, TypeError):
    """Raised when the statement is not text or the parameters are not an ordered sequence."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(detail=message)
        self.value = value


# -- SQL Parameter Errors --
class ParameterError(SQLBindError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class ParamCountMismatchError(ParameterError):
    """Raised when the number of placeholder markers differs from the number of parameters."""

    param_count: int
    marker_count: int

    def __init__(self, param_count: int, marker_count: int, sql: Optional[str] = None) -> None:
        super().__init__(f"Bind parameter mismatch ({param_count} for {marker_count})", sql)
        self.param_count = param_count
        self.marker_count = marker_count


class InvalidQuoteResultError(ParameterError):
    """Raised when the quoting capability returns something other than text."""

    position: int
    result: Any

    def __init__(self, position: int, result: Any) -> None:
        super().__init__(
            f"Quoting parameter at position {position} returned {type(result).__name__}, expected str"
        )
        self.position = position
        self.result = result
