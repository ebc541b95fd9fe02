"""Core parameter types used by the quoter and the interpolator."""

from enum import Enum
from typing import Any, Final, Union

from sqlbind.exceptions import InvalidArgumentTypeError
from sqlbind.utils.type_guards import is_number_value

__all__ = (
    "NULL_LITERAL",
    "Parameter",
    "ParameterKind",
    "QuotedFragment",
    "ScanState",
)

NULL_LITERAL: Final[str] = "NULL"


class ParameterKind(str, Enum):
    """Closed set of parameter kinds, each with its own quoting rule."""

    NULL = "null"
    NUMBER = "number"
    OTHER = "other"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


class ScanState(Enum):
    """Lexical state of the statement scanner.

    Block comments are tracked separately as a nesting depth.
    """

    NORMAL = "normal"
    IN_SINGLE_QUOTED = "in_single_quoted"
    IN_DOUBLE_QUOTED = "in_double_quoted"
    IN_LINE_COMMENT = "in_line_comment"


class Parameter:
    """A bind value tagged with its kind."""

    __slots__ = ("kind", "value")

    def __init__(self, kind: ParameterKind, value: Any) -> None:
        if kind is ParameterKind.NUMBER and not is_number_value(value):
            msg = f"{value!r} cannot be rendered as a numeric literal"
            raise InvalidArgumentTypeError(msg, value)
        if kind is ParameterKind.NULL and value is not None:
            msg = f"NULL parameter cannot carry a value, got {value!r}"
            raise InvalidArgumentTypeError(msg, value)
        self.kind = kind
        self.value = value

    @classmethod
    def from_value(cls, value: Any) -> "Parameter":
        """Classify a raw value.

        ``None`` is NULL, finite ``int``/``float`` values (but not ``bool``) are
        NUMBER, everything else is OTHER. A value that is already a
        :class:`Parameter` is returned unchanged.

        Args:
            value: The raw bind value.

        Returns:
            The tagged parameter.
        """
        if isinstance(value, Parameter):
            return value
        if value is None:
            return cls(ParameterKind.NULL, None)
        if is_number_value(value):
            return cls(ParameterKind.NUMBER, value)
        return cls(ParameterKind.OTHER, value)

    @classmethod
    def null(cls) -> "Parameter":
        return cls(ParameterKind.NULL, None)

    @classmethod
    def number(cls, value: Union[int, float]) -> "Parameter":
        return cls(ParameterKind.NUMBER, value)

    @classmethod
    def other(cls, value: Any) -> "Parameter":
        return cls(ParameterKind.OTHER, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        try:
            value_hash = hash(self.value)
        except TypeError:
            value_hash = hash(repr(self.value))
        return hash((self.kind, value_hash))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, value={self.value!r})"


class QuotedFragment:
    """Immutable literal text rendered for one parameter."""

    __slots__ = ("length", "text")

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(text={self.text!r}, length={self.length!r})"
