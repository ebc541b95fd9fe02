from sqlbind.exceptions import (
    ImproperConfigurationError,
    InvalidArgumentTypeError,
    InvalidQuoteResultError,
    ParamCountMismatchError,
    ParameterError,
    SQLBindError,
)


def test_exception_hierarchy() -> None:
    """Test exception classes inherit correctly."""
    assert issubclass(ParamCountMismatchError, ParameterError)
    assert issubclass(InvalidQuoteResultError, ParameterError)
    assert issubclass(ParameterError, SQLBindError)
    assert issubclass(ImproperConfigurationError, SQLBindError)
    assert issubclass(InvalidArgumentTypeError, SQLBindError)
    assert issubclass(InvalidArgumentTypeError, TypeError)


def test_exception_instantiation() -> None:
    exc = SQLBindError("Something failed")
    assert str(exc) == "Something failed"
    assert repr(exc) == "SQLBindError - Something failed"


def test_param_count_mismatch_context() -> None:
    exc = ParamCountMismatchError(1, 2, "SELECT ?, ?")

    assert exc.param_count == 1
    assert exc.marker_count == 2
    assert exc.sql == "SELECT ?, ?"
    assert str(exc) == "Bind parameter mismatch (1 for 2)\nSQL: SELECT ?, ?"


def test_param_count_mismatch_without_sql() -> None:
    assert str(ParamCountMismatchError(0, 1)) == "Bind parameter mismatch (0 for 1)"


def test_invalid_quote_result_context() -> None:
    exc = InvalidQuoteResultError(4, 12)

    assert exc.position == 4
    assert exc.result == 12
    assert "position 4" in str(exc)
    assert "int" in str(exc)


def test_invalid_argument_type_keeps_value() -> None:
    exc = InvalidArgumentTypeError("bad params", {"a": 1})

    assert exc.value == {"a": 1}
    assert str(exc) == "bad params"


def test_exception_chaining() -> None:
    """Test exceptions support chaining with 'from'."""
    try:
        try:
            raise ValueError("Original error")
        except ValueError as e:
            raise ImproperConfigurationError("Mapped error") from e
    except ImproperConfigurationError as exc:
        assert exc.__cause__ is not None
        assert isinstance(exc.__cause__, ValueError)
