"""SQLBind: client-side interpolation of positional bind parameters."""

from sqlbind import dialects, driver, exceptions, parameters, utils
from sqlbind.__metadata__ import __version__
from sqlbind.dialects import SQLGlotQuoter
from sqlbind.driver import Driver, EmulatedStatementExecutor, Statement
from sqlbind.exceptions import (
    ImproperConfigurationError,
    InvalidArgumentTypeError,
    InvalidQuoteResultError,
    ParamCountMismatchError,
    ParameterError,
    SQLBindError,
)
from sqlbind.parameters import (
    InterpolationConfig,
    Parameter,
    ParameterKind,
    ParameterQuoter,
    QuotedFragment,
    StatementInterpolator,
    interpolate,
)

__all__ = (
    "Driver",
    "EmulatedStatementExecutor",
    "ImproperConfigurationError",
    "InterpolationConfig",
    "InvalidArgumentTypeError",
    "InvalidQuoteResultError",
    "ParamCountMismatchError",
    "Parameter",
    "ParameterError",
    "ParameterKind",
    "ParameterQuoter",
    "QuotedFragment",
    "SQLBindError",
    "SQLGlotQuoter",
    "Statement",
    "StatementInterpolator",
    "__version__",
    "dialects",
    "driver",
    "exceptions",
    "interpolate",
    "parameters",
    "utils",
)
