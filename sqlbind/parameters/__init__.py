"""Parameter quoting and statement interpolation for SQLBind."""

from sqlbind.parameters.config import InterpolationConfig, QuoteFunction
from sqlbind.parameters.interpolator import OutputBuffer, StatementInterpolator, interpolate
from sqlbind.parameters.quoter import ParameterQuoter
from sqlbind.parameters.types import NULL_LITERAL, Parameter, ParameterKind, QuotedFragment, ScanState

__all__ = (
    "NULL_LITERAL",
    "InterpolationConfig",
    "OutputBuffer",
    "Parameter",
    "ParameterKind",
    "ParameterQuoter",
    "QuoteFunction",
    "QuotedFragment",
    "ScanState",
    "StatementInterpolator",
    "interpolate",
)
