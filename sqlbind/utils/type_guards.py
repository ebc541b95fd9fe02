"""Type guard functions for runtime type checking in SQLBind.

This module provides type-safe runtime checks that help the type checker
understand type narrowing, replacing defensive hasattr() and duck typing patterns.
"""

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

__all__ = (
    "is_number_value",
    "is_parameter_sequence",
)


def is_number_value(value: Any) -> "TypeGuard[Union[int, float]]":
    """Check if a value renders as an unquoted numeric literal.

    ``bool`` is excluded even though it subclasses ``int``, as are non-finite floats.

    Args:
        value: The value to check

    Returns:
        True if the value is a finite int or float, False otherwise
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_parameter_sequence(params: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if parameters are an ordered sequence (but not text or bytes).

    Args:
        params: The parameters to check

    Returns:
        True if the parameters are an ordered sequence, False otherwise
    """
    return isinstance(params, Sequence) and not isinstance(params, (str, bytes, bytearray))
