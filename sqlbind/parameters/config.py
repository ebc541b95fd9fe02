"""Interpolation configuration for drivers."""

from typing import Any, Callable, Optional

from typing_extensions import TypeAlias

__all__ = ("InterpolationConfig", "QuoteFunction")

QuoteFunction: TypeAlias = Callable[[Any], Any]


class InterpolationConfig:
    """Declarative configuration for a driver's statement interpolation."""

    __slots__ = ("dialect", "external_quote")

    def __init__(self, external_quote: Optional[QuoteFunction] = None, dialect: Optional[str] = None) -> None:
        """Initialize interpolation configuration.

        Args:
            external_quote: Callable escaping a non-numeric, non-null value for use
                inside single quotes. Defaults to a SQLGlot quoter for ``dialect``.
            dialect: SQLGlot dialect name used when no ``external_quote`` is given
        """
        self.external_quote = external_quote
        self.dialect = dialect

    def resolve_quote(self) -> QuoteFunction:
        """Return the quoting capability, building the SQLGlot default when needed.

        Returns:
            The callable used to escape OTHER parameters.
        """
        if self.external_quote is not None:
            return self.external_quote
        from sqlbind.dialects import SQLGlotQuoter

        return SQLGlotQuoter(self.dialect)

    def replace(self, **kwargs: Any) -> "InterpolationConfig":
        """Create a copy with the given attributes replaced.

        Args:
            **kwargs: ``external_quote`` and/or ``dialect``

        Raises:
            TypeError: If an unknown attribute is given.

        Returns:
            A new configuration.
        """
        unknown = set(kwargs) - set(self.__slots__)
        if unknown:
            msg = f"Unknown configuration attributes: {', '.join(sorted(unknown))}"
            raise TypeError(msg)
        current = {name: getattr(self, name) for name in self.__slots__}
        current.update(kwargs)
        return type(self)(**current)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.external_quote == other.external_quote and self.dialect == other.dialect

    def __hash__(self) -> int:
        """Hash the quoting callable itself, so bound methods of one driver hash alike."""
        return hash((self.external_quote, self.dialect))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dialect={self.dialect!r}, external_quote={self.external_quote!r})"
