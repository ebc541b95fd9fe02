"""Driver base class for databases without native bind parameters.

A concrete driver supplies :meth:`Driver.quote` and :meth:`Driver.execute`.
Statements executed through :meth:`Driver.interpolate` have their ``?`` markers
replaced with quoted literals, and :meth:`Driver.prepare` emulates prepared
statements on top of :meth:`Driver.execute`.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Optional

from sqlbind.exceptions import SQLBindError
from sqlbind.parameters.config import InterpolationConfig
from sqlbind.parameters.interpolator import StatementInterpolator
from sqlbind.utils.logging import get_logger

__all__ = ("Driver", "EmulatedStatementExecutor", "Statement")

logger = get_logger("sqlbind.driver")


class Driver(ABC):
    """Abstract driver that interpolates bind values itself."""

    __slots__ = ("_interpolator", "options")

    def __init__(self, options: Optional[dict[str, Any]] = None) -> None:
        """Initialize the driver.

        Args:
            options: Driver options. Copied, never mutated.
        """
        self.options: dict[str, Any] = dict(options or {})
        self._interpolator: Optional[StatementInterpolator] = None

    @abstractmethod
    def quote(self, value: Any) -> str:
        """Escape ``value`` for embedding between single quotes.

        The returned text must not include the surrounding quotes.
        """

    @abstractmethod
    def execute(self, sql: str, *bind_values: Any) -> Any:
        """Execute ``sql`` with ``bind_values`` against the database."""

    def interpolate(self, sql: str, params: Sequence[Any]) -> str:
        """Replace the ``?`` markers in ``sql`` with quoted ``params``.

        Values other than ``None``, ints and floats are passed through :meth:`quote`
        and wrapped in single quotes.

        Args:
            sql: SQL containing ``?`` markers
            params: Values for the markers, in order

        Returns:
            The SQL to be executed.
        """
        if self._interpolator is None:
            self._interpolator = StatementInterpolator(InterpolationConfig(external_quote=self.quote))
        return self._interpolator.interpolate(sql, params)

    def prepare(self, sql: str) -> "Statement":
        """Create an emulated prepared statement.

        Drivers with native prepared statements should override this.
        """
        return Statement(EmulatedStatementExecutor(self, sql))


class EmulatedStatementExecutor:
    """Fallback executor that sends every execution back through the driver."""

    __slots__ = ("command", "driver")

    def __init__(self, driver: Driver, command: str) -> None:
        self.driver = driver
        self.command = command

    def execute(self, *bind_values: Any) -> Any:
        return self.driver.execute(self.command, *bind_values)


class Statement:
    """A prepared statement wrapping an executor."""

    __slots__ = ("_executor",)

    def __init__(self, executor: Any) -> None:
        """Initialize the statement.

        Args:
            executor: Any object with a ``command`` attribute and an ``execute(*bind_values)`` method
        """
        self._executor = executor

    @property
    def command(self) -> str:
        return self._executor.command  # type: ignore[no-any-return]

    def execute(self, *bind_values: Any) -> Any:
        try:
            result = self._executor.execute(*bind_values)
        except SQLBindError as e:
            logger.error("%s", e)
            raise
        if bind_values:
            logger.debug("%s <Bind: %r>", self.command, list(bind_values))
        else:
            logger.debug("%s", self.command)
        return result
