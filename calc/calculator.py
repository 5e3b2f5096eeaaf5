"""Calculator that records a description of every operation it performs."""

import logging

from calc.interfaces import Calculator, History
from calc.operations import add, divide, multiply, subtract

logger = logging.getLogger(__name__)


def format_entry(a: int, symbol: str, b: int, result: int) -> str:
    """Render one history entry, e.g. ``"7 / 2 = 3"``."""
    return f"{a} {symbol} {b} = {result}"


def _check_history(history):
    if not isinstance(history, History):
        raise TypeError(
            f"history must be a History, got {type(history).__name__}"
        )
    return history


class SimpleCalculator(Calculator):
    """A calculator that delegates to the operation functions and logs to a History.

    The history is held by reference: it is neither copied nor owned, and
    ``set_history`` only changes which history later operations write to.
    """

    def __init__(self, history: History):
        self._history = _check_history(history)

    @property
    def history(self) -> History:
        return self._history

    def add(self, a: int, b: int) -> int:
        return self._record(a, "+", b, add(a, b))

    def subtract(self, a: int, b: int) -> int:
        return self._record(a, "-", b, subtract(a, b))

    def multiply(self, a: int, b: int) -> int:
        return self._record(a, "*", b, multiply(a, b))

    def divide(self, a: int, b: int) -> int:
        try:
            result = divide(a, b)
        except ZeroDivisionError:
            logger.warning("Division of %d by zero", a)
            raise
        return self._record(a, "/", b, result)

    def set_history(self, history: History) -> None:
        _check_history(history)
        logger.info(
            "Rebinding history from %s to %s",
            type(self._history).__name__,
            type(history).__name__,
        )
        self._history = history

    def _record(self, a: int, symbol: str, b: int, result: int) -> int:
        entry = format_entry(a, symbol, b, result)
        logger.debug("Recording %r", entry)
        self._history.add_entry(entry)
        return result
