"""Abstract contracts shared by calculators and their histories."""

from abc import ABC, abstractmethod


class History(ABC):
    """An ordered, append-only log of operation descriptions.

    Any class providing ``add_entry`` and ``get_last_operations`` counts as a
    History for ``isinstance`` checks, whether or not it subclasses this one.
    """

    @classmethod
    def __subclasshook__(cls, C):
        if cls is History:
            if all(
                callable(getattr(C, name, None))
                for name in ("add_entry", "get_last_operations")
            ):
                return True
        return NotImplemented

    @abstractmethod
    def add_entry(self, description: str) -> None:
        """Append a description to the end of the log."""

    @abstractmethod
    def get_last_operations(self, count: int) -> list[str]:
        """Return the last ``count`` entries, oldest first.

        Asking for more entries than the log holds returns the whole log.
        """


class Calculator(ABC):
    """Integer arithmetic that records each call into a bound History."""

    @abstractmethod
    def add(self, a: int, b: int) -> int: ...

    @abstractmethod
    def subtract(self, a: int, b: int) -> int: ...

    @abstractmethod
    def multiply(self, a: int, b: int) -> int: ...

    @abstractmethod
    def divide(self, a: int, b: int) -> int: ...

    @abstractmethod
    def set_history(self, history: History) -> None:
        """Bind subsequent operations to ``history``."""
