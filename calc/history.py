"""In-memory history of calculator operations."""

from calc.interfaces import History


class InMemoryHistory(History):
    """Keeps every entry in a list for the lifetime of the instance."""

    def __init__(self):
        self._entries: list[str] = []

    def add_entry(self, description: str) -> None:
        self._entries.append(description)

    def get_last_operations(self, count: int) -> list[str]:
        """Return the last ``count`` entries in insertion order.

        Raises ValueError if count is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return []
        return self._entries[-count:]

    def __len__(self) -> int:
        return len(self._entries)
