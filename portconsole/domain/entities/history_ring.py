"""Command history entity."""

from collections import deque
from dataclasses import dataclass, field

from ..events import HistoryCursorChanged
from ..services.event_bus import EventBus
from ..values import DEFAULT_HISTORY_SIZE


@dataclass
class HistoryRing:
    """Bounded history of sent commands with a recall cursor.

    The first entries are the oldest. The cursor ranges over
    ``[0, len]``; ``len`` means "past the end", i.e. a new empty entry.
    """

    capacity: int = DEFAULT_HISTORY_SIZE
    events: EventBus = field(default_factory=EventBus)
    _entries: deque[str] = field(init=False, repr=False)
    _cursor: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("Capacity must be positive")
        self._entries = deque()

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def push(self, command: str) -> None:
        """Record a command and move the cursor past the end."""
        self._entries.append(command)
        while len(self._entries) > self.capacity:
            self._entries.popleft()

        self._cursor = len(self._entries)
        self._notify()

    def up(self) -> bool:
        """Move towards older commands. Returns True if the cursor moved."""
        if self._cursor <= 0:
            return False

        self._cursor -= 1
        self._notify()
        return True

    def down(self) -> bool:
        """Move towards newer commands. Returns True if the cursor moved."""
        if self._cursor >= len(self._entries) - 1:
            return False

        self._cursor += 1
        self._notify()
        return True

    def current(self) -> str:
        """Command under the cursor, or an empty string past the end."""
        if 0 <= self._cursor < len(self._entries):
            return self._entries[self._cursor]
        return ""

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = 0
        self._notify()

    def _notify(self) -> None:
        self.events.publish(HistoryCursorChanged(self._cursor))

    def __len__(self) -> int:
        return len(self._entries)
