"""Line buffer entity - the console scrollback."""

import re
from collections import deque
from dataclasses import dataclass, field

from ..events import BufferChanged, FragmentReceived, LineReceived
from ..services.event_bus import EventBus
from ..services.timestamps import Clock, SystemClock, format_timestamp
from ..values import DEFAULT_SCROLLBACK

# Either terminator closes the open line
_TERMINATOR_SPLIT = re.compile(r"([\r\n])")
_TERMINATORS = ("\r", "\n")


@dataclass
class LineBuffer:
    """Bounded, append-only sequence of lines.

    Only the last line is ever mutated; earlier lines are closed. Each
    line is kept as a list of fragments and joined on read. When the
    capacity is reached the oldest lines are evicted.
    """

    capacity: int = DEFAULT_SCROLLBACK
    clock: Clock = field(default_factory=SystemClock)
    events: EventBus = field(default_factory=EventBus)
    _lines: deque[list[str]] = field(init=False, repr=False)
    _timestamp_added: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("Capacity must be positive")
        self._lines = deque(maxlen=self.capacity)

    @property
    def lines(self) -> list[str]:
        """All lines, oldest first; the last one may still be open."""
        return ["".join(parts) for parts in self._lines]

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def last_line(self) -> str:
        """Text of the open line (empty when the buffer is empty)."""
        return "".join(self._lines[-1]) if self._lines else ""

    @property
    def timestamp_added(self) -> bool:
        """Whether the open line already carries its timestamp prefix."""
        return self._timestamp_added

    def append(self, text: str, with_timestamp: bool, fresh: bool = False) -> None:
        """Append text, splitting it into lines.

        Args:
            text: Decoded text; CR LF pairs count as a single break.
            with_timestamp: Prefix each newly started line with the time.
            fresh: Start the text on a line of its own. A non-empty open
                line is closed first, the text gets its own timestamp and
                the next append starts a new one too.
        """
        if not text:
            return

        data = text.replace("\r\n", "\n")
        timestamp = format_timestamp(self.clock.now()) if with_timestamp else ""

        if fresh:
            self._timestamp_added = False

        if not self._lines:
            self._lines.append([])

        current = self._lines[-1]
        closed: list[str] = []

        if fresh and current:
            closed.append("".join(current))
            current = []
            self._lines.append(current)

        for piece in _TERMINATOR_SPLIT.split(data):
            if not piece:
                continue

            if with_timestamp and not self._timestamp_added:
                current.append(timestamp)
                self._timestamp_added = True

            if piece in _TERMINATORS:
                closed.append("".join(current))
                current = []
                self._lines.append(current)
                self._timestamp_added = False
            else:
                current.append(piece)

        if fresh:
            self._timestamp_added = False

        for line in closed:
            self.events.publish(LineReceived(line))

        if not closed:
            self.events.publish(FragmentReceived(data))

        self.events.publish(BufferChanged())

    def clear(self) -> None:
        """Remove every line."""
        self._lines = deque(maxlen=self.capacity)
        self._timestamp_added = False
        self.events.publish(BufferChanged())

    def __len__(self) -> int:
        return len(self._lines)
