"""Buffer limits value object."""

from dataclasses import dataclass

# Default business rules
DEFAULT_SCROLLBACK = 10_000  # lines
DEFAULT_HISTORY_SIZE = 100  # commands


@dataclass(frozen=True, slots=True)
class BufferLimits:
    """Capacity of the scrollback and of the command history (value object)."""

    scrollback: int = DEFAULT_SCROLLBACK
    history_size: int = DEFAULT_HISTORY_SIZE

    def __post_init__(self) -> None:
        if self.scrollback <= 0:
            raise ValueError("Scrollback must be positive")
        if self.history_size <= 0:
            raise ValueError("History size must be positive")
