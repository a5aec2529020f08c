"""Domain entities - objects with identity and lifecycle."""

from .history_ring import HistoryRing
from .line_buffer import LineBuffer

__all__ = [
    "LineBuffer",
    "HistoryRing",
]
