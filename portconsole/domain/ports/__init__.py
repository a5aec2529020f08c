"""Domain ports - interfaces for infrastructure to implement."""

from .scheduler_port import TickScheduler
from .transport_port import DataHandler, TransportPort

__all__ = [
    "TransportPort",
    "DataHandler",
    "TickScheduler",
]
