"""Application services - use case implementations."""

from .console_service import ConsoleService, SendResult, SendStatus, SessionState
from .export_service import ExportResult, ExportService

__all__ = [
    "ConsoleService",
    "SendResult",
    "SendStatus",
    "SessionState",
    "ExportService",
    "ExportResult",
]
