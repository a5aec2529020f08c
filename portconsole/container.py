"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from portconsole.application.services import ConsoleService, ExportService
from portconsole.config import Config
from portconsole.domain import EventBus, TickScheduler, TransportPort


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    Built once by the composition root and passed to every consumer
    (CLI, UI, transport layer) instead of a global console instance.
    """

    # Services
    console_service: ConsoleService
    export_service: ExportService

    # Infrastructure
    transport: TransportPort
    scheduler: TickScheduler
    events: EventBus

    # Configuration
    config: Config
