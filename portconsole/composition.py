"""Composition root - the ONLY place where dependencies are wired."""

import logging
from pathlib import Path

from portconsole.application.services import ConsoleService, ExportService
from portconsole.config import Config, SerialConfig, load_config
from portconsole.container import Container
from portconsole.domain import Clock, EventBus, TickScheduler, TransportPort
from portconsole.infrastructure.scheduling import AsyncioTickScheduler
from portconsole.infrastructure.transports import LoopbackTransport, SerialTransport

logger = logging.getLogger(__name__)


def create_transport(serial_config: SerialConfig) -> TransportPort:
    """Create the device transport.

    Without a configured port a loopback transport is used, which
    reflects everything sent back into the console.
    """
    if not serial_config.port:
        logger.info("No serial port configured, using loopback transport")
        return LoopbackTransport(echo_writes=True)

    return SerialTransport(
        port=serial_config.port,
        baudrate=serial_config.baudrate,
        write_timeout=serial_config.write_timeout,
    )


def create_container(
    config_path: Path | str = "portconsole.yaml",
    config: Config | None = None,
    transport: TransportPort | None = None,
    scheduler: TickScheduler | None = None,
    clock: Clock | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    This is the composition root - the single place where all
    dependencies are created and wired together.

    Args:
        config_path: Path to config file, used when ``config`` is None.
        config: Already loaded configuration.
        transport: Transport to use instead of the configured one.
        scheduler: Tick scheduler to use instead of the asyncio one.
        clock: Clock for line timestamps.

    Returns:
        Fully wired dependency container.
    """
    if config is None:
        config = load_config(config_path)

    if transport is None:
        transport = create_transport(config.serial)
    if scheduler is None:
        scheduler = AsyncioTickScheduler(config.tick.rate_hz)

    events = EventBus()
    export_service = ExportService()

    console_service = ConsoleService(
        transport=transport,
        settings=config.console.to_settings(),
        limits=config.buffers.to_limits(),
        events=events,
        clock=clock,
        scheduler=scheduler,
        export_service=export_service,
    )

    return Container(
        console_service=console_service,
        export_service=export_service,
        transport=transport,
        scheduler=scheduler,
        events=events,
        config=config,
    )
