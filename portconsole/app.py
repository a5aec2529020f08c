"""Console application entry point."""

import argparse
import asyncio
import logging
import os
import sys
from contextlib import suppress

import yaml

from portconsole.cli import parse_args
from portconsole.cli.display import (
    console,
    display_startup,
    print_export_result,
    print_line,
    print_send_result,
)
from portconsole.composition import create_container
from portconsole.config import Config, load_config, parse_mode
from portconsole.container import Container
from portconsole.domain import DataMode, DisplayMode, LineEnding, LineReceived
from portconsole.infrastructure.transports import SerialTransport
from portconsole.logging_setup import setup_logging_from_env

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PORTCONSOLE_CONFIG_PATH"
SERIAL_POLL_INTERVAL = 0.008  # ~120Hz


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return a copy of ``config`` with command line options applied."""
    console_update: dict = {}
    if args.display_mode:
        console_update["display_mode"] = parse_mode(DisplayMode, args.display_mode)
    if args.data_mode:
        console_update["data_mode"] = parse_mode(DataMode, args.data_mode)
    if args.line_ending:
        console_update["line_ending"] = parse_mode(LineEnding, args.line_ending)
    if args.no_timestamp:
        console_update["show_timestamp"] = False
    if args.echo:
        console_update["echo"] = True

    serial_update: dict = {}
    if args.port:
        serial_update["port"] = args.port
    if args.baudrate:
        serial_update["baudrate"] = args.baudrate

    return config.model_copy(
        update={
            "console": config.console.model_copy(update=console_update),
            "serial": config.serial.model_copy(update=serial_update),
        }
    )


async def _poll_serial(transport: SerialTransport) -> None:
    """Deliver inbound serial data until the port closes."""
    while transport.is_connected():
        transport.poll()
        await asyncio.sleep(SERIAL_POLL_INTERVAL)
    logger.warning("Serial port closed: %s", transport.error_string() or "disconnected")


async def run_console(container: Container, commands: list[str], duration: float | None) -> None:
    """Run the console until the duration elapses or the task is cancelled."""
    service = container.console_service
    transport = container.transport

    service.events.subscribe(LineReceived, lambda event: print_line(event.text))

    poll_task = None
    if isinstance(transport, SerialTransport):
        if not transport.open():
            console.print(f"[red]Cannot open {transport.port}:[/red] {transport.error_string()}")
            return
        poll_task = asyncio.create_task(_poll_serial(transport))

    service.start()
    try:
        for command in commands:
            print_send_result(command, service.send(command))

        if duration is not None:
            await asyncio.sleep(duration)
        elif poll_task is not None:
            await poll_task
    finally:
        if poll_task is not None:
            poll_task.cancel()
            with suppress(asyncio.CancelledError):
                await poll_task
        service.stop()
        if isinstance(transport, SerialTransport):
            transport.close()

    # The open last line is never announced as a closed line
    lines = service.lines
    if lines and lines[-1]:
        print_line(lines[-1])


def main() -> None:
    """Main entry point."""
    args = parse_args()
    setup_logging_from_env(args.verbose)

    config_path = args.config or os.environ.get(CONFIG_PATH_ENV, "portconsole.yaml")
    try:
        config = apply_overrides(load_config(config_path), args)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        sys.exit(2)

    container = create_container(config=config)
    display_startup(config.serial.port or "loopback", container.console_service.settings)

    try:
        asyncio.run(run_console(container, args.send, args.duration))
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")

    if args.export:
        print_export_result(container.console_service.export(args.export))


if __name__ == "__main__":
    main()
