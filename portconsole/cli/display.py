"""Display utilities for the console output."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from portconsole import __version__
from portconsole.application.services import ExportResult, SendResult, SendStatus
from portconsole.domain import ConsoleSettings

# Force UTF-8 for Windows console
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

console = Console(highlight=False)

_SEND_STYLES = {
    SendStatus.SENT: "green",
    SendStatus.IGNORED: "dim",
    SendStatus.INVALID_INPUT: "yellow",
    SendStatus.WRITE_FAILED: "red",
}


def settings_table(target: str, settings: ConsoleSettings) -> Table:
    """Build the startup summary table."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Device", target)
    table.add_row("Display", settings.display_mode.label)
    table.add_row("Send as", settings.data_mode.label)
    table.add_row("Line ending", settings.line_ending.label)
    table.add_row("Timestamps", "on" if settings.show_timestamp else "off")
    table.add_row("Echo", "on" if settings.echo else "off")
    return table


def display_startup(target: str, settings: ConsoleSettings) -> None:
    """Print the startup banner."""
    console.print(f"[bold]portconsole[/bold] [dim]v{__version__}[/dim]")
    console.print(settings_table(target, settings))
    console.rule(style="dim")


def print_line(text: str) -> None:
    """Print one closed console line verbatim."""
    console.print(escape(text), soft_wrap=True)


def print_send_result(command: str, result: SendResult) -> None:
    style = _SEND_STYLES[result.status]
    message = f"[{style}]> {escape(command)}[/{style}]"
    if result.reason:
        message += f" [dim]({escape(result.reason)})[/dim]"
    console.print(message)


def print_export_result(result: ExportResult) -> None:
    if result.success:
        console.print(f"[green]Exported to {result.path}[/green]")
    else:
        console.print(f"[red]Export failed:[/red] {escape(result.reason or 'unknown error')}")
