"""
NexStar Serial CLI - Main Application

This is the main entry point for the ``nexstar`` command-line interface.
"""

import logging

import typer
from click import Context
from dotenv import load_dotenv
from rich.console import Console
from typer.core import TyperGroup

from nexstar_serial.api.core.enums import ConnectionType
from nexstar_serial.api.core.types import TelescopeConfig
from nexstar_serial.cli.commands import connect, location, mount, time
from nexstar_serial.cli.utils.state import update_state


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="nexstar",
    help="Celestron NexStar Hand Controller CLI",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    port: str | None = typer.Option(
        None,
        "--port",
        "-p",
        help="Serial port for hand controller connection",
        envvar="NEXSTAR_PORT",
    ),
    connection_type: ConnectionType = typer.Option(
        ConnectionType.SERIAL,
        "--connection-type",
        "-c",
        help="Connection type",
        envvar="NEXSTAR_CONNECTION_TYPE",
    ),
    host: str = typer.Option(
        TelescopeConfig.host,
        "--host",
        help="SkyPortal WiFi adapter address (TCP connections)",
        envvar="NEXSTAR_HOST",
    ),
    tcp_port: int = typer.Option(
        TelescopeConfig.tcp_port,
        "--tcp-port",
        help="SkyPortal WiFi adapter port (TCP connections)",
        envvar="NEXSTAR_TCP_PORT",
    ),
    timeout: float = typer.Option(
        TelescopeConfig.timeout,
        "--timeout",
        "-t",
        help="Read/write timeout in seconds",
        envvar="NEXSTAR_TIMEOUT",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    trace: bool = typer.Option(
        False,
        "--trace",
        help="Log every byte sent to and received from the hand controller",
    ),
) -> None:
    """
    Celestron NexStar Hand Controller CLI

    Query and configure a NexStar hand controller from the command line.

    [bold green]Examples:[/bold green]

        nexstar connect ports
        nexstar --port /dev/ttyUSB0 connect status
        nexstar location set 1.267401,103.8145683
        nexstar time sync

    [bold blue]Environment Variables:[/bold blue]

        NEXSTAR_PORT            - Default serial port
        NEXSTAR_CONNECTION_TYPE - serial or tcp
        NEXSTAR_HOST            - SkyPortal WiFi adapter address
        NEXSTAR_TCP_PORT        - SkyPortal WiFi adapter port
        NEXSTAR_TIMEOUT         - Read/write timeout in seconds
    """
    update_state(
        port=port,
        connection_type=connection_type,
        host=host,
        tcp_port=tcp_port,
        timeout=timeout,
        verbose=verbose,
        trace=trace,
    )

    if verbose or trace:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")
        if port:
            console.print(f"[dim]Using port: {port}[/dim]")


# Register command groups
app.add_typer(
    connect.app,
    name="connect",
    help="Connection and device information commands",
    rich_help_panel="Hand Controller",
)
app.add_typer(
    mount.app,
    name="mount",
    help="Alignment and GOTO commands",
    rich_help_panel="Hand Controller",
)
app.add_typer(
    time.app,
    name="time",
    help="Date and time commands",
    rich_help_panel="Hand Controller",
)
app.add_typer(
    location.app,
    name="location",
    help="Observer location commands",
    rich_help_panel="Hand Controller",
)


def cli() -> None:
    """Console script entry point."""
    load_dotenv()
    app()


if __name__ == "__main__":
    cli()
