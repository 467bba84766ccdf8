"""
CLI State Management

Holds the global connection options and opens short-lived connections for
each CLI command.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import typer
from rich.prompt import IntPrompt
from serial.tools import list_ports

from nexstar_serial.api.core.enums import ConnectionType
from nexstar_serial.api.core.exceptions import NexstarError
from nexstar_serial.api.core.types import TelescopeConfig
from nexstar_serial.api.telescope.telescope import NexStarTelescope
from nexstar_serial.cli.utils.output import console, print_error, print_info


_cli_state: dict[str, Any] = {
    "port": None,
    "connection_type": ConnectionType.SERIAL,
    "host": TelescopeConfig.host,
    "tcp_port": TelescopeConfig.tcp_port,
    "timeout": TelescopeConfig.timeout,
    "verbose": False,
    "trace": False,
}


def update_state(**options: Any) -> None:
    _cli_state.update(options)


def get_state() -> dict[str, Any]:
    return dict(_cli_state)


def available_ports() -> list[str]:
    """Serial port device names, sorted."""
    return sorted(port.device for port in list_ports.comports())


def select_port(ports: list[str]) -> str:
    """
    Pick a serial port: the only one if there is one, otherwise ask.

    Raises:
        typer.Exit: If no serial port is found
    """
    if not ports:
        print_error("No serial port(s) found")
        raise typer.Exit(code=1)

    if len(ports) == 1:
        return ports[0]

    console.print("[bold]Serial ports found:[/bold]")
    for index, name in enumerate(ports):
        console.print(f"  {index}. {name}")

    choice = IntPrompt.ask("Select a serial port", choices=[str(i) for i in range(len(ports))], console=console)
    return ports[choice]


def build_config(port: str | None = None) -> TelescopeConfig:
    """Build a TelescopeConfig from the global CLI options."""
    connection_type = ConnectionType(_cli_state["connection_type"])
    port = port or _cli_state["port"]

    if connection_type == ConnectionType.SERIAL and port is None:
        port = select_port(available_ports())

    return TelescopeConfig(
        port=port or TelescopeConfig.port,
        timeout=_cli_state["timeout"],
        connection_type=connection_type,
        host=_cli_state["host"],
        tcp_port=_cli_state["tcp_port"],
        verbose=_cli_state["verbose"],
        trace=_cli_state["trace"],
    )


@contextmanager
def open_telescope(port: str | None = None) -> Iterator[NexStarTelescope]:
    """
    Connect for the duration of one CLI command.

    Any NexstarError is reported and turned into exit code 1; the connection
    is closed on every path.
    """
    config = build_config(port)
    telescope = NexStarTelescope(config)

    if config.verbose:
        print_info(f"Connecting using {telescope.target}...")

    try:
        with console.status(f"[bold blue]Connecting to hand controller on {telescope.target}...", spinner="dots"):
            telescope.connect()
    except NexstarError as e:
        print_error(f"Failed to connect: {e}")
        raise typer.Exit(code=1) from e

    try:
        yield telescope
    except NexstarError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    finally:
        telescope.disconnect()
