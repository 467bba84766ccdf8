"""
Connection Commands

Commands for finding the hand controller and checking what is attached.
"""

import typer
from click import Context
from rich.table import Table
from typer.core import TyperGroup

from nexstar_serial.api.core.enums import Device
from nexstar_serial.cli.utils.output import (
    console,
    coordinate_to_dict,
    device_version_to_dict,
    model_name,
    print_device_versions,
    print_error,
    print_json,
    print_success,
    print_telescope_info,
    print_warning,
    timestamp_iso,
)
from nexstar_serial.cli.utils.state import available_ports, open_telescope


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Telescope connection commands", cls=SortedCommandsGroup)


@app.command(rich_help_panel="Connection")
def ports() -> None:
    """
    List serial ports that could host a hand controller.

    Example:
        nexstar connect ports
    """
    names = available_ports()
    if not names:
        print_warning("No serial port(s) found")
        return

    for index, name in enumerate(names):
        console.print(f"{index}. {name}")


@app.command(rich_help_panel="Testing")
def ping(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
) -> None:
    """
    Test the connection with the echo command.

    Example:
        nexstar connect ping --port /dev/ttyUSB0
    """
    with open_telescope(port) as telescope:
        alive = telescope.ping()
        target = telescope.target

    if alive:
        print_success(f"Ping succeeded on {target}")
    else:
        print_error(f"Ping failed on {target}")
        raise typer.Exit(code=1)


@app.command(rich_help_panel="Status")
def info(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    devices: bool = typer.Option(False, "--devices", "-d", help="Also query motor, GPS and RTC firmware"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Get hand controller information (model, firmware version).

    Example:
        nexstar connect info
        nexstar connect info --devices --json
    """
    with open_telescope(port) as telescope:
        controller = telescope.get_info()
        results = [telescope.query_device_version(device) for device in Device] if devices else []

    if json_output:
        print_json(
            {
                "model": model_name(controller),
                "model_code": controller.model.code,
                "version": str(controller.version),
                "devices": [device_version_to_dict(result) for result in results],
            }
        )
        return

    print_telescope_info(controller)
    if results:
        print_device_versions(results)


@app.command(rich_help_panel="Status")
def status(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Full status report: model, firmware, devices, time, location, alignment, GOTO.

    Example:
        nexstar connect status
    """
    with open_telescope(port) as telescope:
        controller = telescope.get_info()
        results = [telescope.query_device_version(device) for device in Device]
        timestamp = telescope.get_time()
        location = telescope.get_location()
        aligned = telescope.is_aligned()
        slewing = telescope.is_goto_in_progress()

    if json_output:
        print_json(
            {
                "model": model_name(controller),
                "version": str(controller.version),
                "devices": [device_version_to_dict(result) for result in results],
                "time": timestamp_iso(timestamp),
                "location": coordinate_to_dict(location),
                "aligned": aligned,
                "goto_in_progress": slewing,
            }
        )
        return

    print_telescope_info(controller)
    print_device_versions(results)

    table = Table(title="Status", show_header=True, header_style="bold magenta")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Date/Time", str(timestamp))
    table.add_row("Location (Decimal)", str(location))
    table.add_row("Location (DMS)", location.to_dms_string())
    table.add_row("Aligned", "Yes" if aligned else "No")
    table.add_row("GOTO in Progress", "Yes" if slewing else "No")
    console.print(table)
