"""
Location Commands

Commands for the observer location stored in the hand controller.
"""

import typer
from click import Context
from returns.result import Failure
from typer.core import TyperGroup

from nexstar_serial.api.core.codecs import parse_coordinate
from nexstar_serial.cli.utils.output import coordinate_to_dict, print_error, print_json, print_location, print_success
from nexstar_serial.cli.utils.state import open_telescope


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Observer location commands", cls=SortedCommandsGroup)


@app.command("get", rich_help_panel="Query")
def get_location(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    dms: bool = typer.Option(False, "--dms", help="Also show degrees/minutes/seconds"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Get the observer location from the hand controller.

    Example:
        nexstar location get --dms
    """
    with open_telescope(port) as telescope:
        coordinate = telescope.get_location()

    if json_output:
        print_json(coordinate_to_dict(coordinate))
    else:
        print_location(coordinate, dms=dms)


@app.command("set", rich_help_panel="Configuration")
def set_location(
    coordinate: str = typer.Argument(..., help="Latitude,longitude in decimal degrees (e.g., 1.267401,103.8145683)"),
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
) -> None:
    """
    Set the observer location. Positive is North/East, negative South/West.

    The hand controller stores whole seconds, so the stored value is
    truncated to 1" resolution.

    Example:
        nexstar location set 1.267401,103.8145683
        nexstar location set -- -33.8568,151.2153
    """
    result = parse_coordinate(coordinate)
    if isinstance(result, Failure):
        print_error(result.failure())
        raise typer.Exit(code=1)
    parsed = result.unwrap()

    with open_telescope(port) as telescope:
        telescope.set_location(parsed)

    print_success(f"Location set to {parsed.to_dms_string()}")
