"""
Time Commands

Commands for managing hand controller date and time.
"""

from datetime import UTC, datetime

import typer
from click import Context
from typer.core import TyperGroup

from nexstar_serial.api.core.types import Timestamp
from nexstar_serial.cli.utils.output import print_error, print_json, print_success, print_timestamp, timestamp_to_dict
from nexstar_serial.cli.utils.state import open_telescope


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Time and date commands", cls=SortedCommandsGroup)


@app.command("get", rich_help_panel="Query")
def get_time(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Get current date and time from the hand controller.

    Example:
        nexstar time get
        nexstar time get --json
    """
    with open_telescope(port) as telescope:
        timestamp = telescope.get_time()

    if json_output:
        print_json(timestamp_to_dict(timestamp))
    else:
        print_timestamp(timestamp)


@app.command("set", rich_help_panel="Configuration")
def set_time(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    hour: int = typer.Option(..., help="Hour (0-23)"),
    minute: int = typer.Option(..., help="Minute (0-59)"),
    second: int = typer.Option(..., help="Second (0-59)"),
    month: int = typer.Option(..., help="Month (1-12)"),
    day: int = typer.Option(..., help="Day (1-31)"),
    year: int = typer.Option(..., help="Year (2000-2255)"),
    utc_offset: int = typer.Option(0, "--utc-offset", help="Offset from UTC in hours (e.g., -5)"),
    dst: bool = typer.Option(False, "--dst", help="Daylight saving in effect"),
) -> None:
    """
    Set date and time on the hand controller.

    Example:
        nexstar time set --hour 14 --minute 30 --second 0 --month 6 --day 15 --year 2024 --utc-offset 8
        nexstar time set --hour 9 --minute 0 --second 0 --month 1 --day 2 --year 2025 --utc-offset -5
    """
    try:
        # Validates day against month and year
        datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        print_error(f"Invalid date/time: {e}")
        raise typer.Exit(code=1) from e
    if not 2000 <= year <= 2255:
        print_error("Year must be between 2000 and 2255")
        raise typer.Exit(code=1)
    if not -12 <= utc_offset <= 14:
        print_error("UTC offset must be between -12 and +14 hours")
        raise typer.Exit(code=1)

    timestamp = Timestamp(hour, minute, second, month, day, year, utc_offset, dst)
    with open_telescope(port) as telescope:
        telescope.set_time(timestamp)

    print_success(f"Time set to {timestamp}")


@app.command("sync", rich_help_panel="Configuration")
def sync_time(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    local: bool = typer.Option(False, "--local", help="Send local time and offset instead of UTC"),
    dst: bool = typer.Option(False, "--dst", help="Daylight saving in effect"),
) -> None:
    """
    Set the hand controller clock from this computer's clock.

    Example:
        nexstar time sync
        nexstar time sync --local --dst
    """
    now = datetime.now().astimezone() if local else datetime.now(UTC)
    timestamp = Timestamp.from_datetime(now, daylight_saving=dst)

    with open_telescope(port) as telescope:
        telescope.set_time(timestamp)
        current = telescope.get_time()

    print_success(f"Time set to {timestamp}")
    print_timestamp(current)
