"""
Mount Commands

Commands for alignment and GOTO state.
"""

import typer
from click import Context
from typer.core import TyperGroup

from nexstar_serial.cli.utils.output import print_info, print_json, print_success, print_warning
from nexstar_serial.cli.utils.state import open_telescope


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Alignment and GOTO commands", cls=SortedCommandsGroup)


@app.command("aligned", rich_help_panel="Query")
def aligned(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Check whether the hand controller has been aligned.

    Example:
        nexstar mount aligned
    """
    with open_telescope(port) as telescope:
        result = telescope.is_aligned()

    if json_output:
        print_json({"aligned": result})
    elif result:
        print_success("Telescope is aligned")
    else:
        print_warning("Telescope is not aligned")


@app.command("goto-status", rich_help_panel="Query")
def goto_status(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Check whether a GOTO slew is in progress.

    Example:
        nexstar mount goto-status
    """
    with open_telescope(port) as telescope:
        result = telescope.is_goto_in_progress()

    if json_output:
        print_json({"goto_in_progress": result})
    elif result:
        print_info("GOTO in progress")
    else:
        print_info("No GOTO in progress")


@app.command("cancel", rich_help_panel="Control")
def cancel(
    port: str | None = typer.Option(None, "--port", "-p", help="Serial port"),
) -> None:
    """
    Cancel the GOTO slew in progress.

    Example:
        nexstar mount cancel
    """
    with open_telescope(port) as telescope:
        telescope.cancel_goto()

    print_success("GOTO canceled")
