"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nexstar_serial.api.core.enums import Model
from nexstar_serial.api.core.types import (
    Coordinate,
    DeviceAbsent,
    DevicePresent,
    DeviceQueryFailed,
    DeviceVersion,
    TelescopeInfo,
    Timestamp,
)


# Create console with unicode detection
# If terminal doesn't support unicode properly, Rich will use ASCII alternatives
console = Console()

_use_unicode = console.is_terminal and not console.legacy_windows

_DEVICE_RESULT_STYLES: dict[type, str] = {DeviceAbsent: "yellow", DeviceQueryFailed: "red"}


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def model_name(info: TelescopeInfo) -> str:
    return info.model.label if isinstance(info.model, Model) else str(info.model)


def print_telescope_info(info: TelescopeInfo) -> None:
    """Print hand controller information in a panel."""
    info_text = Text()
    info_text.append("Model: ", style="bold cyan")
    info_text.append(f"{model_name(info)}\n", style="white")
    info_text.append("Firmware: ", style="bold cyan")
    info_text.append(str(info.version), style="white")

    panel = Panel.fit(info_text, title="[bold]Hand Controller[/bold]", border_style="green")
    console.print(panel)


def format_device_version(result: DeviceVersion) -> str:
    match result:
        case DevicePresent(version=version):
            return str(version)
        case DeviceAbsent():
            return "not installed"
        case DeviceQueryFailed(error=error):
            return f"error: {error}"
    raise TypeError(f"Unexpected device version result: {result!r}")


def device_version_to_dict(result: DeviceVersion) -> dict[str, Any]:
    data: dict[str, Any] = {"device": result.device.name}
    match result:
        case DevicePresent(version=version):
            data.update(installed=True, version=str(version))
        case DeviceAbsent(reason=reason):
            data.update(installed=False, reason=reason)
        case DeviceQueryFailed(error=error):
            data.update(installed=None, error=str(error))
    return data


def print_device_versions(results: list[DeviceVersion]) -> None:
    """Print firmware versions of attached devices in a table."""
    table = Table(title="Devices", show_header=True, header_style="bold magenta")
    table.add_column("Device", style="cyan")
    table.add_column("Firmware", style="green")

    for result in results:
        style = _DEVICE_RESULT_STYLES.get(type(result), "")
        table.add_row(result.device.label, Text(format_device_version(result), style=style))

    console.print(table)


def coordinate_to_dict(coordinate: Coordinate) -> dict[str, Any]:
    return {
        "latitude": coordinate.latitude,
        "longitude": coordinate.longitude,
        "dms": coordinate.to_dms_string(),
    }


def print_location(coordinate: Coordinate, dms: bool = False) -> None:
    """Print observer location in a table."""
    table = Table(title="Observer Location", show_header=True, header_style="bold magenta")
    table.add_column("Format", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Decimal", str(coordinate))
    if dms:
        table.add_row("DMS", coordinate.to_dms_string())

    console.print(table)


def timestamp_iso(timestamp: Timestamp) -> str | None:
    """ISO 8601 form, or None when the controller reports an impossible date or offset."""
    try:
        return timestamp.to_datetime().isoformat()
    except ValueError:
        return None


def timestamp_to_dict(timestamp: Timestamp) -> dict[str, Any]:
    return {
        "year": timestamp.year,
        "month": timestamp.month,
        "day": timestamp.day,
        "hour": timestamp.hour,
        "minute": timestamp.minute,
        "second": timestamp.second,
        "utc_offset": timestamp.utc_offset,
        "daylight_saving": timestamp.daylight_saving,
        "iso": timestamp_iso(timestamp),
    }


def print_timestamp(timestamp: Timestamp) -> None:
    """Print hand controller date and time in a table."""
    table = Table(title="Hand Controller Time", show_header=True, header_style="bold magenta")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Date", f"{timestamp.year}-{timestamp.month:02d}-{timestamp.day:02d}")
    table.add_row("Time", f"{timestamp.hour:02d}:{timestamp.minute:02d}:{timestamp.second:02d}")
    table.add_row("UTC Offset", f"{timestamp.utc_offset:+d} hours")
    table.add_row("Daylight Saving", "Yes" if timestamp.daylight_saving else "No")

    console.print(table)
