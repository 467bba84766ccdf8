"""
Type definitions for NexStar serial communication.

This module contains the value types exchanged with the hand controller
and the connection configuration used throughout the library.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

import serial

from nexstar_serial.api.core.enums import ConnectionType, Device, Model, UnrecognizedModel
from nexstar_serial.api.core.exceptions import NexstarError


__all__ = [
    "Coordinate",
    "DeviceAbsent",
    "DevicePresent",
    "DeviceQueryFailed",
    "DeviceVersion",
    "DmsAngle",
    "TelescopeConfig",
    "TelescopeInfo",
    "Timestamp",
    "VersionInfo",
]


@dataclass(frozen=True)
class DmsAngle:
    """
    One axis of a geographic position in degrees/minutes/seconds.

    Components are magnitudes; the sign lives in ``hemisphere``
    (0 = North/East, 1 = South/West).
    """

    degrees: int
    minutes: int
    seconds: int
    hemisphere: int

    @classmethod
    def from_decimal(cls, value: float) -> DmsAngle:
        """
        Split decimal degrees into DMS by truncation.

        Fractions below one unit are dropped at every step; nothing is
        rounded, so 0.9999 seconds becomes 0 seconds.
        """
        # Binary floating point: 10.1 splits as 10° 05' 59", not 10° 06' 00"
        magnitude = abs(value)
        degrees = math.trunc(magnitude)
        minutes = math.trunc(60 * (magnitude - degrees))
        seconds = math.trunc((3600 * (magnitude - degrees)) - (60 * minutes))
        return cls(degrees, minutes, seconds, 1 if value < 0 else 0)

    def to_decimal(self) -> float:
        value = self.degrees + self.minutes / 60 + self.seconds / 3600
        return -value if self.hemisphere == 1 else value

    def format(self, positive: str, negative: str) -> str:
        direction = negative if self.hemisphere == 1 else positive
        return f"{self.degrees}°{self.minutes:02d}'{self.seconds:02d}\"{direction}"


@dataclass(frozen=True)
class Coordinate:
    """
    Observer's geographic location on Earth.

    Attributes:
        latitude: Latitude in degrees (-90 to +90, positive=North, negative=South)
        longitude: Longitude in degrees (-180 to +180, positive=East, negative=West)
    """

    latitude: float
    longitude: float

    @property
    def latitude_dms(self) -> DmsAngle:
        return DmsAngle.from_decimal(self.latitude)

    @property
    def longitude_dms(self) -> DmsAngle:
        return DmsAngle.from_decimal(self.longitude)

    def to_dms_string(self) -> str:
        """
        Format as degrees/minutes/seconds.

        Example:
            >>> Coordinate(1.267401, 103.8145683).to_dms_string()
            '1°16\\'02"N 103°48\\'52"E'
        """
        return f"{self.latitude_dms.format('N', 'S')} {self.longitude_dms.format('E', 'W')}"

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Timestamp:
    """
    Date and time as kept by the hand controller.

    Attributes:
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        month: Month (1-12)
        day: Day (1-31)
        year: Year (2000-2255)
        utc_offset: Offset from UTC in whole hours (signed)
        daylight_saving: Daylight saving flag
    """

    hour: int
    minute: int
    second: int
    month: int
    day: int
    year: int
    utc_offset: int = 0
    daylight_saving: bool = False

    @classmethod
    def from_datetime(cls, value: datetime, daylight_saving: bool = False) -> Timestamp:
        """
        Build a Timestamp from a datetime.

        Aware datetimes keep their offset, truncated to whole hours. Naive
        datetimes are taken as UTC.
        """
        offset = value.utcoffset()
        hours = 0 if offset is None else math.trunc(offset.total_seconds() / 3600)
        return cls(
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            month=value.month,
            day=value.day,
            year=value.year,
            utc_offset=hours,
            daylight_saving=daylight_saving,
        )

    @classmethod
    def now(cls) -> Timestamp:
        return cls.from_datetime(datetime.now(UTC))

    def to_datetime(self) -> datetime:
        """Return an aware datetime using ``utc_offset`` as its fixed offset."""
        tz = timezone(timedelta(hours=self.utc_offset))
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second, tzinfo=tz)

    def __str__(self) -> str:
        return (
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d} {self.utc_offset:+03d}:00"
        )


@dataclass(frozen=True)
class VersionInfo:
    """Firmware version of the hand controller or a sub-device."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class TelescopeInfo:
    """
    Hand controller information.

    Attributes:
        model: Model reported by the controller (or UnrecognizedModel)
        version: Hand controller firmware version
    """

    model: Model | UnrecognizedModel
    version: VersionInfo

    def __str__(self) -> str:
        name = self.model.label if isinstance(self.model, Model) else str(self.model)
        return f"{name}, Firmware {self.version}"


@dataclass(frozen=True)
class DevicePresent:
    """The device answered with its firmware version."""

    device: Device
    version: VersionInfo


@dataclass(frozen=True)
class DeviceAbsent:
    """The device did not answer (timeout) or answered with a malformed reply."""

    device: Device
    reason: str


@dataclass(frozen=True)
class DeviceQueryFailed:
    """The transport itself failed while querying the device."""

    device: Device
    error: NexstarError


DeviceVersion = DevicePresent | DeviceAbsent | DeviceQueryFailed


@dataclass
class TelescopeConfig:
    """
    Configuration for the hand controller connection.

    Attributes:
        port: Serial port path (e.g., '/dev/ttyUSB0' on Linux, 'COM3' on Windows)
        baudrate: Communication speed (default 9600 for NexStar)
        parity: Parity (pyserial constant, default none)
        bytesize: Data bits (default 8)
        stopbits: Stop bits (default 1)
        timeout: Read/write timeout in seconds (controller turnaround is up to 3.5 s)
        connection_type: 'serial' or 'tcp'
        host: TCP/IP host address (SkyPortal WiFi Adapter default)
        tcp_port: TCP/IP port number
        verbose: Enable verbose logging
        trace: Log every byte written and read at DEBUG level
    """

    port: str = "/dev/ttyUSB0"
    baudrate: int = 9600
    parity: str = serial.PARITY_NONE
    bytesize: int = serial.EIGHTBITS
    stopbits: float = serial.STOPBITS_ONE
    timeout: float = 3.5
    connection_type: ConnectionType = ConnectionType.SERIAL
    host: str = "192.168.4.1"
    tcp_port: int = 4030
    verbose: bool = False
    trace: bool = False
