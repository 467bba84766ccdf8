"""
Value Codecs

Pure conversions between the structured values exchanged with the hand
controller and their fixed-width byte forms.

Wire layouts:
- Coordinate (8 bytes): latDeg latMin latSec latNS lonDeg lonMin lonSec lonEW
  (NS/EW: 0 = North/East, 1 = South/West)
- Timestamp (8 bytes): hour minute second month day year-2000 offset dst
  (offset: signed 8-bit two's complement, hours from UTC)
- VersionInfo (2 bytes): major minor

Decoders expect input of exactly the right length. The protocol layer
validates response lengths before any decoder runs, so a wrong length here
is a caller bug and is reported through a deal precondition.
"""

from __future__ import annotations

import deal
from returns.result import Failure, Result, Success

from nexstar_serial.api.core.types import Coordinate, DmsAngle, Timestamp, VersionInfo


__all__ = [
    "COORDINATE_LENGTH",
    "TIMESTAMP_LENGTH",
    "VERSION_LENGTH",
    "decode_coordinate",
    "decode_timestamp",
    "decode_utc_offset",
    "decode_version",
    "encode_coordinate",
    "encode_timestamp",
    "encode_utc_offset",
    "encode_version",
    "parse_coordinate",
]


COORDINATE_LENGTH = 8
TIMESTAMP_LENGTH = 8
VERSION_LENGTH = 2

YEAR_BASE = 2000


# ========== Coordinate ==========


@deal.pre(lambda data: len(data) == COORDINATE_LENGTH, message="Coordinate data must be 8 bytes")
def decode_coordinate(data: bytes) -> Coordinate:
    """
    Decode the 8-byte location reply into signed decimal degrees.

    Each axis is ``deg + min/60 + sec/3600``, negated when its hemisphere
    byte is 1.
    """
    latitude = DmsAngle(data[0], data[1], data[2], data[3]).to_decimal()
    longitude = DmsAngle(data[4], data[5], data[6], data[7]).to_decimal()
    return Coordinate(latitude=latitude, longitude=longitude)


@deal.pre(lambda coordinate: -90.0 <= coordinate.latitude <= 90.0, message="Latitude must be -90 to +90 degrees")
@deal.pre(
    lambda coordinate: -180.0 <= coordinate.longitude <= 180.0, message="Longitude must be -180 to +180 degrees"
)
@deal.post(lambda result: len(result) == COORDINATE_LENGTH)
def encode_coordinate(coordinate: Coordinate) -> bytes:
    """
    Encode a coordinate as 8 DMS bytes.

    Components are truncated, never rounded: 1.267401° N encodes as
    1° 16' 02" and decodes back to 1.2672222°.
    """
    lat = coordinate.latitude_dms
    lon = coordinate.longitude_dms
    return bytes(
        [
            lat.degrees,
            lat.minutes,
            lat.seconds,
            lat.hemisphere,
            lon.degrees,
            lon.minutes,
            lon.seconds,
            lon.hemisphere,
        ]
    )


def parse_coordinate(text: str) -> Result[Coordinate, str]:
    """
    Parse the decimal rendering ``"{lat},{lon}"`` back into a Coordinate.

    Args:
        text: Text such as "1.267401,103.8145683"

    Returns:
        Success with the Coordinate or Failure with an error message
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        return Failure(f"Invalid coordinate {text!r}: expected 'LAT,LON'")

    try:
        latitude = float(parts[0])
        longitude = float(parts[1])
    except ValueError as e:
        return Failure(f"Invalid coordinate {text!r}: {e}")

    if not -90.0 <= latitude <= 90.0:
        return Failure(f"Latitude {latitude} out of range (-90 to +90)")
    if not -180.0 <= longitude <= 180.0:
        return Failure(f"Longitude {longitude} out of range (-180 to +180)")

    return Success(Coordinate(latitude=latitude, longitude=longitude))


# ========== UTC offset ==========


@deal.pre(lambda hours: -128 <= hours <= 127, message="Offset must fit a signed byte")
@deal.post(lambda result: 0 <= result <= 255)
def encode_utc_offset(hours: int) -> int:
    """
    Encode a signed hour offset as a two's complement byte.

    Non-negative offsets are stored as-is; negative ones as ``256 + hours``
    (-5 -> 251).
    """
    return hours & 0xFF


@deal.pre(lambda value: 0 <= value <= 255, message="Offset byte must be 0-255")
def decode_utc_offset(value: int) -> int:
    """Interpret an offset byte as signed: values above 127 are negative."""
    return value - 256 if value > 127 else value


# ========== Timestamp ==========


@deal.pre(lambda data: len(data) == TIMESTAMP_LENGTH, message="Timestamp data must be 8 bytes")
def decode_timestamp(data: bytes) -> Timestamp:
    """Decode the 8-byte time reply."""
    return Timestamp(
        hour=data[0],
        minute=data[1],
        second=data[2],
        month=data[3],
        day=data[4],
        year=data[5] + YEAR_BASE,
        utc_offset=decode_utc_offset(data[6]),
        daylight_saving=data[7] != 0,
    )


@deal.pre(lambda timestamp: 0 <= timestamp.hour <= 23, message="Hour must be 0-23")
@deal.pre(lambda timestamp: 0 <= timestamp.minute <= 59, message="Minute must be 0-59")
@deal.pre(lambda timestamp: 0 <= timestamp.second <= 59, message="Second must be 0-59")
@deal.pre(lambda timestamp: 1 <= timestamp.month <= 12, message="Month must be 1-12")
@deal.pre(lambda timestamp: 1 <= timestamp.day <= 31, message="Day must be 1-31")
@deal.pre(lambda timestamp: YEAR_BASE <= timestamp.year <= YEAR_BASE + 255, message="Year must be 2000-2255")
@deal.post(lambda result: len(result) == TIMESTAMP_LENGTH)
def encode_timestamp(timestamp: Timestamp) -> bytes:
    """Encode a timestamp as 8 bytes, the last one being the DST flag."""
    return bytes(
        [
            timestamp.hour,
            timestamp.minute,
            timestamp.second,
            timestamp.month,
            timestamp.day,
            timestamp.year - YEAR_BASE,
            encode_utc_offset(timestamp.utc_offset),
            int(timestamp.daylight_saving),
        ]
    )


# ========== VersionInfo ==========


@deal.pre(lambda data: len(data) == VERSION_LENGTH, message="Version data must be 2 bytes")
def decode_version(data: bytes) -> VersionInfo:
    return VersionInfo(major=data[0], minor=data[1])


@deal.pre(lambda version: 0 <= version.major <= 255 and 0 <= version.minor <= 255)
def encode_version(version: VersionInfo) -> bytes:
    return bytes([version.major, version.minor])
