"""
NexStar Command Registry

Each hand controller operation is one opcode byte, an optional payload and
a fixed number of data bytes expected before the '#' terminator:

    Operation            Opcode  Payload                      Response
    Get location         w       -                            8
    Set location         W       coordinate (8)               0
    Get time             h       -                            8
    Set time             H       timestamp + dst (8)          0
    Get version          V       -                            2
    Get device version   P       1 dev 254 0 0 0 2            2
    Get model            m       -                            1
    Is aligned           J       -                            1
    Is GOTO in progress  L       -                            1
    Echo                 K       byte                         1
    Cancel GOTO          M       -                            0
"""

from __future__ import annotations

from dataclasses import dataclass

import deal

from nexstar_serial.api.core.codecs import (
    COORDINATE_LENGTH,
    TIMESTAMP_LENGTH,
    VERSION_LENGTH,
    encode_coordinate,
    encode_timestamp,
)
from nexstar_serial.api.core.enums import Device
from nexstar_serial.api.core.types import Coordinate, Timestamp


__all__ = [
    "Command",
    "cancel_goto",
    "echo",
    "get_device_version",
    "get_location",
    "get_model",
    "get_time",
    "get_version",
    "is_aligned",
    "is_goto_in_progress",
    "set_location",
    "set_time",
]


# Passthrough framing for 'P': message length, destination, 254 = get
# firmware version, three unused argument bytes, reply length.
_PASSTHROUGH_LENGTH = 1
_PASSTHROUGH_GET_VERSION = 254


@dataclass(frozen=True)
class Command:
    """
    A single request/response exchange.

    Attributes:
        opcode: ASCII letter identifying the command
        payload: Bytes sent right after the opcode
        response_length: Data bytes expected before the '#' terminator
    """

    opcode: str
    payload: bytes = b""
    response_length: int = 0

    def __post_init__(self) -> None:
        if len(self.opcode) != 1 or not self.opcode.isascii() or not self.opcode.isalpha():
            raise ValueError(f"Opcode must be a single ASCII letter, got {self.opcode!r}")
        if self.response_length < 0:
            raise ValueError(f"Response length must be non-negative, got {self.response_length}")

    def frame(self) -> bytes:
        """Opcode followed by payload, no separators."""
        return self.opcode.encode("ascii") + self.payload


def get_location() -> Command:
    return Command("w", response_length=COORDINATE_LENGTH)


def set_location(coordinate: Coordinate) -> Command:
    return Command("W", encode_coordinate(coordinate))


def get_time() -> Command:
    return Command("h", response_length=TIMESTAMP_LENGTH)


def set_time(timestamp: Timestamp) -> Command:
    return Command("H", encode_timestamp(timestamp))


def get_version() -> Command:
    return Command("V", response_length=VERSION_LENGTH)


@deal.pre(lambda device: 0 <= int(device) <= 255, message="Device code must be a byte")
def get_device_version(device: Device | int) -> Command:
    payload = bytes([_PASSTHROUGH_LENGTH, int(device), _PASSTHROUGH_GET_VERSION, 0, 0, 0, VERSION_LENGTH])
    return Command("P", payload, VERSION_LENGTH)


def get_model() -> Command:
    return Command("m", response_length=1)


def is_aligned() -> Command:
    return Command("J", response_length=1)


def is_goto_in_progress() -> Command:
    return Command("L", response_length=1)


@deal.pre(lambda value: 0 <= value <= 255, message="Echo value must be a byte")
def echo(value: int) -> Command:
    return Command("K", bytes([value]), 1)


def cancel_goto() -> Command:
    return Command("M")
