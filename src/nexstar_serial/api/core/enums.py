"""
Common Enums

Enumerations used throughout the NexStar serial API.

Device and model identifiers travel over the wire as raw bytes. The
``from_code`` lookups never cast blindly: a byte that does not name a member
comes back as an explicit ``Unrecognized*`` value carrying the raw code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


__all__ = [
    "ConnectionType",
    "Device",
    "Model",
    "UnrecognizedDevice",
    "UnrecognizedModel",
]


class ConnectionType(StrEnum):
    """Transport used to reach the hand controller."""

    SERIAL = "serial"  # RS-232 / USB serial cable
    TCP = "tcp"  # SkyPortal WiFi adapter


@dataclass(frozen=True)
class UnrecognizedDevice:
    """A device byte code with no matching Device member."""

    code: int

    def __str__(self) -> str:
        return f"Unknown device ({self.code})"


@dataclass(frozen=True)
class UnrecognizedModel:
    """A model byte reported by the controller with no matching Model member."""

    code: int

    def __str__(self) -> str:
        return f"Unknown model ({self.code})"


class Device(IntEnum):
    """
    Sub-devices addressable through the hand controller's passthrough command.

    Not all devices are always physically present.
    """

    AZM_RA_MOTOR = 16  # Azimuth / Right Ascension motor
    ALT_DEC_MOTOR = 17  # Altitude / Declination motor
    GPS = 176
    RTC = 178  # Real-time clock

    @classmethod
    def from_code(cls, code: int) -> Device | UnrecognizedDevice:
        """Map a raw byte to a Device, or UnrecognizedDevice if unknown."""
        try:
            return cls(code)
        except ValueError:
            return UnrecognizedDevice(code)

    @property
    def code(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        return _DEVICE_LABELS[self]


class Model(IntEnum):
    """Mount/controller model identifiers returned by the 'm' command."""

    GPS = 1
    I_SERIES = 3
    I_SERIES_SE = 4
    CGE = 5
    ADVANCED_GT = 6
    SLT = 7
    CPC = 9
    GT = 10
    SE4 = 11  # NexStar 4/5 SE
    SE68 = 12  # NexStar 6/8 SE

    @classmethod
    def from_code(cls, code: int) -> Model | UnrecognizedModel:
        """Map a raw byte to a Model, or UnrecognizedModel if unknown."""
        try:
            return cls(code)
        except ValueError:
            return UnrecognizedModel(code)

    @property
    def code(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        return _MODEL_LABELS[self]


_DEVICE_LABELS: dict[Device, str] = {
    Device.AZM_RA_MOTOR: "AZM/RA Motor",
    Device.ALT_DEC_MOTOR: "ALT/DEC Motor",
    Device.GPS: "GPS",
    Device.RTC: "RTC",
}

_MODEL_LABELS: dict[Model, str] = {
    Model.GPS: "GPS Series",
    Model.I_SERIES: "i-Series",
    Model.I_SERIES_SE: "i-Series SE",
    Model.CGE: "CGE",
    Model.ADVANCED_GT: "Advanced GT",
    Model.SLT: "SLT",
    Model.CPC: "CPC",
    Model.GT: "GT",
    Model.SE4: "4/5 SE",
    Model.SE68: "6/8 SE",
}
