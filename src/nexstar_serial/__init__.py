"""
Celestron NexStar Serial Protocol Client

A Python client for the binary command protocol spoken by Celestron NexStar
hand controllers and their motor, GPS and real-time clock sub-devices, over a
serial cable or the SkyPortal WiFi adapter.

Example:
    >>> from nexstar_serial import Coordinate, NexStarTelescope, TelescopeConfig
    >>> config = TelescopeConfig(port='/dev/ttyUSB0')
    >>> with NexStarTelescope(config) as telescope:
    ...     print(telescope.get_info())
    ...     telescope.set_location(Coordinate(1.267401, 103.8145683))
    ...     print(telescope.get_location().to_dms_string())
"""

# Enumerations
from nexstar_serial.api.core.enums import ConnectionType, Device, Model, UnrecognizedDevice, UnrecognizedModel

# Exceptions
from nexstar_serial.api.core.exceptions import (
    CommandError,
    NexstarError,
    NotConnectedError,
    ResponseLengthError,
    TelescopeConnectionError,
    TelescopeTimeoutError,
)

# Type definitions
from nexstar_serial.api.core.types import (
    Coordinate,
    DeviceAbsent,
    DevicePresent,
    DeviceQueryFailed,
    DeviceVersion,
    TelescopeConfig,
    TelescopeInfo,
    Timestamp,
    VersionInfo,
)

# Protocol client and facade
from nexstar_serial.api.telescope.protocol import NexStarProtocol
from nexstar_serial.api.telescope.telescope import NexStarTelescope


__version__ = "0.1.0"

__all__ = [
    "CommandError",
    "ConnectionType",
    "Coordinate",
    "Device",
    "DeviceAbsent",
    "DevicePresent",
    "DeviceQueryFailed",
    "DeviceVersion",
    "Model",
    # Exceptions
    "NexstarError",
    # Protocol client
    "NexStarProtocol",
    # Main telescope class
    "NexStarTelescope",
    "NotConnectedError",
    "ResponseLengthError",
    "TelescopeConfig",
    "TelescopeConnectionError",
    "TelescopeInfo",
    "TelescopeTimeoutError",
    "Timestamp",
    "UnrecognizedDevice",
    "UnrecognizedModel",
    "VersionInfo",
]
