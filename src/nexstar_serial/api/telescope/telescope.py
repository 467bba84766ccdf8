"""
Celestron NexStar Hand Controller API

Provides a high-level Python interface to the NexStar hand controller.

This module wraps the low-level NexStarProtocol: every method picks a command
from the registry, executes it and decodes the reply with the value codecs.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from types import TracebackType
from typing import Literal

import deal

from nexstar_serial.api.core import codecs
from nexstar_serial.api.core.enums import Device, Model, UnrecognizedModel
from nexstar_serial.api.core.exceptions import (
    NexstarError,
    ResponseLengthError,
    TelescopeConnectionError,
    TelescopeTimeoutError,
)
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
from nexstar_serial.api.telescope import commands
from nexstar_serial.api.telescope.protocol import NexStarProtocol


__all__ = ["NexStarTelescope"]


logger = logging.getLogger(__name__)

# 'J' answers with a raw 0/1 byte, 'L' with the ASCII digits '0'/'1'
ALIGNED = 1
GOTO_IN_PROGRESS = ord("1")
PING_VALUE = 1


class NexStarTelescope:
    """
    High-level interface to a Celestron NexStar hand controller.

    The instance owns one connection for its whole lifetime. Use it as a
    context manager so the port is released on every exit path.

    Example:
        >>> from nexstar_serial import NexStarTelescope, TelescopeConfig
        >>> with NexStarTelescope(TelescopeConfig(port='/dev/ttyUSB0')) as telescope:
        ...     print(telescope.get_location().to_dms_string())
        ...     print(telescope.get_time())
    """

    def __init__(self, config: TelescopeConfig | str | None = None, protocol: NexStarProtocol | None = None) -> None:
        """
        Initialize telescope interface.

        Args:
            config: TelescopeConfig object or port string.
                   If string, uses default configuration with specified port.
                   If None, uses default '/dev/ttyUSB0'
            protocol: Pre-built protocol client (defaults to one built from config)
        """
        # Handle different config input types
        if config is None:
            self.config = TelescopeConfig()
        elif isinstance(config, str):
            self.config = TelescopeConfig(port=config)
        else:
            self.config = config

        # Set up logging based on verbosity
        if self.config.verbose:
            logging.basicConfig(level=logging.DEBUG)

        self.protocol = protocol if protocol is not None else NexStarProtocol.from_config(self.config)

    @property
    def target(self) -> str:
        """Human-readable description of where this client connects."""
        if self.config.connection_type == "tcp":
            return f"{self.config.host}:{self.config.tcp_port}"
        return self.config.port

    # ========== Connection ==========

    @deal.raises(NexstarError)
    def connect(self) -> bool:
        """
        Open the connection and verify the controller answers a ping.

        The connection is closed again if the check fails.

        Returns:
            True if connection successful

        Raises:
            TelescopeConnectionError: If the port cannot be opened or ping fails
            TelescopeTimeoutError: If the controller does not answer
        """
        self.protocol.open()
        try:
            alive = self.ping()
        except BaseException:
            self.protocol.close()
            raise

        if not alive:
            logger.error("Echo test failed - hand controller not responding properly")
            self.protocol.close()
            raise TelescopeConnectionError("Echo test failed") from None

        logger.info(f"Successfully connected to hand controller on {self.target}")
        return True

    def disconnect(self) -> None:
        self.protocol.close()
        logger.info("Disconnected from hand controller")

    def is_connected(self) -> bool:
        return self.protocol.is_open()

    # ========== Location ==========

    def get_location(self) -> Coordinate:
        """
        Get observer location.

        Returns:
            Coordinate in signed decimal degrees (whole-second resolution)

        Example:
            >>> telescope.get_location()
            Coordinate(latitude=1.2672222222222222, longitude=103.81444444444445)
        """
        data = self.protocol.execute(commands.get_location())
        return codecs.decode_coordinate(data)

    @deal.pre(lambda self, coordinate: -90 <= coordinate.latitude <= 90, message="Latitude must be -90 to +90 degrees")
    @deal.pre(
        lambda self, coordinate: -180 <= coordinate.longitude <= 180,
        message="Longitude must be -180 to +180 degrees",
    )
    def set_location(self, coordinate: Coordinate) -> None:
        """
        Set observer location.

        Sub-second precision is truncated away by the wire format.

        Example:
            >>> telescope.set_location(Coordinate(1.267401, 103.8145683))
        """
        logger.info(f"Setting location to {coordinate.to_dms_string()}")
        self.protocol.execute(commands.set_location(coordinate))

    # ========== Time ==========

    def get_time(self) -> Timestamp:
        data = self.protocol.execute(commands.get_time())
        return codecs.decode_timestamp(data)

    def set_time(self, value: Timestamp | datetime, daylight_saving: bool | None = None) -> None:
        """
        Set date and time on the hand controller.

        Args:
            value: Timestamp, or datetime (aware ones keep their UTC offset)
            daylight_saving: Overrides the DST flag when given

        Example:
            >>> from datetime import UTC, datetime
            >>> telescope.set_time(datetime.now(UTC))
        """
        if isinstance(value, datetime):
            timestamp = Timestamp.from_datetime(value, daylight_saving=bool(daylight_saving))
        elif daylight_saving is not None:
            timestamp = dataclasses.replace(value, daylight_saving=daylight_saving)
        else:
            timestamp = value

        logger.info(f"Setting time to {timestamp}")
        self.protocol.execute(commands.set_time(timestamp))

    # ========== Versions & model ==========

    def get_version(self) -> VersionInfo:
        """Get the hand controller firmware version."""
        data = self.protocol.execute(commands.get_version())
        return codecs.decode_version(data)

    def get_device_version(self, device: Device) -> VersionInfo:
        """
        Get the firmware version of a device attached to the hand controller.

        Raises:
            TelescopeTimeoutError: If the device does not answer (often: not installed)
            ResponseLengthError: If the reply is malformed
        """
        data = self.protocol.execute(commands.get_device_version(device))
        return codecs.decode_version(data)

    def query_device_version(self, device: Device) -> DeviceVersion:
        """
        Get a device's firmware version without raising for missing hardware.

        A device that is not physically installed never answers (timeout) or,
        on some firmware, answers with an empty/short reply. Both are reported
        as DeviceAbsent. Transport failures come back as DeviceQueryFailed.

        Raises:
            NotConnectedError: If the connection is not open
        """
        try:
            return DevicePresent(device, self.get_device_version(device))
        except TelescopeTimeoutError as e:
            logger.warning(f"{device.label} did not answer, assuming not installed")
            return DeviceAbsent(device, str(e))
        except ResponseLengthError as e:
            logger.warning(f"{device.label} sent a malformed reply, assuming not installed")
            return DeviceAbsent(device, str(e))
        except TelescopeConnectionError as e:
            logger.error(f"Transport failed while querying {device.label}: {e}")
            return DeviceQueryFailed(device, e)

    def get_model(self) -> Model | UnrecognizedModel:
        data = self.protocol.execute(commands.get_model())
        return Model.from_code(data[0])

    def get_info(self) -> TelescopeInfo:
        """
        Get hand controller information (model and firmware version).

        Example:
            >>> print(telescope.get_info())
            6/8 SE, Firmware 4.21
        """
        version = self.get_version()
        model = self.get_model()
        return TelescopeInfo(model=model, version=version)

    # ========== Status ==========

    def is_aligned(self) -> bool:
        """True once an alignment has been completed on the hand controller."""
        return self.protocol.execute(commands.is_aligned())[0] == ALIGNED

    def is_goto_in_progress(self) -> bool:
        """True while a GOTO slew is running."""
        return self.protocol.execute(commands.is_goto_in_progress())[0] == GOTO_IN_PROGRESS

    def cancel_goto(self) -> None:
        logger.info("Canceling goto operation")
        self.protocol.execute(commands.cancel_goto())

    # ========== Echo ==========

    @deal.pre(lambda self, value: 0 <= value <= 255, message="Echo value must be a byte")
    def echo(self, value: int) -> int:
        """
        Send a byte and return what the controller echoes back.

        Example:
            >>> telescope.echo(ord('x'))
            120
        """
        return self.protocol.execute(commands.echo(value))[0]

    def ping(self) -> bool:
        """Check the connection is alive using the echo command."""
        return self.echo(PING_VALUE) == PING_VALUE

    def __enter__(self) -> NexStarTelescope:
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        """Context manager exit."""
        self.disconnect()
        return False
