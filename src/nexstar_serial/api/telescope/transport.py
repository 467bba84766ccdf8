"""
Byte transports for the NexStar protocol.

The protocol client only needs four things from a transport: open, close,
a blocking write and a blocking single-byte read, both bounded by the
configured timeout. Two implementations are provided:

- SerialTransport: RS-232/USB serial cable via pyserial
- TcpTransport: SkyPortal WiFi adapter, which relays the same bytes over TCP
"""

from __future__ import annotations

import contextlib
import logging
import socket
import time
from typing import Protocol

import serial

from nexstar_serial.api.core.enums import ConnectionType
from nexstar_serial.api.core.exceptions import (
    NotConnectedError,
    TelescopeConnectionError,
    TelescopeTimeoutError,
)
from nexstar_serial.api.core.types import TelescopeConfig


__all__ = ["SerialTransport", "TcpTransport", "Transport", "create_transport"]


logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Byte stream consumed by NexStarProtocol."""

    def open(self) -> None: ...

    def close(self) -> None: ...

    def is_open(self) -> bool: ...

    def write(self, data: bytes) -> None: ...

    def read_byte(self) -> int: ...


class SerialTransport:
    """
    Serial port transport.

    Reads and writes both block for at most ``timeout`` seconds. No hardware
    or software flow control is used.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 9600,
        parity: str = serial.PARITY_NONE,
        bytesize: int = serial.EIGHTBITS,
        stopbits: float = serial.STOPBITS_ONE,
        timeout: float = 3.5,
    ) -> None:
        self.port = port
        self.baudrate = baudrate
        self.parity = parity
        self.bytesize = bytesize
        self.stopbits = stopbits
        self.timeout = timeout
        self.serial_conn: serial.Serial | None = None

    def open(self) -> None:
        """
        Open the serial port.

        Raises:
            TelescopeConnectionError: If the port cannot be opened
        """
        if self.is_open():
            return
        try:
            logger.debug(f"Opening serial connection to {self.port} at {self.baudrate} baud")
            self.serial_conn = serial.Serial(
                port=self.port,
                baudrate=self.baudrate,
                bytesize=self.bytesize,
                parity=self.parity,
                stopbits=self.stopbits,
                timeout=self.timeout,
                write_timeout=self.timeout,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
            )
            time.sleep(0.5)  # Allow connection to stabilize
            logger.info(f"Serial connection opened successfully on {self.port}")
        except (serial.SerialException, ValueError) as e:
            # pyserial raises ValueError for unsupported port settings
            logger.error(f"Failed to open serial port {self.port}: {e}")
            raise TelescopeConnectionError(f"Failed to open port {self.port}: {e}") from e

    def close(self) -> None:
        if self.serial_conn is not None and self.serial_conn.is_open:
            self.serial_conn.close()
            logger.info(f"Serial connection closed on {self.port}")
        self.serial_conn = None

    def is_open(self) -> bool:
        return self.serial_conn is not None and self.serial_conn.is_open

    def write(self, data: bytes) -> None:
        conn = self._require_open()
        try:
            # Drop anything left over from an abandoned exchange
            conn.reset_input_buffer()
            conn.write(data)
            conn.flush()
        except serial.SerialTimeoutException as e:
            raise TelescopeTimeoutError(f"Timeout writing {len(data)} bytes to {self.port}") from e
        except serial.SerialException as e:
            raise TelescopeConnectionError(f"Failed to write to {self.port}: {e}") from e

    def read_byte(self) -> int:
        conn = self._require_open()
        try:
            data = conn.read(1)
        except serial.SerialException as e:
            raise TelescopeConnectionError(f"Failed to read from {self.port}: {e}") from e
        if not data:
            raise TelescopeTimeoutError(f"Timeout waiting for response on {self.port}")
        return data[0]

    def _require_open(self) -> serial.Serial:
        if self.serial_conn is None or not self.serial_conn.is_open:
            raise NotConnectedError(f"Serial port {self.port} is not open")
        return self.serial_conn

    def __repr__(self) -> str:
        return f"SerialTransport(port={self.port!r}, baudrate={self.baudrate})"


class TcpTransport:
    """TCP/IP transport (e.g., via SkyPortal WiFi Adapter)."""

    def __init__(self, host: str = "192.168.4.1", port: int = 4030, timeout: float = 3.5) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.tcp_socket: socket.socket | None = None

    def open(self) -> None:
        """
        Connect to the adapter.

        Raises:
            TelescopeConnectionError: If the connection cannot be established
        """
        if self.is_open():
            return
        try:
            logger.debug(f"Opening TCP/IP connection to {self.host}:{self.port}")
            self.tcp_socket = socket.create_connection((self.host, self.port), timeout=self.timeout)
            time.sleep(0.2)  # Allow connection to stabilize
            logger.info(f"TCP/IP connection opened successfully to {self.host}:{self.port}")
        except OSError as e:
            logger.error(f"Failed to open TCP/IP connection to {self.host}:{self.port}: {e}")
            self.tcp_socket = None
            raise TelescopeConnectionError(f"Failed to connect to {self.host}:{self.port}: {e}") from e

    def close(self) -> None:
        if self.tcp_socket is not None:
            try:
                self.tcp_socket.close()
                logger.info(f"TCP/IP connection closed to {self.host}:{self.port}")
            except OSError as e:
                logger.warning(f"Error closing TCP/IP socket: {e}")
            self.tcp_socket = None

    def is_open(self) -> bool:
        return self.tcp_socket is not None

    def write(self, data: bytes) -> None:
        sock = self._require_open()
        try:
            sock.sendall(data)
        except TimeoutError as e:
            raise TelescopeTimeoutError(f"Timeout sending {len(data)} bytes to {self.host}:{self.port}") from e
        except OSError as e:
            logger.error(f"Error sending command over TCP/IP: {e}")
            raise TelescopeConnectionError(f"Failed to send command: {e}") from e

    def read_byte(self) -> int:
        sock = self._require_open()
        try:
            data = sock.recv(1)
        except TimeoutError as e:
            raise TelescopeTimeoutError(f"Timeout waiting for response from {self.host}:{self.port}") from e
        except OSError as e:
            logger.error(f"Error receiving response over TCP/IP: {e}")
            raise TelescopeConnectionError(f"Failed to receive response: {e}") from e
        if not data:
            with contextlib.suppress(OSError):
                sock.close()
            self.tcp_socket = None
            raise TelescopeConnectionError("Connection closed by remote host")
        return data[0]

    def _require_open(self) -> socket.socket:
        if self.tcp_socket is None:
            raise NotConnectedError(f"Not connected to {self.host}:{self.port}")
        return self.tcp_socket

    def __repr__(self) -> str:
        return f"TcpTransport(host={self.host!r}, port={self.port})"


def create_transport(config: TelescopeConfig) -> SerialTransport | TcpTransport:
    """Build the transport described by a TelescopeConfig (not yet opened)."""
    if config.connection_type == ConnectionType.TCP:
        return TcpTransport(host=config.host, port=config.tcp_port, timeout=config.timeout)
    return SerialTransport(
        port=config.port,
        baudrate=config.baudrate,
        parity=config.parity,
        bytesize=config.bytesize,
        stopbits=config.stopbits,
        timeout=config.timeout,
    )
