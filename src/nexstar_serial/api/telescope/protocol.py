"""
NexStar Communication Protocol Implementation

This module implements the low-level NexStar protocol for communicating
with Celestron hand controllers over a byte transport.

Protocol Specification (NexStar hand controller, firmware 4.x):
- Serial: Baud Rate 9600, 8 data bits, no parity, 1 stop bit, no handshake
- TCP/IP: Default port 4030 (SkyPortal WiFi Adapter)
- Command: one ASCII opcode byte followed by binary payload, no separators
- Response: fixed number of data bytes followed by '#' (0x23)
- Turnaround: the controller may take up to 3.5 seconds to answer
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Literal

from nexstar_serial.api.core.exceptions import NotConnectedError, ResponseLengthError
from nexstar_serial.api.core.types import TelescopeConfig
from nexstar_serial.api.telescope.commands import Command
from nexstar_serial.api.telescope.transport import Transport, create_transport


__all__ = ["NexStarProtocol"]


logger = logging.getLogger(__name__)


class NexStarProtocol:
    """
    Low-level implementation of the NexStar communication protocol.

    This class handles:
    - Ownership of the transport (open/close)
    - Command transmission and terminator-framed response reception
    - Response length validation

    Exactly one command is in flight at a time. The wire protocol has no
    request identifiers, so callers sharing a client across threads must
    serialize access themselves.
    """

    # Protocol constants
    TERMINATOR = 0x23  # '#'

    def __init__(self, transport: Transport, trace: bool = False) -> None:
        """
        Initialize protocol handler.

        Args:
            transport: Byte transport, owned by this client from now on
            trace: Log every byte written and read at DEBUG level
        """
        self.transport = transport
        self.trace = trace

    @classmethod
    def from_config(cls, config: TelescopeConfig) -> NexStarProtocol:
        return cls(create_transport(config), trace=config.trace)

    def open(self) -> None:
        """
        Open the underlying transport.

        Raises:
            TelescopeConnectionError: If the transport cannot be opened
        """
        self.transport.open()

    def close(self) -> None:
        """Close the underlying transport. Safe to call more than once."""
        self.transport.close()

    def is_open(self) -> bool:
        return self.transport.is_open()

    def execute(self, command: Command) -> bytes:
        """
        Send a command and read its response.

        The opcode and payload are written in one write. Bytes are then read
        one at a time until '#'; the terminator is not part of the result.

        Args:
            command: Command to execute

        Returns:
            Response data bytes (empty for acknowledge-only commands)

        Raises:
            NotConnectedError: If the transport is not open
            TelescopeTimeoutError: If a write or read times out
            TelescopeConnectionError: If the transport fails
            ResponseLengthError: If the response length does not match
        """
        if not self.transport.is_open():
            raise NotConnectedError(f"Cannot send {command.opcode!r}: connection is not open") from None

        frame = command.frame()
        if self.trace:
            logger.debug(f"Writing {len(frame)} bytes: {frame.hex(' ')}")
        self.transport.write(frame)

        buffer = bytearray()
        while True:
            value = self.transport.read_byte()
            if self.trace:
                logger.debug(f"Read: {value}")
            if value == self.TERMINATOR:
                break
            buffer.append(value)

        if len(buffer) != command.response_length:
            raise ResponseLengthError(len(buffer), command.response_length)

        return bytes(buffer)

    def __enter__(self) -> NexStarProtocol:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False
