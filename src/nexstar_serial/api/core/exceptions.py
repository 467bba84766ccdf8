"""
Custom exception classes for NexStar serial communication.

This module defines specific exceptions for the different ways a
command/response exchange with the hand controller can fail.
"""

from __future__ import annotations


__all__ = [
    "CommandError",
    "NexstarError",
    "NotConnectedError",
    "ResponseLengthError",
    "TelescopeConnectionError",
    "TelescopeTimeoutError",
]


class NexstarError(Exception):
    """
    Base exception for all NexStar protocol errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all telescope-related errors.
    """

    pass


class TelescopeConnectionError(NexstarError):
    """
    Raised when the transport cannot be opened or fails mid-exchange.

    This can occur when:
    - Serial port cannot be opened
    - Port does not exist or is in use by another application
    - USB cable is disconnected during a command
    - TCP/IP adapter closes the connection
    """

    pass


class TelescopeTimeoutError(NexstarError):
    """
    Raised when a write or read does not complete within the timeout.

    The exchange is abandoned and no partial response is returned. This
    usually means:
    - Hand controller is not powered on
    - Communication cable is faulty
    - The addressed sub-device is not installed
    """

    pass


class NotConnectedError(NexstarError):
    """
    Raised when attempting to send commands while not connected.

    This occurs when trying to talk to the hand controller before calling
    open()/connect() or after close()/disconnect().
    """

    pass


class CommandError(NexstarError):
    """
    Raised when a command returns an unexpected response.
    """

    pass


class ResponseLengthError(CommandError):
    """
    Raised when the bytes received before the terminator do not match the
    length the command expects.

    The terminator has already been consumed when this is raised, so the
    byte stream is still framed and the next command can be sent.

    Attributes:
        received: Number of data bytes read before '#'
        expected: Number of data bytes the command expects
    """

    def __init__(self, received: int, expected: int) -> None:
        self.received = received
        self.expected = expected
        super().__init__(f"Length of response ({received}) does not match expected length ({expected}).")

    def __reduce__(self) -> tuple[type[ResponseLengthError], tuple[int, int]]:
        return (self.__class__, (self.received, self.expected))
