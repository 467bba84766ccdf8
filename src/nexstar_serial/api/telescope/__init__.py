"""Telescope subpackage: command registry, transports, protocol client, and facade."""

from nexstar_serial.api.telescope.protocol import NexStarProtocol
from nexstar_serial.api.telescope.telescope import NexStarTelescope
from nexstar_serial.api.telescope.transport import SerialTransport, TcpTransport, create_transport


__all__ = [
    "NexStarProtocol",
    "NexStarTelescope",
    "SerialTransport",
    "TcpTransport",
    "create_transport",
]
