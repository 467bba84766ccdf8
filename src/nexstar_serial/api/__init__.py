"""
NexStar Serial API - Protocol Layer

This package contains the protocol client for Celestron NexStar hand
controllers, separated from CLI presentation concerns.

The API is organized into subpackages:
- core: Value types, codecs, enums, and exceptions
- telescope: Command registry, transports, protocol client, and facade
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into subpackages - import directly from them:
    # from nexstar_serial.api.core import ...
    # from nexstar_serial.api.telescope import ...
]
