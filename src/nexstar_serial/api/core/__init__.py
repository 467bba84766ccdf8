"""Core subpackage for shared types, codecs, enums, and exceptions."""

from nexstar_serial.api.core.codecs import (
    decode_coordinate,
    decode_timestamp,
    decode_version,
    encode_coordinate,
    encode_timestamp,
    encode_version,
    parse_coordinate,
)


__all__ = [
    "decode_coordinate",
    "decode_timestamp",
    "decode_version",
    "encode_coordinate",
    "encode_timestamp",
    "encode_version",
    "parse_coordinate",
]
