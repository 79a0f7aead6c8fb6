"""Wire-level constants for the tnetstring format.

This module defines the type tags that terminate every frame and the limits
that bound the size prefix and integer payloads.
"""

from __future__ import annotations

import enum


class WireType(bytes, enum.Enum):
    """Single-byte type tag written after each payload."""

    NULL = b"~"
    BOOL = b"!"
    INT = b"#"
    FLOAT = b"^"
    BYTES = b","
    LIST = b"]"
    MAP = b"}"

    @classmethod
    def from_byte(cls, tag: int) -> WireType | None:
        """Look up the wire type for a raw tag byte, or None if unknown."""
        return _BY_ORDINAL.get(tag)


_BY_ORDINAL: dict[int, WireType] = {member.value[0]: member for member in WireType}

# Size prefix: 1-9 ASCII digits
MAX_SIZE_DIGITS = 9
MAX_PAYLOAD_SIZE = 999_999_999

# Python ints are unbounded, the wire integer is signed 64-bit
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SIZE_SEPARATOR = b":"
