"""Frame header location.

This module finds the pieces of one ``SIZE:DATA TAG`` frame inside a larger
buffer: the size prefix, the payload window and the trailing type tag. It only
reads the buffer and never looks past the inclusive end bound it is given, so
nested frames can be located inside their parent's payload without seeing the
bytes that follow it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import DecodeError, ErrorReason
from .tags import MAX_SIZE_DIGITS, SIZE_SEPARATOR


@dataclass(frozen=True)
class FrameHeader:
    """Location of one frame inside a buffer.

    Attributes:
        start: Offset of the first size digit
        size: Declared payload size in bytes
        payload_start: Offset of the first payload byte
        payload_end: Offset one past the last payload byte
        tag: Raw type tag byte
    """

    start: int
    size: int
    payload_start: int
    payload_end: int
    tag: int

    @property
    def tag_offset(self) -> int:
        """Offset of the type tag byte."""
        return self.payload_end

    @property
    def next_offset(self) -> int:
        """Offset of the first byte after this frame."""
        return self.payload_end + 1

    def payload(self, buf: bytes) -> bytes:
        """Return a copy of this frame's payload from ``buf``."""
        return buf[self.payload_start : self.payload_end]


def locate_frame(buf: bytes, start: int, end: int) -> FrameHeader:
    """Locate the frame that begins at ``start``.

    Args:
        buf: Buffer holding the frame
        start: Offset of the first size digit
        end: Last offset (inclusive) the frame may occupy

    Returns:
        FrameHeader describing the frame

    Raises:
        DecodeError: INVALID_OFFSET for bounds outside the buffer,
            TRUNCATED_FRAME if there is nothing to read or the payload leaves no
            room for a tag, MALFORMED_FRAME if no colon is found within bounds,
            INVALID_SIZE if the size prefix is not 1-9 ASCII digits

    Example:
        >>> header = locate_frame(b"5:hello,", 0, 7)
        >>> header.size, header.payload_start, header.tag
        (5, 2, 44)
    """
    if start < 0 or end >= len(buf):
        raise DecodeError(
            ErrorReason.INVALID_OFFSET,
            f"Invalid bounds [{start}, {end}] for buffer of {len(buf)} bytes",
        )

    if start > end:
        raise DecodeError(ErrorReason.TRUNCATED_FRAME, f"Truncated frame: no bytes at offset {start}")

    colon = buf.find(SIZE_SEPARATOR, start, end + 1)
    if colon == -1:
        raise DecodeError(
            ErrorReason.MALFORMED_FRAME,
            f"Malformed frame at offset {start}: no size separator before offset {end + 1}",
        )

    size = _parse_size(buf[start:colon], start)

    payload_start = colon + 1
    payload_end = payload_start + size

    # The tag byte must also fit inside the bound
    if payload_end > end:
        raise DecodeError(
            ErrorReason.TRUNCATED_FRAME,
            f"Truncated frame at offset {start}: declared size {size} needs "
            f"{payload_end - start + 1} bytes, only {end - start + 1} available",
        )

    return FrameHeader(
        start=start,
        size=size,
        payload_start=payload_start,
        payload_end=payload_end,
        tag=buf[payload_end],
    )


def _parse_size(digits: bytes, offset: int) -> int:
    """Parse a size prefix of 1-9 ASCII digits."""
    if not digits:
        raise DecodeError(ErrorReason.INVALID_SIZE, f"Invalid size at offset {offset}: empty prefix")

    if len(digits) > MAX_SIZE_DIGITS:
        raise DecodeError(
            ErrorReason.INVALID_SIZE,
            f"Invalid size at offset {offset}: {len(digits)} digits (max {MAX_SIZE_DIGITS})",
        )

    # bytes.isdigit() only accepts ASCII digits, no sign or whitespace
    if not digits.isdigit():
        raise DecodeError(ErrorReason.INVALID_SIZE, f"Invalid size at offset {offset}: {digits!r}")

    return int(digits)
