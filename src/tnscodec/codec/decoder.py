"""Tnetstring decoder.

This module provides decode() and its convenience wrappers, which convert
tnetstring frames back to value trees. Decoding reads one frame header, then
for lists and maps decodes sub-frames bounded by the parent's payload until
that payload is used up.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterator
from typing import Union

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError, ErrorReason
from ..models import Bool, Bytes, Float, Int, List, Map, Null, Value
from .cursor import FrameHeader, locate_frame
from .tags import INT64_MAX, INT64_MIN, WireType

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

_INT_PAYLOAD = re.compile(rb"[+-]?[0-9]+")
_FLOAT_PAYLOAD = re.compile(rb"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def decode(
    data: BytesLike, start: int = 0, *, config: CodecConfig | None = None
) -> tuple[Value, int]:
    """Decode the frame that begins at ``start``.

    Bytes before ``start`` and after the frame are never looked at, so this can
    walk a buffer of back-to-back frames by feeding the returned offset back in.
    A bytearray or memoryview is copied to bytes on every call; convert it once
    with bytes() before such a loop, or use iter_decode(), which does.

    Args:
        data: Buffer holding the frame
        start: Offset of the frame's first size digit
        config: Codec limits, defaults to DEFAULT_CONFIG

    Returns:
        Tuple of (value, offset of the first byte after the frame)

    Raises:
        DecodeError: If the frame is malformed, truncated, carries an unknown
            tag or an unparseable payload, or nests deeper than max_depth

    Examples:
        ```python
        from tnscodec import decode

        value, offset = decode(b"5:hello,1:1#")   # Bytes(b"hello"), 8
        value, offset = decode(b"5:hello,1:1#", offset)   # Int(1), 12
        ```
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    buf = _as_bytes(data)

    if start < 0 or start > len(buf):
        raise DecodeError(
            ErrorReason.INVALID_OFFSET,
            f"Start offset {start} outside buffer of {len(buf)} bytes",
        )

    try:
        return _decode_frame(buf, start, len(buf) - 1, 0, cfg)
    except DecodeError as e:
        logger.debug("Decoding frame at offset %d failed (%s): %s", start, e.reason.value, e)
        raise


def decode_one(data: BytesLike, *, config: CodecConfig | None = None) -> Value:
    """Decode the first frame in ``data``.

    Anything after the first complete frame is ignored, not an error.

    Example:
        >>> decode_one(b"5:hello,Ignore this !!!")
        Bytes(kind='bytes', value=b'hello')
    """
    value, _ = decode(data, 0, config=config)
    return value


def iter_decode(
    data: BytesLike, start: int = 0, *, config: CodecConfig | None = None
) -> Iterator[tuple[Value, int]]:
    """Decode back-to-back frames until the buffer is exhausted.

    Yields:
        Tuple of (value, offset of the first byte after that frame)

    Raises:
        DecodeError: On the first malformed or incomplete frame
    """
    buf = _as_bytes(data)
    offset = start
    while offset < len(buf):
        value, offset = decode(buf, offset, config=config)
        yield value, offset


def decode_all(data: BytesLike, *, config: CodecConfig | None = None) -> list[Value]:
    """Decode every frame in a buffer of back-to-back frames.

    Raises:
        DecodeError: If any frame is malformed, or the buffer ends mid-frame
    """
    return [value for value, _ in iter_decode(data, config=config)]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")


def _decode_frame(
    buf: bytes, start: int, end: int, depth: int, config: CodecConfig
) -> tuple[Value, int]:
    """Decode one frame that must fit inside ``[start, end]``.

    Args:
        buf: Whole input buffer
        start: Offset of the frame's first size digit
        end: Last offset (inclusive) the frame may occupy
        depth: Nesting depth of this frame (root is 0)
        config: Codec limits

    Returns:
        Tuple of (value, offset of the first byte after the frame)
    """
    header = locate_frame(buf, start, end)
    wire_type = WireType.from_byte(header.tag)

    if wire_type is None:
        raise DecodeError(
            ErrorReason.UNKNOWN_TAG,
            f"Unknown type tag {bytes([header.tag])!r} at offset {header.tag_offset}",
        )

    value: Value
    if wire_type is WireType.NULL:
        value = _decode_null(buf, header, config)
    elif wire_type is WireType.BYTES:
        value = Bytes(value=header.payload(buf))
    elif wire_type is WireType.BOOL:
        # Anything other than the literal "true" is false
        value = Bool(value=header.payload(buf) == b"true")
    elif wire_type is WireType.INT:
        value = _decode_int(buf, header)
    elif wire_type is WireType.FLOAT:
        value = _decode_float(buf, header)
    elif wire_type is WireType.LIST:
        value = _decode_list(buf, header, depth, config)
    else:
        value = _decode_map(buf, header, depth, config)

    return value, header.next_offset


def _decode_null(buf: bytes, header: FrameHeader, config: CodecConfig) -> Null:
    if header.size != 0:
        if not config.lenient_null:
            raise DecodeError(
                ErrorReason.NON_EMPTY_NULL,
                f"Null at offset {header.start} has size {header.size}, must be 0",
            )
        logger.warning(
            "Ignoring %d-byte payload of null at offset %d: %r",
            header.size,
            header.start,
            header.payload(buf)[:32],
        )
    return Null()


def _decode_int(buf: bytes, header: FrameHeader) -> Int:
    payload = header.payload(buf)
    if not _INT_PAYLOAD.fullmatch(payload):
        raise DecodeError(
            ErrorReason.NUMERIC_PARSE_FAILURE,
            f"Could not convert {payload[:32]!r} at offset {header.payload_start} to int",
        )

    number = int(payload)
    if number < INT64_MIN or number > INT64_MAX:
        raise DecodeError(
            ErrorReason.NUMERIC_PARSE_FAILURE,
            f"Integer at offset {header.payload_start} outside signed 64-bit range",
        )
    return Int(value=number)


def _decode_float(buf: bytes, header: FrameHeader) -> Float:
    payload = header.payload(buf)
    if not _FLOAT_PAYLOAD.fullmatch(payload):
        raise DecodeError(
            ErrorReason.NUMERIC_PARSE_FAILURE,
            f"Could not convert {payload[:32]!r} at offset {header.payload_start} to float",
        )

    number = float(payload)
    if not math.isfinite(number):
        raise DecodeError(
            ErrorReason.NUMERIC_PARSE_FAILURE,
            f"Float at offset {header.payload_start} overflows a double",
        )
    return Float(value=number)


def _enter_container(header: FrameHeader, depth: int, config: CodecConfig) -> None:
    if depth + 1 > config.max_depth:
        raise DecodeError(
            ErrorReason.DEPTH_EXCEEDED,
            f"Container at offset {header.start} exceeds max_depth={config.max_depth}",
        )


def _decode_list(buf: bytes, header: FrameHeader, depth: int, config: CodecConfig) -> List:
    _enter_container(header, depth, config)

    items: list[Value] = []
    offset = header.payload_start
    while offset < header.payload_end:
        item, offset = _decode_frame(buf, offset, header.payload_end - 1, depth + 1, config)
        items.append(item)

    return List(items=tuple(items))


def _decode_map(buf: bytes, header: FrameHeader, depth: int, config: CodecConfig) -> Map:
    _enter_container(header, depth, config)

    entries: list[tuple[bytes, Value]] = []
    seen: set[bytes] = set()
    offset = header.payload_start
    while offset < header.payload_end:
        key_offset = offset
        key, offset = _decode_frame(buf, offset, header.payload_end - 1, depth + 1, config)

        if not isinstance(key, Bytes):
            raise DecodeError(
                ErrorReason.NON_STRING_KEY,
                f"Map key at offset {key_offset} is {key.kind}, keys must be byte strings",
            )

        if offset >= header.payload_end:
            raise DecodeError(
                ErrorReason.DANGLING_KEY,
                f"Map key {key.value[:32]!r} at offset {key_offset} has no value",
            )

        if key.value in seen:
            raise DecodeError(
                ErrorReason.DUPLICATE_KEY,
                f"Duplicate map key {key.value[:32]!r} at offset {key_offset}",
            )
        seen.add(key.value)

        item, offset = _decode_frame(buf, offset, header.payload_end - 1, depth + 1, config)
        entries.append((key.value, item))

    return Map(entries=tuple(entries))
