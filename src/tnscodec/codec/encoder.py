"""Tnetstring encoder.

This module provides the encode() function that converts a value tree to a
single ``SIZE:DATA TAG`` frame. Children of lists and maps are encoded to
complete frames first; the parent's size prefix and tag are written around
their concatenation.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError, ErrorReason
from ..models import Bool, Bytes, Float, Int, List, Map, Null, Value, from_native
from .tags import INT64_MAX, INT64_MIN, MAX_PAYLOAD_SIZE, WireType

logger = logging.getLogger(__name__)


def encode(value: Any, *, config: CodecConfig | None = None) -> bytes:
    """Encode a value to a tnetstring frame.

    Accepts either a Value model or any native object from_native() accepts.
    Map entries are written in their entry order (dict insertion order for
    native input), so the same value always produces the same bytes.

    Args:
        value: Value or native Python object to encode
        config: Codec limits, defaults to DEFAULT_CONFIG

    Returns:
        Complete frame bytes

    Raises:
        EncodeError: If the value has no wire representation or exceeds a limit.
            Nothing is returned for a partially encoded value.

    Examples:
        ```python
        from tnscodec import Bytes, List, Null, encode

        encode(Null())                               # b"0:~"
        encode(List(items=(Bytes(value=b"cat"),)))   # b"6:3:cat,]"
        encode({"pets": ["cat", "dog"]})             # b"23:4:pets,12:3:cat,3:dog,]}"
        ```
    """
    cfg = config if config is not None else DEFAULT_CONFIG

    try:
        root = from_native(value, config=cfg)
        return _encode_value(root, 0, cfg)
    except EncodeError as e:
        logger.debug("Encoding %s failed: %s", type(value).__name__, e)
        raise


def scalar_payload(value: Value) -> bytes:
    """Return the payload bytes of a scalar value.

    Int is written as canonical base-10 text. Float uses repr(), the shortest
    text that parses back to the same double, so encode/decode/encode is
    idempotent.

    Raises:
        EncodeError: If the value is not a scalar or its content is out of range
    """
    if isinstance(value, Null):
        return b""

    if isinstance(value, Bool):
        return b"true" if value.value else b"false"

    if isinstance(value, Int):
        # model_construct() skips validation
        if value.value < INT64_MIN or value.value > INT64_MAX:
            raise EncodeError(
                ErrorReason.INT_OUT_OF_RANGE,
                f"Integer {value.value} outside signed 64-bit range",
            )
        return str(value.value).encode("ascii")

    if isinstance(value, Float):
        if not math.isfinite(value.value):
            raise EncodeError(
                ErrorReason.NON_FINITE_FLOAT, f"Cannot encode non-finite float {value.value}"
            )
        return repr(float(value.value)).encode("ascii")

    if isinstance(value, Bytes):
        return value.value

    raise EncodeError(
        ErrorReason.UNSUPPORTED_TYPE, f"Not a scalar value: {type(value).__name__}"
    )


def _encode_value(value: Value, depth: int, config: CodecConfig) -> bytes:
    """Encode one value and everything nested in it.

    Args:
        value: Value to encode
        depth: Nesting depth of this value (root is 0)
        config: Codec limits

    Returns:
        Complete frame bytes

    Raises:
        EncodeError: If the value is invalid or exceeds a limit
    """
    if isinstance(value, List):
        check_depth(depth, config)
        payload = b"".join(_encode_value(item, depth + 1, config) for item in value.items)
        return _frame(payload, WireType.LIST)

    if isinstance(value, Map):
        check_depth(depth, config)
        parts: list[bytes] = []
        for key, item in value.entries:
            # Keys are always written as byte strings
            parts.append(_frame(key, WireType.BYTES))
            parts.append(_encode_value(item, depth + 1, config))
        return _frame(b"".join(parts), WireType.MAP)

    return _frame(scalar_payload(value), value.wire_type)


def check_depth(depth: int, config: CodecConfig) -> None:
    """Raise DEPTH_EXCEEDED if a container at ``depth`` nests too deep."""
    if depth + 1 > config.max_depth:
        raise EncodeError(
            ErrorReason.DEPTH_EXCEEDED, f"Nesting depth exceeds max_depth={config.max_depth}"
        )


def check_payload_size(size: int) -> None:
    """Raise PAYLOAD_TOO_LARGE if ``size`` does not fit a 9-digit prefix."""
    if size > MAX_PAYLOAD_SIZE:
        raise EncodeError(
            ErrorReason.PAYLOAD_TOO_LARGE,
            f"Payload of {size} bytes exceeds maximum {MAX_PAYLOAD_SIZE}",
        )


def _frame(payload: bytes, wire_type: WireType) -> bytes:
    """Wrap a payload as SIZE ':' DATA TAG."""
    check_payload_size(len(payload))
    return b"%d:%b%b" % (len(payload), payload, wire_type.value)
