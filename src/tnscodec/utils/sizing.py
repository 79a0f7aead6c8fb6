"""Frame size calculation utilities.

This module provides functions to calculate the encoded size of a value
without building the frame bytes.
"""

from __future__ import annotations

from typing import Any

from ..codec.encoder import check_depth, check_payload_size, scalar_payload
from ..config import DEFAULT_CONFIG, CodecConfig
from ..models import List, Map, Value, from_native


def encoded_size(value: Any, *, config: CodecConfig | None = None) -> int:
    """Calculate the size of a value's complete frame in bytes.

    Accepts a Value or any native object from_native() accepts. The same
    limits as encode() apply, so the result always equals
    ``len(encode(value, config=config))``.

    Args:
        value: Value or native object to measure
        config: Codec limits, defaults to DEFAULT_CONFIG

    Returns:
        Frame size in bytes (size prefix, colon, payload and tag)

    Raises:
        EncodeError: If the value cannot be encoded

    Example:
        >>> encoded_size(b"hello")
        8  # "5:hello,"
        >>> encoded_size({"pets": ["cat", "dog"]})
        27
    """
    return _frame_size(payload_size(value, config=config))


def payload_size(value: Any, *, config: CodecConfig | None = None) -> int:
    """Calculate the size of a value's payload in bytes.

    Example:
        >>> payload_size(["cat", "dog"])
        12  # "3:cat,3:dog,"
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    size = _payload_size(from_native(value, config=cfg), 0, cfg)
    check_payload_size(size)
    return size


def _payload_size(value: Value, depth: int, config: CodecConfig) -> int:
    if isinstance(value, List):
        check_depth(depth, config)
        total = 0
        for item in value.items:
            total += _child_frame_size(item, depth, config)
        return total

    if isinstance(value, Map):
        check_depth(depth, config)
        total = 0
        for key, item in value.entries:
            check_payload_size(len(key))
            total += _frame_size(len(key)) + _child_frame_size(item, depth, config)
        return total

    return len(scalar_payload(value))


def _child_frame_size(item: Value, depth: int, config: CodecConfig) -> int:
    size = _payload_size(item, depth + 1, config)
    check_payload_size(size)
    return _frame_size(size)


def _frame_size(size: int) -> int:
    # digits + ':' + payload + tag
    return len(str(size)) + 1 + size + 1
