"""Conversion between native Python objects and tnetstring values.

This module maps plain Python data (None, bool, int, float, bytes, str, list,
tuple, dict) onto the closed value model and back. Text is stored as UTF-8
bytes and always comes back as ``bytes``: the wire format has no string type
separate from byte strings.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from ..codec.tags import INT64_MAX, INT64_MIN
from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError, ErrorReason
from .values import VALUE_TYPES, Bool, Bytes, Float, Int, List, Map, Null, Value


def from_native(obj: Any, *, config: CodecConfig | None = None) -> Value:
    """Convert a native Python object to a Value.

    Value instances are returned unchanged. Dict order is kept as the map's
    entry order. Nesting is bounded by the config's max_depth, so deep or
    self-referencing containers fail with DEPTH_EXCEEDED.

    Args:
        obj: Object to convert
        config: Codec limits, defaults to DEFAULT_CONFIG

    Returns:
        Equivalent Value

    Raises:
        EncodeError: If the object (or anything nested in it) has no wire
            representation, an int is outside the signed 64-bit range, a float
            is NaN or infinite, two map keys collide, or nesting exceeds max_depth

    Examples:
        ```python
        from tnscodec import from_native

        value = from_native({"pets": ["cat", "dog"], "count": 2})
        # Map(entries=((b"pets", List(...)), (b"count", Int(value=2))))
        ```
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    return _from_native(obj, 0, cfg.max_depth)


def _from_native(obj: Any, depth: int, max_depth: int) -> Value:
    if isinstance(obj, VALUE_TYPES):
        return obj

    if obj is None:
        return Null()

    # bool is a subclass of int, check it first
    if isinstance(obj, bool):
        return Bool(value=obj)

    if isinstance(obj, int):
        if obj < INT64_MIN or obj > INT64_MAX:
            raise EncodeError(
                ErrorReason.INT_OUT_OF_RANGE, f"Integer {obj} outside signed 64-bit range"
            )
        return Int(value=int(obj))

    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise EncodeError(ErrorReason.NON_FINITE_FLOAT, f"Cannot encode non-finite float {obj}")
        return Float(value=float(obj))

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Bytes(value=bytes(obj))

    if isinstance(obj, str):
        return Bytes(value=_text_to_bytes(obj))

    if isinstance(obj, Mapping):
        _check_depth(depth, max_depth)
        entries: list[tuple[bytes, Value]] = []
        seen: set[bytes] = set()
        for key, item in obj.items():
            raw_key = _key_to_bytes(key)
            if raw_key in seen:
                raise EncodeError(ErrorReason.DUPLICATE_KEY, f"Duplicate map key {raw_key!r}")
            seen.add(raw_key)
            entries.append((raw_key, _from_native(item, depth + 1, max_depth)))
        return Map(entries=tuple(entries))

    if isinstance(obj, (list, tuple)):
        _check_depth(depth, max_depth)
        return List(items=tuple(_from_native(item, depth + 1, max_depth) for item in obj))

    raise EncodeError(
        ErrorReason.UNSUPPORTED_TYPE, f"Unsupported type for encoding: {type(obj).__name__}"
    )


def _check_depth(depth: int, max_depth: int) -> None:
    if depth + 1 > max_depth:
        raise EncodeError(
            ErrorReason.DEPTH_EXCEEDED, f"Nesting depth exceeds max_depth={max_depth}"
        )


def _text_to_bytes(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodeError(ErrorReason.UNSUPPORTED_TYPE, f"Cannot encode str as UTF-8: {e}") from e


def _key_to_bytes(key: Any) -> bytes:
    if isinstance(key, Bytes):
        return key.value
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return _text_to_bytes(key)
    raise EncodeError(
        ErrorReason.UNSUPPORTED_TYPE,
        f"Map keys must be str or bytes, got {type(key).__name__}",
    )


def to_native(value: Value) -> Any:
    """Convert a Value to plain Python objects.

    Null becomes None, Bytes becomes bytes, List becomes list and Map becomes a
    dict with bytes keys in entry order.

    Example:
        >>> to_native(Map(entries=((b"n", Int(value=1)),)))
        {b'n': 1}
    """
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Int, Float, Bytes)):
        return value.value
    if isinstance(value, List):
        return [to_native(item) for item in value.items]
    if isinstance(value, Map):
        return {key: to_native(item) for key, item in value.entries}
    raise TypeError(f"Not a tnetstring value: {type(value).__name__}")
