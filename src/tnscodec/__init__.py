"""tnscodec: Tagged Netstring Codec

A Python library for the tagged netstring (tnetstring) serialization format:
a self-delimiting, binary-safe encoding of null, booleans, integers, floats,
byte strings, lists and string-keyed maps. Every value is framed as
``SIZE:DATA TAG`` so parsers read exactly the declared number of bytes and
never scan for a terminator.

Format reference: http://tnetstrings.org

Key Features:
- Pydantic-based immutable value model
- Offset-based decoding that ignores surrounding bytes
- Deterministic encoding (map entries keep insertion order)
- Bounded nesting depth for untrusted input

Quick Start:
    >>> from tnscodec import decode_one, encode, to_native
    >>>
    >>> data = encode({"pets": ["cat", "dog"], "count": 2})
    >>> data
    b'35:4:pets,12:3:cat,3:dog,]5:count,1:2#}'
    >>> to_native(decode_one(data + b"trailing noise"))
    {b'pets': [b'cat', b'dog'], b'count': 2}
"""

from __future__ import annotations

from .codec import (
    FrameHeader,
    WireType,
    decode,
    decode_all,
    decode_one,
    encode,
    iter_decode,
    locate_frame,
)
from .config import DEFAULT_CONFIG, MAX_DEPTH_LIMIT, CodecConfig
from .exceptions import DecodeError, EncodeError, ErrorReason, TnsError
from .models import (
    BaseValue,
    Bool,
    Bytes,
    Float,
    Int,
    List,
    Map,
    Null,
    Value,
    from_native,
    to_native,
)
from .utils import encoded_size, payload_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_one",
    "decode_all",
    "iter_decode",
    # Value model
    "Value",
    "BaseValue",
    "Null",
    "Bool",
    "Int",
    "Float",
    "Bytes",
    "List",
    "Map",
    "from_native",
    "to_native",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    "MAX_DEPTH_LIMIT",
    # Exceptions
    "TnsError",
    "EncodeError",
    "DecodeError",
    "ErrorReason",
    # Frame cursor
    "FrameHeader",
    "locate_frame",
    "WireType",
    # Sizing
    "encoded_size",
    "payload_size",
    # Version
    "__version__",
]
