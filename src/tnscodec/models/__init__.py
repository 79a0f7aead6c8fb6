"""Value modeling for tnscodec.

This module provides the closed set of Pydantic value models the codec carries
and helpers to convert them to and from native Python objects.
"""

from __future__ import annotations

from .convert import from_native, to_native
from .values import BaseValue, Bool, Bytes, Float, Int, List, Map, Null, Value

__all__ = [
    "BaseValue",
    "Null",
    "Bool",
    "Int",
    "Float",
    "Bytes",
    "List",
    "Map",
    "Value",
    "from_native",
    "to_native",
]
