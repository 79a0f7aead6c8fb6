"""Tnetstring codec for tnscodec.

This module provides encoding and decoding between value trees and
``SIZE:DATA TAG`` frames, plus the frame cursor the decoder is built on.
"""

from __future__ import annotations

from .cursor import FrameHeader, locate_frame
from .decoder import decode, decode_all, decode_one, iter_decode
from .encoder import encode
from .tags import WireType

__all__ = [
    "encode",
    "decode",
    "decode_one",
    "decode_all",
    "iter_decode",
    "FrameHeader",
    "locate_frame",
    "WireType",
]
