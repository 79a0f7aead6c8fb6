"""Utility functions for tnscodec.

This module provides size calculation without encoding.
"""

from __future__ import annotations

from .sizing import encoded_size, payload_size

__all__ = [
    "encoded_size",
    "payload_size",
]
