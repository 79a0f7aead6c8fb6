"""Exception hierarchy for tnscodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TnsError for easy catching of any tnscodec-specific error.
Every exception carries an ErrorReason so callers can branch on the failure kind
without parsing messages.
"""

from __future__ import annotations

import enum


class ErrorReason(enum.Enum):
    """Machine-readable failure kinds shared by the encoder and decoder."""

    # Encoding
    UNSUPPORTED_TYPE = "unsupported_type"
    INT_OUT_OF_RANGE = "int_out_of_range"
    NON_FINITE_FLOAT = "non_finite_float"
    PAYLOAD_TOO_LARGE = "payload_too_large"

    # Frame cursor
    INVALID_OFFSET = "invalid_offset"
    MALFORMED_FRAME = "malformed_frame"
    INVALID_SIZE = "invalid_size"
    TRUNCATED_FRAME = "truncated_frame"

    # Payload interpretation
    UNKNOWN_TAG = "unknown_tag"
    NUMERIC_PARSE_FAILURE = "numeric_parse_failure"
    NON_STRING_KEY = "non_string_key"
    DANGLING_KEY = "dangling_key"
    DUPLICATE_KEY = "duplicate_key"
    NON_EMPTY_NULL = "non_empty_null"

    # Both directions
    DEPTH_EXCEEDED = "depth_exceeded"


class TnsError(Exception):
    """Base exception for all tnscodec errors.

    Attributes:
        reason: The ErrorReason describing what went wrong
    """

    def __init__(self, reason: ErrorReason, message: str = "") -> None:
        super().__init__(message or reason.value)
        self.reason = reason


class EncodeError(TnsError):
    """Raised when a value cannot be encoded.

    Examples:
        - Native object with no wire representation
        - Integer outside the signed 64-bit range
        - NaN or infinite float
        - Nesting deeper than the configured max_depth
    """

    pass


class DecodeError(TnsError):
    """Raised when decoding a frame fails.

    Examples:
        - Missing colon or malformed size prefix
        - Declared size runs past the available bytes
        - Unknown type tag
        - Non-numeric integer or float payload
        - Map key that is not a byte string
    """

    pass
