"""Codec configuration.

The encoder and decoder are pure functions; the knobs that harden or relax
them are collected in a single dataclass that callers pass per call.
"""

from __future__ import annotations

from dataclasses import dataclass

# Deepest nesting any config may allow. Each level costs a few Python frames
# in the encoder and decoder, so this stays well under the default
# recursion limit of 1000.
MAX_DEPTH_LIMIT = 256


@dataclass(frozen=True)
class CodecConfig:
    """Limits and compatibility switches for encode/decode.

    Attributes:
        max_depth: Maximum container nesting (default 64).
            The root value sits at depth 0 and each List or Map adds one level
            for its children. Scalars never count. A value nested deeper than
            this raises DEPTH_EXCEEDED instead of growing the Python stack.
            Typical values:
            - Flat records: 1 - 2
            - Configuration trees: 8 - 16
            - Untrusted input: the default
            Values above MAX_DEPTH_LIMIT (256) are rejected.

        lenient_null: Accept null frames with a non-empty payload (default False).
            Some older producers emit a payload on ``~`` frames. When enabled the
            payload is discarded and a warning is logged; otherwise such a frame
            raises NON_EMPTY_NULL.

    Examples:
        ```python
        from tnscodec import CodecConfig, decode_one

        # Shallow structures only
        config = CodecConfig(max_depth=4)
        value = decode_one(data, config=config)

        # Interoperate with a producer that pads null frames
        value = decode_one(data, config=CodecConfig(lenient_null=True))
        ```
    """

    max_depth: int = 64
    lenient_null: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an int, got {type(self.max_depth).__name__}")

        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

        if self.max_depth > MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be <= {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )


DEFAULT_CONFIG = CodecConfig()
