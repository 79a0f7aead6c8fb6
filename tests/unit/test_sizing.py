"""Unit tests for frame size calculation."""

from __future__ import annotations

import pytest

from tnscodec import (
    Bytes,
    CodecConfig,
    EncodeError,
    ErrorReason,
    Float,
    Int,
    List,
    Map,
    Null,
    encode,
    encoded_size,
    payload_size,
)
from tnscodec.codec import encoder as encoder_module


def nested(levels: int) -> list:
    """Build ``levels`` native lists nested inside each other."""
    doc: list = []
    for _ in range(levels - 1):
        doc = [doc]
    return doc


class TestEncodedSize:
    """Test size calculation matches the encoder."""

    @pytest.mark.parametrize(
        "value",
        [
            None,
            True,
            False,
            0,
            -123456789,
            3.14,
            b"",
            b"hello",
            "héllo",
            [],
            {},
            ["cat", "dog"],
            {"pets": ["cat", "dog"], "n": None},
            [b"x" * 10, [b"y" * 100, {"z": 1.5}]],
        ],
    )
    def test_matches_encode(self, value: object) -> None:
        """Test encoded_size(v) == len(encode(v))."""
        assert encoded_size(value) == len(encode(value))

    def test_known_sizes(self) -> None:
        """Test a few hand-computed sizes."""
        assert encoded_size(b"hello") == 8  # 5:hello,
        assert encoded_size(Null()) == 3  # 0:~
        assert encoded_size({"pets": ["cat", "dog"]}) == 27

    def test_size_prefix_width(self) -> None:
        """Test the prefix grows with the payload."""
        assert encoded_size(b"x" * 9) == 1 + 1 + 9 + 1
        assert encoded_size(b"x" * 10) == 2 + 1 + 10 + 1

    def test_models(self) -> None:
        """Test Value input."""
        value = Map(entries=((b"a", List(items=(Int(value=1), Float(value=0.5)))),))

        assert encoded_size(value) == len(encode(value))


class TestPayloadSize:
    """Test payload size calculation."""

    def test_scalar(self) -> None:
        """Test scalar payload sizes."""
        assert payload_size(Bytes(value=b"abc")) == 3
        assert payload_size(True) == 4
        assert payload_size(False) == 5
        assert payload_size(None) == 0

    def test_list(self) -> None:
        """Test list payload is the sum of child frames."""
        assert payload_size(["cat", "dog"]) == 12

    def test_unencodable(self) -> None:
        """Test errors propagate from conversion."""
        with pytest.raises(EncodeError):
            encoded_size(object())


class TestSizeLimits:
    """Test sizing enforces the same limits as encode()."""

    def test_depth_beyond_default(self) -> None:
        """Test a value encode() rejects for depth is rejected here too."""
        with pytest.raises(EncodeError):
            encode(nested(65))
        with pytest.raises(EncodeError) as exc_info:
            encoded_size(nested(65))

        assert exc_info.value.reason is ErrorReason.DEPTH_EXCEEDED

    def test_very_deep_native_input(self) -> None:
        """Test deep input fails cleanly instead of exhausting the stack."""
        with pytest.raises(EncodeError) as exc_info:
            encoded_size(nested(5000))

        assert exc_info.value.reason is ErrorReason.DEPTH_EXCEEDED

    def test_depth_beyond_default_model(self) -> None:
        """Test a deep Value tree is checked during sizing."""
        value = List()
        for _ in range(64):
            value = List(items=(value,))

        with pytest.raises(EncodeError) as exc_info:
            payload_size(value)

        assert exc_info.value.reason is ErrorReason.DEPTH_EXCEEDED

    def test_config(self) -> None:
        """Test the config's max_depth applies."""
        config = CodecConfig(max_depth=2)

        assert encoded_size([[]], config=config) == len(encode([[]], config=config))
        with pytest.raises(EncodeError) as exc_info:
            encoded_size([[[]]], config=config)

        assert exc_info.value.reason is ErrorReason.DEPTH_EXCEEDED

    def test_payload_too_large(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the payload size limit matches encode()."""
        monkeypatch.setattr(encoder_module, "MAX_PAYLOAD_SIZE", 4)

        assert encoded_size(b"four") == 7
        with pytest.raises(EncodeError) as exc_info:
            encoded_size(b"hello")
        assert exc_info.value.reason is ErrorReason.PAYLOAD_TOO_LARGE

        # Children fit but the list payload does not
        with pytest.raises(EncodeError) as exc_info:
            encoded_size([None, None])
        assert exc_info.value.reason is ErrorReason.PAYLOAD_TOO_LARGE
