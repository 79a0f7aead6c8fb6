"""End-to-end integration tests."""

from __future__ import annotations

from typing import Any

import pytest

from tnscodec import (
    Bytes,
    CodecConfig,
    DecodeError,
    ErrorReason,
    Float,
    Int,
    List,
    Map,
    Null,
    decode,
    decode_one,
    encode,
    encoded_size,
    iter_decode,
    to_native,
)


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_document_with_trailing_noise(self, sample_document: dict[str, Any]) -> None:
        """Test a mixed document survives extra bytes after the frame."""
        # 1. Encode
        frame = encode(sample_document)
        assert len(frame) == encoded_size(sample_document)

        # 2. Append noise the parser must ignore
        received = frame + b"Ignore this !!!"

        # 3. Decode
        value = decode_one(received)
        assert isinstance(value, Map)

        # 4. Verify every entry, in insertion order
        assert value.keys() == [key.encode("utf-8") for key in sample_document]
        assert value.get(b"one") == Int(value=1)
        assert value.get(b"pi") == Float(value=3.14)
        assert value.get(b"test_german") == Bytes(value=b"Das ist ein test")
        assert value.get(b"nothing") == Null()
        assert value.get(b"pets") == List(
            items=(Bytes(value=b"cat"), Bytes(value=b"dog"), Bytes(value=b"hamster"))
        )

        # 5. Re-encoding the decoded value reproduces the original frame
        assert encode(value) == frame

    def test_native_round_trip(self, sample_document: dict[str, Any]) -> None:
        """Test text comes back as UTF-8 bytes, everything else unchanged."""
        native = to_native(decode_one(encode(sample_document)))

        assert native[b"one"] == 1
        assert native[b"pi"] == 3.14
        assert native[b"nothing"] is None
        assert native[b"enabled"] is True
        assert native[b"longtext"] == sample_document["longtext"].encode("utf-8")
        assert native[b"pets"] == [b"cat", b"dog", b"hamster"]

    def test_message_sequence(self) -> None:
        """Test a sequence of messages read from one buffer."""
        messages = [
            {"type": "hello", "version": 1},
            {"type": "data", "payload": b"\x00\x01\x02:,]}"},
            {"type": "bye"},
        ]
        buf = b"".join(encode(message) for message in messages)

        decoded = [to_native(value) for value, _ in iter_decode(buf)]

        assert decoded == [
            {b"type": b"hello", b"version": 1},
            {b"type": b"data", b"payload": b"\x00\x01\x02:,]}"},
            {b"type": b"bye"},
        ]

    def test_resume_after_partial_buffer(self) -> None:
        """Test a caller can retry once the rest of a frame arrives."""
        first = encode({"seq": 1})
        second = encode({"seq": 2})
        buf = first + second[:5]

        value, offset = decode(buf)
        assert to_native(value) == {b"seq": 1}

        with pytest.raises(DecodeError) as exc_info:
            decode(buf, offset)
        assert exc_info.value.reason is ErrorReason.TRUNCATED_FRAME

        buf += second[5:]
        value, offset = decode(buf, offset)
        assert to_native(value) == {b"seq": 2}
        assert offset == len(buf)

    def test_deep_config_tree(self) -> None:
        """Test a moderately deep tree under a tight depth limit."""
        tree: Any = {"leaf": True}
        for level in range(7):
            tree = {f"level{level}": tree}

        config = CodecConfig(max_depth=8)
        frame = encode(tree, config=config)
        assert to_native(decode_one(frame, config=config)) is not None

        with pytest.raises(DecodeError) as exc_info:
            decode_one(frame, config=CodecConfig(max_depth=7))
        assert exc_info.value.reason is ErrorReason.DEPTH_EXCEEDED

    def test_lenient_peer(self) -> None:
        """Test interop with a producer that pads null frames."""
        # {"a": null-with-payload}
        frame = b"11:1:a,4:null~}"

        with pytest.raises(DecodeError):
            decode_one(frame)

        value = decode_one(frame, config=CodecConfig(lenient_null=True))
        assert value == Map(entries=((b"a", Null()),))
