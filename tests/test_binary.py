"""
Tests for the base64 binary rule.
"""

import os

import pytest

from yamlconv import document
from yamlconv.codecs.binary import decode_base64, encode_base64
from yamlconv.registry import decode, encode


class TestBase64Adapter:
    """The lenient base64 collaborator."""

    def test_encode(self):
        assert encode_base64(b"hello") == "aGVsbG8="

    def test_decode_skips_line_breaks(self):
        assert decode_base64("aGVs\nbG8=") == b"hello"

    def test_bad_padding_decodes_to_nothing(self):
        assert decode_base64("aGVsbG8") == b""


class TestBinaryCodec:
    """bytes and bytearray."""

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\xff\xfe\x00\x01", os.urandom(257)])
    def test_roundtrip(self, data):
        assert decode(encode(data), bytes) == (data, True)

    def test_bytearray(self):
        value, ok = decode(encode(bytearray(b"abc")), bytearray)
        assert ok
        assert isinstance(value, bytearray)
        assert value == bytearray(b"abc")

    def test_tagged_binary(self):
        assert encode(b"x").tag == document.BINARY_TAG

    def test_empty_text_is_empty_bytes(self):
        """Empty scalar text is a valid, empty buffer."""
        assert decode(document.scalar("", tag=document.STR_TAG), bytes) == (b"", True)

    def test_invalid_text_fails(self):
        """Non-empty text that yields no bytes is a failure."""
        assert decode(document.scalar("!!!!"), bytes).ok is False
        assert decode(document.scalar("===="), bytes).ok is False

    def test_non_scalar_fails(self):
        assert decode(document.sequence(), bytes).ok is False
        assert decode(document.null(), bytes).ok is False

    def test_loaded_binary_scalar(self):
        node = document.load("!!binary |\n  aGVs\n  bG8=\n")
        assert decode(node, bytes) == (b"hello", True)
