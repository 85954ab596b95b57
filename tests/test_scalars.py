"""
Tests for leaf conversion rules: bool, Char, str, None, node passthrough.
"""

import pytest
import yaml

from yamlconv import document
from yamlconv.document import NodeKind
from yamlconv.registry import decode, encode
from yamlconv.types import Char


class TestBool:
    """Boolean tokens."""

    def test_encode(self):
        assert document.scalar_text(encode(True)) == "true"
        assert document.scalar_text(encode(False)) == "false"

    @pytest.mark.parametrize("token", ["true", "True", "TRUE", "yes", "Yes", "YES", "on", "On", "ON", "y", "Y"])
    def test_true_tokens(self, token):
        assert decode(document.scalar(token, tag=document.STR_TAG), bool) == (True, True)

    @pytest.mark.parametrize("token", ["false", "False", "FALSE", "no", "No", "NO", "off", "Off", "OFF", "n", "N"])
    def test_false_tokens(self, token):
        assert decode(document.scalar(token, tag=document.STR_TAG), bool) == (False, True)

    @pytest.mark.parametrize("token", ["tRUE", "fAlse", "1", "0", "", "yess", " true"])
    def test_rejected_tokens(self, token):
        assert decode(document.scalar(token, tag=document.STR_TAG), bool).ok is False

    def test_non_scalar_fails(self):
        assert decode(document.null(), bool).ok is False

    def test_bool_is_not_an_integer(self):
        """True encodes as a token, not as 1."""
        value, ok = decode(encode(True), int)
        assert ok is False


class TestChar:
    """Single-character rule."""

    def test_roundtrip(self):
        assert decode(encode(Char("x")), Char) == ("x", True)

    def test_encode_truncates(self):
        """Encoding keeps only the first character."""
        assert document.scalar_text(encode("abc", Char)) == "a"

    def test_multi_char_fails(self):
        assert decode(document.scalar("ab"), Char).ok is False

    def test_empty_fails(self):
        assert decode(document.scalar("", tag=document.STR_TAG), Char).ok is False

    def test_non_scalar_fails(self):
        assert decode(document.sequence(), Char).ok is False

    def test_decoded_type(self):
        value, _ = decode(document.scalar("q"), Char)
        assert type(value) is Char


class TestString:
    """str copies scalar text verbatim."""

    def test_roundtrip(self):
        assert decode(encode("hello world"), str) == ("hello world", True)

    def test_empty_string_stays_scalar(self):
        """An empty string is a SCALAR, not a null."""
        node = encode("")
        assert document.kind_of(node) is NodeKind.SCALAR
        assert decode(node, str) == ("", True)

    def test_numeric_text_is_still_a_string(self):
        assert decode(document.scalar("42"), str) == ("42", True)

    def test_null_fails(self):
        assert decode(document.null(), str).ok is False

    def test_map_fails(self):
        assert decode(document.mapping(), str).ok is False


class TestNull:
    """None maps to the NULL kind."""

    def test_encode(self):
        assert document.kind_of(encode(None)) is NodeKind.NULL

    def test_decode_null(self):
        assert decode(document.null(), None) == (None, True)
        assert decode(document.null(), type(None)) == (None, True)

    def test_decode_loaded_null(self):
        assert decode(document.load("~"), None).ok is True

    def test_scalar_fails(self):
        assert decode(document.scalar("x"), None).ok is False


class TestNodePassthrough:
    """yaml.Node converts to itself."""

    def test_encode_identity(self):
        node = document.scalar("x")
        assert encode(node) is node

    def test_decode_identity(self):
        node = document.load("[1, 2]")
        value, ok = decode(node, yaml.Node)
        assert ok
        assert value is node
