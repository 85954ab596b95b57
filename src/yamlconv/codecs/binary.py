"""
Binary codec: opaque byte buffers as base64 scalar text.

The base64 adapter is lenient the way YAML binary scalars need it to be:
line breaks and other non-alphabet characters are skipped, and malformed
input produces no bytes instead of an error.
"""

import base64
import binascii
import logging
from typing import Type

import yaml

from yamlconv import document
from yamlconv.codecs.base import Codec, Decoded, FAILED, success


logger = logging.getLogger(__name__)


def encode_base64(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_base64(text: str) -> bytes:
    """Decode base64 text; returns b"" when the input cannot be decoded."""
    try:
        return base64.b64decode(text.encode("ascii", "ignore"), validate=False)
    except binascii.Error:
        return b""


class BinaryCodec(Codec):
    """
    Rule for bytes and bytearray.

    Decode fails when non-empty text yields no bytes at all. That guards
    against garbage silently decoding to an empty buffer; it is not full
    validation of the base64 grammar.
    """

    def __init__(self, target: Type[bytes] = bytes):
        self.target = target

    def encode(self, value: bytes) -> yaml.Node:
        return document.scalar(encode_base64(value), tag=document.BINARY_TAG)

    def decode(self, node: yaml.Node) -> Decoded:
        if not document.is_scalar(node):
            logger.debug("shape mismatch: binary expects a scalar, got %s", document.kind_of(node).value)
            return FAILED
        text = document.scalar_text(node)
        data = decode_base64(text)
        if not data and text:
            logger.debug("lexical mismatch: %r is not base64", text)
            return FAILED
        return success(self.target(data))
