"""
Leaf codecs: node passthrough, string, literal string, null, character, boolean.

None of these recurse. Each is a direct encode/decode pair.
"""

import logging

import yaml

from yamlconv import document
from yamlconv.codecs.base import Codec, Decoded, EncodeOnlyCodec, FAILED, success
from yamlconv.document import NodeKind
from yamlconv.grammar import parse_bool
from yamlconv.types import Char


logger = logging.getLogger(__name__)


class NodeCodec(Codec):
    """Identity rule for values that are already document nodes."""

    def encode(self, value: yaml.Node) -> yaml.Node:
        return value

    def decode(self, node: yaml.Node) -> Decoded:
        return success(node)


class StringCodec(Codec):
    def encode(self, value: str) -> yaml.Node:
        return document.scalar(str(value), tag=document.STR_TAG)

    def decode(self, node: yaml.Node) -> Decoded:
        if not document.is_scalar(node):
            logger.debug("shape mismatch: str expects a scalar, got %s", document.kind_of(node).value)
            return FAILED
        return success(document.scalar_text(node))


class LiteralStringCodec(EncodeOnlyCodec):
    """Literal string constants encode to text but have no decode direction."""

    def encode(self, value: str) -> yaml.Node:
        return document.scalar(str(value), tag=document.STR_TAG)


class NullCodec(Codec):
    def encode(self, value: None) -> yaml.Node:
        return document.null()

    def decode(self, node: yaml.Node) -> Decoded:
        if document.kind_of(node) is not NodeKind.NULL:
            logger.debug("shape mismatch: None expects a null node, got %s", document.kind_of(node).value)
            return FAILED
        return success(None)


class CharCodec(Codec):
    """
    Single-character rule.

    Encode keeps only the first character of the value (lossy for longer
    strings). Decode accepts a scalar of exactly one character.
    """

    def encode(self, value: str) -> yaml.Node:
        return document.scalar(str(value)[:1], tag=document.STR_TAG)

    def decode(self, node: yaml.Node) -> Decoded:
        if not document.is_scalar(node):
            logger.debug("shape mismatch: Char expects a scalar, got %s", document.kind_of(node).value)
            return FAILED
        text = document.scalar_text(node)
        if len(text) != 1:
            logger.debug("lexical mismatch: Char expects one character, got %r", text)
            return FAILED
        return success(Char(text))


class BoolCodec(Codec):
    def encode(self, value: bool) -> yaml.Node:
        return document.scalar("true" if value else "false")

    def decode(self, node: yaml.Node) -> Decoded:
        if not document.is_scalar(node):
            logger.debug("shape mismatch: bool expects a scalar, got %s", document.kind_of(node).value)
            return FAILED
        text = document.scalar_text(node)
        result = parse_bool(text)
        if result is None:
            logger.debug("lexical mismatch: %r is not a boolean token", text)
            return FAILED
        return success(result)
