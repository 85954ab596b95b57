"""
Container codecs: sequences, fixed-size arrays, pairs and maps.

Element codecs are resolved by the registry when the container codec is
built, so a container never looks up a rule while transcoding.

Decode is atomic for every container kind: children are decoded into a
fresh container that is returned only when every child succeeded. The
first failing child fails the whole decode and nothing partial escapes.
"""

import logging
from typing import Callable, Iterable, Optional

import yaml

from yamlconv import document
from yamlconv.codecs.base import Codec, Decoded, FAILED, success
from yamlconv.document import NodeKind


logger = logging.getLogger(__name__)


def _expect_kind(node: yaml.Node, kind: NodeKind, what: str) -> bool:
    actual = document.kind_of(node)
    if actual is not kind:
        logger.debug("shape mismatch: %s expects a %s, got %s", what, kind.value, actual.value)
        return False
    return True


class SequenceCodec(Codec):
    """
    Rule for ordered sequences (list, deque) of one element type.

    Properties:
        element: Codec for each element
        factory: Builds the decoded container from a list
    """

    def __init__(self, element: Codec, factory: Callable[[list], Iterable] = list):
        self.element = element
        self.factory = factory
        self.decodable = element.decodable

    def encode(self, value: Iterable) -> yaml.Node:
        node = document.sequence()
        for item in value:
            document.append(node, self.element.encode(item))
        return node

    def decode(self, node: yaml.Node) -> Decoded:
        if not _expect_kind(node, NodeKind.SEQUENCE, "sequence"):
            return FAILED
        items = self._decode_children(document.children(node))
        if items is None:
            return FAILED
        return success(self.factory(items))

    def _decode_children(self, nodes) -> Optional[list]:
        items = []
        for index, child in enumerate(nodes):
            value, ok = self.element.decode(child)
            if not ok:
                logger.debug("element %d failed to decode", index)
                return None
            items.append(value)
        return items


class ArrayCodec(SequenceCodec):
    """Rule for a fixed-size array: a sequence of exactly `size` elements."""

    def __init__(self, element: Codec, size: int, factory: Callable[[list], Iterable] = list):
        super().__init__(element, factory)
        self.size = size

    def decode(self, node: yaml.Node) -> Decoded:
        if not _expect_kind(node, NodeKind.SEQUENCE, "array"):
            return FAILED
        if document.length(node) != self.size:
            logger.debug("shape mismatch: array expects %d elements, got %d", self.size, document.length(node))
            return FAILED
        return super().decode(node)


class PairCodec(Codec):
    """Rule for a 2-tuple: a sequence of exactly two children."""

    def __init__(self, first: Codec, second: Codec):
        self.first = first
        self.second = second
        self.decodable = first.decodable and second.decodable

    def encode(self, value: tuple) -> yaml.Node:
        first, second = value
        node = document.sequence()
        document.append(node, self.first.encode(first))
        document.append(node, self.second.encode(second))
        return node

    def decode(self, node: yaml.Node) -> Decoded:
        if not _expect_kind(node, NodeKind.SEQUENCE, "pair"):
            return FAILED
        if document.length(node) != 2:
            logger.debug("shape mismatch: pair expects 2 elements, got %d", document.length(node))
            return FAILED
        head, tail = document.children(node)
        first, ok = self.first.decode(head)
        if not ok:
            return FAILED
        second, ok = self.second.decode(tail)
        if not ok:
            return FAILED
        return success((first, second))


class MapCodec(Codec):
    """
    Rule for a key-unique map.

    Encode inserts pairs without duplicate checks; the source dict cannot
    hold duplicate keys. Decode lets a later duplicate key overwrite the
    earlier value.
    """

    def __init__(self, key: Codec, value: Codec):
        self.key = key
        self.value = value
        self.decodable = key.decodable and value.decodable

    def encode(self, value: dict) -> yaml.Node:
        node = document.mapping()
        for k, v in value.items():
            document.force_insert(node, self.key.encode(k), self.value.encode(v))
        return node

    def decode(self, node: yaml.Node) -> Decoded:
        if not _expect_kind(node, NodeKind.MAP, "map"):
            return FAILED
        result = {}
        for key_node, value_node in document.pairs(node):
            key, ok = self.key.decode(key_node)
            if not ok:
                logger.debug("map key failed to decode")
                return FAILED
            value, ok = self.value.decode(value_node)
            if not ok:
                logger.debug("map value for key %r failed to decode", key)
                return FAILED
            result[key] = value
        return success(result)
