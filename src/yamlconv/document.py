"""
Document tree adapter over the PyYAML representation graph.

The conversion layer never builds or walks PyYAML nodes directly.
Everything goes through the narrow interface in this module:

    - kind queries (NULL, SCALAR, SEQUENCE, MAP)
    - scalar text access
    - sequence length and children
    - map key/value pairs
    - node construction, append, checked and unchecked insert

PyYAML has no distinct null node class. A ScalarNode carrying the YAML
null tag is treated as the NULL kind; every other ScalarNode is SCALAR.

ARCHITECTURAL RULE:
    Tokenizing, indentation and anchors belong to PyYAML.
    This module only adapts the resulting node graph.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

import yaml
from yaml.resolver import Resolver


NULL_TAG = "tag:yaml.org,2002:null"
STR_TAG = "tag:yaml.org,2002:str"
BINARY_TAG = "tag:yaml.org,2002:binary"
FLOAT_TAG = "tag:yaml.org,2002:float"
SEQ_TAG = "tag:yaml.org,2002:seq"
MAP_TAG = "tag:yaml.org,2002:map"

# Only resolve() is used; it reads the class-level implicit resolver table.
_RESOLVER = Resolver()


class NodeKind(Enum):
    """Kinds of document node the conversion layer distinguishes."""
    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAP = "map"


def kind_of(node: yaml.Node) -> NodeKind:
    if isinstance(node, yaml.ScalarNode):
        if node.tag == NULL_TAG:
            return NodeKind.NULL
        return NodeKind.SCALAR
    if isinstance(node, yaml.SequenceNode):
        return NodeKind.SEQUENCE
    if isinstance(node, yaml.MappingNode):
        return NodeKind.MAP
    raise TypeError(f"Not a document node: {type(node)}")


def is_scalar(node: yaml.Node) -> bool:
    return kind_of(node) is NodeKind.SCALAR


def scalar_text(node: yaml.Node) -> str:
    return node.value


def children(node: yaml.SequenceNode) -> List[yaml.Node]:
    return list(node.value)


def length(node: yaml.Node) -> int:
    """Number of children of a sequence or pairs of a map; 0 for scalars."""
    if isinstance(node, yaml.ScalarNode):
        return 0
    return len(node.value)


def pairs(node: yaml.MappingNode) -> Iterator[Tuple[yaml.Node, yaml.Node]]:
    return iter(list(node.value))


def null() -> yaml.ScalarNode:
    return yaml.ScalarNode(NULL_TAG, "~")


def scalar(text: str, tag: Optional[str] = None) -> yaml.ScalarNode:
    """
    Build a SCALAR node.

    Args:
        text: Scalar payload
        tag: Explicit tag. When omitted, the tag a plain scalar with this
            text would resolve to is used, so "5." becomes a float and
            "true" a bool when the tree is emitted.

    Returns:
        A new ScalarNode
    """
    if tag is None:
        tag = _RESOLVER.resolve(yaml.ScalarNode, text, (True, False))
    return yaml.ScalarNode(tag, text)


def sequence() -> yaml.SequenceNode:
    return yaml.SequenceNode(SEQ_TAG, [])


def mapping() -> yaml.MappingNode:
    return yaml.MappingNode(MAP_TAG, [])


def append(seq: yaml.SequenceNode, child: yaml.Node) -> None:
    seq.value.append(child)


def force_insert(node: yaml.MappingNode, key: yaml.Node, value: yaml.Node) -> None:
    """Add a key/value pair without looking for an existing equal key."""
    node.value.append((key, value))


def insert(node: yaml.MappingNode, key: yaml.Node, value: yaml.Node) -> None:
    """Add a key/value pair; an existing equal key has its value replaced."""
    for index, (existing, _) in enumerate(node.value):
        if nodes_equal(existing, key):
            node.value[index] = (existing, value)
            return
    node.value.append((key, value))


def nodes_equal(a: yaml.Node, b: yaml.Node) -> bool:
    """Structural equality: same kind, same text, equal children in order."""
    if a is b:
        return True
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is NodeKind.NULL:
        return True
    if kind is NodeKind.SCALAR:
        return a.value == b.value
    if len(a.value) != len(b.value):
        return False
    if kind is NodeKind.SEQUENCE:
        return all(nodes_equal(x, y) for x, y in zip(a.value, b.value))
    return all(
        nodes_equal(ka, kb) and nodes_equal(va, vb)
        for (ka, va), (kb, vb) in zip(a.value, b.value)
    )


def load(text: str) -> yaml.Node:
    """Compose YAML (or JSON) text into a node. An empty document is NULL."""
    node = yaml.compose(text, Loader=yaml.SafeLoader)
    if node is None:
        return null()
    return node


def dump(node: yaml.Node) -> str:
    return yaml.serialize(node, Dumper=yaml.SafeDumper)
