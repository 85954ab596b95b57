"""
YAML text helpers on top of the conversion layer.

Text goes through PyYAML (compose / serialize); values go through the
registry. JSON text is accepted on the way in, since PyYAML composes it
into the same node graph.
"""
from __future__ import annotations

from typing import Any

from yamlconv import document
from yamlconv.codecs.base import Decoded
from yamlconv.registry import Registry, default_registry


def to_yaml(value: Any, type_: Any = None, registry: Registry = default_registry) -> str:
    return document.dump(registry.encode(value, type_))


def from_yaml(text: str, type_: Any, registry: Registry = default_registry) -> Decoded:
    return registry.decode(document.load(text), type_)


def from_json(text: str, type_: Any, registry: Registry = default_registry) -> Decoded:
    return from_yaml(text, type_, registry)
