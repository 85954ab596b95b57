"""
Example user type plugged into the registry.

Shows the extension point: a dataclass with a hand-written Codec that
decodes its fields through the same registry, so nested values get the
same grammar and range checks as top-level ones.
"""
from dataclasses import dataclass, field
from typing import Dict, List

import yaml

from yamlconv import document
from yamlconv.codecs.base import Codec, Decoded, FAILED, success
from yamlconv.document import NodeKind
from yamlconv.registry import Registry, default_registry
from yamlconv.types import UInt16


@dataclass
class Endpoint:
    """
    A network endpoint.

    Properties:
        host: Host name or address
        port: TCP port (0-65535)
        tls: Whether the endpoint speaks TLS
        tags: Free-form labels
    """

    host: str
    port: int
    tls: bool = False
    tags: List[str] = field(default_factory=list)


_ENDPOINT_FIELDS = {
    "host": str,
    "port": UInt16,
    "tls": bool,
    "tags": List[str],
}


class EndpointCodec(Codec):
    """Endpoint <-> map node. host and port are required; tls and tags are optional."""

    def __init__(self, registry: Registry = default_registry):
        self.registry = registry

    def encode(self, value: Endpoint) -> yaml.Node:
        node = document.mapping()
        for name, type_ in _ENDPOINT_FIELDS.items():
            document.force_insert(
                node,
                document.scalar(name, tag=document.STR_TAG),
                self.registry.encode(getattr(value, name), type_),
            )
        return node

    def decode(self, node: yaml.Node) -> Decoded:
        if document.kind_of(node) is not NodeKind.MAP:
            return FAILED
        fields = {}
        for key_node, value_node in document.pairs(node):
            name = self.registry.decode_or(key_node, str, None)
            if name not in _ENDPOINT_FIELDS:
                return FAILED
            value, ok = self.registry.decode(value_node, _ENDPOINT_FIELDS[name])
            if not ok:
                return FAILED
            fields[name] = int(value) if name == "port" else value
        if "host" not in fields or "port" not in fields:
            return FAILED
        return success(Endpoint(**fields))


def install(registry: Registry = default_registry) -> Registry:
    """Register the Endpoint rule on a registry (once) and return it."""
    try:
        registry.codec_for(Endpoint)
    except TypeError:
        registry.register(Endpoint, EndpointCodec(registry))
    return registry


def build_example_services() -> Dict[str, List[Endpoint]]:
    return {
        "web": [
            Endpoint(host="10.0.0.1", port=80),
            Endpoint(host="10.0.0.1", port=443, tls=True, tags=["public"]),
        ],
        "db": [Endpoint(host="db.internal", port=5432, tags=["primary", "eu-west"])],
    }
