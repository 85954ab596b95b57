"""
The conversion rule contract.

A Codec pairs two operations for one native type:

    encode(value) -> yaml.Node      total, never fails
    decode(node)  -> Decoded        partial, failure is Decoded(None, False)

This is the single extension point: user types plug in by subclassing
Codec (or EncodeOnlyCodec) and registering an instance.

ARCHITECTURAL RULE:
    Codecs hold no per-call state.
    A decode mismatch is a value, never an exception.
"""

from abc import ABC, abstractmethod
from typing import Any, NamedTuple

import yaml


class Decoded(NamedTuple):
    """
    Result of a decode.

    Unpacks as a pair:
        value, ok = codec.decode(node)

    Properties:
        value: The decoded native value (None when ok is False)
        ok: Whether the node matched the target type
    """

    value: Any
    ok: bool


FAILED = Decoded(None, False)


def success(value: Any) -> Decoded:
    return Decoded(value, True)


class Codec(ABC):
    """
    Base class for all conversion rules.

    Subclasses implement encode() and decode(). Codecs whose type cannot be
    decoded derive from EncodeOnlyCodec instead.
    """

    decodable = True

    @abstractmethod
    def encode(self, value: Any) -> yaml.Node:
        ...

    @abstractmethod
    def decode(self, node: yaml.Node) -> Decoded:
        ...


class EncodeOnlyCodec(Codec):
    """A rule with no decode direction (literal and non-owning text types)."""

    decodable = False

    def decode(self, node: yaml.Node) -> Decoded:
        raise TypeError(f"{type(self).__name__} supports encode only")
