"""
yamlconv: typed conversion between Python values and YAML document nodes.

Encode turns a native value into a PyYAML node; decode turns a node back
into a value of a requested type and reports whether it matched:

    node = encode([1, 2, 3])
    value, ok = decode(node, List[Int32])

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - YAML tokenizing, indentation or anchors (PyYAML's job)
    - Emission style
    - Schemas beyond per-type shape and grammar checks

Encode never fails for a type with a rule.
Decode failure is a value (Decoded(None, False)), never an exception.
"""

from yamlconv.codecs.base import Codec, Decoded, EncodeOnlyCodec
from yamlconv.document import NodeKind, dump, kind_of, load
from yamlconv.registry import (
    ConversionError,
    Registry,
    decode,
    decode_or,
    default_registry,
    encode,
    expect,
    register,
)
from yamlconv.types import (
    Array,
    Char,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__version__ = "0.1.0"

__all__ = [
    "Codec",
    "Decoded",
    "EncodeOnlyCodec",
    "NodeKind",
    "dump",
    "kind_of",
    "load",
    "ConversionError",
    "Registry",
    "decode",
    "decode_or",
    "default_registry",
    "encode",
    "expect",
    "register",
    "Array",
    "Char",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
