"""
Dispatch registry: selects the conversion rule for a native type.

Rules are chosen by priority:

    1. Built-in rules, matched exactly:
           yaml.Node, str, Literal[...] (encode only), None, Char, bool,
           int and Int8..UInt64, float and Float32/Float64,
           List[T], Deque[T], Array[T, N], Tuple[A, B], Dict[K, V],
           bytes, bytearray
    2. A user rule added with register() (the only extension point)

A codec is built once per type and cached. Container codecs resolve
their element codecs while being built, so transcoding never performs a
lookup per value.

Asking to decode into a type with no decode direction (a literal string,
or a container of one) raises TypeError at lookup, before any node is
looked at. A decode mismatch never raises; it returns Decoded(None, False).

Example:
    node = encode({"ports": [80, 443]})
    value, ok = decode(node, Dict[str, List[UInt16]])
"""

import collections
import logging
import typing
import warnings
from typing import Any, Dict, Optional

import yaml

from yamlconv.codecs.base import Codec, Decoded, EncodeOnlyCodec
from yamlconv.codecs.binary import BinaryCodec
from yamlconv.codecs.containers import ArrayCodec, MapCodec, PairCodec, SequenceCodec
from yamlconv.codecs.numeric import FloatCodec, IntegralCodec
from yamlconv.codecs.scalars import (
    BoolCodec,
    CharCodec,
    LiteralStringCodec,
    NodeCodec,
    NullCodec,
    StringCodec,
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


logger = logging.getLogger(__name__)

INTEGRAL_TYPES = (int, Int8, Int16, Int32, Int64, UInt8, UInt16, UInt32, UInt64)
FLOAT_TYPES = (float, Float32, Float64)
LITERAL_STRING_TYPES = tuple(
    t for t in (getattr(typing, "LiteralString", None),) if t is not None
)

# Decoded values of these are unhashable, so they cannot be map keys.
_UNHASHABLE = (list, dict, collections.deque, bytearray)


class ConversionError(ValueError):
    """Raised by expect() when a node does not decode into the requested type."""

    def __init__(self, type_: Any, node: yaml.Node):
        self.type = type_
        self.node = node
        super().__init__(f"Cannot convert {type(node).__name__} to {_type_name(type_)}")


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or repr(type_)


def _is_unhashable(type_: Any) -> bool:
    """True when type_, or any type nested in it, decodes to an unhashable value."""
    origin = typing.get_origin(type_) or type_
    if isinstance(origin, type) and issubclass(origin, _UNHASHABLE):
        return True
    return any(_is_unhashable(arg) for arg in typing.get_args(type_))


class InferredCodec(EncodeOnlyCodec):
    """Stands in for Any: picks the rule from each value's runtime type."""

    def __init__(self, registry: "Registry"):
        self._registry = registry

    def encode(self, value: Any) -> yaml.Node:
        return self._registry.encode(value)


class Registry:
    """
    Type-indexed table of conversion rules.

    Built-in rules always win. User rules cover every other type.

    Properties:
        _user: User rules keyed by type
        _cache: Codecs already built, keyed by type descriptor
    """

    def __init__(self):
        self._user: Dict[Any, Codec] = {}
        self._cache: Dict[Any, Codec] = {}

    def register(self, type_: Any, codec: Codec) -> None:
        """
        Add a user rule for a type with no built-in rule.

        Args:
            type_: The native type the rule converts
            codec: A Codec (or EncodeOnlyCodec) instance

        Raises:
            TypeError: If a built-in rule already covers type_, or codec is
                not a Codec
        """
        if not isinstance(codec, Codec):
            raise TypeError(f"Expected a Codec instance, got {type(codec).__name__}")
        if self._builtin(type_) is not None:
            raise TypeError(f"{_type_name(type_)} has a built-in conversion rule")
        if type_ in self._user:
            warnings.warn(
                f"Replacing conversion rule for {_type_name(type_)}",
                UserWarning,
                stacklevel=2,
            )
        self._user[type_] = codec
        self._cache.clear()
        logger.info("Registered conversion rule %s for %s", type(codec).__name__, _type_name(type_))

    def codec_for(self, type_: Any) -> Codec:
        """
        Return the rule for type_, building it on first use.

        Raises:
            TypeError: If no built-in or user rule covers type_
        """
        try:
            return self._cache[type_]
        except KeyError:
            pass
        codec = self._builtin(type_)
        if codec is None:
            codec = self._user.get(type_)
        if codec is None:
            raise TypeError(f"No conversion rule for {_type_name(type_)}")
        self._cache[type_] = codec
        return codec

    def decoder_for(self, type_: Any) -> Codec:
        """Like codec_for(), but raises TypeError for encode-only types."""
        codec = self.codec_for(type_)
        if not codec.decodable:
            raise TypeError(f"{_type_name(type_)} supports encode only")
        return codec

    def infer_type(self, value: Any) -> Any:
        """Type descriptor used when encode() is called without one."""
        if value is None:
            return None
        if isinstance(value, yaml.Node):
            return yaml.Node
        if type(value) is tuple and len(value) != 2:
            raise TypeError(f"No conversion rule for a tuple of length {len(value)}")
        return type(value)

    def encode(self, value: Any, type_: Any = None) -> yaml.Node:
        if type_ is None:
            type_ = self.infer_type(value)
        return self.codec_for(type_).encode(value)

    def decode(self, node: yaml.Node, type_: Any) -> Decoded:
        return self.decoder_for(type_).decode(node)

    def decode_or(self, node: yaml.Node, type_: Any, fallback: Any) -> Any:
        """Decoded value, or fallback when the node does not match type_."""
        value, ok = self.decode(node, type_)
        return value if ok else fallback

    def expect(self, node: yaml.Node, type_: Any) -> Any:
        """Decoded value; raises ConversionError when the node does not match."""
        value, ok = self.decode(node, type_)
        if not ok:
            raise ConversionError(type_, node)
        return value

    def _builtin(self, type_: Any) -> Optional[Codec]:
        # Scalars first; exact matches only, so user subclasses fall through.
        if type_ is yaml.Node:
            return NodeCodec()
        if type_ is str:
            return StringCodec()
        if type_ in LITERAL_STRING_TYPES:
            return LiteralStringCodec()
        if type_ is None or type_ is type(None):
            return NullCodec()
        if type_ is Char:
            return CharCodec()
        if type_ is bool:
            return BoolCodec()
        if type_ in INTEGRAL_TYPES:
            return IntegralCodec(type_)
        if type_ in FLOAT_TYPES:
            return FloatCodec(type_)
        if type_ in (bytes, bytearray):
            return BinaryCodec(type_)
        if type_ is Any:
            return InferredCodec(self)

        origin = typing.get_origin(type_)
        args = typing.get_args(type_)
        if origin is None and isinstance(type_, type) and issubclass(type_, Array):
            if type_.SIZE is None:
                return None
            return ArrayCodec(self.codec_for(type_.ELEMENT), type_.SIZE, type_)
        if origin is typing.Literal:
            if not all(isinstance(arg, str) for arg in args):
                return None
            return LiteralStringCodec()

        # Bare containers carry no element types; their elements are inferred.
        if type_ in (list, collections.deque, dict, tuple):
            origin = type_
        if origin is list:
            element = args[0] if args else Any
            return SequenceCodec(self.codec_for(element))
        if origin is collections.deque:
            element = args[0] if args else Any
            return SequenceCodec(self.codec_for(element), collections.deque)
        if origin is tuple:
            if not args:
                args = (Any, Any)
            if len(args) != 2 or args[1] is Ellipsis:
                return None
            return PairCodec(self.codec_for(args[0]), self.codec_for(args[1]))
        if origin is dict:
            key, value = args if args else (Any, Any)
            if _is_unhashable(key):
                raise TypeError(f"{_type_name(key)} cannot be used as a map key type")
            return MapCodec(self.codec_for(key), self.codec_for(value))
        return None


default_registry = Registry()


def register(type_: Any, codec: Codec) -> None:
    default_registry.register(type_, codec)


def encode(value: Any, type_: Any = None) -> yaml.Node:
    """Encode a native value into a document node. Never fails for a known type."""
    return default_registry.encode(value, type_)


def decode(node: yaml.Node, type_: Any) -> Decoded:
    """Decode a node into type_. Returns Decoded(value, ok)."""
    return default_registry.decode(node, type_)


def decode_or(node: yaml.Node, type_: Any, fallback: Any) -> Any:
    return default_registry.decode_or(node, type_, fallback)


def expect(node: yaml.Node, type_: Any) -> Any:
    return default_registry.expect(node, type_)
