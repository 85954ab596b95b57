"""Conversion rules (codecs) for scalars, numbers, binary data and containers."""

from .base import FAILED, Codec, Decoded, EncodeOnlyCodec, success
from .binary import BinaryCodec
from .containers import ArrayCodec, MapCodec, PairCodec, SequenceCodec
from .numeric import FloatCodec, IntegralCodec
from .scalars import BoolCodec, CharCodec, LiteralStringCodec, NodeCodec, NullCodec, StringCodec

__all__ = [
    "FAILED",
    "Codec",
    "Decoded",
    "EncodeOnlyCodec",
    "success",
    "BinaryCodec",
    "ArrayCodec",
    "MapCodec",
    "PairCodec",
    "SequenceCodec",
    "FloatCodec",
    "IntegralCodec",
    "BoolCodec",
    "CharCodec",
    "LiteralStringCodec",
    "NodeCodec",
    "NullCodec",
    "StringCodec",
]
