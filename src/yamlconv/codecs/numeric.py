"""
Integral and floating-point codecs.

Integral decode tries three mutually exclusive grammars in order:

    decimal   "42", "-42", "+42"
    octal     "0o52"        (sign not permitted)
    hex       "0x2a"        (sign not permitted)

The digits are parsed into a wide accumulator (signed or unsigned 64-bit)
and then range-checked against the target type. Anything outside either
range is a decode failure, never a wrapped value.

Floating-point encode disambiguates integral-valued floats from integers:
5.0 encodes as "5." and 10.0 as "10." so a later reader does not mistake
them for ints.
"""

import logging
import math
import struct
from typing import Optional, Type

import yaml

from yamlconv import document
from yamlconv.codecs.base import Codec, Decoded, FAILED, success
from yamlconv.grammar import (
    has_nonzero_mantissa,
    is_decimal,
    is_float,
    is_hex,
    is_infinity,
    is_nan,
    is_octal,
)
from yamlconv.types import Floating, Int64, Integral, UInt64


logger = logging.getLogger(__name__)

# Halfway between the largest finite 32-bit float and 2**128; values at or
# above it round to infinity.
_FLOAT32_OVERFLOW = (2 - 2 ** -24) * 2 ** 127


def parse_bounded(digits: str, base: int, low: int, high: int) -> Optional[int]:
    """
    Parse digits in the given base, bounded to [low, high].

    Args:
        digits: Text already matched by one of the integer grammars
        base: 10, 8 or 16
        low: Smallest accepted value
        high: Largest accepted value

    Returns:
        The parsed value, or None when it falls outside [low, high]
    """
    num = int(digits, base)
    if num < low or num > high:
        return None
    return num


class IntegralCodec(Codec):
    """
    Rule for one fixed-width integer type.

    Properties:
        target: The marker type (Int8 .. UInt64) or plain int
        low, high: Accepted range of the target
    """

    def __init__(self, target: Type[int]):
        self.target = target
        bounds = target if issubclass(target, Integral) else Int64
        self.low = bounds.MIN
        self.high = bounds.MAX
        wide = Int64 if bounds.SIGNED else UInt64
        self._wide_low = wide.MIN
        self._wide_high = wide.MAX

    def encode(self, value: int) -> yaml.Node:
        return document.scalar(str(int(value)))

    def decode(self, node: yaml.Node) -> Decoded:
        name = self.target.__name__
        if not document.is_scalar(node):
            logger.debug("shape mismatch: %s expects a scalar, got %s", name, document.kind_of(node).value)
            return FAILED
        text = document.scalar_text(node)
        if is_decimal(text):
            num = parse_bounded(text, 10, self._wide_low, self._wide_high)
        elif is_octal(text):
            num = parse_bounded(text[2:], 8, self._wide_low, self._wide_high)
        elif is_hex(text):
            num = parse_bounded(text[2:], 16, self._wide_low, self._wide_high)
        else:
            logger.debug("lexical mismatch: %r is not an integer", text)
            return FAILED
        if num is None or num < self.low or num > self.high:
            logger.debug("range overflow: %r does not fit %s", text, name)
            return FAILED
        return success(self.target(num))


def narrow(value: float, bits: int) -> float:
    """Round a Python float to the given width; overflow yields infinity."""
    if bits != 32 or math.isnan(value) or math.isinf(value):
        return value
    if abs(value) >= _FLOAT32_OVERFLOW:
        return math.copysign(math.inf, value)
    return struct.unpack("<f", struct.pack("<f", value))[0]


class FloatCodec(Codec):
    """
    Rule for one floating-point type.

    Encode finds the fewest significant digits (at most MAX_DIGITS10) that
    read back to the same value at the target width. The digits are laid
    out positionally while the decimal exponent is in [-4, MAX_DIGITS10);
    beyond that the exponent form is kept and tagged as a float.
    Decode parses into a 64-bit float, rejecting text that overflows or
    underflows it, then narrows to the target width.
    """

    def __init__(self, target: Type[float]):
        self.target = target
        width = target if issubclass(target, Floating) else Floating
        self.bits = width.BITS
        self.max_digits = width.MAX_DIGITS10

    def encode(self, value: float) -> yaml.Node:
        value = narrow(float(value), self.bits)
        if math.isnan(value):
            return document.scalar(".nan")
        if math.isinf(value):
            return document.scalar("-.inf" if value < 0 else ".inf")
        for precision in range(1, self.max_digits + 1):
            text = format(value, f".{precision}g")
            if narrow(float(text), self.bits) == value:
                break
        exponent = int(format(value, f".{precision - 1}e").partition("e")[2])
        if exponent < -4 or exponent >= self.max_digits:
            # YAML 1.1 readers only resolve floats with a dot; tag explicitly
            return document.scalar(text, tag=document.FLOAT_TAG)
        text = format(value, f".{max(precision - 1 - exponent, 0)}f")
        if "." in text:
            text = text.rstrip("0")
        else:
            text += "."
        return document.scalar(text)

    def decode(self, node: yaml.Node) -> Decoded:
        if not document.is_scalar(node):
            logger.debug(
                "shape mismatch: %s expects a scalar, got %s",
                self.target.__name__,
                document.kind_of(node).value,
            )
            return FAILED
        text = document.scalar_text(node)
        if is_float(text):
            num = float(text)
            if math.isinf(num):
                logger.debug("range overflow: %r exceeds a 64-bit float", text)
                return FAILED
            if num == 0.0 and has_nonzero_mantissa(text):
                logger.debug("range underflow: %r is below a 64-bit float", text)
                return FAILED
        elif is_infinity(text):
            num = -math.inf if text.startswith("-") else math.inf
        elif is_nan(text):
            num = math.nan
        else:
            logger.debug("lexical mismatch: %r is not a float", text)
            return FAILED
        return success(self.target(narrow(num, self.bits)))
