"""
Native type markers.

Python has a single unbounded int, a single float and no character type.
These markers name the fixed-width native types the conversion layer
distinguishes, so a caller can ask for "a 32-bit signed integer" or
"a single character" when decoding.

Markers are real subclasses of int/float/str, so decoded values behave
like the builtin they wrap and encode() can infer the rule back from
type(value).

Examples:
    decode(node, Int32)       -> Decoded(Int32(42), True)
    decode(node, Array[int, 3]) -> Decoded([1, 2, 3], True)
"""

import functools
from typing import Any


class Integral(int):
    """Base for fixed-width integer markers."""
    BITS = 64
    SIGNED = True
    MIN = -(2 ** 63)
    MAX = 2 ** 63 - 1


class Int8(Integral):
    BITS = 8
    MIN = -(2 ** 7)
    MAX = 2 ** 7 - 1


class Int16(Integral):
    BITS = 16
    MIN = -(2 ** 15)
    MAX = 2 ** 15 - 1


class Int32(Integral):
    BITS = 32
    MIN = -(2 ** 31)
    MAX = 2 ** 31 - 1


class Int64(Integral):
    pass


class UInt8(Integral):
    BITS = 8
    SIGNED = False
    MIN = 0
    MAX = 2 ** 8 - 1


class UInt16(Integral):
    BITS = 16
    SIGNED = False
    MIN = 0
    MAX = 2 ** 16 - 1


class UInt32(Integral):
    BITS = 32
    SIGNED = False
    MIN = 0
    MAX = 2 ** 32 - 1


class UInt64(Integral):
    BITS = 64
    SIGNED = False
    MIN = 0
    MAX = 2 ** 64 - 1


class Floating(float):
    """Base for fixed-width floating-point markers."""
    BITS = 64
    MAX_DIGITS10 = 17


class Float32(Floating):
    BITS = 32
    MAX_DIGITS10 = 9


class Float64(Floating):
    pass


class Char(str):
    """A single character. Encoding a longer string keeps the first one."""
    __slots__ = ()


class Array(list):
    """
    Fixed-size array marker. Use as Array[element_type, size].

    Subscripting returns a list subclass carrying ELEMENT and SIZE; the
    same parameters always give the same class:
        Array[int, 3] is Array[int, 3]
    """

    ELEMENT: Any = None
    SIZE: Any = None

    def __class_getitem__(cls, params):
        element, size = params
        return _array_type(element, size)


@functools.lru_cache(maxsize=None)
def _array_type(element: Any, size: int) -> type:
    if not isinstance(size, int) or isinstance(size, bool) or size < 0:
        raise TypeError(f"Array size must be a non-negative int, got {size!r}")
    name = getattr(element, "__name__", None) or repr(element)
    return type(f"Array[{name}, {size}]", (Array,), {"ELEMENT": element, "SIZE": size})
