"""
Scalar grammar for the conversion layer.

Every matcher is a full-string match against a pattern compiled once at
import time. Compiled patterns are immutable and safe to share between
threads.

Accepted forms:
    decimal   [-+]?[0-9]+
    octal     0o[0-7]+           (no sign)
    hex       0x[0-9a-fA-F]+     (no sign)
    float     [-+]?(.d+|d+(.d*)?)([eE][-+]?d+)?
    infinity  [-+]?(.inf|.Inf|.INF)
    nan       .nan|.NaN|.NAN
"""

import re
from typing import Optional


DECIMAL_RE = re.compile(r"[-+]?[0-9]+")
OCTAL_RE = re.compile(r"0o[0-7]+")
HEX_RE = re.compile(r"0x[0-9a-fA-F]+")
FLOAT_RE = re.compile(r"[-+]?(\.[0-9]+|[0-9]+(\.[0-9]*)?)([eE][-+]?[0-9]+)?")
INF_RE = re.compile(r"[-+]?(\.inf|\.Inf|\.INF)")
NAN_RE = re.compile(r"\.nan|\.NaN|\.NAN")
# Mantissa with at least one non-zero digit, e.g. "0.001e-400" but not "0.0e5".
NONZERO_MANTISSA_RE = re.compile(r"[-+]?[0.]*[1-9]")


def _case_variants(*words: str) -> frozenset:
    # lower, Capitalized and UPPER spellings only; "tRUE" is not a boolean
    return frozenset(
        variant
        for word in words
        for variant in (word.lower(), word.capitalize(), word.upper())
    )


TRUE_TOKENS = _case_variants("true", "yes", "on", "y")
FALSE_TOKENS = _case_variants("false", "no", "off", "n")


def is_decimal(text: str) -> bool:
    return DECIMAL_RE.fullmatch(text) is not None


def is_octal(text: str) -> bool:
    return OCTAL_RE.fullmatch(text) is not None


def is_hex(text: str) -> bool:
    return HEX_RE.fullmatch(text) is not None


def is_float(text: str) -> bool:
    return FLOAT_RE.fullmatch(text) is not None


def is_infinity(text: str) -> bool:
    return INF_RE.fullmatch(text) is not None


def is_nan(text: str) -> bool:
    return NAN_RE.fullmatch(text) is not None


def has_nonzero_mantissa(text: str) -> bool:
    return NONZERO_MANTISSA_RE.match(text) is not None


def parse_bool(text: str) -> Optional[bool]:
    """Return True/False for a canonical boolean token, None otherwise."""
    if text in TRUE_TOKENS:
        return True
    if text in FALSE_TOKENS:
        return False
    return None
