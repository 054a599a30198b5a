"""
Parsers for single line vcgencmd responses.

Every response looks like ``label[:](index)=value[unit]``, for example:

    temp=42.8'C
    core:   volt=1.20V
    arm:    frequency(45)=700000000
    arm=448M
    throttled=0x50000
"""
import re

from vcgencmd.exceptions import FormatError, ParseFloatError, ParseIntError

# ASCII only, no digit separators
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
INT_PATTERNS = {
    10: re.compile(r"[+-]?[0-9]+"),
    16: re.compile(r"[+-]?[0-9A-Fa-f]+"),
}


def _strip_suffix(value: str, suffix: str) -> str:
    while suffix and value.endswith(suffix):
        value = value[:-len(suffix)]

    return value


def _strip_prefix(value: str, prefix: str) -> str:
    while prefix and value.startswith(prefix):
        value = value[len(prefix):]

    return value


def _to_float(raw: str, value: str) -> float:
    if not FLOAT_PATTERN.fullmatch(value):
        raise ParseFloatError(raw, value)

    return float(value)


def _to_int(raw: str, value: str, base: int = 10) -> int:
    if not INT_PATTERNS[base].fullmatch(value):
        raise ParseIntError(raw, value)

    return int(value, base)


def trim_before_equals(raw: str) -> str:
    _, separator, value = raw.partition("=")
    if not separator:
        raise FormatError(raw)

    return value.strip()


def temp(raw: str) -> float:
    # Example: temp=42.8'C
    value = _strip_suffix(trim_before_equals(raw), "'C").strip()

    return _to_float(raw, value)


def volts(raw: str) -> float:
    # Example: core:   volt=1.20V
    value = _strip_suffix(trim_before_equals(raw), "V").strip()

    return _to_float(raw, value)


def frequency(raw: str) -> int:
    # Example: arm:    frequency(45)=700000000
    return _to_int(raw, trim_before_equals(raw))


def mem(raw: str) -> int:
    # Example: arm=448M
    value = _strip_suffix(trim_before_equals(raw), "M").strip()

    return _to_int(raw, value)


def throttled(raw: str) -> int:
    # Example: throttled=0x50000
    value = _strip_prefix(trim_before_equals(raw), "0x")

    return _to_int(raw, value, 16)
