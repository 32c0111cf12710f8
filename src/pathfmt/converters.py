"""String hooks for coercing path values into field types, and back."""
from collections.abc import Callable
from struct import pack, unpack
from typing import Any

from cattrs import Converter

from .types import INT_BOUNDS, UINT_BOUNDS, Float32

__all__ = ["make_converter"]

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_RADIX_PREFIXES = ("0x", "0o", "0b")


def _check_bare(raw: str) -> None:
    if not raw or not raw.isascii() or raw != raw.strip():
        raise ValueError(f"invalid syntax: {raw!r}")


def parse_bool(raw: str) -> bool:
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {raw!r}")


def parse_int(raw: str) -> int:
    """Parse a signed integer.

    A `0x`, `0o` or `0b` prefix (after an optional sign) selects the radix,
    anything else is read as base 10, leading zeros included. Unlike C-style
    base-0 parsing, a bare leading zero doesn't select octal: `010` is 10.
    """
    _check_bare(raw)
    digits = raw[1:] if raw[0] in "+-" else raw
    if digits[:2].lower() in _RADIX_PREFIXES:
        return int(raw, 0)
    return int(raw, 10)


def parse_uint(raw: str) -> int:
    if raw[:1] in ("+", "-"):
        raise ValueError(f"invalid syntax: {raw!r}")
    return parse_int(raw)


def parse_float(raw: str) -> float:
    _check_bare(raw)
    return float(raw)


def to_float32(value: float) -> float:
    """Round to the nearest single-precision value.

    Raises `OverflowError` for finite values out of range.
    """
    return unpack("<f", pack("<f", value))[0]


def format_float32(value: float) -> str:
    """The shortest text reading back as the same single-precision value."""
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if to_float32(float(text)) == value:
            return text
    return repr(value)


def _make_bounded_hook(
    parser: Callable[[str], int], low: int, high: int
) -> Callable[[str, Any], int]:
    def structure_bounded(raw: str, type: Any) -> int:
        value = parser(raw)
        if not low <= value <= high:
            raise ValueError(f"value out of range: {raw!r}")
        return type(value)

    return structure_bounded


def make_converter() -> Converter:
    """Create a converter structuring path text into the supported field types.

    Unstructuring produces the text a value renders as in a path.
    """
    res = Converter()

    res.register_structure_hook(bool, lambda v, _: parse_bool(v))
    res.register_structure_hook(int, lambda v, _: parse_int(v))
    res.register_structure_hook(float, lambda v, _: parse_float(v))
    res.register_structure_hook(str, lambda v, _: v)
    res.register_structure_hook_func(
        lambda t: t is Float32, lambda v, _: Float32(to_float32(parse_float(v)))
    )
    for t, (low, high) in INT_BOUNDS.items():
        res.register_structure_hook_func(
            lambda type, _t=t: type is _t, _make_bounded_hook(parse_int, low, high)
        )
    for t, (low, high) in UINT_BOUNDS.items():
        res.register_structure_hook_func(
            lambda type, _t=t: type is _t, _make_bounded_hook(parse_uint, low, high)
        )

    res.register_unstructure_hook(bool, lambda v: "true" if v else "false")
    res.register_unstructure_hook_func(lambda t: t is Float32, format_float32)

    return res

