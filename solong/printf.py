"""A small printf supporting the conversions %c %s %d %i %p %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_STRING = "(null)"

_UINT32 = (1 << 32) - 1
_UINT64 = (1 << 64) - 1


def digit_count(number: int, base_size: int) -> int:
    """Return how many digits ``number`` takes in base ``base_size``.

    Zero takes one digit.
    """
    if base_size < 2:
        raise ValueError("base must have at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    count = 1
    while number >= base_size:
        number //= base_size
        count += 1
    return count


def to_base(number: int, digits: str) -> str:
    """Write a non-negative ``number`` using ``digits`` as the base's symbols."""
    base = len(digits)
    if base < 2:
        raise ValueError("base must have at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    symbols = []
    while True:
        number, remainder = divmod(number, base)
        symbols.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(symbols))


def _signed32(value: int) -> int:
    return ((value + (1 << 31)) & _UINT32) - (1 << 31)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _as_int(value: Any, spec: str) -> int:
    if value is None and spec == "p":
        return 0
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdipuxX":
        return ""
    value = _next_arg(args, spec)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c expects a single character")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        return NULL_STRING if value is None else str(value)
    number = _as_int(value, spec)
    if spec in "di":
        return str(_signed32(number))
    if spec == "p":
        return "0x" + to_base(number & _UINT64, HEX_LOWER)
    if spec == "u":
        return to_base(number & _UINT32, DECIMAL)
    if spec == "x":
        return to_base(number & _UINT32, HEX_LOWER)
    return to_base(number & _UINT32, HEX_UPPER)


def sprintf(template: str, *args: Any) -> str:
    """Format ``template`` with ``args`` and return the resulting text.

    Unknown conversions produce nothing; a lone trailing ``%`` is dropped.
    """
    values = iter(args)
    pieces = []
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)