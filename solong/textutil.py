"""String helpers with the exact semantics the map loader relies on."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` to a two's-complement signed integer of ``bits`` bits."""
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _parse_integer(text: str) -> int:
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    digits = []
    for ch in body:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    magnitude = int("".join(digits)) if digits else 0
    return sign * magnitude


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits like a C ``int``.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0.
    """
    return _wrap(_parse_integer(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to 64 bits like a C ``long``."""
    return _wrap(_parse_integer(text), 64)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces.

    An empty (or NUL) separator never matches, so a non-empty text comes back
    as a single piece.
    """
    if separator in ("", "\0"):
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the rest of ``haystack`` from the match, ``haystack`` itself for
    an empty needle, or ``None`` when there is no match.
    """
    if not needle:
        return haystack
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return haystack[index:] if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the first differing code points, a shorter
    string comparing as if padded with NUL, or 0 when they match.
    """
    if count <= 0:
        return 0
    for a, b in zip_longest(first[:count], second[:count], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


def strchr(text: str, char: str) -> str | None:
    """Return ``text`` from the first ``char`` on, or ``None`` if absent.

    Searching for NUL yields the empty tail of the string.
    """
    _check_char(char)
    if char == "\0":
        return ""
    index = text.find(char)
    return text[index:] if index >= 0 else None


def strrchr(text: str, char: str) -> str | None:
    """Return ``text`` from the last ``char`` on, or ``None`` if absent."""
    _check_char(char)
    if char == "\0":
        return ""
    index = text.rfind(char)
    return text[index:] if index >= 0 else None