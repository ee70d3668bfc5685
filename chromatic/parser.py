"""Reading colours from text.

Accepted forms: hex (``#f09``, ``ff0099``, with optional alpha digits),
``rgb()``/``rgba()`` with numbers or percentages (or bare ``r, g, b``),
``hsl()``/``hsla()`` with degree, ``rad``, ``grad`` or ``turn`` hues,
``gray()``, ``lab()``/``cielab()``, ``lch()``/``cielch()`` and CSS colour names.
"""

from __future__ import annotations

import math
import re
from typing import Callable, TypeVar

from chromatic.color import Color
from chromatic.named import find_named_color

__all__ = ["ColorParseError", "parse_color"]

T = TypeVar("T")

_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_ALPHA_RE = re.compile(r"[A-Za-z]+")
_FLOAT_WORDS = ("nan", "inf", "infinity")


class ColorParseError(ValueError):
    """Raised when a string cannot be read as a colour."""


class _NoMatch(Exception):
    """Internal signal that a sub-parser did not match at a position."""


def _space0(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t":
        pos += 1
    return pos


def _space1(text: str, pos: int) -> int:
    end = _space0(text, pos)
    if end == pos:
        raise _NoMatch
    return end


def _tag(text: str, pos: int, tag: str) -> int:
    if not text.startswith(tag, pos):
        raise _NoMatch
    return pos + len(tag)


def _tag_no_case(text: str, pos: int, tag: str) -> int:
    if text[pos : pos + len(tag)].lower() != tag.lower():
        raise _NoMatch
    return pos + len(tag)


def _tag_any(text: str, pos: int, tags: tuple[str, ...]) -> int:
    for tag in tags:
        if text.startswith(tag, pos):
            return pos + len(tag)
    raise _NoMatch


def _alt(text: str, pos: int, *parsers: Callable[[str, int], tuple[T, int]]) -> tuple[T, int]:
    for parser in parsers:
        try:
            return parser(text, pos)
        except _NoMatch:
            continue
    raise _NoMatch


def _double(text: str, pos: int) -> tuple[float, int]:
    match = _FLOAT_RE.match(text, pos)
    if match:
        end = match.end()
        if match.group()[-1:] not in "eE" and end < len(text) and text[end] in "eE":
            # An exponent marker without digits makes the number malformed.
            exponent = re.match(r"[eE][+-]?[0-9]+", text[end:])
            if exponent is None:
                raise _NoMatch
        return float(match.group()), end
    for word in _FLOAT_WORDS:
        if text[pos : pos + len(word)].lower() == word:
            return float(word), pos + len(word)
    raise _NoMatch


def _separator(text: str, pos: int) -> int:
    try:
        after_comma = _tag(text, _space0(text, pos), ",")
        return _space0(text, after_comma)
    except _NoMatch:
        return _space1(text, pos)


def _percentage(text: str, pos: int) -> tuple[float, int]:
    value, pos = _double(text, pos)
    return value / 100.0, _tag(text, pos, "%")


def _degrees(text: str, pos: int) -> tuple[float, int]:
    value, pos = _double(text, pos)
    for suffix in ("°", "deg"):
        if text.startswith(suffix, pos):
            return value, pos + len(suffix)
    return value, pos


def _rads(text: str, pos: int) -> tuple[float, int]:
    value, pos = _double(text, pos)
    return value * 180.0 / math.pi, _tag(text, pos, "rad")


def _grads(text: str, pos: int) -> tuple[float, int]:
    value, pos = _double(text, pos)
    return value * 360.0 / 400.0, _tag(text, pos, "grad")


def _turns(text: str, pos: int) -> tuple[float, int]:
    value, pos = _double(text, pos)
    return value * 360.0, _tag(text, pos, "turn")


def _angle(text: str, pos: int) -> tuple[float, int]:
    return _alt(text, pos, _turns, _grads, _rads, _degrees)


def _alpha(text: str, pos: int) -> tuple[float, int]:
    try:
        after = _separator(text, pos)
        return _alt(text, after, _percentage, _double)
    except _NoMatch:
        return 1.0, pos


def _triple(
    text: str,
    pos: int,
    first: Callable[[str, int], tuple[float, int]],
    second: Callable[[str, int], tuple[float, int]],
    third: Callable[[str, int], tuple[float, int]],
) -> tuple[tuple[float, float, float], int]:
    a, pos = first(text, pos)
    b, pos = second(text, _separator(text, pos))
    c, pos = third(text, _separator(text, pos))
    return (a, b, c), pos


def _close(text: str, pos: int, required: bool = True) -> int:
    pos = _space0(text, pos)
    return _tag(text, pos, ")") if required else pos


def _parse_hex(text: str, pos: int) -> tuple[Color, int]:
    if text.startswith("#", pos):
        pos += 1
    match = _HEX_RE.match(text, pos)
    if match is None:
        raise _NoMatch
    digits = match.group()
    if len(digits) in (3, 4):
        channels = [int(d * 2, 16) for d in digits]
    elif len(digits) in (6, 8):
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    else:
        raise _NoMatch
    r, g, b = channels[:3]
    if len(channels) == 4:
        return Color.from_rgba(r, g, b, channels[3] / 255.0), match.end()
    return Color.from_rgb(r, g, b), match.end()


def _rgb_prefix(text: str, pos: int) -> tuple[bool, int]:
    try:
        return True, _tag_any(text, pos, ("rgb(", "rgba("))
    except _NoMatch:
        return False, pos


def _parse_numeric_rgb(text: str, pos: int) -> tuple[Color, int]:
    prefixed, pos = _rgb_prefix(text, pos)
    (r, g, b), pos = _triple(text, _space0(text, pos), _double, _double, _double)
    alpha, pos = _alpha(text, pos)
    pos = _close(text, pos, prefixed)
    return Color.from_rgba_float(r / 255.0, g / 255.0, b / 255.0, alpha), pos


def _parse_percentage_rgb(text: str, pos: int) -> tuple[Color, int]:
    prefixed, pos = _rgb_prefix(text, pos)
    (r, g, b), pos = _triple(text, _space0(text, pos), _percentage, _percentage, _percentage)
    alpha, pos = _alpha(text, pos)
    pos = _close(text, pos, prefixed)
    return Color.from_rgba_float(r, g, b, alpha), pos


def _parse_hsl(text: str, pos: int) -> tuple[Color, int]:
    pos = _tag_any(text, pos, ("hsl(", "hsla("))
    (h, s, l), pos = _triple(text, _space0(text, pos), _angle, _percentage, _percentage)  # noqa: E741
    alpha, pos = _alpha(text, pos)
    return Color.from_hsla(h, s, l, alpha), _close(text, pos)


def _parse_gray(text: str, pos: int) -> tuple[Color, int]:
    pos = _space0(text, _tag(text, pos, "gray("))
    value, pos = _alt(text, pos, _percentage, _double)
    if not value >= 0.0:
        raise _NoMatch
    return Color.from_rgb_float(value, value, value), _close(text, pos)


def _cie_function(text: str, pos: int, name: str) -> int:
    try:
        pos = _tag_no_case(text, pos, "cie")
    except _NoMatch:
        pass
    return _space0(text, _tag_no_case(text, pos, name + "("))


def _parse_lab(text: str, pos: int) -> tuple[Color, int]:
    pos = _cie_function(text, pos, "lab")
    (l, a, b), pos = _triple(text, pos, _double, _double, _double)  # noqa: E741
    alpha, pos = _alpha(text, pos)
    return Color.from_lab(l, a, b, alpha), _close(text, pos)


def _parse_lch(text: str, pos: int) -> tuple[Color, int]:
    pos = _cie_function(text, pos, "lch")
    (l, c, h), pos = _triple(text, pos, _double, _double, _angle)  # noqa: E741
    alpha, pos = _alpha(text, pos)
    return Color.from_lch(l, c, h, alpha), _close(text, pos)


def _parse_named(text: str, pos: int) -> tuple[Color, int]:
    match = _ALPHA_RE.fullmatch(text, pos)
    if match is None:
        raise _NoMatch
    color = find_named_color(match.group())
    if color is None:
        raise _NoMatch
    return color, match.end()


_PARSERS = (
    _parse_hex,
    _parse_numeric_rgb,
    _parse_percentage_rgb,
    _parse_hsl,
    _parse_gray,
    _parse_lab,
    _parse_lch,
    _parse_named,
)


def parse_color(text: str) -> Color:
    """Read a colour from ``text``, ignoring surrounding whitespace.

    Raises :class:`ColorParseError` if no accepted form matches the whole string.
    """
    stripped = text.strip()
    for parser in _PARSERS:
        try:
            color, end = parser(stripped, 0)
        except _NoMatch:
            continue
        if end == len(stripped):
            return color
    raise ColorParseError(f"invalid color string: {text!r}")