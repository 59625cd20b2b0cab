"""Parsers for the textual pairs and triples accepted on the command line."""

from __future__ import annotations

import re
from typing import Callable, Optional, TypeVar

from .color import CHANNEL_MAX, Color
from .geometry import ComplexPoint, PixelBounds

T = TypeVar("T")

_PLAIN_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?(inf|infinity|nan)", re.IGNORECASE)


def _convert(text: str, convert: Callable[[str], T]) -> Optional[T]:
    # int() and float() accept padding and digit separators, which we do not
    if not _PLAIN_NUMBER.fullmatch(text):
        return None
    try:
        return convert(text)
    except ValueError:
        return None


def parse_pair(s: str, separator: str, convert: Callable[[str], T] = float) -> Optional[tuple[T, T]]:
    """Parse ``s`` as ``<left><separator><right>``, e.g. ``"400x600"`` or ``"1.0,0.5"``.

    The string is split at the first ``separator``. Both halves must convert
    with ``convert``; otherwise ``None`` is returned.
    """

    index = s.find(separator)
    if index < 0:
        return None
    left = _convert(s[:index], convert)
    right = _convert(s[index + 1:], convert)
    if left is None or right is None:
        return None
    return (left, right)


def parse_triad(s: str, separator: str, convert: Callable[[str], T] = float) -> Optional[tuple[T, T, T]]:
    """Parse ``s`` as exactly three ``separator``-delimited values."""

    fields = s.split(separator)
    if len(fields) != 3:
        return None
    values = [_convert(field, convert) for field in fields]
    if any(value is None for value in values):
        return None
    return (values[0], values[1], values[2])


def parse_complex(s: str) -> Optional[ComplexPoint]:
    """Parse ``"RE,IM"`` as a point on the complex plane."""

    pair = parse_pair(s, ",")
    if pair is None:
        return None
    return ComplexPoint(*pair)


def parse_bounds(s: str) -> Optional[PixelBounds]:
    """Parse ``"WIDTHxHEIGHT"`` as positive pixel bounds."""

    pair = parse_pair(s, "x", int)
    if pair is None or pair[0] <= 0 or pair[1] <= 0:
        return None
    return PixelBounds(*pair)


def parse_rgb(s: str) -> Optional[Color]:
    """Parse ``"R,G,B"`` with every channel in ``0..255``."""

    triad = parse_triad(s, ",", int)
    if triad is None or not all(0 <= channel <= CHANNEL_MAX for channel in triad):
        return None
    return Color(*triad)
