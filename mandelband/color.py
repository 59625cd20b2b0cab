"""Two-color gradient used to shade escape times."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Optional

CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """An RGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in astuple(self):
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValueError(f"color channels must be integers, got {astuple(self)}")
            if not 0 <= channel <= CHANNEL_MAX:
                raise ValueError(f"color channels must be in 0..{CHANNEL_MAX}, got {astuple(self)}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)


def _lerp_channel(low: int, high: int, t: float) -> int:
    value = int(low + t * (high - low))
    return min(max(value, 0), CHANNEL_MAX)


def lerp_color(low: Color, high: Color, t: float) -> Color:
    """Interpolate linearly from ``low`` (``t=0``) to ``high`` (``t=1``).

    Channels are truncated towards zero. ``t`` outside ``[0, 1]``
    extrapolates and saturates at the channel limits.
    """

    return Color(
        _lerp_channel(low.r, high.r, t),
        _lerp_channel(low.g, high.g, t),
        _lerp_channel(low.b, high.b, t),
    )


def escape_scalar(escape: Optional[int], limit: int) -> float:
    """Normalize an escape time into ``[0, 1]``; faster escapes score higher."""

    if escape is None:
        return 0.0
    return (limit - escape) / limit
