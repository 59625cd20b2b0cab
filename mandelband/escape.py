"""Escape-time test for the quadratic Mandelbrot iteration."""

from __future__ import annotations

from typing import Optional

from .geometry import ComplexPoint

DEFAULT_LIMIT = 10_000
ESCAPE_RADIUS_SQR = 4.0


def escape_time(c: ComplexPoint, limit: int) -> Optional[int]:
    """Return the iteration at which the orbit of ``c`` leaves radius 2.

    The orbit starts at zero and is updated with ``z = z*z + c`` at most
    ``limit`` times. The squared magnitude is tested after every update and
    the 0-based index of the first update that exceeds ``ESCAPE_RADIUS_SQR``
    is returned. ``None`` means the limit was reached without escaping and
    ``c`` is presumed to be a member of the set.
    """

    # Same operations as ComplexPoint.__mul__ and __add__, unrolled on floats.
    c_re = c.re
    c_im = c.im
    z_re = 0.0
    z_im = 0.0
    for i in range(limit):
        z_re, z_im = (
            (z_re * z_re - z_im * z_im) + c_re,
            (z_re * z_im + z_im * z_re) + c_im,
        )
        if z_re * z_re + z_im * z_im > ESCAPE_RADIUS_SQR:
            return i
    return None
