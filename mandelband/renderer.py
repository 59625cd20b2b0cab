"""Rendering primitives for a single band of a Mandelbrot raster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .color import Color, escape_scalar, lerp_color
from .escape import DEFAULT_LIMIT, escape_time
from .geometry import ComplexPoint, PixelBounds, PlaneRectangle, pixel_to_point

CHANNELS = 3


class InvariantError(AssertionError):
    """Raised when a pixel buffer does not match the bounds it is rendered with."""


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of the Mandelbrot set."""

    bounds: PixelBounds
    rect: PlaneRectangle
    low_color: Color
    high_color: Color
    limit: int = DEFAULT_LIMIT
    workers: Optional[int] = None


def check_buffer(buffer: np.ndarray, bounds: PixelBounds) -> None:
    """Fail with ``InvariantError`` unless ``buffer`` holds exactly one pixel per position of ``bounds``."""

    if len(buffer) != bounds.pixel_count:
        raise InvariantError(
            f"buffer holds {len(buffer)} pixels but bounds "
            f"{bounds.width}x{bounds.height} need {bounds.pixel_count}"
        )


def render_band(
    buffer: np.ndarray,
    band_bounds: PixelBounds,
    upper_left: ComplexPoint,
    lower_right: ComplexPoint,
    low_color: Color,
    high_color: Color,
    *,
    limit: int = DEFAULT_LIMIT,
) -> None:
    """Render the rectangle ``upper_left``..``lower_right`` into ``buffer``.

    ``buffer`` is a row-major ``(width * height, 3)`` array of ``uint8``
    pixels whose dimensions are given by ``band_bounds``. The band is mapped
    as an image of its own, so callers rendering part of a larger raster pass
    the corners of that part rather than of the whole image.
    """

    check_buffer(buffer, band_bounds)

    rect = PlaneRectangle(upper_left, lower_right)
    width = band_bounds.width
    for row in range(band_bounds.height):
        colors = []
        for column in range(width):
            point = pixel_to_point(band_bounds, (column, row), rect)
            t = escape_scalar(escape_time(point, limit), limit)
            colors.append(lerp_color(low_color, high_color, t).as_tuple())
        buffer[row * width:(row + 1) * width] = colors
