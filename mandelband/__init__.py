"""Public API for the band-parallel Mandelbrot renderer."""

from .color import BLACK, Color, escape_scalar, lerp_color
from .escape import DEFAULT_LIMIT, escape_time
from .geometry import ComplexPoint, PixelBounds, PlaneRectangle, pixel_to_point
from .parsing import parse_bounds, parse_complex, parse_pair, parse_rgb, parse_triad
from .renderer import InvariantError, RenderParameters, render_band
from .scheduler import (
    Band,
    new_pixel_buffer,
    partition_rows,
    render,
    render_parameters,
    rows_per_band,
    split_buffer,
    to_image_array,
)

__all__ = [
    "BLACK",
    "Band",
    "Color",
    "ComplexPoint",
    "DEFAULT_LIMIT",
    "InvariantError",
    "PixelBounds",
    "PlaneRectangle",
    "RenderParameters",
    "escape_scalar",
    "escape_time",
    "lerp_color",
    "new_pixel_buffer",
    "parse_bounds",
    "parse_complex",
    "parse_pair",
    "parse_rgb",
    "parse_triad",
    "partition_rows",
    "pixel_to_point",
    "render",
    "render_band",
    "render_parameters",
    "rows_per_band",
    "split_buffer",
    "to_image_array",
]
