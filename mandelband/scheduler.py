"""Split a raster into row bands and render them concurrently."""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .color import Color
from .escape import DEFAULT_LIMIT
from .geometry import PixelBounds, PlaneRectangle, pixel_to_point
from .renderer import CHANNELS, InvariantError, RenderParameters, check_buffer, render_band

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Band:
    """A run of whole rows ``[top, top + height)`` of a raster."""

    top: int
    height: int

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def pixel_slice(self, width: int) -> slice:
        return slice(self.top * width, self.bottom * width)


def default_workers() -> int:
    return os.cpu_count() or 1


def rows_per_band(height: int, workers: int) -> int:
    """Rows given to each band when ``height`` rows are shared by ``workers``."""

    if workers < 1:
        raise ValueError(f"worker count must be at least 1, got {workers}")
    return -(-height // workers)


def partition_rows(height: int, workers: int) -> list[Band]:
    """Cut ``[0, height)`` into consecutive bands, at most one per worker.

    Every band but the last has ``rows_per_band(height, workers)`` rows. When
    there are more workers than rows the result has one band per row.
    """

    step = rows_per_band(height, workers)
    return [Band(top, min(step, height - top)) for top in range(0, height, step)]


def new_pixel_buffer(bounds: PixelBounds) -> np.ndarray:
    """Allocate a black row-major pixel buffer for ``bounds``."""

    return np.zeros((bounds.pixel_count, CHANNELS), dtype=np.uint8)


def split_buffer(buffer: np.ndarray, bounds: PixelBounds, bands: list[Band]) -> list[np.ndarray]:
    """Return one view of ``buffer`` per band.

    The bands must tile the raster: they start at row 0, each one begins
    where the previous one ended, and the last one ends at
    ``bounds.height``. Anything else would let two workers write the same
    pixels, or leave pixels unwritten, and raises ``InvariantError``.
    """

    check_buffer(buffer, bounds)

    expected_top = 0
    for band in bands:
        if band.top != expected_top or band.height <= 0:
            raise InvariantError(f"band {band} does not start at row {expected_top}")
        expected_top = band.bottom
    if expected_top != bounds.height:
        raise InvariantError(f"bands cover {expected_top} rows of {bounds.height}")

    return [buffer[band.pixel_slice(bounds.width)] for band in bands]


def to_image_array(buffer: np.ndarray, bounds: PixelBounds) -> np.ndarray:
    """View a flat pixel buffer as a ``(height, width, 3)`` image array."""

    check_buffer(buffer, bounds)
    return buffer.reshape(bounds.height, bounds.width, CHANNELS)


def render(
    bounds: PixelBounds,
    rect: PlaneRectangle,
    low_color: Color,
    high_color: Color,
    workers: Optional[int] = None,
    *,
    limit: int = DEFAULT_LIMIT,
) -> np.ndarray:
    """Render ``rect`` into a new ``bounds``-sized pixel buffer.

    The raster is cut into row bands, one per worker, and every band is
    rendered on its own thread into its own slice of the buffer. The call
    returns once all bands are done; the first worker exception, if any, is
    re-raised. The result does not depend on the number of workers.
    """

    if workers is None:
        workers = default_workers()

    start = time.perf_counter()
    buffer = new_pixel_buffer(bounds)
    bands = partition_rows(bounds.height, workers)
    views = split_buffer(buffer, bounds, bands)
    logger.debug("rendering %dx%d pixels in %d bands", bounds.width, bounds.height, len(bands))

    with ThreadPoolExecutor(max_workers=len(bands), thread_name_prefix="band") as executor:
        futures = []
        for band, view in zip(bands, views):
            band_upper_left = pixel_to_point(bounds, (0, band.top), rect)
            band_lower_right = pixel_to_point(bounds, (bounds.width, band.bottom), rect)
            futures.append(
                executor.submit(
                    render_band,
                    view,
                    PixelBounds(bounds.width, band.height),
                    band_upper_left,
                    band_lower_right,
                    low_color,
                    high_color,
                    limit=limit,
                )
            )
            logger.debug("dispatched band rows %d..%d", band.top, band.bottom)
        wait(futures, return_when=ALL_COMPLETED)

    for future in futures:
        future.result()

    check_buffer(buffer, bounds)
    logger.info("rendered %d bands in %.3f seconds", len(bands), time.perf_counter() - start)
    return buffer


def render_parameters(params: RenderParameters) -> np.ndarray:
    """Render the image described by ``params``."""

    return render(
        params.bounds,
        params.rect,
        params.low_color,
        params.high_color,
        params.workers,
        limit=params.limit,
    )
