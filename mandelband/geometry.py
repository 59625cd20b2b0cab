"""Points on the complex plane and the pixel-to-plane mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexPoint:
    """A point on the complex plane."""

    re: float
    im: float

    @classmethod
    def from_complex(cls, z: complex) -> ComplexPoint:
        return cls(float(z.real), float(z.imag))

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __add__(self, other: ComplexPoint) -> ComplexPoint:
        if not isinstance(other, ComplexPoint):
            return NotImplemented
        return ComplexPoint(self.re + other.re, self.im + other.im)

    def __mul__(self, other: ComplexPoint) -> ComplexPoint:
        if not isinstance(other, ComplexPoint):
            return NotImplemented
        return ComplexPoint(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def norm_sqr(self) -> float:
        """Squared magnitude, ``re**2 + im**2``."""

        return self.re * self.re + self.im * self.im


@dataclass(frozen=True)
class PixelBounds:
    """Width and height of a raster in pixels."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if not all(isinstance(n, int) and not isinstance(n, bool) for n in (self.width, self.height)):
            raise ValueError(f"pixel bounds must be integers, got {self.width!r}x{self.height!r}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"pixel bounds must be positive, got {self.width}x{self.height}")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class PlaneRectangle:
    """Region of the complex plane covered by a raster.

    ``upper_left`` is expected to lie above and to the left of
    ``lower_right``. This is not enforced: a flipped rectangle renders a
    mirrored image and a degenerate one renders a single point.
    """

    upper_left: ComplexPoint
    lower_right: ComplexPoint

    @property
    def width(self) -> float:
        return self.lower_right.re - self.upper_left.re

    @property
    def height(self) -> float:
        return self.upper_left.im - self.lower_right.im


def pixel_to_point(bounds: PixelBounds, pixel: tuple[int, int], rect: PlaneRectangle) -> ComplexPoint:
    """Map a ``(column, row)`` pixel of a raster onto the complex plane.

    Rows grow downwards while the imaginary axis grows upwards, so the
    imaginary part decreases with the row. Pixels outside the raster are
    extrapolated linearly; ``(bounds.width, bounds.height)`` maps exactly to
    ``rect.lower_right``.
    """

    column, row = pixel
    return ComplexPoint(
        re=rect.upper_left.re + column * rect.width / bounds.width,
        im=rect.upper_left.im - row * rect.height / bounds.height,
    )
