"""
test_geometry.py
"""
import pytest

from mandelband import ComplexPoint, PixelBounds, PlaneRectangle, pixel_to_point

UNIT_SQUARE = PlaneRectangle(ComplexPoint(-1.0, 1.0), ComplexPoint(1.0, -1.0))
WIDE = PlaneRectangle(ComplexPoint(-2.0, 1.5), ComplexPoint(1.0, -1.5))


def test_complex_point_arithmetic():
    """
    Sum, product and squared magnitude follow complex arithmetic.
    """
    a = ComplexPoint(1.0, 2.0)
    b = ComplexPoint(3.0, 4.0)
    assert a + b == ComplexPoint(4.0, 6.0)
    assert a * b == ComplexPoint(-5.0, 10.0)
    assert b.norm_sqr() == 25.0
    assert complex(a * b) == complex(1, 2) * complex(3, 4)
    assert ComplexPoint.from_complex(1.25 - 0.0625j) == ComplexPoint(1.25, -0.0625)


@pytest.mark.parametrize('width, height', [(0, 1), (1, 0), (-3, 4)])
def test_pixel_bounds_must_be_positive(width, height):
    """
    Empty rasters are rejected.
    """
    with pytest.raises(ValueError):
        PixelBounds(width, height)


def test_pixel_to_point():
    """
    Regression case for the mapping of a quarter-way pixel.
    """
    assert pixel_to_point(PixelBounds(100, 100), (25, 75), UNIT_SQUARE) == ComplexPoint(-0.5, -0.5)


def test_corners_map_to_rectangle_corners():
    """
    Pixel (0, 0) is the upper-left corner and (width, height) the lower-right one.
    """
    bounds = PixelBounds(300, 200)
    assert pixel_to_point(bounds, (0, 0), WIDE) == WIDE.upper_left
    assert pixel_to_point(bounds, (300, 200), WIDE) == WIDE.lower_right


def test_mapping_is_affine():
    """
    Equal pixel steps give equal plane steps.
    """
    bounds = PixelBounds(300, 200)
    assert pixel_to_point(bounds, (150, 100), WIDE) == ComplexPoint(-0.5, 0.0)
    step = 3.0 / 300
    for column in (0, 10, 100, 299):
        assert pixel_to_point(bounds, (column, 0), WIDE).re == pytest.approx(-2.0 + column * step)


def test_rows_run_down_the_imaginary_axis():
    """
    Increasing the row decreases the imaginary part.
    """
    bounds = PixelBounds(300, 200)
    top = pixel_to_point(bounds, (0, 10), WIDE)
    below = pixel_to_point(bounds, (0, 11), WIDE)
    assert below.im < top.im
    assert below.re == top.re


def test_pixels_outside_the_raster_extrapolate():
    """
    No bounds checking; the mapping continues linearly.
    """
    bounds = PixelBounds(300, 200)
    assert pixel_to_point(bounds, (-100, 400), WIDE) == ComplexPoint(-3.0, -4.5)


def test_flipped_rectangle_mirrors():
    """
    A rectangle with swapped corners maps pixel 0 to the right-hand edge.
    """
    flipped = PlaneRectangle(ComplexPoint(1.0, 1.0), ComplexPoint(-1.0, -1.0))
    assert pixel_to_point(PixelBounds(100, 100), (25, 75), flipped) == ComplexPoint(0.5, -0.5)


@pytest.mark.parametrize('width, height', [(2.5, 4), (3, 4.0)])
def test_pixel_bounds_must_be_integers(width, height):
    """
    Pixel counts are whole numbers.
    """
    with pytest.raises(ValueError):
        PixelBounds(width, height)
