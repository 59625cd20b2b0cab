"""Render the Mandelbrot set between two corners of the complex plane to an image file."""

import logging
from argparse import ArgumentParser
from pathlib import Path

import PIL.Image

from mandelband import (
    DEFAULT_LIMIT,
    PlaneRectangle,
    RenderParameters,
    parse_bounds,
    parse_complex,
    parse_rgb,
    render_parameters,
    to_image_array,
)

USAGE = "Usage: mandelbrot FILE PIXELS UPPERLEFT LOWERRIGHT LOWCOL HIGHCOL"
EXAMPLE = "Example: {prog} mandel.png 1000x750 -1.20,0.35 -1,0.20 0,0,0 255,200,40"

logger = logging.getLogger("mandelbrot")


def build_parser():
    # Positionals are read from the leftover arguments so that corners such
    # as "-1.20,0.35" are not mistaken for options.
    parser = ArgumentParser(prog="mandelbrot", usage="%(prog)s FILE PIXELS UPPERLEFT LOWERRIGHT LOWCOL HIGHCOL [options]")

    parser.add_argument('-j', '--workers', type=int,
                        dest='workers', help='number of bands rendered in parallel (default: CPU count)',
                        metavar='WORKERS', default=None)

    parser.add_argument('--limit', type=int,
                        dest='limit', help='maximum number of iterations before a point is presumed inside the set',
                        metavar='LIMIT', default=DEFAULT_LIMIT)

    parser.add_argument('--format', type=str,
                        dest='format', help='image format for FILE. Can be any extension supported by Pillow. Default: the FILE suffix, or "png".',
                        metavar='FORMAT', default=None)

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging of band scheduling and timings.')

    return parser


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def resolve_format(output_path: Path, requested: str | None) -> str:
    image_format = (requested or output_path.suffix or "png").lower().lstrip(".")
    return image_format or "png"


def write_single_image(image: PIL.Image.Image, output_path: Path, image_format: str) -> None:
    """Write a single image to ``output_path`` using the provided format."""

    pil_format = _pil_format_name(image_format)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output_path), format=pil_format)


def _fail(parser: ArgumentParser, message: str):
    parser.exit(1, f"{parser.prog}: {message}\n")


def is_writable_format(image_format: str) -> bool:
    PIL.Image.init()
    return _pil_format_name(image_format) in PIL.Image.SAVE


def resolve_parameters(opt, tokens: list[str], parser: ArgumentParser) -> tuple[Path, str, RenderParameters]:
    if len(tokens) != 6:
        parser.exit(1, f"{USAGE}\n{EXAMPLE.format(prog=parser.prog)}\n")

    file_arg, pixels_arg, upper_left_arg, lower_right_arg, low_arg, high_arg = tokens
    output_path = Path(file_arg).expanduser()
    image_format = resolve_format(output_path, opt.format)
    if not is_writable_format(image_format):
        _fail(parser, f"unsupported image format {image_format!r}")

    bounds = parse_bounds(pixels_arg)
    if bounds is None:
        _fail(parser, f"error parsing image dimensions {pixels_arg!r}")
    upper_left = parse_complex(upper_left_arg)
    if upper_left is None:
        _fail(parser, f"error parsing upper left corner point {upper_left_arg!r}")
    lower_right = parse_complex(lower_right_arg)
    if lower_right is None:
        _fail(parser, f"error parsing lower right corner point {lower_right_arg!r}")
    low_color = parse_rgb(low_arg)
    if low_color is None:
        _fail(parser, f"error parsing low color {low_arg!r}")
    high_color = parse_rgb(high_arg)
    if high_color is None:
        _fail(parser, f"error parsing high color {high_arg!r}")

    if opt.workers is not None and opt.workers < 1:
        _fail(parser, "--workers must be at least 1")
    if opt.limit < 1:
        _fail(parser, "--limit must be at least 1")

    params = RenderParameters(
        bounds=bounds,
        rect=PlaneRectangle(upper_left, lower_right),
        low_color=low_color,
        high_color=high_color,
        limit=opt.limit,
        workers=opt.workers,
    )
    return output_path, image_format, params


def main(argv=None):
    parser = build_parser()
    opt, tokens = parser.parse_known_args(argv)

    logging.basicConfig(level=logging.DEBUG if opt.verbose else logging.WARNING, format='%(message)s')

    output_path, image_format, params = resolve_parameters(opt, tokens, parser)

    logger.debug(
        "rendering %dx%d from %s to %s",
        params.bounds.width,
        params.bounds.height,
        complex(params.rect.upper_left),
        complex(params.rect.lower_right),
    )
    pixels = render_parameters(params)

    image = PIL.Image.fromarray(to_image_array(pixels, params.bounds))
    write_single_image(image, output_path, image_format)
    logger.debug("wrote %s", output_path)


if __name__ == '__main__':
    main()
