"""
CLI tool to rasterize an encoded barcode to an image file.

Usage:
    python -m tools.render.main 4006381333931 --output ean13.png
    python -m tools.render.main 01234505 -o upce.png --scale 4 --quiet-zone 9
"""

import sys

import click
import structlog
from PIL import Image

from src.barcode import BarcodeEncoder, BarcodeError
from src.config import configure_logging, get_settings
from src.models import EncodedBarcode

logger = structlog.get_logger(__name__)

BLACK = 0
WHITE = 255


def render_image(
    barcode: EncodedBarcode,
    scale: int = 1,
    quiet_zone: int = 0,
) -> Image.Image:
    """
    Draw a barcode from its packed words.

    A set bit is a black bar, a clear bit white. The symbol is
    barcode.height modules tall; quiet_zone white modules are added left
    and right.

    Args:
        barcode: Encoded barcode
        scale: Pixels per module
        quiet_zone: Margin in modules on each side

    Returns:
        Grayscale PIL image
    """
    if scale < 1:
        raise ValueError(f"Scale must be positive, got {scale}")

    packed = barcode.packed
    total_width = packed.width + 2 * quiet_zone

    row = [WHITE] * total_width
    for x in range(packed.width):
        if packed.module(x):
            row[quiet_zone + x] = BLACK

    image = Image.new("L", (total_width, barcode.height), WHITE)
    image.putdata(row * barcode.height)
    if scale != 1:
        image = image.resize(
            (total_width * scale, barcode.height * scale),
            Image.Resampling.NEAREST,
        )
    return image


@click.command()
@click.argument("code")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output image path (format from extension)",
)
@click.option("--scale", type=click.IntRange(min=1), default=None, help="Pixels per module")
@click.option(
    "--quiet-zone",
    type=click.IntRange(min=0),
    default=None,
    help="White modules added on each side",
)
def main(code: str, output: str, scale: int | None, quiet_zone: int | None) -> None:
    """Render CODE as a barcode image."""
    settings = get_settings()
    configure_logging(settings)
    encoder = BarcodeEncoder.from_settings(settings)

    try:
        barcode = encoder.encode(code)
    except BarcodeError as e:
        click.echo(f"Cannot encode {code}: {e}", err=True)
        sys.exit(1)

    image = render_image(
        barcode,
        scale=scale or settings.render_scale,
        quiet_zone=settings.render_quiet_zone if quiet_zone is None else quiet_zone,
    )
    image.save(output)

    logger.info(
        "Rendered barcode",
        code=barcode.code,
        symbology=barcode.symbology.value,
        path=output,
        size=image.size,
    )
    click.echo(f"{barcode.symbology.value} written to: {output}")


if __name__ == "__main__":
    main()
