"""
CLI tool to encode EAN/UPC codes into module sequences.

Usage:
    python -m tools.encode.main 4006381333931
    python -m tools.encode.main 96385074 01234505 --format json
    python -m tools.encode.main 4006381333931 --format words
"""

import json
import sys

import click
import structlog

from src.barcode import BarcodeEncoder, EncodeResult
from src.config import configure_logging, get_settings

logger = structlog.get_logger(__name__)


def format_text(result: EncodeResult) -> str:
    """One line per code: code, symbology, width and module string."""
    if result.barcode is None:
        return f"{result.code}\tERROR\t{result.error}"
    barcode = result.barcode
    return f"{barcode.code}\t{barcode.symbology.value}\t{barcode.width}\t{barcode.bars}"


def format_words(result: EncodeResult) -> str:
    """Packed words as hex, the form handed to renderers."""
    if result.barcode is None:
        return f"{result.code}\tERROR\t{result.error}"
    barcode = result.barcode
    words = " ".join(f"{word:06x}" for word in barcode.words)
    return f"{barcode.code}\t{barcode.width}x{barcode.height}\t{words}"


def format_json(results: list[EncodeResult]) -> str:
    """Format results as a JSON array."""
    rows = []
    for result in results:
        if result.barcode is None:
            rows.append({"code": result.code, "error": result.error})
        else:
            rows.append(result.barcode.model_dump(mode="json"))
    return json.dumps(rows, indent=2)


@click.command()
@click.argument("codes", nargs=-1, required=True)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json", "words"]),
    default="text",
    help="Output format (default: text)",
)
def main(codes: tuple[str, ...], output_format: str) -> None:
    """Encode one or more EAN-13, UPC-A, EAN-8 or UPC-E codes."""
    settings = get_settings()
    configure_logging(settings)
    encoder = BarcodeEncoder.from_settings(settings)

    results = encoder.encode_many(codes)
    failed = [r for r in results if not r.is_valid]

    if output_format == "json":
        click.echo(format_json(results))
    elif output_format == "words":
        for result in results:
            click.echo(format_words(result))
    else:
        for result in results:
            click.echo(format_text(result))

    if failed:
        logger.info("Some codes could not be encoded", failed=len(failed), total=len(results))
        sys.exit(1)


if __name__ == "__main__":
    main()
