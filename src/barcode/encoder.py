"""
EAN/UPC barcode encoder: digits in, module sequence out.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from src.barcode.builder import build_modules
from src.barcode.errors import BarcodeError
from src.barcode.packer import DEFAULT_WORD_WIDTH, SYMBOL_HEIGHT, pack_modules
from src.barcode.parser import format_digits, parse_digits
from src.barcode.validator import (
    detect_symbology,
    diagnose,
    normalize_barcode,
    validate_ean13_checksum,
)
from src.models.barcode import EncodedBarcode

logger = structlog.get_logger(__name__)


@dataclass
class EncodeResult:
    """Outcome of encoding one code in a batch."""

    code: str
    barcode: EncodedBarcode | None = None
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.barcode is not None


class BarcodeEncoder:
    """
    Barcode encoder for retail symbologies.

    Supports:
    - EAN-13
    - UPC-A
    - EAN-8
    - UPC-E

    The symbology is detected from the digits: codes are tried as EAN-13,
    UPC-A, EAN-8 and UPC-E in that order and the first valid one is used.
    """

    def __init__(
        self,
        word_width: int = DEFAULT_WORD_WIDTH,
        height: int = SYMBOL_HEIGHT,
    ):
        """
        Initialize encoder.

        Args:
            word_width: Modules per packed word handed to the renderer
            height: Symbol height in modules
        """
        if word_width < 1:
            raise ValueError(f"Word width must be positive, got {word_width}")
        self.word_width = word_width
        self.height = height

    @classmethod
    def from_settings(cls, settings) -> "BarcodeEncoder":
        """Build an encoder using the configured geometry."""
        return cls(word_width=settings.pack_word_width, height=settings.module_height)

    def encode(self, data: str | bytes | bytearray) -> EncodedBarcode:
        """
        Encode a digit string.

        Args:
            data: ASCII digits, check digit included

        Returns:
            Encoded barcode with module bits and packed words

        Raises:
            InvalidCharacterError: If data contains non-digit characters
            UnsupportedBarcodeError: If no symbology accepts the digits
        """
        digits = parse_digits(data)
        symbology = detect_symbology(digits)
        code = format_digits(digits)

        if symbology is None:
            error = diagnose(digits)
            logger.info("Rejected barcode", code=code, reason=error.reason)
            raise error

        modules = build_modules(symbology, digits)
        packed = pack_modules(modules, word_width=self.word_width, height=self.height)

        normalized: str | None = normalize_barcode(code, symbology)
        if not validate_ean13_checksum(normalized):
            normalized = None

        logger.debug(
            "Encoded barcode",
            code=code,
            symbology=symbology.value,
            width=packed.width,
        )

        return EncodedBarcode(
            code=code,
            symbology=symbology,
            modules=modules,
            width=packed.width,
            height=packed.height,
            word_width=packed.word_width,
            words=packed.words,
            normalized_code=normalized,
        )

    def encode_many(self, codes: Iterable[str | bytes]) -> list[EncodeResult]:
        """
        Encode several codes; a bad code is reported, not raised.

        Returns:
            One result per input, in input order
        """
        results: list[EncodeResult] = []
        for data in codes:
            code = data if isinstance(data, str) else data.decode("ascii", errors="replace")
            try:
                results.append(EncodeResult(code=code, barcode=self.encode(data)))
            except BarcodeError as e:
                results.append(EncodeResult(code=code, error=str(e)))
        return results


def encode(data: str | bytes | bytearray) -> EncodedBarcode:
    """
    Convenience function to encode a barcode with default geometry.

    Args:
        data: ASCII digits, check digit included

    Returns:
        Encoded barcode
    """
    return BarcodeEncoder().encode(data)
