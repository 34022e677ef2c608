"""
Barcode encoding utilities.
"""

from src.barcode.builder import build_modules
from src.barcode.encoder import BarcodeEncoder, EncodeResult, encode
from src.barcode.errors import (
    BarcodeError,
    ChecksumMismatchError,
    InvalidCharacterError,
    UnsupportedBarcodeError,
    UnsupportedLengthError,
)
from src.barcode.packer import PackedModules, pack_modules, unpack_words
from src.barcode.parser import parse_digits
from src.barcode.upce import expand_upce, upce_to_upca
from src.barcode.validator import (
    detect_symbology,
    is_valid_barcode,
    normalize_barcode,
    validate_ean8_checksum,
    validate_ean13_checksum,
    validate_upc_checksum,
    validate_upce_checksum,
)

__all__ = [
    "BarcodeEncoder",
    "EncodeResult",
    "encode",
    "build_modules",
    "pack_modules",
    "unpack_words",
    "PackedModules",
    "parse_digits",
    "expand_upce",
    "upce_to_upca",
    "detect_symbology",
    "is_valid_barcode",
    "normalize_barcode",
    "validate_ean13_checksum",
    "validate_ean8_checksum",
    "validate_upc_checksum",
    "validate_upce_checksum",
    "BarcodeError",
    "InvalidCharacterError",
    "UnsupportedBarcodeError",
    "UnsupportedLengthError",
    "ChecksumMismatchError",
]
