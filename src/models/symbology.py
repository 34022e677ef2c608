"""
Symbology model for the supported retail barcode families.
"""

from enum import Enum


class BarcodeSymbology(str, Enum):
    """Supported barcode symbologies."""

    EAN_13 = "EAN-13"
    UPC_A = "UPC-A"
    EAN_8 = "EAN-8"
    UPC_E = "UPC-E"
    UNKNOWN = "UNKNOWN"

    @property
    def required_length(self) -> int | None:
        """Number of digits (check digit included) a code of this symbology has."""
        return _REQUIRED_LENGTHS.get(self)

    @property
    def module_count(self) -> int | None:
        """Width of the encoded symbol in modules, guards included."""
        return _MODULE_COUNTS.get(self)


_REQUIRED_LENGTHS = {
    BarcodeSymbology.EAN_13: 13,
    BarcodeSymbology.UPC_A: 12,
    BarcodeSymbology.EAN_8: 8,
    BarcodeSymbology.UPC_E: 8,
}

# 3 + 6*7 + 5 + 6*7 + 3, 3 + 4*7 + 5 + 4*7 + 3, 3 + 6*7 + 6
_MODULE_COUNTS = {
    BarcodeSymbology.EAN_13: 95,
    BarcodeSymbology.UPC_A: 95,
    BarcodeSymbology.EAN_8: 67,
    BarcodeSymbology.UPC_E: 51,
}
