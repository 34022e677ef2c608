"""
Pydantic models and enums shared across the encoder.
"""

from src.models.barcode import EncodedBarcode
from src.models.symbology import BarcodeSymbology

__all__ = [
    "BarcodeSymbology",
    "EncodedBarcode",
]
