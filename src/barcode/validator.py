"""
Barcode validation utilities for EAN/UPC codes.
"""

from collections.abc import Callable, Sequence

from src.barcode.checksum import ean13_check_digit, payload_check_digit, weighted_checksum
from src.barcode.errors import (
    BarcodeError,
    ChecksumMismatchError,
    InvalidCharacterError,
    UnsupportedLengthError,
)
from src.barcode.parser import format_digits, parse_digits
from src.barcode.upce import upce_check_digit, upce_to_upca
from src.models.symbology import BarcodeSymbology


def validate_ean13(digits: Sequence[int]) -> bool:
    """13 digits whose weighted checksum is 0."""
    return len(digits) == 13 and weighted_checksum(digits) == 0


def validate_upca(digits: Sequence[int]) -> bool:
    """12 digits whose weighted checksum is 0 (same weighting as EAN-13)."""
    return len(digits) == 12 and weighted_checksum(digits) == 0


def validate_ean8(digits: Sequence[int]) -> bool:
    """8 digits whose last digit is the check digit of the first seven."""
    if len(digits) != 8:
        return False
    return payload_check_digit(digits[:7]) == digits[7]


def validate_upce(digits: Sequence[int]) -> bool:
    """
    8 digits: number system 0 or 1, six data digits and a check digit.

    The check digit is computed over the expanded UPC-A payload.
    """
    if len(digits) != 8:
        return False
    if digits[0] > 1:
        return False
    return upce_check_digit(digits[:7]) == digits[7]


# Tried in this order; the first symbology that validates wins.
# An 8-digit code valid as both EAN-8 and UPC-E is therefore EAN-8.
VALIDATION_ORDER: tuple[tuple[BarcodeSymbology, Callable[[Sequence[int]], bool]], ...] = (
    (BarcodeSymbology.EAN_13, validate_ean13),
    (BarcodeSymbology.UPC_A, validate_upca),
    (BarcodeSymbology.EAN_8, validate_ean8),
    (BarcodeSymbology.UPC_E, validate_upce),
)


def detect_symbology(digits: Sequence[int]) -> BarcodeSymbology | None:
    """
    Find the symbology a digit sequence belongs to.

    Args:
        digits: Parsed digits, check digit included

    Returns:
        First symbology in priority order that validates, or None
    """
    for symbology, validate in VALIDATION_ORDER:
        if validate(digits):
            return symbology
    return None


def diagnose(digits: Sequence[int]) -> BarcodeError:
    """
    Explain why no symbology accepts the digits.

    Returns the error to raise rather than raising it.
    """
    code = format_digits(digits)
    candidates = [
        symbology.value
        for symbology, _ in VALIDATION_ORDER
        if symbology.required_length == len(digits)
    ]
    if not candidates:
        return UnsupportedLengthError(code)
    return ChecksumMismatchError(code, candidates)


def calculate_ean13_checksum(code: str) -> int:
    """
    Calculate EAN-13 checksum digit.

    Args:
        code: At least 12 digits; only the first 12 are used
    """
    if len(code) < 12:
        raise ValueError("Code must have at least 12 digits for EAN-13")
    return ean13_check_digit(parse_digits(code[:12]))


def calculate_ean8_checksum(code: str) -> int:
    """
    Calculate EAN-8 checksum digit.

    Args:
        code: At least 7 digits; only the first 7 are used
    """
    if len(code) < 7:
        raise ValueError("Code must have at least 7 digits for EAN-8")
    return payload_check_digit(parse_digits(code[:7]))


def _validate_code(code: str, validate: Callable[[Sequence[int]], bool]) -> bool:
    try:
        digits = parse_digits(code)
    except InvalidCharacterError:
        return False
    return validate(digits)


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate EAN-13 checksum.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid
    """
    return _validate_code(code, validate_ean13)


def validate_ean8_checksum(code: str) -> bool:
    """
    Validate EAN-8 checksum.

    Args:
        code: 8-digit EAN code

    Returns:
        True if checksum is valid
    """
    return _validate_code(code, validate_ean8)


def validate_upc_checksum(code: str) -> bool:
    """
    Validate UPC-A checksum.

    Args:
        code: 12-digit UPC-A code

    Returns:
        True if checksum is valid
    """
    return _validate_code(code, validate_upca)


def validate_upce_checksum(code: str) -> bool:
    """
    Validate UPC-E number system and checksum.

    Args:
        code: 8-digit UPC-E code (number system, 6 data digits, check digit)

    Returns:
        True if checksum is valid
    """
    return _validate_code(code, validate_upce)


def is_valid_barcode(code: str) -> tuple[bool, BarcodeSymbology, str]:
    """
    Validate a barcode completely.

    Args:
        code: Barcode string

    Returns:
        Tuple of (is_valid, symbology, error_message)
    """
    try:
        digits = parse_digits(code)
    except InvalidCharacterError:
        return False, BarcodeSymbology.UNKNOWN, "Code contains non-numeric characters"

    symbology = detect_symbology(digits)
    if symbology is not None:
        return True, symbology, ""

    error = diagnose(digits)
    if isinstance(error, UnsupportedLengthError):
        return False, BarcodeSymbology.UNKNOWN, f"Unsupported code length: {len(code)}"

    # Report the highest priority candidate for this length
    candidate = BarcodeSymbology(error.candidates[0])
    return False, candidate, f"Invalid {'/'.join(error.candidates)} checksum"


def normalize_barcode(code: str, symbology: BarcodeSymbology) -> str:
    """
    Normalize barcode to standard format.

    - UPC-A: Convert to EAN-13 by adding leading 0, if that is a valid EAN-13
    - UPC-E: Expand to UPC-A, then add leading 0
    - Others: Return as-is

    Args:
        code: Barcode string
        symbology: Detected symbology

    Returns:
        Normalized barcode
    """
    if symbology == BarcodeSymbology.UPC_A and len(code) == 12:
        # A leading 0 shifts every weight; only some UPC-A codes stay valid
        ean13 = "0" + code
        return ean13 if validate_ean13_checksum(ean13) else code
    if symbology == BarcodeSymbology.UPC_E and len(code) == 8:
        return "0" + format_digits(upce_to_upca(parse_digits(code)))
    return code
