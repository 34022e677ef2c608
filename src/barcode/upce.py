"""
UPC-E zero-suppression expansion.
"""

from collections.abc import Sequence

from src.barcode.checksum import payload_check_digit


def expand_upce(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Expand a zero-suppressed UPC-E payload to its UPC-A equivalent.

    Args:
        digits: Number system digit followed by six data digits (m1..m6)

    Returns:
        11 digits (number system, 5 manufacturer, 5 product), or an empty
        tuple when the input does not have 7 digits
    """
    if len(digits) != 7:
        return ()

    number_system, m1, m2, m3, m4, m5, m6 = digits

    # The last data digit says where the suppressed zeros go
    if m6 <= 2:
        manufacturer = (m1, m2, m6, 0, 0)
        product = (0, 0, m3, m4, m5)
    elif m6 == 3:
        manufacturer = (m1, m2, m3, 0, 0)
        product = (0, 0, 0, m4, m5)
    elif m6 == 4:
        manufacturer = (m1, m2, m3, m4, 0)
        product = (0, 0, 0, 0, m5)
    else:
        manufacturer = (m1, m2, m3, m4, m5)
        product = (0, 0, 0, 0, m6)

    return (number_system, *manufacturer, *product)


def upce_check_digit(digits: Sequence[int]) -> int | None:
    """Check digit for a 7-digit UPC-E payload, None if it cannot be expanded."""
    expanded = expand_upce(digits)
    if not expanded:
        return None
    return payload_check_digit(expanded)


def upce_to_upca(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Convert an 8-digit UPC-E code to the 12-digit UPC-A it abbreviates.

    The UPC-E check digit carries over unchanged.
    """
    if len(digits) != 8:
        raise ValueError(f"UPC-E code must have 8 digits, got {len(digits)}")
    return (*expand_upce(digits[:7]), digits[7])
