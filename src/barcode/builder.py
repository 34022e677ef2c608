"""
Module sequence assembly for validated EAN/UPC codes.
"""

from collections.abc import Iterator, Sequence

from src.barcode.tables import (
    CODING_MAP,
    EAN13_PARITY,
    END_GUARD,
    MIDDLE_GUARD,
    PARITY_MASK,
    PARITY_WIDTH,
    PATTERN_WIDTH,
    START_GUARD,
    UPCE_END_GUARD,
    UPCE_PARITY,
)
from src.models.symbology import BarcodeSymbology


def pattern_bits(value: int, width: int = PATTERN_WIDTH) -> Iterator[int]:
    """Expand a pattern value into module bits, most significant bit first."""
    for shift in range(width - 1, -1, -1):
        yield (value >> shift) & 1


def _left_half(digits: Sequence[int], parity: int) -> Iterator[int]:
    """Six left-half digits as L or G patterns according to the parity selector."""
    for i, digit in enumerate(digits):
        entry = CODING_MAP[digit]
        use_guard = (parity >> (PARITY_WIDTH - 1 - i)) & 1
        yield from pattern_bits(entry.guard if use_guard else entry.left)


def _right_half(digits: Sequence[int]) -> Iterator[int]:
    for digit in digits:
        yield from pattern_bits(CODING_MAP[digit].right)


def _ean13_layout(left: Sequence[int], right: Sequence[int], parity: int) -> tuple[int, ...]:
    # Shared by EAN-13 and UPC-A
    return (
        *START_GUARD,
        *_left_half(left, parity),
        *MIDDLE_GUARD,
        *_right_half(right),
        *END_GUARD,
    )


def build_ean13(digits: Sequence[int]) -> tuple[int, ...]:
    """First digit is carried by the L/G parity of the left half."""
    return _ean13_layout(digits[1:7], digits[7:13], EAN13_PARITY[digits[0]])


def build_upca(digits: Sequence[int]) -> tuple[int, ...]:
    """EAN-13 layout with an implicit leading 0, so the left half is all L."""
    return _ean13_layout(digits[0:6], digits[6:12], EAN13_PARITY[0])


def build_ean8(digits: Sequence[int]) -> tuple[int, ...]:
    modules: list[int] = list(START_GUARD)
    for digit in digits[0:4]:
        modules.extend(pattern_bits(CODING_MAP[digit].left))
    modules.extend(MIDDLE_GUARD)
    modules.extend(_right_half(digits[4:8]))
    modules.extend(END_GUARD)
    return tuple(modules)


def build_upce(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Six data digits between a start guard and the 6-module UPC-E end guard.

    Parity comes from the check digit; number system 1 inverts it.
    """
    number_system = digits[0]
    parity = UPCE_PARITY[digits[7]]
    if number_system == 1:
        parity ^= PARITY_MASK
    return (
        *START_GUARD,
        *_left_half(digits[1:7], parity),
        *UPCE_END_GUARD,
    )


BUILDERS = {
    BarcodeSymbology.EAN_13: build_ean13,
    BarcodeSymbology.UPC_A: build_upca,
    BarcodeSymbology.EAN_8: build_ean8,
    BarcodeSymbology.UPC_E: build_upce,
}


def build_modules(symbology: BarcodeSymbology, digits: Sequence[int]) -> tuple[int, ...]:
    """
    Assemble the module sequence for an already validated code.

    Args:
        symbology: Symbology the digits validated as
        digits: Full code, check digit included

    Returns:
        Module bits (1 = bar, 0 = space), leftmost first
    """
    builder = BUILDERS.get(symbology)
    if builder is None:
        raise ValueError(f"Cannot build modules for symbology {symbology.value}")
    return builder(digits)
