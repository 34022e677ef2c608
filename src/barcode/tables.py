"""
Coding and parity tables for EAN/UPC symbols.

All tables are module-level constants and never mutated.
"""

from typing import NamedTuple

PATTERN_WIDTH = 7
PARITY_WIDTH = 6


class CodingEntry(NamedTuple):
    """7-bit module patterns for one digit."""

    left: int  # L, odd parity
    right: int  # R
    guard: int  # G, even parity


CODING_MAP: tuple[CodingEntry, ...] = (
    CodingEntry(0b0001101, 0b1110010, 0b0100111),  # 0
    CodingEntry(0b0011001, 0b1100110, 0b0110011),  # 1
    CodingEntry(0b0010011, 0b1101100, 0b0011011),  # 2
    CodingEntry(0b0111101, 0b1000010, 0b0100001),  # 3
    CodingEntry(0b0100011, 0b1011100, 0b0011101),  # 4
    CodingEntry(0b0110001, 0b1001110, 0b0111001),  # 5
    CodingEntry(0b0101111, 0b1010000, 0b0000101),  # 6
    CodingEntry(0b0111011, 0b1000100, 0b0010001),  # 7
    CodingEntry(0b0110111, 0b1001000, 0b0001001),  # 8
    CodingEntry(0b0001011, 0b1110100, 0b0010111),  # 9
)

# L/G choice for the six left-half digits, chosen by the first EAN-13 digit.
# 0 bit for L, 1 bit for G, most significant bit first.
EAN13_PARITY: tuple[int, ...] = (
    0b000000,
    0b001011,
    0b001101,
    0b001110,
    0b010011,
    0b011001,
    0b011100,
    0b010101,
    0b010110,
    0b011010,
)

# UPC-E parity for number system 0, indexed by check digit.
# Number system 1 uses the bitwise inverse of the row.
UPCE_PARITY: tuple[int, ...] = (
    0b000000,
    0b001011,
    0b001101,
    0b001110,
    0b010011,
    0b011001,
    0b011100,
    0b010101,
    0b010110,
    0b011010,
)

PARITY_MASK = (1 << PARITY_WIDTH) - 1

START_GUARD = (1, 0, 1)
MIDDLE_GUARD = (0, 1, 0, 1, 0)
END_GUARD = (1, 0, 1)
UPCE_END_GUARD = (0, 1, 0, 1, 0, 1)
