"""
Check digit arithmetic for EAN/UPC codes.
"""

from collections.abc import Sequence


def weighted_checksum(digits: Sequence[int]) -> int:
    """
    Weighted mod-10 sum over a complete code, check digit included.

    Digits at even indexes count once, digits at odd indexes three times.
    A code is valid when the result is 0.
    """
    total = 0
    for i, digit in enumerate(digits):
        total += digit if i % 2 == 0 else digit * 3
    return total % 10


def payload_check_digit(payload: Sequence[int]) -> int:
    """
    Calculate the check digit for a payload without its check digit.

    Algorithm:
    1. Sum digits at even indexes (odd positions, 1-indexed) and weigh by 3
    2. Add the digits at odd indexes
    3. Check digit = 0 if the total is a multiple of 10, else 10 - (total mod 10)

    Used for EAN-8 (7 digits) and expanded UPC-E (11 digits).
    """
    sum_odd = sum(payload[0::2])
    sum_even = sum(payload[1::2])
    mod = (sum_odd * 3 + sum_even) % 10
    return 0 if mod == 0 else 10 - mod


def ean13_check_digit(payload: Sequence[int]) -> int:
    """
    Calculate the EAN-13 check digit for a 12-digit payload.

    The result is the digit that makes weighted_checksum() of the full
    13-digit code equal 0.
    """
    if len(payload) != 12:
        raise ValueError(f"EAN-13 payload must have 12 digits, got {len(payload)}")
    return (10 - weighted_checksum(payload)) % 10
