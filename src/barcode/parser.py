"""
Digit parsing for barcode input.
"""

from src.barcode.errors import InvalidCharacterError

DIGITS = "0123456789"


def parse_digits(data: str | bytes | bytearray) -> tuple[int, ...]:
    """
    Convert text or bytes into a sequence of decimal digits.

    Args:
        data: ASCII digit string, as text or bytes

    Returns:
        Tuple of ints in range 0-9, in input order

    Raises:
        InvalidCharacterError: If any character is not an ASCII digit
    """
    if isinstance(data, (bytes, bytearray)):
        for position, byte in enumerate(data):
            if byte > 0x7F:
                raise InvalidCharacterError(f"\\x{byte:02x}", position)
        text = data.decode("ascii")
    else:
        text = data

    digits = []
    for position, char in enumerate(text):
        # str.isdigit() also accepts non-ASCII digits
        if char not in DIGITS:
            raise InvalidCharacterError(char, position)
        digits.append(ord(char) - ord("0"))
    return tuple(digits)


def format_digits(digits: tuple[int, ...] | list[int]) -> str:
    """Render a digit sequence back to its string form."""
    return "".join(DIGITS[d] for d in digits)
