"""
Tests for UPC-E zero-suppression expansion.
"""

import pytest

from src.barcode.parser import parse_digits
from src.barcode.upce import expand_upce, upce_check_digit, upce_to_upca


class TestExpandUPCE:
    """Tests for expand_upce, one case per branch of the last data digit."""

    def test_last_digit_0_to_2(self):
        """Manufacturer m1 m2 m6 0 0, product 0 0 m3 m4 m5."""
        assert expand_upce((0, 1, 2, 3, 4, 5, 0)) == (0, 1, 2, 0, 0, 0, 0, 0, 3, 4, 5)
        assert expand_upce((0, 1, 2, 3, 4, 5, 1)) == (0, 1, 2, 1, 0, 0, 0, 0, 3, 4, 5)
        assert expand_upce((1, 1, 2, 3, 4, 5, 2)) == (1, 1, 2, 2, 0, 0, 0, 0, 3, 4, 5)

    def test_last_digit_3(self):
        """Manufacturer m1 m2 m3 0 0, product 0 0 0 m4 m5."""
        assert expand_upce((0, 1, 2, 3, 4, 5, 3)) == (0, 1, 2, 3, 0, 0, 0, 0, 0, 4, 5)

    def test_last_digit_4(self):
        """Manufacturer m1 m2 m3 m4 0, product 0 0 0 0 m5."""
        assert expand_upce((0, 1, 2, 3, 4, 5, 4)) == (0, 1, 2, 3, 4, 0, 0, 0, 0, 0, 5)

    def test_last_digit_5_to_9(self):
        """Manufacturer m1..m5, product 0 0 0 0 m6."""
        assert expand_upce((0, 1, 2, 3, 4, 0, 5)) == (0, 1, 2, 3, 4, 0, 0, 0, 0, 0, 5)
        assert expand_upce((0, 1, 2, 3, 4, 5, 9)) == (0, 1, 2, 3, 4, 5, 0, 0, 0, 0, 9)

    def test_known_code(self):
        """0 425261 expands to 0 42100 00526."""
        assert expand_upce(parse_digits("0425261")) == parse_digits("04210000526")

    def test_wrong_length(self):
        """Inputs other than 7 digits expand to nothing."""
        assert expand_upce(()) == ()
        assert expand_upce((0, 1, 2, 3, 4, 5)) == ()
        assert expand_upce((0, 1, 2, 3, 4, 5, 6, 7)) == ()

    def test_pure(self):
        """Expanding twice gives the same result."""
        digits = (0, 4, 2, 5, 2, 6, 1)
        assert expand_upce(digits) == expand_upce(digits)


class TestUPCEConversion:
    """Tests for UPC-E check digits and UPC-A conversion."""

    def test_check_digit(self):
        """Test check digits computed over the expanded payload."""
        assert upce_check_digit(parse_digits("0425261")) == 4
        assert upce_check_digit(parse_digits("0123405")) == 3
        assert upce_check_digit(parse_digits("1123450")) == 2

    def test_check_digit_wrong_length(self):
        """Test that unexpandable input has no check digit."""
        assert upce_check_digit((0, 1)) is None

    def test_to_upca(self):
        """Test the 12-digit equivalent keeps the check digit."""
        assert upce_to_upca(parse_digits("04252614")) == parse_digits("042100005264")

    def test_to_upca_length(self):
        """Test that only 8-digit codes convert."""
        with pytest.raises(ValueError):
            upce_to_upca(parse_digits("0425261"))
