"""
Tests for coding tables and module sequence assembly.
"""

import pytest

from src.barcode.builder import build_modules, pattern_bits
from src.barcode.parser import parse_digits
from src.barcode.tables import CODING_MAP, EAN13_PARITY, UPCE_PARITY
from src.models.symbology import BarcodeSymbology


def bars(modules: tuple[int, ...]) -> str:
    return "".join(str(bit) for bit in modules)


class TestTables:
    """Tests for the coding tables."""

    def test_patterns_fit_in_seven_bits(self):
        """Every L, R and G pattern is a 7-bit value."""
        assert len(CODING_MAP) == 10
        for entry in CODING_MAP:
            for value in entry:
                assert 0 <= value < 1 << 7

    def test_right_is_complement_of_left(self):
        """R patterns are L patterns with bars and spaces swapped."""
        for entry in CODING_MAP:
            assert entry.right == entry.left ^ 0b1111111

    def test_guard_is_reversed_right(self):
        """G patterns are R patterns read right to left."""
        for entry in CODING_MAP:
            assert f"{entry.guard:07b}" == f"{entry.right:07b}"[::-1]

    def test_parity_tables(self):
        """Parity selectors are 6-bit values and row 0 is all L."""
        for table in (EAN13_PARITY, UPCE_PARITY):
            assert len(table) == 10
            assert table[0] == 0
            assert all(0 <= row < 1 << 6 for row in table)


class TestPatternBits:
    """Tests for pattern expansion."""

    def test_most_significant_bit_first(self):
        """Test bit order of expanded patterns."""
        assert list(pattern_bits(0b0001101)) == [0, 0, 0, 1, 1, 0, 1]
        assert list(pattern_bits(0b101, 3)) == [1, 0, 1]


class TestBuildEAN13:
    """Tests for EAN-13 assembly."""

    def test_known_code(self):
        """4006381333931: first digit 4 selects parity L G L L G G."""
        expected = (
            "101"
            "0001101" "0100111" "0101111" "0111101" "0001001" "0110011"  # L0 G0 L6 L3 G8 G1
            "01010"
            "1000010" "1000010" "1000010" "1110100" "1000010" "1100110"  # R3 R3 R3 R9 R3 R1
            "101"
        )
        modules = build_modules(BarcodeSymbology.EAN_13, parse_digits("4006381333931"))
        assert bars(modules) == expected
        assert len(modules) == 95

    def test_guard_positions(self):
        """Guards sit at fixed offsets whatever the digits."""
        modules = build_modules(BarcodeSymbology.EAN_13, parse_digits("5901234123457"))
        assert modules[0:3] == (1, 0, 1)
        assert modules[45:50] == (0, 1, 0, 1, 0)
        assert modules[92:95] == (1, 0, 1)


class TestBuildUPCA:
    """Tests for UPC-A assembly."""

    def test_known_code(self):
        """012345678905: all left digits use L patterns."""
        expected = (
            "101"
            "0001101" "0011001" "0010011" "0111101" "0100011" "0110001"  # L0 L1 L2 L3 L4 L5
            "01010"
            "1010000" "1000100" "1001000" "1110100" "1110010" "1001110"  # R6 R7 R8 R9 R0 R5
            "101"
        )
        modules = build_modules(BarcodeSymbology.UPC_A, parse_digits("012345678905"))
        assert bars(modules) == expected

    def test_matches_ean13_with_leading_zero(self):
        """UPC-A draws like EAN-13 with an implicit leading 0."""
        upca = build_modules(BarcodeSymbology.UPC_A, parse_digits("036000291456"))
        ean13 = build_modules(BarcodeSymbology.EAN_13, parse_digits("0036000291456"))
        assert upca == ean13
        assert len(upca) == 95


class TestBuildEAN8:
    """Tests for EAN-8 assembly."""

    def test_known_code(self):
        """96385074: four L digits, four R digits."""
        expected = (
            "101"
            "0001011" "0101111" "0111101" "0110111"  # L9 L6 L3 L8
            "01010"
            "1001110" "1110010" "1000100" "1011100"  # R5 R0 R7 R4
            "101"
        )
        modules = build_modules(BarcodeSymbology.EAN_8, parse_digits("96385074"))
        assert bars(modules) == expected
        assert len(modules) == 67


class TestBuildUPCE:
    """Tests for UPC-E assembly."""

    def test_number_system_0(self):
        """01234505: check digit 5 selects parity L G G L L G."""
        expected = (
            "101"
            "0011001" "0011011" "0100001" "0100011" "0110001" "0100111"  # L1 G2 G3 L4 L5 G0
            "010101"
        )
        modules = build_modules(BarcodeSymbology.UPC_E, parse_digits("01234505"))
        assert bars(modules) == expected
        assert len(modules) == 51

    def test_number_system_1_inverts_parity(self):
        """11234502: parity row for check digit 2 is inverted to G G L L G L."""
        expected = (
            "101"
            "0110011" "0011011" "0111101" "0100011" "0111001" "0001101"  # G1 G2 L3 L4 G5 L0
            "010101"
        )
        modules = build_modules(BarcodeSymbology.UPC_E, parse_digits("11234502"))
        assert bars(modules) == expected

    def test_end_guard(self):
        """UPC-E ends with the six-module 010101 guard."""
        modules = build_modules(BarcodeSymbology.UPC_E, parse_digits("04252614"))
        assert modules[:3] == (1, 0, 1)
        assert modules[-6:] == (0, 1, 0, 1, 0, 1)


class TestBuildModules:
    """Tests for symbology dispatch."""

    def test_module_counts(self):
        """Every symbology produces its declared width."""
        cases = {
            BarcodeSymbology.EAN_13: "4006381333931",
            BarcodeSymbology.UPC_A: "012345678905",
            BarcodeSymbology.EAN_8: "96385074",
            BarcodeSymbology.UPC_E: "04252614",
        }
        for symbology, code in cases.items():
            modules = build_modules(symbology, parse_digits(code))
            assert len(modules) == symbology.module_count
            assert set(modules) <= {0, 1}

    def test_unknown_symbology(self):
        """Test that UNKNOWN cannot be built."""
        with pytest.raises(ValueError):
            build_modules(BarcodeSymbology.UNKNOWN, parse_digits("96385074"))
