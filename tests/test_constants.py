"""
Unit tests for constants module.

Tests the alphabet, root bounds and geodesy constants.
"""

import unittest

from digipin.api.core.constants import (
    DIGIPIN_ALPHABET,
    DIGIPIN_FORMATTED_LENGTH,
    DIGIPIN_LENGTH,
    DIGIPIN_SEPARATOR,
    GRID_SIZE,
    GRID_SIZES_METERS,
    INDIA_BOUNDS,
    MAX_LEVEL,
    METERS_PER_DEGREE,
    SEPARATOR_POSITIONS,
)


class TestAlphabet(unittest.TestCase):
    """Test suite for the symbol matrix"""

    def test_shape(self):
        """Test that the alphabet is 4x4"""
        self.assertEqual(len(DIGIPIN_ALPHABET), GRID_SIZE)
        for row in DIGIPIN_ALPHABET:
            self.assertEqual(len(row), GRID_SIZE)

    def test_symbols_distinct(self):
        """Test that all 16 symbols are distinct"""
        symbols = [symbol for row in DIGIPIN_ALPHABET for symbol in row]
        self.assertEqual(len(set(symbols)), 16)
        self.assertNotIn(DIGIPIN_SEPARATOR, symbols)

    def test_corners(self):
        """Test the corner symbols"""
        self.assertEqual(DIGIPIN_ALPHABET[0][0], "F")
        self.assertEqual(DIGIPIN_ALPHABET[3][3], "T")


class TestBounds(unittest.TestCase):
    """Test suite for root bounds"""

    def test_india_bounds(self):
        """Test that the root is a 36 degree square"""
        south, north, west, east = INDIA_BOUNDS
        self.assertEqual(north - south, 36.0)
        self.assertEqual(east - west, 36.0)


class TestLengths(unittest.TestCase):
    """Test suite for code length constants"""

    def test_lengths(self):
        """Test full and formatted lengths"""
        self.assertEqual(DIGIPIN_LENGTH, MAX_LEVEL)
        self.assertEqual(DIGIPIN_FORMATTED_LENGTH, DIGIPIN_LENGTH + len(SEPARATOR_POSITIONS))

    def test_grid_sizes(self):
        """Test one nominal size per level, shrinking by about 4"""
        self.assertEqual(len(GRID_SIZES_METERS), MAX_LEVEL)
        for coarse, fine in zip(GRID_SIZES_METERS, GRID_SIZES_METERS[1:]):
            self.assertAlmostEqual(coarse / fine, 4.0, delta=0.1)

    def test_meters_per_degree(self):
        """Test the degree conversion"""
        self.assertEqual(METERS_PER_DEGREE, 111000.0)


if __name__ == "__main__":
    unittest.main()
