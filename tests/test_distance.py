"""
Unit tests for distance module.

Tests great-circle distance, bearing and midpoint calculations.
"""

import unittest

from digipin.api.codec import encode
from digipin.api.core.exceptions import FormatError
from digipin.api.core.types import Coordinates
from digipin.api.distance import (
    calculate_bearing,
    calculate_digipin_bearing,
    calculate_digipin_distance,
    calculate_digipin_midpoint,
    calculate_distance,
    calculate_midpoint,
    haversine_km,
)
from digipin.api.hierarchy import get_neighbors


DELHI = Coordinates(28.6139, 77.2090)
MUMBAI = Coordinates(19.0760, 72.8777)


class TestDistance(unittest.TestCase):
    """Test suite for distance calculations"""

    def test_same_point(self):
        """Test that distance to itself is zero"""
        result = calculate_distance(DELHI, DELHI)
        self.assertEqual(result.meters, 0.0)
        self.assertEqual(result.kilometers, 0.0)

    def test_delhi_to_mumbai(self):
        """Test a known long distance"""
        result = calculate_distance(DELHI, MUMBAI)
        self.assertGreater(result.kilometers, 1100)
        self.assertLess(result.kilometers, 1200)
        self.assertAlmostEqual(result.miles, result.kilometers * 0.621371, delta=0.1)
        self.assertAlmostEqual(result.meters / 1000, result.kilometers, delta=0.01)

    def test_symmetric(self):
        """Test that distance does not depend on direction"""
        self.assertEqual(calculate_distance(DELHI, MUMBAI), calculate_distance(MUMBAI, DELHI))

    def test_haversine_one_degree(self):
        """Test one degree of latitude is about 111 km"""
        self.assertAlmostEqual(haversine_km(10.0, 77.0, 11.0, 77.0), 111.19, delta=0.05)


class TestBearing(unittest.TestCase):
    """Test suite for bearing calculations"""

    def test_due_north(self):
        """Test bearing along a meridian"""
        result = calculate_bearing(Coordinates(10.0, 77.0), Coordinates(20.0, 77.0))
        self.assertAlmostEqual(result.initial, 0.0)
        self.assertAlmostEqual(result.final, 0.0)

    def test_due_east_on_equator(self):
        """Test bearing along the equator"""
        result = calculate_bearing(Coordinates(0.0, 70.0), Coordinates(0.0, 80.0))
        self.assertAlmostEqual(result.initial, 90.0)
        self.assertAlmostEqual(result.final, 90.0)

    def test_range(self):
        """Test that bearings are within 0-360"""
        result = calculate_bearing(DELHI, MUMBAI)
        self.assertGreaterEqual(result.initial, 0.0)
        self.assertLess(result.initial, 360.0)
        # Mumbai is south-southwest of Delhi
        self.assertGreater(result.initial, 180.0)
        self.assertLess(result.initial, 270.0)


class TestMidpoint(unittest.TestCase):
    """Test suite for midpoint calculations"""

    def test_meridian_midpoint(self):
        """Test midpoint along a meridian"""
        result = calculate_midpoint(Coordinates(10.0, 77.0), Coordinates(20.0, 77.0))
        self.assertAlmostEqual(result.latitude, 15.0, places=5)
        self.assertAlmostEqual(result.longitude, 77.0, places=5)

    def test_same_point(self):
        """Test midpoint of a point with itself"""
        result = calculate_midpoint(DELHI, DELHI)
        self.assertAlmostEqual(result.latitude, DELHI.latitude, places=5)
        self.assertAlmostEqual(result.longitude, DELHI.longitude, places=5)


class TestDigipinMeasurements(unittest.TestCase):
    """Test suite for code-based measurements"""

    def test_distance_between_codes(self):
        """Test that code distance is close to coordinate distance"""
        by_code = calculate_digipin_distance(encode(DELHI.latitude, DELHI.longitude), "4FK-595-8823")
        by_point = calculate_distance(DELHI, MUMBAI)
        self.assertAlmostEqual(by_code.kilometers, by_point.kilometers, delta=0.05)

    def test_distance_same_code(self):
        """Test that a cell is zero distance from itself"""
        self.assertEqual(calculate_digipin_distance("39J-438-TJC7", "39j438tjc7").meters, 0.0)

    def test_bearing_between_codes(self):
        """Test bearing from a cell to its northern neighbor"""
        north = get_neighbors("39J438")[0]
        result = calculate_digipin_bearing("39J438", north)
        self.assertTrue(result.initial < 1.0 or result.initial > 359.0)

    def test_midpoint_between_codes(self):
        """Test that the midpoint lies between the two cells"""
        result = calculate_digipin_midpoint("39J-438-TJC7", "4FK-595-8823")
        self.assertLess(result.latitude, DELHI.latitude)
        self.assertGreater(result.latitude, MUMBAI.latitude)

    def test_invalid_code(self):
        """Test that invalid codes raise FormatError"""
        with self.assertRaises(FormatError):
            calculate_digipin_distance("39J", "XYZ")


if __name__ == "__main__":
    unittest.main()
