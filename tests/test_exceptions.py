"""
Unit tests for exceptions module.

Tests all custom exception classes used throughout the API.
"""

import unittest

from digipin.api.core.exceptions import (
    BatchError,
    BoundsError,
    CoordinatesError,
    DigipinError,
    FormatError,
    PrecisionError,
)


class TestDigipinError(unittest.TestCase):
    """Test suite for DigipinError base exception"""

    def test_is_exception(self):
        """Test that DigipinError is an Exception"""
        self.assertTrue(issubclass(DigipinError, Exception))

    def test_instantiation(self):
        """Test creating a DigipinError instance"""
        error = DigipinError("Test error message")
        self.assertEqual(str(error), "Test error message")
        self.assertEqual(error.details, {})

    def test_with_no_message(self):
        """Test creating a DigipinError with no message"""
        self.assertEqual(str(DigipinError()), "")

    def test_details(self):
        """Test that details are stored as a copy"""
        details = {"latitude": 91.0}
        error = DigipinError("Out of range", details)
        details["latitude"] = 0.0
        self.assertEqual(error.details, {"latitude": 91.0})

    def test_code(self):
        """Test the base error code"""
        self.assertEqual(DigipinError.code, "DIGIPIN_ERROR")


class TestSubclasses(unittest.TestCase):
    """Test suite for specific error types"""

    def test_inherit_from_base(self):
        """Test that every error derives from DigipinError"""
        for error_class in (CoordinatesError, BoundsError, PrecisionError, FormatError, BatchError):
            self.assertTrue(issubclass(error_class, DigipinError))

    def test_codes_are_distinct(self):
        """Test that every error has its own code"""
        error_classes = (CoordinatesError, BoundsError, PrecisionError, FormatError, BatchError)
        codes = {error_class.code for error_class in error_classes}
        self.assertEqual(len(codes), 5)

    def test_format_error(self):
        """Test FormatError with details"""
        error = FormatError("Invalid character 'A' at position 1", {"character": "A", "position": 1})
        self.assertEqual(error.code, "FORMAT_ERROR")
        self.assertEqual(error.details["position"], 1)
        self.assertIsInstance(error, DigipinError)

    def test_catch_as_base(self):
        """Test that subclasses can be caught as DigipinError"""
        with self.assertRaises(DigipinError):
            raise PrecisionError("Precision must be between 1 and 10, got 11")


if __name__ == "__main__":
    unittest.main()
