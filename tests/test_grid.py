"""
Unit tests for grid module.

Tests bounded grid enumeration and its circular, line, polygon and sampling variants.
"""

import math
import unittest

from digipin.api.codec import decode, encode
from digipin.api.core.constants import DIGIPIN_ALPHABET
from digipin.api.core.exceptions import BoundsError, PrecisionError
from digipin.api.core.types import DEFAULT_GRID_SPEC, Coordinates, GridBounds
from digipin.api.distance import haversine_km
from digipin.api.grid import (
    generate_circular_grid,
    generate_grid,
    generate_hierarchical_grid,
    generate_line_grid,
    generate_polygon_grid,
    generate_sparse_grid,
    generate_systematic_grid,
    is_point_in_polygon,
)


DELHI_BOX = {"north": 28.7, "south": 28.6, "east": 77.3, "west": 77.2}


class TestGenerateGrid(unittest.TestCase):
    """Test suite for generate_grid"""

    def test_delhi_box(self):
        """Test a small box around Delhi at precision 6"""
        codes = generate_grid(DELHI_BOX, precision=6)
        self.assertGreater(len(codes), 0)
        self.assertEqual(len(codes), len(set(codes)))

        lat_extent, lon_extent = DEFAULT_GRID_SPEC.cell_extent(6)
        for code in codes:
            self.assertEqual(len(code), 6)
            result = decode(code)
            self.assertGreaterEqual(result.latitude, DELHI_BOX["south"] - lat_extent)
            self.assertLessEqual(result.latitude, DELHI_BOX["north"] + lat_extent)
            self.assertGreaterEqual(result.longitude, DELHI_BOX["west"] - lon_extent)
            self.assertLessEqual(result.longitude, DELHI_BOX["east"] + lon_extent)

    def test_lattice_order(self):
        """Test that the first code covers the southwest corner"""
        codes = generate_grid(DELHI_BOX, 6)
        self.assertEqual(codes[0], encode(28.6, 77.2, 6))

    def test_accepts_grid_bounds(self):
        """Test that GridBounds and mappings give the same result"""
        bounds = GridBounds(south=28.6, north=28.7, west=77.2, east=77.3)
        self.assertEqual(generate_grid(bounds, 6), generate_grid(DELHI_BOX, 6))

    def test_level_one_covers_root(self):
        """Test that the root at level 1 yields all 16 symbols"""
        codes = generate_grid(DEFAULT_GRID_SPEC.root, 1)
        expected = {symbol for row in DIGIPIN_ALPHABET for symbol in row}
        self.assertEqual(set(codes), expected)
        self.assertEqual(codes[0], "L")

    def test_level_two_covers_root(self):
        """Test that the root at level 2 yields all 256 cells"""
        codes = generate_grid(DEFAULT_GRID_SPEC.root, 2)
        self.assertEqual(len(codes), 256)

    def test_level_one_tiles_root(self):
        """Test that level 1 cells partition the root area"""
        root = DEFAULT_GRID_SPEC.root
        area = 0.0
        for code in generate_grid(root, 1):
            bounds = decode(code).bounds
            area += bounds.lat_extent * bounds.lon_extent
        self.assertAlmostEqual(area, root.lat_extent * root.lon_extent)

    def test_level_two_tiles_root(self):
        """Test that level 2 cells cover the root without overlapping"""
        root = DEFAULT_GRID_SPEC.root
        cells = [decode(code).bounds for code in generate_grid(root, 2)]
        self.assertEqual(len(cells), 256)

        area = sum(bounds.lat_extent * bounds.lon_extent for bounds in cells)
        self.assertAlmostEqual(area, root.lat_extent * root.lon_extent)

        for i, first in enumerate(cells):
            for second in cells[i + 1 :]:
                overlaps = (
                    first.south < second.north
                    and second.south < first.north
                    and first.west < second.east
                    and second.west < first.east
                )
                self.assertFalse(overlaps, (first, second))

    def test_outside_root_is_empty(self):
        """Test that a box outside the grid yields no codes"""
        self.assertEqual(generate_grid({"south": 40.0, "north": 41.0, "west": 70.0, "east": 71.0}, 4), [])

    def test_inverted_bounds(self):
        """Test that an empty or inverted box raises BoundsError"""
        with self.assertRaises(BoundsError):
            generate_grid({"north": 28.6, "south": 28.7, "east": 77.3, "west": 77.2}, 6)
        with self.assertRaises(BoundsError):
            generate_grid({"north": 28.7, "south": 28.6, "east": 77.2, "west": 77.2}, 6)

    def test_missing_edge(self):
        """Test that a mapping without all edges raises BoundsError"""
        with self.assertRaises(BoundsError):
            generate_grid({"north": 28.7, "south": 28.6, "east": 77.3}, 6)

    def test_invalid_precision(self):
        """Test that an out-of-range precision raises PrecisionError"""
        with self.assertRaises(PrecisionError):
            generate_grid(DELHI_BOX, 11)
        with self.assertRaises(PrecisionError):
            generate_grid(DELHI_BOX, 0)


class TestCircularGrid(unittest.TestCase):
    """Test suite for generate_circular_grid"""

    def test_centers_within_radius(self):
        """Test that every returned cell center lies inside the circle"""
        codes = generate_circular_grid(28.6139, 77.2090, 2.0, 6)
        self.assertGreater(len(codes), 0)
        for code in codes:
            result = decode(code)
            self.assertLessEqual(haversine_km(28.6139, 77.2090, result.latitude, result.longitude), 2.0)

    def test_contains_center_cell(self):
        """Test that the cell under the center point is included"""
        codes = generate_circular_grid(28.6139, 77.2090, 1.0, 6)
        self.assertIn(encode(28.6139, 77.2090, 6), codes)

    def test_invalid_radius(self):
        """Test that a non-positive radius raises ValueError"""
        with self.assertRaises(ValueError):
            generate_circular_grid(28.6139, 77.2090, 0, 6)


class TestLineGrid(unittest.TestCase):
    """Test suite for generate_line_grid"""

    def test_endpoints(self):
        """Test that the path starts and ends in the endpoint cells"""
        codes = generate_line_grid(28.6, 77.2, 28.7, 77.3, 6)
        self.assertEqual(codes[0], encode(28.6, 77.2, 6))
        self.assertEqual(codes[-1], encode(28.7, 77.3, 6))
        self.assertEqual(len(codes), len(set(codes)))

    def test_single_step(self):
        """Test that one step samples only the endpoints"""
        codes = generate_line_grid(28.6, 77.2, 19.0, 72.8, 4, steps=1)
        self.assertEqual(codes, [encode(28.6, 77.2, 4), encode(19.0, 72.8, 4)])

    def test_skips_points_outside(self):
        """Test that samples outside the grid are dropped"""
        codes = generate_line_grid(20.0, 60.0, 20.0, 70.0, 2, steps=10)
        self.assertGreater(len(codes), 0)
        for code in codes:
            self.assertGreaterEqual(decode(code).bounds.east, 63.5)

    def test_invalid_steps(self):
        """Test that fewer than one step raises ValueError"""
        with self.assertRaises(ValueError):
            generate_line_grid(28.6, 77.2, 28.7, 77.3, 6, steps=0)


class TestPolygon(unittest.TestCase):
    """Test suite for polygon helpers"""

    SQUARE = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]

    def test_point_inside(self):
        """Test a point inside a square"""
        self.assertTrue(is_point_in_polygon(5.0, 5.0, self.SQUARE))

    def test_point_outside(self):
        """Test points outside a square"""
        self.assertFalse(is_point_in_polygon(15.0, 5.0, self.SQUARE))
        self.assertFalse(is_point_in_polygon(5.0, -1.0, self.SQUARE))

    def test_accepts_coordinates(self):
        """Test that Coordinates vertices work like tuples"""
        vertices = [Coordinates(lat, lon) for lat, lon in self.SQUARE]
        self.assertTrue(is_point_in_polygon(5.0, 5.0, vertices))

    def test_polygon_grid_subset_of_box(self):
        """Test that polygon cells come from the bounding grid"""
        square = [(28.6, 77.2), (28.6, 77.3), (28.7, 77.3), (28.7, 77.2)]
        codes = generate_polygon_grid(square, 6)
        self.assertGreater(len(codes), 0)
        self.assertTrue(set(codes) <= set(generate_grid(DELHI_BOX, 6)))

    def test_triangle_smaller_than_box(self):
        """Test that a triangle keeps fewer cells than its bounding box"""
        triangle = [(28.6, 77.2), (28.6, 77.3), (28.7, 77.2)]
        self.assertLess(len(generate_polygon_grid(triangle, 6)), len(generate_grid(DELHI_BOX, 6)))

    def test_too_few_vertices(self):
        """Test that fewer than 3 vertices raises ValueError"""
        with self.assertRaises(ValueError):
            generate_polygon_grid([(28.6, 77.2), (28.7, 77.3)], 6)


class TestSamplingVariants(unittest.TestCase):
    """Test suite for sparse, systematic and hierarchical grids"""

    def test_sparse_size(self):
        """Test that the sample size is floor(n * density)"""
        full = generate_grid(DELHI_BOX, 6)
        sample = generate_sparse_grid(DELHI_BOX, 6, density=0.5, seed=7)
        self.assertEqual(len(sample), math.floor(len(full) * 0.5))
        self.assertTrue(set(sample) <= set(full))

    def test_sparse_reproducible(self):
        """Test that a seed gives a reproducible sample"""
        first = generate_sparse_grid(DELHI_BOX, 6, density=0.25, seed=42)
        second = generate_sparse_grid(DELHI_BOX, 6, density=0.25, seed=42)
        self.assertEqual(first, second)

    def test_sparse_invalid_density(self):
        """Test that density outside (0, 1] raises ValueError"""
        with self.assertRaises(ValueError):
            generate_sparse_grid(DELHI_BOX, 6, density=0)
        with self.assertRaises(ValueError):
            generate_sparse_grid(DELHI_BOX, 6, density=1.5)

    def test_systematic(self):
        """Test that every n-th cell is kept"""
        full = generate_grid(DELHI_BOX, 6)
        self.assertEqual(generate_systematic_grid(DELHI_BOX, 6, spacing=3), full[::3])

    def test_systematic_invalid_spacing(self):
        """Test that spacing below 1 raises ValueError"""
        with self.assertRaises(ValueError):
            generate_systematic_grid(DELHI_BOX, 6, spacing=0)

    def test_hierarchical(self):
        """Test that each level is keyed by precision"""
        grids = generate_hierarchical_grid(DELHI_BOX, precision_levels=(4, 5))
        self.assertEqual(set(grids), {4, 5})
        self.assertEqual(grids[5], generate_grid(DELHI_BOX, 5))
        for code in grids[4]:
            self.assertEqual(len(code), 4)


if __name__ == "__main__":
    unittest.main()
