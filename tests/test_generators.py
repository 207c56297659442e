"""
Unit tests for the procedural generators
"""

import itertools
import time
import unittest
import numpy as np
from scipy import ndimage
from occupancy_editor.core import CELL_FREE, CELL_OCCUPIED, CELL_UNKNOWN, new_buffer, as_grid
from occupancy_editor.generation import (MazeOptions, BugtrapOptions, ShapesOptions, ShapeType,
                                         generate, generate_maze, draw_bugtrap_in_place,
                                         shape_cells, scatter_shapes, place_shapes)
from occupancy_editor.generation.shapes import _clear_of_obstacles


def free_edge_count(grid):
    """Number of 4-adjacent FREE/FREE cell pairs"""
    free = grid == CELL_FREE
    return int(np.sum(free[:, 1:] & free[:, :-1]) + np.sum(free[1:, :] & free[:-1, :]))


class TestMaze(unittest.TestCase):
    """Test recursive-backtracker maze"""

    def test_perfect_maze(self):
        """All free cells connected, and the free subgraph is a tree"""
        for (width, height), seed in itertools.product(((21, 15), (20, 12), (31, 31)), range(3)):
            buf = generate_maze(width, height, rng=np.random.default_rng(seed))
            grid = as_grid(buf, width, height)
            labels, n = ndimage.label(grid == CELL_FREE)
            self.assertEqual(n, 1)
            self.assertEqual(labels[1, 1], 1)
            n_free = int(np.sum(grid == CELL_FREE))
            self.assertEqual(free_edge_count(grid), n_free - 1)

    def test_border_is_occupied(self):
        width, height = 21, 15
        grid = as_grid(generate_maze(width, height, rng=np.random.default_rng(7)), width, height)
        self.assertTrue(np.all(grid[0, :] == CELL_OCCUPIED))
        self.assertTrue(np.all(grid[-1, :] == CELL_OCCUPIED))
        self.assertTrue(np.all(grid[:, 0] == CELL_OCCUPIED))
        self.assertTrue(np.all(grid[:, -1] == CELL_OCCUPIED))

    def test_visits_every_lattice_cell(self):
        width, height = 21, 15
        grid = as_grid(generate_maze(width, height, rng=np.random.default_rng(3)), width, height)
        self.assertTrue(np.all(grid[1:-1:2, 1:-1:2] == CELL_FREE))

    def test_too_small(self):
        """Grids under 3x3 come back fully occupied"""
        for width, height in ((2, 5), (5, 2), (1, 1)):
            buf = generate_maze(width, height)
            self.assertTrue(np.all(buf == CELL_OCCUPIED))
            self.assertEqual(buf.size, width * height)

    def test_ignores_existing_content(self):
        buf = new_buffer(9, 9, CELL_UNKNOWN)
        out = generate(buf, 9, 9, MazeOptions(), rng=np.random.default_rng(0))
        self.assertFalse(np.any(out == CELL_UNKNOWN))
        self.assertTrue(np.all(buf == CELL_UNKNOWN))


class TestBugtrap(unittest.TestCase):
    """Test U-shaped trap drawing"""

    def setUp(self):
        """Clear 64x64 grid before each test"""
        self.buffer = new_buffer(64, 64)
        self.options = BugtrapOptions(width=20, length=30, thickness=2, aperture=6)

    def test_aperture(self):
        """6-cell gap centered in the back wall, arms unbroken"""
        draw_bugtrap_in_place(self.buffer, 64, 64, self.options)
        grid = as_grid(self.buffer, 64, 64)
        # outer box spans x 17..46, y 22..41
        back_wall = grid[22:42, 17:19]
        gap_rows = [y for y in range(20) if np.all(back_wall[y] == CELL_FREE)]
        self.assertEqual(gap_rows, list(range(7, 13)))  # rows 29..34
        self.assertTrue(np.all(back_wall[:7] == CELL_OCCUPIED))
        self.assertTrue(np.all(back_wall[13:] == CELL_OCCUPIED))
        self.assertTrue(np.all(grid[22:24, 17:47] == CELL_OCCUPIED))
        self.assertTrue(np.all(grid[40:42, 17:47] == CELL_OCCUPIED))
        self.assertEqual(int(np.sum(grid == CELL_OCCUPIED)), 140)

    def test_odd_aperture(self):
        """Odd gap puts the extra row below center"""
        draw_bugtrap_in_place(self.buffer, 64, 64, BugtrapOptions(20, 30, 2, 5))
        grid = as_grid(self.buffer, 64, 64)
        back_wall = grid[22:42, 17:19]
        gap_rows = [22 + y for y in range(20) if np.all(back_wall[y] == CELL_FREE)]
        self.assertEqual(gap_rows, [30, 31, 32, 33, 34])
        self.assertEqual(int(np.sum(grid == CELL_OCCUPIED)), 142)

    def test_aperture_wider_than_trap(self):
        """Back wall disappears, arms stay"""
        draw_bugtrap_in_place(self.buffer, 64, 64, BugtrapOptions(20, 30, 2, 30))
        grid = as_grid(self.buffer, 64, 64)
        self.assertTrue(np.all(grid[24:40, 17:19] == CELL_FREE))
        self.assertTrue(np.all(grid[22:24, 17:47] == CELL_OCCUPIED))
        self.assertTrue(np.all(grid[40:42, 17:47] == CELL_OCCUPIED))
        self.assertEqual(int(np.sum(grid == CELL_OCCUPIED)), 120)

    def test_closed_trap(self):
        draw_bugtrap_in_place(self.buffer, 64, 64, BugtrapOptions(20, 30, 2, 0))
        grid = as_grid(self.buffer, 64, 64)
        self.assertTrue(np.all(grid[22:42, 17:19] == CELL_OCCUPIED))
        self.assertTrue(np.all(grid[24:40, 19:47] == CELL_FREE))

    def test_mutates_in_place(self):
        out = draw_bugtrap_in_place(self.buffer, 64, 64, self.options)
        self.assertIs(out, self.buffer)
        self.assertTrue(np.any(self.buffer == CELL_OCCUPIED))

    def test_dispatch_leaves_input_alone(self):
        out = generate(self.buffer, 64, 64, self.options)
        self.assertTrue(np.all(self.buffer == CELL_FREE))
        self.assertTrue(np.any(out == CELL_OCCUPIED))

    def test_keeps_existing_content(self):
        self.buffer[0] = CELL_UNKNOWN
        draw_bugtrap_in_place(self.buffer, 64, 64, self.options)
        self.assertEqual(self.buffer[0], CELL_UNKNOWN)

    def test_clipped_to_small_grid(self):
        """Trap larger than the grid is clipped, not an error"""
        buf = new_buffer(10, 6)
        draw_bugtrap_in_place(buf, 10, 6, self.options)
        self.assertEqual(buf.size, 60)


class TestShapeCells(unittest.TestCase):
    """Test shape cell enumeration"""

    def test_square(self):
        cells = shape_cells(ShapeType.SQUARE, 5, 5, 3, 9)
        self.assertEqual(set(cells), {(x, y) for x in range(4, 7) for y in range(4, 7)})

    def test_rect(self):
        cells = shape_cells('rect', 5, 5, 4, 2)
        self.assertEqual(set(cells), {(x, y) for x in range(3, 7) for y in range(4, 6)})

    def test_circle(self):
        cells = shape_cells(ShapeType.CIRCLE, 0, 0, 5, 0)
        self.assertEqual(len(cells), 13)
        self.assertTrue(all(x * x + y * y <= 4 for x, y in cells))

    def test_triangle(self):
        cells = shape_cells(ShapeType.TRIANGLE, 10, 10, 4, 0)
        self.assertEqual(len(cells), 1 + 3 + 5 + 7)
        self.assertIn((10, 8), cells)  # apex
        self.assertNotIn((9, 8), cells)

    def test_cross(self):
        cells = set(shape_cells(ShapeType.CROSS, 10, 10, 6, 0))
        self.assertEqual(len(cells), 20)
        self.assertIn((7, 10), cells)
        self.assertIn((10, 7), cells)
        self.assertNotIn((7, 7), cells)

    def test_room_is_hollow(self):
        cells = set(shape_cells(ShapeType.ROOM, 10, 10, 5, 4))
        self.assertEqual(len(cells), 14)
        self.assertNotIn((10, 10), cells)

    def test_unknown_shape(self):
        with self.assertRaises(ValueError):
            shape_cells('hexagon', 0, 0, 3, 3)


class TestScatterShapes(unittest.TestCase):
    """Test rejection-sampled shape scatter"""

    def test_non_overlap_with_spacing(self):
        """No two placed footprints touch, diagonals included"""
        options = ShapesOptions(count=15, min_size=3, max_size=8, spacing=1, clear_first=True)
        for seed in range(3):
            out, footprints = place_shapes(new_buffer(80, 80), 80, 80, options,
                                           rng=np.random.default_rng(seed))
            self.assertGreater(len(footprints), 0)
            near = [ndimage.binary_dilation(f, structure=np.ones((3, 3), dtype=bool))
                    for f in footprints]
            for i, j in itertools.combinations(range(len(footprints)), 2):
                self.assertFalse(np.any(near[i] & footprints[j]))
            occupied = as_grid(out, 80, 80) == CELL_OCCUPIED
            np.testing.assert_array_equal(occupied, np.logical_or.reduce(footprints))

    def test_overlap_allowed_places_all(self):
        options = ShapesOptions(count=12, allow_overlap=True, clear_first=True)
        _, footprints = place_shapes(new_buffer(30, 30), 30, 30, options,
                                     rng=np.random.default_rng(5))
        self.assertEqual(len(footprints), 12)

    def test_budget_exhausted_is_not_error(self):
        """A full grid accepts nothing and comes back unchanged"""
        buf = new_buffer(5, 5, CELL_OCCUPIED)
        options = ShapesOptions(shapes=('square',), count=3, spacing=0, clear_first=False)
        out, footprints = place_shapes(buf, 5, 5, options, rng=np.random.default_rng(0))
        self.assertEqual(footprints, [])
        np.testing.assert_array_equal(out, buf)

    def test_keeps_existing_content(self):
        """Cells outside every placed footprint keep their old values"""
        buf = new_buffer(40, 40)
        buf[::5] = CELL_UNKNOWN
        options = ShapesOptions(shapes=('circle',), count=2, min_size=3, max_size=3,
                                spacing=0, clear_first=False)
        out, footprints = place_shapes(buf, 40, 40, options, rng=np.random.default_rng(2))
        untouched = ~np.logical_or.reduce(footprints).ravel()
        np.testing.assert_array_equal(out[untouched], buf[untouched])
        self.assertIsNot(out, buf)
        self.assertTrue(np.all(buf[::5] == CELL_UNKNOWN))

    def test_large_full_grid_is_fast(self):
        """Rejected candidates only look at a window around the shape"""
        buf = new_buffer(2000, 2000, CELL_OCCUPIED)
        options = ShapesOptions(count=10, spacing=2)
        started = time.perf_counter()
        out, footprints = place_shapes(buf, 2000, 2000, options, rng=np.random.default_rng(1))
        self.assertLess(time.perf_counter() - started, 5.0)
        self.assertEqual(footprints, [])
        self.assertTrue(np.all(out == CELL_OCCUPIED))

    def test_spacing_window(self):
        """Spacing is measured in Chebyshev cells from the footprint"""
        occupied = np.zeros((20, 20), dtype=bool)
        occupied[10, 10] = True
        ys, xs = np.array([13]), np.array([13])
        self.assertFalse(_clear_of_obstacles(ys, xs, occupied, 3))
        self.assertTrue(_clear_of_obstacles(ys, xs, occupied, 2))
        self.assertTrue(_clear_of_obstacles(np.array([0]), np.array([0]), occupied, 5))

    def test_clear_first(self):
        buf = new_buffer(20, 20, CELL_UNKNOWN)
        options = ShapesOptions(count=1, clear_first=True)
        out = scatter_shapes(buf, 20, 20, options, rng=np.random.default_rng(4))
        self.assertFalse(np.any(out == CELL_UNKNOWN))
        self.assertTrue(np.all(buf == CELL_UNKNOWN))


class TestOptions(unittest.TestCase):
    """Test option variants and dispatch"""

    def test_shape_names_are_coerced(self):
        options = ShapesOptions(shapes=['rect', 'room'])
        self.assertEqual(options.shapes, (ShapeType.RECT, ShapeType.ROOM))

    def test_single_shape_name(self):
        self.assertEqual(ShapesOptions(shapes='rect').shapes, (ShapeType.RECT,))
        self.assertEqual(ShapesOptions(shapes=ShapeType.CROSS).shapes, (ShapeType.CROSS,))

    def test_invalid_shapes_options(self):
        for bad in (ShapesOptions(count=0), ShapesOptions(shapes=()),
                    ShapesOptions(min_size=5, max_size=2), ShapesOptions(spacing=-1)):
            with self.assertRaises(ValueError):
                generate(new_buffer(10, 10), 10, 10, bad)

    def test_invalid_bugtrap_options(self):
        with self.assertRaises(ValueError):
            generate(new_buffer(10, 10), 10, 10, BugtrapOptions(width=0))

    def test_unknown_options(self):
        with self.assertRaises(TypeError):
            generate(new_buffer(10, 10), 10, 10, {'mode': 'maze'})

    def test_buffer_mismatch(self):
        with self.assertRaises(ValueError):
            generate(new_buffer(10, 10), 10, 9, MazeOptions())


if __name__ == '__main__':
    unittest.main()
