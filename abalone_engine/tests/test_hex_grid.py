"""Test the coordinate mapping and neighbor table."""

import threading
import unittest
from unittest.mock import patch

from abalone_engine.game import hex_grid
from abalone_engine.game.constants import NUM_CELLS, ROW_BOUNDS
from abalone_engine.game.hex_grid import BoardConfigurationError, HexGrid, get_grid
from abalone_engine.game.types import Direction


class TestHexGridMapping(unittest.TestCase):
    def setUp(self):
        self.grid = HexGrid()

    def test_has_61_cells(self):
        self.assertEqual(len(self.grid), NUM_CELLS)
        self.assertEqual(list(self.grid.indices()), list(range(61)))

    def test_row_major_indexing(self):
        self.assertEqual(self.grid.index_of(1, 1), 0)    # A1
        self.assertEqual(self.grid.index_of(5, 1), 4)    # A5
        self.assertEqual(self.grid.index_of(1, 2), 5)    # B1
        self.assertEqual(self.grid.index_of(5, 5), 30)   # E5
        self.assertEqual(self.grid.index_of(5, 9), 56)   # I5
        self.assertEqual(self.grid.index_of(9, 9), 60)   # I9

    def test_mapping_is_bijection(self):
        coords = [self.grid.coord_of(i) for i in self.grid.indices()]
        self.assertEqual(len(set(coords)), NUM_CELLS)
        for index, (m, y) in enumerate(coords):
            self.assertEqual(self.grid.index_of(m, y), index)

    def test_cells_outside_diamond_are_rejected(self):
        self.assertIsNone(self.grid.index_of(6, 1))   # A6
        self.assertIsNone(self.grid.index_of(1, 6))   # F1
        self.assertIsNone(self.grid.index_of(4, 9))   # I4
        self.assertIsNone(self.grid.index_of(0, 5))
        self.assertIsNone(self.grid.index_of(5, 10))

    def test_row_widths_match_layout(self):
        for y, (low, high) in ROW_BOUNDS.items():
            row = [i for i in self.grid.indices() if self.grid.coord_of(i)[1] == y]
            self.assertEqual(len(row), high - low + 1)

    def test_is_valid_index(self):
        self.assertTrue(self.grid.is_valid_index(0))
        self.assertTrue(self.grid.is_valid_index(60))
        self.assertFalse(self.grid.is_valid_index(-1))
        self.assertFalse(self.grid.is_valid_index(61))
        self.assertFalse(self.grid.is_valid_index("E5"))

    def test_wrong_cell_count_is_fatal(self):
        with self.assertRaises(BoardConfigurationError):
            HexGrid({1: (1, 5), 2: (1, 6)})

        bounds = dict(ROW_BOUNDS)
        bounds[5] = (1, 8)
        with self.assertRaises(BoardConfigurationError):
            HexGrid(bounds)


class TestHexGridNeighbors(unittest.TestCase):
    def setUp(self):
        self.grid = HexGrid()

    def test_center_cell_has_six_neighbors(self):
        e5 = self.grid.index_of(5, 5)
        expected = {
            Direction.W: self.grid.index_of(4, 5),    # E4
            Direction.E: self.grid.index_of(6, 5),    # E6
            Direction.NW: self.grid.index_of(5, 6),   # F5
            Direction.NE: self.grid.index_of(6, 6),   # F6
            Direction.SW: self.grid.index_of(4, 4),   # D4
            Direction.SE: self.grid.index_of(5, 4),   # D5
        }
        for direction, target in expected.items():
            self.assertEqual(self.grid.neighbor(e5, direction), target, direction)

    def test_corner_cell_has_three_neighbors(self):
        a1 = self.grid.index_of(1, 1)
        self.assertIsNone(self.grid.neighbor(a1, Direction.W))
        self.assertIsNone(self.grid.neighbor(a1, Direction.SW))
        self.assertIsNone(self.grid.neighbor(a1, Direction.SE))
        self.assertEqual(self.grid.neighbor(a1, Direction.E), self.grid.index_of(2, 1))
        self.assertEqual(self.grid.neighbor(a1, Direction.NW), self.grid.index_of(1, 2))
        self.assertEqual(self.grid.neighbor(a1, Direction.NE), self.grid.index_of(2, 2))

    def test_neighbors_are_symmetric(self):
        for index in self.grid.indices():
            for direction in Direction:
                target = self.grid.neighbor(index, direction)
                if target is not None:
                    self.assertEqual(self.grid.neighbor(target, direction.opposite), index)

    def test_edge_ring_has_24_cells(self):
        edge = [i for i in self.grid.indices() if None in self.grid.neighbors_of(i)]
        self.assertEqual(len(edge), 24)

    def test_neighbor_row_is_ordered_like_direction(self):
        e5 = self.grid.index_of(5, 5)
        row = self.grid.neighbors_of(e5)
        self.assertEqual(row, tuple(self.grid.neighbor(e5, d) for d in Direction))


class TestSharedGrid(unittest.TestCase):
    def test_get_grid_is_idempotent(self):
        self.assertIs(get_grid(), get_grid())

    def test_concurrent_first_use_builds_once(self):
        with patch.object(hex_grid, '_grid', None), \
                patch.object(hex_grid, 'HexGrid', wraps=HexGrid) as factory:
            results = []
            barrier = threading.Barrier(8)

            def worker():
                barrier.wait()
                results.append(hex_grid.get_grid())

            threads = [threading.Thread(target=worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            self.assertEqual(factory.call_count, 1)
            self.assertEqual(len(results), 8)
            self.assertTrue(all(result is results[0] for result in results))


if __name__ == '__main__':
    unittest.main()
