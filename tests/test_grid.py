import unittest

import numpy as np

from mazequiz.maze import CellType, Grid, check_grid

SAMPLE = """
#####
#S.?#
#.#!#
#..E#
#####
"""


class GridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.parse(SAMPLE)

    def test_parse_and_lookup(self) -> None:
        self.assertEqual((self.grid.width, self.grid.height), (5, 5))
        self.assertEqual(self.grid.start, (1, 1))
        self.assertEqual(self.grid.end, (3, 3))
        self.assertIs(self.grid.cell((3, 1)), CellType.QUESTION)
        self.assertIs(self.grid.cell((3, 2)), CellType.OBSTACLE)
        self.assertEqual(self.grid.render_text(), SAMPLE.strip())

    def test_render_text_marks_trail_on_passages_only(self) -> None:
        text = self.grid.render_text(trail={(2, 1), (3, 1)})
        self.assertEqual(text.splitlines()[1], "#S*?#")

    def test_neighbors_follow_up_right_down_left(self) -> None:
        self.assertEqual(list(self.grid.neighbors((1, 1))), [(2, 1), (1, 2)])
        self.assertEqual(list(self.grid.neighbors((3, 2))), [(3, 1), (3, 3)])

    def test_cell_out_of_bounds(self) -> None:
        with self.assertRaises(IndexError):
            self.grid.cell((5, 0))
        self.assertFalse(self.grid.is_passable((-1, 1)))

    def test_consume_demotes_questions_only(self) -> None:
        self.assertIs(self.grid.consume((3, 1)), CellType.QUESTION)
        self.assertIs(self.grid.cell((3, 1)), CellType.EMPTY)
        self.assertIs(self.grid.consume((3, 2)), CellType.OBSTACLE)
        self.assertIs(self.grid.cell((3, 2)), CellType.OBSTACLE)
        self.assertIs(self.grid.consume((1, 1)), CellType.START)
        self.assertEqual(self.grid.start, (1, 1))

    def test_start_and_end_are_fixed(self) -> None:
        with self.assertRaises(ValueError):
            self.grid.set_cell((1, 1), CellType.EMPTY)
        with self.assertRaises(ValueError):
            self.grid.set_cell((3, 3), CellType.QUESTION)
        with self.assertRaises(ValueError):
            self.grid.set_cell((2, 1), CellType.END)
        self.grid.set_cell((2, 1), CellType.OBSTACLE)
        self.assertIs(self.grid.cell((2, 1)), CellType.OBSTACLE)

    def test_to_array_uses_cell_codes(self) -> None:
        array = self.grid.to_array()
        self.assertEqual(array.shape, (5, 5))
        self.assertEqual(array.dtype, np.uint8)
        self.assertEqual(array[0, 0], CellType.WALL.code)
        self.assertEqual(array[3, 3], CellType.END.code)

    def test_copy_is_independent(self) -> None:
        clone = self.grid.copy()
        clone.consume((3, 1))
        self.assertIs(self.grid.cell((3, 1)), CellType.QUESTION)

    def test_rejects_ragged_and_unknown_input(self) -> None:
        with self.assertRaises(ValueError):
            Grid([[CellType.WALL, CellType.WALL], [CellType.WALL]])
        with self.assertRaises(ValueError):
            Grid.parse("#x#")

    def test_check_grid_flags_cycles_and_holes(self) -> None:
        looped = Grid.parse(
            """
            #####
            #S..#
            #.#.#
            #..E#
            #####
            """
        )
        report = check_grid(looped)
        self.assertTrue(report.connected)
        self.assertFalse(report.perfect)
        self.assertEqual((report.open_cells, report.open_edges), (8, 8))

        holed = Grid.parse(
            """
            #####
            #S.E.
            #####
            """
        )
        report = check_grid(holed)
        self.assertFalse(report.border_intact)
        self.assertFalse(report.is_valid)
        self.assertEqual(report.to_dict()["counts"]["start"], 1)


if __name__ == "__main__":
    unittest.main()
