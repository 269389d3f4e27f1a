import unittest

from mazequiz.maze import Grid, render_grid
from mazequiz.maze.render import END_COLOR, HINT_COLOR, PATH_COLOR, PLAYER_COLOR, QUESTION_COLOR, WALL_COLOR

SAMPLE = """
######
#S..?#
######
"""


class RenderGridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.parse(SAMPLE)

    def _center(self, image, pos, cell_size):
        x, y = pos
        return image.getpixel((x * cell_size + cell_size // 2, y * cell_size + cell_size // 2))

    def test_image_scales_with_cell_size(self) -> None:
        image = render_grid(self.grid, cell_size=10)
        self.assertEqual(image.size, (60, 30))
        self.assertEqual(image.mode, "RGB")
        self.assertEqual(self._center(image, (0, 0), 10), WALL_COLOR)
        self.assertEqual(self._center(image, (2, 1), 10), PATH_COLOR)
        self.assertEqual(self._center(image, (4, 1), 10), QUESTION_COLOR)

    def test_hint_and_player_overlay(self) -> None:
        image = render_grid(self.grid, cell_size=8, hint={(2, 1), (3, 1), (4, 1)}, player=(1, 1))
        self.assertEqual(self._center(image, (2, 1), 8), HINT_COLOR)
        self.assertEqual(self._center(image, (3, 1), 8), HINT_COLOR)
        # The hint target keeps its own colour.
        self.assertEqual(self._center(image, (4, 1), 8), QUESTION_COLOR)
        self.assertEqual(self._center(image, (1, 1), 8), PLAYER_COLOR)

    def test_end_colour(self) -> None:
        grid = Grid.parse("#####\n#S.E#\n#####")
        self.assertEqual(self._center(render_grid(grid, cell_size=4), (3, 1), 4), END_COLOR)

    def test_rejects_non_positive_cell_size(self) -> None:
        with self.assertRaises(ValueError):
            render_grid(self.grid, cell_size=0)


if __name__ == "__main__":
    unittest.main()
