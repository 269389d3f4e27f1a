import unittest

from mazequiz.maze import CellType, Grid, MazeGenerator, MazeSession, MoveResult

LINE = """
#######
#S?.!E#
#######
"""


class MazeSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.parse(LINE)
        self.session = MazeSession(self.grid, seed=0)

    def test_walls_block_without_counting_a_move(self) -> None:
        outcome = self.session.move(0, -1)
        self.assertIs(outcome.result, MoveResult.BLOCKED)
        self.assertEqual(outcome.position, (1, 1))
        self.assertEqual(self.session.moves, 0)

    def test_question_is_consumed(self) -> None:
        outcome = self.session.move(1, 0)
        self.assertIs(outcome.result, MoveResult.QUESTION)
        self.assertIs(self.grid.cell((2, 1)), CellType.EMPTY)
        self.assertEqual(self.session.questions_reached, 1)
        self.assertEqual(self.session.moves, 1)

    def test_obstacle_teleports_to_another_empty_cell(self) -> None:
        self.session.move(1, 0)
        self.session.move(1, 0)
        outcome = self.session.move(1, 0)
        self.assertIs(outcome.result, MoveResult.OBSTACLE)
        self.assertEqual(outcome.stepped_on, (4, 1))
        self.assertIn(outcome.position, {(2, 1), (3, 1)})
        self.assertEqual(self.session.position, outcome.position)
        self.assertIs(self.grid.cell((4, 1)), CellType.OBSTACLE)
        self.assertEqual(self.session.teleports, 1)

    def test_hint_tracks_live_grid(self) -> None:
        self.assertEqual(self.session.hint(), {(2, 1)})
        self.session.move(1, 0)
        self.assertEqual(self.session.hint(), {(3, 1), (4, 1)})

    def test_reaching_end_wins(self) -> None:
        session = MazeSession(Grid.parse("#####\n#S.E#\n#####"))
        self.assertIs(session.move(1, 0).result, MoveResult.MOVED)
        self.assertIs(session.move(1, 0).result, MoveResult.WON)
        self.assertTrue(session.won)
        with self.assertRaises(RuntimeError):
            session.move(-1, 0)

    def test_moves_must_be_single_steps(self) -> None:
        with self.assertRaises(ValueError):
            self.session.move(1, 1)
        with self.assertRaises(ValueError):
            self.session.move(0, 0)

    def test_requires_start_and_end(self) -> None:
        with self.assertRaises(ValueError):
            MazeSession(Grid.parse("#####\n#S..#\n#####"))

    def test_following_hints_collects_questions_then_finishes(self) -> None:
        # Obstacles never disappear, so a hint-following walk only ends without them.
        grid = MazeGenerator(
            width=13, height=13, question_count=5, obstacle_count=0, seed=21
        ).create_random_grid()
        session = MazeSession(grid, seed=21)
        for _ in range(2000):
            if session.won:
                break
            x, y = session.position
            trail = session.hint()
            step = next(pos for pos in grid.neighbors((x, y)) if pos in trail)
            session.move(step[0] - x, step[1] - y)
        self.assertTrue(session.won)
        self.assertEqual(grid.count(CellType.QUESTION), 0)


if __name__ == "__main__":
    unittest.main()
