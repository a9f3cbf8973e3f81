import tempfile
import unittest
from pathlib import Path

from buglab.core.constants import Point
from buglab.core.exceptions import MazeFormatError
from buglab.engine.layout import MazeLayout
from buglab.io.maze_format import format_maze, parse_maze, read_maze, write_maze
from buglab.utils.pretty import describe_score, format_layout


class MazeFormatTests(unittest.TestCase):
    def test_format_marks_endpoints_and_walls(self) -> None:
        layout = MazeLayout.empty(3, 2).with_wall(Point(1, 0))
        self.assertEqual(format_maze(layout), "S # . \n. . E \n")

    def test_parse_restores_layout(self) -> None:
        layout = MazeLayout.empty(4, 3).with_wall(Point(2, 1)).with_wall(Point(0, 2))
        self.assertEqual(parse_maze(format_maze(layout)), layout)

    def test_parse_tolerates_missing_trailing_spaces(self) -> None:
        layout = parse_maze("S . #\n\n# . E\n")
        self.assertEqual(layout.key, "001100")

    def test_parse_rejects_bad_input(self) -> None:
        bad_inputs = [
            "",
            "S . \n. . . E \n",
            "S x \n. E \n",
            ". S \n. E \n",
            "S E \n. . \n",
        ]
        for text in bad_inputs:
            with self.subTest(text=text):
                with self.assertRaises(MazeFormatError):
                    parse_maze(text)

    def test_file_round_trip(self) -> None:
        layout = MazeLayout.empty(3, 3).with_wall(Point(1, 2))
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "maze.txt"
            write_maze(layout, path)
            self.assertEqual(read_maze(path), layout)


class PrettyTests(unittest.TestCase):
    def test_format_layout_has_headers(self) -> None:
        rendered = format_layout(MazeLayout.empty(2, 2)).splitlines()
        self.assertEqual(rendered[0], "     0  1")
        self.assertEqual(rendered[2], " 0 |  S  .")
        self.assertEqual(rendered[3], " 1 |  .  E")

    def test_describe_score_names_sentinels(self) -> None:
        self.assertEqual(describe_score(12), "12")
        self.assertIn("unreachable", describe_score(-1))
        self.assertIn("budget", describe_score(-2))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
