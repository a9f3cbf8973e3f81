import unittest

from buglab.core.constants import Direction, Point
from buglab.core.exceptions import LayoutError
from buglab.engine.layout import MazeLayout


class MazeLayoutTests(unittest.TestCase):
    def test_empty_layout_has_open_cells_and_fixed_corners(self) -> None:
        layout = MazeLayout.empty(4, 3)
        self.assertEqual(layout.start, Point(0, 0))
        self.assertEqual(layout.finish, Point(3, 2))
        self.assertEqual(layout.wall_count, 0)
        self.assertEqual(layout.key, "0" * 12)

    def test_key_is_row_major(self) -> None:
        layout = MazeLayout.empty(3, 2).with_wall(Point(1, 0)).with_wall(Point(0, 1))
        self.assertEqual(layout.key, "010100")

    def test_with_wall_leaves_original_untouched(self) -> None:
        base = MazeLayout.empty(3, 3)
        derived = base.with_wall(Point(1, 1))
        self.assertFalse(base.is_wall(Point(1, 1)))
        self.assertTrue(derived.is_wall(Point(1, 1)))
        self.assertNotEqual(base, derived)

    def test_equal_layouts_share_key_and_hash(self) -> None:
        a = MazeLayout.empty(3, 3).with_wall(Point(2, 0))
        b = MazeLayout(3, 3, [False, False, True] + [False] * 6)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_placeable_cells_skip_endpoints_and_walls(self) -> None:
        layout = MazeLayout.empty(3, 2).with_wall(Point(1, 0))
        self.assertEqual(
            layout.placeable_cells(),
            [Point(2, 0), Point(0, 1), Point(1, 1)],
        )

    def test_out_of_bounds_access_raises(self) -> None:
        layout = MazeLayout.empty(2, 2)
        with self.assertRaises(LayoutError):
            layout.is_wall(Point(2, 0))
        with self.assertRaises(LayoutError):
            layout.with_wall(Point(0, -1))

    def test_wall_count_mismatch_raises(self) -> None:
        with self.assertRaises(LayoutError):
            MazeLayout(2, 2, [False, True])

    def test_direction_priorities(self) -> None:
        ordered = sorted(Direction, key=lambda d: d.priority)
        self.assertEqual(ordered, [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN])
        self.assertEqual(Direction.DOWN.delta, Point(0, 1))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
