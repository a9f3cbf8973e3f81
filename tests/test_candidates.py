import unittest

from buglab.core.constants import Point
from buglab.engine.candidates import CandidateGenerator
from buglab.engine.layout import MazeLayout


class CandidateGeneratorTests(unittest.TestCase):
    def test_depth_one_adds_exactly_one_wall(self) -> None:
        base = MazeLayout.empty(3, 3).with_wall(Point(1, 1))
        candidates = CandidateGenerator(set()).generate(base, 1)

        self.assertEqual(len(candidates), 6)
        for layout in candidates:
            self.assertNotEqual(layout, base)
            self.assertEqual(layout.wall_count, 2)
            self.assertTrue(layout.is_wall(Point(1, 1)))
            self.assertFalse(layout.is_wall(layout.start))
            self.assertFalse(layout.is_wall(layout.finish))

    def test_globally_visited_layouts_are_excluded(self) -> None:
        base = MazeLayout.empty(2, 2)
        visited = {base.with_wall(Point(1, 0)).key}
        candidates = CandidateGenerator(visited).generate(base, 1)

        self.assertEqual(candidates, [base.with_wall(Point(0, 1))])

    def test_visited_set_is_read_live(self) -> None:
        visited = set()
        generator = CandidateGenerator(visited)
        base = MazeLayout.empty(2, 2)
        visited.update(layout.key for layout in generator.generate(base, 1))

        self.assertEqual(generator.generate(base, 1), [])

    def test_deep_jump_enumerates_each_combination_once(self) -> None:
        base = MazeLayout.empty(3, 3)
        candidates = CandidateGenerator(set()).generate(base, 2)

        # 7 placeable cells: 7 single walls plus 21 distinct pairs.
        self.assertEqual(len(candidates), 28)
        self.assertEqual(len({layout.key for layout in candidates}), 28)
        self.assertEqual([c.wall_count for c in candidates[:7]], [1] * 7)
        self.assertEqual({c.wall_count for c in candidates[7:]}, {2})

    def test_visited_layouts_are_still_expanded(self) -> None:
        base = MazeLayout.empty(3, 3)
        visited = {layout.key for layout in CandidateGenerator(set()).generate(base, 1)}
        candidates = CandidateGenerator(visited).generate(base, 2)

        self.assertEqual(len(candidates), 21)
        self.assertTrue(all(layout.wall_count == 2 for layout in candidates))

    def test_fully_walled_base_has_no_candidates(self) -> None:
        base = MazeLayout.empty(2, 2).with_wall(Point(1, 0)).with_wall(Point(0, 1))
        self.assertEqual(CandidateGenerator(set()).generate(base, 3), [])

    def test_depth_below_one_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CandidateGenerator(set()).generate(MazeLayout.empty(2, 2), 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
