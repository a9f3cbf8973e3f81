import unittest

from buglab.core.constants import UNREACHABLE, Point
from buglab.engine.layout import MazeLayout
from buglab.engine.scoring import ScoreCache
from buglab.engine.simulator import BugSimulator


class ScoreCacheTests(unittest.TestCase):
    def test_same_layout_is_simulated_once(self) -> None:
        simulator = BugSimulator()
        cache = ScoreCache(simulator)
        layout = MazeLayout.empty(3, 3).with_wall(Point(1, 2))

        self.assertEqual(cache.get_score(layout), 6)
        self.assertEqual(cache.get_score(layout), 6)
        self.assertEqual(simulator.calls, 1)
        self.assertEqual((cache.hits, cache.misses), (1, 1))

    def test_equal_layouts_built_separately_share_an_entry(self) -> None:
        simulator = BugSimulator()
        cache = ScoreCache(simulator)
        a = MazeLayout.empty(3, 3).with_wall(Point(1, 1)).with_wall(Point(2, 0))
        b = MazeLayout.empty(3, 3).with_wall(Point(2, 0)).with_wall(Point(1, 1))

        cache.get_score(a)
        cache.get_score(b)
        self.assertEqual(simulator.calls, 1)
        self.assertEqual(len(cache), 1)
        self.assertIn(b, cache)

    def test_sentinel_scores_are_cached_too(self) -> None:
        simulator = BugSimulator()
        cache = ScoreCache(simulator)
        blocked = MazeLayout.empty(2, 2).with_wall(Point(1, 0)).with_wall(Point(0, 1))

        self.assertEqual(cache.get_score(blocked), UNREACHABLE)
        self.assertEqual(cache.get_score(blocked), UNREACHABLE)
        self.assertEqual(simulator.calls, 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
