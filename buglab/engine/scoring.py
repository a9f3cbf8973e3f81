"""Memoized layout scoring."""

from __future__ import annotations

from typing import Dict, Optional

from .layout import MazeLayout
from .simulator import BugSimulator


class ScoreCache:
    """Append-only mapping from canonical layout key to score.

    Every layout ever scored stays cached for the lifetime of the run; grids
    are small enough that the memory growth is acceptable.
    """

    def __init__(self, simulator: Optional[BugSimulator] = None) -> None:
        self.simulator = simulator or BugSimulator()
        self._scores: Dict[str, int] = {}
        self.hits = 0
        self.misses = 0

    def get_score(self, layout: MazeLayout) -> int:
        key = layout.key
        cached = self._scores.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        score = self.simulator.calculate_score(layout)
        self._scores[key] = score
        return score

    def __contains__(self, layout: object) -> bool:
        return isinstance(layout, MazeLayout) and layout.key in self._scores

    def __len__(self) -> int:
        return len(self._scores)
