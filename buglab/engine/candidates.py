"""Neighbour layout enumeration for the search strategies."""

from __future__ import annotations

from collections import deque
from typing import AbstractSet, Deque, List, Set, Tuple

from .layout import MazeLayout


class CandidateGenerator:
    """Enumerates layouts reachable by adding 1..``jump_depth`` walls.

    ``visited`` is the run-wide set of canonical keys already admitted into a
    frontier. It is only read here; the strategies own its updates.
    """

    def __init__(self, visited: AbstractSet[str]) -> None:
        self.visited = visited

    def generate(self, base: MazeLayout, jump_depth: int = 1) -> List[MazeLayout]:
        """Return unvisited layouts with 1..``jump_depth`` extra walls, in BFS order.

        Each layout appears once even when several wall insertion orders lead
        to it. The base layout is never returned, and start and finish are
        never walled.
        """

        if jump_depth < 1:
            raise ValueError("jump_depth must be >= 1")

        candidates: List[MazeLayout] = []
        seen: Set[str] = {base.key}
        queue: Deque[Tuple[MazeLayout, int]] = deque([(base, 0)])
        while queue:
            current, depth = queue.popleft()
            if depth >= jump_depth:
                continue
            for point in current.placeable_cells():
                derived = current.with_wall(point)
                key = derived.key
                if key in seen:
                    continue
                seen.add(key)
                if key not in self.visited:
                    candidates.append(derived)
                queue.append((derived, depth + 1))
        return candidates
