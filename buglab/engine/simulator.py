"""Deterministic bug walk used to score maze layouts.

The bug starts in the top-left corner and always steps onto the
least-visited open neighbour. Ties keep the current heading when possible,
otherwise the direction with the highest priority wins
(down > right > up > left). The score is the number of steps needed to reach
the bottom-right corner.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List

from ..core.constants import (
    DEFAULT_STEP_LIMIT_FACTOR,
    DIVERGED,
    ORTHOGONAL_DIRECTIONS,
    UNREACHABLE,
    Direction,
)
from ..core.exceptions import ConfigError
from .layout import MazeLayout

_MOVES = tuple((direction, direction.dx, direction.dy) for direction in ORTHOGONAL_DIRECTIONS)


def has_path_to_finish(layout: MazeLayout) -> bool:
    """Breadth-first reachability check between start and finish."""

    width = layout.width
    height = layout.height
    walls = layout.walls
    start = 0
    finish = width * height - 1
    if walls[start] or walls[finish]:
        return False

    visited: List[bool] = [False] * (width * height)
    visited[start] = True
    queue: Deque[int] = deque([start])
    while queue:
        idx = queue.popleft()
        if idx == finish:
            return True
        x, y = idx % width, idx // width
        for _, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            nidx = ny * width + nx
            if visited[nidx] or walls[nidx]:
                continue
            visited[nidx] = True
            queue.append(nidx)
    return False


class BugSimulator:
    """Scores layouts by simulating the bug walk.

    ``calls`` counts every scoring request and ``walks`` counts the requests
    that got past the reachability check and actually simulated.
    """

    def __init__(self, step_limit_factor: int = DEFAULT_STEP_LIMIT_FACTOR) -> None:
        if step_limit_factor < 0:
            raise ConfigError("step_limit_factor must be >= 0")
        self.step_limit_factor = step_limit_factor
        self.calls = 0
        self.walks = 0

    def step_limit(self, layout: MazeLayout) -> int:
        return layout.width * layout.height * self.step_limit_factor

    def calculate_score(self, layout: MazeLayout) -> int:
        self.calls += 1
        if not has_path_to_finish(layout):
            return UNREACHABLE
        self.walks += 1

        width = layout.width
        height = layout.height
        finish_x, finish_y = width - 1, height - 1
        visits = [-1 if wall else 0 for wall in layout.walls]
        visits[0] = 1

        limit = self.step_limit(layout)
        x = y = 0
        steps = 0
        last_direction = Direction.DOWN
        while x != finish_x or y != finish_y:
            if steps > limit:
                return DIVERGED
            steps += 1

            min_visits = -1
            tied: List[Direction] = []
            for direction, dx, dy in _MOVES:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                count = visits[ny * width + nx]
                if count == -1:
                    continue
                if min_visits == -1 or count < min_visits:
                    min_visits = count
                    tied = [direction]
                elif count == min_visits:
                    tied.append(direction)

            if not tied:
                return UNREACHABLE

            if last_direction in tied:
                chosen = last_direction
            else:
                chosen = max(tied, key=lambda d: d.priority)

            last_direction = chosen
            x += chosen.dx
            y += chosen.dy
            visits[y * width + x] += 1
        return steps


_DEFAULT_SIMULATOR = BugSimulator()


def calculate_score(layout: MazeLayout) -> int:
    """Score ``layout`` with the default step budget."""

    return _DEFAULT_SIMULATOR.calculate_score(layout)
