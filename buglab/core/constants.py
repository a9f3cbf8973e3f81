"""Shared constants and enumerations for the maze search engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


UNREACHABLE = -1
"""Score of a layout whose finish cannot be reached, or where the bug gets stuck."""

DIVERGED = -2
"""Score of a layout whose walk exceeded the step budget."""

DEFAULT_WIDTH = 29
DEFAULT_HEIGHT = 19
DEFAULT_STEP_LIMIT_FACTOR = 1000


class SearchAlgorithm(str, Enum):
    """Available search strategies."""

    GREEDY_BACKTRACK = "greedy"
    BEST_FIRST = "best-first"
    STOCHASTIC_HILL_CLIMB = "hill-climb"


@dataclass(frozen=True)
class Point:
    """Grid coordinate; ``x`` is the column and ``y`` the row."""

    x: int
    y: int


class Direction(Enum):
    """Unit moves of the bug, each with its tie-break priority."""

    LEFT = (-1, 0, 1)
    UP = (0, -1, 2)
    RIGHT = (1, 0, 3)
    DOWN = (0, 1, 4)

    def __init__(self, dx: int, dy: int, priority: int) -> None:
        self.dx = dx
        self.dy = dy
        self.priority = priority

    @property
    def delta(self) -> Point:
        return Point(self.dx, self.dy)


# Neighbour enumeration order used by the walk and the reachability check.
ORTHOGONAL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def area(self) -> int:
        return self.width * self.height
