"""Grid layout representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..core.constants import Bounds, Point
from ..core.exceptions import LayoutError


class MazeLayout:
    """Immutable wall mask with the start in the top-left corner and the finish bottom-right.

    Walls are stored row-major in a flat tuple so ``index = y * width + x``.
    New layouts are derived with :meth:`with_wall`; nothing mutates an
    existing instance.
    """

    __slots__ = ("bounds", "_walls", "_key")

    def __init__(self, width: int, height: int, walls: Optional[Iterable[bool]] = None) -> None:
        if width < 1 or height < 1:
            raise LayoutError(f"Layout dimensions must be positive, got {width}x{height}")
        self.bounds = Bounds(width=width, height=height)
        if walls is None:
            cells: Tuple[bool, ...] = (False,) * self.bounds.area
        else:
            cells = tuple(bool(value) for value in walls)
            if len(cells) != self.bounds.area:
                raise LayoutError(
                    f"Expected {self.bounds.area} cells for {width}x{height}, got {len(cells)}"
                )
        self._walls = cells
        self._key: Optional[str] = None

    @classmethod
    def empty(cls, width: int, height: int) -> "MazeLayout":
        return cls(width, height)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    @property
    def start(self) -> Point:
        return Point(0, 0)

    @property
    def finish(self) -> Point:
        return Point(self.bounds.width - 1, self.bounds.height - 1)

    def contains(self, point: Point) -> bool:
        return self.bounds.contains(point.x, point.y)

    def index(self, point: Point) -> int:
        if not self.contains(point):
            raise LayoutError(f"Cell {(point.x, point.y)} outside {self.width}x{self.height} grid")
        return point.y * self.bounds.width + point.x

    # ------------------------------------------------------------------
    # Wall queries and derivation
    # ------------------------------------------------------------------
    def is_wall(self, point: Point) -> bool:
        return self._walls[self.index(point)]

    @property
    def walls(self) -> Tuple[bool, ...]:
        return self._walls

    @property
    def wall_count(self) -> int:
        return sum(self._walls)

    def with_wall(self, point: Point) -> "MazeLayout":
        """Return a copy of this layout with ``point`` walled."""

        idx = self.index(point)
        cells = list(self._walls)
        cells[idx] = True
        return MazeLayout(self.bounds.width, self.bounds.height, cells)

    def placeable_cells(self) -> List[Point]:
        """Open cells, excluding start and finish, in row-major order."""

        width = self.bounds.width
        last = self.bounds.area - 1
        return [
            Point(idx % width, idx // width)
            for idx, wall in enumerate(self._walls)
            if not wall and idx != 0 and idx != last
        ]

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def key(self) -> str:
        """Canonical row-major ``'0'``/``'1'`` string used for caching and dedup."""

        if self._key is None:
            self._key = "".join("1" if wall else "0" for wall in self._walls)
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeLayout):
            return NotImplemented
        return self.bounds == other.bounds and self._walls == other._walls

    def __hash__(self) -> int:
        return hash((self.bounds, self.key))

    def __repr__(self) -> str:
        return f"MazeLayout({self.width}x{self.height}, walls={self.wall_count})"
