"""Plain-text maze format shared by record files and the CLI.

Each of the H lines holds W cells, every cell followed by a single space::

    S . # .
    . . . E

``S`` marks the start, ``E`` the finish, ``#`` a wall and ``.`` an open cell.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.constants import Point
from ..core.exceptions import LayoutError, MazeFormatError
from ..engine.layout import MazeLayout

START_SYMBOL = "S"
FINISH_SYMBOL = "E"
WALL_SYMBOL = "#"
OPEN_SYMBOL = "."


def cell_symbol(layout: MazeLayout, point: Point) -> str:
    if point == layout.start:
        return START_SYMBOL
    if point == layout.finish:
        return FINISH_SYMBOL
    return WALL_SYMBOL if layout.is_wall(point) else OPEN_SYMBOL


def format_maze(layout: MazeLayout) -> str:
    lines: List[str] = []
    for y in range(layout.height):
        lines.append("".join(f"{cell_symbol(layout, Point(x, y))} " for x in range(layout.width)))
    return "\n".join(lines) + "\n"


def parse_maze(text: str) -> MazeLayout:
    """Parse maze text back into a layout.

    Trailing whitespace and blank lines are ignored. ``S`` and ``E`` must sit
    in the top-left and bottom-right corners.
    """

    rows: List[List[str]] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        for token in tokens:
            if len(token) != 1 or token not in (START_SYMBOL, FINISH_SYMBOL, WALL_SYMBOL, OPEN_SYMBOL):
                raise MazeFormatError(f"Unknown cell {token!r} on line {line_no}")
        rows.append(tokens)

    if not rows:
        raise MazeFormatError("Maze text contains no rows")
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise MazeFormatError(
                f"Row {index} has {len(row)} cells, expected {width}"
            )

    height = len(rows)
    walls: List[bool] = []
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            at_start = (x, y) == (0, 0)
            at_finish = (x, y) == (width - 1, height - 1)
            if symbol == START_SYMBOL and not at_start:
                raise MazeFormatError(f"Start marker at {(x, y)}, expected (0, 0)")
            if symbol == FINISH_SYMBOL and not at_finish:
                raise MazeFormatError(
                    f"Finish marker at {(x, y)}, expected {(width - 1, height - 1)}"
                )
            walls.append(symbol == WALL_SYMBOL)

    try:
        return MazeLayout(width, height, walls)
    except LayoutError as exc:
        raise MazeFormatError(str(exc)) from exc


def write_maze(layout: MazeLayout, path: Path | str) -> None:
    Path(path).write_text(format_maze(layout), encoding="utf-8")


def read_maze(path: Path | str) -> MazeLayout:
    return parse_maze(Path(path).read_text(encoding="utf-8"))
