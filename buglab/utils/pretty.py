"""Pretty-print helpers for maze layouts."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional

from ..core.constants import DIVERGED, UNREACHABLE, Point
from ..io.maze_format import cell_symbol

if TYPE_CHECKING:
    from ..engine.layout import MazeLayout
    from ..engine.search import SearchResult


def describe_score(score: int) -> str:
    if score == UNREACHABLE:
        return f"{score} (unreachable)"
    if score == DIVERGED:
        return f"{score} (step budget exceeded)"
    return str(score)


def format_layout(layout: MazeLayout) -> str:
    width = layout.width
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(layout.height):
        row_cells = [cell_symbol(layout, Point(c, r)) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_layout(
    layout: MazeLayout,
    *,
    score: Optional[int] = None,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the layout in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_layout(layout), file=stream)
    if score is not None:
        print(f"Score: {describe_score(score)}", file=stream)


def print_search_summary(result: SearchResult, *, stream=None) -> None:
    """Print the best layout plus run statistics."""

    stream = stream or sys.stdout
    print(format_layout(result.best_layout), file=stream)
    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Best score:     {describe_score(result.best_score)}", file=stream)
    print(f"  Walls:          {result.best_layout.wall_count}", file=stream)
    print(f"  Steps:          {result.steps}", file=stream)
    print(f"  Records:        {result.records}", file=stream)
    print(f"  Scored layouts: {result.cached_layouts}", file=stream)
    print(f"  Visited:        {result.visited_layouts}", file=stream)
    status = "exhausted" if result.finished else ("interrupted" if result.interrupted else "stopped")
    print(f"  Status:         {status}", file=stream)
