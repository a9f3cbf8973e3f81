"""Data models supporting the maze search engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.layout import MazeLayout


@dataclass(frozen=True)
class SearchState:
    """A layout paired with its score, owned by exactly one frontier."""

    layout: "MazeLayout"
    score: int


@dataclass(frozen=True)
class Record:
    """A layout whose score beat every score seen before it in the run."""

    layout: "MazeLayout"
    score: int
