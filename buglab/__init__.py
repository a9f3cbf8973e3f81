"""Search engine for maze layouts that keep a rule-following bug wandering.

This package exposes the public API surface via:

- ``buglab.engine.search.MazeSearch``: runs the configured strategy.
- ``buglab.engine.context.SearchConfig``: every tunable of a run.
- ``buglab.engine.simulator``: the bug walk and the reachability check.
- ``buglab.engine.record_store.RecordStore``: writes record layouts to disk.
"""

from .core.constants import DIVERGED, UNREACHABLE, Direction, Point, SearchAlgorithm
from .engine.context import SearchConfig, SearchContext
from .engine.layout import MazeLayout
from .engine.record_store import RecordStore
from .engine.search import MazeSearch, SearchResult
from .engine.simulator import BugSimulator, calculate_score, has_path_to_finish

__all__ = [
    "BugSimulator",
    "DIVERGED",
    "Direction",
    "MazeLayout",
    "MazeSearch",
    "Point",
    "RecordStore",
    "SearchAlgorithm",
    "SearchConfig",
    "SearchContext",
    "SearchResult",
    "UNREACHABLE",
    "calculate_score",
    "has_path_to_finish",
]

__version__ = "0.1.0"
