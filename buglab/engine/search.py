"""Main maze search orchestration.

Wires a :class:`SearchContext` to the strategy chosen in the
:class:`SearchConfig`, runs it and summarizes the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..utils.logger import get_logger
from .context import SearchConfig, SearchContext
from .layout import MazeLayout
from .record_store import RecordSink
from .strategies import SearchStrategy, build_strategy


LOGGER = get_logger(__name__)


@dataclass
class SearchResult:
    best_layout: MazeLayout
    best_score: int
    steps: int
    records: int
    cached_layouts: int
    visited_layouts: int
    finished: bool
    interrupted: bool = False


class MazeSearch:
    """High-level entrypoint: build context and strategy, then run."""

    def __init__(self, config: SearchConfig, sink: Optional[RecordSink] = None) -> None:
        self.config = config
        self.context = SearchContext(config, sink=sink)
        self.strategy: SearchStrategy = build_strategy(self.context)

    def run(
        self,
        max_steps: Optional[int] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> SearchResult:
        LOGGER.info(
            "Starting %s search on %sx%s grid (seed=%s)",
            self.config.algorithm.value,
            self.config.width,
            self.config.height,
            self.config.seed,
        )
        interrupted = False
        try:
            self.strategy.run(max_steps=max_steps, should_stop=should_stop)
        except KeyboardInterrupt:
            interrupted = True
            LOGGER.warning("Search interrupted after %s steps", self.strategy.steps)

        result = self.summary(interrupted=interrupted)
        LOGGER.info(
            "Search %s: best score %s after %s steps (%s layouts scored)",
            "finished" if result.finished else "stopped",
            result.best_score,
            result.steps,
            result.cached_layouts,
        )
        return result

    def summary(self, interrupted: bool = False) -> SearchResult:
        return SearchResult(
            best_layout=self.context.best_layout,
            best_score=self.context.best_score,
            steps=self.strategy.steps,
            records=self.context.records_reported,
            cached_layouts=len(self.context.cache),
            visited_layouts=len(self.context.visited),
            finished=self.strategy.is_done,
            interrupted=interrupted,
        )
