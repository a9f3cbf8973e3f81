"""Run configuration and the state shared by every search strategy."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Set

from ..core.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_STEP_LIMIT_FACTOR,
    DEFAULT_WIDTH,
    SearchAlgorithm,
)
from ..core.exceptions import ConfigError
from ..utils.logger import get_logger
from .candidates import CandidateGenerator
from .layout import MazeLayout
from .record_store import NullRecordSink, RecordSink
from .scoring import ScoreCache
from .simulator import BugSimulator


LOGGER = get_logger(__name__)


@dataclass
class SearchConfig:
    """Every tunable of a search run. Read once at construction."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    algorithm: SearchAlgorithm = SearchAlgorithm.GREEDY_BACKTRACK
    deep_jump_depth: int = 2
    accept_worse_probability: float = 0.02
    randomize_cell_order: bool = True
    seed: Optional[int] = 42
    step_limit_factor: int = DEFAULT_STEP_LIMIT_FACTOR
    output_dir: Path | str = Path("maze_outputs")

    def __post_init__(self) -> None:
        try:
            self.algorithm = SearchAlgorithm(self.algorithm)
        except ValueError as exc:
            valid = ", ".join(algo.value for algo in SearchAlgorithm)
            raise ConfigError(f"algorithm must be one of {valid}") from exc
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.width * self.height < 2:
            raise ConfigError("Grid needs distinct start and finish cells")
        if self.deep_jump_depth < 1:
            raise ConfigError("deep_jump_depth must be >= 1")
        if not 0.0 <= self.accept_worse_probability <= 1.0:
            raise ConfigError("accept_worse_probability must be between 0 and 1")
        if self.step_limit_factor < 0:
            raise ConfigError("step_limit_factor must be >= 0")
        self.output_dir = Path(self.output_dir)

    def empty_layout(self) -> MazeLayout:
        return MazeLayout.empty(self.width, self.height)


class SearchContext:
    """Score cache, visited set, record sink and best score of one run.

    Constructing the context scores the empty layout and reports it as the
    first record, so every run starts with a known best.
    """

    def __init__(
        self,
        config: SearchConfig,
        sink: Optional[RecordSink] = None,
        cache: Optional[ScoreCache] = None,
    ) -> None:
        self.config = config
        self.cache = cache if cache is not None else ScoreCache(BugSimulator(config.step_limit_factor))
        self.visited: Set[str] = set()
        self.candidates = CandidateGenerator(self.visited)
        self.sink: RecordSink = sink if sink is not None else NullRecordSink()
        self.rng = random.Random(config.seed)
        self.records_reported = 0

        initial = config.empty_layout()
        initial_score = self.cache.get_score(initial)
        self.best_layout = initial
        self.best_score = initial_score
        self._notify(initial, initial_score)

    def score(self, layout: MazeLayout) -> int:
        return self.cache.get_score(layout)

    def offer(self, layout: MazeLayout, score: int) -> bool:
        """Report ``layout`` if it beats the best score of the run."""

        if score <= self.best_score:
            return False
        self.best_score = score
        self.best_layout = layout
        self._notify(layout, score)
        return True

    def mark_visited(self, layout: MazeLayout) -> None:
        self.visited.add(layout.key)

    def is_visited(self, layout: MazeLayout) -> bool:
        return layout.key in self.visited

    def _notify(self, layout: MazeLayout, score: int) -> None:
        LOGGER.info("Record found: %s", score)
        self.records_reported += 1
        self.sink.record(layout, score)
