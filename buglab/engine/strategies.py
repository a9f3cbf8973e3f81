"""Search strategies over wall layouts.

All strategies share one :class:`SearchContext`. Each call to
:meth:`SearchStrategy.step` performs one unit of work (a frontier pop, or one
hill-climbing round) and reports whether the search is exhausted.
"""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Tuple, Type

from ..core.constants import UNREACHABLE, SearchAlgorithm
from ..core.models import SearchState
from ..utils.logger import get_logger
from .context import SearchContext
from .layout import MazeLayout


LOGGER = get_logger(__name__)


class SearchStrategy(ABC):
    """Base class for the interchangeable search policies."""

    algorithm: SearchAlgorithm

    def __init__(self, context: SearchContext) -> None:
        self.context = context
        self.config = context.config
        self.steps = 0

    @property
    @abstractmethod
    def is_done(self) -> bool:
        """True once the strategy has nothing left to explore."""

    @abstractmethod
    def _advance(self) -> None:
        """Perform one unit of search work."""

    def step(self) -> bool:
        """Advance the search once and return whether it is done."""

        if self.is_done:
            return True
        self._advance()
        self.steps += 1
        return self.is_done

    def run(
        self,
        max_steps: Optional[int] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> int:
        """Step until done, ``max_steps`` is reached or ``should_stop`` fires.

        Returns the number of steps executed by this call.
        """

        executed = 0
        while not self.is_done:
            if max_steps is not None and executed >= max_steps:
                break
            if should_stop is not None and should_stop():
                break
            self.step()
            executed += 1
        return executed


class GreedyBacktrackStrategy(SearchStrategy):
    """Depth-first search that only follows strictly improving walls.

    When no single wall improves a layout, a deep jump retries with up to
    ``deep_jump_depth`` extra walls before backtracking.
    """

    algorithm = SearchAlgorithm.GREEDY_BACKTRACK

    def __init__(self, context: SearchContext) -> None:
        super().__init__(context)
        initial = context.config.empty_layout()
        self._stack: List[SearchState] = [SearchState(initial, context.score(initial))]
        context.mark_visited(initial)

    @property
    def is_done(self) -> bool:
        return not self._stack

    def _advance(self) -> None:
        state = self._stack.pop()
        LOGGER.debug(
            "Current best: %s | Processing state with score: %s",
            self.context.best_score,
            state.score,
        )
        improved = self._push_improvements(state, 1)
        if not improved and self.config.deep_jump_depth > 1:
            LOGGER.info("Dead end found. Attempting deep jump...")
            self._push_improvements(state, self.config.deep_jump_depth)

    def _push_improvements(self, state: SearchState, depth: int) -> bool:
        candidates = self.context.candidates.generate(state.layout, depth)
        if not candidates:
            return False

        deep = depth > 1
        if deep:
            LOGGER.info("Evaluating %s new states...", len(candidates))

        improvements: List[SearchState] = []
        for layout in candidates:
            score = self.context.score(layout)
            if score > state.score:
                improvements.append(SearchState(layout, score))

        if deep:
            if improvements:
                LOGGER.info("Jump successful: found %s improvements.", len(improvements))
            else:
                LOGGER.info("Jump unsuccessful: returning.")

        if not improvements:
            return False

        # Ascending order leaves the best improvement on top of the stack.
        improvements.sort(key=lambda s: s.score)
        for candidate in improvements:
            self.context.offer(candidate.layout, candidate.score)
            self._stack.append(candidate)
            self.context.mark_visited(candidate.layout)
        return True


class BestFirstStrategy(SearchStrategy):
    """Always expands the highest-scoring layout seen so far.

    Every globally new neighbour is admitted, improving or not.
    """

    algorithm = SearchAlgorithm.BEST_FIRST

    def __init__(self, context: SearchContext) -> None:
        super().__init__(context)
        self._counter = 0
        self._heap: List[Tuple[int, int, SearchState]] = []
        initial = context.config.empty_layout()
        self._push(SearchState(initial, context.score(initial)))
        context.mark_visited(initial)

    @property
    def is_done(self) -> bool:
        return not self._heap

    def _push(self, state: SearchState) -> None:
        # heapq is a min-heap; the counter keeps equal scores in FIFO order.
        heapq.heappush(self._heap, (-state.score, self._counter, state))
        self._counter += 1

    def _advance(self) -> None:
        _, _, state = heapq.heappop(self._heap)
        LOGGER.debug(
            "Current best: %s | Processing state with score: %s",
            self.context.best_score,
            state.score,
        )
        cells = state.layout.placeable_cells()
        if self.config.randomize_cell_order:
            self.context.rng.shuffle(cells)

        for point in cells:
            layout = state.layout.with_wall(point)
            if self.context.is_visited(layout):
                continue
            score = self.context.score(layout)
            self.context.offer(layout, score)
            self._push(SearchState(layout, score))
            self.context.mark_visited(layout)


class StochasticHillClimbStrategy(SearchStrategy):
    """Greedy single-wall hill climbing with occasional random walls.

    Never finishes on its own; drive it with ``run(max_steps=...)`` or a
    ``should_stop`` callback.
    """

    algorithm = SearchAlgorithm.STOCHASTIC_HILL_CLIMB

    def __init__(self, context: SearchContext) -> None:
        super().__init__(context)
        self.current: MazeLayout = context.config.empty_layout()
        self.resets = 0

    @property
    def is_done(self) -> bool:
        return False

    def _reset(self) -> None:
        self.current = self.config.empty_layout()
        self.resets += 1

    def _advance(self) -> None:
        LOGGER.debug("Current best: %s | Run: %s", self.context.best_score, self.steps + 1)
        rng = self.context.rng
        cells = self.current.placeable_cells()
        if not cells:
            self._reset()
            return

        if self.config.randomize_cell_order:
            rng.shuffle(cells)

        if rng.random() < self.config.accept_worse_probability:
            # Not scored here; a dead layout is caught by the next round.
            self.current = self.current.with_wall(cells[rng.randrange(len(cells))])
        else:
            best_layout: Optional[MazeLayout] = None
            best_score = UNREACHABLE
            for point in cells:
                layout = self.current.with_wall(point)
                score = self.context.score(layout)
                if score > best_score:
                    best_layout, best_score = layout, score
            if best_layout is None:
                self._reset()
                return
            self.current = best_layout

        self.context.offer(self.current, self.context.score(self.current))


STRATEGIES: Dict[SearchAlgorithm, Type[SearchStrategy]] = {
    SearchAlgorithm.GREEDY_BACKTRACK: GreedyBacktrackStrategy,
    SearchAlgorithm.BEST_FIRST: BestFirstStrategy,
    SearchAlgorithm.STOCHASTIC_HILL_CLIMB: StochasticHillClimbStrategy,
}


def build_strategy(context: SearchContext) -> SearchStrategy:
    """Instantiate the strategy selected by ``context.config.algorithm``."""

    return STRATEGIES[context.config.algorithm](context)
