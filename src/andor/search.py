"""AND-OR graph search for nondeterministic problems.

Implements AND-OR-GRAPH-SEARCH (Russell & Norvig, AIMA 3rd ed., Fig. 4.11):

    function OR-SEARCH(state, problem, path)
        if problem.GOAL-TEST(state) then return the empty plan
        if state is on path then return failure
        for each action in problem.ACTIONS(state) do
            plan <- AND-SEARCH(RESULTS(state, action), problem, [state | path])
            if plan != failure then return [action | plan]
        return failure

    function AND-SEARCH(states, problem, path)
        for each s_i in states do
            plan_i <- OR-SEARCH(s_i, problem, path)
            if plan_i = failure then return failure
        return [if s_1 then plan_1 else ... if s_n-1 then plan_n-1 else plan_n]

The first action whose every outcome can be rescued wins; alternative plans
are not compared by cost.
"""

from __future__ import annotations

import logging
import sys
import threading
from contextlib import contextmanager
from typing import Any, Collection, Dict, Hashable, Iterator, List, Optional

from andor.path import Path
from andor.plan import FAILURE, Plan, SearchResult
from andor.problem import NondeterministicProblem

__all__ = ["AndOrSearch", "and_or_graph_search", "METRIC_EXPANDED_NODES"]

logger = logging.getLogger(__name__)

METRIC_EXPANDED_NODES = "expanded_nodes"

# The recursion limit is process-wide; searches that raise it share one baseline
_limit_lock = threading.Lock()
_active_limits: List[int] = []
_baseline_limit: Optional[int] = None


@contextmanager
def _raised_recursion_limit(limit: Optional[int]) -> Iterator[None]:
    """Hold the recursion limit at or above ``limit`` until the block exits.

    While any search holds a raised limit, the interpreter limit is the
    largest requested value (never below the baseline). The baseline is
    restored only when the last holder exits.
    """
    global _baseline_limit
    if limit is None:
        yield
        return

    with _limit_lock:
        if not _active_limits:
            _baseline_limit = sys.getrecursionlimit()
        _active_limits.append(limit)
        sys.setrecursionlimit(max(_baseline_limit, *_active_limits))
    try:
        yield
    finally:
        with _limit_lock:
            _active_limits.remove(limit)
            if _active_limits:
                sys.setrecursionlimit(max(_baseline_limit, *_active_limits))
            else:
                sys.setrecursionlimit(_baseline_limit)
                _baseline_limit = None


class AndOrSearch:
    """Depth-first AND-OR search returning a conditional plan or ``FAILURE``.

    ``expanded_nodes`` counts OR-nodes and AND-nodes that were actually
    visited. When an AND-node fails on one outcome, its remaining outcomes are
    never expanded and so never counted. The counter is reset by every call
    to ``search``; an instance must not be shared by concurrent searches (use
    ``and_or_graph_search`` for a fresh engine per call).

    Usage:
        engine = AndOrSearch()
        result = engine.search(problem)
        if is_failure(result):
            ...
        engine.get_metrics()  # {"expanded_nodes": 7}
    """

    def __init__(self, recursion_limit: Optional[int] = None):
        """Initialize the search engine.

        Args:
            recursion_limit: If set, ``search`` raises the interpreter's
                recursion limit to at least this value while it runs. Each
                OR level uses two Python frames, so deep state spaces may
                need more than the default limit.
        """
        self.recursion_limit = recursion_limit
        self.expanded_nodes = 0

    def search(self, problem: NondeterministicProblem) -> SearchResult:
        """Search for a conditional plan from the problem's initial state.

        Args:
            problem: The nondeterministic problem to solve.

        Returns:
            A ``Plan`` that reaches a goal under every outcome, or ``FAILURE``.
        """
        self.expanded_nodes = 0
        with _raised_recursion_limit(self.recursion_limit):
            result = self.or_search(problem.initial_state(), problem, Path.empty())

        logger.info(
            "AND-OR search %s after expanding %d nodes",
            "failed" if result is FAILURE else "found a plan",
            self.expanded_nodes,
        )
        return result

    def or_search(
        self, state: Hashable, problem: NondeterministicProblem, path: Path
    ) -> SearchResult:
        """Choose the first action whose outcomes can all be handled."""
        self.expanded_nodes += 1

        if problem.is_goal(state):
            return Plan.empty()

        # Looping back to a committed ancestor never helps
        if state in path:
            logger.debug("Cycle at %r (depth %d)", state, len(path))
            return FAILURE

        extended_path = path.prepend(state)
        for action in problem.actions(state):
            outcomes = problem.results(state, action)
            plan = self.and_search(outcomes, problem, extended_path)
            if plan is not FAILURE:
                return plan.prepend(action)
            logger.debug("Rejected %r at %r", action, state)

        return FAILURE

    def and_search(
        self, states: Collection[Hashable], problem: NondeterministicProblem, path: Path
    ) -> SearchResult:
        """Find a plan for every outcome in ``states``.

        ``path`` was already extended by the calling OR-node and is passed
        down unchanged.
        """
        self.expanded_nodes += 1

        # Outcomes form a set; keep the first occurrence of each
        outcomes = list(dict.fromkeys(states))
        branches = []
        for outcome in outcomes:
            plan = self.or_search(outcome, problem, path)
            if plan is FAILURE:
                return FAILURE
            branches.append((outcome, plan))

        return Plan.from_branches(branches)

    def get_metrics(self) -> Dict[str, int]:
        """Return the diagnostic counters of the last search."""
        return {METRIC_EXPANDED_NODES: self.expanded_nodes}


def and_or_graph_search(problem: NondeterministicProblem, **kwargs: Any) -> SearchResult:
    """Run a search on a freshly constructed engine.

    Args:
        problem: The nondeterministic problem to solve.
        **kwargs: Forwarded to ``AndOrSearch``.

    Returns:
        A ``Plan`` or ``FAILURE``.
    """
    return AndOrSearch(**kwargs).search(problem)
