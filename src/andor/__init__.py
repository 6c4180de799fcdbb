"""AND-OR graph search for nondeterministic planning problems.

Usage:
    from andor import AndOrSearch, is_failure

    engine = AndOrSearch()
    plan = engine.search(problem)
    if not is_failure(plan):
        print(plan)
"""

from andor.path import Path
from andor.plan import FAILURE, Failure, IfStateThenPlan, Plan, SearchResult, is_failure
from andor.problem import NondeterministicProblem, Problem, table_problem
from andor.search import AndOrSearch, and_or_graph_search

__all__ = [
    "AndOrSearch",
    "and_or_graph_search",
    "FAILURE",
    "Failure",
    "IfStateThenPlan",
    "NondeterministicProblem",
    "Path",
    "Plan",
    "Problem",
    "SearchResult",
    "is_failure",
    "table_problem",
]
