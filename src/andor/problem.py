"""Problem contract consumed by the AND-OR search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Collection, Hashable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class NondeterministicProblem(Protocol):
    """A search problem whose actions may have several outcomes.

    States must be hashable and compare by value. The order of ``actions``
    is the search's tie-break, and the order of ``results`` fixes the order
    of branches in the returned plan, so both should return ordered
    collections when reproducible plans are needed.
    """

    def initial_state(self) -> Hashable: ...

    def is_goal(self, state: Hashable) -> bool: ...

    def actions(self, state: Hashable) -> Sequence[Any]: ...

    def results(self, state: Hashable, action: Any) -> Collection[Hashable]: ...


@dataclass(frozen=True)
class Problem:
    """Adapt plain callables to the ``NondeterministicProblem`` contract.

    Usage:
        problem = Problem(
            initial="s0",
            goal_test=lambda s: s == "g",
            actions_fn=lambda s: ["go"] if s == "s0" else [],
            results_fn=lambda s, a: ["g"],
        )
    """

    initial: Hashable
    goal_test: Callable[[Hashable], bool]
    actions_fn: Callable[[Hashable], Sequence[Any]]
    results_fn: Callable[[Hashable, Any], Collection[Hashable]]

    def initial_state(self) -> Hashable:
        return self.initial

    def is_goal(self, state: Hashable) -> bool:
        return bool(self.goal_test(state))

    def actions(self, state: Hashable) -> Sequence[Any]:
        return self.actions_fn(state)

    def results(self, state: Hashable, action: Any) -> Collection[Hashable]:
        return self.results_fn(state, action)


def table_problem(initial, goals, transitions) -> Problem:
    """Build a ``Problem`` from an explicit transition table.

    Args:
        initial: Initial state.
        goals: Collection of goal states.
        transitions: Mapping ``state -> {action: [outcome, ...]}``. Actions
            are tried in the mapping's insertion order; states missing from
            the mapping have no actions.

    Returns:
        A ``Problem`` backed by the table.
    """
    goal_states = frozenset(goals)
    return Problem(
        initial=initial,
        goal_test=lambda state: state in goal_states,
        actions_fn=lambda state: list(transitions.get(state, {})),
        results_fn=lambda state, action: list(transitions[state][action]),
    )
