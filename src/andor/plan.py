"""Conditional plans and the explicit search failure result.

A conditional plan is an ordered sequence of steps. Each step is one of:

- a primitive action supplied by the problem domain,
- an ``IfStateThenPlan`` branch, taken when the observed state equals its guard,
- a nested ``Plan`` used unconditionally (the implicit "else" that closes a
  run of branches).

Plans are immutable. ``prepend`` and ``from_branches`` always build new plans.

Failure is a separate singleton, ``FAILURE``. It is never the same thing as
the zero-step plan, which means "the goal already holds".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, Sequence, Tuple, Union


@dataclass(frozen=True)
class IfStateThenPlan:
    """Conditional step: follow ``plan`` when the observed state is ``state``."""

    state: Hashable
    plan: "Plan"

    def __str__(self) -> str:
        from andor.display import format_step

        return format_step(self)


@dataclass(frozen=True)
class Plan:
    """An immutable conditional plan.

    Attributes:
        steps: Ordered steps. Each is an action, an ``IfStateThenPlan``, or a
            nested ``Plan``.
    """

    steps: Tuple[Any, ...] = ()

    @classmethod
    def empty(cls) -> "Plan":
        """Return the zero-step plan (goal already satisfied)."""
        return cls(())

    @classmethod
    def from_branches(cls, branches: Sequence[Tuple[Hashable, "Plan"]]) -> "Plan":
        """Build "if s1 then p1 else if s2 then p2 ... else pn".

        Every pair except the last becomes an ``IfStateThenPlan`` step; the
        last pair's plan closes the sequence unconditionally. A single pair
        needs no branching, so its plan is returned as-is.

        Args:
            branches: Nonempty ordered (state, plan) pairs, one per outcome.

        Returns:
            The composed conditional plan.

        Raises:
            ValueError: If ``branches`` is empty.
        """
        if not branches:
            raise ValueError("Cannot build a conditional plan from zero outcomes")
        if len(branches) == 1:
            return branches[0][1]
        conditionals = tuple(IfStateThenPlan(state, plan) for state, plan in branches[:-1])
        return cls(conditionals + (branches[-1][1],))

    def prepend(self, action: Any) -> "Plan":
        """Return a new plan that performs ``action`` before this one."""
        return Plan((action,) + self.steps)

    @property
    def is_empty(self) -> bool:
        return not self.steps

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.steps)

    def __str__(self) -> str:
        from andor.display import format_plan

        return format_plan(self, compact=True)


class Failure:
    """The "no conditional plan exists" search result.

    Only one instance exists, ``FAILURE``; compare with ``is`` or use
    ``is_failure``.
    """

    _instance = None

    def __new__(cls) -> "Failure":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FAILURE"


FAILURE = Failure()

SearchResult = Union[Plan, Failure]


def is_failure(result: SearchResult) -> bool:
    return result is FAILURE
