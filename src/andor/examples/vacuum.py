"""Two-square vacuum world with nondeterministic actions (AIMA §4.3).

A state is ``(location, dirt_a, dirt_b)`` where ``location`` is ``"A"`` or
``"B"`` and each dirt flag is ``"dirty"`` or ``"clean"``. The goal is for
both squares to be clean.

Erratic suck:
- On a dirty square, Suck cleans it and sometimes cleans the other square too.
- On a clean square, Suck sometimes deposits dirt.

Slippery moves (optional):
- Left and Right sometimes fail, leaving the agent where it was.

Outcomes are returned in a fixed order so searches are reproducible.
"""

from dataclasses import dataclass
from itertools import product
from typing import List, Tuple

LOCATION_A = "A"
LOCATION_B = "B"
CLEAN = "clean"
DIRTY = "dirty"

ACTION_SUCK = "Suck"
ACTION_RIGHT = "Right"
ACTION_LEFT = "Left"

VacuumState = Tuple[str, str, str]


def all_states() -> List[VacuumState]:
    """Return the eight world states."""
    return [
        (location, dirt_a, dirt_b)
        for location, dirt_a, dirt_b in product(
            (LOCATION_A, LOCATION_B), (DIRTY, CLEAN), (DIRTY, CLEAN)
        )
    ]


@dataclass(frozen=True)
class VacuumWorld:
    """The vacuum world as a ``NondeterministicProblem``.

    Attributes:
        start: Initial state.
        slippery: Whether Left/Right may fail to move the agent.
        action_order: Order in which actions are offered to the search.
    """

    start: VacuumState = (LOCATION_A, DIRTY, DIRTY)
    slippery: bool = False
    action_order: Tuple[str, ...] = (ACTION_SUCK, ACTION_RIGHT, ACTION_LEFT)

    def initial_state(self) -> VacuumState:
        return self.start

    def is_goal(self, state: VacuumState) -> bool:
        _, dirt_a, dirt_b = state
        return dirt_a == CLEAN and dirt_b == CLEAN

    def actions(self, state: VacuumState) -> List[str]:
        return list(self.action_order)

    def results(self, state: VacuumState, action: str) -> List[VacuumState]:
        location, dirt_a, dirt_b = state
        if action == ACTION_SUCK:
            outcomes = self._suck(state)
        elif action in (ACTION_LEFT, ACTION_RIGHT):
            target = LOCATION_A if action == ACTION_LEFT else LOCATION_B
            outcomes = [(target, dirt_a, dirt_b)]
            if self.slippery and target != location:
                outcomes.append(state)
        else:
            raise ValueError(f"Unknown vacuum action: {action}")
        return list(dict.fromkeys(outcomes))

    def _suck(self, state: VacuumState) -> List[VacuumState]:
        location, dirt_a, dirt_b = state
        here = dirt_a if location == LOCATION_A else dirt_b
        if here == DIRTY:
            cleaned_here = _with_dirt(state, location, CLEAN)
            other = LOCATION_B if location == LOCATION_A else LOCATION_A
            return [cleaned_here, _with_dirt(cleaned_here, other, CLEAN)]
        return [state, _with_dirt(state, location, DIRTY)]


def _with_dirt(state: VacuumState, square: str, dirt: str) -> VacuumState:
    location, dirt_a, dirt_b = state
    if square == LOCATION_A:
        return (location, dirt, dirt_b)
    return (location, dirt_a, dirt)
