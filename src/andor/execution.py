"""Following a conditional plan against observed states.

``PlanFollower`` plays the role of a plan-executing agent: it is handed the
state observed after every action and returns the next action to take,
resolving conditional steps along the way. ``execute_plan`` drives a follower
through a simulated run of a problem, with the nondeterministic outcome of
every action picked by a callback.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Collection, Hashable, List, Optional

from andor.plan import IfStateThenPlan, Plan
from andor.problem import NondeterministicProblem

OutcomeChooser = Callable[[Hashable, Any, List[Hashable]], Hashable]


class PlanExecutionError(RuntimeError):
    """Raised when a simulated run cannot follow the plan to a goal."""


class _PlanComplete:
    def __repr__(self) -> str:
        return "PLAN_COMPLETE"


# Returned by PlanFollower.next_action once no steps remain. Actions are
# opaque domain values (None included), so completion needs its own marker.
PLAN_COMPLETE: Any = _PlanComplete()


class PlanFollower:
    """Step through a conditional plan one observation at a time.

    Usage:
        follower = PlanFollower(plan)
        action = follower.next_action(observed_state)
        while action is not PLAN_COMPLETE:
            observed_state = world.apply(action)
            action = follower.next_action(observed_state)
    """

    def __init__(self, plan: Plan) -> None:
        self._steps: List[Any] = list(plan.steps)

    @property
    def is_done(self) -> bool:
        """Whether every step of the plan has been consumed."""
        return not self._steps

    def next_action(self, state: Hashable) -> Any:
        """Return the next action given the currently observed state.

        Conditional steps are resolved against ``state``: a matching guard
        replaces the remaining steps with its sub-plan, a non-matching guard
        is skipped, and a trailing unconditional sub-plan is entered.

        Args:
            state: The state observed after the previous action.

        Returns:
            The next action, or ``PLAN_COMPLETE`` if the plan has no steps
            left.
        """
        while self._steps:
            step = self._steps.pop(0)
            if isinstance(step, IfStateThenPlan):
                if step.state == state:
                    self._steps = list(step.plan.steps)
            elif isinstance(step, Plan):
                self._steps = list(step.steps) + self._steps
            else:
                return step
        return PLAN_COMPLETE


@dataclass
class ExecutionTrace:
    """States visited and actions taken during a simulated run.

    ``states`` has one more entry than ``actions``: ``states[i]`` is observed
    before ``actions[i]`` and ``states[i + 1]`` after it.
    """

    states: List[Hashable] = field(default_factory=list)
    actions: List[Any] = field(default_factory=list)

    @property
    def final_state(self) -> Hashable:
        return self.states[-1]

    def __len__(self) -> int:
        return len(self.actions)


def random_outcome_chooser(seed: Optional[int] = None) -> OutcomeChooser:
    """Return a chooser that picks outcomes uniformly at random."""
    rng = random.Random(seed)

    def choose(state: Hashable, action: Any, outcomes: List[Hashable]) -> Hashable:
        return rng.choice(outcomes)

    return choose


def execute_plan(
    plan: Plan,
    problem: NondeterministicProblem,
    choose_outcome: Optional[OutcomeChooser] = None,
    seed: Optional[int] = None,
    max_steps: int = 10_000,
) -> ExecutionTrace:
    """Simulate ``plan`` on ``problem`` until the plan is exhausted.

    Args:
        plan: Conditional plan returned by the search.
        problem: Problem supplying the initial state and outcome sets.
        choose_outcome: Callback picking the actual outcome of each action
            from the possible ones. Defaults to a seeded random choice.
        seed: Seed for the default random chooser.
        max_steps: Upper bound on the number of executed actions.

    Returns:
        The trace of the run. Its final state satisfies the goal.

    Raises:
        PlanExecutionError: If the chooser returns an impossible outcome, the
            run exceeds ``max_steps``, or the plan ends outside a goal state.
    """
    if choose_outcome is None:
        choose_outcome = random_outcome_chooser(seed)

    follower = PlanFollower(plan)
    state = problem.initial_state()
    trace = ExecutionTrace(states=[state])

    action = follower.next_action(state)
    while action is not PLAN_COMPLETE:
        if len(trace.actions) >= max_steps:
            raise PlanExecutionError(f"Plan did not finish within {max_steps} steps")
        outcomes = _as_list(problem.results(state, action))
        state = choose_outcome(state, action, outcomes)
        if state not in outcomes:
            raise PlanExecutionError(
                f"Outcome {state!r} is not a possible result of {action!r}"
            )
        trace.actions.append(action)
        trace.states.append(state)
        action = follower.next_action(state)

    if not problem.is_goal(state):
        raise PlanExecutionError(f"Plan finished in non-goal state {state!r}")
    return trace


def _as_list(outcomes: Collection[Hashable]) -> List[Hashable]:
    return list(dict.fromkeys(outcomes))
