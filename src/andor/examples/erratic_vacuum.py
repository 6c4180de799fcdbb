"""Erratic Vacuum World.

This example searches the two-square vacuum world in which Suck behaves
erratically: cleaning a dirty square sometimes cleans the other square as
well, and sucking a clean square sometimes deposits dirt. No fixed action
sequence is guaranteed to clean both squares, but a conditional plan is:

    [Suck, if (A, clean, dirty) then [Right, Suck] else []]

The plan is then executed several times with randomly chosen outcomes to
show that every run ends with both squares clean.
"""

from typing import Optional

from rich.console import Console

from andor.display import print_search_result
from andor.execution import execute_plan
from andor.plan import is_failure
from andor.search import AndOrSearch
from andor.examples.vacuum import LOCATION_A, DIRTY, VacuumWorld


def main(seed: Optional[int] = None, runs: int = 3, recursion_limit: Optional[int] = None) -> None:
    """Run the erratic vacuum world example."""
    console = Console()
    problem = VacuumWorld(start=(LOCATION_A, DIRTY, DIRTY))

    engine = AndOrSearch(recursion_limit=recursion_limit)
    result = engine.search(problem)
    print_search_result(result, engine.get_metrics(), console=console, title="Erratic vacuum world")
    if is_failure(result):
        return

    console.print(f"\nPlan: {result}\n", markup=False)
    for run in range(runs):
        run_seed = None if seed is None else seed + run
        trace = execute_plan(result, problem, seed=run_seed)  # type: ignore[arg-type]
        steps = " -> ".join(str(action) for action in trace.actions) or "(none)"
        console.print(f"Run {run + 1}: {steps}  final state {trace.final_state}", markup=False)
