"""Slippery Vacuum World.

Movement in this variant sometimes fails and leaves the agent in place.
Every plan that copes with the slip has to retry the move, i.e. it is a
cyclic plan. AND-OR search only returns acyclic plans, so it reports that
no conditional plan exists.
"""

from typing import Optional

from rich.console import Console

from andor.display import print_search_result
from andor.search import AndOrSearch
from andor.examples.vacuum import LOCATION_A, DIRTY, VacuumWorld


def main(recursion_limit: Optional[int] = None) -> None:
    """Run the slippery vacuum world example."""
    console = Console()
    problem = VacuumWorld(start=(LOCATION_A, DIRTY, DIRTY), slippery=True)

    engine = AndOrSearch(recursion_limit=recursion_limit)
    result = engine.search(problem)
    print_search_result(result, engine.get_metrics(), console=console, title="Slippery vacuum world")
