"""Example planning scenarios for andor.

This module provides runnable examples demonstrating AND-OR search.
Examples can be run via the CLI: `andor example <name>`
"""

from typing import Any, Callable, Dict, List, TypedDict


class OptionInfo(TypedDict, total=False):
    """Information about a CLI option for an example."""

    name: str  # e.g., "--seed"
    is_flag: bool  # True for boolean flags
    default: Any  # Default value
    type: Any  # Click type (e.g., int, str). Inferred from default if not set.
    help: str  # Help text
    param_name: str  # Python parameter name (e.g., "recursion_limit")


class ExampleInfo(TypedDict, total=False):
    """Information about an example."""

    main: Callable[..., None]
    description: str
    options: List[OptionInfo]  # Optional CLI options


def _lazy_import(module_name: str, fn_name: str = "main") -> Callable[..., None]:
    """Lazy import to avoid loading all examples at startup."""

    def wrapper(**kwargs: Any) -> None:
        import importlib

        mod = importlib.import_module(f"andor.examples.{module_name}")
        fn = getattr(mod, fn_name)
        return fn(**kwargs)

    return wrapper


GLOBAL_EXAMPLE_OPTIONS: List[OptionInfo] = [
    {
        "name": "--recursion-limit",
        "type": int,
        "default": None,
        "help": "Raise the Python recursion limit during search",
        "param_name": "recursion_limit",
    },
]

EXAMPLES: Dict[str, ExampleInfo] = {
    "erratic-vacuum": {
        "main": _lazy_import("erratic_vacuum"),
        "description": "Vacuum world with erratic suck (conditional plan found)",
        "options": [
            {
                "name": "--seed",
                "type": int,
                "default": None,
                "help": "Seed for the simulated outcomes",
                "param_name": "seed",
            },
            {
                "name": "--runs",
                "type": int,
                "default": 3,
                "help": "Number of simulated executions of the plan",
                "param_name": "runs",
            },
        ],
    },
    "slippery-vacuum": {
        "main": _lazy_import("slippery_vacuum"),
        "description": "Vacuum world with slippery moves (no acyclic plan exists)",
    },
}
