"""Console rendering of conditional plans and search metrics."""

from typing import Any, Dict, Hashable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from andor.plan import IfStateThenPlan, Plan, SearchResult, is_failure


def format_state(state: Hashable) -> str:
    if isinstance(state, tuple):
        return "(" + ", ".join(str(item) for item in state) + ")"
    return str(state)


def format_plan(plan: Plan, compact: bool = False, indent: int = 2) -> str:
    """Format a plan as if/else text.

    Args:
        plan: The plan to format.
        compact: If True, render on one line in list form, e.g.
            ``[Suck, if (A, clean, dirty) then [Right, Suck] else []]``.
        indent: Spaces per nesting level (multi-line form only).

    Returns:
        The formatted plan. In multi-line form the empty plan formats as
        ``(no action needed)``; in compact form as ``[]``.
    """
    if compact:
        return _format_inline(plan)
    lines: list[str] = []
    _format_steps(plan, 0, indent, lines)
    return "\n".join(lines)


def format_step(step: Any) -> str:
    """Format a single plan step on one line."""
    if isinstance(step, IfStateThenPlan):
        return f"if {format_state(step.state)} then {_format_inline(step.plan)}"
    if isinstance(step, Plan):
        return _format_inline(step)
    return str(step)


def _format_inline(plan: Plan) -> str:
    parts: list[str] = []
    for index, step in enumerate(plan.steps):
        if isinstance(step, Plan) and index > 0 and isinstance(plan.steps[index - 1], IfStateThenPlan):
            # Attach the default branch to the preceding conditional
            parts[-1] = f"{parts[-1]} else {_format_inline(step)}"
        else:
            parts.append(format_step(step))
    return "[" + ", ".join(parts) + "]"


def _format_steps(plan: Plan, depth: int, indent: int, lines: list[str]) -> None:
    pad = " " * (depth * indent)
    if plan.is_empty:
        lines.append(f"{pad}(no action needed)")
        return

    for index, step in enumerate(plan.steps):
        if isinstance(step, IfStateThenPlan):
            keyword = "else if" if index > 0 and isinstance(plan.steps[index - 1], IfStateThenPlan) else "if"
            lines.append(f"{pad}{keyword} state = {format_state(step.state)}:")
            _format_steps(step.plan, depth + 1, indent, lines)
        elif isinstance(step, Plan):
            if index > 0 and isinstance(plan.steps[index - 1], IfStateThenPlan):
                lines.append(f"{pad}else:")
                _format_steps(step, depth + 1, indent, lines)
            else:
                _format_steps(step, depth, indent, lines)
        else:
            lines.append(f"{pad}{step}")


def plan_tree(plan: Plan, label: str = "plan") -> Tree:
    """Build a rich ``Tree`` mirroring the plan's branching structure."""
    tree = Tree(Text(label, style="bold"))
    _add_steps(tree, plan)
    return tree


def _add_steps(node: Tree, plan: Plan) -> None:
    if plan.is_empty:
        node.add(Text("(no action needed)", style="dim"))
        return

    for index, step in enumerate(plan.steps):
        if isinstance(step, IfStateThenPlan):
            branch = node.add(Text(f"if {format_state(step.state)}", style="cyan"))
            _add_steps(branch, step.plan)
        elif isinstance(step, Plan):
            if index > 0 and isinstance(plan.steps[index - 1], IfStateThenPlan):
                _add_steps(node.add(Text("else", style="cyan")), step)
            else:
                _add_steps(node, step)
        else:
            node.add(Text(str(step), style="green"))


def metrics_table(metrics: Dict[str, Any]) -> Table:
    table = Table(title="Search metrics", show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for name, value in metrics.items():
        table.add_row(name, str(value))
    return table


def print_search_result(
    result: SearchResult,
    metrics: Optional[Dict[str, Any]] = None,
    console: Optional[Console] = None,
    title: str = "AND-OR search",
) -> None:
    """Print a search result (plan tree or failure) and optional metrics."""
    console = console or Console()
    if is_failure(result):
        body = Text("No conditional plan exists", style="bold red")
    else:
        body = plan_tree(result)  # type: ignore[arg-type]
    console.print(Panel(body, title=title, expand=False))
    if metrics:
        console.print(metrics_table(metrics))
