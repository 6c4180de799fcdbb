"""Unit tests for plan formatting.

Tests the pure formatting functions and checks rendered rich output
through a recording console.
"""

from rich.console import Console

from andor import FAILURE, IfStateThenPlan, Plan
from andor.display import format_plan, format_step, metrics_table, plan_tree, print_search_result


def _textbook_plan():
    return Plan((
        "Suck",
        IfStateThenPlan(("A", "clean", "dirty"), Plan(("Right", "Suck"))),
        Plan.empty(),
    ))


class TestFormatPlan:
    def test_empty(self):
        assert format_plan(Plan.empty()) == "(no action needed)"

    def test_flat(self):
        assert format_plan(Plan(("Right", "Suck"))) == "Right\nSuck"

    def test_conditional(self):
        assert format_plan(_textbook_plan()) == "\n".join([
            "Suck",
            "if state = (A, clean, dirty):",
            "  Right",
            "  Suck",
            "else:",
            "  (no action needed)",
        ])

    def test_else_if_chain(self):
        plan = Plan.from_branches([("s1", Plan(("X",))), ("s2", Plan(("Y",))), ("s3", Plan(("Z",)))])
        assert format_plan(plan, indent=4) == "\n".join([
            "if state = s1:",
            "    X",
            "else if state = s2:",
            "    Y",
            "else:",
            "    Z",
        ])


class TestCompactFormat:
    """Tests for the one-line form that str(plan) delegates to."""

    def test_compact_conditional(self):
        expected = "[Suck, if (A, clean, dirty) then [Right, Suck] else []]"
        assert format_plan(_textbook_plan(), compact=True) == expected

    def test_str_uses_compact_format(self):
        plan = Plan.from_branches([("s1", Plan(("X",))), ("s2", Plan(("Y",))), ("s3", Plan.empty())])
        assert str(plan) == format_plan(plan, compact=True)
        assert str(plan) == "[if s1 then [X], if s2 then [Y] else []]"

    def test_conditional_step(self):
        step = IfStateThenPlan(("A", "clean", "dirty"), Plan(("Right",)))
        assert format_step(step) == "if (A, clean, dirty) then [Right]"
        assert str(step) == format_step(step)

    def test_empty_compact(self):
        assert format_plan(Plan.empty(), compact=True) == "[]"


class TestRichRendering:
    def _render(self, renderable) -> str:
        console = Console(record=True, width=100)
        console.print(renderable)
        return console.export_text()

    def test_plan_tree_contains_steps(self):
        text = self._render(plan_tree(_textbook_plan()))
        for label in ("plan", "Suck", "if (A, clean, dirty)", "Right", "else", "(no action needed)"):
            assert label in text

    def test_metrics_table(self):
        text = self._render(metrics_table({"expanded_nodes": 10}))
        assert "expanded_nodes" in text
        assert "10" in text

    def test_print_failure(self):
        console = Console(record=True, width=100)
        print_search_result(FAILURE, {"expanded_nodes": 3}, console=console)
        text = console.export_text()
        assert "No conditional plan exists" in text
        assert "expanded_nodes" in text

    def test_print_plan(self):
        console = Console(record=True, width=100)
        print_search_result(_textbook_plan(), console=console, title="Vacuum")
        text = console.export_text()
        assert "Vacuum" in text
        assert "Right" in text
