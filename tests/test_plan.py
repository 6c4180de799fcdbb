"""Tests for conditional plans and the failure result."""

import pytest

from andor.plan import FAILURE, Failure, IfStateThenPlan, Plan, is_failure


class TestPlanConstruction:
    """Tests for empty plans and prepending actions."""

    def test_empty_plan_has_no_steps(self):
        """Test the empty plan denotes 'no action needed'."""
        plan = Plan.empty()
        assert plan.steps == ()
        assert plan.is_empty
        assert len(plan) == 0

    def test_prepend_adds_first_step(self):
        """Test prepend puts the action before existing steps."""
        plan = Plan.empty().prepend("Suck").prepend("Right")
        assert plan.steps == ("Right", "Suck")
        assert list(plan) == ["Right", "Suck"]

    def test_prepend_returns_new_plan(self):
        """Test prepend does not modify the original plan."""
        base = Plan(("Suck",))
        extended = base.prepend("Right")
        assert base.steps == ("Suck",)
        assert extended is not base

    def test_plans_are_frozen(self):
        """Test plan steps cannot be reassigned."""
        plan = Plan(("Suck",))
        with pytest.raises(AttributeError):
            plan.steps = ()  # type: ignore[misc]

    def test_structural_equality(self):
        """Test independently built plans with the same steps are equal."""
        first = Plan.from_branches([("s1", Plan(("X",))), ("s2", Plan(("Y",)))]).prepend("go")
        second = Plan.from_branches([("s1", Plan(("X",))), ("s2", Plan(("Y",)))]).prepend("go")
        assert first == second
        assert hash(first) == hash(second)


class TestFromBranches:
    """Tests for composing outcome plans into a conditional plan."""

    def test_single_branch_returns_subplan(self):
        """Test one outcome needs no conditional step."""
        sub = Plan(("Suck",))
        assert Plan.from_branches([("s1", sub)]) is sub

    def test_two_branches(self):
        """Test 'if s1 then p1 else p2'."""
        p1, p2 = Plan(("X",)), Plan(("Y",))
        plan = Plan.from_branches([("s1", p1), ("s2", p2)])
        assert plan.steps == (IfStateThenPlan("s1", p1), p2)

    def test_three_branches(self):
        """Test every pair but the last becomes a conditional step."""
        p1, p2, p3 = Plan(("X",)), Plan.empty(), Plan(("Z",))
        plan = Plan.from_branches([("s1", p1), ("s2", p2), ("s3", p3)])
        assert plan.steps == (
            IfStateThenPlan("s1", p1),
            IfStateThenPlan("s2", p2),
            p3,
        )

    def test_empty_branches_rejected(self):
        """Test an empty outcome set cannot be turned into a plan."""
        with pytest.raises(ValueError):
            Plan.from_branches([])


class TestPlanFormatting:
    """Tests for the text rendering of plans."""

    def test_empty_plan(self):
        assert str(Plan.empty()) == "[]"

    def test_flat_plan(self):
        assert str(Plan(("Right", "Suck"))) == "[Right, Suck]"

    def test_conditional_plan(self):
        """Test the default branch renders as an else clause."""
        plan = Plan.from_branches(
            [(("A", "clean", "dirty"), Plan(("Right", "Suck"))), (("A", "clean", "clean"), Plan.empty())]
        ).prepend("Suck")
        assert str(plan) == "[Suck, if (A, clean, dirty) then [Right, Suck] else []]"


class TestFailure:
    """Tests for the explicit failure result."""

    def test_failure_is_singleton(self):
        assert Failure() is FAILURE

    def test_failure_distinct_from_empty_plan(self):
        """Test 'no plan' is never confused with 'no action needed'."""
        empty = Plan.empty()
        assert is_failure(FAILURE)
        assert not is_failure(empty)
        assert empty != FAILURE
        assert not isinstance(FAILURE, Plan)

    def test_repr(self):
        assert repr(FAILURE) == "FAILURE"
