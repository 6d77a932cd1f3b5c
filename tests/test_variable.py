from __future__ import annotations

import copy
import logging

import pytest

from rimp_core import (
    HistoryUnderflowError,
    ReversibleVariable,
    VariableAssigned,
    VariableConfig,
    VariableCreated,
    VariableUnassigned,
)


class TestConstruction:
    def test_starts_at_zero_with_sentinel(self, x: ReversibleVariable) -> None:
        assert x.get() == 0
        assert x.history == (0,)
        assert x.depth == 1
        assert not x.can_un_assign

    def test_name_is_immutable(self, x: ReversibleVariable) -> None:
        with pytest.raises(Exception, match="frozen"):
            x.name = "y"

    def test_debug_and_config_are_exclusive(self) -> None:
        with pytest.raises(ValueError, match="either 'debug' or 'config'"):
            ReversibleVariable("x", debug=True, config=VariableConfig())

    def test_rejects_unknown_keywords(self) -> None:
        with pytest.raises(TypeError):
            ReversibleVariable("x", value=7)  # type: ignore[call-arg]

    def test_validation_rejects_extra_fields(self) -> None:
        with pytest.raises(Exception, match="[Ee]xtra"):
            ReversibleVariable.model_validate({"name": "x", "value": 7})

    def test_debug_flag_builds_config(self) -> None:
        assert ReversibleVariable("x", debug=True).config.debug is True
        assert ReversibleVariable("x").config.debug is False

    def test_creation_event_is_recorded(self, x: ReversibleVariable) -> None:
        events = x.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], VariableCreated)
        assert events[0].variable_name == "x"
        assert events[0].depth == 1


class TestScenarios:
    def test_assign_then_unwind_to_underflow(self, x: ReversibleVariable) -> None:
        assert x.get() == 0

        x.assign(5)
        assert x.get() == 5
        assert x.history == (0, 5)

        x.assign(2)
        assert x.get() == 2
        assert x.history == (0, 5, -3)

        x.un_assign()
        assert x.get() == 5
        assert x.history == (0, 5)

        x.un_assign()
        assert x.get() == 0
        assert x.history == (0,)

        with pytest.raises(HistoryUnderflowError):
            x.un_assign()

    def test_negative_assignment(self) -> None:
        y = ReversibleVariable("y")
        y.assign(-10)
        assert y.get() == -10
        assert y.history == (0, -10)

        y.un_assign()
        assert y.get() == 0

    def test_inspect_renders_history(self, x: ReversibleVariable) -> None:
        x.assign(5)
        x.assign(2)
        assert x.inspect().render() == "x: 2\t [0 5 -3 ]"
        assert str(x) == "x: 2\t [0 5 -3 ]"


class TestAssign:
    def test_returns_event_with_delta_and_depth(self, x: ReversibleVariable) -> None:
        x.assign(7)
        event = x.assign(3)

        assert isinstance(event, VariableAssigned)
        assert event.target == 3
        assert event.delta == -4
        assert event.depth == 3

    def test_same_value_records_zero_delta(self, x: ReversibleVariable) -> None:
        x.assign(4)
        x.assign(4)
        assert x.history == (0, 4, 0)
        x.un_assign()
        assert x.get() == 4

    def test_large_integers_are_exact(self, x: ReversibleVariable) -> None:
        big = 2**80
        x.assign(big)
        x.assign(-big)
        assert x.history == (0, big, -2 * big)
        x.un_assign()
        assert x.get() == big

    @pytest.mark.parametrize("bad", ["5", 5.0, None, True])
    def test_rejects_non_integers(self, x: ReversibleVariable, bad: object) -> None:
        with pytest.raises(TypeError, match="holds integers"):
            x.assign(bad)  # type: ignore[arg-type]
        assert x.history == (0,)
        assert x.get() == 0


class TestUnAssign:
    def test_returns_event_with_reverted_value(self, x: ReversibleVariable) -> None:
        x.assign(5)
        x.assign(2)
        event = x.un_assign()

        assert isinstance(event, VariableUnassigned)
        assert event.reverted_to == 5
        assert event.delta == -3
        assert event.depth == 2

    def test_underflow_leaves_state_unchanged(self, x: ReversibleVariable) -> None:
        with pytest.raises(HistoryUnderflowError) as exc_info:
            x.un_assign()

        assert exc_info.value.variable_name == "x"
        assert exc_info.value.depth == 1
        assert x.get() == 0
        assert x.history == (0,)

    def test_underflow_after_full_unwind(self, x: ReversibleVariable) -> None:
        x.assign(9)
        x.un_assign()
        with pytest.raises(HistoryUnderflowError):
            x.un_assign()
        assert x.history == (0,)

    def test_variable_stays_usable_after_underflow(
        self, x: ReversibleVariable
    ) -> None:
        with pytest.raises(HistoryUnderflowError):
            x.un_assign()
        x.assign(1)
        assert x.history == (0, 1)
        x.un_assign()
        assert x.get() == 0

    def test_underflow_is_reported_once(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        var = ReversibleVariable("u", debug=True)
        with caplog.at_level(logging.DEBUG), pytest.raises(HistoryUnderflowError):
            var.un_assign()

        failures = [rec for rec in caplog.records if "failed" in rec.message]
        assert [rec.name for rec in failures] == ["rimp.trace"]

    def test_underflow_is_not_a_pending_event(self, x: ReversibleVariable) -> None:
        x.collect_events()
        with pytest.raises(HistoryUnderflowError):
            x.un_assign()
        assert x.collect_events() == []


class TestCopy:
    def test_model_copy_keeps_original_history_intact(
        self, x: ReversibleVariable
    ) -> None:
        x.assign(5)
        y = x.model_copy()
        y.assign(2)

        assert x.get() == sum(x.history) == 5
        assert x.history == (0, 5)
        assert y.get() == sum(y.history) == 2
        assert y.history == (0, 5, -3)

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_un_assign_on_copy_leaves_original_alone(
        self, x: ReversibleVariable, copier: object
    ) -> None:
        x.assign(5)
        clone = copier(x)  # type: ignore[operator]
        clone.un_assign()

        assert clone.history == (0,)
        assert x.get() == 5
        assert x.history == (0, 5)
        x.un_assign()
        assert x.get() == 0

    def test_copy_has_own_events_and_observers(
        self, traced: ReversibleVariable, trace_lines: list[str]
    ) -> None:
        traced.collect_events()
        clone = traced.model_copy()
        clone.observers.clear()
        clone.assign(1)

        assert traced.collect_events() == []
        assert len(clone.collect_events()) == 1
        assert len(traced.observers) == 1
        assert "Assigning t to 1 new size: 2" not in trace_lines

        traced.assign(4)
        assert trace_lines[-1] == "Assigning t to 4 new size: 2"


class TestEventCollection:
    def test_collects_state_changes_in_order(self, x: ReversibleVariable) -> None:
        x.assign(1)
        x.get()
        x.un_assign()

        kinds = [type(event) for event in x.collect_events()]
        assert kinds == [VariableCreated, VariableAssigned, VariableUnassigned]
        assert x.collect_events() == []


def test_repr_shows_state(x: ReversibleVariable) -> None:
    x.assign(3)
    assert repr(x) == "ReversibleVariable(name='x', value=3, history=[0, 3])"


def test_value_property_matches_get(x: ReversibleVariable) -> None:
    x.assign(11)
    assert x.value == x.get() == 11
