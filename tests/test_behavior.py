"""Unit tests for behaviors and the preset catalog."""

import pytest

from langton.behavior import PALETTE, PRESETS, Behavior, Color, TurnRule, preset
from langton.errors import InvariantViolation, UnknownBehavior


def test_preset_table_sizes():
    assert [len(preset(i)) for i in range(4)] == [2, 9, 12, 12]


def test_classic_preset():
    b = preset(0)
    assert b.rule_string == "RL"
    assert b.lookup(0).turn is TurnRule.RIGHT
    assert b.lookup(0).color == Color(0, 0, 0)
    assert b.lookup(1).turn is TurnRule.LEFT
    assert b.colors == (Color(0, 0, 0), Color(255, 255, 255))


def test_preset_rule_strings():
    assert PRESETS[1].rule_string == "LRRRRRLLR"
    assert PRESETS[2].rule_string == "LLRRRLRLRLLR"
    assert PRESETS[3].rule_string == "RRLLLRLLLRRR"


@pytest.mark.parametrize("bad_id", [4, -1, 99, "0", None])
def test_unknown_preset(bad_id):
    with pytest.raises(UnknownBehavior) as excinfo:
        preset(bad_id)
    assert excinfo.value.behavior_id == bad_id
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("condition", [2, -1, 100])
def test_lookup_out_of_range_fails_loudly(condition):
    with pytest.raises(InvariantViolation):
        preset(0).lookup(condition)


def test_invariant_violation_is_assertion():
    assert issubclass(InvariantViolation, AssertionError)


def test_from_string():
    b = Behavior.from_string("llrr")
    assert b.rule_string == "LLRR"
    assert b.colors == PALETTE[:4]
    assert Behavior.from_string("RL").rule_string == preset(0).rule_string
    assert Behavior.from_string("RL") == Behavior.from_string("rl")


@pytest.mark.parametrize("spec", ["", "RXL", "R" * (len(PALETTE) + 1)])
def test_from_string_rejects_bad_input(spec):
    with pytest.raises(ValueError):
        Behavior.from_string(spec)


def test_behavior_is_not_empty():
    with pytest.raises(ValueError):
        Behavior([])
