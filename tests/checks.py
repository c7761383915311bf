"""Simple checks"""

import os
import sys

import numpy as np

SRC = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from langton import (
    COL_STEP,
    ROW_STEP,
    Ant,
    Behavior,
    Direction,
    Field,
    LoopValue,
    Position,
    Scene,
    preset,
)


# --- Constants ---
NEIGHBOR_STEPS = {(-1, 0), (0, 1), (1, 0), (0, -1)}


# --- Loop values ---
def check_loop_value_wrap():
    for m in range(1, 50):
        assert LoopValue(m - 1, m).add(1).value == 0
        assert LoopValue(0, m).add(-1).value == m - 1
    print("OK: loop values wrap at both ends.")


# --- Direction updates ---
def check_direction_update():
    for d in Direction:
        cw, ccw = d.rotate_clockwise(), d.rotate_counterclockwise()
        assert cw.rotate_counterclockwise() is d
        assert ccw.rotate_clockwise() is d

        # Movement step should be one of the 4 neighbor moves
        v = d.displacement()
        assert (v.row, v.col) in NEIGHBOR_STEPS
        assert (v.row, v.col) == (int(ROW_STEP[d]), int(COL_STEP[d]))

    print("OK: direction rotation + displacement lookup work.")


def check_ant_class():
    field = Field(3, 3)
    ant = Ant(Position.at(1, 1, 3, 3), Direction.DOWN)
    ant.step(field, preset(0))
    assert ant.position.to_index() == (1, 0)
    assert ant.direction is Direction.LEFT
    assert field.read(1, 1) == 1

    ant.step(field, preset(0))
    assert ant.position.to_index() == (0, 0)
    assert ant.direction is Direction.UP

    print("OK: Ant class works.")


# --- Scene basics ---
def check_scene_runs():
    scene = Scene.init(32, 32, behavior_id=3, agent_count=3)
    scene.run(500)

    assert scene.step_count == 500
    assert len(scene.ant_positions) == 3
    assert 0 <= int(scene.field.min()) and int(scene.field.max()) < len(scene.behavior)

    print("OK: Scene run works.")


def check_determinism():
    a = Scene.init(24, 18, behavior_id=1, agent_count=2)
    b = Scene.init(24, 18, behavior_id=1, agent_count=2)
    a.run(300)
    b.run(300)
    assert np.array_equal(a.field, b.field)
    assert a.ant_positions == b.ant_positions
    print("OK: identical scenes stay identical.")


def check_rule_strings():
    for i in range(4):
        b = preset(i)
        assert Behavior.from_string(b.rule_string).rule_string == b.rule_string
    print("OK: preset rule strings round-trip.")


# --- Runner ---
def run_all_checks():
    check_loop_value_wrap()
    check_direction_update()
    check_ant_class()
    check_scene_runs()
    check_determinism()
    check_rule_strings()


if __name__ == "__main__":
    run_all_checks()
