"""Simulation state: the condition field, the ants, and the scene.

The field is a 2D NumPy array indexed `cells[row, col]` (dtype `int32`)
holding one condition per cell. Ants are small objects holding a toroidal
`Position` and a `Direction`. The `Scene` owns one behavior, one field and
an ordered list of ants, and advances all of them with a single `step()`.

Note
----
Ants are updated strictly one after another in list order. When two ants
share a cell in the same step the later one sees the earlier one's write.
"""
import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .behavior import Behavior, Color, TurnRule, preset
from .config import ANT_COUNTS, SceneConfig
from .errors import InvariantViolation, UnknownAgentCount
from .geometry import Direction, Position

logger = logging.getLogger(__name__)


class Field:
    """Fixed-size grid of conditions, all starting at 0."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("field width and height must be positive")
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.int32)

    def read(self, row: int, col: int) -> int:
        return int(self.cells[row, col])

    def write(self, row: int, col: int, condition: int) -> None:
        self.cells[row, col] = condition

    def snapshot(self) -> np.ndarray:
        """Return a read-only view of the cells (row-major)."""
        view = self.cells.view()
        view.flags.writeable = False
        return view

    def counts(self, n_conditions: int) -> np.ndarray:
        """Return how many cells hold each condition in ``[0, n_conditions)``."""
        return np.bincount(self.cells.ravel(), minlength=n_conditions)


class Ant:
    """Single ant: a toroidal position and a heading."""

    def __init__(self, position: Position, direction: Direction = Direction.DOWN):
        self.position = position
        self.direction = Direction(direction)

    def __repr__(self) -> str:
        return f"Ant(position={self.position.to_index()}, direction={self.direction.name})"

    def step(self, field: Field, behavior: Behavior) -> None:
        """Read the cell, turn, advance the cell's condition, move forward."""
        row, col = self.position.to_index()
        condition = field.read(row, col)
        rule = behavior.lookup(condition)

        if rule.turn is TurnRule.RIGHT:
            self.direction = self.direction.rotate_clockwise()
        else:
            self.direction = self.direction.rotate_counterclockwise()

        # Round-robin through every condition, not a toggle.
        field.write(row, col, (condition + 1) % len(behavior))

        self.position.translate(self.direction.displacement())


def starting_ants(agent_count: int, width: int, height: int) -> List[Ant]:
    """Place 1, 2 or 3 ants on the middle row, evenly spread, facing down."""
    if agent_count == 1:
        cols = [width // 2]
    elif agent_count == 2:
        cols = [width // 3, (width // 3) * 2]
    elif agent_count == 3:
        cols = [width // 4, width // 2, (width // 4) * 3]
    else:
        raise UnknownAgentCount(agent_count)

    row = height // 2
    return [Ant(Position.at(row, col, width, height), Direction.DOWN) for col in cols]


class Scene:
    """One run of the automaton.

    Build with `Scene.init(...)` or `Scene.from_config(...)` for the catalog
    presets, or pass a behavior, field and ants directly for custom setups.
    Drivers call `step()` repeatedly and read the accessors in between;
    nothing returned by an accessor can change the simulation.
    """

    def __init__(self, behavior: Behavior, field: Field, ants: Iterable[Ant]):
        self._behavior = behavior
        self._field = field
        self._ants = list(ants)
        self._step_count = 0

        for ant in self._ants:
            pos = ant.position
            wraps = (pos.row.modulus, pos.col.modulus) == (field.height, field.width)
            if not wraps or not pos.in_bounds(field.width, field.height):
                raise InvariantViolation(f"{ant!r} does not fit the {field.width}x{field.height} field")

    @classmethod
    def init(cls, width: int, height: int, behavior_id: int = 0, agent_count: int = 1) -> "Scene":
        """Build a scene from the preset catalogs.

        Raises `UnknownBehavior` or `UnknownAgentCount` before anything is
        allocated when either id is not supported.
        """
        behavior = preset(behavior_id)
        if agent_count not in ANT_COUNTS:
            raise UnknownAgentCount(agent_count)

        scene = cls(behavior, Field(width, height), starting_ants(agent_count, width, height))
        logger.debug(
            "scene %dx%d behavior=%s ants=%d", width, height, behavior.rule_string, agent_count
        )
        return scene

    @classmethod
    def from_config(cls, config: Optional[SceneConfig] = None) -> "Scene":
        """Validate `config` (defaults if omitted) and build the scene."""
        config = config or SceneConfig()
        config.validate()
        return cls.init(config.width, config.height, config.behavior_id, config.agent_count)

    def step(self) -> None:
        """Advance every ant once, in order, then bump the step counter."""
        for ant in self._ants:
            ant.step(self._field, self._behavior)
        self._step_count += 1

    def run(self, steps: int) -> None:
        """Call `step()` `steps` times."""
        for _ in range(int(steps)):
            self.step()

    @property
    def width(self) -> int:
        return self._field.width

    @property
    def height(self) -> int:
        return self._field.height

    @property
    def behavior(self) -> Behavior:
        return self._behavior

    @property
    def field(self) -> np.ndarray:
        """Read-only row-major view of the cell conditions."""
        return self._field.snapshot()

    @property
    def colors(self) -> Tuple[Color, ...]:
        """Display color for each condition."""
        return self._behavior.colors

    @property
    def ant_positions(self) -> List[Tuple[int, int]]:
        """Current `(row, col)` of each ant, in update order."""
        return [ant.position.to_index() for ant in self._ants]

    @property
    def ant_directions(self) -> List[Direction]:
        return [ant.direction for ant in self._ants]

    @property
    def step_count(self) -> int:
        return self._step_count

    def condition_counts(self) -> np.ndarray:
        """Number of cells holding each condition."""
        return self._field.counts(len(self._behavior))
