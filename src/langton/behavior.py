"""Rule tables ("behaviors") and the built-in preset catalog.

A behavior maps each cell condition to a turn and a display color. The
condition a cell holds is always an index into that table; index 0 is the
state every cell starts in.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Tuple

from .errors import InvariantViolation, UnknownBehavior

logger = logging.getLogger(__name__)


class TurnRule(Enum):
    RIGHT = "R"
    LEFT = "L"


@dataclass(frozen=True)
class Color:
    """RGB triple, presentation only."""
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b


@dataclass(frozen=True)
class ConditionRule:
    """What an ant does on a cell holding one condition."""
    turn: TurnRule
    color: Color


BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
CYAN = Color(0, 255, 255)
WHITE = Color(255, 255, 255)
GRAY = Color(128, 128, 128)
MAROON = Color(128, 0, 0)
DARK_GREEN = Color(0, 128, 0)
NAVY = Color(0, 0, 128)

# Colors handed out in order by `Behavior.from_string`.
PALETTE = (
    BLACK, RED, GREEN, BLUE, YELLOW, MAGENTA,
    CYAN, WHITE, GRAY, MAROON, DARK_GREEN, NAVY,
)


class Behavior:
    """Immutable, non-empty table of `ConditionRule`s indexed by condition."""

    def __init__(self, rules: Iterable[ConditionRule]):
        self._rules = tuple(rules)
        if not self._rules:
            raise ValueError("a behavior needs at least one condition")

    @classmethod
    def from_string(cls, spec: str) -> "Behavior":
        """Build a behavior from a turn string such as ``"RL"`` or ``"LLRR"``.

        Letter *i* is the turn taken on condition *i*. Colors come from
        `PALETTE`, so at most ``len(PALETTE)`` conditions are allowed.
        """
        spec = spec.strip().upper()
        if not spec:
            raise ValueError("rule string must not be empty")
        if len(spec) > len(PALETTE):
            raise ValueError(f"rule string supports at most {len(PALETTE)} conditions")
        if set(spec) - {"R", "L"}:
            raise ValueError("rule string may only contain 'R' and 'L'")
        return cls(ConditionRule(TurnRule(ch), PALETTE[i]) for i, ch in enumerate(spec))

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Behavior):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"Behavior({self.rule_string!r})"

    @property
    def rules(self) -> Tuple[ConditionRule, ...]:
        return self._rules

    @property
    def colors(self) -> Tuple[Color, ...]:
        """Display color of each condition, in condition order."""
        return tuple(rule.color for rule in self._rules)

    @property
    def rule_string(self) -> str:
        return "".join(rule.turn.value for rule in self._rules)

    def lookup(self, condition: int) -> ConditionRule:
        """Return the rule for `condition`.

        A condition outside ``[0, len(self))`` means the field and the table
        disagree, so this raises `InvariantViolation` instead of wrapping.
        """
        if not 0 <= condition < len(self._rules):
            raise InvariantViolation(
                f"condition {condition} outside [0, {len(self._rules)})"
            )
        return self._rules[condition]


def _table(*pairs: Tuple[str, Color]) -> Behavior:
    return Behavior(ConditionRule(TurnRule(turn), color) for turn, color in pairs)


PRESETS: Dict[int, Behavior] = {
    # classic Langton's ant
    0: _table(("R", BLACK), ("L", WHITE)),
    1: _table(
        ("L", BLACK), ("R", RED), ("R", GREEN), ("R", BLUE), ("R", YELLOW),
        ("R", MAGENTA), ("L", CYAN), ("L", WHITE), ("R", GRAY),
    ),
    2: _table(
        ("L", BLACK), ("L", RED), ("R", GREEN), ("R", BLUE), ("R", YELLOW),
        ("L", MAGENTA), ("R", CYAN), ("L", WHITE), ("R", GRAY),
        ("L", MAROON), ("L", DARK_GREEN), ("R", NAVY),
    ),
    3: _table(
        ("R", BLACK), ("R", RED), ("L", GREEN), ("L", BLUE), ("L", YELLOW),
        ("R", MAGENTA), ("L", CYAN), ("L", WHITE), ("L", GRAY),
        ("R", MAROON), ("R", DARK_GREEN), ("R", NAVY),
    ),
}


def preset(behavior_id: int) -> Behavior:
    """Return the catalog behavior for `behavior_id`.

    Raises `UnknownBehavior` for ids not in `PRESETS`.
    """
    try:
        behavior = PRESETS[behavior_id]
    except (KeyError, TypeError):
        raise UnknownBehavior(behavior_id) from None
    logger.debug("behavior preset %s: %s", behavior_id, behavior.rule_string)
    return behavior
