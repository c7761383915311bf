"""Scene configuration.

Defines the settings used to build a scene: field size, which behavior
preset to run, how many ants to place, and how often a driver should
render. Defaults match a typical interactive run.
"""
from dataclasses import dataclass

from .behavior import PRESETS
from .errors import UnknownAgentCount, UnknownBehavior

# Ant counts with a known starting layout.
ANT_COUNTS = (1, 2, 3)


@dataclass
class SceneConfig:
    """Scene settings.

    `width` and `height` size the toroidal field in cells. The two render
    knobs are not used by the simulation itself; drivers read them to decide
    how often and how large to draw.
    """
    width: int = 200
    height: int = 200
    behavior_id: int = 0
    agent_count: int = 1
    # drivers render once every `skip_render_frame` steps
    skip_render_frame: int = 10
    canvas_scale: int = 4

    def validate(self) -> None:
        """Sanity-check the configuration.

        Raises `ValueError` with a readable message for bad sizes, and the
        more specific `UnknownBehavior` / `UnknownAgentCount` when an id is
        not in the catalog.
        """
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer")

        if self.behavior_id not in PRESETS:
            raise UnknownBehavior(self.behavior_id)

        if self.agent_count not in ANT_COUNTS:
            raise UnknownAgentCount(self.agent_count)

        if not isinstance(self.skip_render_frame, int) or self.skip_render_frame <= 0:
            raise ValueError("skip_render_frame must be a positive integer")

        if not isinstance(self.canvas_scale, int) or self.canvas_scale <= 0:
            raise ValueError("canvas_scale must be a positive integer")
