"""Static rendering of a scene with matplotlib.

Only the scene's read accessors are used here; rendering never changes the
simulation.
"""
import matplotlib.pyplot as plt
import numpy as np

from .state import Scene

# Overlay color for ant 0, 1, 2.
ANT_COLORS = ((255, 0, 0), (0, 255, 0), (0, 0, 255))


def to_rgb(scene: Scene) -> np.ndarray:
    """Map each cell's condition to its behavior color.

    Returns a `(height, width, 3)` uint8 image.
    """
    lut = np.array([c.rgb for c in scene.colors], dtype=np.uint8)
    return lut[scene.field]


def save_image(scene: Scene, out_path, scale: int = 4) -> None:
    """Save the field as a PNG with ant markers and the step counter."""
    img = to_rgb(scene)
    # one field cell spans `scale` pixels at 100 dpi
    figsize = (max(scene.width * scale / 100.0, 1.0), max(scene.height * scale / 100.0, 1.0))

    plt.figure(figsize=figsize, dpi=100)
    plt.imshow(img, interpolation="nearest")
    for i, (row, col) in enumerate(scene.ant_positions):
        r, g, b = ANT_COLORS[i % len(ANT_COLORS)]
        plt.scatter([col], [row], s=4 * scale, c=[(r / 255.0, g / 255.0, b / 255.0)], marker="s", linewidths=0)

    plt.title(f"{scene.behavior.rule_string} step={scene.step_count}")
    plt.axis("off")
    plt.tight_layout()
    plt.savefig(out_path, bbox_inches="tight", pad_inches=0.1)
    plt.close()
