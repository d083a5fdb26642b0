"""Scene rendering to PNG using matplotlib.

Draws, bottom to top:
- Triangles as translucent fills with their outline
- Lines, clipped to the scene's bounding box
- Segments as thick strokes
- Points as dots with their labels
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt
import numpy as np

from planegeo.models.line import Line2D
from planegeo.scene import Scene

logger = logging.getLogger(__name__)

_TRIANGLE_COLORS = [
    "#BBDEFB",  # blue
    "#C8E6C9",  # green
    "#FFE0B2",  # orange
    "#E1BEE7",  # purple
]

# Half-width of the view when the scene has no points to frame.
_DEFAULT_EXTENT = 10.0


def _bounds(scene: Scene, margin: float) -> tuple[float, float, float, float]:
    """(xmin, xmax, ymin, ymax) around every point of the scene."""
    xs: list[float] = []
    ys: list[float] = []
    for p in scene.points:
        xs.append(p.x)
        ys.append(p.y)
    for s in scene.segments:
        xs.extend([s.a.x, s.b.x])
        ys.extend([s.a.y, s.b.y])
    for t in scene.triangles:
        xs.extend([t.a.x, t.b.x, t.c.x])
        ys.extend([t.a.y, t.b.y, t.c.y])
    if not xs:
        return (-_DEFAULT_EXTENT, _DEFAULT_EXTENT, -_DEFAULT_EXTENT, _DEFAULT_EXTENT)
    return (min(xs) - margin, max(xs) + margin, min(ys) - margin, max(ys) + margin)


def _line_xy(
    line: Line2D, bounds: tuple[float, float, float, float], samples: int = 2
) -> tuple[np.ndarray, np.ndarray]:
    """Coordinates of ``line`` across the view."""
    xmin, xmax, ymin, ymax = bounds
    if line.is_parallel_to_y():
        x = np.full(samples, -line.c / line.a)
        y = np.linspace(ymin, ymax, samples)
    else:
        x = np.linspace(xmin, xmax, samples)
        y = -(line.a * x + line.c) / line.b
    return x, y


def render_scene(
    scene: Scene,
    output_path: str | Path,
    title: str | None = None,
    dpi: int = 150,
    margin: float = 1.5,
    show_labels: bool = True,
) -> Path:
    """Render a scene to PNG.

    Args:
        scene: The scene to render.
        output_path: Output image path.
        title: Plot title (defaults to scene name).
        dpi: Image resolution.
        margin: Padding around the outermost points, in scene units.
        show_labels: Label points and lines.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    bounds = _bounds(scene, margin)
    xmin, xmax, ymin, ymax = bounds

    fig, ax = plt.subplots(1, 1, figsize=(10, 10))
    ax.set_aspect("equal")
    ax.set_facecolor("#FAFAFA")
    fig.patch.set_facecolor("white")

    for i, triangle in enumerate(scene.triangles):
        color = _TRIANGLE_COLORS[i % len(_TRIANGLE_COLORS)]
        tx = [triangle.a.x, triangle.b.x, triangle.c.x]
        ty = [triangle.a.y, triangle.b.y, triangle.c.y]
        ax.fill(tx, ty, color=color, alpha=0.4, zorder=1)
        ax.plot(tx + [tx[0]], ty + [ty[0]], color="#455A64", linewidth=1.0, zorder=2)

    general = dict(scene.lines)
    general.update({name: line.to_general_form() for name, line in scene.slope_lines.items()})
    for name, line in general.items():
        x, y = _line_xy(line, bounds)
        ax.plot(x, y, color="#1976D2", linewidth=1.2, linestyle="--", zorder=3)
        if show_labels:
            ax.text(x[-1], y[-1], name, fontsize=9, color="#1976D2", ha="right", va="bottom", zorder=6)

    for segment in scene.segments:
        ax.plot(
            [segment.a.x, segment.b.x],
            [segment.a.y, segment.b.y],
            color="#212121",
            linewidth=2.5,
            zorder=4,
        )

    for point in scene.points:
        ax.scatter([point.x], [point.y], s=25, color="#D32F2F", zorder=5)
        if show_labels:
            ax.annotate(
                point.label,
                (point.x, point.y),
                textcoords="offset points",
                xytext=(4, 4),
                fontsize=10,
                fontweight="bold",
                zorder=6,
            )

    ax.axhline(0, color="#9E9E9E", linewidth=0.8, zorder=0)
    ax.axvline(0, color="#9E9E9E", linewidth=0.8, zorder=0)
    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.grid(True, alpha=0.2, linestyle="--")
    ax.set_xlabel("X", fontsize=10)
    ax.set_ylabel("Y", fontsize=10)
    ax.set_title(title or scene.name, fontsize=16, fontweight="bold", pad=20)

    plt.tight_layout()
    fig.savefig(str(output_path), dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.debug("Rendered scene %r to %s", scene.name, output_path)
    return output_path
