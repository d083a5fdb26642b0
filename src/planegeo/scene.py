"""A named collection of entities that can be saved to and loaded from JSON.

Each entity is stored as its flat record (points as ``{label, x, y}``, lines
as ``{a, b, c}`` and so on); derived values are recomputed on load.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from planegeo.models.line import Line2D
from planegeo.models.point import Point2D
from planegeo.models.segment import Segment2D
from planegeo.models.slope_line import LineY2D
from planegeo.models.triangle import Triangle2D
from planegeo.models.versioning import FORMAT_VERSION, check_format_version

logger = logging.getLogger(__name__)


class Scene(BaseModel):
    """Points, segments, lines and triangles sharing one coordinate system.

    Lines are kept by name since they carry no label of their own.
    """

    name: str = Field(default="Untitled Scene", description="Scene name")
    points: list[Point2D] = Field(default_factory=list)
    segments: list[Segment2D] = Field(default_factory=list)
    lines: dict[str, Line2D] = Field(default_factory=dict)
    slope_lines: dict[str, LineY2D] = Field(default_factory=dict)
    triangles: list[Triangle2D] = Field(default_factory=list)
    format_version: int = Field(default=FORMAT_VERSION, description="Record format revision")

    @field_validator("format_version")
    @classmethod
    def known_format_version(cls, v: int) -> int:
        return check_format_version(v)

    # ── File I/O ──────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> Scene:
        """Load a scene from a JSON file."""
        path = Path(path)
        scene = cls.model_validate_json(path.read_text())
        logger.debug("Loaded scene %r from %s", scene.name, path)
        return scene

    def save(self, path: str | Path) -> Path:
        """Save the scene to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        logger.debug("Saved scene %r to %s", self.name, path)
        return path

    # ── Lookups ───────────────────────────────────────────────────────

    def get_point(self, label: str) -> Point2D:
        """Find a point by label or raise KeyError."""
        point = next((p for p in self.points if p.label == label), None)
        if point is None:
            available = [p.label for p in self.points]
            raise KeyError(f"Point '{label}' not found. Available: {available}")
        return point

    def get_line(self, name: str) -> Line2D:
        """Find a line by name, in the general form, or raise KeyError.

        Slope-form lines are converted on the way out.
        """
        if name in self.lines:
            return self.lines[name]
        if name in self.slope_lines:
            return self.slope_lines[name].to_general_form()
        available = sorted([*self.lines, *self.slope_lines])
        raise KeyError(f"Line '{name}' not found. Available: {available}")

    # ── Add entities ──────────────────────────────────────────────────

    def add_point(self, label: str, x: float, y: float) -> Point2D:
        """Add a point. Labels must be unique within the scene."""
        if any(p.label == label for p in self.points):
            raise ValueError(f"Point '{label}' already exists in scene '{self.name}'")
        point = Point2D(label=label, x=x, y=y)
        self.points.append(point)
        return point

    def add_line(self, name: str, a: float, b: float, c: float = 0.0) -> Line2D:
        """Add a general-form line under ``name``, replacing any line of that name."""
        line = Line2D(a=a, b=b, c=c)
        self.slope_lines.pop(name, None)
        self.lines[name] = line
        return line

    def add_slope_line(self, name: str, k: float, b: float = 0.0) -> LineY2D:
        """Add a slope-form line under ``name``, replacing any line of that name."""
        line = LineY2D(k=k, b=b)
        self.lines.pop(name, None)
        self.slope_lines[name] = line
        return line

    def add_segment(self, first: str, second: str) -> Segment2D:
        """Add a segment between two existing points, given by label."""
        segment = Segment2D(a=self.get_point(first), b=self.get_point(second))
        self.segments.append(segment)
        return segment

    def add_triangle(self, first: str, second: str, third: str) -> Triangle2D:
        """Add a triangle on three existing points, given by label."""
        triangle = Triangle2D(
            a=self.get_point(first),
            b=self.get_point(second),
            c=self.get_point(third),
        )
        self.triangles.append(triangle)
        return triangle
