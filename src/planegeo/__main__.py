"""planegeo CLI.

Usage:
    python -m planegeo <command> <scene.json> [options]

Every command reads a scene file (see ``planegeo.scene.Scene``) and prints
JSON to stdout. Failures print ``{"ok": false, "error": ...}`` and exit 1.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError

from planegeo.errors import GeometryError, RepresentationError
from planegeo.export.plot import render_scene
from planegeo.processors import lines as line_ops
from planegeo.processors import points as point_ops
from planegeo.scene import Scene

app = typer.Typer(
    name="planegeo",
    help="planegeo — analytic geometry calculations over a JSON scene.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(error: str, **extra) -> NoReturn:
    _output({"ok": False, "error": error, **extra})
    raise typer.Exit(1)


def _load_scene(path: Path) -> Scene:
    """Load a scene file, reporting a missing or malformed file as JSON."""
    if not path.exists():
        _fail(f"Scene not found: {path}")
    try:
        return Scene.load(path)
    except (ValidationError, GeometryError) as e:
        _fail(f"Invalid scene {path}: {e}")


def _geometry_error(e: GeometryError) -> NoReturn:
    _fail(str(e), kind=type(e).__name__)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Show version."""
    from planegeo import __version__

    _output({"ok": True, "version": __version__})


@app.command()
def summary(scene_path: Path = typer.Argument(..., help="Scene JSON file")):
    """Every entity of a scene with its derived properties."""
    scene = _load_scene(scene_path)

    lines_info = []
    for name in sorted([*scene.lines, *scene.slope_lines]):
        line = scene.get_line(name)
        info = {"name": name, "equation": str(line)}
        try:
            info["slope_form"] = str(line.to_slope_form())
        except RepresentationError:
            info["slope_form"] = None
        lines_info.append(info)

    _output({
        "ok": True,
        "scene": scene.name,
        "points": [
            {"label": p.label, "x": p.x, "y": p.y, "quarter": str(p.quarter)}
            for p in scene.points
        ],
        "segments": [
            {"name": s.a.label + s.b.label, "length": round(s.length, 6)}
            for s in scene.segments
        ],
        "lines": lines_info,
        "triangles": [
            {
                "name": t.a.label + t.b.label + t.c.label,
                "area": round(t.area, 6),
                "perimeter": round(t.perimeter, 6),
                "angles": [round(t.first_angle, 6), round(t.second_angle, 6), round(t.third_angle, 6)],
                "rectangular": t.is_rectangular(),
                "isosceles": t.is_isosceles(),
                "equilateral": t.is_equilateral(),
            }
            for t in scene.triangles
        ],
    })


@app.command()
def intersect(
    scene_path: Path = typer.Argument(..., help="Scene JSON file"),
    first: str = typer.Argument(..., help="First line name"),
    second: str = typer.Argument(..., help="Second line name"),
    label: str = typer.Option("P", "--label", "-l", help="Label of the intersection point"),
):
    """Intersection point of two lines."""
    scene = _load_scene(scene_path)
    try:
        point = line_ops.find_intersection(label, scene.get_line(first), scene.get_line(second))
    except KeyError as e:
        _fail(e.args[0])
    except GeometryError as e:
        _geometry_error(e)
    _output({"ok": True, "point": {"label": point.label, "x": point.x, "y": point.y}})


@app.command()
def angle(
    scene_path: Path = typer.Argument(..., help="Scene JSON file"),
    first: str = typer.Argument(..., help="First line name"),
    second: str = typer.Argument(..., help="Second line name"),
):
    """Angle between two lines, in degrees."""
    scene = _load_scene(scene_path)
    try:
        first_line, second_line = scene.get_line(first), scene.get_line(second)
    except KeyError as e:
        _fail(e.args[0])
    _output({
        "ok": True,
        "degrees": line_ops.find_angle_between(first_line, second_line),
        "parallel": line_ops.are_parallel(first_line, second_line),
        "perpendicular": line_ops.are_perpendicular(first_line, second_line),
    })


@app.command()
def distance(
    scene_path: Path = typer.Argument(..., help="Scene JSON file"),
    point: str = typer.Argument(..., help="Point label"),
    line: str = typer.Argument(..., help="Line name"),
):
    """Distance from a point to a line."""
    scene = _load_scene(scene_path)
    try:
        p, target = scene.get_point(point), scene.get_line(line)
    except KeyError as e:
        _fail(e.args[0])
    _output({
        "ok": True,
        "distance": point_ops.distance_to_line(p, target),
        "on_line": target.includes_point(p),
    })


@app.command()
def collinear(
    scene_path: Path = typer.Argument(..., help="Scene JSON file"),
    first: str = typer.Argument(..., help="Point label"),
    second: str = typer.Argument(..., help="Point label"),
    third: str = typer.Argument(..., help="Point label"),
):
    """Whether three points lie on one line."""
    scene = _load_scene(scene_path)
    try:
        points = [scene.get_point(label) for label in (first, second, third)]
    except KeyError as e:
        _fail(e.args[0])
    _output({"ok": True, "collinear": point_ops.lie_on_same_line(*points)})


@app.command()
def render(
    scene_path: Path = typer.Argument(..., help="Scene JSON file"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output PNG path"),
    dpi: int = typer.Option(150, "--dpi", help="Image resolution"),
):
    """Render a scene to PNG."""
    scene = _load_scene(scene_path)
    out = Path(output) if output else scene_path.with_suffix(".png")
    path = render_scene(scene, out, dpi=dpi)
    _output({"ok": True, "rendered": str(path)})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
