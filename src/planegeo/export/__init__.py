"""Scene export."""

from planegeo.export.plot import render_scene

__all__ = ["render_scene"]
