"""Render — геодезический рендерер, поверхности рисования, кадр и точки данных."""

from .data_points import parse_points_csv, points_from_records
from .geodesic_renderer import GeodesicRenderer
from .scene import project_points, render_frame
from .surface import DrawingSurface, RecordingSurface

__all__ = [
    "DrawingSurface",
    "RecordingSurface",
    "GeodesicRenderer",
    "project_points",
    "render_frame",
    "parse_points_csv",
    "points_from_records",
]
