"""Tiling — фундаментальный многоугольник, генераторы и BFS по орбите группы {p,q}.

Поток управления:
    validate_schlafli → generate_fundamental_region → build_generators → enumerate_orbit
"""

from .fundamental_region import (
    InvalidTilingParameters,
    edge_midpoint_radius,
    edge_midpoint_radius_euclidean,
    generate_edge_midpoints,
    generate_fundamental_region,
    validate_schlafli,
    vertex_radius,
    vertex_radius_euclidean,
)
from .generators import build_generators, edge_midpoints, rotation_about
from .orbit import DRIFT_WARN_THRESHOLD, build_tiling, enumerate_orbit, generate_tiling

__all__ = [
    "InvalidTilingParameters",
    "generate_fundamental_region",
    "generate_edge_midpoints",
    "edge_midpoint_radius",
    "edge_midpoint_radius_euclidean",
    "validate_schlafli",
    "vertex_radius",
    "vertex_radius_euclidean",
    "build_generators",
    "edge_midpoints",
    "rotation_about",
    "DRIFT_WARN_THRESHOLD",
    "build_tiling",
    "enumerate_orbit",
    "generate_tiling",
]
