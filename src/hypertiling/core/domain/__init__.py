"""
Domain models and value objects.

Contains configuration models, tiles and the viewer state.
"""

from hypertiling.core.domain.config import GeneratorScheme, RenderConfig, TilingConfig
from hypertiling.core.domain.tile import Tile, TileSet
from hypertiling.core.domain.viewport import (
    PointerButton,
    ViewportState,
    pointer_down,
    pointer_move,
    pointer_up,
    wheel,
)

__all__ = [
    # Config
    "GeneratorScheme",
    "RenderConfig",
    "TilingConfig",
    # Tiles
    "Tile",
    "TileSet",
    # Viewport
    "PointerButton",
    "ViewportState",
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "wheel",
]
