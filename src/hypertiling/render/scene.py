"""
Scene — полный кадр: фон, граница диска, плитки, точки данных

Каждый кадр перерисовывается целиком; плитки уже посчитаны (build_tiling),
per-frame работа — только отображение вершин через view и рисование.
"""

import math
from typing import Iterable, Optional

from hypertiling.core.domain.tile import Tile
from hypertiling.core.math.complex_value import Complex
from hypertiling.core.math.hyperbolic import is_in_disk
from hypertiling.core.math.mobius import Mobius
from hypertiling.render.geodesic_renderer import GeodesicRenderer


def project_points(points: Iterable[Complex], view: Mobius) -> list[Complex]:
    """Точки данных после view; остаются только попавшие строго внутрь диска."""
    visible = []
    for point in points:
        mapped = view.apply(point)
        if is_in_disk(mapped):
            visible.append(mapped)
    return visible


def render_frame(
    renderer: GeodesicRenderer,
    tiles: Iterable[Tile],
    points: Iterable[Complex] = (),
    view: Optional[Mobius] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> None:
    """
    Отрисовка кадра на renderer.surface.

    Args:
        renderer: Рендерер (поверхность, центр, радиус, RenderConfig)
        tiles: Плитки разбиения
        points: Точки данных в координатах диска
        view: Текущее view-преобразование (default: identity)
        width, height: Размер области для заливки фона (default: 2·center)
    """
    view = view or Mobius.identity()
    config = renderer.config
    surface = renderer.surface

    width = width if width is not None else 2.0 * renderer.center.re
    height = height if height is not None else 2.0 * renderer.center.im
    surface.fill_rect(0.0, 0.0, width, height, config.background_color)

    renderer.draw_disk_boundary()

    for tile in tiles:
        renderer.draw_polygon(tile.mapped(view), config.tile_fill_color)

    # Маркеры фиксированного экранного размера, не зависят от zoom
    for point in project_points(points, view):
        screen = renderer.to_screen(point)
        surface.begin_path()
        surface.arc(screen.re, screen.im, config.point_radius, 0.0, 2.0 * math.pi)
        surface.fill(config.point_color)
