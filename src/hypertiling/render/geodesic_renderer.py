"""
Geodesic Renderer — отображение диска Пуанкаре на экран

Аффинное отображение диск ↔ экран (ось y перевёрнута):
    screen = center + (re, −im) · radius
    disk   = ((x, y) − center) / radius,  с обратным переворотом y

Геодезическая между u и v рисуется ломаной: отрезок рекурсивно делится в
ТОЧНОЙ гиперболической середине (hyperbolic_midpoint), не в евклидовой.
Деление прекращается, когда достигнут потолок глубины (max_depth, default 5)
или хорда |u − v| в диске меньше tolerance (default 0.01). Вместо рекурсии
используется явный стек (u, v, depth); порядок точек — от u к v.
"""

import math
from typing import Optional, Sequence

from hypertiling.core.domain.config import RenderConfig
from hypertiling.core.math.complex_value import Complex
from hypertiling.core.math.hyperbolic import hyperbolic_midpoint
from hypertiling.core.math.numerical_safeguards import validate_positive
from hypertiling.render.surface import DrawingSurface


class GeodesicRenderer:
    """Рендерер гиперболических многоугольников на DrawingSurface."""

    def __init__(
        self,
        surface: DrawingSurface,
        center: Complex,
        radius: float,
        config: Optional[RenderConfig] = None,
    ):
        """
        Args:
            surface: Поверхность рисования
            center: Центр диска в экранных координатах (re = x, im = y)
            radius: Радиус диска в пикселях
            config: Параметры разбиения геодезических и цвета
        """
        validate_positive(radius, "radius")
        self.surface = surface
        self.center = center
        self.radius = radius
        self.config = config or RenderConfig()

    @classmethod
    def for_viewport(
        cls,
        surface: DrawingSurface,
        width: float,
        height: float,
        zoom: float = 1.0,
        config: Optional[RenderConfig] = None,
    ) -> "GeodesicRenderer":
        """Рендерер с центром в середине окна и радиусом min(w, h)·scale·zoom."""
        config = config or RenderConfig()
        center, radius = _viewport_geometry(width, height, zoom, config)
        return cls(surface, center, radius, config)

    def resize(self, width: float, height: float, zoom: float = 1.0) -> None:
        self.center, self.radius = _viewport_geometry(width, height, zoom, self.config)

    # -------------------------------------------------------------------------
    # Координаты
    # -------------------------------------------------------------------------

    def to_screen(self, z: Complex) -> Complex:
        """Точка диска → экранная точка (re = x, im = y)."""
        return Complex(
            self.center.re + z.re * self.radius,
            self.center.im - z.im * self.radius,
        )

    def from_screen(self, x: float, y: float) -> Complex:
        """Экранная точка → точка диска (обратное к to_screen)."""
        return Complex(
            (x - self.center.re) / self.radius,
            -(y - self.center.im) / self.radius,
        )

    # -------------------------------------------------------------------------
    # Геодезические
    # -------------------------------------------------------------------------

    def geodesic_points(self, u: Complex, v: Complex) -> list[Complex]:
        """
        Экранная ломаная, аппроксимирующая геодезическую от u до v.

        Returns:
            [to_screen(u), ..., to_screen(v)]; не более 2^max_depth отрезков
        """
        max_depth = self.config.geodesic_max_depth
        tolerance = self.config.geodesic_tolerance

        points = [self.to_screen(u)]
        stack = [(u, v, 0)]

        while stack:
            a, b, depth = stack.pop()
            if depth >= max_depth or a.sub(b).abs() < tolerance:
                points.append(self.to_screen(b))
                continue

            mid = hyperbolic_midpoint(a, b)
            # LIFO: вторая половина кладётся первой
            stack.append((mid, b, depth + 1))
            stack.append((a, mid, depth + 1))

        return points

    def draw_geodesic(self, u: Complex, v: Complex) -> None:
        """line_to по геодезической; текущая точка пути должна быть в u."""
        for point in self.geodesic_points(u, v)[1:]:
            self.surface.line_to(point.re, point.im)

    def draw_polygon(self, vertices: Sequence[Complex], color: Optional[str] = None) -> None:
        """
        Замкнутый многоугольник с геодезическими рёбрами: fill + stroke.

        Пустой список вершин — no-op.
        """
        if len(vertices) == 0:
            return

        surface = self.surface
        surface.begin_path()
        start = self.to_screen(vertices[0])
        surface.move_to(start.re, start.im)

        n = len(vertices)
        for i in range(n):
            self.draw_geodesic(vertices[i], vertices[(i + 1) % n])

        surface.close_path()
        surface.fill(color or self.config.tile_fill_color)
        surface.stroke(self.config.tile_stroke_color, self.config.tile_stroke_width)

    def draw_disk_boundary(self) -> None:
        """Граница единичного диска (абсолют)."""
        self.surface.begin_path()
        self.surface.arc(self.center.re, self.center.im, self.radius, 0.0, 2.0 * math.pi)
        self.surface.stroke(self.config.boundary_color, self.config.boundary_width)


def _viewport_geometry(
    width: float, height: float, zoom: float, config: RenderConfig
) -> tuple[Complex, float]:
    validate_positive(width, "width")
    validate_positive(height, "height")
    validate_positive(zoom, "zoom")
    center = Complex(width / 2.0, height / 2.0)
    radius = min(width, height) * config.disk_scale * zoom
    return center, radius
