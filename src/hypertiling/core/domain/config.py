"""
Configuration — неизменяемые модели конфигурации разбиения и рендеринга

Immutable Pydantic модели (frozen=True). Валидность пары Шлефли (p, q)
НЕ проверяется здесь: это делает tiling core (validate_schlafli), чтобы
любая точка входа отвергала невалидную пару одинаково —
InvalidTilingParameters, а не pydantic ValidationError.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from hypertiling.core.math.mobius import DEFAULT_KEY_PRECISION
from hypertiling.core.math.numerical_safeguards import MAX_KEY_PRECISION


# =============================================================================
# ENUMS
# =============================================================================


class GeneratorScheme(str, Enum):
    """
    Способ построения порождающего множества группы симметрий.

    EDGE_MIDPOINT: поворот на pi вокруг гиперболической середины каждого ребра
    VERTEX: поворот на 2pi/q вокруг каждой вершины
    """

    EDGE_MIDPOINT = "edge_midpoint"
    VERTEX = "vertex"


# =============================================================================
# TILING CONFIG
# =============================================================================


class TilingConfig(BaseModel):
    """Параметры построения {p,q} разбиения."""

    p: int = Field(..., description="Число сторон многоугольника")
    q: int = Field(..., description="Число многоугольников при вершине")
    depth: int = Field(3, ge=0, description="Глубина BFS по орбите")
    key_precision: int = Field(
        DEFAULT_KEY_PRECISION,
        ge=0,
        le=MAX_KEY_PRECISION,
        description="Точность (десятичных знаков) ключа дедупликации",
    )
    scheme: GeneratorScheme = Field(
        GeneratorScheme.EDGE_MIDPOINT, description="Схема генераторов"
    )

    model_config = {"frozen": True}  # Immutable


# =============================================================================
# RENDER CONFIG
# =============================================================================


class RenderConfig(BaseModel):
    """Параметры отображения диска, геодезических и точек данных."""

    # Геометрия экрана
    disk_scale: float = Field(
        0.45, gt=0, le=1, description="Радиус диска как доля min(width, height)"
    )
    zoom_min: float = Field(0.1, gt=0, description="Минимальный zoom")
    zoom_max: float = Field(50.0, gt=0, description="Максимальный zoom")
    zoom_speed: float = Field(0.001, gt=0, description="Чувствительность колеса")

    # Адаптивное разбиение геодезических
    geodesic_max_depth: int = Field(
        5, ge=0, le=12, description="Потолок глубины рекурсии разбиения"
    )
    geodesic_tolerance: float = Field(
        0.01, gt=0, description="Длина хорды в диске, ниже которой разбиение прекращается"
    )

    # Цвета и толщины
    background_color: str = Field("#242424", min_length=1)
    boundary_color: str = Field("#ffffff", min_length=1)
    boundary_width: float = Field(2.0, gt=0)
    tile_fill_color: str = Field("rgba(100, 200, 255, 0.2)", min_length=1)
    tile_stroke_color: str = Field("white", min_length=1)
    tile_stroke_width: float = Field(1.0, gt=0)
    point_color: str = Field("#ffc444ff", min_length=1)
    point_radius: float = Field(3.0, gt=0, description="Радиус маркера (px)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_zoom_bounds(self) -> "RenderConfig":
        if self.zoom_min > self.zoom_max:
            raise ValueError(
                f"zoom_min ({self.zoom_min}) must be <= zoom_max ({self.zoom_max})"
            )
        return self
