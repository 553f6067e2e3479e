"""
Тесты для TilingConfig и RenderConfig

Проверяет:
1. Defaults
2. Immutability (frozen=True)
3. Границы полей (pydantic Field constraints)
4. model_validator: zoom_min <= zoom_max
"""

import pytest
from pydantic import ValidationError

from hypertiling.core.domain.config import GeneratorScheme, RenderConfig, TilingConfig


class TestTilingConfig:
    def test_defaults(self) -> None:
        config = TilingConfig(p=5, q=4)
        assert config.depth == 3
        assert config.key_precision == 3
        assert config.scheme == GeneratorScheme.EDGE_MIDPOINT

    def test_scheme_from_string(self) -> None:
        assert TilingConfig(p=5, q=4, scheme="vertex").scheme == GeneratorScheme.VERTEX

    def test_frozen(self) -> None:
        config = TilingConfig(p=5, q=4)
        with pytest.raises(ValidationError):
            config.depth = 5

    def test_negative_depth(self) -> None:
        with pytest.raises(ValidationError):
            TilingConfig(p=5, q=4, depth=-1)

    @pytest.mark.parametrize("precision", [-1, 13])
    def test_key_precision_bounds(self, precision: int) -> None:
        with pytest.raises(ValidationError):
            TilingConfig(p=5, q=4, key_precision=precision)

    def test_pair_not_checked_here(self) -> None:
        """Евклидова пара {4,4} проходит модель; отвергается при построении"""
        assert TilingConfig(p=4, q=4).p == 4

    def test_unknown_scheme(self) -> None:
        with pytest.raises(ValidationError):
            TilingConfig(p=5, q=4, scheme="spiral")


class TestRenderConfig:
    def test_defaults(self) -> None:
        config = RenderConfig()
        assert config.disk_scale == 0.45
        assert (config.zoom_min, config.zoom_max) == (0.1, 50.0)
        assert config.geodesic_max_depth == 5
        assert config.geodesic_tolerance == 0.01
        assert config.background_color == "#242424"

    def test_zoom_bounds_inverted(self) -> None:
        with pytest.raises(ValidationError, match="zoom_min"):
            RenderConfig(zoom_min=10.0, zoom_max=1.0)

    def test_equal_zoom_bounds_allowed(self) -> None:
        config = RenderConfig(zoom_min=2.0, zoom_max=2.0)
        assert config.zoom_min == config.zoom_max

    def test_non_positive_tolerance(self) -> None:
        with pytest.raises(ValidationError):
            RenderConfig(geodesic_tolerance=0.0)

    def test_frozen(self) -> None:
        config = RenderConfig()
        with pytest.raises(ValidationError):
            config.point_radius = 5.0
