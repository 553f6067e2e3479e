"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-сравнения float
2. Квантование float в целые (ключи дедупликации)
3. Clamp
4. Валидацию параметров (NaN/Inf, знак)
"""

import math

import pytest

from hypertiling.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    MAX_KEY_PRECISION,
    clamp,
    is_close,
    is_valid_float,
    is_zero,
    quantize,
    validate_finite,
    validate_non_negative,
    validate_positive,
)


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestComparisons:
    """Тесты is_valid_float / is_close / is_zero"""

    def test_valid_float(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_is_close(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert not is_close(1.0, 1.1)

    def test_is_zero(self) -> None:
        assert is_zero(0.0)
        assert is_zero(EPS_FLOAT_COMPARE_ABS / 2)
        assert not is_zero(1e-6)


# =============================================================================
# ТЕСТЫ КВАНТОВАНИЯ
# =============================================================================


class TestQuantize:
    """Тесты quantize: ключи дедупликации орбиты"""

    def test_basic_rounding(self) -> None:
        assert quantize(0.12345, 3) == 123
        assert quantize(0.1235, 3) == 124
        assert quantize(1.0, 0) == 1

    def test_symmetric_around_zero(self) -> None:
        """Округление half away from zero симметрично"""
        assert quantize(0.0005, 3) == 1
        assert quantize(-0.0005, 3) == -1
        assert quantize(-0.12345, 3) == -quantize(0.12345, 3)

    def test_negative_zero(self) -> None:
        """-0.0 и 0.0 дают один ключ"""
        assert quantize(-0.0, 3) == 0
        assert quantize(0.0, 3) == 0
        assert quantize(-0.0001, 3) == 0

    def test_returns_int(self) -> None:
        assert isinstance(quantize(0.5, 3), int)

    def test_precision_bounds(self) -> None:
        quantize(0.1, 0)
        quantize(0.1, MAX_KEY_PRECISION)
        with pytest.raises(ValueError, match="precision"):
            quantize(0.1, -1)
        with pytest.raises(ValueError, match="precision"):
            quantize(0.1, MAX_KEY_PRECISION + 1)

    def test_nan_inf_rejected(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            quantize(float("nan"), 3)
        with pytest.raises(ValueError, match="NaN/Inf"):
            quantize(math.inf, 3)


# =============================================================================
# ТЕСТЫ CLAMP И ВАЛИДАЦИИ
# =============================================================================


class TestClamp:
    def test_inside_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_and_above(self) -> None:
        assert clamp(-1.0, 0.1, 50.0) == 0.1
        assert clamp(60.0, 0.1, 50.0) == 50.0

    def test_open_bounds(self) -> None:
        assert clamp(-5.0) == -5.0
        assert clamp(-5.0, min_value=0.0) == 0.0
        assert clamp(5.0, max_value=1.0) == 1.0


class TestValidation:
    def test_validate_finite(self) -> None:
        validate_finite(1.0, "x")
        with pytest.raises(ValueError, match="x must be a valid float"):
            validate_finite(float("nan"), "x")

    def test_validate_positive(self) -> None:
        validate_positive(1.0, "radius")
        with pytest.raises(ValueError, match="radius must be positive"):
            validate_positive(0.0, "radius")
        with pytest.raises(ValueError, match="radius must be positive"):
            validate_positive(-3.0, "radius")
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_positive(float("inf"), "radius")

    def test_validate_non_negative(self) -> None:
        validate_non_negative(0, "depth")
        with pytest.raises(ValueError, match="depth must be non-negative"):
            validate_non_negative(-1, "depth")
