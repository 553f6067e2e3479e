"""
Complex — неизменяемое комплексное значение (re, im)

Value-тип для всех координат диска Пуанкаре и коэффициентов Möbius-матриц.
Value semantics: два Complex равны, если равны их компоненты; hashable.

Деление на значение с нулевым модулем не определено: вызывающий код обязан
исключать его по построению (геометрия валидных конфигураций это гарантирует).
Точный ноль приводит к ZeroDivisionError.
"""

import math
from dataclasses import dataclass
from typing import Union

from hypertiling.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    validate_finite,
)

Scalar = Union[int, float]


@dataclass(frozen=True)
class Complex:
    """Комплексное число re + i·im."""

    re: float
    im: float = 0.0

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        """
        Построение из полярных координат.

        Raises:
            ValueError: если r или theta NaN/Inf
        """
        validate_finite(r, "r")
        validate_finite(theta, "theta")
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex":
        return cls(z.real, z.imag)

    def to_builtin(self) -> complex:
        return complex(self.re, self.im)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def sub(self, other: "Complex") -> "Complex":
        return Complex(self.re - other.re, self.im - other.im)

    def mul(self, other: Union["Complex", Scalar]) -> "Complex":
        """Умножение на скаляр или на Complex."""
        if isinstance(other, Complex):
            return Complex(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )
        return Complex(self.re * other, self.im * other)

    def div(self, other: Union["Complex", Scalar]) -> "Complex":
        """
        Деление на скаляр или на Complex.

        Raises:
            ZeroDivisionError: если делитель точно равен нулю
        """
        if isinstance(other, Complex):
            denom = other.abs_sq()
            return Complex(
                (self.re * other.re + self.im * other.im) / denom,
                (self.im * other.re - self.re * other.im) / denom,
            )
        return Complex(self.re / other, self.im / other)

    def conj(self) -> "Complex":
        return Complex(self.re, -self.im)

    def abs(self) -> float:
        """Евклидов модуль |z|."""
        return math.hypot(self.re, self.im)

    def abs_sq(self) -> float:
        """Квадрат модуля |z|^2 (без sqrt)."""
        return self.re * self.re + self.im * self.im

    def arg(self) -> float:
        """Аргумент в (-pi, pi] через atan2."""
        return math.atan2(self.im, self.re)

    def is_close(self, other: "Complex", tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
        """Покомпонентное сравнение с абсолютной толерантностью."""
        return abs(self.re - other.re) <= tol and abs(self.im - other.im) <= tol

    # -------------------------------------------------------------------------
    # Python operator protocol
    # -------------------------------------------------------------------------

    def __add__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Union["Complex", Scalar]) -> "Complex":
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Scalar) -> "Complex":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Union["Complex", Scalar]) -> "Complex":
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __abs__(self) -> float:
        return self.abs()


# Часто используемые константы
ZERO: Complex = Complex(0.0, 0.0)
ONE: Complex = Complex(1.0, 0.0)
