"""
Möbius — изометрии диска Пуанкаре как дробно-линейные отображения

f(z) = (a·z + b) / (c·z + d), матрица [a, b; c, d] из Complex коэффициентов.

Все преобразования, используемые в пакете, строятся из translation/rotation и
их композиций. rotation() имеет det = 1, translation(p) — det = 1 − |p|²;
normalized() приводит матрицу к det = 1, после чего det остаётся равным 1 с
точностью до накопленной floating-point ошибки. Дрейф НЕ корректируется при
композиции: inverse() возвращает [d, −b; −c, a], что для det ≠ 1 задаёт то же
обратное отображение с другим масштабом матрицы.

Композиция: compose(m1, m2) = m1 · m2 — "сначала m2, затем m1":
    transform(z, compose(m1, m2)) == transform(transform(z, m2), m1)

Матрицы M и −M задают одно и то же отображение; canonical_key() учитывает
это и даёт им одинаковый ключ.
"""

import cmath
import math
from dataclasses import dataclass
from typing import Final

from hypertiling.core.math.complex_value import ONE, ZERO, Complex
from hypertiling.core.math.numerical_safeguards import (
    EPS_DENOMINATOR,
    quantize,
    validate_finite,
)

# Точность ключа дедупликации по умолчанию (десятичных знаков)
DEFAULT_KEY_PRECISION: Final[int] = 3

CanonicalKey = tuple[int, int, int, int, int, int, int, int]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateTransform(ArithmeticError):
    """
    Знаменатель c·z + d численно равен нулю.

    Возможен только при некорректно построенном генераторе, не при валидных
    геометрических входах. Нарушение внутреннего инварианта: фатально для
    текущего построения орбиты.
    """
    pass


# =============================================================================
# MÖBIUS TRANSFORM
# =============================================================================


@dataclass(frozen=True)
class Mobius:
    """Матрица [a, b; c, d] дробно-линейного преобразования."""

    a: Complex
    b: Complex
    c: Complex
    d: Complex

    # -------------------------------------------------------------------------
    # Канонические конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> "Mobius":
        """[1, 0; 0, 1]"""
        return cls(ONE, ZERO, ZERO, ONE)

    @classmethod
    def translation(cls, p: Complex) -> "Mobius":
        """
        Гиперболический сдвиг, переводящий 0 в p.

        f(z) = (z + p) / (1 + conj(p)·z), матрица [1, p; conj(p), 1].
        Валиден для |p| < 1.
        """
        return cls(ONE, p, p.conj(), ONE)

    @classmethod
    def rotation(cls, theta: float) -> "Mobius":
        """
        Поворот вокруг начала координат на угол theta.

        Матрица [e^(iθ/2), 0; 0, e^(-iθ/2)], det = 1.
        """
        validate_finite(theta, "theta")
        half = theta / 2.0
        return cls(
            Complex(math.cos(half), math.sin(half)),
            ZERO,
            ZERO,
            Complex(math.cos(-half), math.sin(-half)),
        )

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def apply(self, z: Complex) -> Complex:
        """
        (a·z + b) / (c·z + d)

        Raises:
            DegenerateTransform: если |c·z + d| < EPS_DENOMINATOR
        """
        num = self.a.mul(z).add(self.b)
        den = self.c.mul(z).add(self.d)
        if den.abs() < EPS_DENOMINATOR:
            raise DegenerateTransform(
                f"Degenerate Möbius denominator |cz + d|={den.abs():.3e} at z={z}"
            )
        return num.div(den)

    def compose(self, other: "Mobius") -> "Mobius":
        """Матричное произведение self · other (сначала other, затем self)."""
        return Mobius(
            self.a.mul(other.a).add(self.b.mul(other.c)),
            self.a.mul(other.b).add(self.b.mul(other.d)),
            self.c.mul(other.a).add(self.d.mul(other.c)),
            self.c.mul(other.b).add(self.d.mul(other.d)),
        )

    def inverse(self) -> "Mobius":
        """[d, −b; −c, a] — обратная при det = 1 (без перенормировки)."""
        return Mobius(self.d, -self.b, -self.c, self.a)

    def conjugate_by(self, t: "Mobius") -> "Mobius":
        """t ∘ self ∘ t⁻¹ — то же преобразование в системе координат t."""
        return t.compose(self.compose(t.inverse()))

    def determinant(self) -> Complex:
        return self.a.mul(self.d).sub(self.b.mul(self.c))

    def determinant_drift(self) -> float:
        """|det − 1| — накопленный дрейф нормированной матрицы."""
        return self.determinant().sub(ONE).abs()

    def normalized(self) -> "Mobius":
        """
        То же отображение с det = 1: коэффициенты делятся на sqrt(det).

        translation(p) имеет det = 1 − |p|²; генераторы и шаги view
        нормируются, чтобы длинные композиции не теряли масштаб.

        Raises:
            DegenerateTransform: если |det| < EPS_DENOMINATOR
        """
        det = self.determinant()
        if det.abs() < EPS_DENOMINATOR:
            raise DegenerateTransform(f"Cannot normalize singular matrix: det={det}")
        s = Complex.from_builtin(cmath.sqrt(det.to_builtin()))
        return Mobius(self.a.div(s), self.b.div(s), self.c.div(s), self.d.div(s))

    def canonical_key(self, precision: int = DEFAULT_KEY_PRECISION) -> CanonicalKey:
        """
        Hashable ключ элемента группы для дедупликации орбиты.

        Матрица приводится к det = 1, затем восемь вещественных компонент
        (a, b, c, d) квантуются до 10^-precision. Знак нормализуется по
        первой ненулевой компоненте, так что M, −M и λ·M дают один ключ.

        Приближение: различные, но близкие элементы сливаются; одинаковые
        элементы, разошедшиеся из-за дрейфа, считаются различными.
        """
        m = self.normalized()
        raw = [
            quantize(component, precision)
            for coeff in (m.a, m.b, m.c, m.d)
            for component in (coeff.re, coeff.im)
        ]
        for value in raw:
            if value != 0:
                if value < 0:
                    raw = [-v for v in raw]
                break
        return tuple(raw)  # type: ignore[return-value]

    def __matmul__(self, other: "Mobius") -> "Mobius":
        if not isinstance(other, Mobius):
            return NotImplemented
        return self.compose(other)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def identity() -> Mobius:
    return Mobius.identity()


def translation(p: Complex) -> Mobius:
    return Mobius.translation(p)


def rotation(theta: float) -> Mobius:
    return Mobius.rotation(theta)


def transform(z: Complex, m: Mobius) -> Complex:
    """Применение m к точке z."""
    return m.apply(z)


def compose(m1: Mobius, m2: Mobius) -> Mobius:
    """m1 ∘ m2: сначала m2, затем m1."""
    return m1.compose(m2)


def inverse(m: Mobius) -> Mobius:
    return m.inverse()
