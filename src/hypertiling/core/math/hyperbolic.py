"""
Hyperbolic — метрические примитивы модели диска Пуанкаре

- hyperbolic_midpoint: точная гиперболическая середина отрезка (u, v)
- hyperbolic_distance: расстояние в метрике Пуанкаре
- is_in_disk: принадлежность открытому единичному диску

ФОРМУЛЫ:
    T_u(z) = (z − u) / (1 − conj(u)·z)          переводит u в 0
    v' = T_u(v), r = |v'|
    mid' = v' / (1 + sqrt(1 − r²))              середина отрезка [0, v']
    mid = (mid' + u) / (1 + conj(u)·mid')       T_u⁻¹(mid')

    d(u, v) = 2·asinh(|u − v| / sqrt((1 − |u|²)(1 − |v|²)))
"""

import math

from hypertiling.core.math.complex_value import ONE, Complex


def is_in_disk(z: Complex) -> bool:
    """|z| < 1 (строго)."""
    return z.abs_sq() < 1.0


def hyperbolic_midpoint(u: Complex, v: Complex) -> Complex:
    """
    Гиперболическая середина отрезка геодезической между u и v.

    Args:
        u, v: Точки внутри единичного диска

    Returns:
        Точка m на геодезической (u, v) с d(u, m) = d(m, v)

    Raises:
        ValueError: если образ v при переносе u в 0 не лежит внутри диска
    """
    v_prime = v.sub(u).div(ONE.sub(u.conj().mul(v)))
    r_sq = v_prime.abs_sq()

    if r_sq == 0.0:
        return u
    if r_sq >= 1.0:
        raise ValueError(f"Points must lie inside the unit disk: u={u}, v={v}")

    mid_prime = v_prime.mul(1.0 / (1.0 + math.sqrt(1.0 - r_sq)))

    return mid_prime.add(u).div(ONE.add(u.conj().mul(mid_prime)))


def hyperbolic_distance(u: Complex, v: Complex) -> float:
    """
    Расстояние между u и v в метрике диска Пуанкаре (кривизна −1).

    Raises:
        ValueError: если u или v вне открытого диска
    """
    denom_sq = (1.0 - u.abs_sq()) * (1.0 - v.abs_sq())
    if not is_in_disk(u) or not is_in_disk(v) or denom_sq <= 0.0:
        raise ValueError(f"Points must lie inside the unit disk: u={u}, v={v}")

    return 2.0 * math.asinh(u.sub(v).abs() / math.sqrt(denom_sq))
