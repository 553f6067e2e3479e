"""
Generators — порождающее множество группы симметрий {p,q} разбиения

Каждый генератор — сопряжённый поворот T ∘ Rot ∘ T⁻¹, где T = translation(P)
переносит 0 в выделенную точку P:
- EDGE_MIDPOINT: P — гиперболическая середина ребра (v_k, v_k+1), Rot = rotation(pi);
                 совпадает с generate_edge_midpoints(p, q)
- VERTEX:        P — вершина v_k,                       Rot = rotation(2pi/q)

Генераторы нормируются (det = 1), чтобы композиции в BFS не теряли масштаб.
"""

import logging
import math
from typing import Sequence

from hypertiling.core.domain.config import GeneratorScheme
from hypertiling.core.math.complex_value import Complex
from hypertiling.core.math.hyperbolic import hyperbolic_midpoint
from hypertiling.core.math.mobius import Mobius

logger = logging.getLogger(__name__)


def rotation_about(center: Complex, theta: float) -> Mobius:
    """Поворот на theta вокруг точки center диска."""
    return Mobius.rotation(theta).conjugate_by(Mobius.translation(center)).normalized()


def edge_midpoints(vertices: Sequence[Complex]) -> list[Complex]:
    """Гиперболические середины рёбер (v_k, v_(k+1) mod p)."""
    n = len(vertices)
    return [hyperbolic_midpoint(vertices[k], vertices[(k + 1) % n]) for k in range(n)]


def build_generators(
    vertices: Sequence[Complex],
    q: int,
    scheme: GeneratorScheme = GeneratorScheme.EDGE_MIDPOINT,
) -> list[Mobius]:
    """
    Порождающее множество для фундаментального многоугольника.

    Args:
        vertices: Вершины фундаментального многоугольника (циклический порядок)
        q: Число многоугольников при вершине (для схемы VERTEX)
        scheme: Схема построения генераторов

    Returns:
        p генераторов, по одному на ребро (EDGE_MIDPOINT) или вершину (VERTEX)

    Raises:
        ValueError: если scheme не является GeneratorScheme или его значением
    """
    try:
        scheme = GeneratorScheme(scheme)
    except ValueError as e:
        raise ValueError(f"Unknown generator scheme: {scheme!r}") from e

    if scheme == GeneratorScheme.EDGE_MIDPOINT:
        generators = [rotation_about(m, math.pi) for m in edge_midpoints(vertices)]
    else:
        generators = [rotation_about(v, 2.0 * math.pi / q) for v in vertices]

    logger.debug("Built %d generators (scheme=%s)", len(generators), scheme.value)
    return generators
