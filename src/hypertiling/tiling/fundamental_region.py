"""
Fundamental Region — правильный p-угольник {p,q} разбиения с центром в 0

ФОРМУЛЫ (прямоугольный треугольник O, середина ребра M, вершина V;
углы pi/p при O, pi/q при V, pi/2 при M):
    cosh(R) = cot(pi/p) · cot(pi/q)       OV: радиус вершин (circumradius)
    cosh(h) = cos(pi/q) / sin(pi/p)       OM: радиус середин рёбер (inradius)
    r_euclid = tanh(R / 2)                 евклидов радиус в диске
    vertex_k = tanh(R/2) · e^(i·2pi·k/p),        k = 0..p-1
    mid_k    = tanh(h/2) · e^(i·2pi·(k + 1/2)/p), середина ребра (v_k, v_k+1)

При таком R внутренний угол многоугольника равен 2pi/q: ровно q плиток
сходятся в каждой вершине.

Гиперболическое условие 1/p + 1/q < 1/2 проверяется ДО вычисления acosh
в целочисленной арифметике: 2·(p + q) < p·q. При нарушении —
InvalidTilingParameters, никаких NaN в геометрии.
"""

import math

from hypertiling.core.math.complex_value import Complex


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidTilingParameters(ValueError):
    """
    Пара Шлефли (p, q) не задаёт гиперболическое разбиение.

    Причины: p < 3, q < 3, нецелые p/q или 1/p + 1/q >= 1/2 (евклидово или
    сферическое разбиение). Конфигурация отвергается целиком, частичная
    орбита не строится.
    """

    def __init__(self, p: object, q: object, reason: str):
        self.p = p
        self.q = q
        self.reason = reason
        super().__init__(f"Invalid tiling parameters {{{p},{q}}}: {reason}")


# =============================================================================
# VALIDATION
# =============================================================================


def validate_schlafli(p: int, q: int) -> None:
    """
    Проверка пары Шлефли до любых тригонометрических вычислений.

    Raises:
        InvalidTilingParameters: если (p, q) не гиперболическая пара

    Examples:
        >>> validate_schlafli(7, 3)
        >>> validate_schlafli(4, 4)
        Traceback (most recent call last):
            ...
        hypertiling.tiling.fundamental_region.InvalidTilingParameters: Invalid tiling parameters {4,4}: 1/p + 1/q must be < 1/2 for a hyperbolic tiling
    """
    for name, value in (("p", p), ("q", q)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTilingParameters(p, q, f"{name} must be an integer, got {value!r}")
        if value < 3:
            raise InvalidTilingParameters(p, q, f"{name} must be >= 3, got {value}")

    # 1/p + 1/q < 1/2  <=>  2(p + q) < pq
    if 2 * (p + q) >= p * q:
        raise InvalidTilingParameters(
            p, q, "1/p + 1/q must be < 1/2 for a hyperbolic tiling"
        )


# =============================================================================
# FUNDAMENTAL POLYGON
# =============================================================================


def vertex_radius(p: int, q: int) -> float:
    """Гиперболическое расстояние R от центра до вершины."""
    validate_schlafli(p, q)
    cot_p = 1.0 / math.tan(math.pi / p)
    cot_q = 1.0 / math.tan(math.pi / q)
    return math.acosh(cot_p * cot_q)


def vertex_radius_euclidean(p: int, q: int) -> float:
    """Евклидов радиус вершин в диске: tanh(R / 2)."""
    return math.tanh(vertex_radius(p, q) / 2.0)


def edge_midpoint_radius(p: int, q: int) -> float:
    """Гиперболическое расстояние h от центра до середины ребра."""
    validate_schlafli(p, q)
    return math.acosh(math.cos(math.pi / q) / math.sin(math.pi / p))


def edge_midpoint_radius_euclidean(p: int, q: int) -> float:
    return math.tanh(edge_midpoint_radius(p, q) / 2.0)


def generate_fundamental_region(p: int, q: int) -> list[Complex]:
    """
    Вершины фундаментального p-угольника в циклическом порядке.

    Вершина k лежит под углом 2pi·k/p на окружности радиуса tanh(R/2);
    вершины k и (k+1) mod p смежны.

    Raises:
        InvalidTilingParameters: если (p, q) не гиперболическая пара
    """
    radius = vertex_radius_euclidean(p, q)
    return [Complex.from_polar(radius, 2.0 * math.pi * k / p) for k in range(p)]


def generate_edge_midpoints(p: int, q: int) -> list[Complex]:
    """Середины рёбер: k-я лежит под углом 2pi·(k + 1/2)/p на радиусе tanh(h/2)."""
    radius = edge_midpoint_radius_euclidean(p, q)
    return [Complex.from_polar(radius, 2.0 * math.pi * (k + 0.5) / p) for k in range(p)]
