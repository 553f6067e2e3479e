"""
Тесты для фундаментального многоугольника {p,q}

Проверяемые инварианты:
1. Ровно p вершин, все строго внутри диска
2. Все вершины равноудалены от центра (евклидово и гиперболически)
3. Вершина 0 под углом 0, радиус tanh(acosh(cot(pi/p)·cot(pi/q))/2)
4. Внутренний угол равен 2pi/q (q плиток сходятся в вершине)
5. Середины рёбер на радиусе tanh(acosh(cos(pi/q)/sin(pi/p))/2)
6. Невалидные (p, q) отвергаются ДО вычислений (InvalidTilingParameters)
"""

import doctest
import math

import pytest

from hypertiling.core.math.complex_value import ZERO, Complex
from hypertiling.core.math.hyperbolic import hyperbolic_distance, hyperbolic_midpoint
from hypertiling.core.math.mobius import Mobius
from hypertiling.tiling import fundamental_region
from hypertiling.tiling.fundamental_region import (
    InvalidTilingParameters,
    edge_midpoint_radius,
    edge_midpoint_radius_euclidean,
    generate_edge_midpoints,
    generate_fundamental_region,
    validate_schlafli,
    vertex_radius,
    vertex_radius_euclidean,
)

VALID_PAIRS = [(7, 3), (3, 7), (5, 4), (4, 5), (8, 3), (4, 6), (6, 4), (5, 5), (12, 12)]
INVALID_PAIRS = [(4, 4), (3, 6), (6, 3), (3, 3), (4, 3), (3, 5), (2, 7), (7, 2), (0, 0), (-5, 3)]


def _angle_at(vertex: Complex, a: Complex, b: Complex) -> float:
    """Угол между геодезическими vertex→a и vertex→b (в вершине)."""
    to_origin = Mobius.translation(-vertex)
    wa, wb = to_origin.apply(a), to_origin.apply(b)
    return abs(math.remainder(wa.arg() - wb.arg(), 2 * math.pi))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidateSchlafli:
    @pytest.mark.parametrize("p,q", VALID_PAIRS)
    def test_valid_pairs_pass(self, p: int, q: int) -> None:
        validate_schlafli(p, q)

    @pytest.mark.parametrize("p,q", INVALID_PAIRS)
    def test_invalid_pairs_rejected(self, p: int, q: int) -> None:
        with pytest.raises(InvalidTilingParameters):
            validate_schlafli(p, q)

    def test_euclidean_boundary_rejected(self) -> None:
        """{4,4}: 1/4 + 1/4 = 1/2 — евклидово разбиение"""
        with pytest.raises(InvalidTilingParameters, match="1/p \\+ 1/q"):
            validate_schlafli(4, 4)

    def test_small_p_message(self) -> None:
        with pytest.raises(InvalidTilingParameters, match="p must be >= 3"):
            validate_schlafli(2, 9)

    @pytest.mark.parametrize("p,q", [(7.0, 3), (7, "3"), (True, 7), (None, 3)])
    def test_non_integer_rejected(self, p, q) -> None:
        with pytest.raises(InvalidTilingParameters, match="integer"):
            validate_schlafli(p, q)

    def test_is_value_error(self) -> None:
        """Конфигурационная ошибка — подкласс ValueError"""
        with pytest.raises(ValueError):
            validate_schlafli(4, 4)

    def test_docstring_examples_run(self) -> None:
        finder = doctest.DocTestFinder()
        runner = doctest.DocTestRunner(verbose=False)
        globs = dict(vars(fundamental_region))
        for example in finder.find(validate_schlafli, "validate_schlafli", globs=globs):
            runner.run(example, out=lambda _: None)
        assert runner.tries == 2
        assert runner.failures == 0

    def test_exception_carries_parameters(self) -> None:
        with pytest.raises(InvalidTilingParameters) as exc_info:
            validate_schlafli(3, 6)
        assert exc_info.value.p == 3
        assert exc_info.value.q == 6
        assert "{3,6}" in str(exc_info.value)


# =============================================================================
# ФУНДАМЕНТАЛЬНЫЙ МНОГОУГОЛЬНИК
# =============================================================================


class TestFundamentalRegion:
    @pytest.mark.parametrize("p,q", VALID_PAIRS)
    def test_vertex_count_and_inside_disk(self, p: int, q: int) -> None:
        vertices = generate_fundamental_region(p, q)
        assert len(vertices) == p
        assert all(v.abs() < 1.0 for v in vertices)

    @pytest.mark.parametrize("p,q", VALID_PAIRS)
    def test_adjacent_vertices_equidistant_from_origin(self, p: int, q: int) -> None:
        vertices = generate_fundamental_region(p, q)
        for i in range(p):
            j = (i + 1) % p
            assert vertices[i].abs() == pytest.approx(vertices[j].abs(), rel=1e-12)
            assert hyperbolic_distance(ZERO, vertices[i]) == pytest.approx(
                vertex_radius(p, q), rel=1e-9
            )

    def test_heptagon_scenario(self) -> None:
        """{7,3}: вершина 0 под углом 0 с модулем tanh(acosh(cot(pi/7)·cot(pi/3))/2)"""
        vertices = generate_fundamental_region(7, 3)
        cosh_r = 1 / (math.tan(math.pi / 7) * math.tan(math.pi / 3))
        expected = math.tanh(math.acosh(cosh_r) / 2)

        assert len(vertices) == 7
        assert vertices[0].arg() == 0.0
        assert vertices[0].abs() == pytest.approx(expected, rel=1e-12)
        assert vertex_radius_euclidean(7, 3) == pytest.approx(expected, rel=1e-12)

    def test_cyclic_order(self) -> None:
        """Вершина k под углом 2pi·k/p"""
        vertices = generate_fundamental_region(5, 4)
        for k, v in enumerate(vertices):
            expected = math.remainder(2 * math.pi * k / 5, 2 * math.pi)
            assert v.arg() == pytest.approx(expected, abs=1e-12)

    def test_invalid_rejected_before_geometry(self) -> None:
        """{4,4} не даёт вершин вовсе"""
        with pytest.raises(InvalidTilingParameters):
            generate_fundamental_region(4, 4)

    def test_radius_grows_with_q(self) -> None:
        assert vertex_radius_euclidean(7, 3) < vertex_radius_euclidean(7, 4)

    @pytest.mark.parametrize("p,q", VALID_PAIRS)
    def test_interior_angle_closes_vertex(self, p: int, q: int) -> None:
        """q углов многоугольника в вершине дают ровно 2pi"""
        vertices = generate_fundamental_region(p, q)
        for k in range(p):
            alpha = _angle_at(vertices[k], vertices[(k + 1) % p], vertices[k - 1])
            assert q * alpha == pytest.approx(2 * math.pi, abs=1e-9)

    def test_heptagon_interior_angle(self) -> None:
        vertices = generate_fundamental_region(7, 3)
        alpha = _angle_at(vertices[0], vertices[1], vertices[6])
        assert math.degrees(alpha) == pytest.approx(120.0, abs=1e-9)


# =============================================================================
# СЕРЕДИНЫ РЁБЕР
# =============================================================================


class TestEdgeMidpoints:
    @pytest.mark.parametrize("p,q", VALID_PAIRS)
    def test_closed_form_matches_hyperbolic_midpoint(self, p: int, q: int) -> None:
        vertices = generate_fundamental_region(p, q)
        for k, m in enumerate(generate_edge_midpoints(p, q)):
            exact = hyperbolic_midpoint(vertices[k], vertices[(k + 1) % p])
            assert m.sub(exact).abs() < 1e-10

    @pytest.mark.parametrize("p,q", VALID_PAIRS)
    def test_midpoint_inside_vertex_circle(self, p: int, q: int) -> None:
        assert edge_midpoint_radius(p, q) < vertex_radius(p, q)
        assert edge_midpoint_radius_euclidean(p, q) < vertex_radius_euclidean(p, q)

    def test_heptagon_midpoint_radius(self) -> None:
        expected = math.tanh(math.acosh(math.cos(math.pi / 3) / math.sin(math.pi / 7)) / 2)
        midpoints = generate_edge_midpoints(7, 3)
        assert midpoints[0].abs() == pytest.approx(expected, rel=1e-12)
        assert midpoints[0].arg() == pytest.approx(math.pi / 7, abs=1e-12)

    def test_invalid_rejected(self) -> None:
        with pytest.raises(InvalidTilingParameters):
            generate_edge_midpoints(3, 6)
