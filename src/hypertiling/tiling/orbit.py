"""
Orbit Enumerator — BFS по орбите фундаментального многоугольника

Алгоритм:
1. Очередь (FIFO) инициализируется identity на глубине 0
2. Для каждого извлечённого (M, d): эмитится плитка M(fundamental)
3. Если d < depth: для каждого генератора g вычисляется M ∘ g; если его
   canonical_key ещё не встречался — ключ сразу помечается и элемент
   ставится в очередь на глубине d + 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидная (p, q) отвергается до построения (InvalidTilingParameters)
2. Глубина плиток не убывает по порядку выдачи
3. Нет двух плиток с одинаковым canonical_key
4. DegenerateTransform прерывает построение целиком (без частичного результата)

Дедупликация по квантованному ключу приближённая: близкие различные элементы
сливаются, одинаковые элементы, разошедшиеся из-за дрейфа, различаются.
Для малой глубины (<= 4..5) это приемлемо. Дрейф детерминанта измеряется
и логируется (WARNING), но не корректируется.
"""

import logging
from collections import deque
from typing import Final, Sequence

from hypertiling.core.domain.config import GeneratorScheme, TilingConfig
from hypertiling.core.domain.tile import Tile, TileSet
from hypertiling.core.math.complex_value import Complex
from hypertiling.core.math.mobius import DEFAULT_KEY_PRECISION, Mobius
from hypertiling.core.math.numerical_safeguards import validate_non_negative
from hypertiling.tiling.fundamental_region import (
    generate_fundamental_region,
    validate_schlafli,
)
from hypertiling.tiling.generators import build_generators

logger = logging.getLogger(__name__)

# Порог |det − 1|, выше которого построение сопровождается предупреждением
DRIFT_WARN_THRESHOLD: Final[float] = 1e-6


def enumerate_orbit(
    fundamental: Sequence[Complex],
    generators: Sequence[Mobius],
    depth: int,
    key_precision: int = DEFAULT_KEY_PRECISION,
) -> list[Tile]:
    """
    Ограниченный BFS по орбите группы, порождённой generators.

    Args:
        fundamental: Вершины фундаментального многоугольника
        generators: Порождающее множество (каждый переводит плитку в соседнюю)
        depth: Максимальная глубина BFS (>= 0)
        key_precision: Точность ключа дедупликации (десятичных знаков)

    Returns:
        Плитки в порядке BFS; tiles[0] — фундаментальный многоугольник (identity)

    Raises:
        ValueError: если depth < 0
        DegenerateTransform: при вырожденном знаменателе в любой плитке
    """
    validate_non_negative(depth, "depth")

    start = Mobius.identity()
    visited = {start.canonical_key(key_precision)}
    queue: deque[tuple[Mobius, int]] = deque([(start, 0)])

    tiles: list[Tile] = []
    layer_sizes: dict[int, int] = {}
    worst_drift = 0.0

    while queue:
        transform, level = queue.popleft()

        vertices = tuple(transform.apply(v) for v in fundamental)
        tiles.append(Tile(transform=transform, vertices=vertices, depth=level))
        layer_sizes[level] = layer_sizes.get(level, 0) + 1
        worst_drift = max(worst_drift, transform.determinant_drift())

        if level >= depth:
            continue

        for g in generators:
            candidate = transform.compose(g)
            key = candidate.canonical_key(key_precision)
            if key not in visited:
                visited.add(key)
                queue.append((candidate, level + 1))

    logger.debug("Orbit layers: %s (total %d tiles)", layer_sizes, len(tiles))

    if worst_drift > DRIFT_WARN_THRESHOLD:
        logger.warning(
            "Determinant drift %.3e exceeds %.0e at depth %d; "
            "orbit deduplication may be approximate",
            worst_drift,
            DRIFT_WARN_THRESHOLD,
            depth,
        )

    return tiles


def build_tiling(config: TilingConfig) -> TileSet:
    """
    Полное построение разбиения по конфигурации.

    Raises:
        InvalidTilingParameters: если (p, q) не гиперболическая пара
    """
    validate_schlafli(config.p, config.q)

    fundamental = generate_fundamental_region(config.p, config.q)
    generators = build_generators(fundamental, config.q, config.scheme)
    tiles = enumerate_orbit(fundamental, generators, config.depth, config.key_precision)

    logger.debug(
        "Built {%d,%d} tiling: depth=%d, %d tiles",
        config.p,
        config.q,
        config.depth,
        len(tiles),
    )
    return TileSet(config=config, fundamental=tuple(fundamental), tiles=tuple(tiles))


def generate_tiling(
    p: int,
    q: int,
    depth: int,
    key_precision: int = DEFAULT_KEY_PRECISION,
    scheme: GeneratorScheme = GeneratorScheme.EDGE_MIDPOINT,
) -> list[Tile]:
    """Список плиток {p,q} разбиения до глубины depth."""
    config = TilingConfig(p=p, q=q, depth=depth, key_precision=key_precision, scheme=scheme)
    return list(build_tiling(config).tiles)
