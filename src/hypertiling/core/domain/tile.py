"""
Tile / TileSet — результат построения орбиты

Tile: (элемент группы, образ фундаментального многоугольника под ним, глубина BFS).
TileSet: упорядоченный список Tile вместе с конфигурацией, по которой он построен.
Единственный артефакт tiling-подсистемы, потребляемый снаружи.
"""

from dataclasses import dataclass
from typing import Any, Iterator

from hypertiling.core.domain.config import TilingConfig
from hypertiling.core.math.complex_value import Complex
from hypertiling.core.math.mobius import Mobius


@dataclass(frozen=True)
class Tile:
    """Одна плитка разбиения."""

    transform: Mobius
    vertices: tuple[Complex, ...]
    depth: int

    def mapped(self, view: Mobius) -> list[Complex]:
        """Вершины плитки после текущего view-преобразования."""
        return [view.apply(v) for v in self.vertices]

    def to_dict(self) -> dict[str, Any]:
        m = self.transform
        return {
            "depth": self.depth,
            "transform": [[c.re, c.im] for c in (m.a, m.b, m.c, m.d)],
            "vertices": [[v.re, v.im] for v in self.vertices],
        }


@dataclass(frozen=True)
class TileSet:
    """Упорядоченный (BFS) набор плиток одной конфигурации."""

    config: TilingConfig
    fundamental: tuple[Complex, ...]
    tiles: tuple[Tile, ...]

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]

    def tiles_at_depth(self, depth: int) -> list[Tile]:
        return [t for t in self.tiles if t.depth == depth]

    def to_dict(self) -> dict[str, Any]:
        """Экспорт по контракту tile_set (JSON-совместимый dict)."""
        return {
            "p": self.config.p,
            "q": self.config.q,
            "depth": self.config.depth,
            "key_precision": self.config.key_precision,
            "scheme": self.config.scheme.value,
            "tiles": [t.to_dict() for t in self.tiles],
        }
