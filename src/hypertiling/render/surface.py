"""
Drawing Surface — интерфейс поверхности рисования

Рендерер не знает конкретный backend (canvas, Qt, SVG): он вызывает
примитивы DrawingSurface. RecordingSurface записывает вызовы как кортежи —
для тестов и headless-экспорта.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DrawingSurface(Protocol):
    """Примитивы 2D-поверхности в экранных координатах."""

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: str) -> None: ...

    def stroke(self, color: str, line_width: float) -> None: ...

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None: ...


class RecordingSurface:
    """DrawingSurface, сохраняющая все вызовы в self.calls."""

    def __init__(self):
        self.calls: list[tuple[Any, ...]] = []

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def close_path(self) -> None:
        self.calls.append(("close_path",))

    def fill(self, color: str) -> None:
        self.calls.append(("fill", color))

    def stroke(self, color: str, line_width: float) -> None:
        self.calls.append(("stroke", color, line_width))

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        self.calls.append(("arc", cx, cy, radius, start, end))

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        self.calls.append(("fill_rect", x, y, width, height, color))

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == name]

    def clear(self) -> None:
        self.calls.clear()
