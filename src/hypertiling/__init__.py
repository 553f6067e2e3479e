"""
hypertiling — регулярные {p,q} разбиения гиперболической плоскости в диске Пуанкаре.

Пакеты:
- hypertiling.core     : Complex, Möbius, численные примитивы, доменные модели, контракты
- hypertiling.tiling   : фундаментальный многоугольник, генераторы, BFS по орбите
- hypertiling.render   : геодезический рендерер, поверхности рисования, кадр
"""

__version__ = "0.1.0"
