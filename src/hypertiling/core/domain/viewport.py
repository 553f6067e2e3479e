"""
ViewportState — состояние просмотра (pan / rotate / zoom)

Единое неизменяемое значение, которым владеет встраивающее приложение.
Все переходы — чистые функции, возвращающие новый ViewportState:
- pointer_down / pointer_up: начало и конец перетаскивания
- pointer_move: PRIMARY → гиперболический сдвиг, SECONDARY → поворот
- wheel: изменение zoom с clamp в границы RenderConfig

Координаты указателя передаются уже в координатах диска
(GeodesicRenderer.from_screen).
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from hypertiling.core.domain.config import RenderConfig
from hypertiling.core.math.complex_value import Complex
from hypertiling.core.math.hyperbolic import is_in_disk
from hypertiling.core.math.mobius import Mobius
from hypertiling.core.math.numerical_safeguards import clamp, validate_finite


class PointerButton(int, Enum):
    """Кнопка указателя (нумерация DOM MouseEvent.button)."""

    PRIMARY = 0
    SECONDARY = 2


@dataclass(frozen=True)
class ViewportState:
    """Текущее view-преобразование и состояние перетаскивания."""

    view: Mobius = field(default_factory=Mobius.identity)
    zoom: float = 1.0
    dragging: bool = False
    drag_button: Optional[PointerButton] = None
    last_pointer: Optional[Complex] = None


def pointer_down(
    state: ViewportState, pos: Complex, button: PointerButton
) -> ViewportState:
    return replace(state, dragging=True, drag_button=button, last_pointer=pos)


def pointer_up(state: ViewportState) -> ViewportState:
    return replace(state, dragging=False, drag_button=None, last_pointer=None)


def pointer_move(state: ViewportState, pos: Complex) -> ViewportState:
    """
    Перетаскивание: точка мира под last_pointer переезжает в pos.

    PRIMARY:   view' = translation(pos) ∘ translation(−last) ∘ view
    SECONDARY: view' = rotation(arg(pos) − arg(last)) ∘ view

    Если pos или last_pointer вне диска — view не меняется,
    обновляется только last_pointer.
    """
    if not state.dragging or state.last_pointer is None:
        return state

    last = state.last_pointer

    if not is_in_disk(pos) or not is_in_disk(last):
        return replace(state, last_pointer=pos)

    view = state.view
    if state.drag_button == PointerButton.PRIMARY:
        step = Mobius.translation(pos).compose(Mobius.translation(-last)).normalized()
        view = step.compose(view)
    elif state.drag_button == PointerButton.SECONDARY:
        view = Mobius.rotation(pos.arg() - last.arg()).compose(view)

    return replace(state, view=view, last_pointer=pos)


def wheel(
    state: ViewportState, delta_y: float, config: Optional[RenderConfig] = None
) -> ViewportState:
    """
    zoom −= delta_y · zoom_speed · zoom, затем clamp в [zoom_min, zoom_max].

    Raises:
        ValueError: если delta_y NaN/Inf
    """
    validate_finite(delta_y, "delta_y")
    config = config or RenderConfig()

    zoom = state.zoom - delta_y * config.zoom_speed * state.zoom
    zoom = clamp(zoom, config.zoom_min, config.zoom_max)

    return replace(state, zoom=zoom)
