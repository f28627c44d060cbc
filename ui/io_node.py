# ui/io_node.py
"""
IO Node: a directional input/output terminal placed on the canvas.

The node is anchored at `position` and points its connector line in
`direction`. Everything else (outlet position, bound and the three
colliders) is derived from those two values and recomputed in place
whenever either of them changes.
"""

import logging
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor, QPainter

from core.colliders import BoxCollider, Collider, LineCollider, copy_point
from core.direction import Direction
from core.events import EventId, SimulationEventDispatcher
from core.io_geometry import compute_bound, compute_outlet_position
from core.layout import IOLayout, DEFAULT_LAYOUT
from core.pin import NamedPin
from ui.draw import CanvasStyle, draw_line, draw_rectangle

if TYPE_CHECKING:
    from core.wire import Wire

logger = logging.getLogger(__name__)


class HoverTarget(Enum):
    """Part of an IO node under the pointer."""
    NONE = "none"
    MAIN = "main"
    OUTLET = "outlet"
    OUTLET_LINE = "outlet_line"


class IONode:
    """Directional input/output terminal with an outlet where wires attach."""
    DEFAULT_COLOR = QColor(0, 0, 0)
    SELECTION_COLOR = QColor(0, 120, 215)
    HOVER_LIGHTEN = 60

    def __init__(self, named_pin: NamedPin, position: QPointF, direction: Direction,
                 color: Optional[QColor] = None, layout: Optional[IOLayout] = None):
        self.named_pin = named_pin
        self.position = QPointF(position)
        self.direction = Direction(direction)
        self.color = QColor(color) if color is not None else QColor(self.DEFAULT_COLOR)
        self.layout = layout or DEFAULT_LAYOUT

        self.dispatcher = SimulationEventDispatcher()
        self.wires: List['Wire'] = []

        self.is_selected = False
        self.is_hovering = False
        self.is_outlet_hovering = False
        self.is_outlet_line_hovering = False

        self.outlet_position = compute_outlet_position(self.position, self.direction, self.layout)

        self.outlet_line_collider = LineCollider(
            self.get_outlet_line_position(),
            self.outlet_position,
            self.layout.outlet_line_width
        )
        self.outlet_collider = BoxCollider(
            self.get_outlet_top_left_position(),
            self.layout.outlet_size,
            self.layout.outlet_size
        )
        self.collider = BoxCollider(self.get_top_left_position(), self.layout.io_size, self.layout.io_size)
        self.bound = BoxCollider.from_rect(compute_bound(self.position, self.direction, self.layout))

        self.init_events()

    def init_events(self) -> None:
        self.dispatcher.register_channel(EventId.ON_MOVE)
        self.dispatcher.register_channel(EventId.ON_OUTLET_MOVE)

    def __repr__(self) -> str:
        return (f"IONode({self.named_pin.name!r}, ({self.position.x()}, {self.position.y()}), "
                f"{self.direction.name})")

    # --- Wires ---

    def add_wire(self, wire: 'Wire') -> None:
        self.wires.append(wire)

    def remove_wire(self, wire: 'Wire') -> None:
        self.wires.remove(wire)

    # --- Geometry ---

    def get_outlet_line_position(self) -> QPointF:
        half = self.layout.outlet_line_width / 2
        return self.position - QPointF(half, half)

    def get_outlet_top_left_position(self) -> QPointF:
        half = self.layout.outlet_size / 2
        return self.outlet_position - QPointF(half, half)

    def get_top_left_position(self) -> QPointF:
        half = self.layout.io_size / 2
        return self.position - QPointF(half, half)

    def calculate_outlet_position(self) -> None:
        copy_point(self.outlet_position,
                   compute_outlet_position(self.position, self.direction, self.layout))

    def update_colliders(self) -> None:
        """Re-projects the outlet, bound and every collider onto the current position."""
        self.calculate_outlet_position()

        copy_point(self.outlet_collider.position, self.get_outlet_top_left_position())

        copy_point(self.outlet_line_collider.start_position, self.get_outlet_line_position())
        copy_point(self.outlet_line_collider.end_position, self.outlet_position)

        bound = compute_bound(self.position, self.direction, self.layout)
        self.bound.set_geometry(bound.topLeft(), bound.width(), bound.height())

        copy_point(self.collider.position, self.get_top_left_position())

    # --- Hit testing ---

    def is_colliding_outlet(self, collider: Collider) -> bool:
        return self.outlet_collider.is_colliding(collider)

    def is_colliding_outlet_line(self, collider: Collider) -> bool:
        return self.outlet_line_collider.is_colliding(collider)

    def is_colliding_main(self, collider: Collider) -> bool:
        return self.collider.is_colliding(collider)

    def hit_test(self, collider: Collider) -> HoverTarget:
        """Outlet wins over the body, which wins over the connector line."""
        if self.is_colliding_outlet(collider):
            return HoverTarget.OUTLET
        if self.is_colliding_main(collider):
            return HoverTarget.MAIN
        if self.is_colliding_outlet_line(collider):
            return HoverTarget.OUTLET_LINE
        return HoverTarget.NONE

    def check_hover(self, collider: Collider) -> bool:
        self.reset_hover()

        target = self.hit_test(collider)
        if target is HoverTarget.OUTLET:
            self.is_outlet_hovering = True
        elif target is HoverTarget.MAIN:
            self.is_hovering = True
        elif target is HoverTarget.OUTLET_LINE:
            self.is_outlet_line_hovering = True

        return target is not HoverTarget.NONE

    def reset_hover(self) -> None:
        self.is_outlet_hovering = False
        self.is_outlet_line_hovering = False
        self.is_hovering = False

    @property
    def hover_target(self) -> HoverTarget:
        if self.is_outlet_hovering:
            return HoverTarget.OUTLET
        if self.is_hovering:
            return HoverTarget.MAIN
        if self.is_outlet_line_hovering:
            return HoverTarget.OUTLET_LINE
        return HoverTarget.NONE

    # --- Selection ---

    def select(self, collider: Collider) -> None:
        """Selects the node if any part is hit. A miss keeps the current selection."""
        if (self.is_colliding_main(collider) or
                self.is_colliding_outlet(collider) or
                self.is_colliding_outlet_line(collider)):
            if not self.is_selected:
                logger.debug("Selected %r", self)
            self.is_selected = True

    def deselect(self) -> None:
        self.is_selected = False

    # --- Movement ---

    def move(self, delta: QPointF) -> None:
        """Translates the node, then notifies ON_MOVE and ON_OUTLET_MOVE in that order."""
        copy_point(self.position, self.position + delta)
        self.update_colliders()
        logger.debug("Moved %r by (%s, %s)", self, delta.x(), delta.y())

        self.dispatcher.dispatch(EventId.ON_MOVE, QPointF(delta))
        self.dispatcher.dispatch(EventId.ON_OUTLET_MOVE, self.outlet_position)

    def set_direction(self, direction: Direction) -> None:
        """Re-orients the connector line around the same anchor."""
        self.direction = Direction(direction)
        self.update_colliders()
        self.dispatcher.dispatch(EventId.ON_OUTLET_MOVE, self.outlet_position)

    # --- Rendering ---

    def _part_color(self, hovered: bool) -> QColor:
        if not hovered:
            return self.color
        color = QColor(self.color)
        h, s, l, a = color.getHsl()
        color.setHsl(max(h, 0), s, min(l + self.HOVER_LIGHTEN, 255), a)
        return color

    def draw(self, painter: QPainter, curr_time: float, delta_time: float) -> None:
        draw_line(
            painter,
            self.position.x(),
            self.position.y(),
            self.outlet_position.x(),
            self.outlet_position.y(),
            CanvasStyle(
                line_width=self.layout.outlet_line_width,
                stroke_color=self._part_color(self.is_outlet_line_hovering)
            )
        )

        draw_rectangle(
            painter,
            self.outlet_collider.position.x(),
            self.outlet_collider.position.y(),
            self.layout.outlet_size,
            self.layout.outlet_size,
            CanvasStyle(fill_color=self._part_color(self.is_outlet_hovering))
        )

        draw_rectangle(
            painter,
            self.collider.position.x(),
            self.collider.position.y(),
            self.layout.io_size,
            self.layout.io_size,
            CanvasStyle(fill_color=self._part_color(self.is_hovering))
        )

        if self.is_selected:
            draw_rectangle(
                painter,
                self.bound.position.x(),
                self.bound.position.y(),
                self.bound.width,
                self.bound.height,
                CanvasStyle(stroke_color=self.SELECTION_COLOR)
            )
