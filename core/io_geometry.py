# core/io_geometry.py
from PySide6.QtCore import QPointF, QRectF

from core.colliders import box_from_two_points
from core.direction import Direction
from core.layout import IOLayout, DEFAULT_LAYOUT


def compute_outlet_position(position: QPointF, direction: Direction,
                            layout: IOLayout = DEFAULT_LAYOUT) -> QPointF:
    """Centre of the outlet square: the anchor pushed out along the direction."""
    return QPointF(position) + Direction(direction).vector() * layout.outlet_offset


def compute_bound(position: QPointF, direction: Direction,
                  layout: IOLayout = DEFAULT_LAYOUT) -> QRectF:
    """
    Smallest axis-aligned rectangle around the body, connector line and outlet.

    The extent along the direction runs from the back edge of the body to
    the far edge of the outlet; the box is then widened across the direction
    by the larger of the two squares.
    """
    direction = Direction(direction)
    dir_vector = direction.vector()

    start = QPointF(position) + dir_vector * (-layout.io_size / 2)
    end = QPointF(position) + dir_vector * (layout.outlet_offset + layout.outlet_size / 2)

    half_width = max(layout.io_size, layout.outlet_size) / 2
    if direction.is_horizontal:
        start.setY(start.y() - half_width)
        end.setY(end.y() + half_width)
    else:
        start.setX(start.x() - half_width)
        end.setX(end.x() + half_width)

    return box_from_two_points(start, end)
