# core/direction.py
from enum import Enum

from PySide6.QtCore import QPointF


class Direction(Enum):
    """Compass orientation of an IO node's connector line."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.TOP, Direction.BOTTOM)

    def vector(self) -> QPointF:
        """Unit vector in scene coordinates (y grows downward)."""
        x, y = _DIRECTION_VECTORS[self]
        return QPointF(x, y)


_DIRECTION_VECTORS = {
    Direction.TOP: (0.0, -1.0),
    Direction.BOTTOM: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
}


def get_direction_vector(direction: Direction) -> QPointF:
    """Returns a fresh unit vector for the given direction."""
    return Direction(direction).vector()
