# core/colliders.py
"""
Hit-test regions for pointer interaction on the canvas.

Colliders own mutable QPointF fields. Entities update those fields in place
(see copy_point) so that references held elsewhere stay valid.
Points on a box edge count as inside; boxes that only touch do not overlap.
"""

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QPainterPath, QPainterPathStroker


def copy_point(target: QPointF, source: QPointF) -> QPointF:
    """Writes the coordinates of source into target and returns target."""
    target.setX(source.x())
    target.setY(source.y())
    return target


def box_from_two_points(a: QPointF, b: QPointF) -> QRectF:
    """Smallest axis-aligned rectangle with both points as corners."""
    return QRectF(a, b).normalized()


class Collider:
    """Base class for hit-test regions."""

    def is_colliding(self, other: "Collider") -> bool:
        raise NotImplementedError


class PointCollider(Collider):
    """A single point, typically the pointer position."""

    def __init__(self, position: QPointF):
        self.position = QPointF(position)

    def is_colliding(self, other: Collider) -> bool:
        if isinstance(other, PointCollider):
            return self.position == other.position
        return other.is_colliding(self)


class BoxCollider(Collider):
    """Axis-aligned box anchored at its top-left corner."""

    def __init__(self, position: QPointF, width: float, height: float):
        self.position = QPointF(position)
        self.width = width
        self.height = height

    @classmethod
    def from_rect(cls, rect: QRectF) -> "BoxCollider":
        return cls(rect.topLeft(), rect.width(), rect.height())

    def rect(self) -> QRectF:
        return QRectF(self.position.x(), self.position.y(), self.width, self.height)

    def set_geometry(self, position: QPointF, width: float, height: float) -> None:
        """Moves and resizes the box without replacing its position object."""
        copy_point(self.position, position)
        self.width = width
        self.height = height

    def contains_point(self, point: QPointF) -> bool:
        return self.rect().contains(point)

    def is_colliding(self, other: Collider) -> bool:
        if isinstance(other, PointCollider):
            return self.contains_point(other.position)
        if isinstance(other, BoxCollider):
            return self.rect().intersects(other.rect())
        return other.is_colliding(self)


class LineCollider(Collider):
    """Line segment with a stroke width; the stroke outline is the hit area."""

    def __init__(self, start_position: QPointF, end_position: QPointF, width: float):
        self.start_position = QPointF(start_position)
        self.end_position = QPointF(end_position)
        self.width = width

    def shape(self) -> QPainterPath:
        """Stroked outline of the current segment, rebuilt from the live endpoints."""
        if self.start_position == self.end_position:
            path = QPainterPath()
            half = self.width / 2
            path.addEllipse(self.start_position, half, half)
            return path

        path = QPainterPath()
        path.moveTo(self.start_position)
        path.lineTo(self.end_position)

        stroker = QPainterPathStroker()
        stroker.setWidth(self.width)
        stroker.setCapStyle(Qt.RoundCap)
        return stroker.createStroke(path)

    def is_colliding(self, other: Collider) -> bool:
        if isinstance(other, PointCollider):
            return self.shape().contains(other.position)
        if isinstance(other, BoxCollider):
            return self.shape().intersects(other.rect())
        if isinstance(other, LineCollider):
            return self.shape().intersects(other.shape())
        return other.is_colliding(self)
