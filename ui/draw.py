# ui/draw.py
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen


@dataclass
class CanvasStyle:
    """Stroke and fill settings for a single draw call."""
    line_width: float = 1.0
    stroke_color: Optional[QColor] = None
    fill_color: Optional[QColor] = None

    def pen(self) -> QPen:
        if self.stroke_color is None:
            return QPen(Qt.NoPen)
        pen = QPen(QColor(self.stroke_color), self.line_width)
        pen.setCapStyle(Qt.FlatCap)
        return pen

    def brush(self) -> QBrush:
        if self.fill_color is None:
            return QBrush(Qt.NoBrush)
        return QBrush(QColor(self.fill_color), Qt.SolidPattern)


def draw_line(painter: QPainter, x1: float, y1: float, x2: float, y2: float,
              style: CanvasStyle) -> None:
    painter.save()
    painter.setPen(style.pen())
    painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))
    painter.restore()


def draw_rectangle(painter: QPainter, x: float, y: float, width: float, height: float,
                   style: CanvasStyle) -> None:
    """Fills and/or outlines a rectangle depending on the style."""
    painter.save()
    painter.setPen(style.pen())
    painter.setBrush(style.brush())
    painter.drawRect(QRectF(x, y, width, height))
    painter.restore()
