# ui/io_canvas.py
import logging
from typing import Dict, List, Optional

from PySide6.QtCore import Qt, QPointF, QElapsedTimer
from PySide6.QtGui import QPainter, QColor
from PySide6.QtWidgets import QWidget

from core.colliders import PointCollider
from core.direction import Direction
from ui.draw import CanvasStyle, draw_line
from ui.io_node import IONode
from ui.undo_commands import UndoStack, MoveIONodesCommand, RotateIONodesCommand

logger = logging.getLogger(__name__)


class IOCanvas(QWidget):
    """
    Drawing surface for IO nodes.
    Routes pointer input into hover, selection and drag moves.
    """
    BACKGROUND_COLOR = QColor(255, 255, 255)
    WIRE_WIDTH = 2
    CLOCKWISE = {
        Direction.TOP: Direction.RIGHT,
        Direction.RIGHT: Direction.BOTTOM,
        Direction.BOTTOM: Direction.LEFT,
        Direction.LEFT: Direction.TOP,
    }

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setMinimumSize(400, 300)

        self.io_nodes: List[IONode] = []
        self.undo_stack = UndoStack()

        # --- Drag State ---
        self.dragging = False
        self.last_drag_point: Optional[QPointF] = None
        self.drag_start_positions: Dict[IONode, QPointF] = {}

        self._clock = QElapsedTimer()
        self._clock.start()
        self._last_paint_ms = 0

    def add_io_node(self, io_node: IONode) -> None:
        self.io_nodes.append(io_node)
        self.update()

    def remove_io_node(self, io_node: IONode) -> None:
        self.io_nodes.remove(io_node)
        self.update()

    def selected_nodes(self) -> List[IONode]:
        return [node for node in self.io_nodes if node.is_selected]

    # --- Pointer Handling ---

    def handle_pointer_press(self, point: QPointF) -> None:
        """Replaces the selection with whatever lies under the pointer."""
        pointer = PointCollider(point)
        for node in self.io_nodes:
            node.deselect()
            node.select(pointer)

        selected = self.selected_nodes()
        if selected:
            self.dragging = True
            self.last_drag_point = QPointF(point)
            self.drag_start_positions = {node: QPointF(node.position) for node in selected}
        self.update()

    def handle_pointer_move(self, point: QPointF) -> None:
        if self.dragging:
            delta = point - self.last_drag_point
            self.last_drag_point = QPointF(point)
            if not delta.isNull():
                for node in self.drag_start_positions:
                    node.move(delta)
        else:
            pointer = PointCollider(point)
            for node in self.io_nodes:
                node.check_hover(pointer)
        self.update()

    def handle_pointer_release(self, point: QPointF) -> None:
        """Ends a drag and records a single undoable move covering every displaced node."""
        if not self.dragging:
            return

        self.handle_pointer_move(point)
        moves = {node: (old_pos, node.position)
                 for node, old_pos in self.drag_start_positions.items()
                 if node.position != old_pos}
        if moves:
            # Nodes already sit at their new positions, so redo is a no-op here
            self.undo_stack.push(MoveIONodesCommand(moves))
        logger.debug("Drag finished, %d node(s) moved", len(moves))

        self.dragging = False
        self.last_drag_point = None
        self.drag_start_positions = {}

    def rotate_selection(self) -> None:
        """Turns every selected node a quarter turn clockwise as one undo step."""
        rotations = {node: (node.direction, self.CLOCKWISE[node.direction])
                     for node in self.selected_nodes()}
        if rotations:
            self.undo_stack.push(RotateIONodesCommand(rotations))
        self.update()

    def undo(self) -> None:
        self.undo_stack.undo()
        self.update()

    def redo(self) -> None:
        self.undo_stack.redo()
        self.update()

    # --- Qt Events ---

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.handle_pointer_press(event.position())
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        self.handle_pointer_move(event.position())

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.handle_pointer_release(event.position())
            return
        super().mouseReleaseEvent(event)

    def paintEvent(self, event):
        now_ms = self._clock.elapsed()
        delta_ms = now_ms - self._last_paint_ms
        self._last_paint_ms = now_ms

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), self.BACKGROUND_COLOR)
        self.render_wires(painter)
        self.render_nodes(painter, now_ms / 1000.0, delta_ms / 1000.0)
        painter.end()

    def render_nodes(self, painter: QPainter, curr_time: float, delta_time: float) -> None:
        for node in self.io_nodes:
            node.draw(painter, curr_time, delta_time)

    def render_wires(self, painter: QPainter) -> None:
        """Draws each connected wire once, behind the nodes."""
        seen = set()
        for node in self.io_nodes:
            for wire in node.wires:
                if id(wire) in seen or not wire.is_connected:
                    continue
                seen.add(id(wire))
                draw_line(
                    painter,
                    wire.start_position.x(),
                    wire.start_position.y(),
                    wire.end_position.x(),
                    wire.end_position.y(),
                    CanvasStyle(line_width=self.WIRE_WIDTH, stroke_color=wire.color)
                )
