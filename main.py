import logging
import os
import sys

from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QApplication

from core.direction import Direction
from core.pin import NamedPin
from core.wire import Wire
from ui.io_node import IONode
from app.app_window import AppWindow


def build_demo(window: AppWindow) -> None:
    """Places one IO node per direction and wires two of them together."""
    canvas = window.canvas
    nodes = [
        IONode(NamedPin("A"), QPointF(120, 150), Direction.RIGHT),
        IONode(NamedPin("B"), QPointF(400, 150), Direction.LEFT, color=QColor(200, 30, 30)),
        IONode(NamedPin("C"), QPointF(260, 80), Direction.BOTTOM),
        IONode(NamedPin("D"), QPointF(260, 320), Direction.TOP),
    ]
    for node in nodes:
        canvas.add_io_node(node)

    wire = Wire()
    wire.connect_start(nodes[0])
    wire.connect_end(nodes[1])


def main():
    logging.basicConfig(
        level=os.environ.get("LOGIC_EDITOR_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )
    app = QApplication(sys.argv)
    window = AppWindow()
    build_demo(window)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
