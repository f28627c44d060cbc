# ui/__init__.py
"""
UI package for the logic circuit editor.

This package contains the canvas entities (IO nodes), the drawing helpers,
the undo commands and the canvas widget that routes pointer input.
"""

from ui.io_node import IONode, HoverTarget
from ui.draw import CanvasStyle, draw_line, draw_rectangle
from ui.undo_commands import UndoStack, MoveIONodesCommand, RotateIONodesCommand
from ui.io_canvas import IOCanvas

__all__ = [
    "IONode",
    "HoverTarget",
    "CanvasStyle",
    "draw_line",
    "draw_rectangle",
    "UndoStack",
    "MoveIONodesCommand",
    "RotateIONodesCommand",
    "IOCanvas"
]
