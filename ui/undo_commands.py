# ui/undo_commands.py
import logging
from typing import Dict, List, Any, Tuple, TYPE_CHECKING
from PySide6.QtCore import QPointF

if TYPE_CHECKING:
    from ui.io_node import IONode

logger = logging.getLogger(__name__)


class UndoStack:
    """Manages a history of commands for undo/redo functionality."""

    def __init__(self):
        self.stack: List[Any] = []
        self.index: int = -1  # Points to the last executed command

    def push(self, command: Any) -> None:
        """Adds a new command to the stack and executes its redo action."""
        self.stack = self.stack[:self.index + 1]
        self.stack.append(command)
        command.redo()
        self.index += 1

    def can_undo(self) -> bool:
        return self.index >= 0

    def can_redo(self) -> bool:
        return self.index + 1 < len(self.stack)

    def undo(self) -> None:
        if self.can_undo():
            logger.debug("Undo %r", self.stack[self.index])
            self.stack[self.index].undo()
            self.index -= 1

    def redo(self) -> None:
        if self.can_redo():
            self.index += 1
            logger.debug("Redo %r", self.stack[self.index])
            self.stack[self.index].redo()

    def clear(self) -> None:
        self.stack = []
        self.index = -1


class MoveIONodesCommand:
    """
    Handles position changes for a group of IO nodes moved by one drag.
    Both directions go through IONode.move so attached wires follow.
    """

    def __init__(self, moves: Dict['IONode', Tuple[QPointF, QPointF]]):
        self.moves = {node: (QPointF(old_pos), QPointF(new_pos))
                      for node, (old_pos, new_pos) in moves.items()}

    @staticmethod
    def _move_to(io_node: 'IONode', target: QPointF) -> None:
        delta = target - io_node.position
        if not delta.isNull():
            io_node.move(delta)

    def undo(self):
        for node, (old_pos, _) in self.moves.items():
            self._move_to(node, old_pos)

    def redo(self):
        for node, (_, new_pos) in self.moves.items():
            self._move_to(node, new_pos)

    def __repr__(self) -> str:
        return f"MoveIONodesCommand({list(self.moves)!r})"


class RotateIONodesCommand:
    """Handles direction changes for a group of IO nodes."""

    def __init__(self, rotations: Dict['IONode', Tuple[Any, Any]]):
        self.rotations = dict(rotations)

    def undo(self):
        for node, (old_direction, _) in self.rotations.items():
            node.set_direction(old_direction)

    def redo(self):
        for node, (_, new_direction) in self.rotations.items():
            node.set_direction(new_direction)

    def __repr__(self) -> str:
        return f"RotateIONodesCommand({list(self.rotations)!r})"
