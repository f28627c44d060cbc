# core/wire.py
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor

from core.colliders import copy_point
from core.events import EventId

if TYPE_CHECKING:
    from ui.io_node import IONode


class Wire:
    """
    Connection drawn between two IO node outlets.
    Endpoints follow the outlets through their move channels.
    """
    DEFAULT_COLOR = QColor(0, 0, 0)

    def __init__(self, color: Optional[QColor] = None):
        self.color = QColor(color) if color is not None else QColor(self.DEFAULT_COLOR)
        self.start_io: Optional['IONode'] = None
        self.end_io: Optional['IONode'] = None
        self.start_position = QPointF()
        self.end_position = QPointF()

    def connect_start(self, io: 'IONode') -> None:
        """Attaches the start of the wire to an IO node outlet."""
        old_io, self.start_io = self.start_io, None
        self._detach(old_io, self._on_start_outlet_move)
        self.start_io = io
        copy_point(self.start_position, io.outlet_position)
        self._attach(io, self._on_start_outlet_move)

    def connect_end(self, io: 'IONode') -> None:
        """Attaches the end of the wire to an IO node outlet."""
        old_io, self.end_io = self.end_io, None
        self._detach(old_io, self._on_end_outlet_move)
        self.end_io = io
        copy_point(self.end_position, io.outlet_position)
        self._attach(io, self._on_end_outlet_move)

    def disconnect(self) -> None:
        start_io, end_io = self.start_io, self.end_io
        self.start_io = None
        self.end_io = None
        self._detach(start_io, self._on_start_outlet_move)
        self._detach(end_io, self._on_end_outlet_move)

    @property
    def is_connected(self) -> bool:
        return self.start_io is not None and self.end_io is not None

    def _attach(self, io: 'IONode', listener) -> None:
        if self not in io.wires:
            io.add_wire(self)
        io.dispatcher.add_listener(EventId.ON_OUTLET_MOVE, listener)

    def _detach(self, io: Optional['IONode'], listener) -> None:
        if io is None:
            return
        io.dispatcher.remove_listener(EventId.ON_OUTLET_MOVE, listener)
        # A node still holding the other end keeps the wire attached
        if io is self.start_io or io is self.end_io:
            return
        if self in io.wires:
            io.remove_wire(self)

    def _on_start_outlet_move(self, outlet_position: QPointF) -> None:
        copy_point(self.start_position, outlet_position)

    def _on_end_outlet_move(self, outlet_position: QPointF) -> None:
        copy_point(self.end_position, outlet_position)
