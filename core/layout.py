# core/layout.py
from dataclasses import dataclass


@dataclass(frozen=True)
class IOLayout:
    """
    Fixed layout constants for an IO node.
    Sizes are in scene units; the body and outlet are squares.
    """
    io_size: float = 20
    outlet_size: float = 10
    outlet_line_length: float = 20
    outlet_line_width: float = 4

    @property
    def outlet_offset(self) -> float:
        """Distance from the anchor position to the outlet centre."""
        return self.outlet_line_length + self.io_size / 2 + self.outlet_size / 2


DEFAULT_LAYOUT = IOLayout()
