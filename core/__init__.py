# core package
# Expose main classes for convenience

from .direction import Direction, get_direction_vector
from .layout import IOLayout, DEFAULT_LAYOUT
from .events import EventId, SimulationEventDispatcher, EventChannelError, UnknownChannelError
from .colliders import Collider, PointCollider, BoxCollider, LineCollider
from .io_geometry import compute_outlet_position, compute_bound
from .pin import Pin, NamedPin
from .wire import Wire
