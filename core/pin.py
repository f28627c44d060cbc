# core/pin.py


class Pin:
    """
    Logical connection point driven by the simulator.
    Only the power state is tracked here; propagation lives elsewhere.
    """

    def __init__(self, power_state: bool = False):
        self.power_state: bool = power_state


class NamedPin:
    """A pin exposed on a circuit boundary under a user-visible name."""

    def __init__(self, name: str, pin: Pin = None):
        self.name: str = name
        self.pin: Pin = pin if pin is not None else Pin()

    @property
    def power_state(self) -> bool:
        return self.pin.power_state

    def __repr__(self) -> str:
        return f"NamedPin({self.name!r}, power_state={self.power_state})"
