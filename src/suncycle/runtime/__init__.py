"""Runtime components supplying time to live sessions."""

from .clock import SimulationClock, SystemClock

__all__ = [
    "SimulationClock",
    "SystemClock",
]
