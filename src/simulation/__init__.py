"""Simulation primitives for a single SCAN elevator."""

from .building import Building
from .config import SimulationConfig
from .elevator import Elevator
from .errors import ElevatorError, InvalidFloor, InvalidFloorCount, SameFloor
from .request import RequestView, RideRequest
from .simulation import Simulation
from .snapshot import StateSnapshot

__all__ = [
    "Building",
    "Elevator",
    "ElevatorError",
    "InvalidFloor",
    "InvalidFloorCount",
    "RequestView",
    "RideRequest",
    "SameFloor",
    "Simulation",
    "SimulationConfig",
    "StateSnapshot",
]
