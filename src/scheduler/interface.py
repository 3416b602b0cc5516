from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Direction(Enum):
    """Travel direction of the car; the value is the floor delta per step."""

    UP = 1
    DOWN = -1

    @property
    def label(self) -> str:
        return self.name

    def reversed(self) -> "Direction":
        return Direction.DOWN if self is Direction.UP else Direction.UP


@dataclass(frozen=True)
class CarPosition:
    """Lightweight view of the car for direction decisions."""

    current_floor: int
    direction: Direction
    floor_count: int

    @property
    def at_top(self) -> bool:
        return self.current_floor == self.floor_count

    @property
    def at_bottom(self) -> bool:
        return self.current_floor == 1


class DirectionPolicy(Protocol):
    """Strategy interface for choosing the direction of the next move."""

    def next_direction(self, position: CarPosition) -> Direction:
        """
        Return the direction the car should travel after servicing the
        current floor.

        Called once per step, after alighting and boarding have completed
        and before the car moves.
        """
        ...
