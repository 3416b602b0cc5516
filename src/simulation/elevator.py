from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from scheduler import CarPosition, Direction

from .request import RideRequest


@dataclass
class Elevator:
    """The single car: its position, travel direction and riders."""

    current_floor: int = 1
    direction: Direction = Direction.UP
    riders: List[RideRequest] = field(default_factory=list)

    def position(self, floor_count: int) -> CarPosition:
        return CarPosition(
            current_floor=self.current_floor,
            direction=self.direction,
            floor_count=floor_count,
        )

    def alight(self) -> List[RideRequest]:
        """Remove and return every rider whose destination is this floor."""
        alighted: List[RideRequest] = []
        remaining: List[RideRequest] = []
        for rider in self.riders:
            if rider.destination_floor == self.current_floor:
                alighted.append(rider)
            else:
                remaining.append(rider)
        self.riders = remaining
        return alighted

    def board(self, requests: List[RideRequest]) -> None:
        for request in requests:
            request.board()
            self.riders.append(request)

    def move(self, floor_count: int) -> None:
        target = self.current_floor + self.direction.value
        # A one-floor shaft has nowhere to go.
        if 1 <= target <= floor_count:
            self.current_floor = target
