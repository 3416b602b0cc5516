"""Validation errors raised by the elevator core."""

from __future__ import annotations


class ElevatorError(ValueError):
    """Base class for rejected operations on the building."""


class InvalidFloor(ElevatorError):
    """A floor number outside ``[1, floor_count]``."""

    def __init__(self, floor: object, floor_count: int) -> None:
        super().__init__(f"Invalid floor number {floor!r}; expected 1..{floor_count}")
        self.floor = floor
        self.floor_count = floor_count


class SameFloor(ElevatorError):
    def __init__(self, floor: int) -> None:
        super().__init__(f"Start and destination cannot be the same (floor {floor})")
        self.floor = floor


class InvalidFloorCount(InvalidFloor):
    """The building cannot hold the requested operation with this many floors."""

    def __init__(self, floor_count: object, minimum: int = 1) -> None:
        ElevatorError.__init__(
            self, f"Building needs at least {minimum} floor(s), got {floor_count!r}"
        )
        self.floor = None
        self.floor_count = floor_count
        self.minimum = minimum
