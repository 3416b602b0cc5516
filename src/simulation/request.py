from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RideRequest:
    """One passenger's intent to travel between two floors."""

    request_id: int
    start_floor: int
    destination_floor: int
    boarded: bool = False

    def board(self) -> None:
        self.boarded = True

    def view(self) -> "RequestView":
        return RequestView(
            request_id=self.request_id,
            start_floor=self.start_floor,
            destination_floor=self.destination_floor,
            boarded=self.boarded,
        )

    def __str__(self) -> str:
        return f"{self.start_floor} to {self.destination_floor}"


@dataclass(frozen=True)
class RequestView:
    """Read-only copy of a request handed out in snapshots."""

    request_id: int
    start_floor: int
    destination_floor: int
    boarded: bool

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "start": self.start_floor,
            "destination": self.destination_floor,
            "boarded": self.boarded,
        }

    def __str__(self) -> str:
        return f"{self.start_floor} to {self.destination_floor}"
