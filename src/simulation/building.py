from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Tuple

from scheduler import Direction, DirectionPolicy, get_scheduler

from .elevator import Elevator
from .errors import InvalidFloor, InvalidFloorCount, SameFloor
from .request import RequestView, RideRequest
from .snapshot import StateSnapshot

logger = logging.getLogger(__name__)


@dataclass
class Building:
    """A building served by one elevator running a SCAN sweep.

    The building owns the waiting pool and the car (with its riders). All
    mutation goes through ``submit``, ``submit_batch`` and ``step``;
    ``status`` and ``visualize`` only read.
    """

    num_floors: int
    scheduler_name: str = "scan"
    scheduler_options: dict = field(default_factory=dict)
    scheduler: DirectionPolicy = field(init=False)
    elevator: Elevator = field(init=False)
    waiting: List[RideRequest] = field(init=False)

    def __post_init__(self) -> None:
        if isinstance(self.num_floors, bool) or not isinstance(self.num_floors, int) or self.num_floors < 1:
            raise InvalidFloorCount(self.num_floors)
        self.scheduler = get_scheduler(self.scheduler_name, **self.scheduler_options)
        self.elevator = Elevator()
        self.waiting = []
        self._next_request_id = 0

    @property
    def current_floor(self) -> int:
        return self.elevator.current_floor

    @property
    def direction(self) -> Direction:
        return self.elevator.direction

    @property
    def riding(self) -> List[RideRequest]:
        return self.elevator.riders

    def submit(self, start: int, destination: int) -> RequestView:
        self._validate_floor(start)
        self._validate_floor(destination)
        if start == destination:
            logger.info("Rejected request %d -> %d: same floor", start, destination)
            raise SameFloor(start)

        request = RideRequest(
            request_id=self._next_request_id,
            start_floor=start,
            destination_floor=destination,
        )
        self._next_request_id += 1
        self.waiting.append(request)
        logger.debug("Request %s waiting on floor %d", request, start)
        return request.view()

    def submit_batch(self, count: int, rng: random.Random) -> int:
        """Submit ``count`` random requests drawn from ``rng``.

        Destinations are redrawn until they differ from the start floor, so
        a building needs two floors before any request can be generated.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return 0
        if self.num_floors < 2:
            raise InvalidFloorCount(self.num_floors, minimum=2)

        for _ in range(count):
            start = rng.randint(1, self.num_floors)
            destination = rng.randint(1, self.num_floors)
            while destination == start:
                destination = rng.randint(1, self.num_floors)
            self.submit(start, destination)
        return count

    def step(self) -> StateSnapshot:
        """Advance one floor: alight, board, maybe reverse, then move."""
        elevator = self.elevator

        dropped_off = elevator.alight()
        for request in dropped_off:
            logger.debug("Dropped off %s at floor %d", request, elevator.current_floor)

        boarding, still_waiting = self._split_waiting(elevator.current_floor)
        self.waiting = still_waiting
        elevator.board(boarding)
        for request in boarding:
            logger.debug("Picked up %s at floor %d", request, elevator.current_floor)

        elevator.direction = self.scheduler.next_direction(elevator.position(self.num_floors))
        elevator.move(self.num_floors)

        return self._snapshot(
            picked_up=tuple(request.view() for request in boarding),
            dropped_off=tuple(request.view() for request in dropped_off),
        )

    def status(self) -> StateSnapshot:
        return self._snapshot()

    def visualize(self) -> StateSnapshot:
        return self._snapshot()

    def _split_waiting(self, floor: int) -> Tuple[List[RideRequest], List[RideRequest]]:
        boarding: List[RideRequest] = []
        remaining: List[RideRequest] = []
        for request in self.waiting:
            if request.start_floor == floor:
                boarding.append(request)
            else:
                remaining.append(request)
        return boarding, remaining

    def _snapshot(
        self,
        picked_up: Tuple[RequestView, ...] = (),
        dropped_off: Tuple[RequestView, ...] = (),
    ) -> StateSnapshot:
        waiting: Dict[int, List[RequestView]] = {}
        for request in self.waiting:
            waiting.setdefault(request.start_floor, []).append(request.view())
        return StateSnapshot(
            current_floor=self.elevator.current_floor,
            direction=self.elevator.direction,
            floor_count=self.num_floors,
            riding=tuple(rider.view() for rider in self.elevator.riders),
            waiting=MappingProxyType(
                {floor: tuple(views) for floor, views in sorted(waiting.items())}
            ),
            picked_up=picked_up,
            dropped_off=dropped_off,
        )

    def _validate_floor(self, floor: int) -> None:
        if isinstance(floor, bool) or not isinstance(floor, int) or not 1 <= floor <= self.num_floors:
            logger.info("Rejected floor %r outside 1..%d", floor, self.num_floors)
            raise InvalidFloor(floor, self.num_floors)
