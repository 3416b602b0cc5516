from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional

from .building import Building
from .config import SimulationConfig
from .request import RequestView
from .snapshot import StateSnapshot

logger = logging.getLogger(__name__)


class Simulation:
    """Step-driven driver around a building, for consoles and UIs.

    Owns the seeded random source used for generated requests and fans out
    events to registered hooks: ``request`` on each accepted submission,
    ``pickup`` and ``dropoff`` per request, and ``step`` with the snapshot.
    """

    def __init__(self, building: Building, random_seed: Optional[int] = None) -> None:
        self.building = building
        self.random = random.Random(random_seed)
        self.step_count: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Simulation":
        building = Building(num_floors=config.num_floors, scheduler_name=config.scheduler_name)
        return cls(building, random_seed=config.random_seed)

    def add_request(self, start: int, destination: int) -> RequestView:
        view = self.building.submit(start, destination)
        self._emit("request", view)
        return view

    def add_random(self, count: int) -> int:
        before = len(self.building.waiting)
        added = self.building.submit_batch(count, self.random)
        for request in self.building.waiting[before:]:
            self._emit("request", request.view())
        logger.info("Added %d random passengers", added)
        return added

    def step(self) -> StateSnapshot:
        snapshot = self.building.step()
        self.step_count += 1
        for view in snapshot.dropped_off:
            self._emit("dropoff", view)
        for view in snapshot.picked_up:
            self._emit("pickup", view)
        self._emit("step", snapshot)
        return snapshot

    def run(self, steps: int) -> List[StateSnapshot]:
        return [self.step() for _ in range(steps)]

    def status(self) -> StateSnapshot:
        return self.building.status()

    def visualize(self) -> StateSnapshot:
        return self.building.visualize()

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
