from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from scheduler import Direction

from .request import RequestView


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable picture of the building after a step or on query.

    ``waiting`` only lists floors where someone waits, each in submission
    order. ``picked_up`` and ``dropped_off`` are filled by ``Building.step``
    and stay empty for plain queries.
    """

    current_floor: int
    direction: Direction
    floor_count: int
    riding: Tuple[RequestView, ...] = ()
    waiting: Mapping[int, Tuple[RequestView, ...]] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    picked_up: Tuple[RequestView, ...] = ()
    dropped_off: Tuple[RequestView, ...] = ()

    def waiting_at(self, floor: int) -> Tuple[RequestView, ...]:
        return self.waiting.get(floor, ())

    @property
    def all_waiting(self) -> Tuple[RequestView, ...]:
        """Every waiting request, in submission order."""
        merged = [view for views in self.waiting.values() for view in views]
        return tuple(sorted(merged, key=lambda view: view.request_id))

    def to_dict(self) -> dict:
        return {
            "current_floor": self.current_floor,
            "direction": self.direction.name,
            "floor_count": self.floor_count,
            "riding": [view.to_dict() for view in self.riding],
            "waiting": {
                str(floor): [view.to_dict() for view in views]
                for floor, views in self.waiting.items()
            },
            "picked_up": [view.to_dict() for view in self.picked_up],
            "dropped_off": [view.to_dict() for view in self.dropped_off],
        }
