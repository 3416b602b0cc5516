from __future__ import annotations

from typing import Dict, Type

from .interface import CarPosition, Direction, DirectionPolicy
from .scan import ScanScheduler

__all__ = [
    "CarPosition",
    "Direction",
    "DirectionPolicy",
    "ScanScheduler",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[DirectionPolicy]] = {
    "scan": ScanScheduler,
}


def get_scheduler(name: str, **kwargs) -> DirectionPolicy:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(**kwargs)
