from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class SimulationConfig:
    """Settings shared by the console, the HTTP server and scenario runs."""

    num_floors: int = 10
    scheduler_name: str = "scan"
    random_seed: Optional[int] = None
    step_delay_seconds: float = 0.8

    @classmethod
    def from_dict(cls, config: Dict) -> "SimulationConfig":
        building_cfg = config.get("building", {})
        scheduler_cfg = config.get("scheduler", {})
        return cls(
            num_floors=building_cfg.get("num_floors", cls.num_floors),
            scheduler_name=scheduler_cfg.get("name", cls.scheduler_name),
            random_seed=config.get("random_seed"),
            step_delay_seconds=config.get("step_delay_seconds", cls.step_delay_seconds),
        )
