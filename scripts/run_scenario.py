"""CLI for replaying elevator scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from simulation import Simulation, SimulationConfig


def build_simulation(config: Dict) -> Simulation:
    simulation = Simulation.from_config(SimulationConfig.from_dict(config))
    for start, destination in config.get("requests", []):
        simulation.add_request(start, destination)
    random_requests = config.get("random_requests", 0)
    if random_requests:
        simulation.add_random(random_requests)
    return simulation


def run_simulation(simulation: Simulation, config: Dict) -> List[Dict]:
    steps = config.get("steps", 20)
    return [snapshot.to_dict() for snapshot in simulation.run(steps)]


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the step trace as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    config = json.loads(args.config.read_text())
    simulation = build_simulation(config)
    trace = run_simulation(simulation, config)

    final_state = simulation.status().to_dict()
    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "steps": simulation.step_count,
        "scheduler": simulation.building.scheduler_name,
        "final_state": final_state,
        "trace": trace,
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Scheduler: {results['scheduler']}")
    print(f"Steps: {results['steps']}")
    for snapshot in trace:
        moves = [f"+{r['start']}->{r['destination']}" for r in snapshot["picked_up"]]
        moves += [f"-{r['start']}->{r['destination']}" for r in snapshot["dropped_off"]]
        print(f"  floor {snapshot['current_floor']:>3} {snapshot['direction']:<4} {' '.join(moves)}")
    print(f"Final: floor {final_state['current_floor']} {final_state['direction']}, "
          f"{len(final_state['riding'])} inside")
    if args.output:
        print(f"Saved trace to {args.output}")


if __name__ == "__main__":
    main()
