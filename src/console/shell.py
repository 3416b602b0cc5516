"""Console driver: reads commands, drives the simulation, prints the building."""
from __future__ import annotations

import argparse
import logging
import time
from typing import Callable, Dict, List, Optional, Sequence

from simulation import ElevatorError, InvalidFloor, SameFloor, Simulation, SimulationConfig

from .render import render_building, render_status, render_step_events

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  add <start> <dest>   - add a person waiting
  random <count>       - add random passengers
  step                 - move elevator one step (SCAN)
  auto <steps>         - auto run N steps
  status               - show current status
  quit                 - exit simulation
"""

UNKNOWN_COMMAND = "Unknown command. Please try: add, random, step, auto, status, quit"


class ElevatorShell:
    """Translates text commands into simulation operations.

    ``handle`` returns False once the user asks to quit.
    """

    def __init__(
        self,
        simulation: Simulation,
        output: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
        step_delay_seconds: float = 0.8,
    ) -> None:
        self.simulation = simulation
        self.output = output
        self.sleep = sleep
        self.step_delay_seconds = step_delay_seconds
        self.commands: Dict[str, Callable[[List[str]], bool]] = {
            "add": self._add,
            "random": self._random,
            "step": self._step,
            "auto": self._auto,
            "status": self._status,
            "quit": self._quit,
        }

    def handle(self, line: str) -> bool:
        parts = line.strip().split()
        if not parts:
            return True
        command = self.commands.get(parts[0].lower())
        if command is None:
            self.output(UNKNOWN_COMMAND)
            return True
        try:
            return command(parts[1:])
        except ValueError as exc:
            # int() failures on arguments; floor errors are handled per command
            logger.debug("Bad arguments %r: %s", parts, exc)
            self.output(f"Expected whole numbers, got: {' '.join(parts[1:])}")
            return True

    def run(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        read_line = read_line or input
        while True:
            try:
                line = read_line("> ")
            except EOFError:
                self.output("Exiting simulation.")
                return
            if not self.handle(line):
                return

    def _add(self, args: List[str]) -> bool:
        if len(args) < 2:
            self.output("Usage: add <start> <dest>")
            return True
        start, destination = int(args[0]), int(args[1])
        try:
            self.simulation.add_request(start, destination)
        except SameFloor:
            self.output("Start and destination cannot be the same.")
        except InvalidFloor:
            self.output("Invalid floor number.")
        else:
            self.output(f"Added person {start}→{destination}")
        return True

    def _random(self, args: List[str]) -> bool:
        if len(args) < 1:
            self.output("Usage: random <count>")
            return True
        count = int(args[0])
        try:
            added = self.simulation.add_random(count)
        except ValueError as exc:
            self.output(str(exc))
            return True
        self.output(f"Added {added} random passengers.")
        return True

    def _step(self, args: List[str]) -> bool:
        self._advance()
        return True

    def _auto(self, args: List[str]) -> bool:
        if len(args) < 1:
            self.output("Usage: auto <steps>")
            return True
        for _ in range(int(args[0])):
            self._advance()
        return True

    def _status(self, args: List[str]) -> bool:
        self.output(render_status(self.simulation.status()))
        return True

    def _quit(self, args: List[str]) -> bool:
        self.output("Exiting simulation.")
        return False

    def _advance(self) -> None:
        self.output(f"Elevator moving... Current floor: {self.simulation.building.current_floor}")
        snapshot = self.simulation.step()
        for line in render_step_events(snapshot):
            self.output(line)
        self.output(render_building(snapshot))
        if self.step_delay_seconds > 0:
            self.sleep(self.step_delay_seconds)


def prompt_floor_count(read_line: Optional[Callable[[str], str]] = None) -> int:
    read_line = read_line or input
    while True:
        raw = read_line("Enter number of floors: ").strip()
        try:
            floors = int(raw)
        except ValueError:
            print("Please enter a whole number.")
            continue
        if floors >= 1:
            return floors
        print("The building needs at least one floor.")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Single elevator simulation (SCAN)")
    parser.add_argument("--floors", type=int, help="Number of floors; prompted for when omitted")
    parser.add_argument("--seed", type=int, help="Seed for randomly generated passengers")
    parser.add_argument(
        "--delay",
        type=float,
        default=SimulationConfig.step_delay_seconds,
        help="Pause in seconds after each step",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print("ELEVATOR SIMULATION (SCAN ALGO)")
    floors = args.floors if args.floors is not None else prompt_floor_count()
    config = SimulationConfig(num_floors=floors, random_seed=args.seed, step_delay_seconds=args.delay)
    try:
        simulation = Simulation.from_config(config)
    except ElevatorError as exc:
        parser.error(str(exc))

    print(HELP_TEXT)
    ElevatorShell(simulation, step_delay_seconds=config.step_delay_seconds).run()


if __name__ == "__main__":
    main()
