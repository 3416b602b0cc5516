import json
from pathlib import Path

from run_scenario import build_simulation, run_simulation, save_results

SCENARIOS = Path(__file__).resolve().parent.parent / "scenarios"


def test_five_floor_scenario_trace():
    config = json.loads((SCENARIOS / "five_floor_sweep.json").read_text())
    simulation = build_simulation(config)
    trace = run_simulation(simulation, config)
    assert [(s["current_floor"], s["direction"]) for s in trace] == [
        (2, "UP"),
        (3, "UP"),
        (4, "UP"),
        (5, "UP"),
        (4, "DOWN"),
        (3, "DOWN"),
        (2, "DOWN"),
        (1, "DOWN"),
        (2, "UP"),
    ]
    assert trace[-1]["dropped_off"][0]["start"] == 3


def test_random_scenario_is_reproducible():
    config = json.loads((SCENARIOS / "random_rush.json").read_text())
    first = run_simulation(build_simulation(config), config)
    second = run_simulation(build_simulation(config), config)
    assert first == second
    assert len(first) == config["steps"]


def test_save_results(tmp_path):
    target = tmp_path / "out" / "trace.json"
    save_results(target, {"steps": 1})
    assert json.loads(target.read_text()) == {"steps": 1}
    save_results(None, {"steps": 1})
