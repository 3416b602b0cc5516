import pytest

from scheduler import Direction
from simulation import Building, InvalidFloorCount, Simulation, SimulationConfig


def test_config_from_dict_reads_scenario_layout():
    config = SimulationConfig.from_dict(
        {
            "building": {"num_floors": 12},
            "scheduler": {"name": "scan"},
            "random_seed": 9,
            "step_delay_seconds": 0,
        }
    )
    assert config == SimulationConfig(num_floors=12, scheduler_name="scan", random_seed=9, step_delay_seconds=0)


def test_config_defaults():
    config = SimulationConfig.from_dict({})
    assert config.num_floors == 10
    assert config.scheduler_name == "scan"
    assert config.random_seed is None
    assert config.step_delay_seconds == 0.8


def test_from_config_builds_building():
    simulation = Simulation.from_config(SimulationConfig(num_floors=6))
    assert simulation.building.num_floors == 6
    assert simulation.status().direction is Direction.UP


def test_from_config_rejects_unknown_scheduler():
    with pytest.raises(ValueError):
        Simulation.from_config(SimulationConfig(scheduler_name="elevator-magic"))


def test_events_are_emitted_per_step():
    simulation = Simulation(Building(num_floors=4))
    events = []
    for name in ("request", "pickup", "dropoff", "step"):
        simulation.on_event(name, lambda payload, name=name: events.append((name, payload)))

    simulation.add_request(1, 2)
    simulation.step()
    simulation.step()

    names = [name for name, _ in events]
    assert names == ["request", "pickup", "step", "dropoff", "step"]
    assert str(events[1][1]) == "1 to 2"
    assert simulation.step_count == 2


def test_add_random_is_reproducible_with_seed():
    first = Simulation(Building(num_floors=7), random_seed=1)
    second = Simulation(Building(num_floors=7), random_seed=1)
    assert first.add_random(10) == 10
    second.add_random(10)
    assert first.status() == second.status()


def test_add_random_emits_request_events():
    simulation = Simulation(Building(num_floors=7), random_seed=2)
    simulation.add_request(3, 4)
    seen = []
    simulation.on_event("request", seen.append)
    simulation.add_random(5)
    assert len(seen) == 5
    assert all(view.request_id >= 1 for view in seen)


def test_add_random_on_single_floor_fails():
    simulation = Simulation(Building(num_floors=1))
    with pytest.raises(InvalidFloorCount):
        simulation.add_random(2)
    assert simulation.add_random(0) == 0


def test_run_returns_each_snapshot():
    simulation = Simulation(Building(num_floors=3))
    snapshots = simulation.run(4)
    assert [s.current_floor for s in snapshots] == [2, 3, 2, 1]
    assert simulation.step_count == 4


def test_snapshot_to_dict():
    simulation = Simulation(Building(num_floors=5))
    simulation.add_request(3, 1)
    data = simulation.status().to_dict()
    assert data["current_floor"] == 1
    assert data["direction"] == "UP"
    assert data["waiting"] == {"3": [{"id": 0, "start": 3, "destination": 1, "boarded": False}]}
    assert data["riding"] == []
