"""
Entry point tests
"""

from config import EngineConfig, SimulationConfig, TrafficConfig, save_simulation_config
from main import create_engine, main, run_simulation
from simulator.implementations.local.up_and_down import UpAndDownEngine
from simulator.implementations.remote.engine import HTTPElevatorEngine


def write_config(tmp_path, **kwargs):
    path = tmp_path / "sim.yaml"
    save_simulation_config(SimulationConfig(**kwargs), path)
    return path


def test_create_engine():
    local = create_engine(SimulationConfig())
    remote = create_engine(SimulationConfig(engine=EngineConfig(type="http", url="http://engine:8081/")))

    assert isinstance(local, UpAndDownEngine)
    assert isinstance(remote, HTTPElevatorEngine)
    assert remote.next_command_url == "http://engine:8081/nextCommand"
    remote.close()


def test_run_simulation(tmp_path):
    path = write_config(tmp_path, traffic=TrafficConfig(ticks=40, rider_probability=0.5), random_seed=1)
    log_path = tmp_path / "log.jsonl"

    statistics = run_simulation(str(path), event_log=str(log_path))

    assert statistics.tick_count == 40
    assert statistics.reset_count == 0
    assert log_path.exists()


def test_main(tmp_path, capsys):
    path = write_config(tmp_path, traffic=TrafficConfig(ticks=5))

    assert main([str(path)]) == 0
    assert "SIMULATION SUMMARY" in capsys.readouterr().out
