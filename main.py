import argparse
import random
import sys
import threading

# Configuration
from config import load_simulation_config, SimulationConfig

# Simulator components
from simulator.core.building import Building
from simulator.implementations.local.up_and_down import UpAndDownEngine
from simulator.implementations.remote.engine import HTTPElevatorEngine
from simulator.infrastructure.tick_loop import BuildingSimulation, create_environment

# Analyzer
from analyzer.simulation_statistics import SimulationStatistics

# Status API
from visualizer.http_server import create_app, run_server


def create_engine(sim_config: SimulationConfig):
    """Build the engine described by the configuration"""
    engine_config = sim_config.engine
    if engine_config.type == "http":
        return HTTPElevatorEngine(
            engine_config.url,
            connect_timeout=engine_config.connect_timeout,
            read_timeout=engine_config.read_timeout,
            max_workers=engine_config.max_workers
        )
    return UpAndDownEngine(
        lower_floor=sim_config.building.lower_floor,
        higher_floor=sim_config.building.higher_floor
    )


def run_simulation(sim_config_path="scenarios/simulation/default.yaml", serve=False, port=5000,
                   event_log=None, plot=False):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file
        serve: Also start the status API in a background thread
        port: Port of the status API
        event_log: JSON Lines file to write the event log to
        plot: Save a trajectory diagram at the end
    """
    print("--- Loading Configuration ---")
    sim_config = load_simulation_config(sim_config_path)
    print(f"Simulation Config: {sim_config_path}")

    # Set random seed if specified
    if sim_config.random_seed is not None:
        rng = random.Random(sim_config.random_seed)
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        rng = random.Random()
        print("Random seed not set - results will vary")

    print("\n--- Simulation Setup ---")
    engine = create_engine(sim_config)
    print(f"Engine: {engine!r}")

    building = Building(
        engine,
        lower_floor=sim_config.building.lower_floor,
        higher_floor=sim_config.building.higher_floor,
        max_riders=sim_config.building.max_riders,
        rng=rng
    )
    statistics = SimulationStatistics()
    statistics.set_simulation_metadata(sim_config.to_dict())

    env = create_environment(sim_config.tick_seconds)
    simulation = BuildingSimulation(
        building,
        env=env,
        rider_probability=sim_config.traffic.rider_probability,
        statistics=statistics,
        rng=rng
    )

    if serve:
        app = create_app(building, lock=simulation.lock)
        http_thread = threading.Thread(target=run_server, args=(app,), kwargs={'port': port}, daemon=True)
        http_thread.start()

    print("\n--- Simulation Start ---")
    try:
        simulation.run(sim_config.traffic.ticks)
    except KeyboardInterrupt:
        print("\n\nSimulation interrupted by user.")
    finally:
        if isinstance(engine, HTTPElevatorEngine):
            engine.close()

    print("\n--- Simulation End ---")
    statistics.print_summary()
    if event_log:
        statistics.save_event_log(event_log)
    if plot:
        statistics.plot_trajectory_diagram()
    return statistics


def main(argv=None):
    parser = argparse.ArgumentParser(description="Single car building driven by an elevator engine")
    parser.add_argument("config", nargs="?", default="scenarios/simulation/default.yaml",
                        help="simulation configuration YAML file")
    parser.add_argument("--serve", action="store_true", help="start the status API while running")
    parser.add_argument("--port", type=int, default=5000, help="status API port")
    parser.add_argument("--event-log", help="write the event log to this JSON Lines file")
    parser.add_argument("--plot", action="store_true", help="save a trajectory diagram")
    args = parser.parse_args(argv)

    run_simulation(args.config, serve=args.serve, port=args.port,
                   event_log=args.event_log, plot=args.plot)
    return 0


if __name__ == '__main__':
    sys.exit(main())
