"""
Configuration management package

Provides configuration classes for the building simulation.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    EngineConfig,
    TrafficConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'EngineConfig',
    'TrafficConfig',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
