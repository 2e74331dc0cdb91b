"""
Configuration loader utility

Reads and writes simulation scenarios (YAML) under scenarios/simulation/.
"""

import yaml
from pathlib import Path
from typing import Union

from .simulation import SimulationConfig


class ConfigLoader:
    """Loads and saves SimulationConfig scenarios"""

    @staticmethod
    def load_simulation(file_path: Union[str, Path]) -> SimulationConfig:
        """
        Load a scenario

        An empty file yields the default configuration.

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file is not valid YAML, a section is not a
                mapping, or a value is out of range
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"{file_path}: invalid YAML: {e}") from e

        try:
            config = SimulationConfig.from_dict(data)
            config.validate()
        except ValueError as e:
            raise ValueError(f"{file_path}: {e}") from e
        return config

    @staticmethod
    def save_simulation(config: SimulationConfig, file_path: Union[str, Path]):
        """Write a scenario, creating parent directories as needed"""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_simulation_config(file_path: Union[str, Path]) -> SimulationConfig:
    return ConfigLoader.load_simulation(file_path)


def save_simulation_config(config: SimulationConfig, file_path: Union[str, Path]):
    ConfigLoader.save_simulation(config, file_path)
