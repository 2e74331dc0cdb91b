"""Infrastructure components for simulation"""

from .tick_loop import BuildingSimulation, create_environment

__all__ = [
    'BuildingSimulation',
    'create_environment',
]
