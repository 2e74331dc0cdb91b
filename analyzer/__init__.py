"""
Elevator System Analyzer

Statistics and reporting over a building simulation.

Components:
- SimulationStatistics: Tick trajectory, resets, rider metrics, event log
"""

__version__ = "0.1.0"

from .simulation_statistics import SimulationStatistics

__all__ = ['SimulationStatistics']
