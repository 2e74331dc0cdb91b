"""
Elevator Simulator - Single car building driven by an elevator engine

This package provides the building state machine, the engine interface
and its implementations (remote HTTP engine, local up-and-down engine).
"""

__version__ = "0.1.0"

from .core.command import Command, Door, Direction
from .core.rider import Rider, RiderState
from .core.building import Building, TickReport

from .exceptions import EngineBrokenError, TransportError, ProtocolError
from .interfaces.elevator_engine import IElevatorEngine

from .implementations.remote.engine import HTTPElevatorEngine
from .implementations.local.up_and_down import UpAndDownEngine

from .infrastructure.tick_loop import BuildingSimulation, create_environment

__all__ = [
    'Command',
    'Door',
    'Direction',
    'Rider',
    'RiderState',
    'Building',
    'TickReport',
    'EngineBrokenError',
    'TransportError',
    'ProtocolError',
    'IElevatorEngine',
    'HTTPElevatorEngine',
    'UpAndDownEngine',
    'BuildingSimulation',
    'create_environment',
]
