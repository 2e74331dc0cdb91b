"""Interface definitions for simulator components"""

from .elevator_engine import IElevatorEngine

__all__ = [
    'IElevatorEngine',
]
