"""Remote engine polled over HTTP"""

from .engine import HTTPElevatorEngine
from .transport import TransportErrorLatch

__all__ = [
    'HTTPElevatorEngine',
    'TransportErrorLatch',
]
