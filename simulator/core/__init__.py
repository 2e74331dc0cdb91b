"""Core simulation entities"""

from .command import Command, Door, Direction
from .rider import Rider, RiderState, RiderTransition
from .building import Building, TickReport

__all__ = [
    'Command',
    'Door',
    'Direction',
    'Rider',
    'RiderState',
    'RiderTransition',
    'Building',
    'TickReport',
]
