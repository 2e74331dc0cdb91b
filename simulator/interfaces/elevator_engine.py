"""
Elevator Engine Interface

Defines what the building can ask of the agent that drives the car.
"""

from abc import ABC, abstractmethod

from ..core.command import Command, Direction
from ..core.rider import Rider


class IElevatorEngine(ABC):
    """
    Interface for elevator engines

    The building polls next_command() once per tick and reports what riders
    do through the notification methods. Any operation may raise
    EngineBrokenError with a human readable cause.

    Design Philosophy:
    - next_command() is the only blocking call; the building cannot move on
      without an answer
    - Notifications (call, go, rider_entered, rider_exited) are
      fire-and-forget and return the engine itself
    - reset() must always be attempted, even on an engine known to be broken

    Usage Examples:
    - HTTPElevatorEngine: polls a remote decision service
    - UpAndDownEngine: local engine sweeping every floor
    """

    @abstractmethod
    def next_command(self) -> Command:
        """
        Get the command to apply during the current tick

        Returns:
            One Command value

        Raises:
            EngineBrokenError: If the engine cannot produce a command
        """
        pass

    @abstractmethod
    def call(self, at_floor: int, direction: Direction) -> 'IElevatorEngine':
        """
        A rider pressed a hall button

        Args:
            at_floor: Floor where the button was pressed
            direction: Direction the rider wants to go
        """
        pass

    @abstractmethod
    def go(self, floor_to_go: int) -> 'IElevatorEngine':
        """
        A rider inside the car pressed a destination button

        Args:
            floor_to_go: Requested floor
        """
        pass

    @abstractmethod
    def rider_entered(self, rider: Rider) -> 'IElevatorEngine':
        """A rider boarded the car"""
        pass

    @abstractmethod
    def rider_exited(self, rider: Rider) -> 'IElevatorEngine':
        """A rider left the car at its destination"""
        pass

    @abstractmethod
    def reset(self, cause: str) -> 'IElevatorEngine':
        """
        Discard the engine's internal state

        Args:
            cause: Why the building asked for a reset
        """
        pass
