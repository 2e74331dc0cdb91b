"""
Up and Down Engine

Default local engine: sweeps the whole building, stopping at every floor.
"""

from simulator.core.building import HIGHER_FLOOR, LOWER_FLOOR
from simulator.core.command import Command, Direction
from simulator.core.rider import Rider
from simulator.interfaces.elevator_engine import IElevatorEngine


class UpAndDownEngine(IElevatorEngine):
    """
    Engine that ignores riders and serves every floor in turn

    At each floor the door opens then closes, then the car moves one floor
    towards the current end of the building, turning around at the lowest
    and highest floors. Every rider is eventually picked up and dropped off.

    Usage:
        engine = UpAndDownEngine(lower_floor=0, higher_floor=9)
        building = Building(engine, lower_floor=0, higher_floor=9)
    """

    def __init__(self, lower_floor: int = LOWER_FLOOR, higher_floor: int = HIGHER_FLOOR):
        if higher_floor <= lower_floor:
            raise ValueError(f"higher_floor ({higher_floor}) must be above lower_floor ({lower_floor})")
        self.lower_floor = lower_floor
        self.higher_floor = higher_floor
        self.reset("initialization")

    def next_command(self) -> Command:
        if not self._door_cycled:
            if self._door_open:
                self._door_open = False
                self._door_cycled = True
                return Command.CLOSE
            self._door_open = True
            return Command.OPEN

        if self.floor == self.higher_floor:
            self.direction = Direction.DOWN
        elif self.floor == self.lower_floor:
            self.direction = Direction.UP

        self._door_cycled = False
        if self.direction == Direction.UP:
            self.floor += 1
            return Command.UP
        self.floor -= 1
        return Command.DOWN

    def call(self, at_floor: int, direction: Direction) -> 'UpAndDownEngine':
        return self

    def go(self, floor_to_go: int) -> 'UpAndDownEngine':
        return self

    def rider_entered(self, rider: Rider) -> 'UpAndDownEngine':
        return self

    def rider_exited(self, rider: Rider) -> 'UpAndDownEngine':
        return self

    def reset(self, cause: str) -> 'UpAndDownEngine':
        self.floor = self.lower_floor
        self.direction = Direction.UP
        self._door_open = False
        self._door_cycled = False
        return self

    def __repr__(self) -> str:
        return f"UpAndDownEngine(floor={self.floor}, direction={self.direction.value})"
