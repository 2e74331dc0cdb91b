"""
Building - Single car state machine driven by an elevator engine

This module provides the Building class which manages:
- Current floor and door state of the car
- The set of active riders (capacity bounded)
- One tick of the state machine: ask the engine, validate, apply or reset
"""

import random
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from .command import Command, Door
from .rider import Rider, RiderTransition
from ..exceptions import EngineBrokenError
from ..interfaces.elevator_engine import IElevatorEngine

LOWER_FLOOR = 0
HIGHER_FLOOR = 9
MAX_NUMBER_OF_RIDERS = 10


@dataclass
class TickReport:
    """
    Outcome of a single tick.

    Attributes:
        command: Command returned by the engine (None if the engine failed)
        applied: True if the command was legal and applied
        cause: Reset cause when the command was not applied
        delivered: Riders that reached their destination during this tick
        floor: Floor after the tick
        door: Door state after the tick
    """
    command: Optional[Command]
    applied: bool
    floor: int
    door: Door
    cause: Optional[str] = None
    delivered: List[Rider] = field(default_factory=list)

    def to_dict(self) -> dict:
        if isinstance(self.command, Command):
            command = self.command.value
        elif self.command is not None:
            command = str(self.command)
        else:
            command = None
        return {
            'command': command,
            'applied': self.applied,
            'cause': self.cause,
            'delivered': [rider.rider_id for rider in self.delivered],
            'floor': self.floor,
            'door': self.door.value,
        }


class Building:
    """
    Building with a single car, polled once per tick.

    The building only trusts the engine for legal commands: anything the car
    cannot physically do from its current state (or any engine failure) resets
    the building and asks the engine to reset too, so both sides start over
    from the same state.
    """

    def __init__(self, engine: IElevatorEngine, lower_floor: int = LOWER_FLOOR,
                 higher_floor: int = HIGHER_FLOOR, max_riders: int = MAX_NUMBER_OF_RIDERS,
                 rng: Optional[random.Random] = None):
        """
        Initialize building

        Args:
            engine: Engine asked for a command every tick
            lower_floor: Lowest floor served by the car
            higher_floor: Highest floor served by the car
            max_riders: Maximum number of active riders
            rng: Random generator used to pick rider floors
        """
        if higher_floor <= lower_floor:
            raise ValueError(f"higher_floor ({higher_floor}) must be above lower_floor ({lower_floor})")
        if max_riders < 0:
            raise ValueError("max_riders cannot be negative")

        self.engine = engine
        self.lower_floor = lower_floor
        self.higher_floor = higher_floor
        self.max_riders = max_riders
        self._rng = rng if rng is not None else random.Random()

        self._riders = set()
        self._floor: int = lower_floor
        self._door: Door = Door.CLOSED
        self._reset_state()

    @property
    def floor(self) -> int:
        return self._floor

    @property
    def door(self) -> Door:
        return self._door

    @property
    def riders(self) -> FrozenSet[Rider]:
        return frozenset(self._riders)

    def add_rider(self, origin: Optional[int] = None, destination: Optional[int] = None) -> Optional[Rider]:
        """
        Add a rider calling the elevator

        Floors left to None are picked at random. Once the building holds
        max_riders riders, additional requests are ignored.

        Returns:
            The new rider, or None if the building is full

        Raises:
            ValueError: If a floor is out of range or origin equals destination
            EngineBrokenError: If the engine refused the hall call; the
                rider is not added
        """
        if len(self._riders) >= self.max_riders:
            return None

        if origin is None:
            origin = self._random_floor(exclude=destination)
        if destination is None:
            destination = self._random_floor(exclude=origin)
        for floor in (origin, destination):
            if isinstance(floor, bool) or not isinstance(floor, int):
                raise ValueError(f"Floor {floor!r} is not an integer")
            if not self.is_valid_floor(floor):
                raise ValueError(f"Floor {floor} is outside {self.lower_floor}..{self.higher_floor}")

        rider = Rider(origin, destination)
        self.engine.call(rider.origin, rider.direction)
        self._riders.add(rider)
        print(f"[Building] {rider} calls at floor {rider.origin} going {rider.direction.value}")
        return rider

    def tick(self) -> TickReport:
        """
        Advance the state machine by one step

        Asks the engine for the next command. A legal command is applied;
        an illegal one, or any engine failure, resets both the building and
        the engine. There is no second attempt within the same tick.
        """
        command = None
        try:
            command = self.engine.next_command()
            if not self.is_valid_command(command):
                cause = f"Command {command} is not valid when door is {self._door} at floor {self._floor}"
                self.reset(cause)
                return self._report(command, applied=False, cause=cause)
            delivered = self._apply_command(command)
        except EngineBrokenError as e:
            self.reset(e.message)
            return self._report(command, applied=False, cause=e.message)

        for rider in self._riders:
            rider.tick()
        return self._report(command, applied=True, delivered=delivered)

    def is_valid_command(self, command) -> bool:
        """Check whether the car can physically execute a command from its current state"""
        # Command is a str enum: a bare "UP" compares equal to Command.UP
        if not isinstance(command, Command):
            return False
        if command == Command.CLOSE:
            return self._door == Door.OPEN
        if command == Command.OPEN:
            return self._door == Door.CLOSED
        if command == Command.DOWN:
            return self._door == Door.CLOSED and self._floor > self.lower_floor
        if command == Command.UP:
            return self._door == Door.CLOSED and self._floor < self.higher_floor
        if command == Command.NOTHING:
            return True
        return False

    def reset(self, cause: str):
        """
        Put the building back in its initial state and ask the engine to reset

        Args:
            cause: Human readable reason forwarded to the engine
        """
        print(f"[Building] Reset: {cause}")
        self._reset_state()
        try:
            self.engine.reset(cause)
        except EngineBrokenError as e:
            print(f"[Building] Engine reset failed: {e.message}")

    def is_valid_floor(self, floor: int) -> bool:
        return self.lower_floor <= floor <= self.higher_floor

    def snapshot(self) -> dict:
        return {
            'floor': self._floor,
            'door': self._door.value,
            'lower_floor': self.lower_floor,
            'higher_floor': self.higher_floor,
            'max_riders': self.max_riders,
            'riders': [rider.to_dict() for rider in sorted(self._riders, key=lambda r: r.rider_id)],
        }

    def _reset_state(self):
        self._floor = self.lower_floor
        self._door = Door.CLOSED
        self._riders.clear()

    def _apply_command(self, command: Command) -> List[Rider]:
        delivered: List[Rider] = []
        if command == Command.CLOSE:
            self._door = Door.CLOSED
        elif command == Command.OPEN:
            self._door = Door.OPEN
            delivered = self._door_opened()
        elif command == Command.UP:
            self._floor += 1
        elif command == Command.DOWN:
            self._floor -= 1
        return delivered

    def _door_opened(self) -> List[Rider]:
        # Notify every rider first, then remove the done ones all at once
        done: List[Rider] = []
        for rider in list(self._riders):
            transition = rider.door_opened(self._floor)
            if transition == RiderTransition.ENTERED:
                print(f"[Building] {rider} entered at floor {self._floor}")
                self.engine.rider_entered(rider)
                self.engine.go(rider.destination)
            elif transition == RiderTransition.EXITED:
                print(f"[Building] {rider} exited at floor {self._floor}")
                self.engine.rider_exited(rider)
            if rider.done():
                done.append(rider)
        self._riders.difference_update(done)
        return done

    def _random_floor(self, exclude: Optional[int] = None) -> int:
        floor = self._rng.randint(self.lower_floor, self.higher_floor)
        while floor == exclude:
            floor = self._rng.randint(self.lower_floor, self.higher_floor)
        return floor

    def _report(self, command, applied: bool, cause: Optional[str] = None,
                delivered: Optional[List[Rider]] = None) -> TickReport:
        return TickReport(
            command=command,
            applied=applied,
            floor=self._floor,
            door=self._door,
            cause=cause,
            delivered=delivered if delivered is not None else [],
        )

    def __repr__(self) -> str:
        return (f"Building(floor={self._floor}, door={self._door.value}, "
                f"riders={len(self._riders)}/{self.max_riders})")
