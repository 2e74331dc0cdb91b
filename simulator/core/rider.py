import itertools
from enum import Enum
from typing import Optional

from .command import Direction


class RiderState(str, Enum):
    WAITING = "WAITING"
    TRAVELING = "TRAVELING"
    DONE = "DONE"


class RiderTransition(str, Enum):
    """What happened to a rider when the door opened"""
    ENTERED = "ENTERED"
    EXITED = "EXITED"


class Rider:
    """
    Someone who wants to go from one floor to another

    The rider waits at its origin floor, boards when the door opens there,
    and is done when the door opens at its destination floor. It only reacts
    to door events; telling the engine about it is the building's job.
    """
    # Rider ID counter shared across all instances
    _rider_id_counter = itertools.count(1)

    def __init__(self, origin: int, destination: int, state: RiderState = RiderState.WAITING):
        """
        Initialize rider

        Args:
            origin: Floor where the rider calls the elevator
            destination: Floor the rider wants to reach
            state: Initial state (TRAVELING for a rider already in the car)
        """
        if origin == destination:
            raise ValueError(f"origin and destination must differ, got {origin}")
        if state == RiderState.DONE:
            raise ValueError("A rider cannot start in the DONE state")

        self.rider_id: int = next(self._rider_id_counter)
        self.origin = origin
        self.destination = destination
        self.state = state

        # Self-tracked metrics, in ticks
        self.waiting_ticks = 0
        self.traveling_ticks = 0

    @property
    def direction(self) -> Direction:
        return Direction.UP if self.destination > self.origin else Direction.DOWN

    def waiting(self) -> bool:
        return self.state == RiderState.WAITING

    def traveling(self) -> bool:
        return self.state == RiderState.TRAVELING

    def done(self) -> bool:
        return self.state == RiderState.DONE

    def door_opened(self, floor: int) -> Optional[RiderTransition]:
        """
        Deliver a "door opened at floor" event

        Returns:
            ENTERED when the rider boards, EXITED when it leaves the car,
            None when the event does not concern this rider
        """
        if self.waiting() and floor == self.origin:
            self.state = RiderState.TRAVELING
            return RiderTransition.ENTERED
        if self.traveling() and floor == self.destination:
            self.state = RiderState.DONE
            return RiderTransition.EXITED
        return None

    def tick(self):
        """Account one elapsed tick"""
        if self.waiting():
            self.waiting_ticks += 1
        elif self.traveling():
            self.traveling_ticks += 1

    def to_dict(self) -> dict:
        return {
            'id': self.rider_id,
            'origin': self.origin,
            'destination': self.destination,
            'state': self.state.value,
            'waiting_ticks': self.waiting_ticks,
            'traveling_ticks': self.traveling_ticks,
        }

    def __repr__(self) -> str:
        return f"Rider(id={self.rider_id}, {self.origin}->{self.destination}, {self.state.value})"
