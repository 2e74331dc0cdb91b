"""
Command, Door and Direction vocabulary

Closed sets of values shared by the building and the engines.
String values are the exact tokens used on the wire.
"""

from enum import Enum


class Command(str, Enum):
    """What the engine asks the car to do during one tick"""
    UP = "UP"
    DOWN = "DOWN"
    OPEN = "OPEN"
    CLOSE = "CLOSE"
    NOTHING = "NOTHING"

    @classmethod
    def parse(cls, token: str) -> "Command":
        """
        Parse a wire token (case sensitive)

        Raises:
            ValueError: If the token is not one of the command values
        """
        for command in cls:
            if command.value == token:
                return command
        raise ValueError(f"Unknown command: {token!r}")

    def __str__(self) -> str:
        return self.value


class Door(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"

    def __str__(self) -> str:
        return self.value


class Direction(str, Enum):
    """Direction of a hall call"""
    UP = "UP"
    DOWN = "DOWN"

    def __str__(self) -> str:
        return self.value
