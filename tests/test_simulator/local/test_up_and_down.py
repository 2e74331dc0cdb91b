"""
Up and down engine tests
"""

import random

import pytest

from simulator.core.building import Building
from simulator.core.command import Command
from simulator.implementations.local.up_and_down import UpAndDownEngine


def test_serves_each_floor_before_moving():
    engine = UpAndDownEngine(lower_floor=0, higher_floor=2)

    commands = [engine.next_command() for _ in range(12)]

    assert commands == [
        Command.OPEN, Command.CLOSE, Command.UP,
        Command.OPEN, Command.CLOSE, Command.UP,
        Command.OPEN, Command.CLOSE, Command.DOWN,
        Command.OPEN, Command.CLOSE, Command.DOWN,
    ]


def test_never_issues_an_illegal_command():
    engine = UpAndDownEngine(lower_floor=0, higher_floor=5)
    building = Building(engine, lower_floor=0, higher_floor=5, rng=random.Random(3))

    for tick in range(300):
        if tick % 7 == 0:
            building.add_rider()
        assert building.tick().applied


def test_delivers_every_rider():
    engine = UpAndDownEngine(lower_floor=0, higher_floor=9)
    building = Building(engine, rng=random.Random(11))
    riders = [building.add_rider() for _ in range(10)]

    # Two full sweeps are enough for any trip
    for _ in range(2 * 2 * 10 * 3):
        building.tick()

    assert all(rider.done() for rider in riders)
    assert building.riders == frozenset()


def test_reset_returns_to_lower_floor():
    engine = UpAndDownEngine(lower_floor=0, higher_floor=9)
    for _ in range(8):
        engine.next_command()

    engine.reset("building reset")

    assert engine.floor == 0
    assert engine.next_command() == Command.OPEN


def test_rejects_inverted_range():
    with pytest.raises(ValueError):
        UpAndDownEngine(lower_floor=3, higher_floor=1)
