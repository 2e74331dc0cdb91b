"""
Shared fixtures: engine doubles for the building, fake opener and executors
for the HTTP engine.
"""

import io
import os
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Plots are only written to files during tests
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from simulator.core.command import Command
from simulator.interfaces.elevator_engine import IElevatorEngine


class RecordingEngine(IElevatorEngine):
    """
    Engine double returning scripted commands and recording notifications

    Scripted items are Command values (or any object, to test illegal
    answers) and exceptions, which are raised instead. Once the script is
    exhausted the engine answers NOTHING.
    """

    def __init__(self, commands=(), call_error=None):
        self.commands = list(commands)
        self.call_error = call_error
        self.notifications = []

    def script(self, *commands):
        self.commands.extend(commands)
        return self

    def next_command(self):
        if not self.commands:
            return Command.NOTHING
        command = self.commands.pop(0)
        if isinstance(command, Exception):
            raise command
        return command

    def call(self, at_floor, direction):
        if self.call_error is not None:
            raise self.call_error
        self.notifications.append(('call', at_floor, direction))
        return self

    def go(self, floor_to_go):
        self.notifications.append(('go', floor_to_go))
        return self

    def rider_entered(self, rider):
        self.notifications.append(('entered', rider))
        return self

    def rider_exited(self, rider):
        self.notifications.append(('exited', rider))
        return self

    def reset(self, cause):
        self.notifications.append(('reset', cause))
        return self

    def resets(self):
        return [n[1] for n in self.notifications if n[0] == 'reset']


class FakeOpener:
    """
    Stand-in for a urllib opener

    Outcomes are consumed in order: bytes become the response body, an
    exception is raised. With no outcome left, the response body is empty.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []

    def respond(self, *outcomes):
        self.outcomes.extend(outcomes)
        return self

    def open(self, url, timeout=None):
        self.requests.append((url, timeout))
        outcome = self.outcomes.pop(0) if self.outcomes else b""
        if isinstance(outcome, Exception):
            raise outcome
        return io.BytesIO(outcome)

    @property
    def urls(self):
        return [url for url, _ in self.requests]


class SynchronousExecutor:
    """Runs submitted work immediately, on the calling thread"""

    def submit(self, fn, *args, **kwargs):
        fn(*args, **kwargs)


class DeferredExecutor:
    """Queues submitted work until run_all() is called"""

    def __init__(self):
        self.pending = []

    def submit(self, fn, *args, **kwargs):
        self.pending.append((fn, args, kwargs))

    def run_all(self):
        pending, self.pending = self.pending, []
        for fn, args, kwargs in pending:
            fn(*args, **kwargs)


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def opener():
    return FakeOpener()


@pytest.fixture
def sync_executor():
    return SynchronousExecutor()


@pytest.fixture
def deferred_executor():
    return DeferredExecutor()
