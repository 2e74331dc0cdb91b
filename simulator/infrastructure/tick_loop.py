"""
Tick loop

SimPy processes that drive a Building: one tick per simulation time unit,
plus a rider generator calling the elevator at random.
"""

import random
import threading
from typing import Optional

import simpy
import simpy.rt

from ..core.building import Building
from ..exceptions import EngineBrokenError


def create_environment(tick_seconds: float = 0.0) -> simpy.Environment:
    """
    Create the environment the ticks run on

    Args:
        tick_seconds: Wall clock duration of one tick
            - 0.0 = no delay (fastest possible)
            - 1.0 = one tick per second

    Returns:
        simpy.Environment, or a non-strict simpy.rt.RealtimeEnvironment
        when tick_seconds > 0
    """
    if tick_seconds < 0:
        raise ValueError("tick_seconds cannot be negative")
    if tick_seconds == 0:
        return simpy.Environment()
    return simpy.rt.RealtimeEnvironment(factor=tick_seconds, strict=False)


class BuildingSimulation:
    """
    Drives a building tick after tick

    Ticks happen at t = 1, 2, 3, ... and never overlap. The rider generator
    runs at t = 0, 1, 2, ... and adds at most one rider per time unit.
    Both take `lock`, which other threads (the status API) must hold while
    touching the building.
    """

    def __init__(self, building: Building, env: Optional[simpy.Environment] = None,
                 rider_probability: float = 0.3, statistics=None,
                 rng: Optional[random.Random] = None, lock=None):
        """
        Initialize simulation

        Args:
            building: Building to drive
            env: SimPy environment (default: simpy.Environment())
            rider_probability: Chance of a new rider at each time unit
            statistics: Optional collector with record_tick(time, report)
                and register_rider(time, rider)
            rng: Random generator for rider arrivals
            lock: Lock shared with other threads using the building
        """
        if not 0.0 <= rider_probability <= 1.0:
            raise ValueError("rider_probability must be between 0 and 1")

        self.building = building
        self.env = env if env is not None else simpy.Environment()
        self.rider_probability = rider_probability
        self.statistics = statistics
        self._rng = rng if rng is not None else random.Random()
        self.lock = lock if lock is not None else threading.Lock()
        self.ticks = 0

        self.env.process(self.tick_loop())
        self.env.process(self.rider_generator())

    def tick_loop(self):
        """SimPy process: one building tick per time unit"""
        while True:
            yield self.env.timeout(1)
            with self.lock:
                report = self.building.tick()
            self.ticks += 1
            if report.applied:
                print(f"{self.env.now:.2f} [Tick] {report.command} -> floor {report.floor}, door {report.door}")
            else:
                print(f"{self.env.now:.2f} [Tick] Reset: {report.cause}")
            if self.statistics is not None:
                self.statistics.record_tick(self.env.now, report)

    def rider_generator(self):
        """SimPy process: maybe add a rider every time unit"""
        while True:
            if self._rng.random() < self.rider_probability:
                self._add_rider()
            yield self.env.timeout(1)

    def run(self, ticks: int):
        """
        Run until `ticks` more ticks have been processed

        Args:
            ticks: Number of ticks to run
        """
        if ticks < 0:
            raise ValueError("ticks cannot be negative")
        # Events scheduled exactly at `until` are not processed
        self.env.run(until=self.env.now + ticks + 0.5)

    def _add_rider(self):
        with self.lock:
            try:
                rider = self.building.add_rider()
            except EngineBrokenError as e:
                print(f"{self.env.now:.2f} [RiderGen] Call refused by engine: {e.message}")
                return
        if rider is None:
            print(f"{self.env.now:.2f} [RiderGen] Building full, no new rider")
        elif self.statistics is not None:
            self.statistics.register_rider(self.env.now, rider)
