"""Engine - fixed-timestep loop driving the ride and its listeners."""

import logging
import time
from typing import Callable

from carousel.clock import Clock
from carousel.config import DEFAULT_CAROUSEL, CarouselConfig, RideConfig
from carousel.geometry import HorsePlacement, horse_placements
from carousel.ride import Ride
from carousel.signals import SignalBus
from carousel.systems import make_ride_system, make_signal_system
from carousel.types import System, TickContext

logger = logging.getLogger(__name__)


class Engine:
    def __init__(
        self,
        tps: int = 60,
        ride_config: RideConfig | None = None,
        carousel_config: CarouselConfig = DEFAULT_CAROUSEL,
    ) -> None:
        self._clock = Clock(tps)
        self._bus = SignalBus()
        self._ride = Ride(ride_config, self._bus)
        self._carousel = carousel_config
        self._systems: list[System] = [
            make_ride_system(),
            make_signal_system(self._bus),
        ]
        self._start_hooks: list[Callable[[Ride, TickContext], None]] = []
        self._stop_hooks: list[Callable[[Ride, TickContext], None]] = []
        self._stop_requested: bool = False

    @property
    def ride(self) -> Ride:
        return self._ride

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def carousel(self) -> CarouselConfig:
        return self._carousel

    def placements(self) -> list[HorsePlacement]:
        """Horse placements for the current angle, around the canvas center."""
        cx, cy = self._carousel.center
        return horse_placements(cx, cy, self._ride.current_angle(), self._carousel)

    def add_system(self, system: System) -> None:
        """Append a system. It runs after the built-in ride and signal systems."""
        self._systems.append(system)

    def on_start(self, hook: Callable[[Ride, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Ride, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _run_hooks(self, hooks: list[Callable[[Ride, TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._ride, ctx)

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._ride, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_until_idle(self, max_ticks: int | None = None) -> int:
        """Tick until the ride stops. Returns the number of ticks run.

        Without ``max_ticks`` the limit is the remaining tween time plus one
        tick. The signal bus is flushed before returning.
        """
        if max_ticks is None:
            tween = self._ride.tween
            remaining = 0.0 if tween is None else tween.duration_ms - tween.elapsed_ms
            max_ticks = self._clock.ticks_for(max(remaining, 0.0)) + 1

        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        ticks = 0
        while self._ride.is_running() and ticks < max_ticks:
            self._tick()
            ticks += 1
            if self._stop_requested:
                break
        self._bus.flush()
        self._run_hooks(self._stop_hooks)
        logger.debug("run_until_idle finished after %d tick(s)", ticks)
        return ticks

    def run_forever(self) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)
