"""Fixed-timestep clock driving the carousel animation."""

from typing import Callable

from carousel.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def dt_ms(self) -> float:
        return self._dt * 1000.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Seconds of animation time covered by the ticks so far."""
        return self._tick_number * self._dt

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
        )

    def ticks_for(self, duration_ms: float) -> int:
        """Number of whole ticks needed to cover ``duration_ms``."""
        ticks = int(duration_ms / self.dt_ms)
        if ticks * self.dt_ms < duration_ms:
            ticks += 1
        return ticks

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
