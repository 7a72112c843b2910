"""Shared types and errors for the carousel engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]

    @property
    def dt_ms(self) -> float:
        return self.dt * 1000.0


class HorseIndexError(IndexError):
    """Raised when a horse index falls outside ``[0, horse_count)``."""

    def __init__(self, index: int, horse_count: int) -> None:
        self.index = index
        self.horse_count = horse_count
        super().__init__(f"horse index {index} out of range [0, {horse_count})")


if TYPE_CHECKING:
    from carousel.ride import Ride

System = Callable[["Ride", TickContext], None]
