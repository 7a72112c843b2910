"""System factories run by the engine each tick."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from carousel.signals import SignalBus

if TYPE_CHECKING:
    from carousel.ride import Ride
    from carousel.types import TickContext


def make_ride_system(
    on_complete: Callable[[Ride, TickContext], None] | None = None,
) -> Callable[[Ride, TickContext], None]:
    """Return a system that advances the ride's tween by one tick.

    The interpolated value becomes the ride's current angle. On the tick the
    tween covers its duration the angle is set to exactly the target and the
    ride returns to stopped.
    """

    def ride_system(ride: Ride, ctx: TickContext) -> None:
        tween = ride.tween
        if tween is None or tween.cancelled:
            return

        value = tween.advance(ctx.dt_ms)
        ride.apply_angle(value)

        if tween.finished:
            ride.finish()
            if on_complete is not None:
                on_complete(ride, ctx)

    return ride_system


def make_signal_system(bus: SignalBus) -> Callable[[Ride, TickContext], None]:
    def signal_system(ride: Ride, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
