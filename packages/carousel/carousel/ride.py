"""Ride driver: owns the rotation state and the tween animating it."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from carousel.config import VARIANTS, DEFAULT_VARIANT, RideConfig
from carousel.progress import RevolutionCounter, RideStatus
from carousel.signals import SignalBus
from carousel.tween import Tween

logger = logging.getLogger(__name__)


@dataclass
class RotationState:
    angle: float = 0.0
    start_angle: float = 0.0
    target_angle: float = 0.0
    revolutions: int = 0
    status: RideStatus = RideStatus.STOPPED


class Ride:
    """Start/stop state machine for the carousel.

    ``start()`` launches a tween from the current angle to
    ``current + revolutions * 360``; the engine's ride system advances it each
    tick through ``apply_angle()`` and ``finish()``. Only one tween drives the
    angle at a time: starting while running cancels the previous tween.

    Signals published on the bus: ``ride_started``, ``angle_changed``,
    ``ride_completed`` and ``ride_stopped``.
    """

    def __init__(self, config: RideConfig | None = None,
                 bus: SignalBus | None = None) -> None:
        self._config = config if config is not None else VARIANTS[DEFAULT_VARIANT]
        self._bus = bus if bus is not None else SignalBus()
        self._state = RotationState()
        self._counter = RevolutionCounter()
        self._tween: Tween | None = None

    @property
    def config(self) -> RideConfig:
        return self._config

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def state(self) -> RotationState:
        return self._state

    @property
    def tween(self) -> Tween | None:
        return self._tween

    @property
    def status(self) -> RideStatus:
        return self._state.status

    @property
    def completed(self) -> int:
        return self._counter.completed

    def current_angle(self) -> float:
        return self._state.angle

    def is_running(self) -> bool:
        return self._state.status is RideStatus.RUNNING

    def start(self, revolutions: int | None = None) -> float:
        """Begin a ride and return its target angle.

        Revolutions outside the configured bounds are clamped. Starting while
        a ride is in flight supersedes it.
        """
        if revolutions is None:
            revolutions = self._config.default_revolutions
        clamped = self._config.clamp_revolutions(revolutions)
        if clamped != revolutions:
            logger.warning(
                "Revolutions %d out of range [%d, %d], using %d",
                revolutions, self._config.min_revolutions,
                self._config.max_revolutions, clamped,
            )

        if self._tween is not None:
            logger.debug("Superseding in-flight ride at %.2f deg", self._state.angle)
            self._tween.cancel()
            self._tween = None

        state = self._state
        origin = 0.0 if self._config.snap_to_zero_on_start else state.angle
        state.start_angle = origin
        state.target_angle = origin + clamped * 360.0
        state.revolutions = clamped
        state.status = RideStatus.RUNNING
        self._counter.reset()
        self.apply_angle(origin)

        self._tween = Tween(
            start_val=state.start_angle,
            end_val=state.target_angle,
            duration_ms=self._config.duration_ms(clamped),
            easing=self._config.easing,
        )
        logger.info(
            "Ride started: %d revolution(s), target %.1f deg over %.0f ms",
            clamped, state.target_angle, self._tween.duration_ms,
        )
        self._bus.publish(
            "ride_started", revolutions=clamped, target=state.target_angle
        )
        return state.target_angle

    def stop(self) -> None:
        """Emergency stop: cancel the tween and freeze the angle."""
        if not self.is_running():
            return
        if self._tween is not None:
            self._tween.cancel()
            self._tween = None
        self._state.status = RideStatus.STOPPED
        if self._config.reset_count_on_stop:
            self._counter.reset()
        logger.info(
            "Ride stopped at %.2f deg after %d revolution(s)",
            self._state.angle, self._counter.completed,
        )
        self._bus.publish(
            "ride_stopped", angle=self._state.angle, completed=self._counter.completed
        )

    def apply_angle(self, angle: float) -> None:
        """Write a new current angle and recompute the revolution count."""
        state = self._state
        if angle == state.angle:
            return
        state.angle = angle
        completed = self._counter.observe(angle, state.start_angle)
        self._bus.publish("angle_changed", angle=angle, completed=completed)

    def finish(self) -> None:
        """Natural completion once the tween has reached its target."""
        self._tween = None
        self._state.status = RideStatus.STOPPED
        logger.info("Ride completed: %d revolution(s)", self._counter.completed)
        self._bus.publish("ride_completed", completed=self._counter.completed)
