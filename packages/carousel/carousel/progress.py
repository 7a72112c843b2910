"""Revolution counting and ride status text."""
from __future__ import annotations

import enum
import math


class RideStatus(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


def completed_revolutions(angle_deg: float) -> int:
    """Whole revolutions covered by ``angle_deg``: floor(angle / 360)."""
    return math.floor(angle_deg / 360.0)


class RevolutionCounter:
    """Tracks completed revolutions, recomputing only when the angle moves.

    A ``reset()`` holds the count at 0 until the next observed angle change,
    so zeroing the counter on a stop survives while the angle stays frozen.
    """

    def __init__(self) -> None:
        self._completed = 0
        self._last_angle: float | None = None

    @property
    def completed(self) -> int:
        return self._completed

    def observe(self, angle_deg: float, origin_deg: float = 0.0) -> int:
        if angle_deg != self._last_angle:
            self._last_angle = angle_deg
            self._completed = completed_revolutions(angle_deg - origin_deg)
        return self._completed

    def reset(self) -> None:
        self._completed = 0


def status_text(status: RideStatus) -> str:
    if status is RideStatus.RUNNING:
        return "Status: Ride in progress"
    return "Status: Stopped"


def counter_text(completed: int, total: int, fmt: str = "completed") -> str:
    if fmt == "completed/total":
        return f"Revolutions: {completed}/{total}"
    return f"Revolutions: {completed}"
