"""Time-based, cancellable tween between two values."""
from __future__ import annotations

from dataclasses import dataclass

from carousel.easing import EASINGS


@dataclass
class Tween:
    """Interpolates from ``start_val`` to ``end_val`` over ``duration_ms``.

    ``elapsed_ms`` is moved forward by ``advance()``. Once the duration is
    covered the value is exactly ``end_val``. A cancelled tween keeps its
    last value and ignores further ``advance()`` calls.
    """

    start_val: float
    end_val: float
    duration_ms: float
    easing: str = "linear"
    elapsed_ms: float = 0.0
    cancelled: bool = False

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if self.easing not in EASINGS:
            raise ValueError(f"Unknown easing {self.easing!r}")

    @property
    def progress(self) -> float:
        return min(max(self.elapsed_ms / self.duration_ms, 0.0), 1.0)

    @property
    def finished(self) -> bool:
        return self.elapsed_ms >= self.duration_ms

    @property
    def value(self) -> float:
        return self.value_at(self.elapsed_ms)

    def value_at(self, elapsed_ms: float) -> float:
        t = min(max(elapsed_ms / self.duration_ms, 0.0), 1.0)
        if t >= 1.0:
            return self.end_val
        eased_t = EASINGS[self.easing](t)
        return self.start_val + (self.end_val - self.start_val) * eased_t

    def advance(self, dt_ms: float) -> float:
        if not self.cancelled:
            self.elapsed_ms += dt_ms
        return self.value

    def cancel(self) -> None:
        self.cancelled = True
