"""Carousel layout and ride configuration dataclasses."""
from __future__ import annotations

from dataclasses import dataclass

from carousel.easing import EASINGS

COUNTER_FORMATS = ("completed", "completed/total")


@dataclass(frozen=True)
class CarouselConfig:
    """Immutable carousel layout, in canvas pixels.

    Attributes:
        platform_radius: Radius of the platform circle.
        orbit_radius: Distance from the platform center to each horse's path.
        horse_width: Long side of a horse rectangle, laid along the tangent.
        horse_height: Short side of a horse rectangle.
        horse_count: Number of horses spaced evenly around the orbit.
        hub_size: Side of the rotating square hub marker.
        canvas_size: Width and height of the square drawing area.
    """

    platform_radius: float = 200.0
    orbit_radius: float = 175.0
    horse_width: float = 30.0
    horse_height: float = 10.0
    horse_count: int = 8
    hub_size: float = 10.0
    canvas_size: int = 500

    def __post_init__(self) -> None:
        if self.horse_count <= 0:
            raise ValueError("horse_count must be positive")

    @property
    def step_deg(self) -> float:
        return 360.0 / self.horse_count

    @property
    def center(self) -> tuple[float, float]:
        return (self.canvas_size / 2.0, self.canvas_size / 2.0)


@dataclass(frozen=True)
class RideConfig:
    """Immutable ride timing and display behaviour.

    Attributes:
        base_duration_ms: Duration of one revolution; a ride of N revolutions
            lasts N times this.
        easing: Name of the timing curve in ``EASINGS``.
        min_revolutions: Smallest accepted revolutions per ride.
        max_revolutions: Largest accepted revolutions per ride.
        default_revolutions: Revolutions used when ``start()`` gets none.
        reset_count_on_stop: Whether an emergency stop zeroes the counter.
        counter_format: ``"completed"`` or ``"completed/total"``.
        snap_to_zero_on_start: Whether a new ride begins from angle 0.
    """

    base_duration_ms: float = 7500.0
    easing: str = "linear_out_slow_in"
    min_revolutions: int = 1
    max_revolutions: int = 4
    default_revolutions: int = 1
    reset_count_on_stop: bool = True
    counter_format: str = "completed"
    snap_to_zero_on_start: bool = True

    def __post_init__(self) -> None:
        if self.base_duration_ms <= 0:
            raise ValueError("base_duration_ms must be positive")
        if self.easing not in EASINGS:
            raise ValueError(f"Unknown easing {self.easing!r}")
        if not 1 <= self.min_revolutions <= self.max_revolutions:
            raise ValueError(
                f"Invalid revolution bounds [{self.min_revolutions}, {self.max_revolutions}]"
            )
        if not self.min_revolutions <= self.default_revolutions <= self.max_revolutions:
            raise ValueError("default_revolutions must lie within the bounds")
        if self.counter_format not in COUNTER_FORMATS:
            raise ValueError(f"Unknown counter format {self.counter_format!r}")

    def clamp_revolutions(self, revolutions: int) -> int:
        return max(self.min_revolutions, min(self.max_revolutions, revolutions))

    def duration_ms(self, revolutions: int) -> float:
        return self.base_duration_ms * revolutions


DEFAULT_CAROUSEL = CarouselConfig()

VARIANTS: dict[str, RideConfig] = {
    "compose": RideConfig(),
    "classic": RideConfig(
        base_duration_ms=5000.0,
        easing="linear",
        reset_count_on_stop=False,
        counter_format="completed/total",
    ),
}

DEFAULT_VARIANT = "compose"


def get_variant(name: str) -> RideConfig:
    """Look up a ride preset by name. Raises ValueError if unknown."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown variant {name!r}, expected one of {sorted(VARIANTS)}"
        ) from None
