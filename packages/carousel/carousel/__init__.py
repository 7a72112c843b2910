"""carousel - Rotating carousel geometry and ride animation."""

from carousel.clock import Clock
from carousel.config import (
    DEFAULT_CAROUSEL,
    VARIANTS,
    CarouselConfig,
    RideConfig,
    get_variant,
)
from carousel.easing import EASINGS, cubic_bezier
from carousel.engine import Engine
from carousel.geometry import (
    HorsePlacement,
    compute_horse_placement,
    horse_color,
    horse_corners,
    horse_placements,
    hub_corners,
)
from carousel.progress import (
    RevolutionCounter,
    RideStatus,
    completed_revolutions,
    counter_text,
    status_text,
)
from carousel.ride import Ride, RotationState
from carousel.signals import SignalBus
from carousel.tween import Tween
from carousel.types import HorseIndexError, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "Ride",
    "RotationState",
    "RideStatus",
    "Tween",
    "EASINGS",
    "cubic_bezier",
    "SignalBus",
    "CarouselConfig",
    "RideConfig",
    "DEFAULT_CAROUSEL",
    "VARIANTS",
    "get_variant",
    "HorsePlacement",
    "compute_horse_placement",
    "horse_placements",
    "horse_corners",
    "hub_corners",
    "horse_color",
    "RevolutionCounter",
    "completed_revolutions",
    "status_text",
    "counter_text",
    "HorseIndexError",
]
