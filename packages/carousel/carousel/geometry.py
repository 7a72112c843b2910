"""Horse and hub placement on the rotating platform.

Angles are in degrees and follow canvas orientation: x grows to the right,
y grows downward, so a positive rotation turns clockwise on screen.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from carousel.config import DEFAULT_CAROUSEL, CarouselConfig
from carousel.types import HorseIndexError

Point = tuple[float, float]

HORSE_PALETTE: list[tuple[int, int, int]] = [
    (255, 0, 0),
    (255, 165, 0),
    (255, 255, 0),
    (0, 255, 0),
    (0, 255, 255),
    (0, 0, 255),
    (255, 0, 255),
    (136, 136, 136),
]


@dataclass(frozen=True, slots=True)
class HorsePlacement:
    index: int
    x: float
    y: float
    orbital_deg: float
    facing_deg: float


def orbital_angle(index: int, current_angle_deg: float,
                  config: CarouselConfig = DEFAULT_CAROUSEL) -> float:
    """Angle of horse ``index`` on the orbit, including the carousel rotation."""
    if not 0 <= index < config.horse_count:
        raise HorseIndexError(index, config.horse_count)
    return index * config.step_deg + current_angle_deg


def compute_horse_placement(
    index: int,
    center_x: float,
    center_y: float,
    current_angle_deg: float,
    config: CarouselConfig = DEFAULT_CAROUSEL,
) -> HorsePlacement:
    """Position and tangent facing of one horse.

    The horse sits on the orbit circle around (center_x, center_y) and faces
    90 degrees ahead of its orbital angle, so its long side follows the path.
    """
    theta_deg = orbital_angle(index, current_angle_deg, config)
    theta_rad = math.radians(theta_deg)
    return HorsePlacement(
        index=index,
        x=center_x + config.orbit_radius * math.cos(theta_rad),
        y=center_y + config.orbit_radius * math.sin(theta_rad),
        orbital_deg=theta_deg,
        facing_deg=theta_deg + 90.0,
    )


def horse_placements(
    center_x: float,
    center_y: float,
    current_angle_deg: float,
    config: CarouselConfig = DEFAULT_CAROUSEL,
) -> list[HorsePlacement]:
    return [
        compute_horse_placement(i, center_x, center_y, current_angle_deg, config)
        for i in range(config.horse_count)
    ]


def rotated_rect(cx: float, cy: float, width: float, height: float,
                 angle_deg: float) -> list[Point]:
    """Corners of a width x height rectangle centered on (cx, cy), rotated by angle_deg."""
    rad = math.radians(angle_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    hw = width / 2.0
    hh = height / 2.0
    corners = []
    for lx, ly in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)):
        corners.append((cx + lx * cos_a - ly * sin_a, cy + lx * sin_a + ly * cos_a))
    return corners


def horse_corners(placement: HorsePlacement,
                  config: CarouselConfig = DEFAULT_CAROUSEL) -> list[Point]:
    return rotated_rect(
        placement.x, placement.y, config.horse_width, config.horse_height,
        placement.facing_deg,
    )


def hub_corners(center_x: float, center_y: float, current_angle_deg: float,
                size: float = DEFAULT_CAROUSEL.hub_size) -> list[Point]:
    return rotated_rect(center_x, center_y, size, size, current_angle_deg)


def horse_color(index: int) -> tuple[int, int, int]:
    return HORSE_PALETTE[index % len(HORSE_PALETTE)]
