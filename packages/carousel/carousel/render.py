"""pygame rendering of the carousel frame and its info panel."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from carousel.config import DEFAULT_CAROUSEL, CarouselConfig
from carousel.geometry import horse_color, horse_corners, horse_placements, hub_corners
from carousel.progress import counter_text, status_text

if TYPE_CHECKING:
    from carousel.ride import Ride

BG_COLOR = (255, 255, 255)
PLATFORM_COLOR = (204, 204, 204)
HUB_COLOR = (0, 0, 0)
TEXT_COLOR = (30, 30, 30)
TEXT_DIM = (120, 120, 130)
RUNNING_COLOR = (40, 150, 60)
STOPPED_COLOR = (200, 40, 40)


def draw_carousel(
    surface: pygame.Surface,
    center: tuple[float, float],
    angle: float,
    config: CarouselConfig = DEFAULT_CAROUSEL,
) -> None:
    """Draw platform, rotating hub and the oriented horses at ``angle``."""
    cx, cy = center
    pygame.draw.circle(surface, PLATFORM_COLOR, (round(cx), round(cy)),
                       round(config.platform_radius))
    pygame.draw.polygon(surface, HUB_COLOR, hub_corners(cx, cy, angle, config.hub_size))

    for placement in horse_placements(cx, cy, angle, config):
        pygame.draw.polygon(
            surface, horse_color(placement.index), horse_corners(placement, config)
        )


def draw_info(
    surface: pygame.Surface,
    font: pygame.font.Font,
    ride: Ride,
    selected_revolutions: int,
    origin: tuple[int, int],
) -> int:
    """Draw status, counter and the selected revolutions. Returns the next free y."""
    x, y = origin
    line_h = font.get_linesize() + 4

    status_color = RUNNING_COLOR if ride.is_running() else STOPPED_COLOR
    surface.blit(font.render(status_text(ride.status), True, status_color), (x, y))
    y += line_h

    total = ride.state.revolutions or selected_revolutions
    counter = counter_text(ride.completed, total, ride.config.counter_format)
    surface.blit(font.render(counter, True, TEXT_COLOR), (x, y))
    y += line_h

    cfg = ride.config
    picker = "  ".join(
        f"[{n}]" if n == selected_revolutions else f" {n} "
        for n in range(cfg.min_revolutions, cfg.max_revolutions + 1)
    )
    surface.blit(font.render(f"Selected: {picker}", True, TEXT_DIM), (x, y))
    y += line_h
    return y
