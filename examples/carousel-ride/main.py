"""Carousel Ride - interactive carousel demo.

Controls:
  Space     Start ride (restarts if already running)
  S         Emergency stop
  Up/Down   Change revolutions (1-4)
  1-4       Select revolutions directly
  V         Switch ride variant (compose / classic)
  Esc       Quit

Run with --headless to simulate one ride without opening a window.
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from carousel import VARIANTS, Engine, get_variant
from carousel.progress import counter_text, status_text
from carousel.render import BG_COLOR, TEXT_DIM, draw_carousel, draw_info

FPS = 60
PANEL_H = 130
HELP_TEXT = "[Spc] Start [S] Stop [Up/Dn] Revs [V] Variant [Esc] Quit"

logger = logging.getLogger("carousel_ride")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Carousel Ride - carousel animation demo")
    p.add_argument("--variant", choices=sorted(VARIANTS), default="compose",
                   help="Ride preset (default: compose)")
    p.add_argument("--revolutions", type=int, default=1,
                   help="Revolutions per ride (1-4, default: 1)")
    p.add_argument("--tps", type=int, default=60, help="Ticks per second (default: 60)")
    p.add_argument("--headless", action="store_true",
                   help="Simulate one ride and print progress instead of opening a window")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    args = p.parse_args()
    args.revolutions = max(1, min(4, args.revolutions))
    return args


class DemoState:
    """Holds the engine and the user's current selections."""

    def __init__(self, variant: str, revolutions: int, tps: int) -> None:
        self.variant = variant
        self.revolutions = revolutions
        self.tps = tps
        self.dirty = True
        self.engine = self._build_engine()

    def _build_engine(self) -> Engine:
        engine = Engine(tps=self.tps, ride_config=get_variant(self.variant))
        # Redraw only when the angle or ride status changes.
        for signal in ("angle_changed", "ride_started", "ride_completed", "ride_stopped"):
            engine.bus.subscribe(signal, self._mark_dirty)
        return engine

    def _mark_dirty(self, signal: str, data: dict) -> None:
        self.dirty = True

    def start(self) -> None:
        self.engine.ride.start(self.revolutions)

    def stop(self) -> None:
        self.engine.ride.stop()

    def set_revolutions(self, n: int) -> None:
        cfg = self.engine.ride.config
        self.revolutions = cfg.clamp_revolutions(n)
        self.dirty = True

    def toggle_variant(self) -> None:
        names = sorted(VARIANTS)
        self.variant = names[(names.index(self.variant) + 1) % len(names)]
        logger.info("Switched to %s variant", self.variant)
        self.engine = self._build_engine()
        self.dirty = True


def run_headless(state: DemoState) -> None:
    engine = state.engine
    ride = engine.ride

    last = {"completed": 0}

    def on_angle(signal: str, data: dict) -> None:
        if data["completed"] != last["completed"]:
            last["completed"] = data["completed"]
            print(counter_text(data["completed"], ride.state.revolutions,
                               ride.config.counter_format))

    engine.bus.subscribe("angle_changed", on_angle)
    state.start()
    engine.bus.flush()
    print(status_text(ride.status))
    ticks = engine.run_until_idle()
    print(status_text(ride.status))
    print(f"{ticks} ticks, final angle {ride.current_angle():.1f} deg")


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    state = DemoState(args.variant, args.revolutions, args.tps)

    if args.headless:
        run_headless(state)
        return

    pygame.init()
    canvas = state.engine.carousel.canvas_size
    screen = pygame.display.set_mode((canvas, canvas + PANEL_H))
    pygame.display.set_caption("Carousel Ride")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    tick_interval = 1.0 / state.tps
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.WINDOWEXPOSED:
                state.dirty = True

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.start()
                elif event.key == pygame.K_s:
                    state.stop()
                elif event.key == pygame.K_UP:
                    state.set_revolutions(state.revolutions + 1)
                elif event.key == pygame.K_DOWN:
                    state.set_revolutions(state.revolutions - 1)
                elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
                    state.set_revolutions(event.key - pygame.K_0)
                elif event.key == pygame.K_v:
                    state.toggle_variant()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        if not state.dirty:
            continue
        state.dirty = False

        engine = state.engine
        screen.fill(BG_COLOR)
        draw_carousel(screen, engine.carousel.center, engine.ride.current_angle(),
                      engine.carousel)
        y = draw_info(screen, font, engine.ride, state.revolutions, (16, canvas + 8))
        screen.blit(font.render(f"Variant: {state.variant}", True, TEXT_DIM), (16, y))
        screen.blit(font.render(HELP_TEXT, True, TEXT_DIM), (16, y + font.get_linesize() + 4))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
