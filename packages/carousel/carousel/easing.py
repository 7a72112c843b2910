"""Easing functions for tween interpolation."""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def _bezier(s: float, p1: float, p2: float) -> float:
    inv = 1 - s
    return 3 * inv * inv * s * p1 + 3 * inv * s * s * p2 + s * s * s


def _bezier_slope(s: float, p1: float, p2: float) -> float:
    inv = 1 - s
    return 3 * inv * inv * p1 + 6 * inv * s * (p2 - p1) + 3 * s * s * (1 - p2)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Build a CSS-style cubic Bezier curve through (0, 0) and (1, 1).

    The control point x coordinates must lie in [0, 1] so that the curve is
    a function of time.
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("control point x values must be within [0, 1]")

    def _solve(t: float) -> float:
        # Newton first, bisection if the slope flattens out.
        s = t
        for _ in range(8):
            err = _bezier(s, x1, x2) - t
            if abs(err) < 1e-7:
                return s
            slope = _bezier_slope(s, x1, x2)
            if abs(slope) < 1e-6:
                break
            s -= err / slope
        lo, hi = 0.0, 1.0
        s = t
        for _ in range(50):
            x = _bezier(s, x1, x2)
            if abs(x - t) < 1e-7:
                break
            if x < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        return s

    def curve(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return _bezier(_solve(t), y1, y2)

    return curve


linear_out_slow_in = cubic_bezier(0.0, 0.0, 0.2, 1.0)


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "linear_out_slow_in": linear_out_slow_in,
}
