"""Tests for horse and hub placement."""

import pytest
from carousel import (
    CarouselConfig,
    HorseIndexError,
    compute_horse_placement,
    horse_color,
    horse_corners,
    horse_placements,
    hub_corners,
)


class TestComputeHorsePlacement:
    """Test single-horse placement."""

    def test_first_horse_at_rest(self):
        """Horse 0 at angle 0 sits orbit_radius to the right of center, facing 90."""
        p = compute_horse_placement(0, 250, 250, 0)
        assert p.x == 425.0
        assert p.y == 250.0
        assert p.facing_deg == 90.0
        assert p.orbital_deg == 0.0

    def test_quarter_turn_horse_below_center(self):
        """Horse 2 is a quarter turn along, below center on a y-down canvas."""
        p = compute_horse_placement(2, 250, 250, 0)
        assert p.x == pytest.approx(250.0)
        assert p.y == pytest.approx(425.0)
        assert p.facing_deg == 180.0

    def test_deterministic(self):
        """Same inputs always give the same placement."""
        a = compute_horse_placement(5, 123.5, 321.25, 987.654)
        b = compute_horse_placement(5, 123.5, 321.25, 987.654)
        assert a == b

    def test_rotation_moves_horse_along_orbit(self):
        """Rotating by one step puts horse 0 where horse 1 was."""
        moved = compute_horse_placement(0, 250, 250, 45.0)
        neighbour = compute_horse_placement(1, 250, 250, 0.0)
        assert moved.x == pytest.approx(neighbour.x)
        assert moved.y == pytest.approx(neighbour.y)

    def test_custom_orbit_radius(self):
        """Orbit radius comes from the config."""
        cfg = CarouselConfig(orbit_radius=100.0)
        p = compute_horse_placement(0, 0, 0, 0, cfg)
        assert p.x == 100.0
        assert p.y == 0.0

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_out_of_range_index_rejected(self, index):
        """Indices outside [0, horse_count) raise HorseIndexError."""
        with pytest.raises(HorseIndexError) as exc_info:
            compute_horse_placement(index, 250, 250, 0)
        assert exc_info.value.index == index
        assert exc_info.value.horse_count == 8

    def test_index_error_is_index_error(self):
        """HorseIndexError can be caught as IndexError."""
        with pytest.raises(IndexError):
            compute_horse_placement(8, 0, 0, 0)


class TestHorseLayout:
    """Test invariants across all horses."""

    @pytest.mark.parametrize("angle", [0.0, 37.5, 123.456, 359.999, 1000.0])
    def test_horses_evenly_spaced(self, angle):
        """Consecutive horses are 45 degrees apart at every angle."""
        placements = horse_placements(250, 250, angle)
        assert len(placements) == 8
        for prev, cur in zip(placements, placements[1:]):
            assert cur.orbital_deg - prev.orbital_deg == pytest.approx(45.0)

    def test_spacing_exact_at_rest(self):
        """At angle 0 the orbital angles are exact multiples of 45."""
        placements = horse_placements(250, 250, 0.0)
        assert [p.orbital_deg for p in placements] == [i * 45.0 for i in range(8)]

    @pytest.mark.parametrize("angle", [0.0, 10.0, 271.3, 720.0])
    def test_facing_is_tangent(self, angle):
        """Every horse faces 90 degrees ahead of its orbital angle."""
        for p in horse_placements(250, 250, angle):
            assert (p.facing_deg - p.orbital_deg) % 360 == pytest.approx(90.0)

    def test_horses_on_orbit(self):
        """Every horse is orbit_radius away from the center."""
        for p in horse_placements(250, 250, 33.0):
            dist = ((p.x - 250) ** 2 + (p.y - 250) ** 2) ** 0.5
            assert dist == pytest.approx(175.0)

    def test_indices_in_order(self):
        placements = horse_placements(0, 0, 0)
        assert [p.index for p in placements] == list(range(8))

    def test_custom_horse_count(self):
        """Spacing follows horse_count."""
        cfg = CarouselConfig(horse_count=4)
        placements = horse_placements(0, 0, 0, cfg)
        assert [p.orbital_deg for p in placements] == [0.0, 90.0, 180.0, 270.0]


class TestShapes:
    """Test rectangle corners for horses and hub."""

    def test_horse_long_side_along_tangent(self):
        """Horse 0 at rest is a vertical bar: 10 wide, 30 tall."""
        p = compute_horse_placement(0, 250, 250, 0)
        corners = horse_corners(p)
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        assert min(xs) == pytest.approx(420.0)
        assert max(xs) == pytest.approx(430.0)
        assert min(ys) == pytest.approx(235.0)
        assert max(ys) == pytest.approx(265.0)

    def test_hub_unrotated(self):
        corners = hub_corners(250, 250, 0.0, 10)
        assert corners == [(245.0, 245.0), (255.0, 245.0), (255.0, 255.0), (245.0, 255.0)]

    def test_hub_rotation_keeps_center(self):
        """A rotated hub is still centered on the platform."""
        corners = hub_corners(250, 250, 30.0, 10)
        cx = sum(x for x, _ in corners) / 4
        cy = sum(y for _, y in corners) / 4
        assert cx == pytest.approx(250.0)
        assert cy == pytest.approx(250.0)


class TestHorseColor:

    def test_palette_order(self):
        assert horse_color(0) == (255, 0, 0)
        assert horse_color(2) == (255, 255, 0)
        assert horse_color(7) == (136, 136, 136)

    def test_palette_cycles(self):
        assert horse_color(8) == horse_color(0)
        assert horse_color(13) == horse_color(5)
