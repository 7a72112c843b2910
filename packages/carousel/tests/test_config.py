"""Tests for carousel and ride configuration."""

import dataclasses

import pytest
from carousel import DEFAULT_CAROUSEL, VARIANTS, CarouselConfig, RideConfig, get_variant


def test_carousel_defaults():
    cfg = CarouselConfig()
    assert cfg.platform_radius == 200.0
    assert cfg.orbit_radius == 175.0
    assert cfg.horse_width == 30.0
    assert cfg.horse_height == 10.0
    assert cfg.horse_count == 8
    assert cfg.step_deg == 45.0
    assert cfg.center == (250.0, 250.0)


def test_carousel_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CAROUSEL.orbit_radius = 10.0


def test_carousel_rejects_zero_horses():
    with pytest.raises(ValueError):
        CarouselConfig(horse_count=0)


class TestVariants:
    """Test the two ride presets."""

    def test_compose_variant(self):
        cfg = get_variant("compose")
        assert cfg.base_duration_ms == 7500.0
        assert cfg.easing == "linear_out_slow_in"
        assert cfg.reset_count_on_stop is True
        assert cfg.counter_format == "completed"

    def test_classic_variant(self):
        cfg = get_variant("classic")
        assert cfg.base_duration_ms == 5000.0
        assert cfg.easing == "linear"
        assert cfg.reset_count_on_stop is False
        assert cfg.counter_format == "completed/total"

    def test_variant_names(self):
        assert sorted(VARIANTS) == ["classic", "compose"]

    def test_unknown_variant(self):
        with pytest.raises(ValueError, match="Unknown variant"):
            get_variant("waltzer")


class TestRideConfig:

    def test_duration_scales_with_revolutions(self):
        cfg = RideConfig(base_duration_ms=5000.0)
        assert cfg.duration_ms(3) == 15000.0

    @pytest.mark.parametrize("revs, expected", [(-2, 1), (0, 1), (1, 1), (3, 3), (4, 4), (9, 4)])
    def test_clamp_revolutions(self, revs, expected):
        assert RideConfig().clamp_revolutions(revs) == expected

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"base_duration_ms": 0.0},
            {"easing": "wobble"},
            {"min_revolutions": 0},
            {"min_revolutions": 3, "max_revolutions": 2},
            {"default_revolutions": 5},
            {"counter_format": "percent"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RideConfig(**kwargs)
