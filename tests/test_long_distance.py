"""
Tests for the one-stop journey model and the star rating
"""
import numpy as np
import pytest

from src.range_estimation.long_distance import (
    calculate_long_distance_metrics,
    can_fast_charge,
    format_duration,
    star_glyphs,
    star_rating_for,
)
from src.range_estimation.vehicle_profile import VehicleRangeProfile


def test_one_stop_journey(reference_profile):
    profile = VehicleRangeProfile(real_world_range_km=350, fast_charging_time_min=30,
                                  usable_battery_capacity_kwh=50)
    metrics = calculate_long_distance_metrics(profile)
    assert metrics.can_fast_charge
    assert metrics.leg1_distance_km == 315.0
    assert metrics.leg2_distance_km == 122.5
    assert metrics.one_stop_range_km == 437.5
    assert metrics.star_rating == 3.0
    assert metrics.charging_stop_hours == 0.25
    assert metrics.leg1_duration_str == "4h 30min"
    assert metrics.leg2_duration_str == "1h 45min"
    assert metrics.total_duration_str == "6h 30min"


def test_without_fast_charging_only_leg_one_counts():
    metrics = calculate_long_distance_metrics(VehicleRangeProfile(real_world_range_km=300))
    assert not metrics.can_fast_charge
    assert metrics.leg1_distance_km == 270.0
    assert metrics.leg2_distance_km == 0.0
    assert metrics.one_stop_range_km == 270.0
    assert metrics.charging_stop_hours == 0.0
    assert metrics.leg2_duration_str == "N/A"
    assert metrics.total_duration_str == "3h 51min"
    assert metrics.star_rating == 1.5


def test_missing_range_is_insufficient_data():
    assert calculate_long_distance_metrics(None) is None
    assert calculate_long_distance_metrics(VehicleRangeProfile(fast_charging_time_min=30)) is None


def test_can_fast_charge_needs_time_and_capacity():
    assert can_fast_charge(VehicleRangeProfile(300, None, 40, 45))
    assert not can_fast_charge(VehicleRangeProfile(300, None, None, 45))
    assert not can_fast_charge(VehicleRangeProfile(300, None, 40, 0))


def test_star_rating_bounds():
    assert star_rating_for(0) == 0.0
    assert star_rating_for(199.9) == 0.0
    assert star_rating_for(200) == 1.0
    assert star_rating_for(700) == 5.0
    assert star_rating_for(1200) == 5.0


def test_star_rating_half_steps():
    assert star_rating_for(325) == 2.0
    assert star_rating_for(387.5) == 2.5
    assert star_rating_for(640) == 4.5


def test_star_rating_is_monotonic():
    ratings = [star_rating_for(km) for km in np.arange(0, 900, 2.5)]
    assert all(b >= a for a, b in zip(ratings, ratings[1:]))
    assert set(ratings) <= {0.0, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0}


@pytest.mark.parametrize("hours, expected", [
    (0, "0min"),
    (0.75, "45min"),
    (2, "2h"),
    (2.25, "2h 15min"),
])
def test_format_duration(hours, expected):
    assert format_duration(hours) == expected


def test_star_glyphs():
    assert star_glyphs(3.5) == "★★★⯨☆"
    assert star_glyphs(0) == "☆☆☆☆☆"
    assert star_glyphs(5) == "★★★★★"
    assert len(star_glyphs(2.5)) == 5
