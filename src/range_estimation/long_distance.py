"""
Long-distance rating: how far a vehicle gets on a highway journey with exactly one
fast-charging stop, and a 0-5 star score for that distance.

Leg 1 drives from 100% to 10% state of charge. Leg 2 drives the 80% -> 10% window
after the 10% -> 80% fast charge; its length grows with range and shrinks with the
charge time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from config.long_distance_constants import (
    LONG_DISTANCE_CONSTANTS,
    STAR_RATING_BREAKPOINTS_KM,
    STAR_RATING_VALUES,
    STAR_RATING_STEP,
    MAX_STARS,
)
from src.range_estimation.vehicle_profile import VehicleRangeProfile
from src.utils.logger import get_logger
from src.utils.rounding import round_half_up, round_to

logger = get_logger('long_distance')

LD = LONG_DISTANCE_CONSTANTS

FULL_STAR = "★"
HALF_STAR = "⯨"
EMPTY_STAR = "☆"


@dataclass(frozen=True)
class LongDistanceMetrics:
    leg1_distance_km: float
    leg2_distance_km: float
    one_stop_range_km: float
    star_rating: float
    leg1_duration_hours: float
    leg2_duration_hours: float
    charging_stop_hours: float
    total_duration_hours: float
    leg1_duration_str: str
    leg2_duration_str: str
    total_duration_str: str
    can_fast_charge: bool


def can_fast_charge(profile: VehicleRangeProfile) -> bool:
    """Both a positive 10-80% time and a positive usable capacity are needed"""
    return bool(
        profile.fast_charging_time_min and profile.fast_charging_time_min > 0
        and profile.usable_battery_capacity_kwh and profile.usable_battery_capacity_kwh > 0
    )


def star_rating_for(one_stop_range_km: float) -> float:
    """
    Piecewise-linear star score: under the first breakpoint is 0 stars, then one star
    per 125 km band up to 5 stars. Rounded to the nearest half star.
    """
    if one_stop_range_km < STAR_RATING_BREAKPOINTS_KM[0]:
        return 0.0
    rating = float(np.interp(one_stop_range_km, STAR_RATING_BREAKPOINTS_KM, STAR_RATING_VALUES))
    steps = 1.0 / STAR_RATING_STEP
    return round_half_up(rating * steps) / steps


def format_duration(hours: float) -> str:
    """'45min', '2h' or '2h 15min'"""
    total_minutes = round_half_up(hours * 60)
    h, minutes = divmod(total_minutes, 60)
    if h == 0:
        return f"{minutes}min"
    if minutes == 0:
        return f"{h}h"
    return f"{h}h {minutes}min"


def calculate_long_distance_metrics(profile: Optional[VehicleRangeProfile]) -> Optional[LongDistanceMetrics]:
    """None when the real-world range is not recorded"""
    if profile is None or not profile.real_world_range_km or profile.real_world_range_km <= 0:
        logger.debug("No real-world range recorded, long-distance rating unavailable")
        return None

    decimals = LD['distance_decimals']
    real_range = profile.real_world_range_km
    fast_charge = can_fast_charge(profile)

    leg1_km = round_to(real_range * LD['leg1_usable_fraction'], decimals)
    if fast_charge:
        leg2_km = round_to(LD['leg2_charge_time_constant'] * real_range / profile.fast_charging_time_min, decimals)
    else:
        leg2_km = 0.0
    one_stop_km = round_to(leg1_km + leg2_km, decimals)

    speed = LD['avg_highway_speed_kmh']
    leg1_hours = leg1_km / speed
    leg2_hours = leg2_km / speed if leg2_km > 0 else 0.0
    stop_hours = LD['charging_stop_hours'] if fast_charge else 0.0
    total_hours = leg1_hours + stop_hours + leg2_hours

    return LongDistanceMetrics(
        leg1_distance_km=leg1_km,
        leg2_distance_km=leg2_km,
        one_stop_range_km=one_stop_km,
        star_rating=star_rating_for(one_stop_km),
        leg1_duration_hours=leg1_hours,
        leg2_duration_hours=leg2_hours,
        charging_stop_hours=stop_hours,
        total_duration_hours=total_hours,
        leg1_duration_str=format_duration(leg1_hours),
        leg2_duration_str=format_duration(leg2_hours) if leg2_km > 0 else "N/A",
        total_duration_str=format_duration(total_hours),
        can_fast_charge=fast_charge,
    )


def star_glyphs(rating: float) -> str:
    """Five-character star string, e.g. 3.5 -> '★★★⯨☆'"""
    rating = min(max(float(rating), 0.0), float(MAX_STARS))
    full = int(rating)
    half = 1 if rating - full > 0 else 0
    empty = MAX_STARS - full - half
    return FULL_STAR * full + HALF_STAR * half + EMPTY_STAR * empty
