"""
Derived charging and efficiency figures shown on the vehicle detail page.
Every figure is None when one of its inputs is not recorded.
"""
from __future__ import annotations

from typing import Dict, Optional

from config.long_distance_constants import CHARGING_CONSTANTS
from src.range_estimation.vehicle_profile import VehicleSpec
from src.utils.rounding import round_half_up, round_to


def _positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def efficiency_wh_per_km(spec: VehicleSpec) -> Optional[float]:
    if not (_positive(spec.usable_battery_capacity_kwh) and _positive(spec.real_world_range_km)):
        return None
    return round_to(spec.usable_battery_capacity_kwh * 1000 / spec.real_world_range_km, 1)


def fast_charge_rate_pct_per_hour(spec: VehicleSpec) -> Optional[int]:
    if not (_positive(spec.fast_charging_capacity_kw) and _positive(spec.battery_capacity_kwh)):
        return None
    return round_half_up(spec.fast_charging_capacity_kw / spec.battery_capacity_kwh * 100)


def ac_full_charge_minutes(spec: VehicleSpec, charger_kw: float = None) -> Optional[int]:
    """0-100% on an AC wallbox"""
    charger_kw = charger_kw or CHARGING_CONSTANTS['ac_charger_power_kw']
    if not _positive(spec.battery_capacity_kwh):
        return None
    return round_half_up(spec.battery_capacity_kwh / charger_kw * 60)


def range_added_per_hour_km(spec: VehicleSpec) -> Optional[int]:
    if not (_positive(spec.fast_charging_capacity_kw)
            and _positive(spec.battery_capacity_kwh)
            and _positive(spec.real_world_range_km)):
        return None
    return round_half_up(spec.fast_charging_capacity_kw / spec.battery_capacity_kwh * spec.real_world_range_km)


def _fmt(value, unit: str) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{unit}"


def charging_summary(spec: VehicleSpec) -> Dict[str, str]:
    """Display strings for the charging tab"""
    fast_kw = spec.fast_charging_capacity_kw if _positive(spec.fast_charging_capacity_kw) else None
    fast_min = spec.fast_charging_time_min if _positive(spec.fast_charging_time_min) else None
    return {
        'Fast Charging Capacity': _fmt(fast_kw, " kW"),
        'Fast Charging Time (10-80%)': _fmt(fast_min, " minutes"),
        'Fast Charging Rate': _fmt(fast_charge_rate_pct_per_hour(spec), "% of battery / hour"),
        f"Estimated Charging Time (0-100%, AC {CHARGING_CONSTANTS['ac_charger_power_kw']}kW)":
            _fmt(ac_full_charge_minutes(spec), " minutes"),
        'Range Added Per Hour (Fast Charging)': _fmt(range_added_per_hour_km(spec), " km/hour"),
        'Efficiency': _fmt(efficiency_wh_per_km(spec), " Wh/km"),
    }
