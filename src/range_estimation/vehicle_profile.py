"""
Vehicle records consumed by the range and long-distance calculators
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional


def _optional_number(value: Any) -> Optional[float]:
    """Blank strings, None and NaN all mean 'not recorded'"""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def _optional_positive(value: Any) -> Optional[float]:
    """Like _optional_number, but zero and negative figures are also not recorded"""
    number = _optional_number(value)
    if number is None or number <= 0:
        return None
    return number


@dataclass(frozen=True)
class VehicleRangeProfile:
    """Read-only inputs of the range estimator and the long-distance rating"""
    real_world_range_km: Optional[float] = None
    weight_kg: Optional[float] = None
    usable_battery_capacity_kwh: Optional[float] = None
    fast_charging_time_min: Optional[float] = None


@dataclass(frozen=True)
class VehicleSpec:
    """A single catalog variant"""
    vehicle_id: str
    manufacturer: str
    model: str
    variant: str
    body_style: Optional[str] = None
    battery_capacity_kwh: Optional[float] = None
    usable_battery_capacity_kwh: Optional[float] = None
    official_range_km: Optional[float] = None
    real_world_range_km: Optional[float] = None
    fast_charging_capacity_kw: Optional[float] = None
    fast_charging_time_min: Optional[float] = None
    weight_kg: Optional[float] = None
    price_lakh: Optional[float] = None

    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.manufacturer, self.model, self.variant) if part)

    def range_profile(self) -> VehicleRangeProfile:
        return VehicleRangeProfile(
            real_world_range_km=self.real_world_range_km,
            weight_kg=self.weight_kg,
            usable_battery_capacity_kwh=self.usable_battery_capacity_kwh,
            fast_charging_time_min=self.fast_charging_time_min,
        )

    @classmethod
    def from_record(cls, vehicle_id: str, record: Dict[str, Any]) -> "VehicleSpec":
        """Build from a catalog dict (see config.ev_catalog)"""
        return cls(
            vehicle_id=str(vehicle_id),
            manufacturer=str(record.get('manufacturer') or ''),
            model=str(record.get('model') or ''),
            variant=str(record.get('variant') or ''),
            body_style=record.get('body_style') or None,
            battery_capacity_kwh=_optional_positive(record.get('battery_capacity')),
            usable_battery_capacity_kwh=_optional_positive(record.get('usable_battery_capacity')),
            official_range_km=_optional_positive(record.get('official_range')),
            real_world_range_km=_optional_positive(record.get('real_world_range')),
            fast_charging_capacity_kw=_optional_positive(record.get('fast_charging_capacity')),
            fast_charging_time_min=_optional_positive(record.get('fast_charging_time')),
            weight_kg=_optional_positive(record.get('weight')),
            price_lakh=_optional_positive(record.get('price')),
        )
