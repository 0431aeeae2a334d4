from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from src.range_estimation.charging_metrics import efficiency_wh_per_km
from src.range_estimation.long_distance import calculate_long_distance_metrics, star_glyphs
from src.range_estimation.range_estimator import EstimationInputs, estimate_range
from src.range_estimation.vehicle_profile import VehicleSpec
from src.utils.logger import get_logger

logger = get_logger('comparison_tray')

MAX_COMPARE_VEHICLES = 3


class ComparisonTray:
    """Vehicles picked for side-by-side comparison, at most `max_vehicles`."""

    def __init__(self, max_vehicles: int = MAX_COMPARE_VEHICLES):
        self.max_vehicles = max_vehicles
        self._vehicles: List[VehicleSpec] = []

    @property
    def vehicles(self) -> List[VehicleSpec]:
        return list(self._vehicles)

    @property
    def is_comparing(self) -> bool:
        return bool(self._vehicles)

    @property
    def is_full(self) -> bool:
        return len(self._vehicles) >= self.max_vehicles

    def is_selected(self, vehicle_id: str) -> bool:
        return any(v.vehicle_id == vehicle_id for v in self._vehicles)

    def toggle(self, vehicle: VehicleSpec) -> bool:
        """Add or remove a vehicle. Returns whether it is selected afterwards."""
        if self.is_selected(vehicle.vehicle_id):
            self.remove(vehicle.vehicle_id)
            return False
        if self.is_full:
            logger.debug(f"Comparison full ({self.max_vehicles}), ignoring {vehicle.vehicle_id}")
            return False
        self._vehicles.append(vehicle)
        return True

    def remove(self, vehicle_id: str):
        self._vehicles = [v for v in self._vehicles if v.vehicle_id != vehicle_id]

    def clear(self):
        self._vehicles = []


def _value(value, unit: str = "") -> str:
    if value is None:
        return "N/A"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{unit}"


def comparison_frame(vehicles: Sequence[VehicleSpec]) -> pd.DataFrame:
    """One column per vehicle, one row per compared figure"""
    baseline = EstimationInputs()
    columns = {}
    for spec in vehicles:
        profile = spec.range_profile()
        metrics = calculate_long_distance_metrics(profile)
        columns[spec.display_name] = {
            'Price': _value(spec.price_lakh, " lakh"),
            'Official Range': _value(spec.official_range_km, " km"),
            'Real-World Range': _value(spec.real_world_range_km, " km"),
            'Estimated Range (reference conditions)': _value(estimate_range(profile, baseline), " km"),
            'Battery Capacity': _value(spec.battery_capacity_kwh, " kWh"),
            'Usable Capacity': _value(spec.usable_battery_capacity_kwh, " kWh"),
            'Efficiency': _value(efficiency_wh_per_km(spec), " Wh/km"),
            'Fast Charging Capacity': _value(spec.fast_charging_capacity_kw, " kW"),
            'Fast Charging Time (10-80%)': _value(spec.fast_charging_time_min, " min"),
            'Weight': _value(spec.weight_kg, " kg"),
            'One-Stop Range': _value(metrics.one_stop_range_km if metrics else None, " km"),
            'Long-Distance Rating': star_glyphs(metrics.star_rating) if metrics else "N/A",
            'Journey Time (one stop)': metrics.total_duration_str if metrics else "N/A",
        }
    return pd.DataFrame(columns)
