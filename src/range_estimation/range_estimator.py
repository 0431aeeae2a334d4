"""
Real-world range estimator

Multiplicative correction-factor model anchored at a reference scenario
(40°C, AC on, 20/15/65 driving mix, +100 kg payload, 80 km/h). Every factor is a
dimensionless ratio that equals 1.0 at the reference scenario, so the estimate there
is exactly the vehicle's real-world range:

    propulsion = (1 - hvac_share) * mix * speed * weight / temperature_efficiency
    total      = propulsion + hvac
    estimate   = real_world_range / total
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from config.range_model_constants import (
    RANGE_MODEL_CONSTANTS,
    DRIVING_MIX_ENERGY_WEIGHTS,
    BASELINE_SCENARIO,
    INPUT_BOUNDS,
)
from config.logging_config import is_detailed_logging_enabled
from src.range_estimation.driving_mix import (
    BASELINE_MIX,
    SEGMENTS,
    DrivingMix,
    DrivingMixSelector,
    adjust_mix_proportionally,
    normalize_mix,
)
from src.range_estimation.vehicle_profile import VehicleRangeProfile
from src.utils.logger import get_logger
from src.utils.rounding import round_half_up, clamp

logger = get_logger('range_estimator')

C = RANGE_MODEL_CONSTANTS


@dataclass(frozen=True)
class EstimationInputs:
    """User-adjustable conditions. The defaults are the reference scenario."""
    temperature_c: float = BASELINE_SCENARIO['temperature_c']
    ac_on: bool = BASELINE_SCENARIO['ac_on']
    driving_mix: DrivingMix = BASELINE_MIX
    additional_weight_kg: float = BASELINE_SCENARIO['additional_weight_kg']
    average_speed_kmh: float = BASELINE_SCENARIO['average_speed_kmh']

    @classmethod
    def clamped(cls,
                temperature_c: float = BASELINE_SCENARIO['temperature_c'],
                ac_on: bool = BASELINE_SCENARIO['ac_on'],
                driving_mix: DrivingMix = BASELINE_MIX,
                additional_weight_kg: float = BASELINE_SCENARIO['additional_weight_kg'],
                average_speed_kmh: float = BASELINE_SCENARIO['average_speed_kmh']) -> "EstimationInputs":
        """Build inputs from raw widget values, silently clamping each to its domain"""
        if driving_mix.total != 100 or min(driving_mix.as_dict().values()) < 0:
            driving_mix = normalize_mix(driving_mix.city_pct, driving_mix.state_pct, driving_mix.national_pct)
        return cls(
            temperature_c=clamp_input('temperature_c', temperature_c),
            ac_on=bool(ac_on),
            driving_mix=driving_mix,
            additional_weight_kg=clamp_input('additional_weight_kg', additional_weight_kg),
            average_speed_kmh=clamp_input('average_speed_kmh', average_speed_kmh),
        )


def clamp_input(name: str, value: float) -> float:
    low, high = INPUT_BOUNDS[name]
    clamped = float(clamp(float(value), low, high))
    if clamped != value:
        logger.debug(f"{name}={value} outside [{low}, {high}], clamped to {clamped}")
    return clamped


# =============================================================================
# FACTORS
# =============================================================================

def temperature_efficiency(temperature_c: float) -> float:
    """Battery efficiency; only cold derates, no penalty above the comfort band"""
    low = C['temp_comfort_low_c']
    if temperature_c < low:
        return max(C['min_temp_efficiency'], 1.0 - C['cold_derate_per_degree'] * (low - temperature_c))
    return 1.0


def hvac_relative_energy(temperature_c: float, ac_on: bool, average_speed_kmh: float) -> float:
    """
    HVAC energy relative to total baseline energy. HVAC load is time based while
    propulsion is distance based, so it scales with 1/speed.
    """
    if not ac_on or average_speed_kmh <= 0:
        return 0.0
    target = C['hvac_target_cabin_temp_c']
    reference_delta = abs(BASELINE_SCENARIO['temperature_c'] - target)
    return (abs(temperature_c - target) / reference_delta
            * C['hvac_baseline_share']
            * (C['hvac_reference_speed_kmh'] / average_speed_kmh))


def mix_energy(mix: DrivingMix) -> float:
    city, state, national = mix.fractions()
    weights = DRIVING_MIX_ENERGY_WEIGHTS
    return city * weights['city'] + state * weights['state'] + national * weights['national']


def mix_factor(mix: DrivingMix) -> float:
    return mix_energy(mix) / mix_energy(BASELINE_MIX)


def weight_factor(weight_kg: Optional[float], additional_weight_kg: float) -> float:
    """Rolling-resistance correction for payload, 1.0 when the curb weight is unknown"""
    if weight_kg is None:
        return 1.0
    base_mass = weight_kg + C['driver_mass_kg'] + BASELINE_SCENARIO['additional_weight_kg']
    new_mass = weight_kg + C['driver_mass_kg'] + additional_weight_kg
    return 1.0 + C['rolling_weight_sensitivity'] * (new_mass / base_mass - 1.0)


def speed_energy_per_km(speed_kmh: float) -> float:
    # drag dominated
    return C['speed_energy_base'] + C['speed_energy_quadratic'] * speed_kmh ** 2


def speed_factor(average_speed_kmh: float) -> float:
    return speed_energy_per_km(average_speed_kmh) / speed_energy_per_km(BASELINE_SCENARIO['average_speed_kmh'])


@dataclass(frozen=True)
class RangeFactors:
    temperature_efficiency: float
    hvac_energy: float
    mix_factor: float
    weight_factor: float
    speed_factor: float
    relative_propulsion_energy: float
    relative_total_energy: float


def compute_range_factors(weight_kg: Optional[float], inputs: EstimationInputs) -> RangeFactors:
    """All five factors and the integrated relative energy, recomputed from scratch"""
    eff_t = temperature_efficiency(inputs.temperature_c)
    e_hvac = hvac_relative_energy(inputs.temperature_c, inputs.ac_on, inputs.average_speed_kmh)
    f_mix = mix_factor(inputs.driving_mix)
    f_weight = weight_factor(weight_kg, inputs.additional_weight_kg)
    f_speed = speed_factor(inputs.average_speed_kmh)

    propulsion_share = 1.0 - C['hvac_baseline_share']
    propulsion = propulsion_share * f_mix * f_speed * f_weight / eff_t

    return RangeFactors(
        temperature_efficiency=eff_t,
        hvac_energy=e_hvac,
        mix_factor=f_mix,
        weight_factor=f_weight,
        speed_factor=f_speed,
        relative_propulsion_energy=propulsion,
        relative_total_energy=propulsion + e_hvac,
    )


# =============================================================================
# ESTIMATE
# =============================================================================

@dataclass(frozen=True)
class EstimationResult:
    estimated_range_km: Optional[int]
    factors: Optional[RangeFactors] = None

    @property
    def unavailable(self) -> bool:
        return self.estimated_range_km is None


def estimate(profile: Optional[VehicleRangeProfile], inputs: EstimationInputs) -> EstimationResult:
    """
    Estimated range for the given conditions. The result is withheld (None) when the
    real-world range or the curb weight is not recorded, never guessed.
    """
    if profile is None or not profile.real_world_range_km or profile.real_world_range_km <= 0:
        logger.debug("No real-world range recorded, estimate unavailable")
        return EstimationResult(None)
    if not profile.weight_kg or profile.weight_kg <= 0:
        logger.debug("No curb weight recorded, estimate withheld")
        return EstimationResult(None)

    factors = compute_range_factors(profile.weight_kg, inputs)
    if is_detailed_logging_enabled('range_factors'):
        logger.debug(f"Range factors for {inputs}: {factors}")

    if factors.relative_total_energy <= 0:
        logger.debug(f"Non-positive relative energy {factors.relative_total_energy}, estimate withheld")
        return EstimationResult(None, factors)

    return EstimationResult(round_half_up(profile.real_world_range_km / factors.relative_total_energy), factors)


def estimate_range(profile: Optional[VehicleRangeProfile], inputs: EstimationInputs) -> Optional[int]:
    return estimate(profile, inputs).estimated_range_km


# =============================================================================
# SESSION STATE
# =============================================================================

class EstimatorSession:
    """
    Input state of one estimator view. Every setter clamps its value, recomputes the
    whole estimate synchronously and hands the result to `on_result`.
    """

    def __init__(self,
                 profile: Optional[VehicleRangeProfile] = None,
                 on_result: Optional[Callable[[EstimationResult], None]] = None):
        self.profile = profile
        self.inputs = EstimationInputs()
        self._on_result = on_result
        self.mix_selector = DrivingMixSelector(self.inputs.driving_mix, on_change=self._on_mix_change)
        self.result = estimate(self.profile, self.inputs)

    def _recompute(self) -> EstimationResult:
        self.result = estimate(self.profile, self.inputs)
        if self._on_result is not None:
            self._on_result(self.result)
        return self.result

    def _update(self, **changes) -> EstimationResult:
        self.inputs = replace(self.inputs, **changes)
        return self._recompute()

    def _on_mix_change(self, mix: DrivingMix):
        self._update(driving_mix=mix)

    def _apply_mix(self, mix: DrivingMix) -> EstimationResult:
        self.mix_selector.sync(mix)
        return self._update(driving_mix=mix)

    # Vehicle lifecycle -------------------------------------------------------

    def select_vehicle(self, profile: Optional[VehicleRangeProfile]) -> EstimationResult:
        """A new vehicle starts again from the reference scenario"""
        self.mix_selector.unmount()
        self.profile = profile
        self.inputs = EstimationInputs()
        self.mix_selector.sync(self.inputs.driving_mix)
        return self._recompute()

    def reset(self) -> EstimationResult:
        return self.select_vehicle(self.profile)

    # Setters -----------------------------------------------------------------

    def set_temperature(self, temperature_c: float) -> EstimationResult:
        return self._update(temperature_c=clamp_input('temperature_c', temperature_c))

    def set_ac_on(self, ac_on: bool) -> EstimationResult:
        return self._update(ac_on=bool(ac_on))

    def set_additional_weight(self, additional_weight_kg: float) -> EstimationResult:
        return self._update(additional_weight_kg=clamp_input('additional_weight_kg', additional_weight_kg))

    def set_average_speed(self, average_speed_kmh: float) -> EstimationResult:
        return self._update(average_speed_kmh=clamp_input('average_speed_kmh', average_speed_kmh))

    def set_divider_position(self, which: int, raw_percent: float) -> EstimationResult:
        # the selector emits through _on_mix_change, which recomputes
        self.mix_selector.set_divider_position(which, raw_percent)
        return self.result

    def set_divider_positions(self, raw_d0: float, raw_d1: float) -> EstimationResult:
        self.mix_selector.set_divider_positions(raw_d0, raw_d1)
        return self.result

    def adjust_mix_proportionally(self, segment: str, value: float) -> EstimationResult:
        return self._apply_mix(adjust_mix_proportionally(self.inputs.driving_mix, segment, value))

    def set_driving_mix(self, city: float, state: float, national: float) -> EstimationResult:
        return self._apply_mix(normalize_mix(city, state, national))


__all__ = [
    'EstimationInputs',
    'EstimationResult',
    'EstimatorSession',
    'RangeFactors',
    'SEGMENTS',
    'compute_range_factors',
    'estimate',
    'estimate_range',
    'hvac_relative_energy',
    'mix_factor',
    'speed_factor',
    'temperature_efficiency',
    'weight_factor',
]
