"""
Tests for the real-world range estimator and its session state
"""
import itertools

import pytest

from src.range_estimation.driving_mix import BASELINE_MIX, DrivingMix, PointerEvent
from src.range_estimation.range_estimator import (
    EstimationInputs,
    EstimatorSession,
    compute_range_factors,
    estimate,
    estimate_range,
    hvac_relative_energy,
    mix_factor,
    speed_factor,
    temperature_efficiency,
    weight_factor,
)
from src.range_estimation.vehicle_profile import VehicleRangeProfile, VehicleSpec


def test_reference_conditions_return_real_world_range(reference_profile):
    assert estimate_range(reference_profile, EstimationInputs()) == 400


def test_factors_are_neutral_at_reference(reference_profile):
    factors = compute_range_factors(reference_profile.weight_kg, EstimationInputs())
    assert factors.temperature_efficiency == 1.0
    assert factors.mix_factor == 1.0
    assert factors.weight_factor == 1.0
    assert factors.speed_factor == 1.0
    assert factors.hvac_energy == pytest.approx(0.125)
    assert factors.relative_total_energy == pytest.approx(1.0)


def test_cold_weather_reduces_range(reference_profile):
    assert temperature_efficiency(5) == pytest.approx(0.95)
    estimated = estimate_range(reference_profile, EstimationInputs(temperature_c=5))
    assert estimated < 400
    assert estimated == 385


def test_temperature_efficiency_floor():
    assert temperature_efficiency(-200) == 0.5
    assert temperature_efficiency(30) == 1.0
    assert temperature_efficiency(45) == 1.0


def test_ac_off_extends_range(reference_profile):
    assert hvac_relative_energy(40, False, 80) == 0.0
    assert estimate_range(reference_profile, EstimationInputs(ac_on=False)) == 457


def test_hvac_scales_with_time_on_the_road():
    assert hvac_relative_energy(40, True, 40) == pytest.approx(0.25)
    assert hvac_relative_energy(22, True, 80) == 0.0


def test_speed_factor():
    assert speed_factor(120) > 1.0
    assert speed_factor(40) < 1.0


def test_faster_driving_reduces_range(reference_profile):
    slow = estimate_range(reference_profile, EstimationInputs(average_speed_kmh=40))
    fast = estimate_range(reference_profile, EstimationInputs(average_speed_kmh=120))
    assert fast < 400 < slow


def test_highway_heavy_mix_costs_more_energy():
    assert mix_factor(DrivingMix(100, 0, 0)) < 1.0
    assert mix_factor(DrivingMix(0, 0, 100)) > 1.0
    assert mix_factor(BASELINE_MIX) == 1.0


def test_weight_factor():
    assert weight_factor(None, 500) == 1.0
    assert weight_factor(1600, 100) == 1.0
    assert weight_factor(1600, 600) > 1.0
    assert weight_factor(1600, 0) < 1.0


def test_missing_real_world_range_is_unavailable():
    result = estimate(VehicleRangeProfile(real_world_range_km=None, weight_kg=1500), EstimationInputs())
    assert result.unavailable
    assert result.factors is None
    assert estimate(None, EstimationInputs()).unavailable
    assert estimate_range(VehicleRangeProfile(real_world_range_km=0, weight_kg=1500), EstimationInputs()) is None


def test_missing_weight_withholds_estimate():
    profile = VehicleRangeProfile(real_world_range_km=300, weight_kg=None)
    assert estimate_range(profile, EstimationInputs()) is None


def test_zero_weight_withholds_estimate():
    assert estimate_range(VehicleRangeProfile(real_world_range_km=300, weight_kg=0), EstimationInputs()) is None
    spec = VehicleSpec.from_record('x', {'real_world_range': 300, 'weight': 0})
    assert estimate_range(spec.range_profile(), EstimationInputs()) is None


def test_estimate_is_positive_integer_over_input_grid(reference_profile):
    temperatures = [5, 15, 22, 35, 45]
    weights = [0, 300, 600]
    speeds = [40, 80, 120]
    mixes = [DrivingMix(100, 0, 0), BASELINE_MIX, DrivingMix(0, 0, 100)]
    for temp, ac_on, weight, speed, mix in itertools.product(temperatures, (True, False), weights, speeds, mixes):
        inputs = EstimationInputs(temperature_c=temp, ac_on=ac_on, driving_mix=mix,
                                  additional_weight_kg=weight, average_speed_kmh=speed)
        estimated = estimate_range(reference_profile, inputs)
        assert isinstance(estimated, int)
        assert estimated > 0


def test_estimate_is_idempotent(reference_profile):
    inputs = EstimationInputs(temperature_c=12, ac_on=True, driving_mix=DrivingMix(50, 30, 20),
                              additional_weight_kg=250, average_speed_kmh=95)
    assert estimate(reference_profile, inputs) == estimate(reference_profile, inputs)


def test_clamped_inputs():
    inputs = EstimationInputs.clamped(temperature_c=100, additional_weight_kg=-10,
                                      average_speed_kmh=500, driving_mix=DrivingMix(1, 1, 2))
    assert inputs.temperature_c == 45
    assert inputs.additional_weight_kg == 0
    assert inputs.average_speed_kmh == 120
    assert inputs.driving_mix == DrivingMix(25, 25, 50)


class TestEstimatorSession:

    def test_starts_at_reference(self, reference_profile):
        session = EstimatorSession(reference_profile)
        assert session.inputs == EstimationInputs()
        assert session.result.estimated_range_km == 400

    def test_every_setter_notifies(self, reference_profile):
        results = []
        session = EstimatorSession(reference_profile, on_result=results.append)
        session.set_temperature(5)
        session.set_ac_on(False)
        session.set_additional_weight(300)
        session.set_average_speed(100)
        session.set_divider_position(0, 50)
        session.adjust_mix_proportionally('national', 80)
        session.set_driving_mix(1, 1, 2)
        assert len(results) == 7
        assert results[-1] is session.result
        assert all(r.estimated_range_km > 0 for r in results)

    def test_setters_clamp_silently(self, reference_profile):
        session = EstimatorSession(reference_profile)
        session.set_temperature(-20)
        session.set_additional_weight(9000)
        session.set_average_speed(10)
        assert session.inputs.temperature_c == 5
        assert session.inputs.additional_weight_kg == 600
        assert session.inputs.average_speed_kmh == 40

    def test_divider_drag_updates_mix(self, reference_profile):
        session = EstimatorSession(reference_profile)
        session.set_divider_position(0, 50)
        assert session.inputs.driving_mix == DrivingMix(35, 0, 65)

    def test_proportional_adjust_moves_dividers(self, reference_profile):
        session = EstimatorSession(reference_profile)
        session.adjust_mix_proportionally('city', 40)
        assert session.inputs.driving_mix == DrivingMix(40, 11, 49)
        assert session.mix_selector.dividers == (40, 51)

    def test_reset_and_vehicle_change(self, reference_profile):
        session = EstimatorSession(reference_profile)
        session.set_temperature(5)
        session.set_driving_mix(0, 0, 1)
        session.reset()
        assert session.inputs == EstimationInputs()
        assert session.mix_selector.mix == BASELINE_MIX
        assert session.result.estimated_range_km == 400

        session.set_average_speed(120)
        session.select_vehicle(VehicleRangeProfile(real_world_range_km=None))
        assert session.inputs.average_speed_kmh == 80
        assert session.result.unavailable

    def test_vehicle_change_releases_drag(self, reference_profile):
        session = EstimatorSession(reference_profile)
        session.mix_selector.pointer_down(1)
        session.select_vehicle(reference_profile)
        assert not session.mix_selector.drag.is_capturing

    def test_infinite_divider_position_is_clamped(self, reference_profile):
        session = EstimatorSession(reference_profile)
        session.set_divider_position(0, float('-inf'))
        assert session.inputs.driving_mix == DrivingMix(0, 35, 65)
        session.set_divider_position(1, float('inf'))
        assert session.inputs.driving_mix == DrivingMix(0, 100, 0)
        assert session.result.estimated_range_km > 0

    def test_both_dividers_moved_together(self, reference_profile):
        results = []
        session = EstimatorSession(reference_profile, on_result=results.append)
        session.set_divider_positions(50, 60)
        assert session.inputs.driving_mix == DrivingMix(50, 10, 40)
        assert len(results) == 1

    def test_pointer_drag_flows_into_estimate(self, reference_profile):
        results = []
        session = EstimatorSession(reference_profile, on_result=results.append)
        selector = session.mix_selector
        selector.set_container(0, 200)

        selector.pointer_down(0)
        selector.pointer_move(PointerEvent(100))
        assert session.inputs.driving_mix == DrivingMix(35, 0, 65)
        selector.pointer_move(PointerEvent.from_touches([20]))
        selector.pointer_up()
        selector.pointer_move(PointerEvent(180))

        assert session.inputs.driving_mix == DrivingMix(10, 25, 65)
        assert len(results) == 2
        assert results[-1] is session.result
        assert session.result == estimate(reference_profile, session.inputs)
        assert session.result.estimated_range_km != 400
