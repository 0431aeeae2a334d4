"""
Shared fixtures for the EV Range Studio test suite
"""
import os
import sys

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from src.utils.logger import setup_logger
from src.range_estimation.vehicle_profile import VehicleRangeProfile, VehicleSpec


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    setup_logger('TESTING')


@pytest.fixture
def reference_profile():
    """400 km real-world range, 1600 kg"""
    return VehicleRangeProfile(real_world_range_km=400, weight_kg=1600,
                               usable_battery_capacity_kwh=50, fast_charging_time_min=30)


@pytest.fixture
def sample_spec():
    return VehicleSpec.from_record('test_ev', {
        'manufacturer': 'Test',
        'model': 'EV',
        'variant': 'Long Range',
        'body_style': 'SUV',
        'battery_capacity': 52.0,
        'usable_battery_capacity': 50.0,
        'official_range': 480,
        'real_world_range': 350,
        'fast_charging_capacity': 52,
        'fast_charging_time': 30,
        'weight': 1600,
        'price': 20.5,
    })
