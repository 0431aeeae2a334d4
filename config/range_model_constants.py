# Range estimator coefficients, all relative to the baseline scenario
RANGE_MODEL_CONSTANTS = {
    # Temperature efficiency (only cold derates)
    'temp_comfort_low_c': 15.0,           # °C - no derate from here up
    'temp_comfort_high_c': 35.0,          # °C - upper end of the comfort band
    'cold_derate_per_degree': 0.005,      # efficiency lost per °C below the band
    'min_temp_efficiency': 0.5,           # floor for the cold derate

    # HVAC
    'hvac_baseline_share': 0.125,         # share of total energy at baseline
    'hvac_target_cabin_temp_c': 22.0,     # °C
    'hvac_reference_speed_kmh': 80.0,     # km/h - HVAC is time based, scales with 1/speed

    # Propulsion
    'driver_mass_kg': 75.0,
    'rolling_weight_sensitivity': 0.35,   # fraction of propulsion energy that scales with mass
    'speed_energy_base': 0.0475,          # energyPerKm(v) = base + quad * v²
    'speed_energy_quadratic': 0.000010625,
}

# Relative energy per km by road class
DRIVING_MIX_ENERGY_WEIGHTS = {
    'city': 1.0,
    'state': 1.25,
    'national': 1.5,
}

# Reference scenario: every factor evaluates to 1.0 here
BASELINE_SCENARIO = {
    'temperature_c': 40.0,
    'ac_on': True,
    'city_pct': 20,
    'state_pct': 15,
    'national_pct': 65,
    'additional_weight_kg': 100.0,
    'average_speed_kmh': 80.0,
}

# Slider domains, values outside are clamped
INPUT_BOUNDS = {
    'temperature_c': (5.0, 45.0),
    'additional_weight_kg': (0.0, 600.0),
    'average_speed_kmh': (40.0, 120.0),
    'mix_pct': (0, 100),
}
