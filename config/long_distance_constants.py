# One-stop journey model and star scale
LONG_DISTANCE_CONSTANTS = {
    'leg1_usable_fraction': 0.9,          # 100% -> 10% SoC
    'leg2_charge_time_constant': 10.5,    # leg2 = const * range / (10-80% minutes)
    'avg_highway_speed_kmh': 70.0,
    'charging_stop_hours': 0.25,          # 15 min
    'distance_decimals': 1,
}

# Star rating: below the first breakpoint is 0 stars, each 125 km band is worth one star
STAR_RATING_BREAKPOINTS_KM = [200.0, 325.0, 450.0, 575.0, 700.0]
STAR_RATING_VALUES = [1.0, 2.0, 3.0, 4.0, 5.0]
STAR_RATING_STEP = 0.5
MAX_STARS = 5

# Charging tab defaults
CHARGING_CONSTANTS = {
    'ac_charger_power_kw': 7.4,           # typical home wallbox
}
