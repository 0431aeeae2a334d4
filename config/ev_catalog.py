# Popular EVs in the Indian market, METRIC specs, price in lakh rupees
EV_CATALOG = {
    'tata_nexon_ev_lr': {
        'manufacturer': 'Tata',
        'model': 'Nexon EV',
        'variant': 'Long Range 40.5 kWh',
        'body_style': 'SUV',
        'battery_capacity': 40.5,           # kWh
        'usable_battery_capacity': 38.0,    # kWh
        'official_range': 465,              # km (MIDC)
        'real_world_range': 330,            # km
        'fast_charging_capacity': 50,       # kW
        'fast_charging_time': 56,           # min (10-80%)
        'weight': 1460,                     # kg
        'price': 16.99,                     # lakh
    },
    'tata_tiago_ev': {
        'manufacturer': 'Tata',
        'model': 'Tiago EV',
        'variant': 'Long Range 24 kWh',
        'body_style': 'Hatchback',
        'battery_capacity': 24.0,
        'usable_battery_capacity': 21.5,
        'official_range': 315,
        'real_world_range': 210,
        'fast_charging_capacity': 25,
        'fast_charging_time': 58,
        'weight': 1235,
        'price': 11.89,
    },
    'mg_zs_ev': {
        'manufacturer': 'MG',
        'model': 'ZS EV',
        'variant': 'Exclusive Plus',
        'body_style': 'SUV',
        'battery_capacity': 50.3,
        'usable_battery_capacity': 48.0,
        'official_range': 461,
        'real_world_range': 350,
        'fast_charging_capacity': 76,
        'fast_charging_time': 30,
        'weight': 1620,
        'price': 25.44,
    },
    'mg_comet_ev': {
        'manufacturer': 'MG',
        'model': 'Comet EV',
        'variant': 'Plush',
        'body_style': 'Hatchback',
        'battery_capacity': 17.3,
        'usable_battery_capacity': 16.0,
        'official_range': 230,
        'real_world_range': 165,
        'fast_charging_capacity': None,     # AC only
        'fast_charging_time': None,
        'weight': 815,
        'price': 9.14,
    },
    'mahindra_xuv400_el': {
        'manufacturer': 'Mahindra',
        'model': 'XUV400',
        'variant': 'EL Pro 39.4 kWh',
        'body_style': 'SUV',
        'battery_capacity': 39.4,
        'usable_battery_capacity': 34.5,
        'official_range': 456,
        'real_world_range': 310,
        'fast_charging_capacity': 50,
        'fast_charging_time': 50,
        'weight': 1578,
        'price': 17.69,
    },
    'hyundai_ioniq_5': {
        'manufacturer': 'Hyundai',
        'model': 'Ioniq 5',
        'variant': 'RWD 72.6 kWh',
        'body_style': 'Crossover',
        'battery_capacity': 72.6,
        'usable_battery_capacity': 70.0,
        'official_range': 631,
        'real_world_range': 470,
        'fast_charging_capacity': 350,
        'fast_charging_time': 18,
        'weight': 1910,
        'price': 46.05,
    },
    'kia_ev6_gt_line': {
        'manufacturer': 'Kia',
        'model': 'EV6',
        'variant': 'GT Line AWD',
        'body_style': 'Crossover',
        'battery_capacity': 77.4,
        'usable_battery_capacity': 74.0,
        'official_range': 708,
        'real_world_range': 480,
        'fast_charging_capacity': 350,
        'fast_charging_time': 18,
        'weight': 2105,
        'price': 65.97,
    },
    'byd_atto_3': {
        'manufacturer': 'BYD',
        'model': 'Atto 3',
        'variant': 'Extended Range',
        'body_style': 'SUV',
        'battery_capacity': 60.48,
        'usable_battery_capacity': 60.0,
        'official_range': 521,
        'real_world_range': 400,
        'fast_charging_capacity': 80,
        'fast_charging_time': 50,
        'weight': 1750,
        'price': 33.99,
    },
    'citroen_ec3': {
        'manufacturer': 'Citroen',
        'model': 'eC3',
        'variant': 'Feel',
        'body_style': 'Hatchback',
        'battery_capacity': 29.2,
        'usable_battery_capacity': 27.2,
        'official_range': 320,
        'real_world_range': 230,
        'fast_charging_capacity': 30,
        'fast_charging_time': 57,
        'weight': None,                     # not published yet
        'price': 12.76,
    },
    'volvo_ex40': {
        'manufacturer': 'Volvo',
        'model': 'EX40',
        'variant': 'Ultimate Twin',
        'body_style': 'SUV',
        'battery_capacity': 78.0,
        'usable_battery_capacity': 75.0,
        'official_range': None,             # awaiting ARAI certification
        'real_world_range': None,
        'fast_charging_capacity': 150,
        'fast_charging_time': 28,
        'weight': 2188,
        'price': 56.10,
    },
}

DEFAULT_VEHICLE_ID = 'tata_nexon_ev_lr'
