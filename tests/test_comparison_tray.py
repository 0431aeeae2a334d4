"""
Tests for the comparison tray and the side-by-side table
"""
from config.ev_catalog import EV_CATALOG
from src.comparison.comparison_tray import MAX_COMPARE_VEHICLES, ComparisonTray, comparison_frame
from src.range_estimation.vehicle_profile import VehicleSpec


def _specs():
    return [VehicleSpec.from_record(vid, record) for vid, record in EV_CATALOG.items()]


def test_tray_is_capped():
    tray = ComparisonTray()
    specs = _specs()
    assert not tray.is_comparing
    for spec in specs[:MAX_COMPARE_VEHICLES]:
        assert tray.toggle(spec) is True
    assert tray.is_full
    assert tray.toggle(specs[MAX_COMPARE_VEHICLES]) is False
    assert len(tray.vehicles) == MAX_COMPARE_VEHICLES
    assert not tray.is_selected(specs[MAX_COMPARE_VEHICLES].vehicle_id)


def test_toggle_removes_selected_vehicle():
    tray = ComparisonTray(max_vehicles=2)
    first, second = _specs()[:2]
    tray.toggle(first)
    tray.toggle(second)
    assert tray.toggle(first) is False
    assert [v.vehicle_id for v in tray.vehicles] == [second.vehicle_id]
    tray.remove(second.vehicle_id)
    assert not tray.is_comparing


def test_clear():
    tray = ComparisonTray()
    tray.toggle(_specs()[0])
    tray.clear()
    assert tray.vehicles == []


def test_vehicles_is_a_copy():
    tray = ComparisonTray()
    tray.toggle(_specs()[0])
    tray.vehicles.clear()
    assert tray.is_comparing


def test_comparison_frame(sample_spec):
    other = VehicleSpec.from_record('volvo_ex40', EV_CATALOG['volvo_ex40'])
    frame = comparison_frame([sample_spec, other])
    assert list(frame.columns) == [sample_spec.display_name, other.display_name]

    column = frame[sample_spec.display_name]
    assert column['Price'] == "20.5 lakh"
    assert column['Real-World Range'] == "350 km"
    assert column['Estimated Range (reference conditions)'] == "350 km"
    assert column['Weight'] == "1600 kg"
    assert column['One-Stop Range'] == "437.5 km"
    assert column['Long-Distance Rating'] == "★★★☆☆"
    assert column['Journey Time (one stop)'] == "6h 30min"

    missing = frame[other.display_name]
    assert missing['Real-World Range'] == "N/A"
    assert missing['Estimated Range (reference conditions)'] == "N/A"
    assert missing['Long-Distance Rating'] == "N/A"


def test_empty_comparison_frame():
    assert comparison_frame([]).empty
