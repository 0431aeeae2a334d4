"""
Tests for the catalog service
"""
import pandas as pd

from app.services.catalog_service import CatalogService
from config.ev_catalog import DEFAULT_VEHICLE_ID, EV_CATALOG


def test_load_catalog():
    df = CatalogService().load_catalog()
    assert len(df) == len(EV_CATALOG)
    assert df.index.name == "vehicle_id"
    assert DEFAULT_VEHICLE_ID in df.index


def test_get_vehicle():
    service = CatalogService()
    spec = service.get_vehicle('mg_zs_ev')
    assert spec.real_world_range_km == 350
    assert spec.fast_charging_time_min == 30
    assert service.get_vehicle('does_not_exist') is None


def test_vehicle_options():
    options = CatalogService().vehicle_options()
    assert list(options) == list(EV_CATALOG)
    assert options['mg_comet_ev'].startswith("MG Comet EV")


def test_overview_frame_marks_missing_data():
    overview = CatalogService().overview_frame()
    assert len(overview) == len(EV_CATALOG)
    assert pd.isna(overview.loc['volvo_ex40', 'One-Stop Range (km)'])
    assert overview.loc['volvo_ex40', 'Rating'] == "N/A"
    assert overview.loc['mg_zs_ev', 'One-Stop Range (km)'] == 437.5
    assert overview.loc['mg_zs_ev', 'Stars'] == 3.0


def test_custom_catalog():
    service = CatalogService({'solo': {'manufacturer': 'Solo', 'model': 'One', 'variant': 'Base',
                                       'real_world_range': 150}})
    assert [v.vehicle_id for v in service.vehicles()] == ['solo']
    assert service.overview_frame().loc['solo', 'Stars'] == 0.0
