from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd

from config.ev_catalog import EV_CATALOG
from src.range_estimation.long_distance import calculate_long_distance_metrics, star_glyphs
from src.range_estimation.vehicle_profile import VehicleSpec
from src.utils.logger import get_logger

logger = get_logger('catalog_service')


class CatalogService:
    """Read-only access to the vehicle catalog."""

    def __init__(self, catalog: Dict[str, Dict] = None):
        self._catalog = EV_CATALOG if catalog is None else catalog
        self._specs = {
            vehicle_id: VehicleSpec.from_record(vehicle_id, record)
            for vehicle_id, record in self._catalog.items()
        }
        logger.debug(f"Catalog loaded with {len(self._specs)} vehicles")

    def load_catalog(self) -> pd.DataFrame:
        df = pd.DataFrame.from_dict(self._catalog, orient="index")
        df.index.name = "vehicle_id"
        return df

    def vehicles(self) -> List[VehicleSpec]:
        return list(self._specs.values())

    def get_vehicle(self, vehicle_id: str) -> Optional[VehicleSpec]:
        spec = self._specs.get(vehicle_id)
        if spec is None:
            logger.warning(f"Unknown vehicle id: {vehicle_id}")
        return spec

    def vehicle_options(self) -> Dict[str, str]:
        return {vehicle_id: spec.display_name for vehicle_id, spec in self._specs.items()}

    def overview_frame(self) -> pd.DataFrame:
        """Catalog listing with the long-distance rating added per vehicle"""
        rows = []
        for spec in self._specs.values():
            metrics = calculate_long_distance_metrics(spec.range_profile())
            rows.append({
                "vehicle_id": spec.vehicle_id,
                "Vehicle": spec.display_name,
                "Body": spec.body_style,
                "Price (lakh)": spec.price_lakh,
                "Real-World Range (km)": spec.real_world_range_km,
                "Fast Charge 10-80% (min)": spec.fast_charging_time_min,
                "One-Stop Range (km)": metrics.one_stop_range_km if metrics else None,
                "Stars": metrics.star_rating if metrics else None,
                "Rating": star_glyphs(metrics.star_rating) if metrics else "N/A",
            })
        return pd.DataFrame(rows).set_index("vehicle_id")


catalog_service = CatalogService()
