from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Any

import yaml
from pydantic import BaseModel, Field, conint, confloat, field_validator


DEFAULT_OVERRIDES_PATH = "config/ui_overrides.yaml"


def overrides_path() -> Path:
    return Path(os.getenv("RANGE_STUDIO_OVERRIDES", DEFAULT_OVERRIDES_PATH))


class EstimatorUIConfigSchema(BaseModel):
    # Slider steps on the estimator page
    temperature_step: confloat(ge=0.5, le=5.0) = 1.0
    additional_weight_step: conint(ge=5, le=100) = 25
    average_speed_step: conint(ge=1, le=20) = 5
    mix_mode: str = Field("dividers")
    show_factor_breakdown: bool = True

    @field_validator("mix_mode")
    @classmethod
    def _known_mix_mode(cls, value: str) -> str:
        if value not in ("dividers", "sliders"):
            raise ValueError("mix_mode must be 'dividers' or 'sliders'")
        return value


class CatalogConfigSchema(BaseModel):
    default_vehicle_id: str = Field("tata_nexon_ev_lr")
    market: str = Field("India")
    currency_label: str = Field("lakh")


class ComparisonConfigSchema(BaseModel):
    max_vehicles: conint(ge=2, le=3) = 3


class LoggingConfigSchema(BaseModel):
    mode: str = Field("DEVELOPMENT")

    @field_validator("mode")
    @classmethod
    def _known_mode(cls, value: str) -> str:
        value = value.upper()
        if value not in ("PRODUCTION", "DEVELOPMENT", "DEBUG", "SILENT", "TESTING"):
            raise ValueError(f"Unknown logging mode: {value}")
        return value


class UIOverrides(BaseModel):
    estimator: EstimatorUIConfigSchema = EstimatorUIConfigSchema()
    catalog: CatalogConfigSchema = CatalogConfigSchema()
    comparison: ComparisonConfigSchema = ComparisonConfigSchema()
    logging: LoggingConfigSchema = LoggingConfigSchema()


def load_overrides(path: Path | None = None) -> UIOverrides:
    path = path or overrides_path()
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return UIOverrides(**data)
    return UIOverrides()


def save_overrides(overrides: UIOverrides, path: Path | None = None) -> None:
    path = path or overrides_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(overrides.model_dump(), sort_keys=False), encoding="utf-8")


def merged_runtime_config(path: Path | None = None) -> Dict[str, Any]:
    # Import python configs lazily to avoid circular imports with Streamlit reloads
    from config.range_model_constants import BASELINE_SCENARIO, INPUT_BOUNDS
    from config.long_distance_constants import LONG_DISTANCE_CONSTANTS

    ui = load_overrides(path)

    return {
        "estimator": {
            **ui.estimator.model_dump(),
            "baseline": dict(BASELINE_SCENARIO),
            "bounds": dict(INPUT_BOUNDS),
        },
        "catalog": ui.catalog.model_dump(),
        "comparison": ui.comparison.model_dump(),
        "long_distance": dict(LONG_DISTANCE_CONSTANTS),
        "logging": ui.logging.model_dump(),
    }
