from dataclasses import replace

import numpy as np
import pandas as pd
import pytest

from catalog.workloads import DEFAULT_CATALOG
from core.config import INPUT_LIMITS, ProjectionConfig, clamp_config, validate_config
from core.errors import InvalidConfigError, UnknownWorkloadError


def test_defaults_are_valid():
    cfg = ProjectionConfig()
    validate_config(cfg, DEFAULT_CATALOG)
    assert cfg.months == 60


@pytest.mark.parametrize(
    "field, value",
    [
        ("initial_units", 0.0),
        ("initial_units", -5.0),
        ("storage_price_per_gb", 0.0),
        ("monthly_growth_rate", -0.01),
        ("monthly_growth_rate", 0.51),
        ("horizon_years", 0),
        ("horizon_years", 11),
        ("workload_name", ""),
        ("initial_units", float("nan")),
    ],
)
def test_out_of_range_rejected(field, value):
    cfg = replace(ProjectionConfig(), **{field: value})
    with pytest.raises(InvalidConfigError) as exc_info:
        validate_config(cfg)
    assert field in str(exc_info.value)


def test_unknown_workload_rejected_with_catalog():
    cfg = replace(ProjectionConfig(), workload_name="Nope")
    validate_config(cfg)  # no catalog: name only needs to be non-empty
    with pytest.raises(UnknownWorkloadError):
        validate_config(cfg, DEFAULT_CATALOG)


def test_non_config_rejected():
    with pytest.raises(InvalidConfigError):
        validate_config({"workload_name": "SQL Compute"})


def test_from_mapping_ignores_unknown_keys():
    cfg = ProjectionConfig.from_mapping(
        {"workload_name": "DLT Core", "horizon_years": 2, "theme": "dark"}
    )
    assert cfg.workload_name == "DLT Core"
    assert cfg.horizon_years == 2
    assert cfg.storage_price_per_gb == 0.02


def test_clamp_config_pulls_values_into_input_limits():
    cfg = clamp_config(
        workload_name="SQL Compute",
        initial_units=5.0,
        storage_price_per_gb=1.0,
        monthly_growth_rate=0.9,
        horizon_years=25,
    )
    assert cfg.initial_units == INPUT_LIMITS["initial_units"].min_val
    assert cfg.storage_price_per_gb == INPUT_LIMITS["storage_price_per_gb"].max_val
    assert cfg.monthly_growth_rate == 0.5
    assert cfg.horizon_years == 10
    assert isinstance(cfg.horizon_years, int)
    validate_config(cfg, DEFAULT_CATALOG)


def test_clamp_config_keeps_in_range_values():
    cfg = clamp_config(initial_units=20_000, monthly_growth_rate=0.05)
    assert cfg.initial_units == 20_000.0
    assert cfg.monthly_growth_rate == 0.05
    assert cfg.workload_name == ProjectionConfig().workload_name


def test_numpy_scalars_accepted():
    cfg = ProjectionConfig.from_mapping(
        {
            "workload_name": "DLT Pro",
            "photon_enabled": np.bool_(True),
            "initial_units": np.float64(2_000.0),
            "storage_price_per_gb": np.float64(0.05),
            "monthly_growth_rate": np.float64(0.1),
            "horizon_years": np.int64(3),
        }
    )
    assert type(cfg.horizon_years) is int
    assert type(cfg.photon_enabled) is bool
    validate_config(cfg, DEFAULT_CATALOG)


def test_numpy_scalars_in_direct_config_validate():
    cfg = ProjectionConfig(horizon_years=np.int64(2), photon_enabled=np.bool_(False))
    validate_config(cfg, DEFAULT_CATALOG)
    with pytest.raises(InvalidConfigError):
        validate_config(replace(cfg, horizon_years=np.int64(12)))


def test_config_from_frame_row():
    frame = pd.DataFrame([{"workload_name": "SQL Compute", "horizon_years": 4, "initial_units": 3_000.0}])
    cfg = ProjectionConfig.from_mapping(frame.iloc[0].to_dict())
    validate_config(cfg, DEFAULT_CATALOG)
    assert cfg.months == 48
