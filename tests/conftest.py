import sys
from pathlib import Path

import pytest

# Make project root importable
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import ProjectionConfig  # noqa: E402


@pytest.fixture
def flat_config():
    """All-Purpose Compute, no photon, 10k units at $0.02/GB, zero growth, one year."""
    return ProjectionConfig(
        workload_name="All-Purpose Compute",
        photon_enabled=False,
        initial_units=10_000.0,
        storage_price_per_gb=0.02,
        monthly_growth_rate=0.0,
        horizon_years=1,
    )


@pytest.fixture
def growth_config():
    return ProjectionConfig(
        workload_name="SQL Compute",
        photon_enabled=True,
        initial_units=5_000.0,
        storage_price_per_gb=0.03,
        monthly_growth_rate=0.1,
        horizon_years=3,
    )
