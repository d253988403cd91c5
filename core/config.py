"""
Projection configuration.

ProjectionConfig is the engine's sole input and fully determines its output.
INPUT_LIMITS are the bounds of the dashboard controls; clamp_config is the
input surface's job, validate_config is the engine's.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np
from pydantic import ValidationError

from .errors import InvalidConfigError, UnknownWorkloadError
from .schema import ProjectionBounds

DEFAULT_WORKLOAD = "All-Purpose Compute"


def _plain(value: Any) -> Any:
    """numpy scalars (pandas rows, numpy-backed widgets) as builtin Python values."""
    return value.item() if isinstance(value, np.generic) else value


@dataclass(frozen=True)
class ProjectionConfig:
    workload_name: str = DEFAULT_WORKLOAD
    photon_enabled: bool = False
    initial_units: float = 10_000.0
    storage_price_per_gb: float = 0.02
    monthly_growth_rate: float = 0.15
    horizon_years: int = 5

    @property
    def months(self) -> int:
        return self.horizon_years * 12

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ProjectionConfig":
        """Build a config from form values or a saved scenario dict; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: _plain(v) for k, v in values.items() if k in known})


@dataclass(frozen=True)
class InputLimit:
    """Bounds and step of one numeric dashboard control."""
    min_val: float
    max_val: float
    step: float

    def clamp(self, value: float) -> float:
        return min(max(value, self.min_val), self.max_val)


# Slider ranges of the input surface. Narrower than the engine's accepted
# ranges (the engine only requires units > 0 and price > 0).
INPUT_LIMITS: Dict[str, InputLimit] = {
    "initial_units": InputLimit(min_val=1_000.0, max_val=100_000.0, step=1_000.0),
    "storage_price_per_gb": InputLimit(min_val=0.001, max_val=0.10, step=0.001),
    "monthly_growth_rate": InputLimit(min_val=0.0, max_val=0.5, step=0.01),
    "horizon_years": InputLimit(min_val=1, max_val=10, step=1),
}


def clamp_config(**values: Any) -> ProjectionConfig:
    """
    Clamp numeric form values into INPUT_LIMITS and build a ProjectionConfig.

    Missing keys fall back to the ProjectionConfig defaults.
    """
    clamped = dict(values)
    for name, limit in INPUT_LIMITS.items():
        if name not in clamped or clamped[name] is None:
            continue
        clamped[name] = limit.clamp(clamped[name])
    if "horizon_years" in clamped and clamped["horizon_years"] is not None:
        clamped["horizon_years"] = int(clamped["horizon_years"])
    if "initial_units" in clamped and clamped["initial_units"] is not None:
        clamped["initial_units"] = float(clamped["initial_units"])
    return ProjectionConfig.from_mapping(clamped)


def _failed_fields(exc: ValidationError) -> Tuple[str, ...]:
    return tuple(".".join(str(p) for p in err["loc"]) for err in exc.errors())


def validate_config(config: ProjectionConfig, catalog: Optional[Any] = None) -> None:
    """
    Reject a config that violates its declared ranges.

    Raises InvalidConfigError (or UnknownWorkloadError when `catalog` is given
    and does not contain the workload). Never clamps.
    """
    if not isinstance(config, ProjectionConfig):
        raise InvalidConfigError(
            f"Expected ProjectionConfig, got {type(config).__name__}."
        )
    try:
        ProjectionBounds.model_validate(
            {k: _plain(v) for k, v in asdict(config).items()}
        )
    except ValidationError as exc:
        bad = _failed_fields(exc)
        raise InvalidConfigError(
            f"Invalid projection config fields {list(bad)}: {exc.error_count()} error(s)."
        ) from exc

    if catalog is not None and config.workload_name not in catalog:
        raise UnknownWorkloadError(config.workload_name, available=catalog.names())
