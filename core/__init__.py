"""
Core package — configuration, error taxonomy, row schema, and rounding helpers.
No business logic lives here.
"""

from .errors import InvalidConfigError, UnknownWorkloadError
from .schema import MONTH_ROW_FIELDS, ProjectionBounds
from .config import (
    INPUT_LIMITS,
    ProjectionConfig,
    clamp_config,
    validate_config,
)
from .utils import excel_round, require_columns, round_value

__all__ = [
    "InvalidConfigError",
    "UnknownWorkloadError",
    "MONTH_ROW_FIELDS",
    "ProjectionBounds",
    "INPUT_LIMITS",
    "ProjectionConfig",
    "clamp_config",
    "validate_config",
    "excel_round",
    "require_columns",
    "round_value",
]
