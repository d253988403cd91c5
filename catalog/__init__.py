"""
Workload catalog — fixed pricing profiles the projection engine looks up by name.
"""

from .workloads import (
    DEFAULT_CATALOG,
    DEFAULT_WORKLOAD_PROFILES,
    PHOTON_STORAGE_FACTOR,
    WorkloadCatalog,
    WorkloadProfile,
    lookup,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_WORKLOAD_PROFILES",
    "PHOTON_STORAGE_FACTOR",
    "WorkloadCatalog",
    "WorkloadProfile",
    "lookup",
]
