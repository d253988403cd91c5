"""
Workload catalog — pricing profile per workload type.

Each profile carries a compute rate per consumption unit (DBU) and the storage
the workload produces per unit, in GB. The catalog is built once at import
and is read-only afterwards; photon mode is applied to a derived copy of a
profile, never to the catalog entry.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from core.errors import UnknownWorkloadError

# Photon acceleration writes ~10% more storage per unit.
PHOTON_STORAGE_FACTOR = 1.1


@dataclass(frozen=True)
class WorkloadProfile:
    """Pricing profile for one workload type."""
    compute_rate_per_unit: float
    storage_yield_per_unit: float  # GB per unit

    def __post_init__(self):
        if not (self.compute_rate_per_unit > 0 and self.storage_yield_per_unit > 0):
            raise ValueError(
                "WorkloadProfile rates must be positive, got "
                f"compute={self.compute_rate_per_unit}, storage={self.storage_yield_per_unit}"
            )

    def with_photon(self, factor: float = PHOTON_STORAGE_FACTOR) -> "WorkloadProfile":
        return replace(self, storage_yield_per_unit=self.storage_yield_per_unit * factor)


DEFAULT_WORKLOAD_PROFILES: Dict[str, WorkloadProfile] = {
    "All-Purpose Compute": WorkloadProfile(compute_rate_per_unit=0.55, storage_yield_per_unit=2.5),
    "SQL Compute": WorkloadProfile(compute_rate_per_unit=0.22, storage_yield_per_unit=3.5),
    "DLT Core": WorkloadProfile(compute_rate_per_unit=0.20, storage_yield_per_unit=3.0),
    "DLT Pro": WorkloadProfile(compute_rate_per_unit=0.25, storage_yield_per_unit=3.0),
    "DLT Advanced": WorkloadProfile(compute_rate_per_unit=0.36, storage_yield_per_unit=3.5),
    "GenAI (custom)": WorkloadProfile(compute_rate_per_unit=0.55, storage_yield_per_unit=2.0),
}


class WorkloadCatalog:
    """Read-only mapping of workload name -> WorkloadProfile."""

    def __init__(self, profiles: Mapping[str, WorkloadProfile]):
        self._profiles = MappingProxyType(dict(profiles))

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._profiles)

    @property
    def profiles(self) -> Mapping[str, WorkloadProfile]:
        return self._profiles

    def lookup(self, name: str) -> WorkloadProfile:
        """
        Return the profile for a workload name.

        Raises
        ------
        UnknownWorkloadError
            If `name` is not one of the catalog keys.
        """
        if name not in self._profiles:
            raise UnknownWorkloadError(name, available=self.names())
        return self._profiles[name]

    def effective_profile(self, name: str, *, photon_enabled: bool) -> WorkloadProfile:
        """Catalog profile with the photon storage factor applied when enabled."""
        profile = self.lookup(name)
        return profile.with_photon() if photon_enabled else profile


DEFAULT_CATALOG = WorkloadCatalog(DEFAULT_WORKLOAD_PROFILES)


def lookup(name: str) -> WorkloadProfile:
    return DEFAULT_CATALOG.lookup(name)
