"""
Error taxonomy for the projection core.

Both errors are raised before any month is computed; once a config passes
validation the engine cannot fail mid-run.
"""

from __future__ import annotations


class InvalidConfigError(ValueError):
    """A ProjectionConfig field is outside its declared range, or the workload is missing/unknown."""


class UnknownWorkloadError(InvalidConfigError, KeyError):
    """Catalog lookup for a workload name that is not one of the catalog keys."""

    def __init__(self, name: str, available=()):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown workload '{name}'. "
            f"Available: {list(self.available)}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
