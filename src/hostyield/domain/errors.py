# src/hostyield/domain/errors.py
from __future__ import annotations


class HostyieldError(Exception):
    """Base class for engine errors."""


class UnknownRegion(HostyieldError):
    """Region id does not resolve to a market profile. Not retryable."""

    def __init__(self, region_id: str):
        self.region_id = region_id
        super().__init__(f"Unknown region: {region_id!r}")


class InvalidOverride(HostyieldError):
    """One or more user-supplied inputs are missing or out of range."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid input")
