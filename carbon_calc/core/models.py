# carbon_calc/core/models.py
# -*- coding: utf-8 -*-

"""
Core domain models (pure dataclasses).

These are small, shared structures used across the project:
    - Route: a known distance between two named locations
    - EmissionResult: CO₂e for one trip in one mode
    - RankedMode: one row of the mode comparison
    - SavingsResult: CO₂e avoided against a baseline
    - PriceEstimate / CreditEstimate: carbon-credit quantity and BRL price band
    - TripEvaluation: full bundle for an origin/destination request

This module deliberately has:
    - no file or CSV imports
    - no logging configuration
    - no emission arithmetic (see carbon_calc.emissions.calculator)

It is safe to import from anywhere.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from carbon_calc.core.errors import InvalidRouteError
from carbon_calc.core.types import RouteKey


def normalize_location(name: str) -> str:
    """Comparison key for a location: trimmed and lower-cased."""
    return str(name).strip().lower()


# ────────────────────────────────────────────────────────────────────────────────
# Route
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Route:
    """
    A known road distance between two locations (unordered).

    Attributes
    ----------
    origin : str
        First endpoint, canonical display casing (e.g. "São Paulo, SP").
    destination : str
        Second endpoint, canonical display casing.
    distance_km : float
        Distance in kilometers. Must be > 0.
    """

    origin: str
    destination: str
    distance_km: float

    def __post_init__(self) -> None:
        origin = str(self.origin).strip()
        destination = str(self.destination).strip()
        if not origin or not destination:
            raise InvalidRouteError(
                f"Route endpoints must be non-blank (origin={self.origin!r}, destination={self.destination!r})."
            )
        try:
            distance = float(self.distance_km)
        except (TypeError, ValueError) as exc:
            raise InvalidRouteError(
                f"Route {origin!r} ↔ {destination!r} has a non-numeric distance {self.distance_km!r}."
            ) from exc
        if not math.isfinite(distance) or distance <= 0:
            raise InvalidRouteError(
                f"Route {origin!r} ↔ {destination!r} must have distance_km > 0 (got {self.distance_km!r})."
            )
        # frozen dataclass: write the cleaned values through object.__setattr__
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "destination", destination)
        object.__setattr__(self, "distance_km", distance)

    @property
    def key(self) -> RouteKey:
        """Unordered pair of normalized endpoints."""
        return frozenset((normalize_location(self.origin), normalize_location(self.destination)))


# ────────────────────────────────────────────────────────────────────────────────
# Calculator results
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EmissionResult:
    mode: str
    distance_km: float
    emission_kg: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RankedMode:
    """
    One row of the mode comparison.

    Attributes
    ----------
    mode : str
        Transport mode key (e.g. "bus").
    emission_kg : float
        CO₂e for the whole distance [kg], 2 decimals.
    percent_vs_car : float
        Emission as a percentage of the car emission, 2 decimals
        (0 when the car emission is 0).
    """

    mode: str
    emission_kg: float
    percent_vs_car: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SavingsResult:
    """
    CO₂e avoided relative to a baseline.

    ``saved_kg`` is negative when the actual emission exceeds the baseline.
    """

    saved_kg: float
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PriceEstimate:
    min: float
    max: float
    average: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CreditEstimate:
    """
    Carbon credits needed to offset an emission and their BRL price band.
    """

    credits_quantity: float
    price_min: float
    price_max: float
    price_average: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ────────────────────────────────────────────────────────────────────────────────
# Full trip evaluation
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TripEvaluation:
    """
    Everything computed for a single origin/destination request.

    Attributes
    ----------
    origin : str
        Origin as given by the caller (trimmed).
    destination : str
        Destination as given by the caller (trimmed).
    distance_km : float
        Distance used for every computation.
    distance_source : str
        "route_index" when resolved from the route table, "manual" when
        passed in by the caller.
    emission : EmissionResult
        Emission of the selected mode.
    baseline_mode : str
        Mode used as the savings baseline (car by default).
    baseline_emission_kg : float
        Emission of the baseline mode for the same distance.
    savings : Optional[SavingsResult]
        Savings against the baseline; None when the selected mode *is*
        the baseline.
    ranking : Tuple[RankedMode, ...]
        Every configured mode, lowest emission first.
    credits : CreditEstimate
        Credits and price band for the selected mode's emission.
    """

    origin: str
    destination: str
    distance_km: float
    distance_source: str
    emission: EmissionResult
    baseline_mode: str
    baseline_emission_kg: float
    savings: Optional[SavingsResult]
    ranking: Tuple[RankedMode, ...]
    credits: CreditEstimate

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
