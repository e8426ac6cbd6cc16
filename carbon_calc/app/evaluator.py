# carbon_calc/app/evaluator.py
# -*- coding: utf-8 -*-

"""
Single-trip evaluation: route lookup → emission → comparison → credits.

`evaluate_trip` is what a front-end runs when a user submits origin,
destination and mode. It never renders anything; it returns a
TripEvaluation the caller can serialize with `.to_dict()`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from carbon_calc.core.errors import InvalidTripError, RouteNotFoundError
from carbon_calc.core.models import TripEvaluation
from carbon_calc.core.types import Number
from carbon_calc.emissions.calculator import EmissionCalculator, validate_distance
from carbon_calc.emissions.model import resolve_mode
from carbon_calc.emissions.modes import ModeLike
from carbon_calc.infra.logging import get_logger
from carbon_calc.routes.route_index import RouteIndex, get_route_index


# ────────────────────────────────────────────────────────────────────────────────
# Logging
# ────────────────────────────────────────────────────────────────────────────────

_log = get_logger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Dependency carrier
# ────────────────────────────────────────────────────────────────────────────────

@dataclass
class Dependencies:
    routes: RouteIndex = field(default_factory=get_route_index)
    calculator: EmissionCalculator = field(default_factory=EmissionCalculator)


DISTANCE_FROM_INDEX = "route_index"
DISTANCE_MANUAL = "manual"


# ────────────────────────────────────────────────────────────────────────────────
# Main entry point
# ────────────────────────────────────────────────────────────────────────────────

def evaluate_trip(
      origin: str
    , destination: str
    , mode: ModeLike
    , *
    , distance_km: Optional[Number] = None
    , deps: Optional[Dependencies] = None
) -> TripEvaluation:
    """
    Evaluate one trip end to end.

    Parameters
    ----------
    origin, destination : str
        Location names ("City, UF"). Required, surrounding blanks ignored.
    mode : TransportMode | str
        Selected transport mode.
    distance_km : Optional[float]
        Manual distance. When given it wins over the route table; when
        omitted the distance comes from `deps.routes`.
    deps : Optional[Dependencies]
        Route index and calculator; defaults to the process-wide ones.

    Returns
    -------
    TripEvaluation
        Savings is None when the selected mode is the baseline mode.

    Raises
    ------
    InvalidTripError
        Blank origin or destination.
    UnknownModeError
        Mode not configured.
    RouteNotFoundError
        No distance given and the pair is not in the route table.
    InvalidDistanceError
        Manual distance <= 0.
    """
    deps = deps if deps is not None else Dependencies()
    calc = deps.calculator

    origin = str(origin or "").strip()
    destination = str(destination or "").strip()
    if not origin or not destination:
        raise InvalidTripError("origin and destination are required.")

    selected = resolve_mode(mode)

    if distance_km is not None:
        distance = validate_distance(distance_km)
        source = DISTANCE_MANUAL
    else:
        found = deps.routes.find_distance(origin, destination)
        if found is None:
            _log.info("evaluate_trip: route not found (%s → %s)", origin, destination)
            raise RouteNotFoundError(origin, destination)
        distance = found
        source = DISTANCE_FROM_INDEX

    emission = calc.estimate(distance, selected)
    baseline = calc.baseline_mode
    baseline_kg = calc.emission_for(distance, baseline)

    savings = None
    if selected is not baseline:
        savings = calc.savings_vs_baseline(emission.emission_kg, baseline_kg)

    result = TripEvaluation(
          origin=origin
        , destination=destination
        , distance_km=distance
        , distance_source=source
        , emission=emission
        , baseline_mode=baseline.value
        , baseline_emission_kg=baseline_kg
        , savings=savings
        , ranking=tuple(calc.all_modes_ranked(distance))
        , credits=calc.credit_estimate(emission.emission_kg)
    )

    _log.info(
          "evaluate_trip: %s → %s distance_km=%.1f (%s) mode=%s emission_kg=%.2f credits=%.4f"
        , origin
        , destination
        , distance
        , source
        , selected.value
        , emission.emission_kg
        , result.credits.credits_quantity
    )
    return result
