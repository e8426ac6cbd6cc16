# carbon_calc/emissions/calculator.py
# -*- coding: utf-8 -*-
"""
Trip emissions, mode comparison and carbon credits
==================================================

Purpose
-------
Pure arithmetic on top of an EmissionModel:

- emission of a trip in one mode;
- every configured mode ranked by emission, with a percentage of the car;
- savings against a baseline emission;
- carbon credits for an emission and their BRL price band.

Public API
----------
- EmissionCalculator(model=None)
    .emission_for(distance_km, mode) -> float
    .all_modes_ranked(distance_km) -> List[RankedMode]
    .savings_vs_baseline(emission_kg, baseline_emission_kg) -> SavingsResult
    .credits_for(emission_kg) -> float
    .price_estimate(credits_quantity) -> PriceEstimate
    .estimate(distance_km, mode) -> EmissionResult
    .credit_estimate(emission_kg) -> CreditEstimate

Rounding
--------
Every output goes through `round_half_up` (scale, round ties away from
zero, descale): 2 decimals for kg/BRL/percentages, 4 for credits.

Nothing is cached; identical inputs always give identical outputs.
"""

from __future__ import annotations

import math
from typing import List, Optional

from carbon_calc.core.config import get_project_config, get_rounding_defaults
from carbon_calc.core.errors import InvalidDistanceError
from carbon_calc.core.models import (
      CreditEstimate
    , EmissionResult
    , PriceEstimate
    , RankedMode
    , SavingsResult
)
from carbon_calc.core.rounding import round_half_up
from carbon_calc.core.types import Number
from carbon_calc.emissions.model import EmissionModel, get_emission_model, resolve_mode
from carbon_calc.emissions.modes import ModeLike, TransportMode
from carbon_calc.infra.logging import get_logger

_log = get_logger(__name__)

__all__ = ["EmissionCalculator", "validate_distance"]

_ROUNDING = get_rounding_defaults()


def validate_distance(distance_km: Number) -> float:
    """
    Return *distance_km* as float, or raise InvalidDistanceError when it is
    not a finite number > 0.
    """
    try:
        distance = float(distance_km)
    except (TypeError, ValueError) as exc:
        raise InvalidDistanceError(f"distance_km must be a number (got {distance_km!r}).") from exc
    if not math.isfinite(distance) or distance <= 0:
        raise InvalidDistanceError(f"distance_km must be > 0 (got {distance_km!r}).")
    return distance


def _require_non_negative(value: Number, name: str) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite number >= 0 (got {value!r}).")
    return value


class EmissionCalculator:
    """
    Stateless calculator bound to an EmissionModel.

    Parameters
    ----------
    model : Optional[EmissionModel]
        Factor table and credit constants; defaults to the process-wide model.
    baseline_mode : Optional[ModeLike]
        Mode used for `percent_vs_car` in rankings. Defaults to the
        project baseline ("car").
    """

    def __init__(
          self
        , model: Optional[EmissionModel] = None
        , *
        , baseline_mode: Optional[ModeLike] = None
    ) -> None:
        self.model = model if model is not None else get_emission_model()
        self.baseline_mode: TransportMode = resolve_mode(
            baseline_mode if baseline_mode is not None else get_project_config().baseline_mode
        )

    # ---------- single trip ----------
    def emission_for(self, distance_km: Number, mode: ModeLike) -> float:
        """
        CO₂ for *distance_km* in *mode* [kg], 2 decimals.

        Raises
        ------
        InvalidDistanceError
            distance_km <= 0 or not finite (checked before any lookup).
        UnknownModeError
            mode is not configured in the model.
        """
        distance = validate_distance(distance_km)
        factor = self.model.factor_for(mode)
        emission = round_half_up(distance * factor, _ROUNDING.value_decimals)
        _log.debug(
              "emission_for: distance_km=%.3f mode=%s factor=%.4f → %.2f kg"
            , distance
            , mode
            , factor
            , emission
        )
        return emission

    def estimate(self, distance_km: Number, mode: ModeLike) -> EmissionResult:
        resolved = resolve_mode(mode)
        return EmissionResult(
              mode=resolved.value
            , distance_km=validate_distance(distance_km)
            , emission_kg=self.emission_for(distance_km, resolved)
        )

    # ---------- comparison ----------
    def all_modes_ranked(self, distance_km: Number) -> List[RankedMode]:
        """
        Every configured mode for *distance_km*, lowest emission first.

        `percent_vs_car` is emission / baseline emission × 100 (2 decimals),
        or 0 when the baseline emits nothing. The sort is stable, so equal
        emissions keep the model's enumeration order.
        """
        distance = validate_distance(distance_km)
        baseline_kg = self.emission_for(distance, self.baseline_mode)

        rows: List[RankedMode] = []
        for mode in self.model.all_modes():
            emission = self.emission_for(distance, mode)
            pct = (emission / baseline_kg) * 100 if baseline_kg > 0 else 0.0
            rows.append(
                RankedMode(
                      mode=mode.value
                    , emission_kg=emission
                    , percent_vs_car=round_half_up(pct, _ROUNDING.value_decimals)
                )
            )

        ranked = sorted(rows, key=lambda r: r.emission_kg)
        _log.debug(
              "all_modes_ranked: distance_km=%.3f → %s"
            , distance
            , [(r.mode, r.emission_kg) for r in ranked]
        )
        return ranked

    def savings_vs_baseline(self, emission_kg: Number, baseline_emission_kg: Number) -> SavingsResult:
        """
        CO₂ avoided against a baseline.

        saved_kg = baseline − actual (negative when actual is higher);
        percentage = saved_kg / baseline × 100, or 0 when the baseline is 0.
        """
        actual = float(emission_kg)
        baseline = float(baseline_emission_kg)
        saved = baseline - actual
        pct = (saved / baseline) * 100 if baseline > 0 else 0.0
        return SavingsResult(
              saved_kg=round_half_up(saved, _ROUNDING.value_decimals)
            , percentage=round_half_up(pct, _ROUNDING.value_decimals)
        )

    # ---------- carbon credits ----------
    def credits_for(self, emission_kg: Number) -> float:
        """Credits needed to offset *emission_kg*, 4 decimals."""
        emission = _require_non_negative(emission_kg, "emission_kg")
        return round_half_up(emission / self.model.credit_conversion_ratio(), _ROUNDING.credit_decimals)

    def price_estimate(self, credits_quantity: Number) -> PriceEstimate:
        """
        BRL price band for *credits_quantity*: min, max and their average.
        """
        credits = _require_non_negative(credits_quantity, "credits_quantity")
        price_min, price_max = self.model.price_band()
        low = credits * price_min
        high = credits * price_max
        return PriceEstimate(
              min=round_half_up(low, _ROUNDING.value_decimals)
            , max=round_half_up(high, _ROUNDING.value_decimals)
            , average=round_half_up((low + high) / 2, _ROUNDING.value_decimals)
        )

    def credit_estimate(self, emission_kg: Number) -> CreditEstimate:
        credits = self.credits_for(emission_kg)
        price = self.price_estimate(credits)
        return CreditEstimate(
              credits_quantity=credits
            , price_min=price.min
            , price_max=price.max
            , price_average=price.average
        )


# ────────────────────────────────────────────────────────────────────────────────
# Tiny CLI / smoke test
# ────────────────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    """
    Minimal CLI for quick checks, e.g.:

    python -m carbon_calc.emissions.calculator --distance-km 430 --mode bus --pretty
    """
    import argparse
    import json

    from carbon_calc.infra.logging import init_logging

    parser = argparse.ArgumentParser(
        description="Emission, mode ranking and carbon credits for a distance [km]."
    )
    parser.add_argument("--distance-km", type=float, required=True, help="Trip distance [km] (> 0).")
    parser.add_argument(
          "--mode"
        , default=TransportMode.CAR.value
        , choices=[m.value for m in TransportMode]
        , help="Transport mode. Default: car"
    )
    parser.add_argument(
          "--log-level"
        , default="WARNING"
        , choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")

    args = parser.parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=False)

    calc = EmissionCalculator()
    try:
        result = calc.estimate(args.distance_km, args.mode)
    except InvalidDistanceError as exc:
        _log.error("%s", exc)
        return 2

    payload = {
          "emission": result.to_dict()
        , "ranking": [r.to_dict() for r in calc.all_modes_ranked(result.distance_km)]
        , "credits": calc.credit_estimate(result.emission_kg).to_dict()
    }

    if args.pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
