# carbon_calc/emissions/model.py
# -*- coding: utf-8 -*-
"""
Emission model
==============

Purpose
-------
Hold the per-mode emission factors and the carbon-credit economics
constants, and answer "what is the factor for this mode?".

Public API
----------
- EmissionModel(factors=None, credit_config=None)
    .factor_for(mode) -> float
    .all_modes() -> Tuple[TransportMode, ...]
    .display_for(mode) -> ModeDisplay
    .credit_conversion_ratio() -> float
    .price_band() -> Tuple[float, float]
- resolve_mode(mode) -> TransportMode
- get_emission_model() -> EmissionModel     # process-wide default

Unknown modes
-------------
Modes outside the configured set raise UnknownModeError. There is no
silent zero fallback: a zero factor always means a zero-emission mode.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Dict, Mapping, Optional, Tuple

from carbon_calc.core.config import CarbonCreditConfig, get_carbon_credit_config
from carbon_calc.core.errors import UnknownModeError
from carbon_calc.emissions.modes import (
      DEFAULT_MODE_FACTORS
    , ModeDisplay
    , ModeFactor
    , ModeLike
    , TransportMode
)
from carbon_calc.infra.logging import get_logger

_log = get_logger(__name__)

__all__ = ["EmissionModel", "resolve_mode", "get_emission_model"]


def resolve_mode(mode: ModeLike) -> TransportMode:
    """
    Coerce a TransportMode or a free-text key (' Car ', 'BUS') into the enum.

    Raises
    ------
    UnknownModeError
        If the text does not name any TransportMode.
    """
    if isinstance(mode, TransportMode):
        return mode
    key = str(mode).strip().lower()
    try:
        return TransportMode(key)
    except ValueError:
        known = tuple(m.value for m in TransportMode)
        _log.error("resolve_mode: unknown transport mode %r (known: %s)", mode, list(known))
        raise UnknownModeError(mode, known) from None


class EmissionModel:
    """
    Read-only per-mode factor table plus credit constants.

    Parameters
    ----------
    factors : Optional[Mapping[TransportMode, ModeFactor]]
        Factor table; defaults to DEFAULT_MODE_FACTORS. Its order is the
        enumeration order used by rankings.
    credit_config : Optional[CarbonCreditConfig]
        kg-per-credit and price band; defaults to the global config.

    Raises
    ------
    ValueError
        On negative/non-finite factors, a non-positive kg-per-credit or an
        invalid price band.
    """

    def __init__(
          self
        , factors: Optional[Mapping[TransportMode, ModeFactor]] = None
        , credit_config: Optional[CarbonCreditConfig] = None
    ) -> None:
        table: Dict[TransportMode, ModeFactor] = dict(
            DEFAULT_MODE_FACTORS if factors is None else factors
        )
        if not table:
            raise ValueError("EmissionModel needs at least one transport mode.")

        for mode, factor in table.items():
            ef = float(factor.kg_co2_per_km)
            if not math.isfinite(ef) or ef < 0:
                raise ValueError(f"Emission factor for {mode} must be a finite number >= 0 (got {ef!r}).")

        credit = credit_config if credit_config is not None else get_carbon_credit_config()
        if not credit.kg_per_credit > 0:
            raise ValueError(f"kg_per_credit must be > 0 (got {credit.kg_per_credit!r}).")
        if not 0 <= credit.price_min_brl <= credit.price_max_brl:
            raise ValueError(
                "Price band must satisfy 0 <= min <= max "
                f"(got min={credit.price_min_brl!r}, max={credit.price_max_brl!r})."
            )

        self._factors = table
        self._credit = credit

    def __repr__(self) -> str:
        modes = ", ".join(f"{m.value}={f.kg_co2_per_km}" for m, f in self._factors.items())
        return f"EmissionModel({modes}; kg_per_credit={self._credit.kg_per_credit})"

    def _entry(self, mode: ModeLike) -> ModeFactor:
        resolved = resolve_mode(mode)
        entry = self._factors.get(resolved)
        if entry is None:
            known = tuple(m.value for m in self._factors)
            _log.error("EmissionModel: mode %r is not configured (configured: %s)", resolved.value, list(known))
            raise UnknownModeError(mode, known)
        return entry

    def factor_for(self, mode: ModeLike) -> float:
        """kg CO₂ per km for *mode*."""
        return float(self._entry(mode).kg_co2_per_km)

    def display_for(self, mode: ModeLike) -> ModeDisplay:
        return self._entry(mode).display

    def all_modes(self) -> Tuple[TransportMode, ...]:
        """Configured modes in enumeration order."""
        return tuple(self._factors)

    def credit_conversion_ratio(self) -> float:
        """kg CO₂ per carbon credit."""
        return float(self._credit.kg_per_credit)

    def price_band(self) -> Tuple[float, float]:
        """(min, max) price per credit in BRL."""
        return float(self._credit.price_min_brl), float(self._credit.price_max_brl)


@lru_cache(maxsize=1)
def get_emission_model() -> EmissionModel:
    """
    Return the process-wide default model (built once, read-only).
    """
    model = EmissionModel()
    _log.debug("Default emission model: %r", model)
    return model
