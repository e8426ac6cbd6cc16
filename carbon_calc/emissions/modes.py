# carbon_calc/emissions/modes.py
# -*- coding: utf-8 -*-
"""
Transport modes and their default per-km factors.

Factors are kg CO₂ per km traveled, planning-level averages per vehicle
(not per passenger). Bicycle stays exactly 0 so it can serve as the
zero-emission reference in rankings.

Display metadata (pt-BR label, icon, color) travels with each mode as
reference data for callers that render results; the calculator never
reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class TransportMode(str, Enum):
    """
    Closed set of transport modes.

    Iteration order is the order used for rankings before sorting,
    so ties keep this order.
    """

    BICYCLE = "bicycle"
    CAR = "car"
    BUS = "bus"
    TRUCK = "truck"

    def __str__(self) -> str:
        return self.value


ModeLike = Union[TransportMode, str]


@dataclass(frozen=True)
class ModeDisplay:
    label: str
    icon: str
    color: str


@dataclass(frozen=True)
class ModeFactor:
    """
    Per-mode emission factor.

    kg_co2_per_km : float
        Tailpipe CO₂ per km traveled. Must be >= 0.
    display : ModeDisplay
        Presentation metadata; not used in any arithmetic.
    """
    mode: TransportMode
    kg_co2_per_km: float
    display: ModeDisplay


# Canonical factors. Edit here to refine them; the rest of the code iterates
# whatever this table holds.
DEFAULT_MODE_FACTORS: Dict[TransportMode, ModeFactor] = {
    TransportMode.BICYCLE: ModeFactor(
          mode=TransportMode.BICYCLE
        , kg_co2_per_km=0.0         # zero emission
        , display=ModeDisplay(label="Bicicleta", icon="🚴", color="#00AA00")
    )
    , TransportMode.CAR: ModeFactor(
          mode=TransportMode.CAR
        , kg_co2_per_km=0.12        # ≈ 120 g CO₂ / km
        , display=ModeDisplay(label="Carro", icon="🚗", color="#FF6B6B")
    )
    , TransportMode.BUS: ModeFactor(
          mode=TransportMode.BUS
        , kg_co2_per_km=0.089       # ≈ 89 g CO₂ / km
        , display=ModeDisplay(label="Ônibus", icon="🚌", color="#FFB347")
    )
    , TransportMode.TRUCK: ModeFactor(
          mode=TransportMode.TRUCK
        , kg_co2_per_km=0.96        # ≈ 960 g CO₂ / km
        , display=ModeDisplay(label="Caminhão", icon="🚚", color="#DC143C")
    )
}

__all__ = [
      "TransportMode", "ModeLike", "ModeDisplay", "ModeFactor"
    , "DEFAULT_MODE_FACTORS"
]
