from __future__ import annotations

# ── modes & factors ────────────────────────────────────────────────────────────
from .modes import DEFAULT_MODE_FACTORS, ModeDisplay, ModeFactor, TransportMode
from .model import EmissionModel, get_emission_model, resolve_mode

# ── arithmetic (public API) ────────────────────────────────────────────────────
from .calculator import EmissionCalculator, validate_distance

__all__ = [
    # modes
      "TransportMode", "ModeDisplay", "ModeFactor", "DEFAULT_MODE_FACTORS"
    # model
    , "EmissionModel", "get_emission_model", "resolve_mode"
    # calculator
    , "EmissionCalculator", "validate_distance"
]
