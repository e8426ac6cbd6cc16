# tests/test_emission_model.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from carbon_calc.core.config import CarbonCreditConfig
from carbon_calc.core.errors import UnknownModeError
from carbon_calc.emissions.model import EmissionModel, get_emission_model, resolve_mode
from carbon_calc.emissions.modes import DEFAULT_MODE_FACTORS, ModeDisplay, ModeFactor, TransportMode


def test_default_factors(model):
    assert model.factor_for(TransportMode.BICYCLE) == 0.0
    assert model.factor_for(TransportMode.CAR) == 0.12
    assert model.factor_for(TransportMode.BUS) == 0.089
    assert model.factor_for(TransportMode.TRUCK) == 0.96


@pytest.mark.parametrize("text", ["car", " Car ", "CAR"])
def test_factor_for_accepts_text(model, text):
    assert model.factor_for(text) == 0.12


@pytest.mark.parametrize("mode", ["plane", "", None, "bike"])
def test_unknown_mode_raises(model, mode, caplog):
    with pytest.raises(UnknownModeError) as exc_info:
        model.factor_for(mode)
    assert isinstance(exc_info.value, KeyError)
    assert "Unknown transport mode" in str(exc_info.value)
    assert "ERROR" in caplog.text


def test_mode_missing_from_model_is_unknown():
    model = EmissionModel({TransportMode.CAR: DEFAULT_MODE_FACTORS[TransportMode.CAR]})
    with pytest.raises(UnknownModeError) as exc_info:
        model.factor_for("bus")
    assert exc_info.value.known == ("car",)


def test_all_modes_in_enum_order(model):
    assert model.all_modes() == (
          TransportMode.BICYCLE
        , TransportMode.CAR
        , TransportMode.BUS
        , TransportMode.TRUCK
    )


def test_credit_constants(model):
    assert model.credit_conversion_ratio() == 1000.0
    assert model.price_band() == (50.0, 150.0)


def test_display_metadata(model):
    assert model.display_for("bus") == ModeDisplay(label="Ônibus", icon="🚌", color="#FFB347")


def test_resolve_mode():
    assert resolve_mode(TransportMode.TRUCK) is TransportMode.TRUCK
    assert resolve_mode(" truck ") is TransportMode.TRUCK
    assert str(TransportMode.TRUCK) == "truck"


def test_negative_factor_rejected():
    bad = {
        TransportMode.CAR: ModeFactor(
              mode=TransportMode.CAR
            , kg_co2_per_km=-0.1
            , display=DEFAULT_MODE_FACTORS[TransportMode.CAR].display
        )
    }
    with pytest.raises(ValueError, match=">= 0"):
        EmissionModel(bad)


@pytest.mark.parametrize(
      "credit"
    , [
          CarbonCreditConfig(kg_per_credit=0)
        , CarbonCreditConfig(price_min_brl=200.0, price_max_brl=150.0)
        , CarbonCreditConfig(price_min_brl=-1.0)
    ]
)
def test_invalid_credit_config_rejected(credit):
    with pytest.raises(ValueError):
        EmissionModel(credit_config=credit)


def test_empty_factor_table_rejected():
    with pytest.raises(ValueError):
        EmissionModel({})


def test_default_model_is_shared():
    assert get_emission_model() is get_emission_model()
