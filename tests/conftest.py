# tests/conftest.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging

import pytest

from carbon_calc.emissions.calculator import EmissionCalculator
from carbon_calc.emissions.model import EmissionModel
from carbon_calc.routes.route_index import RouteIndex, get_route_index


@pytest.fixture
def index() -> RouteIndex:
    return get_route_index()


@pytest.fixture
def model() -> EmissionModel:
    return EmissionModel()


@pytest.fixture
def calc(model: EmissionModel) -> EmissionCalculator:
    return EmissionCalculator(model)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # CLI tests call init_logging(); drop its handlers and restore the level afterwards
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith("carbon_calc."):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
