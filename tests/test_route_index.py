# tests/test_route_index.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import json

import pytest

from carbon_calc.core.errors import InvalidRouteError
from carbon_calc.core.models import Route
from carbon_calc.routes import route_index as route_index_mod
from carbon_calc.routes.route_index import RouteIndex
from carbon_calc.routes.routes_data import BRAZIL_ROUTES


def test_every_seeded_route_matches_both_orientations(index):
    for origin, destination, distance in BRAZIL_ROUTES:
        assert index.find_distance(origin, destination) == distance
        assert index.find_distance(destination, origin) == distance


@pytest.mark.parametrize(
      "origin, destination"
    , [
          ("são paulo, sp", "RIO DE JANEIRO, RJ")
        , ("  São Paulo, SP  ", "Rio de Janeiro, RJ\t")
        , ("SÃO PAULO, SP", " rio de janeiro, rj ")
        , ("Rio de Janeiro, RJ", "são paulo, sp")
    ]
)
def test_normalization_variants(index, origin, destination):
    assert index.find_distance(origin, destination) == 430


def test_reverse_orientation_lookup(index):
    # stored as Curitiba → São Paulo
    assert index.find_distance("São Paulo, SP", "Curitiba, PR") == 408


@pytest.mark.parametrize(
      "origin, destination"
    , [
          ("São Paulo, SP", "Manaus, AM")
        , ("São Paulo", "Rio de Janeiro, RJ")         # no partial matching
        , ("São Paulo, SP", "Rio de Janeiro")
        , ("Atlantis, XX", "El Dorado, YY")
        , ("", "")
    ]
)
def test_unknown_pairs_are_not_found(index, origin, destination):
    assert index.find_distance(origin, destination) is None


def test_same_location_is_not_found_without_self_route(index):
    assert index.find_distance("São Paulo, SP", " são paulo, sp ") is None


def test_explicit_self_route_is_found():
    idx = RouteIndex([Route("Loop, SP", "Loop, SP", 12.5)])
    assert idx.find_distance("loop, sp", "LOOP, SP") == 12.5


def test_all_locations_sorted_and_deduplicated(index):
    locations = index.all_locations()
    assert locations == sorted(locations, key=str.lower)
    assert len(locations) == len({loc.lower() for loc in locations})
    assert "São Paulo, SP" in locations
    assert "Crato, CE" in locations

    endpoints = {name for row in BRAZIL_ROUTES for name in row[:2]}
    assert set(locations) == endpoints


def test_all_locations_keeps_first_seen_casing():
    idx = RouteIndex.from_rows([
          ("Santos, SP", "São Paulo, SP", 72)
        , ("SANTOS, SP", "Campinas, SP", 170)
    ])
    assert idx.all_locations() == ["Campinas, SP", "Santos, SP", "São Paulo, SP"]
    assert idx.find_distance("santos, sp", "campinas, sp") == 170


def test_duplicate_pair_keeps_first_distance(caplog):
    idx = RouteIndex.from_rows([
          ("A, SP", "B, SP", 10)
        , ("b, sp", "a, sp", 99)
    ])
    assert len(idx) == 1
    assert idx.find_distance("A, SP", "B, SP") == 10
    assert "duplicate pair" in caplog.text


def test_identical_duplicate_pair_is_logged(caplog):
    idx = RouteIndex.from_rows([
          ("A, SP", "B, SP", 10)
        , ("A, SP", "B, SP", 10)
    ])
    assert len(idx) == 1
    assert "duplicate pair" in caplog.text


def test_all_locations_orders_by_normalized_name():
    idx = RouteIndex.from_rows([
          ("recife, PE", "Rio Grande, RS", 10)
        , ("Rio de Janeiro, RJ", "Belém, PA", 20)
    ])
    assert idx.all_locations() == ["Belém, PA", "recife, PE", "Rio de Janeiro, RJ", "Rio Grande, RS"]


def test_all_locations_is_restartable(index):
    assert index.all_locations() == index.all_locations()


def test_get_route_index_is_shared():
    assert route_index_mod.get_route_index() is route_index_mod.get_route_index()


@pytest.mark.parametrize(
      "row"
    , [
          ("A, SP", "B, SP", 0)
        , ("A, SP", "B, SP", -5)
        , ("A, SP", "B, SP", float("nan"))
        , ("A, SP", "B, SP", "far")
        , ("  ", "B, SP", 10)
    ]
)
def test_degenerate_routes_are_rejected(row):
    with pytest.raises(InvalidRouteError):
        Route(*row)


def test_route_trims_endpoints():
    route = Route("  Olinda, PE ", "Recife, PE", "8")
    assert route.origin == "Olinda, PE"
    assert route.distance_km == 8.0
    assert route.key == frozenset({"olinda, pe", "recife, pe"})


def test_cli_lookup(capsys):
    rc = route_index_mod.main(["--origin", "são paulo, sp", "--destination", "Curitiba, PR"])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["distance_km"] == 408
    assert payload["status"] == "ok"
    assert "locations" not in payload


def test_cli_lists_locations(capsys):
    rc = route_index_mod.main(["--list"])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert "Brasília, DF" in payload["locations"]
