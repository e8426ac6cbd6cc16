# tests/test_routes_loader.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import pandas as pd
import pytest

from carbon_calc.routes.routes_loader import load_routes_csv, routes_from_frame


def _write(tmp_path, text: str):
    path = tmp_path / "routes.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_routes_csv(tmp_path):
    path = _write(
          tmp_path
        , "origin,destination,distance_km\n"
          '"Joinville, SC","Curitiba, PR",130\n'
          '"Natal, RN","João Pessoa, PB",185\n'
    )
    index = load_routes_csv(path)
    assert len(index) == 2
    assert index.find_distance("curitiba, pr", "JOINVILLE, SC") == 130
    assert index.all_locations() == ["Curitiba, PR", "Joinville, SC", "João Pessoa, PB", "Natal, RN"]


def test_column_aliases_are_case_insensitive(tmp_path):
    path = _write(
          tmp_path
        , 'Origem,DESTINY,Km\n"Natal, RN","Mossoró, RN",278\n'
    )
    index = load_routes_csv(path)
    assert index.find_distance("Mossoró, RN", "Natal, RN") == 278


def test_mixed_case_names_sort_by_normalized_name(tmp_path):
    path = _write(
          tmp_path
        , "origin,destination,distance_km\n"
          '"rio grande, RS","Pelotas, RS",60\n'
          '"Rio de Janeiro, RJ","niterói, RJ",13\n'
    )
    index = load_routes_csv(path)
    assert index.all_locations() == ["niterói, RJ", "Pelotas, RS", "Rio de Janeiro, RJ", "rio grande, RS"]
    assert index.find_distance("RIO GRANDE, RS", "pelotas, rs") == 60


def test_invalid_rows_are_skipped(caplog):
    df = pd.DataFrame(
        {
              "origin": ["A, SP", "B, SP", None, "D, SP", "E, SP"]
            , "destination": ["B, SP", "C, SP", "E, SP", "E, SP", "F, SP"]
            , "distance_km": [10, 0, 5, "n/a", 7.5]
        }
    )
    routes = routes_from_frame(df, source="test")
    assert [(r.origin, r.destination, r.distance_km) for r in routes] == [
          ("A, SP", "B, SP", 10.0)
        , ("E, SP", "F, SP", 7.5)
    ]
    assert "3 invalid row(s) skipped" in caplog.text


def test_missing_columns_raise():
    df = pd.DataFrame({"origin": ["A"], "distance_km": [1]})
    with pytest.raises(ValueError, match="destination"):
        routes_from_frame(df)


def test_no_valid_rows_raise(tmp_path):
    path = _write(tmp_path, "origin,destination,distance_km\nA,B,0\n")
    with pytest.raises(ValueError, match="no valid routes"):
        load_routes_csv(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_routes_csv(tmp_path / "nope.csv")
