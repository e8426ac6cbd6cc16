# carbon_calc/routes/routes_loader.py
# -*- coding: utf-8 -*-
"""
Route table loader (CSV)
========================

Main entry point
----------------
- load_routes_csv(csv_path) -> RouteIndex

Builds a RouteIndex from an external CSV instead of the seeded table.
Invalid rows are skipped with a warning; if nothing survives a ValueError
is raised, so callers never receive an empty index by accident.

CSV expectations
----------------
A header with at least:
  - 'origin'       (e.g. 'São Paulo, SP')
  - 'destination'  (e.g. 'Rio de Janeiro, RJ')
  - 'distance_km'  (float, > 0)

Column names are case-insensitive; common aliases are auto-normalized
('destiny', 'dest', 'to', 'from', 'distance', 'km').
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from carbon_calc.core.errors import InvalidRouteError
from carbon_calc.core.models import Route
from carbon_calc.core.types import StrPath
from carbon_calc.infra.logging import get_logger
from carbon_calc.routes.route_index import RouteIndex

_log = get_logger(__name__)

__all__ = ["load_routes_csv", "routes_from_frame"]

_COLUMN_ALIASES: Dict[str, tuple] = {
      "origin": ("origin", "from", "source", "origem")
    , "destination": ("destination", "destiny", "dest", "to", "destino")
    , "distance_km": ("distance_km", "distance", "km", "distancia_km")
}


def _resolve_column(cols_map: Dict[str, str], canonical: str) -> Optional[str]:
    for alias in _COLUMN_ALIASES[canonical]:
        if alias in cols_map:
            return cols_map[alias]
    return None


def routes_from_frame(df_raw: pd.DataFrame, *, source: str = "<frame>") -> List[Route]:
    """
    Convert a DataFrame into validated Route objects.

    Parameters
    ----------
    df_raw : pd.DataFrame
        Any frame carrying origin/destination/distance columns (aliases ok).
    source : str
        Label used in log messages.

    Returns
    -------
    List[Route]
        Valid routes in file order. Rows with blank endpoints or a
        non-positive / non-numeric distance are skipped.
    """
    cols_map = {str(c).lower().strip(): c for c in df_raw.columns}
    resolved = {name: _resolve_column(cols_map, name) for name in _COLUMN_ALIASES}
    missing = [name for name, col in resolved.items() if col is None]
    if missing:
        raise ValueError(
            f"{source}: missing required column(s) {missing}; got {list(df_raw.columns)}"
        )

    df = df_raw.rename(columns={col: name for name, col in resolved.items()})
    df = df[list(_COLUMN_ALIASES)].copy()
    df["distance_km"] = pd.to_numeric(df["distance_km"], errors="coerce")

    routes: List[Route] = []
    skipped = 0
    for row in df.itertuples(index=False):
        if pd.isna(row.origin) or pd.isna(row.destination) or pd.isna(row.distance_km):
            skipped += 1
            continue
        try:
            routes.append(Route(str(row.origin), str(row.destination), float(row.distance_km)))
        except InvalidRouteError as exc:
            _log.warning("%s: skipping row → %s", source, exc)
            skipped += 1

    if skipped:
        _log.warning("%s: %d invalid row(s) skipped, %d kept.", source, skipped, len(routes))

    return routes


def load_routes_csv(csv_path: StrPath) -> RouteIndex:
    """
    Load a route table from CSV and build a RouteIndex.

    Raises
    ------
    FileNotFoundError
        If the path does not exist.
    ValueError
        If required columns are missing or no valid route remains.
    """
    path = Path(csv_path)
    if not path.is_file():
        raise FileNotFoundError(f"Route table CSV not found: {path}")

    df_raw = pd.read_csv(path, encoding="utf-8")
    routes = routes_from_frame(df_raw, source=path.name)
    if not routes:
        raise ValueError(f"{path}: no valid routes found.")

    index = RouteIndex(routes)
    _log.info("Loaded route table from '%s': %r", path, index)
    return index
