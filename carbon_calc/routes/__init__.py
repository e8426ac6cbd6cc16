from __future__ import annotations

# ── route lookup ───────────────────────────────────────────────────────────────
from .routes_data import BRAZIL_ROUTES
from .route_index import RouteIndex, get_route_index

# ── external tables ────────────────────────────────────────────────────────────
from .routes_loader import load_routes_csv, routes_from_frame

__all__ = [
      "BRAZIL_ROUTES"
    , "RouteIndex", "get_route_index"
    , "load_routes_csv", "routes_from_frame"
]
