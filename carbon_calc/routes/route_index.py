# carbon_calc/routes/route_index.py
# -*- coding: utf-8 -*-
"""
Static route index
==================

Purpose
-------
Answer "how far is A from B?" from a fixed table of known road distances,
without geocoding or geometry. The index is built once and never mutated.

Public API
----------
- RouteIndex(routes)
    .all_locations() -> List[str]
    .find_distance(origin, destination) -> Optional[float]
    .routes -> Tuple[Route, ...]
- RouteIndex.from_rows(rows) -> RouteIndex
- get_route_index() -> RouteIndex        # process-wide seed index

Matching rules
--------------
- Inputs are trimmed and lower-cased before comparison.
- A route matches in both orientations (A→B and B→A).
- Matching is exact after normalization: no fuzzy or partial matching.
- A miss returns None; lookups never raise.
- Origin == destination returns None unless a self-route was added.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from carbon_calc.core.models import Route, normalize_location
from carbon_calc.core.types import LocationKey, RouteKey
from carbon_calc.infra.logging import get_logger
from carbon_calc.routes.routes_data import BRAZIL_ROUTES

_log = get_logger(__name__)

__all__ = ["RouteIndex", "get_route_index"]


class RouteIndex:
    """
    Immutable lookup of known distances keyed by an unordered pair of
    normalized location names.

    Duplicate pairs keep the first distance seen; later ones are logged
    and ignored.
    """

    __slots__ = ("_routes", "_by_pair", "_display")

    def __init__(self, routes: Iterable[Route]) -> None:
        kept: List[Route] = []
        by_pair: Dict[RouteKey, float] = {}
        display: Dict[LocationKey, str] = {}

        for route in routes:
            key = route.key
            if key in by_pair:
                _log.warning(
                      "RouteIndex: duplicate pair %r ↔ %r (%.1f km) ignored; keeping %.1f km."
                    , route.origin
                    , route.destination
                    , route.distance_km
                    , by_pair[key]
                )
                continue

            by_pair[key] = route.distance_km
            kept.append(route)
            for name in (route.origin, route.destination):
                display.setdefault(normalize_location(name), name)

        self._routes: Tuple[Route, ...] = tuple(kept)
        self._by_pair = by_pair
        self._display = display

        _log.debug(
              "RouteIndex built: routes=%d locations=%d"
            , len(self._routes)
            , len(self._display)
        )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence]) -> "RouteIndex":
        """
        Build from (origin, destination, distance_km) rows.

        Raises InvalidRouteError on the first bad row.
        """
        return cls(Route(origin, destination, distance_km) for origin, destination, distance_km in rows)

    # ---------- read-only views ----------
    @property
    def routes(self) -> Tuple[Route, ...]:
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteIndex(routes={len(self._routes)}, locations={len(self._display)})"

    # ---------- queries ----------
    def all_locations(self) -> List[str]:
        """
        Every known location once, in its first-seen casing, sorted by normalized name.
        """
        return [name for _, name in sorted(self._display.items())]

    def find_distance(self, origin: str, destination: str) -> Optional[float]:
        """
        Distance in km between two locations, in either orientation.

        Returns
        -------
        Optional[float]
            The stored distance, or None if the pair is unknown.
        """
        key = frozenset((normalize_location(origin), normalize_location(destination)))
        distance = self._by_pair.get(key)
        if distance is None:
            _log.debug("find_distance: no route for %r ↔ %r", origin, destination)
        return distance


@lru_cache(maxsize=1)
def get_route_index() -> RouteIndex:
    """
    Return the process-wide index built from the seeded Brazilian routes.

    Built on first call and shared afterwards; the object is read-only so
    concurrent callers need no locking.
    """
    index = RouteIndex.from_rows(BRAZIL_ROUTES)
    _log.info("Seed route index loaded: %r", index)
    return index


# ────────────────────────────────────────────────────────────────────────────────
# CLI / smoke test
# ────────────────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    """
    Small CLI to inspect the seed route table.

    Examples
    --------
    python -m carbon_calc.routes.route_index --list
    python -m carbon_calc.routes.route_index --origin "são paulo, sp" --destination "Curitiba, PR"
    """
    import argparse
    import json

    from carbon_calc.infra.logging import init_logging

    parser = argparse.ArgumentParser(
        description="Seed route table — list locations or look up a distance."
    )
    parser.add_argument("--origin", default=None, help="Origin location ('City, UF').")
    parser.add_argument("--destination", default=None, help="Destination location ('City, UF').")
    parser.add_argument("--list", action="store_true", help="List every known location.")
    parser.add_argument(
          "--log-level"
        , default="WARNING"
        , choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")

    args = parser.parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=False)

    index = get_route_index()
    payload: Dict[str, object] = {}

    if args.list or not (args.origin and args.destination):
        payload["locations"] = index.all_locations()

    if args.origin and args.destination:
        distance = index.find_distance(args.origin, args.destination)
        payload["origin"] = args.origin
        payload["destination"] = args.destination
        payload["distance_km"] = distance
        payload["status"] = "ok" if distance is not None else "no_route"

    if args.pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
