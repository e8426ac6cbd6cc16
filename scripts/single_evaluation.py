#!/usr/bin/env python3
# scripts/single_evaluation.py
# -*- coding: utf-8 -*-

from __future__ import annotations

# --- path bootstrap (must be the first lines of the file) ---
from pathlib import Path
import sys
ROOT = Path(__file__).resolve().parents[1]  # repo root (one level above /scripts)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# ------------------------------------------------------------

import argparse
import json
from typing import Any, Dict, List, Optional

from carbon_calc.app.evaluator import Dependencies, evaluate_trip
from carbon_calc.core.errors import (
      InvalidDistanceError
    , InvalidTripError
    , RouteNotFoundError
    , UnknownModeError
)
from carbon_calc.emissions.modes import TransportMode
from carbon_calc.infra.logging import get_logger, init_logging, log_banner
from carbon_calc.routes.route_index import get_route_index
from carbon_calc.routes.routes_loader import load_routes_csv

log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Evaluate CO₂ emissions, mode comparison and carbon credits for one trip and print JSON."
    )
    p.add_argument("--origin", required=True, help="Origin location ('City, UF').")
    p.add_argument("--destination", required=True, help="Destination location ('City, UF').")
    p.add_argument(
          "--mode"
        , default=TransportMode.CAR.value
        , choices=[m.value for m in TransportMode]
        , help="Transport mode. Default: car"
    )
    p.add_argument(
          "--distance-km"
        , type=float
        , default=None
        , help="Manual distance [km]. If omitted, looked up in the route table."
    )
    p.add_argument(
          "--routes-csv"
        , type=Path
        , default=None
        , help="CSV with columns origin,destination,distance_km. Default: built-in Brazilian routes."
    )

    # UX
    p.add_argument("--pretty", action="store_true", help="Pretty-print JSON.")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--write-log", action="store_true", help="Also write a per-run log file under logs/.")
    return p


def _emit(payload: Dict[str, Any], *, pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    init_logging(level=args.log_level, force=True, write_output=args.write_log)
    log_banner(log, "single_evaluation")

    routes = load_routes_csv(args.routes_csv) if args.routes_csv is not None else get_route_index()
    deps = Dependencies(routes=routes)

    try:
        result = evaluate_trip(
              args.origin
            , args.destination
            , args.mode
            , distance_km=args.distance_km
            , deps=deps
        )
    except RouteNotFoundError as exc:
        log.warning("%s", exc)
        _emit(
            {
                  "origin": args.origin
                , "destination": args.destination
                , "mode": args.mode
                , "distance_km": None
                , "status": "no_route"
            }
            , pretty=args.pretty
        )
        return 1
    except (InvalidTripError, InvalidDistanceError, UnknownModeError) as exc:
        log.error("Invalid input: %s", exc)
        return 2

    payload = result.to_dict()
    payload["status"] = "ok"
    _emit(payload, pretty=args.pretty)
    return 0


if __name__ == "__main__":
    # No extra CLI args → canned smoke test
    #   python scripts/single_evaluation.py
    if len(sys.argv) == 1:
        raise SystemExit(main([
              "--origin", "São Paulo, SP"
            , "--destination", "Rio de Janeiro, RJ"
            , "--mode", "bus"
            , "--pretty"
        ]))

    raise SystemExit(main())
