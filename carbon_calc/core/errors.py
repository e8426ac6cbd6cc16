# carbon_calc/core/errors.py
# -*- coding: utf-8 -*-

"""
Exception types shared by the routes, emissions and app layers.

Lookups fail with KeyError/LookupError subclasses, bad inputs with
ValueError subclasses, so callers that already catch the builtin
families keep working.
"""

from __future__ import annotations


class CarbonCalcError(Exception):
    """Base class for every error raised by this package."""


class UnknownModeError(CarbonCalcError, KeyError):
    """A transport mode outside the configured set was requested."""

    def __init__(self, mode: object, known: tuple = ()) -> None:
        self.mode = mode
        self.known = tuple(known)
        super().__init__(
            f"Unknown transport mode {mode!r}; known modes: {list(self.known)}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes
        return str(self.args[0])


class InvalidDistanceError(CarbonCalcError, ValueError):
    """Distance is zero, negative or not a finite number."""


class InvalidRouteError(CarbonCalcError, ValueError):
    """A route with blank endpoints or a non-positive distance."""


class InvalidTripError(CarbonCalcError, ValueError):
    """Trip request is missing its origin or destination."""


class RouteNotFoundError(CarbonCalcError, LookupError):
    """No known route between two locations and no manual distance given."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        super().__init__(
            f"No known route between {origin!r} and {destination!r}; "
            "pass the distance explicitly."
        )
