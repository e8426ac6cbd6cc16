# carbon_calc/core/types.py
# -*- coding: utf-8 -*-

"""
Shared type aliases.

This module centralizes common typing helpers so they can be imported
everywhere without creating circular dependencies.

Contents
--------
- StrPath: str or pathlib.Path
- JSON* aliases: JSONScalar, JSONValue, JSONList, JSONDict
- Number: int or float
- LocationKey / RouteKey: normalized location and unordered-pair keys
"""

from __future__ import annotations

from pathlib import Path
from typing import (
      Dict
    , FrozenSet
    , List
    , Union
)


# ────────────────────────────────────────────────────────────────────────────────
# Path-like
# ────────────────────────────────────────────────────────────────────────────────

StrPath = Union[str, Path]
"""Path representation accepted by the CSV loader (string or Path)."""


# ────────────────────────────────────────────────────────────────────────────────
# JSON-like structures
# ────────────────────────────────────────────────────────────────────────────────

JSONScalar = Union[str, int, float, bool, None]
"""Scalar values allowed inside JSON structures."""

JSONValue = Union["JSONScalar", "JSONList", "JSONDict"]
"""Recursive JSON value type."""

JSONList = List[JSONValue]
"""List of JSON values."""

JSONDict = Dict[str, JSONValue]
"""Dictionary with string keys and JSON values."""


# ────────────────────────────────────────────────────────────────────────────────
# Numeric + location helpers
# ────────────────────────────────────────────────────────────────────────────────

Number = Union[int, float]
"""Numeric value (int or float)."""

LocationKey = str
"""Normalized (trimmed, lower-cased) location name."""

RouteKey = FrozenSet[LocationKey]
"""Unordered pair of normalized endpoints; a self-route has a single member."""
