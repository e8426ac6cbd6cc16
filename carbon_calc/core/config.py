# carbon_calc/core/config.py
# -*- coding: utf-8 -*-

"""
Core configuration models and globals.

This module centralizes *pure* configuration structures that are
independent of any presentation or I/O layer.

It is meant to be safe to import from anywhere.

Current contents
----------------
- ProjectConfig: high-level defaults for the whole project
- CarbonCreditConfig: kg-per-credit ratio and BRL price band
- RoundingDefaults: decimal places used by the calculator
"""

from __future__ import annotations

from dataclasses import dataclass


# ────────────────────────────────────────────────────────────────────────────────
# High-level project configuration
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProjectConfig:
    """
    Global project configuration.

    Attributes
    ----------
    default_country : str
        ISO 3166-1 alpha-2 country code of the seeded route table.
    default_language : str
        Language/locale tag used for mode labels.
    currency : str
        Currency of the carbon-credit price band.
    baseline_mode : str
        Transport mode every other mode is compared against.
    """

    default_country: str = "BR"
    default_language: str = "pt-BR"
    currency: str = "BRL"
    baseline_mode: str = "car"


# ────────────────────────────────────────────────────────────────────────────────
# Carbon-credit economics
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CarbonCreditConfig:
    """
    Carbon-credit conversion constants.

    Attributes
    ----------
    kg_per_credit : float
        Mass of CO₂ (kg) represented by one credit.
    price_min_brl : float
        Lower bound of the market price per credit [BRL].
    price_max_brl : float
        Upper bound of the market price per credit [BRL].
    """

    kg_per_credit: float = 1000.0
    price_min_brl: float = 50.0
    price_max_brl: float = 150.0


# ────────────────────────────────────────────────────────────────────────────────
# Rounding defaults
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RoundingDefaults:
    """
    Decimal places applied to calculator outputs.

    Credits keep more precision because typical quantities are small
    fractions of a credit.
    """

    value_decimals: int = 2
    credit_decimals: int = 4


# ────────────────────────────────────────────────────────────────────────────────
# Singleton-style instances
# ────────────────────────────────────────────────────────────────────────────────

# Global, immutable configuration objects used as defaults.
PROJECT_CONFIG = ProjectConfig()
CARBON_CREDIT_CONFIG = CarbonCreditConfig()
ROUNDING_DEFAULTS = RoundingDefaults()


def get_project_config() -> ProjectConfig:
    """
    Return the global project configuration.

    Provided as a function in case this ever needs to become dynamic
    (e.g. loaded from a file or environment variables) without changing
    call sites.
    """
    return PROJECT_CONFIG


def get_carbon_credit_config() -> CarbonCreditConfig:
    """
    Return the global carbon-credit constants.
    """
    return CARBON_CREDIT_CONFIG


def get_rounding_defaults() -> RoundingDefaults:
    return ROUNDING_DEFAULTS
