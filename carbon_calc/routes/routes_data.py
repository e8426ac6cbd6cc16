# -*- coding: utf-8 -*-
"""
Seed road distances between Brazilian cities (km).

Each entry is (origin, destination, distance_km). Pairs are unordered: the
index answers both orientations, so every pair is listed once. Names use
the "City, UF" convention and their casing here is the display casing.
"""

from __future__ import annotations

from typing import Tuple

RouteRow = Tuple[str, str, float]

BRAZIL_ROUTES: Tuple[RouteRow, ...] = (
    # ────────────────────────────────────────────────────────────────────────────
    # Capital ↔ capital
    # ────────────────────────────────────────────────────────────────────────────
      ("São Paulo, SP", "Rio de Janeiro, RJ", 430)
    , ("São Paulo, SP", "Brasília, DF", 1015)
    , ("Rio de Janeiro, RJ", "Brasília, DF", 1148)
    , ("São Paulo, SP", "Belo Horizonte, MG", 586)
    , ("São Paulo, SP", "Salvador, BA", 1961)
    , ("São Paulo, SP", "Recife, PE", 2527)
    , ("Rio de Janeiro, RJ", "Belo Horizonte, MG", 715)
    , ("Brasília, DF", "Belo Horizonte, MG", 716)
    , ("Salvador, BA", "Recife, PE", 840)
    , ("Recife, PE", "Fortaleza, CE", 792)

    # ────────────────────────────────────────────────────────────────────────────
    # Main regional routes
    # ────────────────────────────────────────────────────────────────────────────
    , ("São Paulo, SP", "Campinas, SP", 95)
    , ("São Paulo, SP", "Santos, SP", 72)
    , ("Rio de Janeiro, RJ", "Niterói, RJ", 13)
    , ("Rio de Janeiro, RJ", "Búzios, RJ", 167)
    , ("Belo Horizonte, MG", "Ouro Preto, MG", 100)
    , ("Belo Horizonte, MG", "Araxá, MG", 368)
    , ("São Paulo, SP", "Sorocaba, SP", 108)
    , ("São Paulo, SP", "Ribeirão Preto, SP", 315)
    , ("Curitiba, PR", "São Paulo, SP", 408)
    , ("Curitiba, PR", "Porto Alegre, RS", 1134)

    # Northeast
    , ("Salvador, BA", "Feira de Santana, BA", 115)
    , ("Recife, PE", "Olinda, PE", 8)
    , ("Fortaleza, CE", "Sobral, CE", 239)
    , ("São Luís, MA", "Imperatriz, MA", 628)

    # North
    , ("Manaus, AM", "Belém, PA", 1619)
    , ("Belém, PA", "Marabá, PA", 485)

    # South
    , ("Porto Alegre, RS", "Pelotas, RS", 264)
    , ("Curitiba, PR", "Londrina, PR", 365)
    , ("Florianópolis, SC", "Blumenau, SC", 331)
    , ("Brasília, DF", "Goiânia, GO", 209)

    # Center-west
    , ("Cuiabá, MT", "Várzea Grande, MT", 30)
    , ("Campo Grande, MS", "Dourados, MS", 225)

    # ────────────────────────────────────────────────────────────────────────────
    # Interstate / coastal
    # ────────────────────────────────────────────────────────────────────────────
    , ("Campinas, SP", "Ribeirão Preto, SP", 220)
    , ("Belo Horizonte, MG", "Governador Valadares, MG", 380)
    , ("Salvador, BA", "Ilhéus, BA", 463)
    , ("São Paulo, SP", "Ubatuba, SP", 192)
    , ("Rio de Janeiro, RJ", "Angra dos Reis, RJ", 155)
    , ("Fortaleza, CE", "Crato, CE", 532)
)

__all__ = ["BRAZIL_ROUTES", "RouteRow"]
