"""
routes_data.py – Built-in table of popular Brazilian road routes.

Each entry is (origin, destination, distance_km).  City names carry the
state abbreviation ("São Paulo, SP").  A route serves both directions;
a few pairs appear twice and the first entry wins on lookup.
"""
from __future__ import annotations

BUILTIN_ROUTES: tuple[tuple[str, str, float], ...] = (
    # Southeast – major capitals
    ("São Paulo, SP", "Rio de Janeiro, RJ", 430),
    ("São Paulo, SP", "Brasília, DF", 1015),
    ("Rio de Janeiro, RJ", "Brasília, DF", 1148),
    ("Belo Horizonte, MG", "Rio de Janeiro, RJ", 515),
    ("Belo Horizonte, MG", "São Paulo, SP", 585),
    ("Belo Horizonte, MG", "Brasília, DF", 738),

    # Southeast – regional
    ("São Paulo, SP", "Campinas, SP", 95),
    ("São Paulo, SP", "Santos, SP", 72),
    ("São Paulo, SP", "Sorocaba, SP", 108),
    ("Rio de Janeiro, RJ", "Niterói, RJ", 13),
    ("Rio de Janeiro, RJ", "Petrópolis, RJ", 68),
    ("Belo Horizonte, MG", "Ouro Preto, MG", 100),
    ("Belo Horizonte, MG", "Betim, MG", 35),
    ("Campinas, SP", "Ribeirão Preto, SP", 250),

    # South
    ("Curitiba, PR", "São Paulo, SP", 408),
    ("Curitiba, PR", "Rio de Janeiro, RJ", 835),
    ("Curitiba, PR", "Porto Alegre, RS", 815),
    ("Porto Alegre, RS", "Brasília, DF", 1825),
    ("Florianópolis, SC", "Curitiba, PR", 505),
    ("Florianópolis, SC", "Porto Alegre, RS", 685),

    # Northeast
    ("Salvador, BA", "Brasília, DF", 1535),
    ("Salvador, BA", "Recife, PE", 840),
    ("Salvador, BA", "São Paulo, SP", 1938),
    ("Recife, PE", "Fortaleza, CE", 785),
    ("Fortaleza, CE", "Brasília, DF", 2149),
    ("Salvador, BA", "Feira de Santana, BA", 109),
    ("Recife, PE", "Caruaru, PE", 135),

    # North
    ("Manaus, AM", "Brasília, DF", 2820),
    ("Manaus, AM", "Belém, PA", 1800),
    ("Belém, PA", "Brasília, DF", 2144),
    ("Palmas, TO", "Brasília, DF", 970),
    ("Manaus, AM", "Rio de Janeiro, RJ", 3220),

    # Center-West
    ("Brasília, DF", "Goiânia, GO", 209),
    ("Brasília, DF", "Cuiabá, MT", 990),
    ("Goiânia, GO", "Brasília, DF", 209),
    ("Campo Grande, MS", "Brasília, DF", 1255),

    # Cross-region
    ("Curitiba, PR", "Belo Horizonte, MG", 820),
    ("Porto Alegre, RS", "Rio de Janeiro, RJ", 1460),
    ("Salvador, BA", "Brasília, DF", 1535),
    ("Fortaleza, CE", "Rio de Janeiro, RJ", 2761),
)
