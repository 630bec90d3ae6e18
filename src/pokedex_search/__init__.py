"""Pokédex Search Package

A Python package for browsing the first 151 Pokémon from PokeAPI, with
kana-aware search, a CLI and an MCP server.
"""

__version__ = "0.1.0"

from .catalog import CatalogBuilder, PokemonSearcher
from .core.client import PokeApiClient
from .core.models import CatalogEntry, Pokemon
from .utils.kana import hiragana_to_katakana, katakana_to_hiragana, matches

__all__ = [
    "CatalogBuilder",
    "CatalogEntry",
    "PokeApiClient",
    "Pokemon",
    "PokemonSearcher",
    "hiragana_to_katakana",
    "katakana_to_hiragana",
    "matches",
]
