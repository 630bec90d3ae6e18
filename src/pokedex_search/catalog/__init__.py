"""Catalog assembly and search module."""

from .builder import CatalogBuilder
from .searcher import PokemonSearcher

__all__ = ["CatalogBuilder", "PokemonSearcher"]
