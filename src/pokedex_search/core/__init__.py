"""Core Pokédex functionality."""

from .client import PokeApiClient
from .config import PokedexSettings
from .exceptions import (
    ApiResponseError,
    NetworkError,
    PokedexError,
    PokemonNotFoundError,
    ValidationError,
)
from .models import (
    CatalogEntry,
    Pokemon,
    PokemonListEntry,
    PokemonListResponse,
    PokemonSpecies,
)

__all__ = [
    "CatalogEntry",
    "Pokemon",
    "PokemonListEntry",
    "PokemonListResponse",
    "PokemonSpecies",
    "PokeApiClient",
    "PokedexSettings",
    "PokedexError",
    "PokemonNotFoundError",
    "NetworkError",
    "ApiResponseError",
    "ValidationError",
]
