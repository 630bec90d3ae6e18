"""Custom exceptions for Pokédex search."""


class PokedexError(Exception):
    """Base exception for Pokédex errors."""

    pass


class PokemonNotFoundError(PokedexError):
    """Raised when the API has no entry for the requested name."""

    pass


class NetworkError(PokedexError):
    """Raised when there's a network-related error."""

    pass


class ApiResponseError(PokedexError):
    """Raised when the API returns a body that cannot be mapped."""

    pass


class ValidationError(PokedexError):
    """Raised when input validation fails."""

    pass
