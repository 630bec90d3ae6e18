"""PokeAPI client implementation."""

import logging
from typing import Any

import requests
from pydantic import ValidationError as ModelValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import DEFAULT_LIMIT, PokedexSettings
from .exceptions import (
    ApiResponseError,
    NetworkError,
    PokemonNotFoundError,
    ValidationError,
)
from .models import Pokemon, PokemonListResponse, PokemonSpecies

logger = logging.getLogger(__name__)

USER_AGENT = "pokedex-search/0.1.0 (+https://pokeapi.co)"


class PokeApiClient:
    """Client for the PokeAPI REST endpoints used by the catalog."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        settings: PokedexSettings | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, defaults to the configured PokeAPI URL
            timeout: Request timeout in seconds
            settings: Settings to take defaults from
        """
        self.settings = settings or PokedexSettings()
        self.base_url = (base_url or self.settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            }
        )

    def list_pokemon(self, limit: int = DEFAULT_LIMIT) -> PokemonListResponse:
        """Fetch the first ``limit`` entries of the Pokémon list.

        Args:
            limit: Number of entries to request

        Returns:
            Parsed list response

        Raises:
            ValidationError: If limit is not positive
            NetworkError: If the request fails
            ApiResponseError: If the body cannot be parsed
        """
        if limit <= 0:
            raise ValidationError("Limit must be a positive number")

        try:
            data = self._get_json("pokemon", params={"limit": limit})
        except PokemonNotFoundError as e:
            raise NetworkError(f"Failed to fetch Pokemon list: {str(e)}") from e

        try:
            response = PokemonListResponse.model_validate(data)
        except ModelValidationError as e:
            raise ApiResponseError(f"Unexpected Pokemon list payload: {str(e)}") from e

        logger.info(f"Fetched {len(response.results)} of {response.count} Pokemon")
        return response

    def list_names(self, limit: int = DEFAULT_LIMIT) -> list[str]:
        """Get every name in the list, for enumerating detail pages up front."""
        return [entry.name for entry in self.list_pokemon(limit).results]

    def get_pokemon(self, name: str) -> Pokemon:
        """Fetch the detail record for one Pokémon.

        Args:
            name: English name or national number

        Returns:
            Parsed detail record

        Raises:
            ValidationError: If the name is empty
            PokemonNotFoundError: If the API has no such entry
            NetworkError: If the request fails
            ApiResponseError: If the body cannot be parsed
        """
        key = self._normalize_key(name)
        data = self._get_json(f"pokemon/{key}")

        try:
            return Pokemon.model_validate(data)
        except ModelValidationError as e:
            raise ApiResponseError(
                f"Unexpected detail payload for {key}: {str(e)}"
            ) from e

    def get_species(self, name_or_id: str | int) -> PokemonSpecies:
        """Fetch the species record, which carries the localized names."""
        key = self._normalize_key(str(name_or_id))
        data = self._get_json(f"pokemon-species/{key}")

        try:
            return PokemonSpecies.model_validate(data)
        except ModelValidationError as e:
            raise ApiResponseError(
                f"Unexpected species payload for {key}: {str(e)}"
            ) from e

    def _normalize_key(self, name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Pokemon name cannot be empty")
        return name.strip().lower()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, max=4),
        retry=retry_if_exception_type(NetworkError),
        reraise=True,
    )
    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a JSON document relative to the API root.

        Raises:
            PokemonNotFoundError: On HTTP 404
            NetworkError: On transport errors and other non-2xx statuses
            ApiResponseError: If the body is not JSON
        """
        url = f"{self.base_url}/{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {str(e)}") from e

        if response.status_code == 404:
            raise PokemonNotFoundError(f"No Pokemon data at {path}")

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise NetworkError(
                f"Failed to fetch {url}, status: {response.status_code}"
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise ApiResponseError(f"Response from {url} is not JSON") from e
