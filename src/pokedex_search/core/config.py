"""Runtime settings for the Pokédex client."""

import os

from pydantic import BaseModel, Field

DEFAULT_API_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_LIMIT = 151

ENV_PREFIX = "POKEDEX_"


class PokedexSettings(BaseModel):
    """Effective settings, read from ``POKEDEX_*`` environment variables."""

    api_base_url: str = Field(DEFAULT_API_BASE_URL, description="PokeAPI base URL")
    timeout: int = Field(30, gt=0, description="Request timeout in seconds")
    limit: int = Field(DEFAULT_LIMIT, gt=0, description="Number of catalog entries")
    max_workers: int = Field(
        8, gt=0, description="Parallel requests when fetching species records"
    )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "PokedexSettings":
        """Build settings from the environment, ignoring unset variables."""
        environ = dict(os.environ) if environ is None else environ
        values = {}
        for field_name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls(**values)
