"""Catalog assembly from the PokeAPI list and species endpoints."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..core.client import PokeApiClient
from ..core.config import DEFAULT_LIMIT
from ..core.exceptions import PokedexError
from ..core.models import CatalogEntry, PokemonListEntry

logger = logging.getLogger(__name__)


class CatalogBuilder:
    """Builds the local catalog, optionally enriched with Japanese names."""

    def __init__(
        self,
        client: PokeApiClient | None = None,
        max_workers: int = 8,
        progress_callback: Callable[[int, int], None] | None = None,
    ):
        """Initialize the builder.

        Args:
            client: API client, a default one is created when omitted
            max_workers: Parallel species requests
            progress_callback: Called with (completed, total) per species fetch
        """
        self.client = client or PokeApiClient()
        self.max_workers = max_workers
        self.progress_callback = progress_callback

    def build(
        self, limit: int = DEFAULT_LIMIT, with_japanese: bool = True
    ) -> list[CatalogEntry]:
        """Fetch the list and map it into catalog entries, in API order.

        Args:
            limit: Number of entries to fetch
            with_japanese: Also fetch species records for Japanese names

        Returns:
            Catalog entries

        Raises:
            NetworkError: If the list cannot be fetched
            ApiResponseError: If the list payload is malformed
        """
        listing = self.client.list_pokemon(limit)
        entries = listing.results

        if not with_japanese:
            return [CatalogEntry.from_list_entry(entry) for entry in entries]

        japanese_names = self._fetch_japanese_names(entries)
        return [
            CatalogEntry.from_list_entry(
                entry, japanese_name=japanese_names.get(entry.pokemon_id)
            )
            for entry in entries
        ]

    def _fetch_japanese_names(
        self, entries: list[PokemonListEntry]
    ) -> dict[int, str | None]:
        """Fetch species records in parallel, tolerating individual failures."""
        names: dict[int, str | None] = {}
        total = len(entries)
        if total == 0:
            return names

        logger.info(f"Fetching Japanese names for {total} Pokemon")
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self.client.get_species, entry.pokemon_id): entry
                for entry in entries
            }
            for completed, future in enumerate(as_completed(futures), 1):
                entry = futures[future]
                try:
                    names[entry.pokemon_id] = future.result().japanese_name
                except PokedexError as e:
                    logger.warning(f"Failed to fetch species for {entry.name}: {e}")
                    names[entry.pokemon_id] = None

                if self.progress_callback:
                    self.progress_callback(completed, total)

        missing = sum(1 for name in names.values() if name is None)
        if missing:
            logger.warning(f"{missing} of {total} Pokemon have no Japanese name")
        return names
