"""Client-side search over the catalog."""

from ..core.models import CatalogEntry
from ..utils.kana import katakana_to_hiragana, matches


class PokemonSearcher:
    """Filters catalog entries by English or Japanese name."""

    def __init__(self, entries: list[CatalogEntry]):
        """Initialize searcher with catalog entries.

        Args:
            entries: Catalog entries, in display order
        """
        self.entries = list(entries)
        self._by_id = {entry.pokemon_id: entry for entry in self.entries}

    def __len__(self) -> int:
        return len(self.entries)

    def search(self, query: str) -> list[CatalogEntry]:
        """Search entries by name.

        The English name is matched case-insensitively; the Japanese name is
        matched in either kana script.

        Args:
            query: Search text, blank returns every entry

        Returns:
            Matching entries in catalog order
        """
        query = query.strip()
        if not query:
            return list(self.entries)
        return [entry for entry in self.entries if self._entry_matches(query, entry)]

    def get_by_name(self, name: str) -> CatalogEntry | None:
        """Exact lookup by English name or by Japanese name in either script."""
        name = name.strip()
        if not name:
            return None

        lowered = name.lower()
        folded = katakana_to_hiragana(name)
        for entry in self.entries:
            if entry.name.lower() == lowered:
                return entry
            if entry.japanese_name and katakana_to_hiragana(entry.japanese_name) == folded:
                return entry
        return None

    def get_by_id(self, pokemon_id: int) -> CatalogEntry | None:
        return self._by_id.get(pokemon_id)

    def list_entries(self, limit: int | None = None) -> list[CatalogEntry]:
        if limit is None:
            return list(self.entries)
        return self.entries[:limit]

    @staticmethod
    def _entry_matches(query: str, entry: CatalogEntry) -> bool:
        if query.lower() in entry.name.lower():
            return True
        if entry.japanese_name:
            return matches(query, entry.japanese_name)
        return False
