"""Data models for the Pokédex catalog."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

ARTWORK_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"
    "/other/official-artwork/{id}.png"
)

STAT_LABELS = {
    "hp": "HP",
    "attack": "こうげき",
    "defense": "ぼうぎょ",
    "special-attack": "とくこう",
    "special-defense": "とくぼう",
    "speed": "すばやさ",
}


def id_from_url(url: str) -> int:
    """Extract the numeric id from a resource URL like ``.../pokemon/25/``."""
    segments = [segment for segment in url.split("/") if segment]
    if not segments or not segments[-1].isdigit():
        raise ValueError(f"No id in resource URL: {url}")
    return int(segments[-1])


def format_number(pokemon_id: int) -> str:
    return f"#{pokemon_id:03d}"


class NamedResource(BaseModel):
    """A ``{name, url}`` reference to another API resource."""

    name: str = Field(..., description="Resource name")
    url: str = Field("", description="Resource URL")


class PokemonListEntry(BaseModel):
    """One entry of the paginated Pokémon list."""

    name: str = Field(..., description="English name (lowercase slug)")
    url: str = Field(..., description="Detail resource URL")

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Reject URLs that do not end in a numeric id."""
        id_from_url(value)
        return value

    @property
    def pokemon_id(self) -> int:
        return id_from_url(self.url)

    @property
    def display_number(self) -> str:
        return format_number(self.pokemon_id)

    @property
    def artwork_url(self) -> str:
        return ARTWORK_URL_TEMPLATE.format(id=self.pokemon_id)

    def __str__(self) -> str:
        return self.name


class PokemonListResponse(BaseModel):
    """Response of ``GET /pokemon?limit=N``."""

    count: int = Field(..., description="Total number of entries upstream")
    next: str | None = Field(None, description="Next page URL")
    previous: str | None = Field(None, description="Previous page URL")
    results: list[PokemonListEntry] = Field(default_factory=list)


class PokemonTypeSlot(BaseModel):
    slot: int
    type: NamedResource


class PokemonAbilitySlot(BaseModel):
    slot: int
    is_hidden: bool = False
    ability: NamedResource

    def __str__(self) -> str:
        if self.is_hidden:
            return f"{self.ability.name} (隠れ特性)"
        return self.ability.name


class PokemonStat(BaseModel):
    base_stat: int
    effort: int = 0
    stat: NamedResource

    @property
    def label(self) -> str:
        """Japanese label for the base stat, or the raw stat name."""
        return STAT_LABELS.get(self.stat.name, self.stat.name)


class PokemonSprites(BaseModel):
    front_default: str | None = None
    other: dict[str, Any] | None = None

    @property
    def image_url(self) -> str | None:
        """Official artwork if available, then the default sprite."""
        artwork = (self.other or {}).get("official-artwork") or {}
        return artwork.get("front_default") or self.front_default


class Pokemon(BaseModel):
    """Detail record from ``GET /pokemon/{name}``."""

    id: int = Field(..., description="National Pokédex number")
    name: str = Field(..., description="English name (lowercase slug)")
    height: int = Field(..., description="Height in decimetres")
    weight: int = Field(..., description="Weight in hectograms")
    types: list[PokemonTypeSlot] = Field(default_factory=list)
    abilities: list[PokemonAbilitySlot] = Field(default_factory=list)
    stats: list[PokemonStat] = Field(default_factory=list)
    sprites: PokemonSprites = Field(default_factory=PokemonSprites)

    @property
    def height_m(self) -> float:
        return self.height / 10

    @property
    def weight_kg(self) -> float:
        return self.weight / 10

    @property
    def display_height(self) -> str:
        return f"{self.height_m:.1f} m"

    @property
    def display_weight(self) -> str:
        return f"{self.weight_kg:.1f} kg"

    @property
    def display_number(self) -> str:
        return format_number(self.id)

    @property
    def image_url(self) -> str | None:
        return self.sprites.image_url

    @property
    def type_names(self) -> list[str]:
        return [slot.type.name for slot in sorted(self.types, key=lambda t: t.slot)]

    def __str__(self) -> str:
        return f"{self.display_number} {self.name}"


class SpeciesName(BaseModel):
    name: str
    language: NamedResource


class PokemonSpecies(BaseModel):
    """Species record from ``GET /pokemon-species/{id}``, reduced to names."""

    id: int
    name: str
    names: list[SpeciesName] = Field(default_factory=list)

    def name_for(self, language: str) -> str | None:
        for entry in self.names:
            if entry.language.name == language:
                return entry.name
        return None

    @property
    def japanese_name(self) -> str | None:
        """Kana name (``ja-Hrkt``), falling back to the ``ja`` name."""
        return self.name_for("ja-Hrkt") or self.name_for("ja")


class CatalogEntry(BaseModel):
    """Local shape of one catalog entry, as shown in listings."""

    pokemon_id: int = Field(..., description="National Pokédex number")
    name: str = Field(..., description="English name (lowercase slug)")
    japanese_name: str | None = Field(None, description="Japanese name")
    artwork_url: str = Field(..., description="Official artwork image URL")

    @classmethod
    def from_list_entry(
        cls, entry: PokemonListEntry, japanese_name: str | None = None
    ) -> "CatalogEntry":
        return cls(
            pokemon_id=entry.pokemon_id,
            name=entry.name,
            japanese_name=japanese_name,
            artwork_url=entry.artwork_url,
        )

    @property
    def display_number(self) -> str:
        return format_number(self.pokemon_id)

    def __str__(self) -> str:
        if self.japanese_name:
            return f"{self.display_number} {self.name} ({self.japanese_name})"
        return f"{self.display_number} {self.name}"
