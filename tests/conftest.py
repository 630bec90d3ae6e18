"""Test configuration and fixtures."""

import pytest

from pokedex_search.core.models import CatalogEntry

API_BASE = "https://pokeapi.co/api/v2"


def _list_entry(name, pokemon_id):
    return {"name": name, "url": f"{API_BASE}/pokemon/{pokemon_id}/"}


def _species(pokemon_id, name, ja_hrkt=None, ja=None):
    names = [{"name": name.capitalize(), "language": {"name": "en", "url": ""}}]
    if ja_hrkt:
        names.append({"name": ja_hrkt, "language": {"name": "ja-Hrkt", "url": ""}})
    if ja:
        names.append({"name": ja, "language": {"name": "ja", "url": ""}})
    return {"id": pokemon_id, "name": name, "names": names}


@pytest.fixture
def sample_list_response():
    """Sample ``GET /pokemon?limit=151`` payload, trimmed to three entries."""
    return {
        "count": 1302,
        "next": f"{API_BASE}/pokemon?offset=151&limit=151",
        "previous": None,
        "results": [
            _list_entry("bulbasaur", 1),
            _list_entry("pikachu", 25),
            _list_entry("mr-mime", 122),
        ],
    }


@pytest.fixture
def sample_species_responses():
    """Species payloads keyed by national number."""
    return {
        1: _species(1, "bulbasaur", ja_hrkt="フシギダネ", ja="フシギダネ"),
        25: _species(25, "pikachu", ja_hrkt="ピカチュウ", ja="ピカチュウ"),
        122: _species(122, "mr-mime", ja_hrkt="バリヤード"),
    }


@pytest.fixture
def sample_pokemon_response():
    """Sample ``GET /pokemon/pikachu`` payload, reduced to the mapped fields."""
    return {
        "id": 25,
        "name": "pikachu",
        "height": 4,
        "weight": 60,
        "base_experience": 112,
        "types": [
            {"slot": 1, "type": {"name": "electric", "url": f"{API_BASE}/type/13/"}}
        ],
        "abilities": [
            {
                "ability": {"name": "static", "url": f"{API_BASE}/ability/9/"},
                "is_hidden": False,
                "slot": 1,
            },
            {
                "ability": {"name": "lightning-rod", "url": f"{API_BASE}/ability/31/"},
                "is_hidden": True,
                "slot": 3,
            },
        ],
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": ""}},
            {"base_stat": 40, "effort": 0, "stat": {"name": "defense", "url": ""}},
            {
                "base_stat": 50,
                "effort": 0,
                "stat": {"name": "special-attack", "url": ""},
            },
            {
                "base_stat": 50,
                "effort": 0,
                "stat": {"name": "special-defense", "url": ""},
            },
            {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": ""}},
        ],
        "sprites": {
            "front_default": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/25.png",
            "other": {
                "official-artwork": {
                    "front_default": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/official-artwork/25.png"
                }
            },
        },
    }


@pytest.fixture
def sample_entries():
    """Catalog entries as the builder produces them."""
    return [
        CatalogEntry(
            pokemon_id=1,
            name="bulbasaur",
            japanese_name="フシギダネ",
            artwork_url="https://example.invalid/1.png",
        ),
        CatalogEntry(
            pokemon_id=25,
            name="pikachu",
            japanese_name="ピカチュウ",
            artwork_url="https://example.invalid/25.png",
        ),
        CatalogEntry(
            pokemon_id=122,
            name="mr-mime",
            japanese_name="バリヤード",
            artwork_url="https://example.invalid/122.png",
        ),
        CatalogEntry(
            pokemon_id=151,
            name="mew",
            japanese_name=None,
            artwork_url="https://example.invalid/151.png",
        ),
    ]
