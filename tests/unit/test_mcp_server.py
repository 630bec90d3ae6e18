"""Tests for MCP server functionality."""

import asyncio
import time
from unittest.mock import MagicMock, patch

import pytest

from pokedex_search.catalog import PokemonSearcher
from pokedex_search.core.config import PokedexSettings
from pokedex_search.core.exceptions import NetworkError, PokemonNotFoundError
from pokedex_search.core.models import Pokemon
from pokedex_search.mcp.server import PokedexMCPServer


class TestPokedexMCPServer:
    """Test cases for PokedexMCPServer."""

    @pytest.fixture
    def server(self, sample_entries):
        """Create a PokedexMCPServer with a preloaded catalog and mocked client."""
        server = PokedexMCPServer(settings=PokedexSettings())
        server.client = MagicMock()
        server.searcher = PokemonSearcher(sample_entries)
        return server

    @pytest.fixture
    def pikachu(self, sample_pokemon_response):
        """Parse the sample Pikachu detail record."""
        return Pokemon.model_validate(sample_pokemon_response)

    def test_server_initialization(self):
        """Test that server initializes correctly."""
        server = PokedexMCPServer(settings=PokedexSettings())

        assert server.server is not None
        assert server.client is not None
        assert server.searcher is None
        assert callable(server.server.list_tools)

    @pytest.mark.asyncio
    async def test_search_pokemon_kana(self, server):
        """Test searching with a hiragana query."""
        result = await server._search_pokemon({"query": "ぴか"})

        assert len(result) == 2  # Text content and JSON data

        text_content = result[0].text
        assert "Found 1 Pokemon matching 'ぴか'" in text_content
        assert "pikachu" in text_content
        assert "ピカチュウ" in text_content

        json_content = result[1].text
        assert "JSON Data:" in json_content
        assert '"pokemon_id": 25' in json_content

    @pytest.mark.asyncio
    async def test_search_pokemon_limit(self, server):
        """Test the search result limit."""
        result = await server._search_pokemon({"query": "", "limit": 2})

        assert "Found 2 Pokemon" in result[0].text
        assert "bulbasaur" in result[0].text
        assert "mr-mime" not in result[0].text

    @pytest.mark.asyncio
    async def test_search_pokemon_no_results(self, server):
        """Test search with no results."""
        result = await server._search_pokemon({"query": "xyz"})

        assert len(result) == 1
        assert "No Pokemon found matching 'xyz'" in result[0].text

    @pytest.mark.asyncio
    async def test_get_pokemon(self, server, pikachu):
        """Test successful Pokemon lookup."""
        server.client.get_pokemon.return_value = pikachu

        result = await server._get_pokemon({"name": "pikachu"})

        assert len(result) == 2
        text_content = result[0].text
        assert "**pikachu** (#025)" in text_content
        assert "Japanese Name:** ピカチュウ" in text_content
        assert "0.4 m" in text_content
        assert "6.0 kg" in text_content
        assert "lightning-rod (隠れ特性)" in text_content
        assert "こうげき: 55" in text_content
        assert '"japanese_name": "ピカチュウ"' in result[1].text
        server.client.get_pokemon.assert_called_once_with("pikachu")

    @pytest.mark.asyncio
    async def test_get_pokemon_not_found(self, server):
        """Test lookup of an unknown Pokemon."""
        server.client.get_pokemon.side_effect = PokemonNotFoundError("missing")

        result = await server._get_pokemon({"name": "missingno"})

        assert len(result) == 1
        assert "Pokemon 'missingno' not found" in result[0].text

    @pytest.mark.asyncio
    async def test_get_pokemon_network_error(self, server):
        """Test lookup when the API is unavailable."""
        server.client.get_pokemon.side_effect = NetworkError("connection refused")

        result = await server._get_pokemon({"name": "pikachu"})

        assert len(result) == 1
        assert "Failed to get Pokemon info: connection refused" in result[0].text

    @pytest.mark.asyncio
    async def test_list_pokemon(self, server):
        """Test listing the catalog."""
        result = await server._list_pokemon({"limit": 3})

        assert len(result) == 1
        text_content = result[0].text
        assert "Pokédex (3 Pokemon)" in text_content
        assert "#001 bulbasaur (フシギダネ)" in text_content
        assert "#122 mr-mime (バリヤード)" in text_content
        assert "mew" not in text_content

    @pytest.mark.asyncio
    async def test_catalog_is_built_once(self, sample_entries):
        """Test that the catalog is fetched only once."""
        server = PokedexMCPServer(settings=PokedexSettings())

        with patch("pokedex_search.mcp.server.CatalogBuilder") as mock_builder_class:
            mock_builder_class.return_value.build.return_value = sample_entries

            await server._list_pokemon({})
            await server._search_pokemon({"query": "mew"})

        mock_builder_class.return_value.build.assert_called_once_with(151)
        assert len(server.searcher) == 4

    @pytest.mark.asyncio
    async def test_concurrent_first_calls_build_catalog_once(self, sample_entries):
        """Test that overlapping first tool calls share one catalog build."""
        server = PokedexMCPServer(settings=PokedexSettings())

        def slow_build(limit):
            time.sleep(0.05)
            return sample_entries

        with patch("pokedex_search.mcp.server.CatalogBuilder") as mock_builder_class:
            mock_builder_class.return_value.build.side_effect = slow_build

            search_result, list_result = await asyncio.gather(
                server._search_pokemon({"query": "ぴか"}),
                server._list_pokemon({}),
            )

        mock_builder_class.return_value.build.assert_called_once_with(151)
        assert "pikachu" in search_result[0].text
        assert "Pokédex (4 Pokemon)" in list_result[0].text

    @pytest.mark.asyncio
    async def test_catalog_failure(self):
        """Test tools when the catalog cannot be built."""
        server = PokedexMCPServer(settings=PokedexSettings())

        with patch("pokedex_search.mcp.server.CatalogBuilder") as mock_builder_class:
            mock_builder_class.return_value.build.side_effect = NetworkError("down")

            result = await server._search_pokemon({"query": "pika"})

        assert "Pokemon search failed: down" in result[0].text
        assert server.searcher is None
