"""MCP Server for Pokédex search.

This module implements a Model Context Protocol (MCP) server that exposes
catalog search and Pokémon detail lookup.
"""

import asyncio
import json
import logging
from typing import Any

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import (
    TextContent,
    Tool,
)

from .. import __version__
from ..catalog import CatalogBuilder, PokemonSearcher
from ..core.client import PokeApiClient
from ..core.config import PokedexSettings
from ..core.exceptions import PokedexError, PokemonNotFoundError

logger = logging.getLogger(__name__)


class PokedexMCPServer:
    """MCP Server for Pokédex search functionality."""

    def __init__(self, settings: PokedexSettings | None = None) -> None:
        """Initialize the Pokédex MCP Server."""
        self.settings = settings or PokedexSettings.from_env()
        self.server = Server("pokedex-search")
        self.client = PokeApiClient(settings=self.settings)

        # Catalog is built on first use
        self.searcher: PokemonSearcher | None = None
        self._catalog_lock = asyncio.Lock()

        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List available tools."""
            return [
                Tool(
                    name="search_pokemon",
                    description="Search the first 151 Pokémon by English or Japanese name",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "query": {
                                "type": "string",
                                "description": "Name or part of a name (English, hiragana or katakana)",
                            },
                            "limit": {
                                "type": "integer",
                                "description": "Maximum number of results to return",
                                "default": 20,
                                "minimum": 1,
                                "maximum": 151,
                            },
                        },
                        "required": ["query"],
                    },
                ),
                Tool(
                    name="get_pokemon",
                    description="Get height, weight, types, abilities and base stats of one Pokémon",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "name": {
                                "type": "string",
                                "description": "English name or national Pokédex number",
                            }
                        },
                        "required": ["name"],
                    },
                ),
                Tool(
                    name="list_pokemon",
                    description="List the Pokémon catalog in national Pokédex order",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "limit": {
                                "type": "integer",
                                "description": "Maximum number of results",
                                "default": 151,
                                "minimum": 1,
                                "maximum": 151,
                            },
                        },
                    },
                ),
            ]

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: dict[str, Any]
        ) -> list[TextContent]:
            """Handle tool calls."""
            try:
                if name == "search_pokemon":
                    return await self._search_pokemon(arguments)
                elif name == "get_pokemon":
                    return await self._get_pokemon(arguments)
                elif name == "list_pokemon":
                    return await self._list_pokemon(arguments)
                else:
                    return [TextContent(type="text", text=f"Unknown tool: {name}")]

            except Exception as e:
                logger.error(f"Error in tool {name}: {e}")
                return [TextContent(type="text", text=f"Error: {str(e)}")]

    async def _get_searcher(self) -> PokemonSearcher:
        """Build the catalog once and reuse it for the server's lifetime."""
        async with self._catalog_lock:
            if self.searcher is None:
                builder = CatalogBuilder(
                    self.client, max_workers=self.settings.max_workers
                )
                entries = await asyncio.to_thread(builder.build, self.settings.limit)
                self.searcher = PokemonSearcher(entries)
                logger.info(f"Loaded {len(entries)} Pokemon into the catalog")
            return self.searcher

    async def _search_pokemon(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Search the catalog by name."""
        query = arguments["query"]
        limit = arguments.get("limit", 20)

        try:
            searcher = await self._get_searcher()
            results = searcher.search(query)[:limit]
        except PokedexError as e:
            return [TextContent(type="text", text=f"Pokemon search failed: {str(e)}")]

        if not results:
            return [
                TextContent(type="text", text=f"No Pokemon found matching '{query}'")
            ]

        result_text = f"**Found {len(results)} Pokemon matching '{query}':**\n\n"
        for i, entry in enumerate(results, 1):
            result_text += f"{i}. **{entry.name}** {entry.display_number}"
            if entry.japanese_name:
                result_text += f" - {entry.japanese_name}"
            result_text += "\n"

        entries_data = [entry.model_dump(mode="json") for entry in results]

        return [
            TextContent(type="text", text=result_text),
            TextContent(
                type="text",
                text=f"JSON Data:\n```json\n{json.dumps(entries_data, indent=2, ensure_ascii=False)}\n```",
            ),
        ]

    async def _get_pokemon(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Get the detail record of one Pokémon."""
        name = arguments["name"]

        try:
            pokemon = await asyncio.to_thread(self.client.get_pokemon, str(name))
        except PokemonNotFoundError:
            return [TextContent(type="text", text=f"Pokemon '{name}' not found")]
        except PokedexError as e:
            return [
                TextContent(type="text", text=f"Failed to get Pokemon info: {str(e)}")
            ]

        japanese_name = None
        if self.searcher is not None:
            entry = self.searcher.get_by_id(pokemon.id)
            if entry:
                japanese_name = entry.japanese_name

        result_text = f"**{pokemon.name}** ({pokemon.display_number})\n\n"
        if japanese_name:
            result_text += f"• **Japanese Name:** {japanese_name}\n"
        result_text += f"• **Height:** {pokemon.display_height}\n"
        result_text += f"• **Weight:** {pokemon.display_weight}\n"
        result_text += f"• **Types:** {', '.join(pokemon.type_names)}\n"
        result_text += (
            f"• **Abilities:** {', '.join(str(a) for a in pokemon.abilities)}\n"
        )
        result_text += "• **Base Stats:**\n"
        for stat in pokemon.stats:
            result_text += f"  - {stat.label}: {stat.base_stat}\n"

        pokemon_data = pokemon.model_dump(mode="json")
        pokemon_data["japanese_name"] = japanese_name
        pokemon_data["image_url"] = pokemon.image_url

        return [
            TextContent(type="text", text=result_text),
            TextContent(
                type="text",
                text=f"\nJSON Data:\n```json\n{json.dumps(pokemon_data, indent=2, ensure_ascii=False)}\n```",
            ),
        ]

    async def _list_pokemon(self, arguments: dict[str, Any]) -> list[TextContent]:
        """List catalog entries in order."""
        limit = arguments.get("limit", 151)

        try:
            searcher = await self._get_searcher()
            entries = searcher.list_entries(limit=limit)
        except PokedexError as e:
            return [TextContent(type="text", text=f"Failed to list Pokemon: {str(e)}")]

        if not entries:
            return [TextContent(type="text", text="No Pokemon in the catalog")]

        result_text = f"**Pokédex ({len(entries)} Pokemon):**\n\n"
        for entry in entries:
            result_text += f"{entry.display_number} {entry.name}"
            if entry.japanese_name:
                result_text += f" ({entry.japanese_name})"
            result_text += "\n"

        return [TextContent(type="text", text=result_text)]


async def main() -> None:
    """Main entry point for the MCP server."""
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting Pokedex Search MCP Server")

    server_instance = PokedexMCPServer()

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running with stdio transport")
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name="pokedex-search",
                server_version=__version__,
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main_sync() -> None:
    """Synchronous wrapper for the async main function - used as entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
