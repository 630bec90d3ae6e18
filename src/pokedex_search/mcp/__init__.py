"""MCP (Model Context Protocol) server module for Pokédex search.

This module provides MCP server implementation that exposes catalog search
and Pokémon detail lookup through the Model Context Protocol.
"""

from .server import PokedexMCPServer, main

__all__ = ["PokedexMCPServer", "main"]
