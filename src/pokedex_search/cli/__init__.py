"""Command line interface for pokedex-search."""
