"""Utility modules for pokedex-search."""

from .kana import (
    hiragana_to_katakana,
    katakana_to_hiragana,
    matches,
)

__all__ = [
    "hiragana_to_katakana",
    "katakana_to_hiragana",
    "matches",
]
