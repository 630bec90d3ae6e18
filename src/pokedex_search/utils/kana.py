"""Hiragana/Katakana script folding used by catalog search."""

import re

KANA_OFFSET = 0x60

HIRAGANA_PATTERN = re.compile("[\u3041-\u3096]")
KATAKANA_PATTERN = re.compile("[\u30a1-\u30f6]")


def hiragana_to_katakana(text: str) -> str:
    """Convert every hiragana character in ``text`` to katakana.

    Characters outside U+3041..U+3096 are returned unchanged and in place.
    """
    return HIRAGANA_PATTERN.sub(lambda m: chr(ord(m.group(0)) + KANA_OFFSET), text)


def katakana_to_hiragana(text: str) -> str:
    """Convert every katakana character in ``text`` to hiragana.

    Only U+30A1..U+30F6 is folded, so the prolonged sound mark (U+30FC)
    and the other katakana-only marks pass through untouched.
    """
    return KATAKANA_PATTERN.sub(lambda m: chr(ord(m.group(0)) - KANA_OFFSET), text)


def matches(query: str, candidate_name: str) -> bool:
    """Check whether ``query`` occurs in ``candidate_name`` in either kana script.

    Args:
        query: Text typed by the user, in hiragana, katakana or anything else
        candidate_name: Name to test, as returned by the data source

    Returns:
        True if the query is a substring of the name as-is, of its hiragana
        form or of its katakana form. An empty query matches every name.
    """
    if query in candidate_name:
        return True
    if query in katakana_to_hiragana(candidate_name):
        return True
    return query in hiragana_to_katakana(candidate_name)
