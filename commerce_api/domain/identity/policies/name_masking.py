"""
Display-name masking.

Masking works on user-perceived characters, so a base letter followed by
combining marks, a variation selector or a zero-width-joiner sequence is
replaced as one unit.

Only ever mask the canonical ``Name`` value, never an already masked
string.
"""

import unicodedata

MASK_CHARACTER = "*"

_ZERO_WIDTH_JOINER = "\u200d"
_EXTENDING_CATEGORIES = frozenset({"Mn", "Me", "Mc"})


def _extends_previous(char: str) -> bool:
    code_point = ord(char)
    return (
        unicodedata.category(char) in _EXTENDING_CATEGORIES
        or char == _ZERO_WIDTH_JOINER
        or 0xFE00 <= code_point <= 0xFE0F  # variation selectors
        or 0x1F3FB <= code_point <= 0x1F3FF  # emoji skin-tone modifiers
    )


def grapheme_clusters(text: str) -> list[str]:
    """Split ``text`` into user-perceived characters (NFC first)."""
    clusters: list[str] = []
    for char in unicodedata.normalize("NFC", text):
        if clusters and (_extends_previous(char) or clusters[-1].endswith(_ZERO_WIDTH_JOINER)):
            clusters[-1] += char
        else:
            clusters.append(char)
    return clusters


def user_perceived_length(text: str) -> int:
    return len(grapheme_clusters(text))


def mask_name(name: str) -> str:
    """
    Replace the last user-perceived character of ``name`` with ``*``.

    A single-character name becomes ``*``. An empty name stays empty.
    """
    clusters = grapheme_clusters(name)
    if not clusters:
        return name
    return "".join(clusters[:-1]) + MASK_CHARACTER
