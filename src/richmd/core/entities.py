"""Named HTML entity tables and the numeric/named reference decoder"""

import re
from collections.abc import Mapping
from functools import lru_cache


BASIC_ENTITIES: dict[str, str] = {
    "&nbsp;": " ",
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&apos;": "'",
    "&#39;": "'",
}

HTML_ENTITIES: dict[str, str] = {
    **BASIC_ENTITIES,
    "&mdash;": "—",
    "&ndash;": "–",
    "&hellip;": "...",
    "&copy;": "©",
    "&reg;": "®",
    "&trade;": "™",
    "&times;": "×",
    "&divide;": "÷",
    "&plusmn;": "±",
    "&frac12;": "½",
    "&frac14;": "¼",
    "&frac34;": "¾",
    "&deg;": "°",
    "&sup2;": "²",
    "&sup3;": "³",
}

NUMERIC_REF = r'&#\d{1,7};'

_MAX_CODEPOINT = 0x10FFFF


@lru_cache(maxsize=16)
def _entity_pattern(names: frozenset[str]) -> re.Pattern:
    """Alternation of the table keys (longest first) plus bounded numeric refs."""
    keys = sorted((k for k in names if k), key=len, reverse=True)
    return re.compile("|".join([*map(re.escape, keys), NUMERIC_REF]))


def _numeric(ref: str) -> str | None:
    """Resolve '&#NNN;' to its character, or None if it is not a Unicode scalar."""
    code = int(ref[2:-1])
    if code > _MAX_CODEPOINT or 0xD800 <= code <= 0xDFFF:
        return None
    return chr(code)


def decode_entities(text: str, entities: Mapping[str, str] = HTML_ENTITIES) -> str:
    """Replace every table key and numeric reference in one left-to-right scan.

    Keys are matched literally, so any string can be a key. Numeric refs of
    more than seven digits or outside the Unicode scalar range stay as-is.
    A decoded '&amp;' is never re-read as the start of another entity.
    """
    def _sub(m: re.Match) -> str:
        ref = m.group(0)
        if ref in entities:
            return entities[ref]
        char = _numeric(ref)
        return ref if char is None else char

    return _entity_pattern(frozenset(entities)).sub(_sub, text)
