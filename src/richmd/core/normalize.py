"""HTML fragment to pseudo-Markdown normalization"""

import logging
import re
from collections.abc import Mapping

from richmd.core.entities import BASIC_ENTITIES, HTML_ENTITIES, decode_entities


logger = logging.getLogger(__name__)


def _open(tag: str) -> str:
    return rf'<{tag}\b[^>]*>'


def _close(tag: str) -> str:
    return rf'</{tag}\s*>'


# Applied in order; heading, emphasis and list rules assume earlier rules have run.
_RULES: list[tuple[str, str]] = [
    *[rule for n in range(1, 5) for rule in (
        (_open(f"h{n}"), "\n" + "#" * n + " "),
        (_close(f"h{n}"), "\n"),
    )],
    (_open("strong"), "**"), (_close("strong"), "**"),
    (_open("b"), "**"), (_close("b"), "**"),
    (_open("em"), "*"), (_close("em"), "*"),
    (_open("i"), "*"), (_close("i"), "*"),
    (_open("br"), "\n"),
    (_close("p"), "\n\n"), (_open("p"), ""),
    (_open("li"), "• "), (_close("li"), "\n"),
    (_open("ul"), "\n"), (_close("ul"), "\n"),
    (_open("ol"), "\n"), (_close("ol"), "\n"),
    (_open("pre") + r'\s*' + _open("code"), "\n```\n"),
    (_close("code") + r'\s*' + _close("pre"), "\n```\n"),
    (_open("code"), "`"), (_close("code"), "`"),
    (_open("pre"), "\n```\n"), (_close("pre"), "\n```\n"),
    (_open("blockquote"), "> "), (_close("blockquote"), "\n"),
    (_open("hr"), "\n---\n"),
    (_open("div"), ""), (_close("div"), "\n"),
    (_open("span"), ""), (_close("span"), ""),
]

TAG_RULES: tuple[tuple[re.Pattern, str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), repl) for pattern, repl in _RULES
)

ANY_TAG_RE = re.compile(r'<[^>]+>')
BLANK_RUN_RE = re.compile(r'\n{3,}')
BREAK_RE = re.compile(_open("br"), re.IGNORECASE)
PARA_CLOSE_RE = re.compile(_close("p"), re.IGNORECASE)


def has_markup(text: str) -> bool:
    """True when text contains both angle brackets and may carry HTML tags."""
    return "<" in text and ">" in text


def _cleanup(text: str) -> str:
    text = ANY_TAG_RE.sub("", text)
    text = BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def _rewrite(text: str, entities: Mapping[str, str]) -> str:
    result = decode_entities(text, entities)
    for pattern, repl in TAG_RULES:
        result = pattern.sub(repl, result)
    return _cleanup(result)


def normalize(text: str, entities: Mapping[str, str] = HTML_ENTITIES) -> str:
    """Rewrite an HTML fragment into pseudo-Markdown; plain text passes through unchanged.

    Passes repeat until the text stops changing, so normalizing the result
    again is a no-op. After the first pass only entity decoding changes the
    text, and with a table whose values are shorter than their keys every
    such pass shortens it, so len(text) passes always suffice.
    """
    if not has_markup(text):
        return text

    result = _rewrite(text, entities)
    passes = 1
    for _ in range(len(result)):
        if not has_markup(result):
            break
        again = _rewrite(result, entities)
        if again == result:
            break
        result = again
        passes += 1
    logger.debug("normalized html fragment: %d -> %d chars in %d pass(es)", len(text), len(result), passes)
    return result


def strip_html(text: str, entities: Mapping[str, str] = BASIC_ENTITIES) -> str:
    """Reduce an HTML fragment to plain editable text, keeping only line breaks."""
    if not has_markup(text):
        return text

    result = decode_entities(text, entities)
    result = BREAK_RE.sub("\n", result)
    result = PARA_CLOSE_RE.sub("\n", result)
    return _cleanup(result)
