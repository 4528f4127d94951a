"""Inline span tokenization: bold, italic, inline code and link labels"""

import re

from richmd.core.models import Bold, InlineCode, Italic, LinkText, PlainText, Span


# Priority order; the leftmost match wins and ties go to the earlier pattern.
INLINE_PATTERNS: tuple[tuple[type, re.Pattern], ...] = (
    (Bold, re.compile(r'\*\*(.+?)\*\*|__(.+?)__')),
    (Italic, re.compile(r'(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)|(?<!_)_(?!_)(.+?)(?<!_)_(?!_)')),
    (InlineCode, re.compile(r'`([^`]+)`')),
    (LinkText, re.compile(r'\[([^\]]+)\]\([^)]+\)')),
)


def _inner(m: re.Match) -> str:
    """Return the first participating capture group (the text between markers)."""
    return next(g for g in m.groups() if g is not None)


def _first_match(text: str) -> tuple[type, re.Match] | None:
    best = None
    for span_type, pattern in INLINE_PATTERNS:
        m = pattern.search(text)
        if m and (best is None or m.start() < best[1].start()):
            best = (span_type, m)
    return best


def tokenize(text: str) -> tuple[Span, ...]:
    """Scan text left to right into styled spans with the markers removed.

    Unterminated delimiters never match and stay in the surrounding plain text.
    """
    spans: list[Span] = []
    remaining = text
    while remaining:
        found = _first_match(remaining)
        if found is None:
            spans.append(PlainText(text=remaining))
            break
        span_type, m = found
        if m.start() > 0:
            spans.append(PlainText(text=remaining[:m.start()]))
        spans.append(span_type(text=_inner(m)))
        remaining = remaining[m.end():]
    return tuple(spans)


def plain(text: str) -> str:
    """Text of all spans joined, i.e. the input with inline markers removed."""
    return "".join(span.text for span in tokenize(text))
