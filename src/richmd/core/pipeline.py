"""Pipeline entry points: raw text -> normalized text -> Document -> spans"""

import logging
from pathlib import Path

from richmd.core.classify import classify
from richmd.core.inline import tokenize
from richmd.core.models import Document, Span, is_inline
from richmd.core.normalize import normalize


logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = {'.md', '.mdx', '.txt', '.html', '.htm'}


def parse(text: str) -> Document:
    """Build a Document from an HTML fragment or loosely-Markdown text. Never raises."""
    doc = classify(normalize(text))
    logger.debug("parsed %d chars into %d blocks", len(text), len(doc.blocks))
    return doc


def spans(block) -> tuple[Span, ...]:
    """Inline spans for paragraph, list item and quote blocks; empty for all others."""
    if is_inline(block):
        return tokenize(block.text)
    return ()


def discover_files(path: Path) -> list[Path]:
    """Return sorted source files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in SOURCE_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in SOURCE_EXTENSIONS)


def parse_file(path: Path) -> Document:
    """Read a UTF-8 source file and parse it into a Document."""
    return parse(path.read_text(encoding='utf-8'))
