"""Line-by-line block classification with fenced code tracking"""

import logging
import re
from dataclasses import dataclass

from richmd.core.models import (
    Block,
    Code,
    Divider,
    Document,
    Heading,
    ListItem,
    Paragraph,
    Quote,
    Spacer,
)


logger = logging.getLogger(__name__)

FENCE = "```"
MAX_HEADING_LEVEL = 4
BULLETS = ("- ", "* ", "• ")
DIVIDERS = ("---", "***", "___")
ORDERED_RE = re.compile(r'^(\d+)\.\s')


@dataclass(frozen=True)
class _Normal:
    pass


@dataclass(frozen=True)
class _InFence:
    language: str


_State = _Normal | _InFence


def _heading(line: str) -> Heading | None:
    """Match '####' down to '#' so longer prefixes are never read as shorter ones."""
    for level in range(MAX_HEADING_LEVEL, 0, -1):
        marker = "#" * level
        if line.startswith(marker):
            return Heading(text=line[level:].strip(), level=level)
    return None


def _ordered(line: str) -> ListItem | None:
    m = ORDERED_RE.match(line)
    if m is None:
        return None
    try:
        index = int(m.group(1))
    except ValueError:
        # past the interpreter's int digit limit
        return None
    return ListItem(text=line[m.end():], ordered=True, index=index)


def classify_line(line: str) -> Block:
    """Classify a single line outside a code fence."""
    if not line.strip():
        return Spacer()
    if heading := _heading(line):
        return heading
    if line.startswith(BULLETS):
        return ListItem(text=line[2:], ordered=False, index=0)
    if item := _ordered(line):
        return item
    if line.startswith(">"):
        return Quote(text=line[1:].strip())
    if line.startswith(DIVIDERS):
        return Divider()
    return Paragraph(text=line)


def _step(state: _State, line: str, fenced: list[str]) -> tuple[_State, Block | None]:
    """Advance the fence state machine by one line, returning any block it emits.

    Lines inside a fence go to the caller-owned ``fenced`` buffer, which is
    emptied when the fence closes.
    """
    if line.startswith(FENCE):
        if isinstance(state, _InFence):
            code = Code(text="\n".join(fenced), language=state.language)
            fenced.clear()
            return _Normal(), code
        return _InFence(language=line[len(FENCE):].strip()), None
    if isinstance(state, _InFence):
        fenced.append(line)
        return state, None
    return state, classify_line(line)


def classify(text: str) -> Document:
    """Split normalized text into an ordered Document, one block per source line."""
    if not text:
        return Document()

    blocks: list[Block] = []
    fenced: list[str] = []
    state: _State = _Normal()
    for line in text.split("\n"):
        state, block = _step(state, line.removesuffix("\r"), fenced)
        if block is not None:
            blocks.append(block)

    if isinstance(state, _InFence) and fenced:
        logger.debug("unclosed code fence flushed (%d lines)", len(fenced))
        blocks.append(Code(text="\n".join(fenced), language=state.language))

    return Document(blocks=tuple(blocks))
