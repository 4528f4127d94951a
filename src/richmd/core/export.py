"""Reference consumers of a Document: JSON dict, readable plain text and HTML"""

from html import escape
from typing import Any

from richmd.core.models import Document
from richmd.core.pipeline import spans
from richmd.core.styles import RenderStyle


HEADING_RULE = "━━━━━━━━━━"
DIVIDER_RULE = "· · · · · · · · · · · · · · ·"
CSS_WEIGHTS = {"normal": 400, "medium": 500, "semibold": 600, "bold": 700}


def to_dict(doc: Document) -> dict[str, Any]:
    """JSON-ready dict of the document; inline blocks also carry their spans."""
    blocks = []
    for block in doc.blocks:
        data = block.model_dump()
        inline = spans(block)
        if inline:
            data["spans"] = [s.model_dump() for s in inline]
        blocks.append(data)
    return {"blocks": blocks}


# --- plain text ---

def _plain(block) -> str:
    return "".join(s.text for s in spans(block))


def _heading_text(block) -> str:
    return f"{block.text}\n{HEADING_RULE}" if block.level == 1 else block.text


def _list_text(block) -> str:
    marker = f"{block.index}." if block.ordered else "●"
    return f"  {marker} {_plain(block)}"


TEXT_RENDERERS = {
    "heading":   _heading_text,
    "paragraph": _plain,
    "list_item": _list_text,
    "quote":     lambda b: f"┃ {_plain(b)}",
    "code":      lambda b: b.text,
    "divider":   lambda b: DIVIDER_RULE,
    "spacer":    lambda b: "",
}


def render_text(doc: Document) -> str:
    """Selectable reading text: markers removed, bullets and rules drawn as glyphs."""
    return "\n".join(TEXT_RENDERERS[b.kind](b) for b in doc.blocks)


# --- html ---

def _span_html(span, style: RenderStyle) -> str:
    text = escape(span.text)
    if span.kind == "bold":
        return f"<strong>{text}</strong>"
    if span.kind == "italic":
        return f"<em>{text}</em>"
    if span.kind == "code":
        return f'<code style="background:{style.theme.quote_background}">{text}</code>'
    if span.kind == "link":
        return f'<span style="color:{style.theme.accent}">{text}</span>'
    return text


def _inline_html(block, style: RenderStyle) -> str:
    return "".join(_span_html(s, style) for s in spans(block))


def _heading_html(block, style: RenderStyle) -> str:
    level = block.level
    weight = CSS_WEIGHTS.get(style.heading_weight(level), 400)
    return (f'<h{level} style="font-size:{style.heading_size(level)}px;font-weight:{weight};'
            f'color:{style.theme.heading}">{escape(block.text)}</h{level}>')


def _list_html(block, style: RenderStyle) -> str:
    marker = f"{block.index}." if block.ordered else "•"
    return (f'<div class="li"><span style="color:{style.theme.accent}">{marker}</span> '
            f'{_inline_html(block, style)}</div>')


def _quote_html(block, style: RenderStyle) -> str:
    theme = style.theme
    return (f'<blockquote style="border-left:4px solid {theme.accent};'
            f'background:{theme.quote_background};color:{theme.secondary}">'
            f'{_inline_html(block, style)}</blockquote>')


def _code_html(block, style: RenderStyle) -> str:
    label = f'<div class="lang">{escape(block.language)}</div>' if block.language else ""
    return (f'<pre style="font-size:{style.code_font_size}px;background:{style.theme.quote_background}">'
            f'{label}<code>{escape(block.text)}</code></pre>')


HTML_RENDERERS = {
    "heading":   _heading_html,
    "paragraph": lambda b, s: f"<p>{_inline_html(b, s)}</p>",
    "list_item": _list_html,
    "quote":     _quote_html,
    "code":      _code_html,
    "divider":   lambda b, s: f'<hr style="border-color:{s.theme.divider}">',
    "spacer":    lambda b, s: '<div class="spacer"></div>',
}


def render_html(doc: Document, style: RenderStyle | None = None) -> str:
    """HTML fragment for the document using the injected style tables."""
    style = style or RenderStyle()
    body = "\n".join(HTML_RENDERERS[b.kind](b, style) for b in doc.blocks)
    return (f'<div style="font-size:{style.font_size}px;color:{style.theme.text};'
            f'background:{style.theme.background}">\n{body}\n</div>')
