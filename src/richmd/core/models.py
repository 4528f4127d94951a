"""Document model: block and inline span variants produced by the pipeline"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- blocks ---

class Heading(_Node):
    """A heading line; more than four markers still yields level 4."""
    kind: Literal["heading"] = "heading"
    text: str
    level: int = Field(..., ge=1, le=4)


class Paragraph(_Node):
    """Raw paragraph text; spans are resolved lazily by the renderer."""
    kind: Literal["paragraph"] = "paragraph"
    text: str


class ListItem(_Node):
    kind: Literal["list_item"] = "list_item"
    text: str
    ordered: bool = False
    index: int = 0              # parsed ordinal; 0 for unordered items


class Quote(_Node):
    kind: Literal["quote"] = "quote"
    text: str


class Code(_Node):
    """Fenced code, interior lines joined verbatim (blank lines included)."""
    kind: Literal["code"] = "code"
    text: str
    language: str = ""


class Divider(_Node):
    kind: Literal["divider"] = "divider"


class Spacer(_Node):
    """A blank source line, rendered as vertical space."""
    kind: Literal["spacer"] = "spacer"


Block = Annotated[
    Union[Heading, Paragraph, ListItem, Quote, Code, Divider, Spacer],
    Field(discriminator="kind"),
]

INLINE_BLOCKS = (Paragraph, ListItem, Quote)


def is_inline(block) -> bool:
    """Return True when the block's text is tokenized into spans."""
    return isinstance(block, INLINE_BLOCKS)


# --- spans ---

class PlainText(_Node):
    kind: Literal["text"] = "text"
    text: str


class Bold(_Node):
    kind: Literal["bold"] = "bold"
    text: str


class Italic(_Node):
    kind: Literal["italic"] = "italic"
    text: str


class InlineCode(_Node):
    kind: Literal["code"] = "code"
    text: str


class LinkText(_Node):
    """Visible label of a link; the target is discarded."""
    kind: Literal["link"] = "link"
    text: str


Span = Annotated[
    Union[PlainText, Bold, Italic, InlineCode, LinkText],
    Field(discriminator="kind"),
]


class Document(_Node):
    """Ordered, immutable block sequence built once per render pass."""
    blocks: tuple[Block, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.blocks
