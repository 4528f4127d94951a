"""Unit tests for core/models.py"""

import pytest
from pydantic import ValidationError

from richmd.core.models import (
    Code,
    Divider,
    Document,
    Heading,
    ListItem,
    Paragraph,
    Quote,
    Spacer,
    is_inline,
)


def test_blocks_are_frozen():
    """Blocks reject attribute assignment after construction."""
    block = Paragraph(text="a")
    with pytest.raises(ValidationError):
        block.text = "b"


def test_document_blocks_are_a_tuple():
    """Document coerces its block sequence to an immutable tuple."""
    doc = Document(blocks=[Spacer(), Divider()])
    assert doc.blocks == (Spacer(), Divider())
    assert not doc.is_empty
    assert Document().is_empty


@pytest.mark.parametrize("level", [0, 5])
def test_heading_level_bounds(level):
    """Heading level outside 1..4 fails validation."""
    with pytest.raises(ValidationError):
        Heading(text="x", level=level)


def test_list_item_defaults():
    """Unordered list items default to index 0."""
    item = ListItem(text="x")
    assert item.ordered is False
    assert item.index == 0


def test_discriminated_validation():
    """Blocks are rebuilt from plain dicts by their kind tag."""
    doc = Document.model_validate({"blocks": [
        {"kind": "heading", "text": "T", "level": 2},
        {"kind": "code", "text": "x", "language": "py"},
        {"kind": "divider"},
    ]})
    assert doc.blocks == (Heading(text="T", level=2), Code(text="x", language="py"), Divider())


def test_unknown_kind_rejected():
    """An unknown kind tag is a validation error."""
    with pytest.raises(ValidationError):
        Document.model_validate({"blocks": [{"kind": "table", "text": "x"}]})


@pytest.mark.parametrize("block,expected", [
    (Paragraph(text="a"), True),
    (ListItem(text="a"), True),
    (Quote(text="a"), True),
    (Heading(text="a", level=1), False),
    (Code(text="a"), False),
    (Divider(), False),
    (Spacer(), False),
])
def test_is_inline(block, expected):
    """Only paragraphs, list items and quotes carry inline spans."""
    assert is_inline(block) is expected
