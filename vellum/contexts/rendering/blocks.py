"""
Document Block Tree

Data classes for the renderable output of the engine. A Document holds a
header block plus one or more named regions, each an ordered list of blocks.
Blocks carry their own resolved styles, so downstream serializers (HTML
markup, JSON, an external PDF compiler) never need the template again.
"""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, ClassVar, Dict, List, Optional

from vellum.contexts.templating.template_descriptor import ColorPair


def _drop_none(items) -> Dict[str, Any]:
    return {key: value for key, value in items if value is not None}


@dataclass
class TextStyle:
    """
    Presentation attributes for one element.

    Unset attributes (None) inherit from the enclosing element. Attribute
    names are CSS property names with hyphens replaced by underscores.
    """

    font_family: Optional[str] = None
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    font_style: Optional[str] = None
    color: Optional[str] = None
    background_color: Optional[str] = None
    line_height: Optional[str] = None
    text_transform: Optional[str] = None
    text_align: Optional[str] = None
    letter_spacing: Optional[str] = None
    margin: Optional[str] = None
    margin_bottom: Optional[str] = None
    padding: Optional[str] = None
    padding_bottom: Optional[str] = None
    border_bottom: Optional[str] = None
    border_left: Optional[str] = None
    opacity: Optional[str] = None
    word_break: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    max_width: Optional[str] = None
    min_height: Optional[str] = None
    flex: Optional[str] = None

    def with_(self, **overrides) -> "TextStyle":
        """Copy of this style with some attributes replaced."""
        return replace(self, **overrides)

    def to_css(self) -> str:
        """
        Inline CSS declaration list for the set attributes.

        Examples:
            >>> TextStyle(font_size="14px", font_weight="bold").to_css()
            'font-size: 14px; font-weight: bold'
        """
        declarations = []
        for style_field in fields(self):
            value = getattr(self, style_field.name)
            if value is not None:
                declarations.append(f"{style_field.name.replace('_', '-')}: {value}")
        return "; ".join(declarations)


@dataclass
class Span:
    """Run of text with a single style."""

    text: str
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class Line:
    """One visual line made of one or more spans."""

    spans: List[Span] = field(default_factory=list)
    style: TextStyle = field(default_factory=TextStyle)

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass
class Heading:
    """Section heading. `text` is the display title as authored."""

    text: str
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class Entry:
    """
    Stacked entry inside a section (job, education entry, project).

    Attributes:
        lines: Header lines in display order
        bullets: Bullet items under the header lines
        bullet_style: Style applied to each bullet
        style: Container style (margins, divider)
    """

    lines: List[Line] = field(default_factory=list)
    bullets: List[str] = field(default_factory=list)
    bullet_style: TextStyle = field(default_factory=TextStyle)
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class Category:
    """Labeled group of skills."""

    label: str
    items: List[str] = field(default_factory=list)
    label_style: TextStyle = field(default_factory=TextStyle)
    items_style: TextStyle = field(default_factory=TextStyle)


@dataclass
class ContactLine:
    """Contact item with a leading icon."""

    icon: str
    text: str
    style: TextStyle = field(default_factory=TextStyle)
    icon_style: TextStyle = field(default_factory=TextStyle)


# Blocks


@dataclass
class Block:
    """Base class of every renderable block. `kind` selects the markup macro."""

    kind: ClassVar[str] = "block"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self, dict_factory=_drop_none)}


@dataclass
class ParagraphBlock(Block):
    kind: ClassVar[str] = "paragraph"

    text: str = ""
    heading: Optional[Heading] = None
    text_style: TextStyle = field(default_factory=TextStyle)
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class CategoryListBlock(Block):
    """Skills grouped by category, shown inline (comma-joined) or bulleted."""

    kind: ClassVar[str] = "category_list"

    categories: List[Category] = field(default_factory=list)
    heading: Optional[Heading] = None
    display: str = "inline"
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class EntryListBlock(Block):
    kind: ClassVar[str] = "entry_list"

    entries: List[Entry] = field(default_factory=list)
    heading: Optional[Heading] = None
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class BulletListBlock(Block):
    kind: ClassVar[str] = "bullet_list"

    items: List[str] = field(default_factory=list)
    heading: Optional[Heading] = None
    item_style: TextStyle = field(default_factory=TextStyle)
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class HybridBlock(Block):
    """Paragraph followed by entries under a single heading."""

    kind: ClassVar[str] = "hybrid"

    heading: Optional[Heading] = None
    paragraph: Optional[str] = None
    paragraph_style: TextStyle = field(default_factory=TextStyle)
    entries: List[Entry] = field(default_factory=list)
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class ContactBlock(Block):
    kind: ClassVar[str] = "contact"

    items: List[ContactLine] = field(default_factory=list)
    heading: Optional[Heading] = None
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class HeaderBlock(Block):
    """
    Identity block (name, title, contact line).

    Generic layouts place it above every region. Bespoke layouts may put it
    inside a region instead and decorate it with an arrow and a rule.
    """

    kind: ClassVar[str] = "header"

    name: Line = field(default_factory=Line)
    title: Optional[Line] = None
    contact: Optional[Line] = None
    arrow: Optional[Span] = None
    rule: Optional[TextStyle] = None
    style: TextStyle = field(default_factory=TextStyle)


# Document


@dataclass
class Region:
    """Named vertical flow of blocks (main, sidebar)."""

    name: str
    blocks: List[Block] = field(default_factory=list)
    style: TextStyle = field(default_factory=TextStyle)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "style": asdict(self.style, dict_factory=_drop_none),
            "blocks": [block.to_dict() for block in self.blocks],
        }


@dataclass
class Document:
    """
    Complete render output.

    Attributes:
        template_id: Template the document was rendered with
        layout: Name of the layout strategy (single-column, two-column, tech-modern, ...)
        colors: Resolved colors of the render
        header: Shared header above all regions (None when a region carries it)
        regions: Regions in visual order
        style: Page style
    """

    template_id: str
    layout: str
    colors: ColorPair
    header: Optional[HeaderBlock] = None
    regions: List[Region] = field(default_factory=list)
    style: TextStyle = field(default_factory=TextStyle)

    @property
    def body(self) -> List[Block]:
        """Blocks of every region, in region order."""
        return [block for region in self.regions for block in region.blocks]

    def region(self, name: str) -> Optional[Region]:
        for region in self.regions:
            if region.name == name:
                return region
        return None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation for downstream serializers."""
        return {
            "template_id": self.template_id,
            "layout": self.layout,
            "colors": asdict(self.colors),
            "header": self.header.to_dict() if self.header is not None else None,
            "regions": [region.to_dict() for region in self.regions],
            "style": asdict(self.style, dict_factory=_drop_none),
        }
