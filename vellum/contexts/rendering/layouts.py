"""
Layout Resolution

Chooses how a template arranges its sections on the page and builds the
regions of a Document.

Resolution order:
1. A bespoke layout registered for the template id (total override)
2. Two-column when the template assigns sections to `main` or `sidebar`
3. Single column otherwise

Bespoke layouts are registered by template id in a global registry and read
only typed panel sections, never generic section titles.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Type

from vellum.contexts.rendering.blocks import (
    Block,
    ContactBlock,
    ContactLine,
    Entry,
    EntryListBlock,
    HeaderBlock,
    Heading,
    Line,
    ParagraphBlock,
    Region,
    Span,
    TextStyle,
)
from vellum.contexts.rendering.exceptions import IncompleteContentError
from vellum.contexts.rendering.logger import _log_debug, _log_error
from vellum.contexts.rendering.section_renderers import render_header, render_section
from vellum.contexts.templating.defaults import (
    BREAK_ALL_CONTACT_TYPES,
    CONTACT_ICONS,
    DEFAULT_CONTACT_ICON,
    DEFAULT_FONT_STACK,
    PAGE_MIN_HEIGHT,
    PAGE_PADDING,
    PAGE_WIDTH,
    SIDEBAR_DIVIDER_ALPHA,
    TECH_MODERN_COLORS,
    TECH_MODERN_WIDTHS,
)
from vellum.contexts.templating.resume_content import (
    EducationEntry,
    Job,
    PanelSection,
    ResumeContent,
    Section,
)
from vellum.contexts.templating.styling import EffectiveStyling
from vellum.contexts.templating.template_descriptor import TemplateDescriptor


@dataclass
class LayoutResult:
    """
    Regions built by a layout strategy.

    Attributes:
        header: Shared header above the regions (None if a region holds it)
        regions: Regions in visual order
        page_style: Style of the page container
        skipped: Titles of sections that produced no block
    """

    header: Optional[HeaderBlock]
    regions: List[Region]
    page_style: TextStyle
    skipped: List[str] = field(default_factory=list)


def page_style(styling: EffectiveStyling) -> TextStyle:
    return TextStyle(
        font_family=styling.fonts.body,
        font_size="14px",
        line_height="1.4",
        max_width=PAGE_WIDTH,
        min_height=PAGE_MIN_HEIGHT,
        padding=PAGE_PADDING,
        background_color="#FFFFFF",
    )


def render_sections(
    sections: Sequence[Section], styling: EffectiveStyling
) -> Tuple[List[Block], List[str]]:
    """
    Render sections in order through the section renderer registry.

    Returns:
        Tuple of (blocks, titles of omitted sections)
    """
    blocks = []
    skipped = []
    for index, section in enumerate(sections):
        block = render_section(section, index, styling)
        if block is None:
            skipped.append(section.title)
        else:
            blocks.append(block)
    return blocks, skipped


class LayoutStrategy(ABC):
    """Base class for page layouts."""

    name: str = ""

    @abstractmethod
    def build(self, content: ResumeContent, styling: EffectiveStyling) -> LayoutResult:
        """
        Build the header and regions for one render.

        Args:
            content: Resume content
            styling: Effective styling of the render

        Returns:
            LayoutResult
        """
        pass


class SingleColumnStrategy(LayoutStrategy):
    """Header, then every section in document order in one vertical flow."""

    name = "single-column"

    def build(self, content: ResumeContent, styling: EffectiveStyling) -> LayoutResult:
        blocks, skipped = render_sections(content.sections, styling)
        return LayoutResult(
            header=render_header(content, styling),
            regions=[Region(name="main", blocks=blocks)],
            page_style=page_style(styling),
            skipped=skipped,
        )


def normalize_fragment(fragment: str) -> str:
    """
    Normalize a region fragment or section title for matching.

    Examples:
        >>> normalize_fragment("Professional_Experience")
        'professional experience'
    """
    return fragment.lower().replace("-", " ").replace("_", " ")


def _matches(title: str, fragments: Sequence[str]) -> bool:
    normalized_title = normalize_fragment(title)
    return any(fragment and fragment in normalized_title for fragment in fragments)


def partition_sections(
    sections: Sequence[Section], main: Sequence[str], sidebar: Sequence[str]
) -> Tuple[List[Section], List[Section]]:
    """
    Split sections into main and sidebar regions by title fragments.

    A section matching a main fragment goes to main; otherwise one matching a
    sidebar fragment goes to the sidebar; a section matching neither goes to
    main. Document order is preserved within each region.

    Args:
        sections: Sections in document order
        main: Fragments assigning sections to the main region
        sidebar: Fragments assigning sections to the sidebar region

    Returns:
        Tuple of (main_sections, sidebar_sections)
    """
    main_fragments = [normalize_fragment(fragment) for fragment in main]
    sidebar_fragments = [normalize_fragment(fragment) for fragment in sidebar]

    main_sections = []
    sidebar_sections = []
    for section in sections:
        if _matches(section.title, main_fragments):
            main_sections.append(section)
        elif _matches(section.title, sidebar_fragments):
            sidebar_sections.append(section)
        else:
            _log_debug(f"Section {section.title!r} matches no region fragment, placing in main")
            main_sections.append(section)
    return main_sections, sidebar_sections


class TwoColumnStrategy(LayoutStrategy):
    """Shared header above a wide main region and a narrower sidebar."""

    name = "two-column"

    def __init__(self, main: Sequence[str], sidebar: Sequence[str]):
        self.main = list(main)
        self.sidebar = list(sidebar)

    def build(self, content: ResumeContent, styling: EffectiveStyling) -> LayoutResult:
        main_sections, sidebar_sections = partition_sections(
            content.sections, self.main, self.sidebar
        )
        main_blocks, main_skipped = render_sections(main_sections, styling)
        sidebar_blocks, sidebar_skipped = render_sections(sidebar_sections, styling)

        divider = f"1px solid {styling.colors.primary}{SIDEBAR_DIVIDER_ALPHA}"
        return LayoutResult(
            header=render_header(content, styling),
            regions=[
                Region(name="main", blocks=main_blocks, style=TextStyle(flex="2")),
                Region(
                    name="sidebar",
                    blocks=sidebar_blocks,
                    style=TextStyle(flex="1", padding="0 0 0 20px", border_left=divider),
                ),
            ],
            page_style=page_style(styling),
            skipped=main_skipped + sidebar_skipped,
        )


class BespokeStrategy(LayoutStrategy):
    """
    Layout written for one specific template.

    Subclasses read the typed panel sections of the content (`panel_sections`
    and `sidebar.sections`) and ignore generic sections and the styling's
    fonts and colors where their design says so.
    """

    def panels(self, content: ResumeContent, template_id: str) -> Tuple[List[PanelSection], List[PanelSection]]:
        """
        Sidebar and main panel sections of the content.

        Raises:
            IncompleteContentError: If either group is empty
        """
        sidebar = list(content.sidebar.sections) if content.sidebar is not None else []
        main = list(content.panel_sections)

        missing = []
        if not sidebar:
            missing.append("sidebar sections")
        if not main:
            missing.append("main sections")
        if missing:
            _log_error(f"{template_id}: bespoke layout is missing {', '.join(missing)}")
            raise IncompleteContentError(template_id, missing)
        return sidebar, main


class TechModernStrategy(BespokeStrategy):
    """Black identity sidebar with contact, education and skills beside a white main panel."""

    name = "tech-modern"

    sidebar_text = TECH_MODERN_COLORS["sidebar_text"]
    main_text = TECH_MODERN_COLORS["main_text"]

    def _sidebar_heading(self, title: str) -> Heading:
        return Heading(
            text=title,
            style=TextStyle(
                font_size="13px",
                font_weight="bold",
                color=self.sidebar_text,
                margin="0 0 15px 0",
                text_transform="uppercase",
                letter_spacing="0.5px",
            ),
        )

    def _main_heading(self, title: str, margin_bottom: str) -> Heading:
        return Heading(
            text=title,
            style=TextStyle(
                font_size="15px",
                font_weight="bold",
                color=self.main_text,
                margin=f"0 0 {margin_bottom} 0",
                text_transform="uppercase",
                letter_spacing="0.5px",
            ),
        )

    def _identity(self, content: ResumeContent) -> HeaderBlock:
        return HeaderBlock(
            arrow=Span(
                "→",
                TextStyle(font_size="32px", font_weight="bold", line_height="1", margin="0 12px 0 0"),
            ),
            name=Line(
                spans=[
                    Span(
                        content.name.upper(),
                        TextStyle(
                            font_size="20px",
                            font_weight="900",
                            color=self.sidebar_text,
                            line_height="1",
                            text_transform="uppercase",
                            letter_spacing="1.5px",
                        ),
                    )
                ],
                style=TextStyle(margin_bottom="20px"),
            ),
            rule=TextStyle(width="60px", height="2px", background_color=self.sidebar_text),
            style=TextStyle(margin_bottom="35px"),
        )

    def _contact(self, panel: PanelSection) -> ContactBlock:
        items = []
        for item in panel.contact_items:
            items.append(
                ContactLine(
                    icon=CONTACT_ICONS.get(item.type, DEFAULT_CONTACT_ICON),
                    text=item.value,
                    style=TextStyle(
                        font_size="10px",
                        margin_bottom="6px",
                        color=self.sidebar_text,
                        word_break="break-all" if item.type in BREAK_ALL_CONTACT_TYPES else "normal",
                    ),
                    icon_style=TextStyle(font_size="8px", margin="0 6px 0 0"),
                )
            )
        return ContactBlock(
            items=items,
            heading=self._sidebar_heading(panel.title),
            style=TextStyle(margin_bottom="35px"),
        )

    def _education_entry(self, entry: EducationEntry) -> Entry:
        base = TextStyle(line_height="1.3", color=self.sidebar_text)
        lines = [
            Line([Span(entry.institution, base.with_(font_size="11px", font_weight="bold"))], TextStyle(margin_bottom="4px")),
            Line([Span(entry.degree, base.with_(font_size="10px"))], TextStyle(margin_bottom="2px")),
            Line([Span(entry.dates, base.with_(font_size="9px", opacity="0.9"))]),
        ]
        if entry.location:
            lines.append(Line([Span(entry.location, base.with_(font_size="9px", opacity="0.9"))]))
        return Entry(lines=lines, style=TextStyle(margin_bottom="20px"))

    def _education(self, panel: PanelSection) -> EntryListBlock:
        return EntryListBlock(
            entries=[self._education_entry(entry) for entry in panel.education],
            heading=self._sidebar_heading(panel.title),
            style=TextStyle(margin_bottom="35px"),
        )

    def _skills(self, panel: PanelSection) -> ParagraphBlock:
        return ParagraphBlock(
            text=panel.content or "",
            heading=self._sidebar_heading(panel.title),
            text_style=TextStyle(
                font_size="10px", line_height="1.5", text_align="justify", color=self.sidebar_text
            ),
        )

    def _summary(self, panel: PanelSection) -> ParagraphBlock:
        return ParagraphBlock(
            text=panel.content or "",
            heading=self._main_heading(panel.title, "12px"),
            text_style=TextStyle(
                font_size="10px",
                line_height="1.6",
                margin="0",
                text_align="justify",
                color=self.main_text,
            ),
            style=TextStyle(margin_bottom="30px"),
        )

    def _job_entry(self, job: Job) -> Entry:
        return Entry(
            lines=[
                Line(
                    [Span(job.title, TextStyle(font_size="12px", font_weight="bold", color=self.main_text))],
                    TextStyle(margin_bottom="3px"),
                ),
                Line(
                    [Span(job.company, TextStyle(font_size="11px", color=self.main_text))],
                    TextStyle(margin_bottom="2px"),
                ),
                Line(
                    [Span(job.dates, TextStyle(font_size="9px", font_style="italic", color=self.main_text))],
                    TextStyle(margin_bottom="10px"),
                ),
            ],
            bullets=list(job.bullets),
            bullet_style=TextStyle(
                font_size="10px",
                line_height="1.5",
                margin_bottom="4px",
                text_align="justify",
                color=self.main_text,
            ),
            style=TextStyle(margin_bottom="25px"),
        )

    def _experience(self, panel: PanelSection) -> EntryListBlock:
        return EntryListBlock(
            entries=[self._job_entry(job) for job in panel.jobs],
            heading=self._main_heading(panel.title, "18px"),
        )

    def build(self, content: ResumeContent, styling: EffectiveStyling) -> LayoutResult:
        sidebar_panels, main_panels = self.panels(content, styling.template_id)
        skipped = []

        # Contact panels always come first, right under the identity block
        sidebar_blocks: List[Block] = [self._identity(content)]
        sidebar_blocks.extend(
            self._contact(panel) for panel in sidebar_panels if panel.type == "contact"
        )
        for panel in sidebar_panels:
            if panel.type == "education":
                sidebar_blocks.append(self._education(panel))
            elif panel.type == "skills":
                sidebar_blocks.append(self._skills(panel))
            elif panel.type != "contact":
                skipped.append(panel.title)

        main_blocks: List[Block] = []
        for panel in main_panels:
            if panel.type == "summary":
                main_blocks.append(self._summary(panel))
            elif panel.type == "experience":
                main_blocks.append(self._experience(panel))
            else:
                skipped.append(panel.title)

        region_style = TextStyle(padding="30px 25px", min_height=PAGE_MIN_HEIGHT)
        return LayoutResult(
            header=None,
            regions=[
                Region(
                    name="sidebar",
                    blocks=sidebar_blocks,
                    style=region_style.with_(
                        width=TECH_MODERN_WIDTHS["sidebar"],
                        background_color=TECH_MODERN_COLORS["sidebar_background"],
                        color=self.sidebar_text,
                    ),
                ),
                Region(
                    name="main",
                    blocks=main_blocks,
                    style=region_style.with_(
                        width=TECH_MODERN_WIDTHS["main"],
                        background_color=TECH_MODERN_COLORS["main_background"],
                        color=self.main_text,
                    ),
                ),
            ],
            page_style=TextStyle(
                font_family=DEFAULT_FONT_STACK,
                font_size="12px",
                line_height="1.4",
                max_width=PAGE_WIDTH,
                min_height=PAGE_MIN_HEIGHT,
                padding="0",
                background_color="#FFFFFF",
            ),
            skipped=skipped,
        )


# Bespoke layout registry, keyed by template id
_BESPOKE_LAYOUTS: Dict[str, Type[BespokeStrategy]] = {}


def register_layout(template_id: str, strategy_class: Type[BespokeStrategy]) -> None:
    """
    Register a bespoke layout for a template id.

    Args:
        template_id: Template the layout belongs to (e.g., "tech-modern")
        strategy_class: BespokeStrategy subclass
    """
    _BESPOKE_LAYOUTS[template_id] = strategy_class


def unregister_layout(template_id: str) -> None:
    """Remove a bespoke layout from the registry."""
    _BESPOKE_LAYOUTS.pop(template_id, None)


def get_layout(template_id: str) -> Optional[BespokeStrategy]:
    """
    Get a bespoke layout instance by template id.

    Returns:
        Strategy instance, or None if the template has no bespoke layout
    """
    strategy_class = _BESPOKE_LAYOUTS.get(template_id)
    if strategy_class:
        return strategy_class()
    return None


def list_layouts() -> List[Dict[str, str]]:
    """
    List registered bespoke layouts with their descriptions.

    Returns:
        List of dicts with 'template_id' and 'description' keys
    """
    layouts = []
    for template_id, strategy_class in _BESPOKE_LAYOUTS.items():
        description = (strategy_class.__doc__ or "").strip().split("\n")[0]
        layouts.append({"template_id": template_id, "description": description})
    return sorted(layouts, key=lambda x: x["template_id"])


register_layout("tech-modern", TechModernStrategy)


def resolve_layout(template: TemplateDescriptor) -> LayoutStrategy:
    """
    Choose the layout strategy for a template.

    Args:
        template: Template descriptor

    Returns:
        Bespoke strategy registered for template.id, else TwoColumnStrategy when
        the template assigns regions, else SingleColumnStrategy
    """
    bespoke = get_layout(template.id)
    if bespoke is not None:
        return bespoke
    if template.layout is not None and template.layout.has_regions:
        return TwoColumnStrategy(template.layout.main, template.layout.sidebar)
    return SingleColumnStrategy()
