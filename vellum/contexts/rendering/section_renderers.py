"""
Section Renderer Registry

Turns one tagged Section into one styled block. Dispatch is a table keyed by
SectionKind; titles were already normalized into kinds at ingestion, so no
renderer ever compares display titles.

Every renderer takes (section, index, styling) and returns a Block, or None
when the section should be omitted. Fonts, colors, spacing and heading
treatment all come from EffectiveStyling.
"""

from typing import Callable, Dict, List, Optional

from vellum.contexts.rendering.blocks import (
    Block,
    BulletListBlock,
    Category,
    CategoryListBlock,
    Entry,
    EntryListBlock,
    HeaderBlock,
    Heading,
    HybridBlock,
    Line,
    ParagraphBlock,
    Span,
    TextStyle,
)
from vellum.contexts.rendering.logger import _log_debug, _log_warning
from vellum.contexts.templating.defaults import ENTRY_DIVIDER_ALPHA, INLINE_SEPARATOR
from vellum.contexts.templating.resume_content import (
    EducationEntry,
    Job,
    Project,
    ResumeContent,
    Section,
    SectionKind,
)
from vellum.contexts.templating.styling import EffectiveStyling

SectionRenderer = Callable[[Section, int, EffectiveStyling], Optional[Block]]

# Kinds rendered as a plain bulleted list of their items
LIST_KINDS = (
    SectionKind.CERTIFICATIONS,
    SectionKind.PUBLICATIONS,
    SectionKind.MEMBERSHIPS,
    SectionKind.ACHIEVEMENTS,
    SectionKind.BOARD_ROLES,
)


class SectionRendererRegistry:
    """
    Dispatch table from SectionKind to renderer.

    Kinds without a registered renderer (SectionKind.UNRECOGNIZED in the
    default table) render to None and are omitted from the document.
    """

    def __init__(self):
        self._renderers: Dict[SectionKind, SectionRenderer] = {}

    def register(self, *kinds: SectionKind):
        """
        Decorator registering a renderer for one or more kinds.

        Example:
            @SECTION_RENDERERS.register(SectionKind.SUMMARY)
            def render_summary(section, index, styling): ...
        """

        def decorator(renderer: SectionRenderer) -> SectionRenderer:
            for kind in kinds:
                self._renderers[kind] = renderer
            return renderer

        return decorator

    def get(self, kind: SectionKind) -> Optional[SectionRenderer]:
        return self._renderers.get(kind)

    def kinds(self) -> List[SectionKind]:
        """Kinds with a registered renderer."""
        return list(self._renderers)

    def render(self, section: Section, index: int, styling: EffectiveStyling) -> Optional[Block]:
        renderer = self._renderers.get(section.kind)
        if renderer is None:
            _log_debug(f"No renderer for section {section.title!r} ({section.kind.value}), omitting")
            return None
        return renderer(section, index, styling)


SECTION_RENDERERS = SectionRendererRegistry()


def render_section(section: Section, index: int, styling: EffectiveStyling) -> Optional[Block]:
    """
    Render one section with the default registry.

    Args:
        section: Tagged section
        index: Position of the section within its region
        styling: Effective styling of the current render

    Returns:
        Block, or None for sections that are not rendered
    """
    return SECTION_RENDERERS.render(section, index, styling)


# Shared style builders


def section_style(styling: EffectiveStyling) -> TextStyle:
    return TextStyle(
        font_family=styling.fonts.body,
        color=styling.body_color,
        line_height=styling.body_line_height,
        margin_bottom=styling.section_margin,
    )


def heading_for(title: str, styling: EffectiveStyling, margin_bottom: str = "8px") -> Heading:
    return Heading(
        text=title,
        style=TextStyle(
            color=styling.colors.primary,
            font_family=styling.fonts.section,
            font_size=styling.heading_size,
            font_weight="bold",
            margin_bottom=margin_bottom,
            text_transform=styling.heading_transform,
            letter_spacing=styling.heading_letter_spacing,
        ),
    )


def _text_line(text: str, style: TextStyle, line_style: Optional[TextStyle] = None) -> Line:
    return Line(spans=[Span(text, style)], style=line_style or TextStyle())


def _joined(*parts: Optional[str]) -> str:
    return INLINE_SEPARATOR.join(part for part in parts if part)


def _bullet_style() -> TextStyle:
    return TextStyle(font_size="13px", line_height="1.5", margin_bottom="4px")


def job_entry(job: Job, is_last: bool, styling: EffectiveStyling) -> Entry:
    """
    Stacked job entry: company line, then title and dates, then bullets.

    Every entry but the last carries a divider below it.
    """
    primary = styling.colors.primary
    secondary = styling.colors.secondary
    lines = []

    company_spans = []
    if job.company:
        company_spans.append(
            Span(job.company, TextStyle(font_size="15px", font_weight="bold", color=primary))
        )
    if job.location:
        prefix = INLINE_SEPARATOR if company_spans else ""
        company_spans.append(
            Span(f"{prefix}{job.location}", TextStyle(font_size="12px", color=secondary))
        )
    if company_spans:
        lines.append(Line(spans=company_spans, style=TextStyle(margin_bottom="4px")))

    role_spans = []
    if job.title:
        role_spans.append(Span(job.title, TextStyle(font_size="14px", color=secondary)))
    if job.dates:
        prefix = " | " if role_spans else ""
        role_spans.append(Span(f"{prefix}{job.dates}", TextStyle(font_size="12px", color=secondary)))
    if role_spans:
        lines.append(Line(spans=role_spans, style=TextStyle(margin_bottom="8px")))

    return Entry(
        lines=lines,
        bullets=list(job.bullets),
        bullet_style=_bullet_style(),
        style=TextStyle(
            margin_bottom="16px",
            padding_bottom="12px",
            border_bottom=None if is_last else f"1px solid {primary}{ENTRY_DIVIDER_ALPHA}",
        ),
    )


def _job_entries(jobs: List[Job], styling: EffectiveStyling) -> List[Entry]:
    return [job_entry(job, i == len(jobs) - 1, styling) for i, job in enumerate(jobs)]


def education_entry(entry: EducationEntry, styling: EffectiveStyling) -> Entry:
    secondary = styling.colors.secondary
    lines = [
        _text_line(
            entry.degree,
            TextStyle(font_size="14px", font_weight="bold", color=styling.colors.primary),
        )
    ]
    place = _joined(entry.institution, entry.location)
    if place:
        lines.append(_text_line(place, TextStyle(font_size="13px", color=secondary)))
    when = _joined(entry.dates, f"GPA: {entry.gpa}" if entry.gpa else None)
    if when:
        lines.append(_text_line(when, TextStyle(font_size="12px", color=secondary)))
    return Entry(lines=lines, style=TextStyle(margin_bottom="12px"))


def project_entry(project: Project, styling: EffectiveStyling) -> Entry:
    secondary = styling.colors.secondary
    label = TextStyle(font_weight="bold")
    detail = TextStyle(font_size="12px", color=secondary)

    lines = [
        _text_line(
            project.name,
            TextStyle(font_size="14px", font_weight="bold", color=styling.colors.primary),
        )
    ]
    if project.description:
        lines.append(
            _text_line(project.description, TextStyle(font_size="13px"), TextStyle(margin_bottom="4px"))
        )
    if project.technologies:
        lines.append(
            Line(
                spans=[Span("Technologies: ", label), Span(", ".join(project.technologies))],
                style=detail,
            )
        )
    if project.achievements:
        lines.append(
            Line(
                spans=[Span("Achievements: ", label), Span(", ".join(project.achievements))],
                style=detail,
            )
        )
    return Entry(lines=lines, style=TextStyle(margin_bottom="12px"))


# Renderers


@SECTION_RENDERERS.register(SectionKind.SUMMARY)
def render_summary(section: Section, index: int, styling: EffectiveStyling) -> Block:
    return ParagraphBlock(
        text=section.payload.content,
        heading=heading_for(section.title, styling),
        text_style=TextStyle(font_size="14px", line_height="1.6"),
        style=section_style(styling),
    )


@SECTION_RENDERERS.register(SectionKind.SKILLS)
def render_skills(section: Section, index: int, styling: EffectiveStyling) -> Block:
    categories = [
        Category(
            label=name,
            items=list(skills),
            label_style=TextStyle(font_size="13px", font_weight="bold", color=styling.colors.secondary),
            items_style=TextStyle(font_size="13px"),
        )
        for name, skills in section.payload.categories.items()
    ]
    return CategoryListBlock(
        categories=categories,
        heading=heading_for(section.title, styling),
        display=styling.skill_display,
        style=section_style(styling),
    )


@SECTION_RENDERERS.register(SectionKind.EXPERIENCE)
def render_experience(section: Section, index: int, styling: EffectiveStyling) -> Block:
    return EntryListBlock(
        entries=_job_entries(section.payload.jobs, styling),
        heading=heading_for(section.title, styling, margin_bottom="12px"),
        style=section_style(styling),
    )


@SECTION_RENDERERS.register(SectionKind.EDUCATION)
def render_education(section: Section, index: int, styling: EffectiveStyling) -> Block:
    entries = []
    for entry in section.payload.entries:
        if isinstance(entry, EducationEntry):
            entries.append(education_entry(entry, styling))
        elif isinstance(entry, str):
            # Legacy one-line entries
            entries.append(
                Entry(
                    lines=[_text_line(entry, TextStyle(font_size="13px"))],
                    style=TextStyle(margin_bottom="8px"),
                )
            )
        else:
            _log_warning(f"Skipping malformed education entry in {section.title!r}: {entry!r}")
    return EntryListBlock(
        entries=entries,
        heading=heading_for(section.title, styling),
        style=section_style(styling),
    )


@SECTION_RENDERERS.register(SectionKind.PROJECTS)
def render_projects(section: Section, index: int, styling: EffectiveStyling) -> Block:
    return EntryListBlock(
        entries=[project_entry(project, styling) for project in section.payload.projects],
        heading=heading_for(section.title, styling),
        style=section_style(styling),
    )


@SECTION_RENDERERS.register(*LIST_KINDS)
def render_list(section: Section, index: int, styling: EffectiveStyling) -> Block:
    return BulletListBlock(
        items=list(section.payload.items),
        heading=heading_for(section.title, styling),
        item_style=_bullet_style(),
        style=section_style(styling),
    )


@SECTION_RENDERERS.register(SectionKind.EXECUTIVE)
def render_executive(section: Section, index: int, styling: EffectiveStyling) -> Block:
    payload = section.payload
    return HybridBlock(
        heading=heading_for(
            section.title, styling, margin_bottom="8px" if payload.content else "12px"
        ),
        paragraph=payload.content,
        paragraph_style=TextStyle(font_size="14px", line_height="1.6", margin_bottom="12px"),
        entries=_job_entries(payload.jobs, styling),
        style=section_style(styling),
    )


def render_header(content: ResumeContent, styling: EffectiveStyling) -> HeaderBlock:
    """Centered identity block shared by the generic layouts."""
    primary = styling.colors.primary
    secondary = styling.colors.secondary
    header_font = styling.fonts.header

    title = None
    if content.title:
        title = _text_line(
            content.title,
            TextStyle(
                font_size="16px",
                font_weight="normal",
                color=secondary,
                font_family=styling.fonts.section,
            ),
            TextStyle(margin_bottom="12px"),
        )

    contact = None
    parts = content.contact.parts()
    if parts:
        contact = _text_line(
            INLINE_SEPARATOR.join(parts), TextStyle(font_size="12px", color=secondary)
        )

    return HeaderBlock(
        name=_text_line(
            content.name,
            TextStyle(font_size="28px", font_weight="bold", color=primary, font_family=header_font),
            TextStyle(margin_bottom="8px"),
        ),
        title=title,
        contact=contact,
        style=TextStyle(
            text_align="center",
            border_bottom=f"2px solid {primary}",
            padding_bottom="16px",
            margin_bottom="24px",
        ),
    )
