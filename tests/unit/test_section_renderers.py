"""Unit tests for the section renderer registry."""

import pytest

from vellum.contexts.rendering.blocks import (
    BulletListBlock,
    CategoryListBlock,
    EntryListBlock,
    HybridBlock,
    ParagraphBlock,
)
from vellum.contexts.rendering.section_renderers import (
    LIST_KINDS,
    SECTION_RENDERERS,
    SectionRendererRegistry,
    render_header,
    render_section,
)
from vellum.contexts.templating.ingestion import ingest_content, ingest_section
from vellum.contexts.templating.resume_content import (
    EducationPayload,
    Section,
    SectionKind,
)
from vellum.contexts.templating.styling import resolve_styling


@pytest.fixture
def styling(plain_template):
    return resolve_styling(plain_template)


@pytest.mark.unit
def test_every_known_kind_has_a_renderer():
    registered = set(SECTION_RENDERERS.kinds())
    assert registered == set(SectionKind) - {SectionKind.UNRECOGNIZED}


@pytest.mark.unit
def test_unrecognized_section_renders_nothing(styling):
    section = ingest_section({"title": "Hobbies", "content": "Climbing"})
    assert render_section(section, 0, styling) is None


@pytest.mark.unit
def test_summary_paragraph(styling):
    block = render_section(ingest_section({"title": "Summary", "content": "Engineer."}), 0, styling)

    assert isinstance(block, ParagraphBlock)
    assert block.text == "Engineer."
    assert block.heading.text == "Summary"
    assert block.text_style.font_size == "14px"


@pytest.mark.unit
def test_heading_styling_comes_from_effective_styling(make_template):
    template = make_template(fonts={"section": "Lato"}, styling={"primary_color": "#0F0F0F", "secondary_color": "#111", "spacing": "spacious"})
    styling = resolve_styling(template)

    block = render_section(ingest_section({"title": "Summary", "content": "x"}), 0, styling)

    assert block.heading.style.color == "#0F0F0F"
    assert block.heading.style.font_family == "Lato"
    assert block.heading.style.text_transform == "uppercase"
    assert block.heading.style.letter_spacing == "0.5px"
    assert block.style.margin_bottom == "24px"


@pytest.mark.unit
def test_skills_inline_and_bulleted(make_template):
    section = ingest_section({"title": "Technical Skills", "categories": {"Languages": ["Go", "Rust"]}})
    inline = render_section(section, 0, resolve_styling(make_template()))
    bulleted = render_section(
        section,
        0,
        resolve_styling(
            make_template(styling={"primary_color": "#000", "secondary_color": "#111", "skill_display": "bulleted"})
        ),
    )

    assert isinstance(inline, CategoryListBlock)
    assert inline.display == "inline"
    assert bulleted.display == "bulleted"
    assert inline.categories[0].label == "Languages"
    assert inline.categories[0].items == ["Go", "Rust"]
    assert inline.categories[0].label_style.color == "#222222"


@pytest.mark.unit
def test_experience_entries_stack_company_then_title(styling):
    section = ingest_section(
        {
            "title": "Work Experience",
            "jobs": [
                {"title": "Lead", "company": "Acme", "location": "Remote", "dates": "2020 - Now", "bullets": ["a", "b"]},
                {"title": "Dev", "company": "Initech", "dates": "2018 - 2020", "bullets": ["c"]},
            ],
        }
    )

    block = render_section(section, 0, styling)

    assert isinstance(block, EntryListBlock)
    first, last = block.entries
    assert [line.text for line in first.lines] == ["Acme • Remote", "Lead | 2020 - Now"]
    assert first.bullets == ["a", "b"]
    assert [line.text for line in last.lines] == ["Initech", "Dev | 2018 - 2020"]
    # Divider between entries, none after the last
    assert first.style.border_bottom == "1px solid #11111120"
    assert last.style.border_bottom is None
    assert block.heading.style.margin_bottom == "12px"


@pytest.mark.unit
def test_education_structured_and_plain(styling):
    section = ingest_section(
        {
            "title": "Education & Training",
            "education": [
                {"degree": "MSc", "institution": "MIT", "location": "Cambridge", "dates": "2020", "gpa": "4.0"},
                "First Aid certificate",
            ],
        }
    )

    block = render_section(section, 0, styling)

    structured, plain = block.entries
    assert [line.text for line in structured.lines] == ["MSc", "MIT • Cambridge", "2020 • GPA: 4.0"]
    assert [line.text for line in plain.lines] == ["First Aid certificate"]


@pytest.mark.unit
def test_malformed_education_entry_skipped_by_renderer(styling):
    """Test that a bad entry built outside ingestion does not sink the section."""
    section = Section(
        kind=SectionKind.EDUCATION,
        title="Education",
        payload=EducationPayload(entries=[None, 7, "Diploma"]),
    )

    block = render_section(section, 0, styling)

    assert [entry.lines[0].text for entry in block.entries] == ["Diploma"]


@pytest.mark.unit
def test_projects_lines(styling):
    section = ingest_section(
        {
            "title": "Projects",
            "projects": [
                {"name": "Atlas", "description": "Maps", "technologies": ["Go", "gRPC"], "achievements": ["1M users"]},
                {"name": "Bare"},
            ],
        }
    )

    block = render_section(section, 0, styling)

    atlas, bare = block.entries
    assert [line.text for line in atlas.lines] == ["Atlas", "Maps", "Technologies: Go, gRPC", "Achievements: 1M users"]
    assert [line.text for line in bare.lines] == ["Bare"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        {"title": "Certifications & Licenses", "certifications": ["CKA"]},
        {"title": "Research & Publications", "publications": ["Paper"]},
        {"title": "Professional Memberships", "memberships": ["IEEE"]},
        {"title": "Key Achievements", "achievements": ["Award"]},
        {"title": "Board & Advisory Roles", "roles": ["Advisor"]},
    ],
)
def test_list_kinds_render_bullets(styling, raw):
    section = ingest_section(raw)
    block = render_section(section, 0, styling)

    assert section.kind in LIST_KINDS
    assert isinstance(block, BulletListBlock)
    assert len(block.items) == 1
    assert block.heading.text == raw["title"]


@pytest.mark.unit
def test_executive_hybrid(styling):
    with_summary = render_section(
        ingest_section(
            {"title": "Executive Summary", "content": "Operator.", "jobs": [{"title": "COO", "company": "Co"}]}
        ),
        0,
        styling,
    )
    jobs_only = render_section(
        ingest_section({"title": "Leadership Experience", "jobs": [{"title": "VP", "company": "Co"}]}),
        0,
        styling,
    )

    assert isinstance(with_summary, HybridBlock)
    assert with_summary.paragraph == "Operator."
    assert len(with_summary.entries) == 1
    assert with_summary.heading.style.margin_bottom == "8px"
    assert jobs_only.paragraph is None
    assert jobs_only.heading.style.margin_bottom == "12px"


@pytest.mark.unit
def test_custom_registry_dispatch(styling):
    registry = SectionRendererRegistry()

    @registry.register(SectionKind.SUMMARY)
    def shout(section, index, styling):
        return ParagraphBlock(text=section.payload.content.upper())

    summary = ingest_section({"title": "Summary", "content": "hi"})
    skills = ingest_section({"title": "Skills", "categories": {}})

    assert registry.render(summary, 0, styling).text == "HI"
    assert registry.render(skills, 0, styling) is None
    assert registry.get(SectionKind.SUMMARY) is shout


@pytest.mark.unit
def test_header_block(styling, full_resume):
    header = render_header(ingest_content(full_resume), styling)

    assert header.name.text == "Sam Rivera"
    assert header.title.text == "Staff Engineer"
    assert header.contact.text == "sam@example.com • 555-0100 • Austin, TX • github.com/samr"
    assert header.style.border_bottom == "2px solid #111111"


@pytest.mark.unit
def test_header_without_title_or_contact(styling):
    header = render_header(ingest_content({"name": "Solo"}), styling)

    assert header.title is None
    assert header.contact is None
