"""Unit tests for template descriptor loading."""

import pytest

from vellum.contexts.templating.defaults import DEFAULT_SKILL_DISPLAY, DEFAULT_SPACING
from vellum.contexts.templating.exceptions import InvalidTemplateError
from vellum.contexts.templating.template_descriptor import (
    ColorVariant,
    format_template_name,
    load_template_descriptor,
)


@pytest.mark.unit
def test_load_minimal_descriptor(plain_template):
    assert plain_template.id == "plain"
    assert plain_template.styling.primary_color == "#111111"
    assert plain_template.fonts is None
    assert plain_template.palette == []
    assert plain_template.layout is None
    assert plain_template.sample_content is None


@pytest.mark.unit
def test_camel_case_keys_are_accepted():
    """Test descriptors written with camelCase keys load like snake_case ones."""
    template = load_template_descriptor(
        {
            "id": "camel",
            "styling": {"primaryColor": "#123456", "secondaryColor": "#654321", "fontFamily": "Inter"},
            "colorOptions": {"palette": [{"primary": "#000000", "secondary": "#FFFFFF", "label": "Mono"}]},
            "sampleData": {"name": "Camel Case", "sections": [{"title": "Summary", "content": "Hi"}]},
        }
    )

    assert template.styling.primary_color == "#123456"
    assert template.styling.font_family == "Inter"
    assert template.palette == [ColorVariant("#000000", "#FFFFFF", "Mono")]
    assert template.sample_content.name == "Camel Case"


@pytest.mark.unit
def test_sample_content_keys_are_not_rewritten():
    """Test that content inside sample data keeps its own keys (skill category names)."""
    template = load_template_descriptor(
        {
            "id": "t",
            "styling": {"primary_color": "#000", "secondary_color": "#111"},
            "sample_content": {
                "name": "N",
                "sections": [{"title": "Skills", "categories": {"CloudPlatforms": ["AWS"]}}],
            },
        }
    )
    assert list(template.sample_content.sections[0].payload.categories) == ["CloudPlatforms"]


@pytest.mark.unit
def test_missing_id_raises():
    with pytest.raises(InvalidTemplateError, match="'id'"):
        load_template_descriptor({"styling": {"primary_color": "#000", "secondary_color": "#111"}})


@pytest.mark.unit
def test_missing_colors_raise_with_template_id():
    with pytest.raises(InvalidTemplateError) as excinfo:
        load_template_descriptor({"id": "broken", "styling": {"primary_color": "#000"}})

    assert excinfo.value.template_id == "broken"
    assert "secondary_color" in str(excinfo.value)


@pytest.mark.unit
def test_missing_styling_raises():
    with pytest.raises(InvalidTemplateError):
        load_template_descriptor({"id": "bare"})


@pytest.mark.unit
def test_invalid_spacing_and_skill_display_fall_back(make_template):
    template = make_template(
        styling={
            "primary_color": "#000",
            "secondary_color": "#111",
            "spacing": "roomy",
            "skill_display": "tags",
        }
    )
    assert template.styling.spacing == DEFAULT_SPACING
    assert template.styling.skill_display == DEFAULT_SKILL_DISPLAY


@pytest.mark.unit
def test_partial_fonts_fill_from_font_family(make_template):
    template = make_template(fonts={"header": "Georgia"})

    assert template.fonts.header == "Georgia"
    assert template.fonts.section == "Helvetica, sans-serif"
    assert template.fonts.body == "Helvetica, sans-serif"


@pytest.mark.unit
def test_layout_has_regions(make_template):
    typed_only = make_template(layout={"type": "two-column"})
    assigned = make_template(layout={"sidebar": ["skills"]})

    assert typed_only.layout.has_regions is False
    assert assigned.layout.has_regions is True
    assert assigned.layout.main == []


@pytest.mark.unit
def test_malformed_palette_entries_are_skipped(make_template):
    template = make_template(
        color_options={"palette": ["#FF0000", {"primary": "#00FF00", "secondary": "#0000FF"}]}
    )
    assert len(template.palette) == 1
    assert template.palette[0].primary == "#00FF00"


@pytest.mark.unit
def test_metadata_and_display_name(make_template):
    template = make_template(id="healthcare-modern", category="Healthcare", popularity=3, tags=["medical"])

    assert template.display_name == "Healthcare Modern"
    assert template.metadata() == {
        "id": "healthcare-modern",
        "name": "Healthcare Modern",
        "description": "",
        "category": "Healthcare",
        "popularity": 3,
        "tier": "free",
        "tags": ["medical"],
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    "template_id, expected",
    [
        ("tech-modern", "Tech Modern"),
        ("classic", "Classic"),
        ("healthcare_modern", "Healthcare Modern"),
        ("two-column-x", "Two Column X"),
    ],
)
def test_format_template_name(template_id, expected):
    assert format_template_name(template_id) == expected


@pytest.mark.unit
def test_load_from_yaml_path(tmp_path):
    path = tmp_path / "slate.yaml"
    path.write_text(
        "id: slate\n"
        "popularity: 2\n"
        "styling:\n"
        "  primaryColor: '#334155'\n"
        "  secondaryColor: '#64748B'\n"
    )

    template = load_template_descriptor(path)

    assert template.id == "slate"
    assert template.popularity == 2
    assert template.styling.primary_color == "#334155"


@pytest.mark.unit
def test_yaml_path_without_mapping_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- id: slate\n")

    with pytest.raises(InvalidTemplateError) as excinfo:
        load_template_descriptor(path)

    assert excinfo.value.source_path == path


@pytest.mark.unit
def test_non_numeric_popularity_raises():
    with pytest.raises(InvalidTemplateError, match="popularity") as excinfo:
        load_template_descriptor(
            {
                "id": "broken",
                "popularity": "very",
                "styling": {"primary_color": "#000", "secondary_color": "#111"},
            }
        )

    assert excinfo.value.template_id == "broken"
