"""Unit tests for effective styling resolution."""

import dataclasses

import pytest

from vellum.contexts.templating.defaults import SECTION_SPACING
from vellum.contexts.templating.styling import resolve_fonts, resolve_styling
from vellum.contexts.templating.template_descriptor import ColorPair, FontRoles


@pytest.mark.unit
def test_fonts_default_to_font_family(plain_template):
    assert resolve_fonts(plain_template) == FontRoles(
        header="Helvetica, sans-serif",
        section="Helvetica, sans-serif",
        body="Helvetica, sans-serif",
    )


@pytest.mark.unit
def test_declared_fonts_win(make_template):
    template = make_template(fonts={"header": "Georgia", "section": "Lato", "body": "Inter"})
    assert resolve_fonts(template) == FontRoles("Georgia", "Lato", "Inter")


@pytest.mark.unit
@pytest.mark.parametrize("spacing", ["compact", "standard", "spacious"])
def test_section_margin_follows_spacing(make_template, spacing):
    template = make_template(
        styling={"primary_color": "#000", "secondary_color": "#111", "spacing": spacing}
    )
    styling = resolve_styling(template)

    assert styling.spacing == spacing
    assert styling.section_margin == SECTION_SPACING[spacing]


@pytest.mark.unit
def test_styling_uses_selected_variant(palette_template):
    styling = resolve_styling(palette_template, 2)

    assert styling.template_id == "palette"
    assert styling.colors == ColorPair("#0000AA", "#1111AA")


@pytest.mark.unit
def test_styling_is_frozen(plain_template):
    styling = resolve_styling(plain_template)
    with pytest.raises(dataclasses.FrozenInstanceError):
        styling.spacing = "compact"


@pytest.mark.unit
def test_heading_treatment_defaults(plain_template):
    styling = resolve_styling(plain_template)

    assert styling.heading_transform == "uppercase"
    assert styling.heading_letter_spacing == "0.5px"
    assert styling.skill_display == "inline"
