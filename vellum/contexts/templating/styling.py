"""
Effective Styling

Materializes everything a renderer needs to style a section (colors, font
roles, spacing, heading treatment) once per render. Renderers consume the
result read-only and never consult the template descriptor directly.
"""

from dataclasses import dataclass
from typing import Any

from vellum.contexts.templating.color_resolver import resolve_colors
from vellum.contexts.templating.defaults import (
    BODY_LINE_HEIGHT,
    BODY_TEXT_COLOR,
    HEADING_FONT_SIZE,
    HEADING_LETTER_SPACING,
    HEADING_TEXT_TRANSFORM,
    SECTION_SPACING,
)
from vellum.contexts.templating.template_descriptor import (
    ColorPair,
    FontRoles,
    TemplateDescriptor,
)


@dataclass(frozen=True)
class EffectiveStyling:
    """
    Fully resolved styling for one render.

    Attributes:
        template_id: Template the styling was resolved from
        colors: Resolved primary/secondary colors
        fonts: Font family per role (header, section, body)
        spacing: Spacing name (compact, standard, spacious)
        section_margin: Space below each section for that spacing
        skill_display: inline or bulleted skill lists
        body_color: Default body text color
        body_line_height: Default body line height
        heading_size: Section heading font size
        heading_transform: Section heading casing
        heading_letter_spacing: Section heading letter spacing
    """

    template_id: str
    colors: ColorPair
    fonts: FontRoles
    spacing: str
    section_margin: str
    skill_display: str
    body_color: str = BODY_TEXT_COLOR
    body_line_height: str = BODY_LINE_HEIGHT
    heading_size: str = HEADING_FONT_SIZE
    heading_transform: str = HEADING_TEXT_TRANSFORM
    heading_letter_spacing: str = HEADING_LETTER_SPACING


def resolve_fonts(template: TemplateDescriptor) -> FontRoles:
    """Template font roles, or every role set to the styling font family."""
    if template.fonts is not None:
        return template.fonts
    family = template.styling.font_family
    return FontRoles(header=family, section=family, body=family)


def resolve_styling(template: TemplateDescriptor, variant_index: Any = 0) -> EffectiveStyling:
    """
    Resolve effective styling for a template and selected color variant.

    Args:
        template: Template descriptor
        variant_index: Selected palette index

    Returns:
        EffectiveStyling consumed by every section renderer
    """
    spacing = template.styling.spacing
    return EffectiveStyling(
        template_id=template.id,
        colors=resolve_colors(template, variant_index),
        fonts=resolve_fonts(template),
        spacing=spacing,
        section_margin=SECTION_SPACING.get(spacing, SECTION_SPACING["standard"]),
        skill_display=template.styling.skill_display,
    )
