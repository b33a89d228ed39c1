"""
Color Theme Resolution

Resolves the effective {primary, secondary} colors for a render from a
template and an externally-held variant index.

Fallback policy (never raises):
- Valid index into the palette -> that variant
- Palette present, index invalid -> variant 0
- No palette -> template styling defaults
- A variant with an empty channel borrows that channel from the styling defaults
"""

from typing import Any, Optional

from vellum.contexts.templating.logger import _log_debug
from vellum.contexts.templating.template_descriptor import ColorPair, TemplateDescriptor


def _valid_index(template: TemplateDescriptor, variant_index: Any) -> Optional[int]:
    """Return variant_index if it addresses a palette entry, else None."""
    # bool is an int subclass but never a meaningful selection
    if isinstance(variant_index, bool) or not isinstance(variant_index, int):
        return None
    if 0 <= variant_index < len(template.palette):
        return variant_index
    return None


def resolve_colors(template: TemplateDescriptor, variant_index: Any = 0) -> ColorPair:
    """
    Resolve the colors for a template and selected variant.

    Args:
        template: Template descriptor
        variant_index: Selected palette index (may be out of range or None)

    Returns:
        ColorPair with primary and secondary colors

    Examples:
        >>> resolve_colors(template, 1)   # second palette entry
        >>> resolve_colors(template, 99)  # same as resolve_colors(template, 0)
    """
    defaults = ColorPair(
        primary=template.styling.primary_color,
        secondary=template.styling.secondary_color,
    )

    if not template.palette:
        if variant_index not in (0, None):
            _log_debug(f"{template.id}: no palette, ignoring variant {variant_index!r}")
        return defaults

    index = _valid_index(template, variant_index)
    if index is None:
        _log_debug(
            f"{template.id}: variant {variant_index!r} outside palette of "
            f"{len(template.palette)}, using variant 0"
        )
        index = 0

    variant = template.palette[index]
    return ColorPair(
        primary=variant.primary or defaults.primary,
        secondary=variant.secondary or defaults.secondary,
    )


def resolve_variant_label(template: TemplateDescriptor, variant_index: Any = 0) -> Optional[str]:
    """
    Label of the selected color variant, falling back to the label of variant 0.

    Returns:
        Variant label, or None if the template has no palette
    """
    if not template.palette:
        return None
    index = _valid_index(template, variant_index)
    if index is not None and template.palette[index].label:
        return template.palette[index].label
    return template.palette[0].label or None
