"""
Default values for VELLUM template styling.

Provides shared defaults used by:
- template_descriptor.py (fill in missing descriptor fields)
- styling.py (materialize effective styling once per render)
- layouts.py (bespoke layout palette and sizes)
"""

from typing import Dict

DEFAULT_FONT_STACK = "Arial, sans-serif"

DEFAULT_SPACING = "standard"

# Space below each rendered section, keyed by template spacing
SECTION_SPACING = {
    "compact": "12px",
    "standard": "16px",
    "spacious": "24px",
}

SKILL_DISPLAYS = ("inline", "bulleted")
DEFAULT_SKILL_DISPLAY = "inline"

# Body text defaults shared by every generic section renderer
BODY_TEXT_COLOR = "#333333"
BODY_LINE_HEIGHT = "1.5"

# Section heading treatment
HEADING_FONT_SIZE = "16px"
HEADING_TEXT_TRANSFORM = "uppercase"
HEADING_LETTER_SPACING = "0.5px"

# Page geometry (A4)
PAGE_WIDTH = "210mm"
PAGE_MIN_HEIGHT = "297mm"
PAGE_PADDING = "20mm"

# Hex alpha suffixes appended to the primary color for dividers
ENTRY_DIVIDER_ALPHA = "20"
SIDEBAR_DIVIDER_ALPHA = "30"

# Bespoke "tech-modern" identity palette (ignores the selected color variant)
TECH_MODERN_COLORS = {
    "sidebar_background": "#000000",
    "sidebar_text": "#FFFFFF",
    "main_background": "#FFFFFF",
    "main_text": "#000000",
}

TECH_MODERN_WIDTHS = {
    "sidebar": "40%",
    "main": "60%",
}

# Icons shown before each contact item in the bespoke sidebar
CONTACT_ICONS: Dict[str, str] = {
    "phone": "\U0001F4DE",
    "email": "✉",
    "website": "\U0001F310",
    "location": "\U0001F4CD",
}
DEFAULT_CONTACT_ICON = CONTACT_ICONS["phone"]

# Contact types whose values may break anywhere (long addresses)
BREAK_ALL_CONTACT_TYPES = ("email", "website")

# Separator used when joining inline fragments (contact line, institution • location)
INLINE_SEPARATOR = " • "
