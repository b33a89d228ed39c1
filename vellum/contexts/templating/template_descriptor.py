"""
Template Descriptor

Static definition of a template's visual identity: styling, font roles, color
palette and region assignment. Descriptors are read-only inputs to the engine.

Descriptor mappings may use snake_case keys or the camelCase keys of the
upstream template catalog (primaryColor, colorOptions, sampleData, ...).
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from omegaconf import OmegaConf

from vellum.contexts.templating.defaults import (
    DEFAULT_FONT_STACK,
    DEFAULT_SKILL_DISPLAY,
    DEFAULT_SPACING,
    SECTION_SPACING,
    SKILL_DISPLAYS,
)
from vellum.contexts.templating.exceptions import InvalidTemplateError
from vellum.contexts.templating.ingestion import ingest_content
from vellum.contexts.templating.logger import _log_warning
from vellum.contexts.templating.resume_content import ResumeContent


@dataclass
class ColorVariant:
    """One selectable {primary, secondary} pair from a template palette."""

    primary: str
    secondary: str
    label: str = ""


@dataclass
class ColorPair:
    """Resolved colors for a single render."""

    primary: str
    secondary: str


@dataclass
class FontRoles:
    """Font family per typographic role."""

    header: str = DEFAULT_FONT_STACK
    section: str = DEFAULT_FONT_STACK
    body: str = DEFAULT_FONT_STACK


@dataclass
class TemplateStyling:
    """
    Base styling of a template.

    Attributes:
        primary_color: Default primary color (headings, name)
        secondary_color: Default secondary color (meta lines, labels)
        font_family: Fallback font family for roles without an explicit font
        spacing: One of compact, standard, spacious
        skill_display: inline (comma-joined) or bulleted skill lists
    """

    primary_color: str
    secondary_color: str
    font_family: str = DEFAULT_FONT_STACK
    spacing: str = DEFAULT_SPACING
    skill_display: str = DEFAULT_SKILL_DISPLAY


@dataclass
class LayoutAssignment:
    """
    Region assignment by normalized section-name fragments.

    Attributes:
        type: Layout classification label (informational)
        main: Fragments placing a section in the main region
        sidebar: Fragments placing a section in the sidebar region
    """

    type: str = "single-column"
    main: List[str] = field(default_factory=list)
    sidebar: List[str] = field(default_factory=list)

    @property
    def has_regions(self) -> bool:
        return bool(self.main or self.sidebar)


@dataclass
class TemplateDescriptor:
    """
    Complete template definition.

    Attributes:
        id: Stable identifier, also the key for bespoke layout lookup
        styling: Base colors, font family, spacing and skill display
        name: Human-readable name
        description: Short description for catalog listings
        category: Catalog category (e.g., "Professional")
        popularity: 1-10 popularity score for catalog ordering
        tier: "free" or "premium" (informational; gating is external)
        tags: Free-form search tags
        fonts: Optional font roles (None means derive from styling.font_family)
        palette: Ordered color variants; index 0 is the default
        layout: Optional region assignment (None means single column)
        sample_content: Optional sample resume used for catalog previews
    """

    id: str
    styling: TemplateStyling
    name: str = ""
    description: str = ""
    category: str = ""
    popularity: int = 0
    tier: str = "free"
    tags: List[str] = field(default_factory=list)
    fonts: Optional[FontRoles] = None
    palette: List[ColorVariant] = field(default_factory=list)
    layout: Optional[LayoutAssignment] = None
    sample_content: Optional[ResumeContent] = None

    @property
    def display_name(self) -> str:
        return self.name or format_template_name(self.id)

    def metadata(self) -> Dict[str, Any]:
        """Catalog metadata without styling or sample content."""
        return {
            "id": self.id,
            "name": self.display_name,
            "description": self.description,
            "category": self.category,
            "popularity": self.popularity,
            "tier": self.tier,
            "tags": list(self.tags),
        }


def format_template_name(template_id: str) -> str:
    """
    Derive a display name from a template id.

    Examples:
        >>> format_template_name("tech-modern")
        'Tech Modern'
    """
    words = re.split(r"[-_\s]+", template_id.strip())
    return " ".join(word[:1].upper() + word[1:] for word in words if word)


def _camel_to_snake(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _normalize_keys(data: Any, skip: tuple = ("sample_content", "sample_data")) -> Any:
    """Recursively convert mapping keys to snake_case, leaving content subtrees untouched."""
    if isinstance(data, Mapping):
        normalized = {}
        for key, value in data.items():
            snake = _camel_to_snake(str(key))
            normalized[snake] = value if snake in skip else _normalize_keys(value, skip)
        return normalized
    if isinstance(data, list):
        return [_normalize_keys(item, skip) for item in data]
    return data


def _build_styling(raw: Mapping, template_id: str, source_path: Optional[Path]) -> TemplateStyling:
    if not isinstance(raw, Mapping):
        raise InvalidTemplateError("Template is missing 'styling'", template_id, source_path)

    missing = [key for key in ("primary_color", "secondary_color") if not raw.get(key)]
    if missing:
        raise InvalidTemplateError(
            f"Template styling is missing required fields: {missing}", template_id, source_path
        )

    spacing = raw.get("spacing") or DEFAULT_SPACING
    if spacing not in SECTION_SPACING:
        _log_warning(f"{template_id}: unknown spacing {spacing!r}, using {DEFAULT_SPACING!r}")
        spacing = DEFAULT_SPACING

    skill_display = raw.get("skill_display") or DEFAULT_SKILL_DISPLAY
    if skill_display not in SKILL_DISPLAYS:
        _log_warning(
            f"{template_id}: unknown skill_display {skill_display!r}, using {DEFAULT_SKILL_DISPLAY!r}"
        )
        skill_display = DEFAULT_SKILL_DISPLAY

    return TemplateStyling(
        primary_color=str(raw["primary_color"]),
        secondary_color=str(raw["secondary_color"]),
        font_family=str(raw.get("font_family") or DEFAULT_FONT_STACK),
        spacing=spacing,
        skill_display=skill_display,
    )


def _build_fonts(raw: Optional[Mapping], fallback: str) -> Optional[FontRoles]:
    if not raw:
        return None
    return FontRoles(
        header=str(raw.get("header") or fallback),
        section=str(raw.get("section") or fallback),
        body=str(raw.get("body") or fallback),
    )


def _build_palette(raw_options: Optional[Mapping], template_id: str) -> List[ColorVariant]:
    if not raw_options:
        return []
    palette = []
    for index, raw in enumerate(raw_options.get("palette") or []):
        if not isinstance(raw, Mapping):
            _log_warning(f"{template_id}: skipping malformed palette entry {index}: {raw!r}")
            continue
        palette.append(
            ColorVariant(
                primary=str(raw.get("primary") or ""),
                secondary=str(raw.get("secondary") or ""),
                label=str(raw.get("label") or ""),
            )
        )
    return palette


def _build_layout(raw: Optional[Mapping]) -> Optional[LayoutAssignment]:
    if not raw:
        return None
    return LayoutAssignment(
        type=str(raw.get("type") or "single-column"),
        main=[str(fragment) for fragment in raw.get("main") or []],
        sidebar=[str(fragment) for fragment in raw.get("sidebar") or []],
    )


def _parse_popularity(value: Any, template_id: str, source_path: Optional[Path]) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidTemplateError(
            f"Template popularity must be an integer, got {value!r}", template_id, source_path
        ) from None


def load_template_descriptor(
    source: Union[Mapping, Path, str], source_path: Optional[Path] = None
) -> TemplateDescriptor:
    """
    Build a TemplateDescriptor from a YAML file or a raw mapping.

    Args:
        source: Path to a descriptor YAML file, or a descriptor mapping
                (snake_case or camelCase keys)
        source_path: File a mapping came from, used in error messages

    Returns:
        TemplateDescriptor instance

    Raises:
        InvalidTemplateError: If the file does not hold a mapping, id or styling
            colors are missing, or popularity is not an integer

    Example:
        >>> template = load_template_descriptor(Path("catalog/classic.yaml"))
        >>> template.display_name
        'Classic'
    """
    raw = source
    if isinstance(source, (str, Path)):
        source_path = Path(source)
        raw = OmegaConf.to_container(OmegaConf.load(source_path), resolve=True)
    if not isinstance(raw, Mapping):
        raise InvalidTemplateError(
            f"Template descriptor must be a mapping, got {type(raw).__name__}", None, source_path
        )

    data = _normalize_keys(raw)

    template_id = data.get("id")
    if not template_id:
        raise InvalidTemplateError("Template is missing required field 'id'", None, source_path)
    template_id = str(template_id)

    styling = _build_styling(data.get("styling"), template_id, source_path)

    sample_content = None
    raw_sample = data.get("sample_content") or data.get("sample_data")
    if raw_sample:
        sample_content = ingest_content(raw_sample)

    return TemplateDescriptor(
        id=template_id,
        styling=styling,
        name=str(data.get("name") or ""),
        description=str(data.get("description") or ""),
        category=str(data.get("category") or ""),
        popularity=_parse_popularity(data.get("popularity"), template_id, source_path),
        tier=str(data.get("tier") or "free"),
        tags=[str(tag) for tag in data.get("tags") or []],
        fonts=_build_fonts(data.get("fonts"), styling.font_family),
        palette=_build_palette(data.get("color_options"), template_id),
        layout=_build_layout(data.get("layout")),
        sample_content=sample_content,
    )
