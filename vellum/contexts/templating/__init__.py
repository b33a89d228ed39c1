"""
Templating Context

Responsibilities:
- Defines template descriptors (styling, font roles, palette, region assignment)
- Loads the template catalog from YAML descriptors
- Ingests raw resume content and normalizes section titles into kinds
- Resolves the color variant and effective styling for one render

Owns: Template descriptors, resume content model, color and styling resolution
Never: Builds document blocks or decides layout
"""

from vellum.contexts.templating.color_resolver import resolve_colors, resolve_variant_label
from vellum.contexts.templating.exceptions import (
    InvalidContentError,
    InvalidTemplateError,
    TemplateNotFoundError,
)
from vellum.contexts.templating.ingestion import (
    ingest_content,
    load_resume_content,
)
from vellum.contexts.templating.resume_content import (
    ResumeContent,
    Section,
    SectionKind,
)
from vellum.contexts.templating.section_aliases import kind_for_title
from vellum.contexts.templating.styling import EffectiveStyling, resolve_styling
from vellum.contexts.templating.template_catalog import TemplateCatalog
from vellum.contexts.templating.template_descriptor import (
    ColorPair,
    TemplateDescriptor,
    format_template_name,
    load_template_descriptor,
)

__all__ = [
    # Template descriptors and catalog
    "TemplateDescriptor",
    "TemplateCatalog",
    "load_template_descriptor",
    "format_template_name",
    # Content model and ingestion
    "ResumeContent",
    "Section",
    "SectionKind",
    "ingest_content",
    "load_resume_content",
    "kind_for_title",
    # Color and styling resolution
    "ColorPair",
    "EffectiveStyling",
    "resolve_colors",
    "resolve_variant_label",
    "resolve_styling",
    # Errors
    "InvalidContentError",
    "InvalidTemplateError",
    "TemplateNotFoundError",
]
