"""
Rendering Context

Responsibilities:
- Dispatches each tagged section to its renderer
- Chooses the page layout (bespoke, two-column, single column)
- Assembles the Document block tree for one render
- Serializes documents to HTML markup

Owns: Section renderers, layout strategies, Document block tree, markup
Never: Parses content files or edits template descriptors
"""

from vellum.contexts.rendering.blocks import Document
from vellum.contexts.rendering.engine import render, render_preview
from vellum.contexts.rendering.exceptions import IncompleteContentError
from vellum.contexts.rendering.layouts import (
    LayoutStrategy,
    list_layouts,
    register_layout,
    resolve_layout,
)
from vellum.contexts.rendering.markup import serialize_html
from vellum.contexts.rendering.section_renderers import render_section

__all__ = [
    # Orchestration
    "render",
    "render_preview",
    "Document",
    "IncompleteContentError",
    # Dispatch and layout
    "render_section",
    "resolve_layout",
    "register_layout",
    "list_layouts",
    "LayoutStrategy",
    # Serialization
    "serialize_html",
]
