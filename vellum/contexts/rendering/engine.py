"""
Render Orchestrator

Ties the pieces of a render together:

    content + template + variant
        -> resolve_styling (colors, fonts, spacing)
        -> resolve_layout (bespoke / two-column / single column)
        -> section renderers, once per section, in document order
        -> Document

The engine is a pure function of its inputs. It holds no state between
renders and never mutates the content or the template; the selected color
variant is always supplied by the caller.
"""

from typing import Any, Mapping, Union

from vellum.contexts.rendering.blocks import Document
from vellum.contexts.rendering.exceptions import IncompleteContentError
from vellum.contexts.rendering.layouts import resolve_layout
from vellum.contexts.rendering.logger import _log_debug, log_render_result, log_render_start
from vellum.contexts.templating.ingestion import ingest_content
from vellum.contexts.templating.resume_content import ResumeContent
from vellum.contexts.templating.styling import resolve_styling
from vellum.contexts.templating.template_descriptor import TemplateDescriptor


def render(
    content: Union[ResumeContent, Mapping],
    template: TemplateDescriptor,
    variant_index: Any = 0,
) -> Document:
    """
    Render resume content with a template and color variant.

    Args:
        content: ResumeContent, or a raw resume mapping (ingested first)
        template: Template descriptor
        variant_index: Selected palette index; invalid values fall back to variant 0

    Returns:
        Document block tree

    Raises:
        IncompleteContentError: If a bespoke layout is missing its panel sections
        InvalidContentError: If a raw mapping cannot be ingested

    Example:
        >>> document = render({"name": "Jane Doe", "sections": [...]}, catalog.get("classic"))
        >>> [block.kind for block in document.body]
        ['paragraph', 'category_list']
    """
    content = ingest_content(content)
    styling = resolve_styling(template, variant_index)
    strategy = resolve_layout(template)

    log_render_start(content.name, template.id, strategy.name, variant_index)
    result = strategy.build(content, styling)

    document = Document(
        template_id=template.id,
        layout=strategy.name,
        colors=styling.colors,
        header=result.header,
        regions=result.regions,
        style=result.page_style,
    )
    log_render_result(document, result.skipped)
    return document


def render_preview(template: TemplateDescriptor, variant_index: Any = 0) -> Document:
    """
    Render a template with its own sample content.

    Args:
        template: Template descriptor
        variant_index: Selected palette index

    Returns:
        Document block tree

    Raises:
        IncompleteContentError: If the template has no sample content
    """
    if template.sample_content is None:
        _log_debug(f"{template.id}: no sample content to preview")
        raise IncompleteContentError(template.id, ["sample content"])
    return render(template.sample_content, template, variant_index)
