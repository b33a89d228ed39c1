"""
HTML Markup Serialization

Registry for loading and caching the Jinja2 templates that turn a Document
into HTML for on-screen preview. Templates live in
vellum/contexts/rendering/markup/ (or the directory named by
VELLUM_MARKUP_PATH) and are autoescaped: every string from resume content is
treated as text, never markup.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from vellum.contexts.rendering.blocks import Document, TextStyle
from vellum.contexts.rendering.logger import _log_debug

load_dotenv()
MARKUP_PATH = Path(os.getenv("VELLUM_MARKUP_PATH", Path(__file__).parent / "markup"))

TEMPLATE_SUFFIX = ".html.jinja"


def css(style: Optional[TextStyle]) -> str:
    """Jinja2 filter: inline CSS for a TextStyle (empty for None)."""
    if style is None:
        return ""
    return style.to_css()


class MarkupRegistry:
    """
    Registry for loading and caching Jinja2 markup templates.

    Templates are stored in {markup_path}/{name}.html.jinja. The entry point is
    'document'; per-block macros live in 'blocks'.
    """

    def __init__(self, markup_path: Path = None):
        """
        Initialize the markup registry.

        Args:
            markup_path: Directory holding markup templates. Defaults to
                         VELLUM_MARKUP_PATH from environment
        """
        if markup_path is None:
            markup_path = MARKUP_PATH

        self.markup_path = Path(markup_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.markup_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["css"] = css

    def get_template(self, name: str) -> Template:
        """
        Get a markup template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., 'document')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"{name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Markup template '{name}' not found at {self.markup_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Path to a markup template file."""
        return self.markup_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            name: Template name

        Returns:
            True if cached, False otherwise
        """
        return name in self._cache


MARKUP = MarkupRegistry()


def serialize_html(
    document: Document, title: Optional[str] = None, registry: Optional[MarkupRegistry] = None
) -> str:
    """
    Serialize a Document to a standalone HTML page.

    Args:
        document: Rendered document
        title: Page title (defaults to the template id)
        registry: Markup registry (defaults to the package templates)

    Returns:
        HTML string
    """
    registry = registry or MARKUP
    html = registry.get_template("document").render(
        document=document, title=title or document.template_id
    )
    _log_debug(f"Serialized {document.template_id} to {len(html)} characters of HTML")
    return html
