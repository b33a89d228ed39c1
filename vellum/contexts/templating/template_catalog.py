"""
Template Catalog

Registry for loading and caching template descriptors. Descriptors are stored as
YAML files in vellum/contexts/templating/catalog/{template_id}.yaml (or in the
directory named by VELLUM_CATALOG_PATH).
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from vellum.contexts.templating.exceptions import InvalidTemplateError, TemplateNotFoundError
from vellum.contexts.templating.logger import _log_error, log_catalog_loaded
from vellum.contexts.templating.template_descriptor import (
    TemplateDescriptor,
    load_template_descriptor,
)

load_dotenv()
CATALOG_PATH = Path(os.getenv("VELLUM_CATALOG_PATH", Path(__file__).parent / "catalog"))

DESCRIPTOR_SUFFIXES = (".yaml", ".yml")


class TemplateCatalog:
    """
    Registry of template descriptors keyed by template id.

    Descriptors are loaded lazily on first access and cached. The catalog never
    changes a descriptor once loaded; callers receive shared read-only instances.
    """

    def __init__(self, catalog_path: Path = None):
        """
        Initialize the template catalog.

        Args:
            catalog_path: Directory holding descriptor YAML files. Defaults to
                          VELLUM_CATALOG_PATH from environment
        """
        if catalog_path is None:
            catalog_path = CATALOG_PATH

        self.catalog_path = Path(catalog_path)
        self._cache: Optional[Dict[str, TemplateDescriptor]] = None

    def _load(self) -> Dict[str, TemplateDescriptor]:
        if self._cache is not None:
            return self._cache

        if not self.catalog_path.is_dir():
            raise FileNotFoundError(f"Template catalog directory not found: {self.catalog_path}")

        templates: Dict[str, TemplateDescriptor] = {}
        for path in sorted(self.catalog_path.iterdir()):
            if path.suffix not in DESCRIPTOR_SUFFIXES:
                continue
            descriptor = load_template_descriptor(path)
            if descriptor.id in templates:
                _log_error(f"Duplicate template id {descriptor.id!r} in {path}")
                raise InvalidTemplateError(
                    "Duplicate template id in catalog", descriptor.id, path
                )
            templates[descriptor.id] = descriptor

        log_catalog_loaded(self.catalog_path, list(templates))
        self._cache = templates
        return templates

    def get(self, template_id: str) -> TemplateDescriptor:
        """
        Get a template by id.

        Args:
            template_id: Template identifier (e.g., 'modern')

        Returns:
            TemplateDescriptor

        Raises:
            TemplateNotFoundError: If no template has this id
        """
        templates = self._load()
        if template_id not in templates:
            raise TemplateNotFoundError(template_id, list(templates))
        return templates[template_id]

    def find(self, template_id: str) -> Optional[TemplateDescriptor]:
        """Get a template by id, or None if it does not exist."""
        return self._load().get(template_id)

    def ids(self) -> List[str]:
        """All template ids, sorted."""
        return sorted(self._load())

    def all(self) -> List[TemplateDescriptor]:
        """All templates, sorted by id."""
        templates = self._load()
        return [templates[template_id] for template_id in sorted(templates)]

    def metadata(self) -> List[Dict]:
        """Catalog metadata (no styling, no sample content) for every template."""
        return [template.metadata() for template in self.all()]

    def popular(self, limit: int = 3) -> List[TemplateDescriptor]:
        """
        Most popular templates first.

        Ties keep id order so the result is stable across calls.
        """
        ranked = sorted(self.all(), key=lambda template: -template.popularity)
        return ranked[:limit]

    def by_category(self, category: str) -> List[TemplateDescriptor]:
        """Templates in a category (case-insensitive)."""
        wanted = category.casefold()
        return [template for template in self.all() if template.category.casefold() == wanted]

    def search(self, query: str) -> List[TemplateDescriptor]:
        """Templates whose name, description, category or tags contain the query."""
        needle = query.casefold()
        matches = []
        for template in self.all():
            haystack = [template.display_name, template.description, template.category, *template.tags]
            if any(needle in field.casefold() for field in haystack):
                matches.append(template)
        return matches

    def clear_cache(self):
        """Clear the descriptor cache."""
        self._cache = None

    def is_cached(self) -> bool:
        """
        Check if descriptors have been loaded.

        Returns:
            True if cached, False otherwise
        """
        return self._cache is not None
