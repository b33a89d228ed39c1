"""Custom exceptions for templating context with template and content references."""

from pathlib import Path
from typing import List, Optional


class InvalidTemplateError(ValueError):
    """
    Exception raised when a template descriptor is missing required fields.

    Attributes:
        message: Error description
        template_id: Identifier of the offending template (if known)
        source_path: File the descriptor was loaded from (if any)
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.source_path = source_path

        parts = [message]

        if template_id:
            parts.append(f"Template: {template_id}")

        if source_path:
            parts.append(f"Source: {source_path}")

        super().__init__("\n".join(parts))


class InvalidContentError(ValueError):
    """
    Exception raised when resume content cannot be ingested at all.

    Only raised for document-level problems (no name, sections not a list).
    Problems inside a single section or entry are recovered locally instead.
    """

    pass


class TemplateNotFoundError(KeyError):
    """
    Exception raised when a template id is not present in the catalog.

    Attributes:
        template_id: The id that was looked up
        available: Ids that the catalog does know about
    """

    def __init__(self, template_id: str, available: Optional[List[str]] = None):
        self.template_id = template_id
        self.available = sorted(available or [])
        super().__init__(template_id)

    def __str__(self) -> str:
        return f"Template '{self.template_id}' not found. Available templates: {self.available}"
