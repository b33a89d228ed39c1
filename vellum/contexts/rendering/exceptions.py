"""Custom exceptions for rendering context with template references."""

from typing import List, Optional


class IncompleteContentError(Exception):
    """
    Exception raised when content lacks the shape a layout needs.

    Raised by bespoke layouts invoked without their sidebar or main panel
    sections, and by previews of templates without sample content. Callers
    decide what to show instead (an error state, a generic layout, ...).

    Attributes:
        template_id: Template that was being rendered
        missing: Names of the missing content parts (e.g., ["sidebar sections"])
    """

    def __init__(self, template_id: str, missing: Optional[List[str]] = None):
        self.template_id = template_id
        self.missing = list(missing or [])

        message = f"Content is incomplete for template '{template_id}'"
        if self.missing:
            message += f": missing {', '.join(self.missing)}"

        super().__init__(message)
