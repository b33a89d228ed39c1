"""
Section title aliases.

Maps human-readable section titles (including legacy synonyms) to their
canonical SectionKind. Titles are compared after case-folding and collapsing
whitespace, so "Work  experience" and "WORK EXPERIENCE" are the same title.
"""

import re
from typing import Dict, List, Optional

from vellum.contexts.templating.resume_content import SectionKind

SECTION_TITLE_ALIASES: Dict[SectionKind, List[str]] = {
    SectionKind.SUMMARY: [
        "Summary",
        "Professional Summary",
    ],
    SectionKind.SKILLS: [
        "Skills",
        "Technical Skills",
        "Technical Expertise",
        "Specialised Skills",
        "Specialized Skills",
        "Core Skills",
    ],
    SectionKind.EXPERIENCE: [
        "Experience",
        "Professional Experience",
        "Work Experience",
        "Medical Experience",
        "Clinical Experience",
    ],
    SectionKind.EDUCATION: [
        "Education",
        "Education & Training",
        "Continuing Education",
    ],
    SectionKind.PROJECTS: [
        "Projects",
        "Key Projects",
    ],
    SectionKind.CERTIFICATIONS: [
        "Certifications",
        "Certifications & Licences",
        "Certifications & Licenses",
    ],
    SectionKind.PUBLICATIONS: [
        "Publications",
        "Research & Publications",
    ],
    SectionKind.MEMBERSHIPS: [
        "Memberships",
        "Professional Memberships",
    ],
    SectionKind.ACHIEVEMENTS: [
        "Achievements",
        "Key Achievements",
    ],
    SectionKind.BOARD_ROLES: [
        "Board & Advisory Roles",
    ],
    SectionKind.EXECUTIVE: [
        "Executive Summary",
        "Leadership Experience",
    ],
}


def normalize_title(title: str) -> str:
    """Case-fold a title and collapse runs of whitespace."""
    return re.sub(r"\s+", " ", title).strip().casefold()


def _build_lookup() -> Dict[str, SectionKind]:
    lookup = {}
    for kind, titles in SECTION_TITLE_ALIASES.items():
        for title in titles:
            key = normalize_title(title)
            if key in lookup:
                raise ValueError(f"Section title {title!r} aliased to both {lookup[key]} and {kind}")
            lookup[key] = kind
    return lookup


_TITLE_LOOKUP = _build_lookup()


def kind_for_title(title: Optional[str]) -> SectionKind:
    """
    Resolve a display title to its canonical kind.

    Args:
        title: Section title as authored

    Returns:
        Matching SectionKind, or SectionKind.UNRECOGNIZED

    Examples:
        >>> kind_for_title("Clinical Experience")
        <SectionKind.EXPERIENCE: 'experience'>
        >>> kind_for_title("Hobbies")
        <SectionKind.UNRECOGNIZED: 'unrecognized'>
    """
    if not title:
        return SectionKind.UNRECOGNIZED
    return _TITLE_LOOKUP.get(normalize_title(title), SectionKind.UNRECOGNIZED)


def kind_from_name(name: str) -> Optional[SectionKind]:
    """
    Resolve an explicit kind name (e.g., "board_roles" or "Board Roles").

    Returns:
        Matching SectionKind, or None if the name is not a known kind
    """
    key = re.sub(r"[\s\-]+", "_", name.strip()).lower()
    try:
        return SectionKind(key)
    except ValueError:
        return None


def recognized_titles() -> List[str]:
    """All recognized display titles, in alias-table order."""
    return [title for titles in SECTION_TITLE_ALIASES.values() for title in titles]
