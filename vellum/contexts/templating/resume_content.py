"""
Resume Content Data Structures

Defines data classes for the content a template renders: identity, contact
details and an ordered list of sections. Sections are a tagged union keyed by
SectionKind; the display title is kept separately and only used for headings.

Two content shapes exist side by side:
- sections: every section in document order, tagged by kind (used by single/two-column layouts)
- panel_sections / sidebar: typed view of the same content, read by bespoke layouts via `type`
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class SectionKind(Enum):
    """Canonical section type. Display titles are normalized into one of these."""

    SUMMARY = "summary"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    PUBLICATIONS = "publications"
    MEMBERSHIPS = "memberships"
    ACHIEVEMENTS = "achievements"
    BOARD_ROLES = "board_roles"
    EXECUTIVE = "executive"
    UNRECOGNIZED = "unrecognized"


@dataclass
class Contact:
    """Contact details shown in the document header."""

    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None

    def parts(self) -> List[str]:
        """Non-empty contact values in header display order."""
        ordered = [self.email, self.phone, self.location, self.linkedin, self.github, self.website]
        return [value for value in ordered if value]


@dataclass
class Job:
    """
    Single position within an experience-like section.

    Attributes:
        title: Job title
        company: Employer name
        location: Free-text location
        dates: Free-text date range (e.g., "2019 - Present")
        bullets: Accomplishment bullets in display order
    """

    title: str = ""
    company: str = ""
    location: str = ""
    dates: str = ""
    bullets: List[str] = field(default_factory=list)


@dataclass
class EducationEntry:
    """Structured education entry. Plain strings are also accepted in EducationPayload."""

    degree: str = ""
    institution: str = ""
    dates: str = ""
    location: Optional[str] = None
    gpa: Optional[str] = None


@dataclass
class Project:
    """Project entry with technologies and optional achievements."""

    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    achievements: Optional[List[str]] = None


# Section payloads (one per SectionKind family)


@dataclass
class SummaryPayload:
    content: str = ""


@dataclass
class SkillsPayload:
    # Insertion order of categories is display order
    categories: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class ExperiencePayload:
    jobs: List[Job] = field(default_factory=list)


@dataclass
class EducationPayload:
    entries: List[Union[EducationEntry, str]] = field(default_factory=list)


@dataclass
class ProjectsPayload:
    projects: List[Project] = field(default_factory=list)


@dataclass
class ListPayload:
    """Uniform bullet list (certifications, publications, memberships, achievements, board roles)."""

    items: List[str] = field(default_factory=list)


@dataclass
class ExecutivePayload:
    """Summary-shaped paragraph merged with experience-shaped jobs under one heading."""

    content: Optional[str] = None
    jobs: List[Job] = field(default_factory=list)


@dataclass
class RawPayload:
    """Payload of a section whose title did not map to any known kind. Never rendered."""

    data: Dict[str, Any] = field(default_factory=dict)


SectionPayload = Union[
    SummaryPayload,
    SkillsPayload,
    ExperiencePayload,
    EducationPayload,
    ProjectsPayload,
    ListPayload,
    ExecutivePayload,
    RawPayload,
]


@dataclass
class Section:
    """
    One semantic block of resume content.

    Attributes:
        kind: Canonical section type (dispatch key for renderers)
        title: Display title exactly as authored (e.g., "Clinical Experience")
        payload: Kind-specific content
    """

    kind: SectionKind
    title: str
    payload: SectionPayload = field(default_factory=RawPayload)


@dataclass
class ContactItem:
    """Single typed contact line in a bespoke sidebar (phone, email, website, location)."""

    type: str
    value: str


@dataclass
class PanelSection:
    """
    Typed section consumed by bespoke layouts.

    Unlike Section, a panel is identified by its explicit `type` field
    (contact, education, skills, summary, experience), never by its title.
    """

    type: str
    title: str = ""
    content: Optional[str] = None
    contact_items: List[ContactItem] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    jobs: List[Job] = field(default_factory=list)


@dataclass
class Sidebar:
    """Sidebar content for bespoke layouts."""

    sections: List[PanelSection] = field(default_factory=list)


@dataclass
class ResumeContent:
    """
    Complete resume content handed to the rendering engine.

    Attributes:
        name: Full name
        title: Optional professional title shown under the name
        contact: Contact details
        sections: All sections in document order, typed or not
        panel_sections: Sections that also carry a panel `type`, for bespoke layouts
        sidebar: Typed sidebar sections for bespoke layouts (None when absent)
    """

    name: str
    title: Optional[str] = None
    contact: Contact = field(default_factory=Contact)
    sections: List[Section] = field(default_factory=list)
    panel_sections: List[PanelSection] = field(default_factory=list)
    sidebar: Optional[Sidebar] = None
