"""
Resume Content Ingestion

Converts raw resume mappings (loaded from YAML/JSON or supplied by the content
source) into ResumeContent instances.

This is where display titles become canonical kinds: each generic section is
tagged once, here, by its explicit `kind` key or by looking its title up in the
alias table. Renderers downstream only ever see the kind.

Recovery policy:
- Unknown section titles are kept as SectionKind.UNRECOGNIZED (never rendered)
- Malformed entries (education items, jobs, projects that are not mappings)
  are skipped one at a time; the rest of the section survives
- Only document-level problems raise InvalidContentError
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from omegaconf import OmegaConf

from vellum.contexts.templating.exceptions import InvalidContentError
from vellum.contexts.templating.logger import _log_debug, _log_warning, log_ingestion_summary
from vellum.contexts.templating.resume_content import (
    Contact,
    ContactItem,
    EducationEntry,
    EducationPayload,
    ExecutivePayload,
    ExperiencePayload,
    Job,
    ListPayload,
    PanelSection,
    Project,
    ProjectsPayload,
    RawPayload,
    ResumeContent,
    Section,
    SectionKind,
    SectionPayload,
    Sidebar,
    SkillsPayload,
    SummaryPayload,
)
from vellum.contexts.templating.section_aliases import kind_for_title, kind_from_name

# `type` values that mark a raw section as a bespoke-layout panel
PANEL_TYPES = ("summary", "experience", "contact", "education", "skills")

# Raw field holding the items of each uniform list kind
LIST_FIELDS = {
    SectionKind.CERTIFICATIONS: "certifications",
    SectionKind.PUBLICATIONS: "publications",
    SectionKind.MEMBERSHIPS: "memberships",
    SectionKind.ACHIEVEMENTS: "achievements",
    SectionKind.BOARD_ROLES: "roles",
}


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _parse_job(raw: Any, section_title: str) -> Optional[Job]:
    if not isinstance(raw, Mapping):
        _log_warning(f"Skipping malformed job in {section_title!r}: {raw!r}")
        return None
    return Job(
        title=_as_str(raw.get("title")),
        company=_as_str(raw.get("company")),
        location=_as_str(raw.get("location")),
        dates=_as_str(raw.get("dates")),
        bullets=_as_str_list(raw.get("bullets")),
    )


def _parse_jobs(raw_jobs: Any, section_title: str) -> List[Job]:
    jobs = [_parse_job(raw, section_title) for raw in raw_jobs or []]
    return [job for job in jobs if job is not None]


def _parse_education_entry(raw: Mapping) -> EducationEntry:
    return EducationEntry(
        degree=_as_str(raw.get("degree")),
        institution=_as_str(raw.get("institution")),
        dates=_as_str(raw.get("dates")),
        location=_as_optional_str(raw.get("location")),
        gpa=_as_optional_str(raw.get("gpa")),
    )


def _parse_education(raw_entries: Any, section_title: str) -> List[Union[EducationEntry, str]]:
    """Structured entries and plain strings both survive; anything else is dropped."""
    entries: List[Union[EducationEntry, str]] = []
    for raw in raw_entries or []:
        if isinstance(raw, str):
            entries.append(raw)
        elif isinstance(raw, Mapping):
            entries.append(_parse_education_entry(raw))
        else:
            _log_warning(f"Skipping malformed education entry in {section_title!r}: {raw!r}")
    return entries


def _parse_projects(raw_projects: Any, section_title: str) -> List[Project]:
    projects = []
    for raw in raw_projects or []:
        if not isinstance(raw, Mapping):
            _log_warning(f"Skipping malformed project in {section_title!r}: {raw!r}")
            continue
        achievements = raw.get("achievements")
        projects.append(
            Project(
                name=_as_str(raw.get("name")),
                description=_as_str(raw.get("description")),
                technologies=_as_str_list(raw.get("technologies")),
                achievements=_as_str_list(achievements) if achievements is not None else None,
            )
        )
    return projects


def _parse_categories(raw_categories: Any, section_title: str) -> Dict[str, List[str]]:
    if raw_categories is None:
        return {}
    if not isinstance(raw_categories, Mapping):
        _log_warning(f"Ignoring non-mapping categories in {section_title!r}")
        return {}
    return {str(name): _as_str_list(skills) for name, skills in raw_categories.items()}


def _build_payload(kind: SectionKind, raw: Mapping, title: str) -> SectionPayload:
    """Build the kind-specific payload from a raw section mapping."""
    if kind is SectionKind.SUMMARY:
        return SummaryPayload(content=_as_str(raw.get("content")))
    if kind is SectionKind.SKILLS:
        return SkillsPayload(categories=_parse_categories(raw.get("categories"), title))
    if kind is SectionKind.EXPERIENCE:
        return ExperiencePayload(jobs=_parse_jobs(raw.get("jobs"), title))
    if kind is SectionKind.EDUCATION:
        # Typed education panels keep their entries under `items`
        raw_entries = raw.get("education") if "education" in raw else raw.get("items")
        return EducationPayload(entries=_parse_education(raw_entries, title))
    if kind is SectionKind.PROJECTS:
        return ProjectsPayload(projects=_parse_projects(raw.get("projects"), title))
    if kind in LIST_FIELDS:
        return ListPayload(items=_as_str_list(raw.get(LIST_FIELDS[kind])))
    if kind is SectionKind.EXECUTIVE:
        return ExecutivePayload(
            content=_as_optional_str(raw.get("content")),
            jobs=_parse_jobs(raw.get("jobs"), title),
        )
    return RawPayload(data=dict(raw))


def _resolve_kind(raw: Mapping, title: str) -> SectionKind:
    explicit = raw.get("kind")
    if explicit:
        kind = kind_from_name(str(explicit))
        if kind is not None:
            return kind
        _log_warning(f"Unknown section kind {explicit!r} on {title!r}; falling back to title")
    return kind_for_title(title)


def ingest_section(raw: Mapping) -> Section:
    """
    Convert one raw generic section into a tagged Section.

    Args:
        raw: Mapping with a `title` (and optionally an explicit `kind`) plus
             kind-specific fields (content, categories, jobs, education, ...)

    Returns:
        Section tagged with its canonical kind
    """
    title = _as_str(raw.get("title"))
    kind = _resolve_kind(raw, title)
    return Section(kind=kind, title=title, payload=_build_payload(kind, raw, title))


def ingest_panel_section(raw: Mapping) -> PanelSection:
    """
    Convert one raw bespoke-layout panel into a PanelSection.

    Panels carry an explicit `type`. Their `items` field is interpreted by
    type: contact items for `contact`, education entries for `education`.
    """
    panel_type = _as_str(raw.get("type")).lower()
    title = _as_str(raw.get("title"))
    items = raw.get("items") or []

    contact_items = []
    education = []
    if panel_type == "contact":
        for item in items:
            if isinstance(item, Mapping):
                contact_items.append(
                    ContactItem(type=_as_str(item.get("type")), value=_as_str(item.get("value")))
                )
            else:
                _log_warning(f"Skipping malformed contact item in {title!r}: {item!r}")
    elif panel_type == "education":
        for item in items:
            if isinstance(item, Mapping):
                education.append(_parse_education_entry(item))
            else:
                _log_warning(f"Skipping malformed education entry in {title!r}: {item!r}")

    return PanelSection(
        type=panel_type,
        title=title,
        content=_as_optional_str(raw.get("content")),
        contact_items=contact_items,
        education=education,
        jobs=_parse_jobs(raw.get("jobs"), title),
    )


def _is_panel(raw: Mapping) -> bool:
    return _as_str(raw.get("type")).lower() in PANEL_TYPES


def ingest_content(raw: Union[Mapping, ResumeContent]) -> ResumeContent:
    """
    Convert a raw resume mapping into ResumeContent.

    Every entry of `sections` is tagged with a SectionKind by its title, so
    generic layouts see all of it. Entries that also carry a panel `type`
    (summary, experience, ...) are additionally collected as panel sections
    for bespoke layouts. `sidebar.sections` only holds panel sections.

    Args:
        raw: Resume mapping, or an already-ingested ResumeContent (returned as is)

    Returns:
        ResumeContent instance

    Raises:
        InvalidContentError: If the mapping has no name, `sections` is not a list
            or `contact` is not a mapping
    """
    if isinstance(raw, ResumeContent):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidContentError(f"Resume content must be a mapping, got {type(raw).__name__}")

    name = raw.get("name")
    if not name:
        raise InvalidContentError("Resume content is missing required field 'name'")

    raw_sections = raw.get("sections") or []
    if not isinstance(raw_sections, list):
        raise InvalidContentError(
            f"Resume content 'sections' must be a list, got {type(raw_sections).__name__}"
        )

    sections = []
    panel_sections = []
    for raw_section in raw_sections:
        if not isinstance(raw_section, Mapping):
            _log_warning(f"Skipping non-mapping section: {raw_section!r}")
            continue
        sections.append(ingest_section(raw_section))
        if _is_panel(raw_section):
            panel_sections.append(ingest_panel_section(raw_section))

    sidebar = None
    raw_sidebar = raw.get("sidebar")
    if isinstance(raw_sidebar, Mapping):
        sidebar = Sidebar(
            sections=[
                ingest_panel_section(raw_panel)
                for raw_panel in raw_sidebar.get("sections") or []
                if isinstance(raw_panel, Mapping)
            ]
        )

    raw_contact = raw.get("contact") or {}
    if not isinstance(raw_contact, Mapping):
        raise InvalidContentError(
            f"Resume content 'contact' must be a mapping, got {type(raw_contact).__name__}"
        )
    contact = Contact(
        email=_as_str(raw_contact.get("email")),
        phone=_as_str(raw_contact.get("phone")),
        location=_as_str(raw_contact.get("location")),
        linkedin=_as_optional_str(raw_contact.get("linkedin")),
        github=_as_optional_str(raw_contact.get("github")),
        website=_as_optional_str(raw_contact.get("website")),
    )

    content = ResumeContent(
        name=str(name),
        title=_as_optional_str(raw.get("title")),
        contact=contact,
        sections=sections,
        panel_sections=panel_sections,
        sidebar=sidebar,
    )

    unrecognized = [s.title for s in sections if s.kind is SectionKind.UNRECOGNIZED]
    log_ingestion_summary(content.name, len(sections), unrecognized)
    return content


def load_resume_content(path: Path) -> ResumeContent:
    """
    Load resume content from a YAML or JSON file.

    Args:
        path: Path to a .yaml/.yml or .json file

    Returns:
        ResumeContent instance

    Raises:
        FileNotFoundError: If path does not exist
        InvalidContentError: If the file does not hold valid resume content
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(path.read_text(encoding="utf-8"))
        else:
            raw = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InvalidContentError(f"Content file {path} could not be parsed: {e}") from e

    _log_debug(f"Loaded content file {path}")
    return ingest_content(raw)
