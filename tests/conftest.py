"""Shared fixtures for VELLUM tests."""

import pytest
from loguru import logger

from vellum.contexts.templating.template_catalog import TemplateCatalog
from vellum.contexts.templating.template_descriptor import load_template_descriptor


def build_template(**overrides):
    """Build a TemplateDescriptor from a minimal raw mapping plus overrides."""
    raw = {
        "id": "plain",
        "styling": {
            "primary_color": "#111111",
            "secondary_color": "#222222",
            "font_family": "Helvetica, sans-serif",
            "spacing": "standard",
        },
    }
    raw.update(overrides)
    return load_template_descriptor(raw)


@pytest.fixture
def make_template():
    return build_template


@pytest.fixture
def plain_template():
    """Single-column template without palette or fonts."""
    return build_template()


@pytest.fixture
def palette_template():
    """Template with a three-entry palette."""
    return build_template(
        id="palette",
        color_options={
            "palette": [
                {"primary": "#AA0000", "secondary": "#AA1111", "label": "Red"},
                {"primary": "#00AA00", "secondary": "#11AA11", "label": "Green"},
                {"primary": "#0000AA", "secondary": "#1111AA", "label": "Blue"},
            ]
        },
    )


@pytest.fixture
def two_column_template():
    return build_template(
        id="split",
        layout={
            "type": "two-column",
            "main": ["experience", "projects"],
            "sidebar": ["skills", "education", "certifications"],
        },
    )


@pytest.fixture
def jane_doe():
    return {
        "name": "Jane Doe",
        "sections": [
            {"title": "Summary", "content": "Engineer."},
            {"title": "Skills", "categories": {"Languages": ["Go", "Rust"]}},
        ],
    }


@pytest.fixture
def full_resume():
    """Resume touching every generic section kind plus one unknown title."""
    return {
        "name": "Sam Rivera",
        "title": "Staff Engineer",
        "contact": {
            "email": "sam@example.com",
            "phone": "555-0100",
            "location": "Austin, TX",
            "github": "github.com/samr",
        },
        "sections": [
            {"title": "Professional Summary", "content": "Builds reliable systems."},
            {
                "title": "Professional Experience",
                "jobs": [
                    {
                        "title": "Staff Engineer",
                        "company": "Acme",
                        "location": "Austin, TX",
                        "dates": "2021 - Present",
                        "bullets": ["Led the platform team", "Cut costs by 30%"],
                    },
                    {
                        "title": "Engineer",
                        "company": "Initech",
                        "dates": "2017 - 2021",
                        "bullets": ["Shipped billing v2"],
                    },
                ],
            },
            {"title": "Technical Skills", "categories": {"Languages": ["Python", "Go"], "Cloud": ["AWS"]}},
            {
                "title": "Education & Training",
                "education": [
                    {"degree": "BSc Computer Science", "institution": "UT Austin", "dates": "2013 - 2017", "gpa": "3.8"},
                    "AWS Solutions Architect course",
                ],
            },
            {
                "title": "Key Projects",
                "projects": [
                    {
                        "name": "Pipeline",
                        "description": "Streaming ETL",
                        "technologies": ["Kafka", "Flink"],
                        "achievements": ["10x throughput"],
                    }
                ],
            },
            {"title": "Certifications", "certifications": ["CKA", "AWS SA Pro"]},
            {"title": "Hobbies", "content": "Climbing"},
        ],
    }


@pytest.fixture
def tech_modern_content():
    return {
        "name": "Jordan Lee",
        "sidebar": {
            "sections": [
                {"type": "skills", "title": "Skills", "content": "Go, Kubernetes"},
                {
                    "type": "contact",
                    "title": "Contact",
                    "items": [
                        {"type": "email", "value": "jordan@example.com"},
                        {"type": "fax", "value": "555-0199"},
                    ],
                },
                {
                    "type": "education",
                    "title": "Education",
                    "items": [{"institution": "UW", "degree": "BSc", "dates": "2012 - 2016"}],
                },
            ]
        },
        "sections": [
            {"type": "summary", "title": "Profile", "content": "Platform engineer."},
            {
                "type": "experience",
                "title": "Experience",
                "jobs": [{"title": "SRE", "company": "Streamly", "dates": "2016 - 2020", "bullets": ["On call"]}],
            },
        ],
    }


@pytest.fixture
def catalog():
    """Catalog backed by the packaged template descriptors."""
    return TemplateCatalog()


@pytest.fixture
def reset_logger():
    """Drop any loguru sinks a test configured (CLI commands add file and console sinks)."""
    yield
    logger.remove()
