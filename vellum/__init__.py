"""
VELLUM - Visual Engine for Layout of Laid-out Untyped Markup

A template-driven resume rendering engine. Takes resume content, a template
descriptor and a selected color variant, and deterministically produces a
laid-out document block tree for on-screen preview or downstream typesetting.

Architecture:
- Templating Context: Template descriptors, resume content model, color and styling resolution
- Rendering Context: Section renderers, layout strategies, document assembly and markup
"""

__version__ = "0.1.0"
