"""
Templating Context

Responsibilities:
- Resolves placeholder paths against resume data
- Expands {{path}} placeholders and {{#key}}...{{/key}} blocks in HTML fragments
- Assembles the final resume HTML from a template's fragments and styling
- Loads, validates and lists template records

Owns: Fragment template language, Template records, resume assembly
Never: Wraps output in a page or writes files (see rendering context)
"""

from folio.contexts.templating.assembler import assemble
from folio.contexts.templating.defaults import TemplateCategory
from folio.contexts.templating.exceptions import InvalidTemplateError, TemplateNotFoundError
from folio.contexts.templating.resume_data import load_resume_data, load_sample_resume
from folio.contexts.templating.style_presets import apply_style_presets
from folio.contexts.templating.styling import computed_css, style_block
from folio.contexts.templating.substitution import (
    expand_blocks,
    find_unresolved_placeholders,
    render_fragment,
    substitute,
)
from folio.contexts.templating.template_data_structure import Template, check_section_coupling
from folio.contexts.templating.template_registry import TemplateRegistry
from folio.contexts.templating.variables import MISSING, resolve

__all__ = [
    # Fragment template language
    "resolve",
    "MISSING",
    "substitute",
    "expand_blocks",
    "render_fragment",
    "find_unresolved_placeholders",
    # Assembly and styling
    "assemble",
    "style_block",
    "computed_css",
    "apply_style_presets",
    # Template records
    "Template",
    "TemplateCategory",
    "TemplateRegistry",
    "check_section_coupling",
    "InvalidTemplateError",
    "TemplateNotFoundError",
    # Resume data
    "load_resume_data",
    "load_sample_resume",
]
