"""
Resume Assembler

Builds the final HTML resume from a template's fragments and resume data.

Output layout, in fixed order:
    <div class="resume">
      style block (CSS variables)
      header, contact
      education section   (only when data["education"] is a non-empty list)
      experience section  (only when data["experience"] is a non-empty list)
      skills section      (only when data["skills"] is present)
      projects section    (only when data["projects"] is non-empty and the
                           template defines both projects fragments)
    </div>

Each section is its title fragment (rendered against the top-level data), the
item fragment rendered per record, and a literal ``</section>``. Title fragments
must therefore open the element that ``</section>`` closes.

Assembly never raises on bad data: missing values leave their placeholders in
place and malformed sections are skipped or rendered partially.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from folio.contexts.templating.logger import log_assembly
from folio.contexts.templating.styling import style_block
from folio.contexts.templating.substitution import render_fragment
from folio.contexts.templating.template_data_structure import Template
from folio.contexts.templating.variables import is_sequence

RESUME_OPEN_TAG = '<div class="resume">'
RESUME_CLOSE_TAG = "</div>"
SECTION_CLOSE_TAG = "</section>"

# Sections repeated once per record: (data key, title fragment, item fragment)
LIST_SECTIONS = (
    ("education", "education_title_html", "education_item_html"),
    ("experience", "experience_title_html", "experience_item_html"),
)


def _list_section(
    title_html: Optional[str], item_html: Optional[str], records: list, data: Any
) -> str:
    parts = [render_fragment(title_html, data)]
    parts.extend(render_fragment(item_html, record) for record in records)
    parts.append(SECTION_CLOSE_TAG)
    return "".join(parts)


def _non_empty_list(value: Any) -> bool:
    return is_sequence(value) and len(value) > 0


def _skills_present(skills: Any) -> bool:
    # Any mapping or list counts, even an empty one
    return isinstance(skills, Mapping) or is_sequence(skills) or bool(skills)


def assemble(template: Template, data: Any) -> str:
    """
    Assemble a complete HTML resume from template fragments and resume data.

    Args:
        template: Template supplying fragments and styling
        data: Resume data mapping (not validated; None is treated as empty)

    Returns:
        HTML string wrapped in ``<div class="resume">``

    Example:
        >>> html = assemble(template, {"fullName": "Ada Lovelace"})
        >>> "<h1>Ada Lovelace</h1>" in html   # header_html = "<h1>{{fullName}}</h1>"
        True
    """
    fields = data if isinstance(data, Mapping) else {}
    emitted: List[str] = []

    html = [RESUME_OPEN_TAG, style_block(template)]
    html.append(render_fragment(template.header_html, data))
    html.append(render_fragment(template.contact_html, data))

    for key, title_field, item_field in LIST_SECTIONS:
        records = fields.get(key)
        if _non_empty_list(records):
            html.append(
                _list_section(
                    getattr(template, title_field), getattr(template, item_field), records, data
                )
            )
            emitted.append(key)

    skills = fields.get("skills")
    if _skills_present(skills):
        html.append(render_fragment(template.skills_title_html, data))
        html.append(render_fragment(template.skills_item_html, skills))
        html.append(SECTION_CLOSE_TAG)
        emitted.append("skills")

    projects = fields.get("projects")
    if _non_empty_list(projects) and template.has_projects_section:
        html.append(
            _list_section(template.projects_title_html, template.projects_item_html, projects, data)
        )
        emitted.append("projects")

    html.append(RESUME_CLOSE_TAG)

    log_assembly(template.name, emitted)
    return "".join(html)
