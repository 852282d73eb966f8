"""
Template Data Structure

Defines the Template record: a named set of HTML fragments plus styling fields.
Templates are immutable once loaded; use ``with_overrides`` to derive variants.
"""

import re
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from folio.contexts.templating.defaults import (
    DEFAULT_STYLE,
    OPTIONAL_FRAGMENTS,
    RECORD_KEY_ALIASES,
    REQUIRED_FRAGMENTS,
    TemplateCategory,
)
from folio.contexts.templating.exceptions import InvalidTemplateError

SECTION_OPEN_RE = re.compile(r"<section\b", re.IGNORECASE)

SECTION_TITLE_FRAGMENTS = (
    "education_title_html",
    "experience_title_html",
    "skills_title_html",
    "projects_title_html",
)


@dataclass(frozen=True)
class Template:
    """
    Resume template record.

    Attributes:
        name: Display name
        description: Short gallery description
        header_html: Header fragment (rendered against top-level resume data)
        contact_html: Contact fragment (rendered against top-level resume data)
        education_title_html: Opens the education section
        education_item_html: Rendered once per education record
        experience_title_html: Opens the experience section
        experience_item_html: Rendered once per experience record
        skills_title_html: Opens the skills section
        skills_item_html: Rendered once against the skills record
        projects_title_html: Opens the projects section (optional)
        projects_item_html: Rendered once per project (optional)
        css_styles: Extra stylesheet, may reference the CSS variables
        category: Gallery category
        tags: Free-form gallery tags
        is_public: Whether the template is listed in the gallery
        thumbnail: Optional preview image URL
        template_id: Registry id (file stem when loaded from disk)

    Title fragments must open an element that the assembler closes with a
    literal ``</section>`` after the section's items.
    """

    name: str
    description: str
    header_html: str
    contact_html: str
    education_title_html: str
    education_item_html: str
    experience_title_html: str
    experience_item_html: str
    skills_title_html: str
    skills_item_html: str
    projects_title_html: Optional[str] = None
    projects_item_html: Optional[str] = None
    css_styles: str = ""
    primary_color: str = DEFAULT_STYLE["primary_color"]
    secondary_color: str = DEFAULT_STYLE["secondary_color"]
    font_family: str = DEFAULT_STYLE["font_family"]
    font_size: int = DEFAULT_STYLE["font_size"]
    line_height: float = DEFAULT_STYLE["line_height"]
    section_spacing: int = DEFAULT_STYLE["section_spacing"]
    item_spacing: int = DEFAULT_STYLE["item_spacing"]
    category: TemplateCategory = TemplateCategory.OTHER
    tags: Tuple[str, ...] = field(default_factory=tuple)
    is_public: bool = True
    thumbnail: Optional[str] = None
    template_id: Optional[str] = None

    @property
    def has_projects_section(self) -> bool:
        """True when both projects fragments are defined and non-empty."""
        return bool(self.projects_title_html) and bool(self.projects_item_html)

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        template_id: Optional[str] = None,
        template_path: Optional[Path] = None,
    ) -> "Template":
        """
        Build a validated Template from a record.

        Accepts snake_case field names as well as the stored camelCase record
        keys (``headerHTML``, ``primaryColor``...). Missing styling fields take
        the defaults; unknown keys (``createdAt``, ``userId``...) are ignored.

        Args:
            data: Template record
            template_id: Registry id (falls back to the record's "id")
            template_path: Source file, used in error messages

        Returns:
            Template instance

        Raises:
            InvalidTemplateError: Listing every problem found in the record
        """
        known = {f.name for f in fields(cls)}
        record: Dict[str, Any] = {}
        for key, value in data.items():
            name = RECORD_KEY_ALIASES.get(key, key)
            if name in known:
                record[name] = value

        if template_id is None:
            template_id = data.get("id")
        if template_id is not None:
            record["template_id"] = str(template_id)

        for style_field, default in DEFAULT_STYLE.items():
            if record.get(style_field) is None:
                record[style_field] = default

        problems = _validate_record(record)
        if problems:
            label = record.get("template_id") or record.get("name") or "<unnamed>"
            raise InvalidTemplateError(
                f"Invalid template '{label}'", problems=problems, template_path=template_path
            )

        record["category"] = TemplateCategory(record.get("category", TemplateCategory.OTHER))
        record["tags"] = tuple(record.get("tags") or ())
        for size_field in ("font_size", "section_spacing", "item_spacing"):
            record[size_field] = int(record[size_field])
        if record.get("css_styles") is None:
            record["css_styles"] = ""

        return cls(**record)

    def to_dict(self) -> Dict[str, Any]:
        """Return the snake_case record (category as its string value, tags as a list)."""
        record = asdict(self)
        record["category"] = self.category.value
        record["tags"] = list(self.tags)
        return record

    def with_overrides(self, **overrides: Any) -> "Template":
        """
        Derive a new validated Template with some fields replaced.

        Raises:
            InvalidTemplateError: If the overridden record is invalid
        """
        return Template.from_dict({**self.to_dict(), **overrides})


def _is_positive_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return isinstance(value, int) and value > 0


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _validate_record(record: Dict[str, Any]) -> List[str]:
    """Collect every validation problem in a normalized record."""
    problems = []

    for text_field in ("name", "description"):
        value = record.get(text_field)
        if not isinstance(value, str) or not value.strip():
            problems.append(f"{text_field} is required")

    for fragment in REQUIRED_FRAGMENTS:
        if not isinstance(record.get(fragment), str):
            problems.append(f"{fragment} is required and must be a string")

    for fragment in OPTIONAL_FRAGMENTS + ("css_styles", "thumbnail"):
        value = record.get(fragment)
        if value is not None and not isinstance(value, str):
            problems.append(f"{fragment} must be a string")

    category = record.get("category", TemplateCategory.OTHER)
    valid_categories = [c.value for c in TemplateCategory]
    if category not in valid_categories:
        problems.append(f"category must be one of {valid_categories}, got {category!r}")

    for color_field in ("primary_color", "secondary_color", "font_family"):
        if not isinstance(record[color_field], str):
            problems.append(f"{color_field} must be a string")

    for size_field in ("font_size", "section_spacing", "item_spacing"):
        if not _is_positive_int(record[size_field]):
            problems.append(f"{size_field} must be a positive integer, got {record[size_field]!r}")

    if not _is_positive_number(record["line_height"]):
        problems.append(f"line_height must be a positive number, got {record['line_height']!r}")

    tags = record.get("tags")
    if tags is not None and (
        not isinstance(tags, (list, tuple)) or not all(isinstance(tag, str) for tag in tags)
    ):
        problems.append("tags must be a list of strings")

    is_public = record.get("is_public", True)
    if not isinstance(is_public, bool):
        problems.append("is_public must be a boolean")

    return problems


def check_section_coupling(template: Template) -> List[str]:
    """
    Find title fragments that do not open a ``<section>`` element.

    The assembler closes every emitted section with a literal ``</section>``,
    so a title fragment that opens something else yields unbalanced markup.

    Args:
        template: Template to inspect

    Returns:
        Names of the offending title fragments (empty when all are coupled)
    """
    offending = []
    for fragment in SECTION_TITLE_FRAGMENTS:
        if fragment == "projects_title_html" and not template.has_projects_section:
            continue
        if not SECTION_OPEN_RE.search(getattr(template, fragment) or ""):
            offending.append(fragment)
    return offending
