"""
Default values for FOLIO template records.

Provides shared defaults used by:
- template_data_structure.py (filling styling fields missing from a record)
- template_registry.py (browse filters)
"""

from enum import Enum
from typing import Any, Dict


class TemplateCategory(str, Enum):
    """Gallery category a template is listed under."""

    PROFESSIONAL = "PROFESSIONAL"
    ACADEMIC = "ACADEMIC"
    CREATIVE = "CREATIVE"
    TECHNICAL = "TECHNICAL"
    ENTRY_LEVEL = "ENTRY_LEVEL"
    EXECUTIVE = "EXECUTIVE"
    OTHER = "OTHER"


# Styling used when a template record leaves a field unset
DEFAULT_STYLE: Dict[str, Any] = {
    "primary_color": "#4A6CF7",
    "secondary_color": "#6E82A6",
    "font_family": "'Inter', sans-serif",
    "font_size": 14,
    "line_height": 1.5,
    "section_spacing": 24,
    "item_spacing": 12,
}

# Styling fields and the unit suffix each carries in CSS
STYLE_CSS_VARIABLES = {
    "primary_color": ("--primary-color", ""),
    "secondary_color": ("--secondary-color", ""),
    "font_family": ("--font-family", ""),
    "font_size": ("--font-size", "px"),
    "line_height": ("--line-height", ""),
    "section_spacing": ("--section-spacing", "px"),
    "item_spacing": ("--item-spacing", "px"),
}

# Fragments every template must define
REQUIRED_FRAGMENTS = (
    "header_html",
    "contact_html",
    "education_title_html",
    "education_item_html",
    "experience_title_html",
    "experience_item_html",
    "skills_title_html",
    "skills_item_html",
)

# A template may leave out the projects section entirely
OPTIONAL_FRAGMENTS = (
    "projects_title_html",
    "projects_item_html",
)

# Stored record keys (camelCase) mapped onto dataclass fields
RECORD_KEY_ALIASES = {
    "headerHTML": "header_html",
    "contactHTML": "contact_html",
    "educationTitleHTML": "education_title_html",
    "educationItemHTML": "education_item_html",
    "experienceTitleHTML": "experience_title_html",
    "experienceItemHTML": "experience_item_html",
    "skillsTitleHTML": "skills_title_html",
    "skillsItemHTML": "skills_item_html",
    "projectsTitleHTML": "projects_title_html",
    "projectsItemHTML": "projects_item_html",
    "cssStyles": "css_styles",
    "primaryColor": "primary_color",
    "secondaryColor": "secondary_color",
    "fontFamily": "font_family",
    "fontSize": "font_size",
    "lineHeight": "line_height",
    "sectionSpacing": "section_spacing",
    "itemSpacing": "item_spacing",
    "isPublic": "is_public",
}
