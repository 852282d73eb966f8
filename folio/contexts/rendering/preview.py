"""
Preview Documents

Wraps an assembled resume in a standalone HTML page suitable for an isolated
preview frame or for saving to disk. The page carries base typography, the
default CSS variables and the template's stylesheet with variables inlined.
"""

import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader

from folio.contexts.rendering.logger import _log_debug, log_preview_result
from folio.contexts.templating.assembler import assemble
from folio.contexts.templating.defaults import DEFAULT_STYLE
from folio.contexts.templating.resume_data import load_sample_resume
from folio.contexts.templating.styling import computed_css
from folio.contexts.templating.substitution import find_unresolved_placeholders
from folio.contexts.templating.template_data_structure import Template

STRUCTURE_PATH = Path(__file__).parent / "structure"
PREVIEW_TEMPLATE_NAME = "preview_document.html.jinja"

FALLBACK_FONT_SIZE = "12px"
FONT_SIZE_RE = re.compile(r"font-size:\s*(\d+)px")

_env = Environment(
    loader=FileSystemLoader(str(STRUCTURE_PATH)),
    autoescape=True,
    keep_trailing_newline=True,
)


@dataclass
class PreviewResult:
    """
    Result of writing a preview document.

    Attributes:
        output_path: Where the HTML page was written
        html: The full page
        unresolved_placeholders: Placeholder tokens left in the assembled resume
        time_s: Time taken to assemble and write
    """

    output_path: Path
    html: str
    unresolved_placeholders: List[str] = field(default_factory=list)
    time_s: float = 0.0


def extract_base_font_size(css: str) -> str:
    """
    Find the first pixel font size declared in a stylesheet.

    Args:
        css: Stylesheet text

    Returns:
        e.g. "14px", or "12px" when the stylesheet declares none
    """
    match = FONT_SIZE_RE.search(css or "")
    if match:
        return f"{match.group(1)}px"
    return FALLBACK_FONT_SIZE


def base_css_variables(css: str) -> Dict[str, str]:
    """CSS variables for the page shell: defaults plus the stylesheet's font size."""
    return {
        "--primary-color": DEFAULT_STYLE["primary_color"],
        "--secondary-color": DEFAULT_STYLE["secondary_color"],
        "--font-family": DEFAULT_STYLE["font_family"],
        "--font-size": extract_base_font_size(css),
        "--line-height": str(DEFAULT_STYLE["line_height"]),
        "--section-spacing": f"{DEFAULT_STYLE['section_spacing']}px",
        "--item-spacing": f"{DEFAULT_STYLE['item_spacing']}px",
    }


def _render_page(template: Template, resume_html: str, page_title: Optional[str]) -> str:
    template_css = computed_css(template)
    page = _env.get_template(PREVIEW_TEMPLATE_NAME)
    return page.render(
        page_title=page_title or f"{template.name} Preview",
        base_variables=base_css_variables(template_css),
        template_css=template_css,
        resume_html=resume_html,
    )


def build_preview_document(
    template: Template,
    data: Optional[Any] = None,
    page_title: Optional[str] = None,
) -> str:
    """
    Assemble a resume and wrap it in a complete HTML page.

    Args:
        template: Template to render
        data: Resume data (defaults to the packaged sample resume)
        page_title: Title of the page (defaults to "<template name> Preview")

    Returns:
        Standalone HTML document
    """
    if data is None:
        data = load_sample_resume()
    return _render_page(template, assemble(template, data), page_title)


def write_preview(
    template: Template,
    output_path: Path,
    data: Optional[Any] = None,
    page_title: Optional[str] = None,
) -> PreviewResult:
    """
    Build a preview document and write it to disk.

    Only the assembled resume is scanned for unresolved placeholders; the
    page shell and the template stylesheet are not.

    Args:
        template: Template to render
        output_path: Destination .html file (parent directories are created)
        data: Resume data (defaults to the packaged sample resume)
        page_title: Optional page title

    Returns:
        PreviewResult describing the written page
    """
    start_time = time.time()
    output_path = Path(output_path)

    if data is None:
        data = load_sample_resume()
    resume_html = assemble(template, data)
    html = _render_page(template, resume_html, page_title)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    _log_debug(f"Wrote {len(html):,} characters to {output_path}")

    result = PreviewResult(
        output_path=output_path,
        html=html,
        unresolved_placeholders=find_unresolved_placeholders(resume_html),
        time_s=time.time() - start_time,
    )
    log_preview_result(template.name, result)
    return result
