"""
Template Styling

Turns a template's styling fields into CSS: the ``:root`` custom-property block
that prefixes every assembled resume, and the template stylesheet with its
``var(--...)`` references inlined.
"""

from typing import Dict

from folio.contexts.templating.defaults import STYLE_CSS_VARIABLES
from folio.contexts.templating.variables import stringify


def css_variables(template) -> Dict[str, str]:
    """
    Map each CSS custom property to its value for a template.

    Values are emitted verbatim from the template's styling fields; only the
    three sizing fields gain a "px" suffix.

    Args:
        template: Template (anything with the styling attributes)

    Returns:
        Ordered dict like {"--primary-color": "#4A6CF7", "--font-size": "14px", ...}
    """
    return {
        variable: f"{stringify(getattr(template, field_name))}{unit}"
        for field_name, (variable, unit) in STYLE_CSS_VARIABLES.items()
    }


def style_block(template) -> str:
    """
    Generate the ``<style>`` element defining the template's CSS variables.

    Args:
        template: Template whose styling fields are emitted

    Returns:
        A style tag holding a single ``:root`` rule

    Example:
        >>> print(style_block(template))
        <style>
          :root {
            --primary-color: #4A6CF7;
            ...
            --item-spacing: 12px;
          }
        </style>
    """
    declarations = "\n".join(
        f"    {variable}: {value};" for variable, value in css_variables(template).items()
    )
    return f"\n<style>\n  :root {{\n{declarations}\n  }}\n</style>\n"


def computed_css(template) -> str:
    """
    Inline the template's styling values into its stylesheet.

    Every ``var(--primary-color)``-style reference in ``template.css_styles`` is
    replaced with the concrete value, for surfaces that ignore custom properties.

    Args:
        template: Template with an optional ``css_styles`` stylesheet

    Returns:
        Stylesheet text (empty string when the template has none)
    """
    css = template.css_styles or ""
    for variable, value in css_variables(template).items():
        css = css.replace(f"var({variable})", value)
    return css
