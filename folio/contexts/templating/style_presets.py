"""
Style Preset Resolution for Templates

Applies named styling presets to a template. Presets are composable and can
override each other, allowing flexible combination of colors, spacing and fonts.

Examples:
    # Apply multiple presets (later overrides earlier)
    >>> apply_style_presets(template, ["spacing_tight", "colors_warm"])

    # Mix base preset with override
    >>> apply_style_presets(template, ["fonts_serif", "fonts_large", "colors_cool"])
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.templating.defaults import DEFAULT_STYLE
from folio.contexts.templating.template_data_structure import Template

load_dotenv()
STYLE_PRESETS_PATH = Path(
    os.getenv("FOLIO_STYLE_PRESETS_PATH", Path(__file__).parent / "data" / "style_presets.yaml")
)


def load_style_presets(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load the style presets file and flatten it to a single-level dict.

    Collapses nested structure: spacing.tight -> spacing_tight

    Args:
        config_path: Optional path to presets file (defaults to FOLIO_STYLE_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to styling overrides
        Example: {"spacing_tight": {...}, "colors_warm": {...}}
    """
    if config_path is None:
        config_path = STYLE_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def apply_style_presets(
    template: Template,
    preset_names: List[str],
    config_path: Path = None,
) -> Template:
    """
    Apply named styling presets to a template.

    Presets are applied in order, with later presets overriding earlier ones.
    Only styling fields may be set by a preset; the template's fragments are
    never touched.

    Args:
        template: Template to restyle
        preset_names: Preset names to apply (e.g., ["spacing_tight", "colors_warm"])
        config_path: Optional path to presets file (defaults to FOLIO_STYLE_PRESETS_PATH)

    Returns:
        New Template with the presets applied

    Raises:
        ValueError: If a preset is not found or sets a non-styling field
        InvalidTemplateError: If a preset value is invalid (e.g., negative spacing)
    """
    if not preset_names:
        return template

    presets_dict = load_style_presets(config_path)

    overrides: Dict[str, Any] = {}
    for preset_name in preset_names:
        if preset_name not in presets_dict:
            available = list(presets_dict.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")

        preset_config = presets_dict[preset_name]

        unknown = sorted(set(preset_config) - set(DEFAULT_STYLE))
        if unknown:
            raise ValueError(
                f"Preset '{preset_name}' sets non-styling fields {unknown}. "
                f"Styling fields: {list(DEFAULT_STYLE)}"
            )

        overrides.update(preset_config)

    return template.with_overrides(**overrides)
