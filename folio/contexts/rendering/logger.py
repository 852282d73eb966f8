"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, template_id: str = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        template_id: Template being rendered, recorded in the provenance header

    Returns:
        Path to log file
    """
    extra = {"Template": template_id} if template_id else None
    return _setup_logger(context_name="render", log_dir=log_dir, extra_provenance=extra)


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_preview_result(template_name: str, result) -> None:
    """
    Log the outcome of writing a preview document.

    Args:
        template_name: Template display name
        result: PreviewResult from write_preview()
    """
    _log_info(f"{template_name}: preview written to {result.output_path}")
    if result.unresolved_placeholders:
        _log_info(
            f"  {len(result.unresolved_placeholders)} unresolved placeholder(s): "
            f"{', '.join(result.unresolved_placeholders)}"
        )
    else:
        _log_debug("  All placeholders resolved")
