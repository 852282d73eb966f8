"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, phase: str = "assemble") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        phase: Phase name for provenance ("assemble" or "validate")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [template] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_template_loaded(template_id: str, template_path: Path) -> None:
    """Log a template record loaded from disk."""
    _log_debug(f"Loaded template '{template_id}' from {template_path}")


def log_assembly(template_name: str, sections: list) -> None:
    """Log which optional sections an assembly emitted."""
    if sections:
        _log_debug(f"Assembled '{template_name}' with sections: {', '.join(sections)}")
    else:
        _log_debug(f"Assembled '{template_name}' with no optional sections")
