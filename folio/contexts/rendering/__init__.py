"""
Rendering Context

Responsibilities:
- Wraps assembled resumes in standalone preview documents
- Writes preview pages to disk and reports leftover placeholders

Owns: Preview page shell, output files
Never: Modifies template content
"""

from folio.contexts.rendering.preview import (
    PreviewResult,
    build_preview_document,
    write_preview,
)

__all__ = ["PreviewResult", "build_preview_document", "write_preview"]
