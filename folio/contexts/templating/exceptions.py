"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import List, Optional


class InvalidTemplateError(ValueError):
    """
    Exception raised when a template record is missing fields or has invalid values.

    Attributes:
        message: Error description
        problems: Every validation problem found in the record
        template_path: Path to the template file, when loaded from disk
    """

    def __init__(
        self,
        message: str,
        problems: Optional[List[str]] = None,
        template_path: Optional[Path] = None,
    ):
        self.message = message
        self.problems = problems or []
        self.template_path = template_path

        parts = [message]

        if template_path:
            parts.append(f"Template file: {template_path}")

        for problem in self.problems:
            parts.append(f"  - {problem}")

        super().__init__("\n".join(parts))


class TemplateNotFoundError(FileNotFoundError):
    """
    Exception raised when a template id has no record in the registry.

    Attributes:
        template_id: The requested template id
        templates_path: Directory that was searched
        available: Template ids that do exist
    """

    def __init__(
        self,
        template_id: str,
        templates_path: Optional[Path] = None,
        available: Optional[List[str]] = None,
    ):
        self.template_id = template_id
        self.templates_path = templates_path
        self.available = available or []

        message = f"Template not found: '{template_id}'"
        if templates_path:
            message += f" (searched {templates_path})"
        if self.available:
            message += f"\nAvailable templates: {self.available}"

        super().__init__(message)
