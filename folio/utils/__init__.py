"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup
- Timestamps for output directories
"""

from folio.utils.timestamp import now

__all__ = ["now"]
