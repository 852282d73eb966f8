"""
FOLIO - HTML resume template assembly

Expands resume data into HTML resume templates built from named fragments
(header, contact, per-section title and item markup) plus template styling.

Architecture:
- Templating Context: placeholder/block substitution, template records, assembly
- Rendering Context: standalone preview documents for assembled resumes
"""

__version__ = "0.1.0"
