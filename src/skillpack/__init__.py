"""skillpack: validate and package agent skill bundles."""

from __future__ import annotations

from skillpack.core import extract_metadata, validate_skills

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "extract_metadata",
    "validate_skills",
]
