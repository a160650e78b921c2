"""skillpack core: descriptor parsing and bundle validation.

This package must not import CLI/bundle modules to avoid circular dependencies.
"""

from __future__ import annotations

from .frontmatter import (
    DESCRIPTOR_FILENAME,
    REQUIRED_FIELDS,
    SkillMetadata,
    extract_header,
    extract_metadata,
    read_metadata,
)
from .validate import (
    BundleReport,
    BundleValidationError,
    Issue,
    IssueKind,
    ValidationReport,
    list_bundles,
    validate_bundle,
    validate_skills,
)

__all__ = [
    "DESCRIPTOR_FILENAME",
    "REQUIRED_FIELDS",
    "SkillMetadata",
    "extract_header",
    "extract_metadata",
    "read_metadata",
    "BundleReport",
    "BundleValidationError",
    "Issue",
    "IssueKind",
    "ValidationReport",
    "list_bundles",
    "validate_bundle",
    "validate_skills",
]
