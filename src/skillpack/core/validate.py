"""Skill bundle validation.

Walks a skills root, checks each bundle's descriptor and aggregates the result.
Validation never mutates anything on disk; it only reports.

Failures are carried as `Issue` values so the CLI can print per-bundle
diagnostics, and are raised together as `BundleValidationError` by callers that
need a hard stop (the builder).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .frontmatter import DESCRIPTOR_FILENAME, read_metadata

logger = logging.getLogger(__name__)

# Optional bundle subdirectories; listed for information only.
OPTIONAL_SUBDIRS = ("references", "scripts")


class IssueKind(str, enum.Enum):
    NO_SKILLS_DIRECTORY = "NoSkillsDirectory"
    NO_BUNDLES_FOUND = "NoBundlesFound"
    MISSING_DESCRIPTOR = "MissingDescriptor"
    MISSING_HEADER = "MissingHeader"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"


@dataclass(frozen=True)
class Issue:
    kind: IssueKind
    message: str
    bundle: str | None = None
    field: str | None = None

    def __str__(self) -> str:
        if self.bundle is None:
            return self.message
        return f"{self.bundle}: {self.message}"


class BundleValidationError(ValueError):
    """Aggregates bundle validation failures.

    The message is stable and suitable for test assertions.
    """

    def __init__(self, issues: Iterable[Issue]):
        v = list(issues)
        self.issues = v
        if not v:
            super().__init__("skill validation failed (no details)")
            return
        msg = "skill validation failed:\n" + "\n".join(f"  - {item}" for item in v)
        super().__init__(msg)


@dataclass(frozen=True)
class BundleReport:
    name: str
    path: Path
    issues: list[Issue] = field(default_factory=list)
    extras: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.issues


@dataclass(frozen=True)
class ValidationReport:
    root: Path
    bundles: list[BundleReport] = field(default_factory=list)
    root_issues: list[Issue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.root_issues and bool(self.bundles) and all(b.ok for b in self.bundles)

    @property
    def issues(self) -> list[Issue]:
        out = list(self.root_issues)
        for b in self.bundles:
            out.extend(b.issues)
        return out

    def raise_for_issues(self) -> None:
        if not self.ok:
            raise BundleValidationError(self.issues)


def list_bundles(root: Path) -> list[Path]:
    """Return immediate subdirectories of `root`, sorted by name."""
    return sorted((p for p in Path(root).iterdir() if p.is_dir()), key=lambda p: p.name)


def _list_extras(bundle_dir: Path) -> dict[str, list[str]]:
    extras: dict[str, list[str]] = {}
    for sub in OPTIONAL_SUBDIRS:
        p = bundle_dir / sub
        if p.is_dir():
            extras[sub] = sorted(child.name for child in p.iterdir())
    return extras


def validate_bundle(bundle_dir: Path) -> BundleReport:
    """Validate a single bundle directory.

    Checks, in order: descriptor exists, header block present, `name` present,
    `description` present. Only the first failure is reported.
    """
    bundle_dir = Path(bundle_dir)
    name = bundle_dir.name
    descriptor = bundle_dir / DESCRIPTOR_FILENAME
    logger.debug("validating bundle %s", name)

    if not descriptor.is_file():
        issue = Issue(IssueKind.MISSING_DESCRIPTOR, f"missing {DESCRIPTOR_FILENAME}", bundle=name)
        return BundleReport(name=name, path=bundle_dir, issues=[issue])

    meta = read_metadata(descriptor)
    if meta is None:
        issue = Issue(IssueKind.MISSING_HEADER, "missing frontmatter header", bundle=name)
        return BundleReport(name=name, path=bundle_dir, issues=[issue])

    missing = meta.missing()
    if missing:
        f = missing[0]
        issue = Issue(
            IssueKind.MISSING_REQUIRED_FIELD,
            f"missing required field '{f}' in frontmatter",
            bundle=name,
            field=f,
        )
        return BundleReport(name=name, path=bundle_dir, issues=[issue])

    return BundleReport(name=name, path=bundle_dir, extras=_list_extras(bundle_dir))


def validate_skills(root: Path) -> ValidationReport:
    """Validate every bundle under `root`.

    The report is ok only if at least one bundle exists and all of them pass.
    """
    root = Path(root)
    if not root.is_dir():
        issue = Issue(IssueKind.NO_SKILLS_DIRECTORY, f"skills directory not found: {root}")
        return ValidationReport(root=root, root_issues=[issue])

    bundle_dirs = list_bundles(root)
    if not bundle_dirs:
        issue = Issue(IssueKind.NO_BUNDLES_FOUND, f"no skills found in {root}")
        return ValidationReport(root=root, root_issues=[issue])

    reports = [validate_bundle(p) for p in bundle_dirs]
    logger.info("validated %d bundle(s) under %s", len(reports), root)
    return ValidationReport(root=root, bundles=reports)
