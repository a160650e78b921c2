"""Package build (skills directory -> output folder).

A built package is a folder containing:
- skills/<bundle>/...   verbatim copy of every bundle tree
- manifest.json         package name, version and one entry per bundle

Build order is strict: validate, clean, copy, write manifest. Validation
failures abort before the output directory is touched. There is no rollback:
an OSError while copying or writing leaves the output partially populated and
propagates to the caller.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from skillpack.config import BuildConfig
from skillpack.core.frontmatter import DESCRIPTOR_FILENAME, read_metadata
from skillpack.core.validate import (
    BundleValidationError,
    Issue,
    IssueKind,
    list_bundles,
    validate_skills,
)

from .manifest import MANIFEST_FILENAME, SKILLS_SUBDIR, build_manifest, manifest_entry, write_manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    out_dir: Path
    manifest_path: Path
    manifest: dict[str, Any]


def _check_paths(skills_dir: Path, out_dir: Path) -> None:
    """Reject an output dir that overlaps the skills dir (it is removed on build)."""
    src = skills_dir.resolve()
    out = out_dir.resolve()
    if src.is_relative_to(out) or out.is_relative_to(src):
        raise ValueError(f"output directory {out_dir} must not overlap skills directory {skills_dir}")


def _clean_dir(path: Path) -> None:
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)


def _collect_entries(skills_dir: Path) -> list[dict[str, str]]:
    """Build manifest entries; a bundle without name/description is an error."""
    entries: list[dict[str, str]] = []
    issues: list[Issue] = []
    for bundle_dir in list_bundles(skills_dir):
        bundle = bundle_dir.name
        meta = read_metadata(bundle_dir / DESCRIPTOR_FILENAME)
        # No folder-name fallback.
        if meta is None:
            issues.append(Issue(IssueKind.MISSING_HEADER, "missing frontmatter header", bundle=bundle))
            continue
        missing = meta.missing()
        if missing:
            issues.append(
                Issue(
                    IssueKind.MISSING_REQUIRED_FIELD,
                    f"missing required field '{missing[0]}' in frontmatter",
                    bundle=bundle,
                    field=missing[0],
                )
            )
            continue
        entries.append(manifest_entry(name=meta.name, description=meta.description, bundle=bundle))
    if issues:
        raise BundleValidationError(issues)
    return entries


def build_package(config: BuildConfig) -> BuildResult:
    """Validate the skills directory and (re)build the output package.

    Raises:
        BundleValidationError: validation failed; the output dir is untouched.
        ValueError: the output dir overlaps the skills dir; nothing is touched.
        OSError: a filesystem step failed partway.
    """
    skills_dir = Path(config.skills_dir)
    out_dir = Path(config.out_dir)

    report = validate_skills(skills_dir)
    report.raise_for_issues()
    _check_paths(skills_dir, out_dir)

    logger.info("cleaning %s", out_dir)
    _clean_dir(out_dir)

    dest = out_dir / SKILLS_SUBDIR
    logger.info("copying %s -> %s", skills_dir, dest)
    shutil.copytree(skills_dir, dest)

    manifest = build_manifest(
        name=config.name,
        version=config.version,
        skills=_collect_entries(skills_dir),
    )
    manifest_path = out_dir / MANIFEST_FILENAME
    write_manifest(manifest_path, manifest)
    logger.info("wrote %s (%d skill(s))", manifest_path, len(manifest["skills"]))

    return BuildResult(out_dir=out_dir, manifest_path=manifest_path, manifest=manifest)
