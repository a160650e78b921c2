"""Package manifest utilities.

This module is intentionally small and dependency-light to avoid import cycles.
It provides:
- manifest entry/record builders
- manifest.json read/write
- the display truncation used by build summaries
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

MANIFEST_FILENAME = "manifest.json"
SKILLS_SUBDIR = "skills"


def manifest_entry(*, name: str, description: str, bundle: str) -> dict[str, str]:
    """Return one `skills[]` entry; `path` is relative to manifest.json."""
    return {
        "name": name,
        "description": description,
        "path": f"{SKILLS_SUBDIR}/{bundle}",
    }


def build_manifest(*, name: str, version: str, skills: list[dict[str, Any]]) -> dict[str, Any]:
    """Construct the manifest record.

    Key order is fixed: name, version, skills.
    """
    if not isinstance(name, str) or not name.strip():
        raise ValueError("manifest: name must be a non-empty string")
    if not isinstance(version, str) or not version.strip():
        raise ValueError("manifest: version must be a non-empty string")
    if not isinstance(skills, list):
        raise TypeError("manifest: skills must be a list")

    return {
        "name": name.strip(),
        "version": version.strip(),
        "skills": skills,
    }


def read_manifest(path: Path) -> dict[str, Any]:
    p = Path(path)
    obj = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(obj, dict):
        raise ValueError("manifest.json: expected JSON object")
    return obj


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    p.write_text(text, encoding="utf-8")


def summarize_description(text: str, width: int = 50) -> str:
    """Truncate a description for display; the manifest keeps the full text."""
    if len(text) <= width:
        return text
    return text[:width] + "..."
