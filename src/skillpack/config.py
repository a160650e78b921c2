"""Build configuration.

Paths and package identity are passed explicitly as a `BuildConfig` rather than
read from process state, so every step can run against temporary directories.
"""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SKILLS_DIR = "skills"
DEFAULT_OUT_DIR = "dist"
DEFAULT_PACKAGE_NAME = "agent-skills"
FALLBACK_VERSION = "0.0.0"


@dataclass(frozen=True)
class BuildConfig:
    skills_dir: Path
    out_dir: Path
    name: str = DEFAULT_PACKAGE_NAME
    version: str = FALLBACK_VERSION


def _version_from_package_json(path: Path) -> str | None:
    obj = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(obj, dict):
        raise ValueError(f"{path}: expected JSON object")
    v = obj.get("version")
    return v.strip() if isinstance(v, str) and v.strip() else None


def _version_from_pyproject(path: Path) -> str | None:
    with path.open("rb") as f:
        obj = tomllib.load(f)
    v = obj.get("project", {}).get("version")
    return v.strip() if isinstance(v, str) and v.strip() else None


def discover_version(project_root: Path) -> str:
    """Return the version declared by the project owning the skills.

    Looks at `package.json` then `pyproject.toml` under `project_root`; falls
    back to FALLBACK_VERSION when neither declares one.
    """
    root = Path(project_root)
    candidates = (
        ("package.json", _version_from_package_json),
        ("pyproject.toml", _version_from_pyproject),
    )
    for filename, reader in candidates:
        p = root / filename
        if not p.is_file():
            continue
        v = reader(p)
        if v:
            logger.debug("version %s read from %s", v, p)
            return v
    return FALLBACK_VERSION
