"""Pytest configuration.

This repo follows the `src/` layout. We ensure `src/` is on `sys.path` during
tests so `import skillpack` works without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers for skill bundles
# =============================================================================


def skill_md(name: str | None = None, description: str | None = None, *, body: str = "# Skill\n") -> str:
    """Render a SKILL.md with a frontmatter header holding the given fields."""
    lines = ["---"]
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    lines.append("---")
    return "\n".join(lines) + "\n" + body


def make_bundle(root: Path, folder: str, descriptor: str | None, files: dict[str, str] | None = None) -> Path:
    """Create `root/folder` with an optional SKILL.md and extra files (relative path -> text)."""
    bundle = root / folder
    bundle.mkdir(parents=True, exist_ok=True)
    if descriptor is not None:
        (bundle / "SKILL.md").write_text(descriptor, encoding="utf-8")
    for rel, text in (files or {}).items():
        p = bundle / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    return bundle
