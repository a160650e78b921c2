"""skillpack package build (package-on-disk format).

- Copy every skill bundle under `skills/`
- Write `manifest.json` listing each bundle's name, description and path
"""

from __future__ import annotations

from .io import BuildResult, build_package
from .manifest import build_manifest, read_manifest, write_manifest

__all__ = [
    "BuildResult",
    "build_package",
    "build_manifest",
    "read_manifest",
    "write_manifest",
]
