"""Descriptor header extraction (`SKILL.md` frontmatter).

A descriptor starts with a header block:

    ---
    name: <string>
    description: <string>
    ---

Only `name` and `description` are recognized. Extraction never raises for
malformed text: a missing block yields None and a missing key is simply
absent from the result, so callers decide how severe that is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

DESCRIPTOR_FILENAME = "SKILL.md"
REQUIRED_FIELDS = ("name", "description")

_HEADER_RE = re.compile(r"\A---\n(.*?)\n---", re.DOTALL)
_FIELD_RES = {field: re.compile(rf"^{field}:[ \t]*(.+)$", re.MULTILINE) for field in REQUIRED_FIELDS}


@dataclass(frozen=True)
class SkillMetadata:
    name: str | None = None
    description: str | None = None

    def get(self, field: str) -> str | None:
        if field not in REQUIRED_FIELDS:
            raise KeyError(field)
        return getattr(self, field)

    def missing(self) -> list[str]:
        """Return required fields that were not recovered, in canonical order."""
        return [f for f in REQUIRED_FIELDS if not self.get(f)]

    def as_dict(self) -> dict[str, str]:
        return {f: v for f in REQUIRED_FIELDS if (v := self.get(f))}


def extract_header(text: str) -> str | None:
    """Return the header body at the very start of `text`, or None."""
    m = _HEADER_RE.match(text.replace("\r\n", "\n"))
    if m is None:
        return None
    return m.group(1)


def _find_field(header: str, field: str) -> str | None:
    # First match wins; an empty value after stripping counts as absent.
    m = _FIELD_RES[field].search(header)
    if m is None:
        return None
    value = m.group(1).strip()
    return value or None


def extract_metadata(text: str) -> SkillMetadata | None:
    """Extract `name` and `description` from descriptor text.

    Returns None when the header block is absent (no partial extraction).
    """
    header = extract_header(text)
    if header is None:
        return None
    return SkillMetadata(
        name=_find_field(header, "name"),
        description=_find_field(header, "description"),
    )


def read_metadata(path: Path) -> SkillMetadata | None:
    """Read a descriptor file and extract its metadata."""
    # Undecodable bytes are replaced; extraction never raises on bad input.
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return extract_metadata(text)
